"""
Query interface the extractor uses to read a hotel page.

The extractor only needs a handful of capabilities: find elements by
selector, step up to a parent, click, and read text or attributes. Those are
described by the ``Document`` and ``Node`` protocols so the same extraction
code runs against a live Playwright page (see ``browser.py``) or a saved HTML
snapshot parsed with BeautifulSoup (``SoupDocument`` below).
"""

import asyncio
import logging
from typing import Optional, Protocol, Union

from bs4 import BeautifulSoup, Tag

from .exceptions import ElementNotFoundError, SectionTimeoutError

logger = logging.getLogger(__name__)


class Node(Protocol):
    async def query_all(self, selector: str) -> list["Node"]: ...

    async def parent(self) -> Optional["Node"]: ...

    async def click(self) -> None: ...

    async def inner_text(self) -> str: ...

    async def get_attribute(self, name: str) -> Optional[str]: ...


class Document(Protocol):
    @property
    def url(self) -> str: ...

    async def query_all(self, selector: str) -> list[Node]: ...

    async def wait_for_selector(self, selector: str, timeout_ms: int) -> Node: ...

    async def wait_for_timeout(self, timeout_ms: int) -> None: ...

    async def wait_for_idle(self, timeout_ms: int) -> bool: ...


Root = Union[Document, Node]


async def query_first(root: Root, selector: str) -> Optional[Node]:
    """Return the first element matching selector, or None."""
    nodes = await root.query_all(selector)
    return nodes[0] if nodes else None


async def query_last(root: Root, selector: str) -> Optional[Node]:
    """Return the last element matching selector, or None."""
    nodes = await root.query_all(selector)
    return nodes[-1] if nodes else None


async def require_last(root: Root, selector: str) -> Node:
    """Like query_last, but a missing element is an error."""
    node = await query_last(root, selector)
    if node is None:
        raise ElementNotFoundError(selector)
    return node


async def wait_for_last(document: Document, selector: str, timeout_ms: int) -> Node:
    """
    Wait until selector renders, then return its last match.

    Raises:
        ElementNotFoundError: Nothing matched within timeout_ms
    """
    try:
        await document.wait_for_selector(selector, timeout_ms)
    except SectionTimeoutError as e:
        raise ElementNotFoundError(selector) from e
    return await require_last(document, selector)


async def ancestor(node: Node, levels: int) -> Optional[Node]:
    """Walk ``levels`` parents up from node; None if the tree ends first."""
    current: Optional[Node] = node
    for _ in range(levels):
        if current is None:
            return None
        current = await current.parent()
    return current


async def first_attribute(root: Root, selector: str, name: str) -> Optional[str]:
    """
    Read an attribute from the first element matching selector.

    Returns:
        The attribute value, or None when the element or attribute is
        missing or the value is empty
    """
    node = await query_first(root, selector)
    if node is None:
        return None
    return await node.get_attribute(name) or None


async def first_text(root: Root, selector: str) -> Optional[str]:
    """Read the visible text of the first element matching selector."""
    node = await query_first(root, selector)
    if node is None:
        return None
    return await node.inner_text() or None


class SoupNode:
    """A ``Node`` backed by a BeautifulSoup tag."""

    def __init__(self, tag: Tag):
        self.tag = tag

    async def query_all(self, selector: str) -> list["SoupNode"]:
        return [SoupNode(tag) for tag in self.tag.select(selector)]

    async def parent(self) -> Optional["SoupNode"]:
        parent = self.tag.parent
        if parent is None or isinstance(parent, BeautifulSoup):
            return None
        return SoupNode(parent)

    async def click(self) -> None:
        # A snapshot already holds every tab's markup
        return None

    async def inner_text(self) -> str:
        return self.tag.get_text(" ", strip=True)

    async def get_attribute(self, name: str) -> Optional[str]:
        value = self.tag.get(name)
        if isinstance(value, list):
            # bs4 splits multi-valued attributes such as class
            return " ".join(value)
        return value


class SoupDocument:
    """
    A ``Document`` over a saved HTML snapshot of a hotel page.

    Waits resolve immediately: an element is either in the snapshot or it
    never will be.
    """

    def __init__(self, html: str, url: str, parser: str = "html.parser"):
        self._soup = BeautifulSoup(html, parser)
        self._url = url

    @classmethod
    def from_file(cls, filepath: str, url: str) -> "SoupDocument":
        """Load a snapshot saved with ``page.content()``."""
        with open(filepath, "r", encoding="utf-8") as f:
            return cls(f.read(), url)

    @property
    def url(self) -> str:
        return self._url

    async def query_all(self, selector: str) -> list[SoupNode]:
        return [SoupNode(tag) for tag in self._soup.select(selector)]

    async def wait_for_selector(self, selector: str, timeout_ms: int) -> SoupNode:
        tag = self._soup.select_one(selector)
        if tag is None:
            raise SectionTimeoutError(selector, timeout_ms)
        return SoupNode(tag)

    async def wait_for_timeout(self, timeout_ms: int) -> None:
        logger.debug(f"Snapshot document, skipping {timeout_ms}ms wait")
        await asyncio.sleep(0)

    async def wait_for_idle(self, timeout_ms: int) -> bool:
        return True
