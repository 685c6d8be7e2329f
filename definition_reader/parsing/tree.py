from __future__ import annotations

from typing import List, Optional

from bs4 import BeautifulSoup, Tag


class TreeNode:
    """
    Abstract queryable document node. The extraction pipeline only relies on
    this interface, so any DOM-like backend can be plugged in.
    """

    def select(self, selector: str) -> List["TreeNode"]:
        raise NotImplementedError

    def select_one(self, selector: str) -> Optional["TreeNode"]:
        found = self.select(selector)
        return found[0] if found else None

    def children(self, selector: Optional[str] = None) -> List["TreeNode"]:
        """
        Direct element children, optionally restricted to those matching a CSS selector.
        """
        raise NotImplementedError

    def parent(self) -> Optional["TreeNode"]:
        raise NotImplementedError

    def next_sibling(self, name: Optional[str] = None) -> Optional["TreeNode"]:
        """
        Next element sibling, or the first following sibling with the given tag name.
        """
        raise NotImplementedError

    def find_by_id(self, element_id: str) -> Optional["TreeNode"]:
        raise NotImplementedError

    def attr(self, name: str) -> Optional[str]:
        raise NotImplementedError

    def text(self) -> str:
        raise NotImplementedError


class SoupTreeNode(TreeNode):
    """
    BeautifulSoup-backed node. Wraps a `Tag` (the `BeautifulSoup` document
    itself for the root).
    """

    def __init__(self, tag: Tag):
        self._tag = tag

    def select(self, selector: str) -> List[TreeNode]:
        return [SoupTreeNode(tag) for tag in self._tag.select(selector)]

    def children(self, selector: Optional[str] = None) -> List[TreeNode]:
        if selector:
            return self.select(f":scope > {selector}")
        return [SoupTreeNode(child) for child in self._tag.children if isinstance(child, Tag)]

    def parent(self) -> Optional[TreeNode]:
        parent = self._tag.parent
        return SoupTreeNode(parent) if parent is not None else None

    def next_sibling(self, name: Optional[str] = None) -> Optional[TreeNode]:
        for sibling in self._tag.next_siblings:
            if not isinstance(sibling, Tag):
                continue
            if name is None or sibling.name == name:
                return SoupTreeNode(sibling)
        return None

    def find_by_id(self, element_id: str) -> Optional[TreeNode]:
        found = self._tag.find(id=element_id)
        return SoupTreeNode(found) if isinstance(found, Tag) else None

    def attr(self, name: str) -> Optional[str]:
        value = self._tag.get(name)
        if isinstance(value, list):
            return " ".join(value)
        return value

    def text(self) -> str:
        return self._tag.get_text()


def build_tree(raw_markup: str, features: str = "html.parser") -> TreeNode:
    return SoupTreeNode(BeautifulSoup(raw_markup, features))
