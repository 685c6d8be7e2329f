from __future__ import annotations

import logging
from typing import List

from .cancellation import CancellationToken
from .config import ParserConfig
from .models import SectionIndex
from .tree import TreeNode

logger = logging.getLogger(__name__)

ETYMOLOGY_LINK = '[href*="Etymology"]'


def build_section_index(tree: TreeNode, token: CancellationToken, config: ParserConfig) -> SectionIndex:
    """
    Walk the table of contents of the target language and group part-of-speech
    section anchors by etymology.

    Each "Etymology N" item opens a new group; part-of-speech items nested
    under it (or following it at the same level) are recorded in that group.
    Pages without etymology headings get a single implicit group.
    """
    index: SectionIndex = []
    for entry in tree.select(".toc .toclevel-1"):
        if token.cancelled:
            return index
        if not entry.children(f'[href="{config.language_anchor}"]'):
            continue
        _process_toc_level(entry.select(".toclevel-2"), index, token, config)
    logger.debug("Section index built with %d group(s)", len(index))
    return index


def _process_toc_level(
    items: List[TreeNode],
    index: SectionIndex,
    token: CancellationToken,
    config: ParserConfig,
) -> None:
    for item in items:
        if token.cancelled:
            return
        if item.children(ETYMOLOGY_LINK):
            index.append({})
            for sub_list in item.children("ul"):
                _process_toc_level(sub_list.children(), index, token, config)
            continue

        link = item.select_one("a")
        if link is None:
            continue
        label_node = link.select_one(".toctext")
        label = label_node.text() if label_node else ""
        if not config.is_speech_label(label):
            continue
        if not index:
            index.append({})
        # Same label twice in one group: the later anchor wins.
        index[-1][label] = _anchor_id(link.attr("href") or "")


def _anchor_id(href: str) -> str:
    return href[1:] if href.startswith("#") else href
