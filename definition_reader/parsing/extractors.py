from __future__ import annotations

import logging
from typing import Optional

from .cancellation import CancellationToken
from .models import DictionaryEntry
from .tree import TreeNode

logger = logging.getLogger(__name__)

PRONUNCIATION_HEADING_ID = "Pronunciation"
IPA_MARKER = ".IPA"


def extract_transcription(tree: TreeNode) -> Optional[str]:
    """
    Return the first IPA transcription in the block following the
    pronunciation heading, or None when the page has no such heading.
    """
    heading = tree.find_by_id(PRONUNCIATION_HEADING_ID)
    if heading is None:
        logger.debug("No pronunciation heading found")
        return None
    heading_parent = heading.parent()
    block = heading_parent.next_sibling() if heading_parent else None
    marker = block.select_one(IPA_MARKER) if block else None
    return marker.text() if marker else ""


def extract_dictionary_entry(
    tree: TreeNode,
    speech: str,
    anchor: str,
    token: CancellationToken,
) -> DictionaryEntry:
    entry = DictionaryEntry(speech=speech)
    definitions_list = find_definitions_list(tree, anchor)
    if definitions_list is None:
        logger.debug("No definitions list after anchor %r", anchor)
        return entry

    for item in definitions_list.children():
        if token.cancelled:
            return entry
        segments = item.text().split("\n")
        definition = segments[0]
        if not definition:
            continue
        entry.add_line(definition, segments[1:2])
    return entry


def find_definitions_list(tree: TreeNode, anchor: str) -> Optional[TreeNode]:
    """
    The first <ol> following the anchored heading's parent among its siblings.
    """
    heading = tree.find_by_id(anchor)
    if heading is None:
        return None
    heading_parent = heading.parent()
    if heading_parent is None:
        return None
    return heading_parent.next_sibling("ol")
