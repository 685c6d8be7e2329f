"""
Parsing subsystem exports.
"""

from .cancellation import CancellationToken, RequestContext
from .config import LANGUAGE, SPEECH_LABELS, ParserConfig
from .engine import ParseResult, WiktionaryParsingEngine, parse
from .extractors import extract_dictionary_entry, extract_transcription, find_definitions_list
from .models import (
    DictionaryEntry,
    DictionaryLine,
    EtymologyBlock,
    ParsedDefinitions,
    RequestError,
    SectionIndex,
)
from .toc import build_section_index
from .tree import SoupTreeNode, TreeNode, build_tree

__all__ = [
    "CancellationToken",
    "DictionaryEntry",
    "DictionaryLine",
    "EtymologyBlock",
    "LANGUAGE",
    "ParseResult",
    "ParsedDefinitions",
    "ParserConfig",
    "RequestContext",
    "RequestError",
    "SPEECH_LABELS",
    "SectionIndex",
    "SoupTreeNode",
    "TreeNode",
    "WiktionaryParsingEngine",
    "build_section_index",
    "build_tree",
    "extract_dictionary_entry",
    "extract_transcription",
    "find_definitions_list",
    "parse",
]
