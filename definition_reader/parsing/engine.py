from __future__ import annotations

import logging
from typing import Optional, Union

from .cancellation import CancellationToken, RequestContext
from .config import ParserConfig
from .extractors import extract_dictionary_entry, extract_transcription
from .models import ParsedDefinitions, RequestError
from .toc import build_section_index
from .tree import TreeNode, build_tree

logger = logging.getLogger(__name__)

ParseResult = Union[ParsedDefinitions, RequestError]


class WiktionaryParsingEngine:
    """
    Extracts pronunciation and definitions from a single Wiktionary page.

    The engine is stateless and reusable; each call builds its own tree and
    result. Every stage checks the cancellation token before doing work and
    the call reports `RequestError.CANCELLED_REQUEST` instead of a partially
    built result once the token is set.
    """

    def __init__(self, config: Optional[ParserConfig] = None):
        self.config = config or ParserConfig()

    def parse(self, word: str, raw_markup: str, token: CancellationToken) -> ParseResult:
        if token.cancelled:
            return RequestError.CANCELLED_REQUEST
        tree = build_tree(raw_markup, self.config.html_parser)
        if token.cancelled:
            return self._cancelled(word)

        parsed = ParsedDefinitions(word=word, language=self.config.language)
        self._extract_transcription(tree, parsed)
        if token.cancelled:
            return self._cancelled(word)

        self._extract_definitions(tree, parsed, token)
        if token.cancelled:
            return self._cancelled(word)

        parsed.fill_short_view()
        if token.cancelled:
            return self._cancelled(word)
        logger.info(
            "Parsed %r: %d etymology block(s), extendable=%s",
            word,
            len(parsed.etymology_blocks),
            parsed.extendable,
        )
        return parsed

    def _extract_transcription(self, tree: TreeNode, parsed: ParsedDefinitions) -> None:
        transcription = extract_transcription(tree)
        if transcription is not None:
            parsed.add_transcription(transcription)

    def _extract_definitions(self, tree: TreeNode, parsed: ParsedDefinitions, token: CancellationToken) -> None:
        section_index = build_section_index(tree, token, self.config)
        if token.cancelled:
            return
        for group in section_index:
            if token.cancelled:
                return
            parsed.add_etymology()
            for speech, anchor in group.items():
                if token.cancelled:
                    return
                entry = extract_dictionary_entry(tree, speech, anchor, token)
                parsed.add_dictionary_entry(entry)

    def _cancelled(self, word: str) -> RequestError:
        logger.info("Parsing of %r cancelled by the request", word)
        return RequestError.CANCELLED_REQUEST


def parse(
    word: str,
    raw_markup: str,
    request_context: RequestContext,
    config: Optional[ParserConfig] = None,
) -> ParseResult:
    """
    Parse one page for `word`. Returns the populated result, or
    `RequestError.CANCELLED_REQUEST` when the request was aborted before or
    during extraction.
    """
    token = CancellationToken.from_request(request_context)
    if token.cancelled:
        return RequestError.CANCELLED_REQUEST
    return WiktionaryParsingEngine(config).parse(word, raw_markup, token)
