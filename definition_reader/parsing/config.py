from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Tuple

LANGUAGE = "en"
LANGUAGE_ANCHOR = "#English"

# Part-of-speech labels recognised in the table of contents (compared lowercase).
SPEECH_LABELS: Tuple[str, ...] = (
    "noun",
    "pronoun",
    "adjectives",
    "adjective",
    "numerals",
    "verb",
    "adverb",
    "article",
    "preposition",
    "conjunction",
    "interjection",
    "abbreviation",
)


@dataclass
class ParserConfig:
    language: str = LANGUAGE
    language_anchor: str = LANGUAGE_ANCHOR
    speech_labels: Tuple[str, ...] = field(default=SPEECH_LABELS)
    html_parser: str = "html.parser"

    @classmethod
    def from_env(cls) -> "ParserConfig":
        """
        Build a config from environment variables, falling back to defaults.
        """
        return cls(html_parser=os.getenv("DEFINITIONS_HTML_PARSER", "html.parser"))

    def is_speech_label(self, text: str) -> bool:
        return text.lower() in self.speech_labels
