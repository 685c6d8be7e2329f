from __future__ import annotations

from copy import deepcopy
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List

from .config import LANGUAGE


class RequestError(str, Enum):
    CANCELLED_REQUEST = "cancelled_request"


# Ordered groups of part-of-speech label -> section anchor id.
SectionIndex = List[Dict[str, str]]


@dataclass
class DictionaryLine:
    definition: str
    examples: List[str] = field(default_factory=list)


@dataclass
class DictionaryEntry:
    speech: str
    lines: List[DictionaryLine] = field(default_factory=list)

    def add_line(self, definition: str, examples: List[str]) -> None:
        self.lines.append(DictionaryLine(definition=definition, examples=list(examples)))


@dataclass
class EtymologyBlock:
    entries: List[DictionaryEntry] = field(default_factory=list)


@dataclass
class ParsedDefinitions:
    """
    Structured result for one headword. Populated in order by the pipeline
    (transcription, then blocks and entries, then the short view) and read-only
    once returned to the caller.
    """

    word: str
    language: str = LANGUAGE
    transcription: str = ""
    etymology_blocks: List[EtymologyBlock] = field(default_factory=list)
    short_view: List[EtymologyBlock] = field(default_factory=list)
    extendable: bool = False
    _short_view_filled: bool = field(default=False, init=False, repr=False, compare=False)
    _transcription_set: bool = field(default=False, init=False, repr=False, compare=False)

    def __setattr__(self, name, value):
        if name == "word" and "word" in self.__dict__:
            raise AttributeError("word is fixed at construction")
        super().__setattr__(name, value)

    def add_transcription(self, transcription: str) -> None:
        if self._transcription_set:
            raise ValueError(f"Transcription already set for {self.word!r}")
        self._transcription_set = True
        self.transcription = transcription

    def add_etymology(self) -> None:
        self.etymology_blocks.append(EtymologyBlock())

    def add_dictionary_entry(self, entry: DictionaryEntry) -> None:
        if not self.etymology_blocks:
            raise ValueError(f"No etymology block open for entry {entry.speech!r}")
        self.etymology_blocks[-1].entries.append(entry)

    def fill_short_view(self) -> None:
        """
        Derive the one-line summary and the extendable flag. Runs once; later
        calls keep the first result.
        """
        if self._short_view_filled:
            return
        self._short_view_filled = True
        if not self.etymology_blocks or not self.etymology_blocks[0].entries:
            return

        first_entry = self.etymology_blocks[0].entries[0]
        summary = deepcopy(first_entry)
        summary.lines = summary.lines[:1]
        self.short_view = [EtymologyBlock(entries=[summary])]
        self.extendable = self._is_extendable()

    def _is_extendable(self) -> bool:
        first_block = self.etymology_blocks[0]
        return (
            len(self.etymology_blocks) > 1
            or len(first_block.entries) > 1
            or len(first_block.entries[0].lines) > 1
        )
