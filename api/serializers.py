from __future__ import annotations

from typing import Any, Dict, List

from definition_reader.parsing import DictionaryEntry, EtymologyBlock, ParsedDefinitions


def definitions_payload(parsed: ParsedDefinitions) -> Dict[str, Any]:
    return {
        "word": parsed.word,
        "language": parsed.language,
        "transcription": parsed.transcription,
        "extendable": parsed.extendable,
        "etymologyBlocks": _blocks_payload(parsed.etymology_blocks),
        "shortView": _blocks_payload(parsed.short_view),
    }


def _blocks_payload(blocks: List[EtymologyBlock]) -> List[List[Dict[str, Any]]]:
    return [[_entry_payload(entry) for entry in block.entries] for block in blocks]


def _entry_payload(entry: DictionaryEntry) -> Dict[str, Any]:
    return {
        "speech": entry.speech,
        "lines": [{"define": line.definition, "examples": list(line.examples)} for line in entry.lines],
    }
