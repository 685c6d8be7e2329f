import pytest

from definition_reader.parsing import (
    LANGUAGE,
    CancellationToken,
    DictionaryEntry,
    ParsedDefinitions,
    ParserConfig,
)

from conftest import FakeRequest


def _entry(speech, *definitions):
    entry = DictionaryEntry(speech=speech)
    for definition in definitions:
        entry.add_line(definition, [])
    return entry


def test_new_result_has_empty_defaults():
    parsed = ParsedDefinitions(word="test")
    assert parsed.word == "test"
    assert parsed.language == LANGUAGE == "en"
    assert parsed.transcription == ""
    assert parsed.etymology_blocks == []
    assert parsed.short_view == []
    assert parsed.extendable is False


def test_add_dictionary_entry_requires_open_block():
    parsed = ParsedDefinitions(word="test")
    with pytest.raises(ValueError):
        parsed.add_dictionary_entry(_entry("noun", "A tool."))


def test_short_view_without_blocks_stays_empty():
    parsed = ParsedDefinitions(word="test")
    parsed.fill_short_view()
    assert parsed.short_view == []
    assert parsed.extendable is False

    parsed = ParsedDefinitions(word="test")
    parsed.add_etymology()
    parsed.fill_short_view()
    assert parsed.short_view == []
    assert parsed.extendable is False


def test_short_view_truncates_copy_and_keeps_full_blocks():
    parsed = ParsedDefinitions(word="test")
    parsed.add_etymology()
    parsed.add_dictionary_entry(_entry("noun", "A tool.", "Another sense."))
    parsed.fill_short_view()

    assert len(parsed.short_view) == 1
    assert len(parsed.short_view[0].entries) == 1
    summary = parsed.short_view[0].entries[0]
    assert summary.speech == "noun"
    assert [line.definition for line in summary.lines] == ["A tool."]
    assert len(parsed.etymology_blocks[0].entries[0].lines) == 2
    assert parsed.extendable is True


def test_single_line_is_not_extendable():
    parsed = ParsedDefinitions(word="test")
    parsed.add_etymology()
    parsed.add_dictionary_entry(_entry("noun", "A tool."))
    parsed.fill_short_view()
    assert parsed.extendable is False


def test_extendable_with_several_entries_or_blocks():
    parsed = ParsedDefinitions(word="test")
    parsed.add_etymology()
    parsed.add_dictionary_entry(_entry("noun", "A tool."))
    parsed.add_dictionary_entry(_entry("verb", "To test."))
    parsed.fill_short_view()
    assert parsed.extendable is True

    parsed = ParsedDefinitions(word="test")
    parsed.add_etymology()
    parsed.add_dictionary_entry(_entry("noun", "A tool."))
    parsed.add_etymology()
    parsed.add_dictionary_entry(_entry("verb", "To test."))
    parsed.fill_short_view()
    assert parsed.extendable is True


def test_fill_short_view_runs_once():
    parsed = ParsedDefinitions(word="test")
    parsed.add_etymology()
    parsed.add_dictionary_entry(_entry("noun", "A tool.", "Another sense."))
    parsed.fill_short_view()
    first = (list(parsed.short_view), parsed.extendable)

    parsed.add_etymology()
    parsed.add_dictionary_entry(_entry("verb", "To test."))
    parsed.fill_short_view()
    assert (parsed.short_view, parsed.extendable) == first


def test_entry_with_zero_lines_gives_empty_summary_entry():
    parsed = ParsedDefinitions(word="test")
    parsed.add_etymology()
    parsed.add_dictionary_entry(DictionaryEntry(speech="noun"))
    parsed.fill_short_view()
    assert parsed.short_view[0].entries[0].lines == []
    assert parsed.extendable is False


def test_token_from_aborted_request_is_cancelled():
    token = CancellationToken.from_request(FakeRequest(aborted=True))
    assert token.cancelled


def test_token_flips_on_request_close():
    request = FakeRequest()
    token = CancellationToken.from_request(request)
    assert not token.cancelled
    request.close()
    assert token.cancelled
    request.close()
    assert token.cancelled


def test_config_matches_speech_labels_case_insensitively(monkeypatch):
    config = ParserConfig()
    assert config.is_speech_label("Noun")
    assert config.is_speech_label("ADJECTIVE")
    assert not config.is_speech_label("Proper noun")
    assert not config.is_speech_label("Pronunciation")

    monkeypatch.setenv("DEFINITIONS_HTML_PARSER", "lxml")
    assert ParserConfig.from_env().html_parser == "lxml"


def test_transcription_is_set_once():
    parsed = ParsedDefinitions(word="test")
    parsed.add_transcription("")
    with pytest.raises(ValueError):
        parsed.add_transcription("/test/")
    assert parsed.transcription == ""


def test_word_is_fixed_at_construction():
    parsed = ParsedDefinitions(word="test")
    with pytest.raises(AttributeError):
        parsed.word = "other"
    assert parsed.word == "test"
