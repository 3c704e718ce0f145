import pytest

from transcript_analyzer.models import TranscriptEntry
from transcript_analyzer.parser import (
    FORMAT_TEXT,
    FORMAT_VTT,
    EmptyTranscriptError,
    detect_format,
    extract_speaker_text,
    parse_plain_text,
    parse_transcript,
    parse_vtt,
)

VTT_SAMPLE = """WEBVTT
Kind: captions

1
00:00:01.000 --> 00:00:02.000
Alice: Hello there

2
00:00:03.000 --> 00:00:05.000 align:start
Bob | Engineer: Let's ship it
before Friday

3
00:00:06.000 --> 00:00:07.000
no speaker in this cue

NOTE this is a comment block

00:00:08.000 --> 00:00:09.000
Alice: Any questions?
"""


def test_detect_format():
    assert detect_format("WEBVTT\n\n") == FORMAT_VTT
    assert detect_format("  \n WEBVTT - captions") == FORMAT_VTT
    assert detect_format("Alice: WEBVTT") == FORMAT_TEXT
    assert detect_format("webvtt") == FORMAT_TEXT


def test_extract_speaker_text():
    assert extract_speaker_text("Alice: Hello") == ("Alice", "Hello")
    assert extract_speaker_text("Alice: He said: go now") == ("Alice", "He said: go now")
    assert extract_speaker_text("Jane Doe | Host: Hello") == ("Jane Doe", "Hello")
    assert extract_speaker_text("A | B | C: text") == ("A", "text")


@pytest.mark.parametrize("payload", ["no colon here", ": text only", "Alice:", "Alice:   ", "| Host: hi"])
def test_extract_speaker_text_rejects(payload):
    assert extract_speaker_text(payload) is None


def test_single_vtt_cue():
    parsed = parse_transcript("WEBVTT\n\n00:00:01.000 --> 00:00:02.000\nAlice: Hello there")
    assert parsed.format == FORMAT_VTT
    assert parsed.entries == [
        TranscriptEntry(id=0, timestamp="00:00:01.000 --> 00:00:02.000", speaker="Alice", text="Hello there")
    ]


def test_vtt_skips_malformed_blocks_without_consuming_ids():
    entries = parse_vtt(VTT_SAMPLE)

    assert [entry.id for entry in entries] == [0, 1, 2]
    assert entries[1].speaker == "Bob"
    assert entries[1].text == "Let's ship it before Friday"
    assert entries[1].timestamp == "00:00:03.000 --> 00:00:05.000 align:start"
    assert entries[2].text == "Any questions?"


def test_vtt_cue_identifier_is_not_payload():
    content = "WEBVTT\n\nCarol: cue-id\n00:00:01.000 --> 00:00:02.000\nDave: Hi"
    entries = parse_vtt(content)
    assert len(entries) == 1
    assert entries[0].speaker == "Dave"


def test_vtt_timing_line_without_payload_is_skipped():
    content = "WEBVTT\n\ncue-1\n00:00:01.000 --> 00:00:02.000\n\n00:00:03.000 --> 00:00:04.000\nEve: ok"
    entries = parse_vtt(content)
    assert [(e.id, e.speaker) for e in entries] == [(0, "Eve")]


def test_crlf_line_endings():
    parsed = parse_transcript("WEBVTT\r\n\r\n00:00:01.000 --> 00:00:02.000\r\nAlice: Hello\r\n")
    assert parsed.entries[0].text == "Hello"


def test_plain_text_role_and_colon():
    parsed = parse_transcript("Bob | Engineer: Let's ship it\nAlice: He said: go now\n")
    assert parsed.format == FORMAT_TEXT
    assert parsed.entries[0].speaker == "Bob"
    assert parsed.entries[0].text == "Let's ship it"
    assert parsed.entries[1].text == "He said: go now"
    assert all(entry.timestamp == "" for entry in parsed.entries)


def test_plain_text_unknown_fallback():
    entries = parse_plain_text("just a note")
    assert entries == [TranscriptEntry(id=0, timestamp="", speaker="Unknown", text="just a note")]


def test_plain_text_empty_speaker_or_text_falls_back():
    entries = parse_plain_text("Agenda:\n: orphan text")
    assert [(e.speaker, e.text) for e in entries] == [("Unknown", "Agenda:"), ("Unknown", ": orphan text")]


def test_plain_text_blank_lines_do_not_consume_ids():
    entries = parse_plain_text("\n  \nAlice: one\n\n\t\nBob: two\n")
    assert [(e.id, e.speaker) for e in entries] == [(0, "Alice"), (1, "Bob")]


def test_speakers_sorted_and_distinct():
    parsed = parse_transcript("bob: hi\nAlice: hey\nnote\nAlice: again\nalice: lower")
    assert parsed.speakers == ["Alice", "Unknown", "alice", "bob"]


def test_ids_dense():
    parsed = parse_transcript(VTT_SAMPLE)
    assert [entry.id for entry in parsed.entries] == list(range(len(parsed.entries)))


@pytest.mark.parametrize("content", ["", "   \n\n \t\n", "WEBVTT", "WEBVTT\n\n", "WEBVTT\n\n1\n00:00:01.000 --> 00:00:02.000\nno speaker"])
def test_empty_result(content):
    with pytest.raises(EmptyTranscriptError):
        parse_transcript(content)


def test_parse_is_repeatable():
    assert parse_transcript(VTT_SAMPLE) == parse_transcript(VTT_SAMPLE)
