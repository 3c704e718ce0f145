"""Transcript parsing for WebVTT captions and plain-text speaker logs."""

from typing import List, Optional, Tuple

from transcript_analyzer.models import ParsedTranscript, TranscriptEntry
from transcript_analyzer.tokenizer import normalize_line_endings

VTT_MARKER = "WEBVTT"
FORMAT_VTT = "vtt"
FORMAT_TEXT = "text"
UNKNOWN_SPEAKER = "Unknown"


class EmptyTranscriptError(ValueError):
    """Raised when a transcript yields no entries at all."""


def detect_format(content: str) -> str:
    """Return FORMAT_VTT if the content starts with the WEBVTT marker, else FORMAT_TEXT."""
    if content.strip().startswith(VTT_MARKER):
        return FORMAT_VTT
    return FORMAT_TEXT


def extract_speaker_text(payload: str) -> Optional[Tuple[str, str]]:
    """
    Split a "Speaker: text" payload into its speaker and text.

    Only the first colon separates the speaker; later colons belong to the
    spoken text. A trailing role annotation ("Jane Doe | Host") is dropped
    from the speaker.

    Args:
        payload: Trimmed line or cue payload

    Returns:
        (speaker, text), or None if either part would be empty
    """
    parts = payload.split(':')
    if len(parts) < 2:
        return None

    speaker = parts[0].strip()
    text = ':'.join(parts[1:]).strip()

    if '|' in speaker:
        speaker = speaker.split('|')[0].strip()

    if not speaker or not text:
        return None
    return speaker, text


def parse_vtt(content: str) -> List[TranscriptEntry]:
    """
    Parse WebVTT cue blocks into entries.

    The first block (the WEBVTT header and any metadata) is never a cue.
    Blocks without a timing line, without payload lines, or whose payload
    has no speaker are skipped and do not consume an id.
    """
    entries: List[TranscriptEntry] = []

    for block in content.split('\n\n')[1:]:
        lines = block.strip().split('\n')
        if len(lines) < 2:
            continue

        timing_index = next((i for i, line in enumerate(lines) if '-->' in line), None)
        if timing_index is None or timing_index + 1 >= len(lines):
            continue

        timestamp = lines[timing_index].strip()
        payload = ' '.join(lines[timing_index + 1:]).strip()

        extracted = extract_speaker_text(payload)
        if extracted is None:
            continue

        speaker, text = extracted
        entries.append(TranscriptEntry(len(entries), timestamp, speaker, text))

    return entries


def parse_plain_text(content: str) -> List[TranscriptEntry]:
    """
    Parse one "Speaker: text" utterance per line.

    Blank lines are skipped. Lines without a usable speaker are kept and
    attributed to UNKNOWN_SPEAKER with the whole line as text.
    """
    entries: List[TranscriptEntry] = []

    for line in content.split('\n'):
        trimmed = line.strip()
        if not trimmed:
            continue

        extracted = extract_speaker_text(trimmed)
        if extracted is None:
            speaker, text = UNKNOWN_SPEAKER, trimmed
        else:
            speaker, text = extracted
        entries.append(TranscriptEntry(len(entries), '', speaker, text))

    return entries


def parse_transcript(file_content: str) -> ParsedTranscript:
    """
    Parse raw transcript text into ordered, speaker-attributed entries.

    Args:
        file_content: Decoded file content (WebVTT or plain text)

    Returns:
        ParsedTranscript with dense 0-based entry ids

    Raises:
        EmptyTranscriptError: If no entries could be parsed
    """
    content = normalize_line_endings(file_content)
    transcript_format = detect_format(content)

    if transcript_format == FORMAT_VTT:
        entries = parse_vtt(content)
    else:
        entries = parse_plain_text(content)

    if not entries:
        raise EmptyTranscriptError(
            "Could not parse any entries from the file. Please check the format."
        )

    return ParsedTranscript(entries=entries, format=transcript_format)
