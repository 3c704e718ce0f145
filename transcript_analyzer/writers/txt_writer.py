"""Writer for TXT format with speakers."""

from pathlib import Path
from typing import Iterable, Union
from transcript_analyzer.models import AnalyzedEntry, TranscriptEntry


def format_entry(entry: Union[TranscriptEntry, AnalyzedEntry]) -> str:
    """Format an entry as "[timestamp] Speaker: text", without brackets when untimed."""
    if entry.timestamp:
        return f"[{entry.timestamp}] {entry.speaker}: {entry.text}"
    return f"{entry.speaker}: {entry.text}"


def write_txt(entries: Iterable[TranscriptEntry], output_path: Path) -> None:
    """Write one line per entry to a TXT file."""
    with open(output_path, 'w', encoding='utf-8') as f:
        for entry in entries:
            f.write(f"{format_entry(entry)}\n")
