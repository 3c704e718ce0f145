"""Data models for transcript entries and analysis results."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass(frozen=True)
class TranscriptEntry:
    """A single speaker-attributed utterance."""
    id: int          # 0-based, assigned in parse order
    timestamp: str   # Raw "start --> end" cue line, empty for plain text
    speaker: str
    text: str


@dataclass
class ParsedTranscript:
    """Ordered entries produced by one parse call."""
    entries: List[TranscriptEntry]
    format: str  # "vtt" or "text"

    @property
    def speakers(self) -> List[str]:
        """Distinct speakers, exact match, sorted for presentation."""
        return sorted({entry.speaker for entry in self.entries})


@dataclass
class ProfanityReport:
    """Aggregate profanity counts for a transcript."""
    total_count: int = 0
    by_word: Dict[str, int] = field(default_factory=dict)
    by_speaker: Dict[str, Dict[str, int]] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            'total_count': self.total_count,
            'by_word': dict(self.by_word),
            'by_speaker': {
                speaker: dict(words)
                for speaker, words in self.by_speaker.items()
            },
        }


@dataclass(frozen=True)
class EntryAnalysis:
    """Question/action-item flags returned by the remote classifier for one entry."""
    id: int
    is_question: bool
    is_action_item: bool


@dataclass(frozen=True)
class AnalyzedEntry:
    """
    Transcript entry merged with its classification.

    A flag of None means the entry was not analyzed, which is not the same as False.
    """
    id: int
    timestamp: str
    speaker: str
    text: str
    is_question: Optional[bool] = None
    is_action_item: Optional[bool] = None

    @classmethod
    def from_entry(cls, entry: TranscriptEntry, analysis: Optional[EntryAnalysis] = None) -> "AnalyzedEntry":
        if analysis is None:
            return cls(entry.id, entry.timestamp, entry.speaker, entry.text)
        return cls(
            entry.id,
            entry.timestamp,
            entry.speaker,
            entry.text,
            is_question=analysis.is_question,
            is_action_item=analysis.is_action_item,
        )
