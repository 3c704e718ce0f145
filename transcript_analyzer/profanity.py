"""Word-level profanity counting over parsed transcript entries."""

from pathlib import Path
from typing import AbstractSet, FrozenSet, Iterable, List, Optional, Tuple, Union

from transcript_analyzer.models import ProfanityReport, TranscriptEntry
from transcript_analyzer.profanity_list import DEFAULT_PROFANITY
from transcript_analyzer.tokenizer import tokenize_words

DEFAULT_PROFANITY_SET: FrozenSet[str] = frozenset(DEFAULT_PROFANITY)


def load_profanity_words(path: Optional[Union[str, Path]] = None) -> FrozenSet[str]:
    """
    Load the profanity word set.

    Args:
        path: Optional word file, one word per line. Blank lines and lines
            starting with '#' are ignored. Without a path the built-in list is used.

    Returns:
        Frozen set of lowercase words
    """
    if not path:
        return DEFAULT_PROFANITY_SET

    words = set()
    with open(path, 'r', encoding='utf-8') as f:
        for line in f:
            word = line.strip()
            if not word or word.startswith('#'):
                continue
            words.add(word.lower())
    return frozenset(words)


def analyze_profanity(
    entries: Iterable[TranscriptEntry],
    words: Optional[AbstractSet[str]] = None
) -> ProfanityReport:
    """
    Count exact matches of profanity words, overall, per word and per speaker.

    Args:
        entries: Parsed transcript entries
        words: Lowercase word set; defaults to the built-in list

    Returns:
        A fresh ProfanityReport. Empty input gives a zero report.
    """
    if words is None:
        words = DEFAULT_PROFANITY_SET

    report = ProfanityReport()

    for entry in entries:
        for token in tokenize_words(entry.text):
            if token not in words:
                continue

            report.total_count += 1
            report.by_word[token] = report.by_word.get(token, 0) + 1

            speaker_counts = report.by_speaker.setdefault(entry.speaker, {})
            speaker_counts[token] = speaker_counts.get(token, 0) + 1

    return report


def top_offenders(report: ProfanityReport, limit: Optional[int] = None) -> List[Tuple[str, int]]:
    """Speakers ranked by total matches, highest first, ties broken by name."""
    totals = [
        (speaker, sum(counts.values()))
        for speaker, counts in report.by_speaker.items()
    ]
    totals.sort(key=lambda item: (-item[1], item[0]))
    if limit is not None:
        return totals[:limit]
    return totals
