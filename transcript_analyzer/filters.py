"""Entry filtering by speaker, classification flags and search text."""

from typing import Iterable, List, Optional, Sequence, TypeVar

from transcript_analyzer.models import AnalyzedEntry, TranscriptEntry

EntryT = TypeVar("EntryT", TranscriptEntry, AnalyzedEntry)


def filter_entries(
    entries: Iterable[EntryT],
    speakers: Optional[Sequence[str]] = None,
    only_questions: bool = False,
    only_action_items: bool = False,
    search_term: str = ""
) -> List[EntryT]:
    """
    Keep the entries that pass every active filter.

    Args:
        entries: Plain or analyzed entries; plain entries have no flags set
        speakers: Speakers to keep; None or empty keeps everyone
        only_questions: Keep only entries flagged as questions
        only_action_items: Keep only entries flagged as action items
        search_term: Case-insensitive substring of the text; blank matches all

    Returns:
        Matching entries in their original order
    """
    selected = set(speakers) if speakers else None
    needle = search_term.lower() if search_term.strip() else None

    kept = []
    for entry in entries:
        if selected is not None and entry.speaker not in selected:
            continue
        if only_questions and not getattr(entry, 'is_question', None):
            continue
        if only_action_items and not getattr(entry, 'is_action_item', None):
            continue
        if needle is not None and needle not in entry.text.lower():
            continue
        kept.append(entry)
    return kept
