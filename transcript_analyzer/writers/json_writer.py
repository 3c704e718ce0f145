"""Writer for JSON format."""

import json
from pathlib import Path
from typing import Optional, Sequence
from transcript_analyzer.models import AnalyzedEntry, ParsedTranscript, ProfanityReport


def write_json(
    parsed: ParsedTranscript,
    output_path: Path,
    report: Optional[ProfanityReport] = None,
    analyzed: Optional[Sequence[AnalyzedEntry]] = None
) -> None:
    """
    Write parsed transcript to JSON file.

    When analyzed entries are given they replace the plain entries, so the
    question/action-item flags are included (null for unanalyzed entries).
    """
    if analyzed is not None:
        entries = [
            {
                'id': entry.id,
                'timestamp': entry.timestamp,
                'speaker': entry.speaker,
                'text': entry.text,
                'is_question': entry.is_question,
                'is_action_item': entry.is_action_item
            }
            for entry in analyzed
        ]
    else:
        entries = [
            {
                'id': entry.id,
                'timestamp': entry.timestamp,
                'speaker': entry.speaker,
                'text': entry.text
            }
            for entry in parsed.entries
        ]

    data = {
        'format': parsed.format,
        'speakers': parsed.speakers,
        'entries': entries
    }
    if report is not None:
        data['profanity'] = report.to_dict()

    with open(output_path, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
