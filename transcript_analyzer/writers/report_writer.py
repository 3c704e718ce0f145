"""Writer for the profanity report."""

from pathlib import Path
from typing import List
from transcript_analyzer.models import ProfanityReport
from transcript_analyzer.profanity import top_offenders


def format_profanity_report(report: ProfanityReport) -> str:
    """Render the report as plain text, words and speakers by descending count."""
    lines: List[str] = ["PROFANITY REPORT", "=" * 60, f"Total matches: {report.total_count}"]

    if report.total_count == 0:
        lines.append("No profanity found.")
        return "\n".join(lines) + "\n"

    lines.append("")
    lines.append("By word:")
    for word, count in sorted(report.by_word.items(), key=lambda item: (-item[1], item[0])):
        lines.append(f"  {word}: {count}")

    lines.append("")
    lines.append("By speaker:")
    for speaker, total in top_offenders(report):
        words = report.by_speaker[speaker]
        detail = ", ".join(
            f"{word} ({count})"
            for word, count in sorted(words.items(), key=lambda item: (-item[1], item[0]))
        )
        lines.append(f"  {speaker}: {total} - {detail}")

    return "\n".join(lines) + "\n"


def write_profanity_report(report: ProfanityReport, output_path: Path) -> None:
    """
    Write profanity report to a text file.

    Args:
        report: Report from analyze_profanity
        output_path: Path where the report will be saved
    """
    with open(output_path, 'w', encoding='utf-8') as f:
        f.write(format_profanity_report(report))
