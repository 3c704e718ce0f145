"""Interactive main entry point for transcript analysis."""

import sys
from pathlib import Path
from typing import AbstractSet, List, Optional, Tuple
from transcript_analyzer.config import Config
from transcript_analyzer.parser import EmptyTranscriptError, parse_transcript
from transcript_analyzer.profanity import analyze_profanity, load_profanity_words
from transcript_analyzer.analyzer import classify_entries, merge_analysis
from transcript_analyzer.filters import filter_entries
from transcript_analyzer.models import AnalyzedEntry, ParsedTranscript, ProfanityReport
from transcript_analyzer.writers.txt_writer import format_entry, write_txt
from transcript_analyzer.writers.json_writer import write_json
from transcript_analyzer.writers.report_writer import format_profanity_report, write_profanity_report


def read_transcript_file(path: Path) -> str:
    """Read a transcript file as UTF-8, dropping a leading BOM if present."""
    with open(path, 'r', encoding='utf-8-sig') as f:
        return f.read()


def process_transcript(
    path: Path,
    analyze: bool = False,
    words: Optional[AbstractSet[str]] = None,
    out_dir: Optional[Path] = None
) -> Tuple[Path, ParsedTranscript, ProfanityReport, Optional[List[AnalyzedEntry]]]:
    """
    Process a single transcript file: parse, scan, classify and write outputs.

    Args:
        path: Path to a .vtt or .txt transcript
        analyze: If True, classify entries with GPT
        words: Profanity word set, defaults to the configured list
        out_dir: Base output directory, defaults to Config.OUT_DIR

    Returns:
        Tuple of (output_dir, parsed, report, analyzed). analyzed is None when
        analysis was not requested or failed.

    Raises:
        EmptyTranscriptError: If the file contains no parseable entries
    """
    parsed = parse_transcript(read_transcript_file(path))
    print(f"✓ Parsed {len(parsed.entries)} entries from {len(parsed.speakers)} speakers ({parsed.format})")

    if words is None:
        words = load_profanity_words(Config.PROFANITY_LIST or None)
    report = analyze_profanity(parsed.entries, words)

    output_dir = (out_dir or Config.OUT_DIR) / path.stem
    output_dir.mkdir(parents=True, exist_ok=True)

    analyzed = None
    if analyze:
        print("Classifying questions and action items with GPT...")
        try:
            results = classify_entries(parsed.entries)
            analyzed = merge_analysis(parsed.entries, results)
            print(f"✓ Classified {len(results)} of {len(parsed.entries)} entries")
        except (RuntimeError, ValueError) as e:
            print(f"⚠ AI analysis failed: {str(e)}")
            print("Continuing without analysis...")

    print("Writing output files...")
    write_json(parsed, output_dir / "transcript.json", report=report, analyzed=analyzed)
    write_txt(parsed.entries, output_dir / "transcript.txt")
    write_profanity_report(report, output_dir / "profanity_report.txt")

    print(f"✓ All files saved successfully!")
    return output_dir, parsed, report, analyzed


def print_summary(parsed: ParsedTranscript, report: ProfanityReport, analyzed: Optional[List[AnalyzedEntry]]) -> None:
    """Print speakers, flag counts and the profanity report."""
    print()
    print("=" * 60)
    print("SPEAKERS")
    print("=" * 60)
    for speaker in parsed.speakers:
        count = sum(1 for entry in parsed.entries if entry.speaker == speaker)
        print(f"  {speaker}: {count} entries")

    if analyzed is not None:
        questions = sum(1 for entry in analyzed if entry.is_question)
        actions = sum(1 for entry in analyzed if entry.is_action_item)
        print()
        print(f"Questions: {questions}")
        print(f"Action items: {actions}")

    print()
    print(format_profanity_report(report), end="")
    print("=" * 60)


def ask_yes_no(prompt: str) -> bool:
    return input(f"{prompt} (y/n): ").strip().lower() in ('y', 'yes')


def browse_entries(parsed: ParsedTranscript, analyzed: Optional[List[AnalyzedEntry]]) -> None:
    """Let the user filter the transcript by speaker, flags and search text and print the matches."""
    entries = analyzed if analyzed is not None else parsed.entries

    while ask_yes_no("Filter the transcript?"):
        print(f"Speakers: {', '.join(parsed.speakers)}")
        raw_speakers = input("Speakers to show, comma-separated (blank for all): ")
        speakers = [speaker.strip() for speaker in raw_speakers.split(',') if speaker.strip()]

        only_questions = False
        only_action_items = False
        if analyzed is not None:
            only_questions = ask_yes_no("Show only questions?")
            only_action_items = ask_yes_no("Show only action items?")

        search_term = input("Search text (blank for none): ")

        matches = filter_entries(
            entries,
            speakers=speakers,
            only_questions=only_questions,
            only_action_items=only_action_items,
            search_term=search_term
        )

        print()
        print("-" * 60)
        if not matches:
            print("No entries match the current filters.")
        for entry in matches:
            print(format_entry(entry))
        print("-" * 60)
        print(f"Showing {len(matches)} of {len(entries)} entries")
        print()


def main(argv: Optional[List[str]] = None) -> None:
    """Interactive main function. File paths given as arguments skip the path prompt."""
    if argv is None:
        argv = sys.argv[1:]

    print("=" * 60)
    print("Transcript Analyzer")
    print("=" * 60)

    try:
        words = load_profanity_words(Config.PROFANITY_LIST or None)
    except (OSError, UnicodeDecodeError) as e:
        print(f"✗ Could not read profanity list {Config.PROFANITY_LIST}: {str(e)}", file=sys.stderr)
        sys.exit(1)

    analyze = False
    try:
        Config.validate()
        print()
        analyze = ask_yes_no("Classify questions and action items with GPT?")
    except ValueError as e:
        print(f"⚠ {str(e)}")
        print("AI question/action-item analysis is disabled.")

    queued = [Path(arg) for arg in argv]
    interactive = not queued

    while True:
        if queued:
            path = queued.pop(0)
        elif interactive:
            print()
            print("-" * 60)
            raw = input("Path to a .vtt or .txt transcript (blank to exit): ").strip().strip('"')
            if not raw:
                break
            path = Path(raw)
        else:
            break

        if not path.is_file():
            print(f"✗ File not found: {path}", file=sys.stderr)
            continue

        print()
        print(f"Processing {path.name}...")
        try:
            output_dir, parsed, report, analyzed = process_transcript(path, analyze=analyze, words=words)
        except EmptyTranscriptError as e:
            print(f"✗ Failed to process transcript: {str(e)}", file=sys.stderr)
            continue
        except (OSError, UnicodeDecodeError) as e:
            print(f"✗ Could not read {path}: {str(e)}", file=sys.stderr)
            continue

        print_summary(parsed, report, analyzed)
        print(f"Files saved to: {output_dir}")
        print()
        browse_entries(parsed, analyzed)

    print()
    print("Thank you for using Transcript Analyzer!")


if __name__ == "__main__":
    main()
