#!/usr/bin/env python
import argparse
import json
import sys
from pathlib import Path

# allow running from a checkout without installing
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from aiken import AikenParseError, NoValidQuestions, preview_aiken  # noqa: E402


def _print_issues(skipped, global_issues) -> None:
    for issue in global_issues:
        print(f"  line {issue.line_number}: {issue.message}")
    for sq in skipped:
        snippet = sq.stem_snippet.splitlines()[0] if sq.stem_snippet else "<no text>"
        print(f"  lines {sq.start_line}-{sq.end_line} skipped ({snippet[:60]})")
        for issue in sq.issues:
            where = f"line {issue.line_number}" if issue.line_number else "block"
            print(f"    {where}: {issue.message}")


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Validate an Aiken question file.")
    ap.add_argument("path", type=Path)
    ap.add_argument("--json", action="store_true", help="print the full preview outcome as JSON")
    args = ap.parse_args(argv)

    try:
        text = args.path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: could not read {args.path}: {e}")
        return 2

    try:
        outcome = preview_aiken(text)
    except NoValidQuestions as e:
        print(f"Error: {e.message}")
        _print_issues(e.skipped, e.global_issues)
        return 1
    except AikenParseError as e:
        print(f"Error: {e.message}")
        return 1

    if args.json:
        print(json.dumps(outcome.model_dump(), indent=2))
        return 0

    print(f"{len(outcome.questions)} question(s) OK, {len(outcome.skipped)} skipped")
    _print_issues(outcome.skipped, outcome.global_issues)
    return 0


if __name__ == "__main__":
    sys.exit(main())
