from __future__ import annotations

"""
Dial count CLI

Reads rotation commands (one per line) and prints how many times the dial
lands on 0 under the coarse and/or fine rule.

    python3 -m dialcount.count_cli input.txt
    python3 -m dialcount.count_cli --text "R50
L25" --json --pretty
    cat input.txt | python3 -m dialcount.count_cli --stdin --rule fine

Exit codes: 0 ok, 1 bad command line in the input, 2 bad invocation / input.
"""

import argparse
import json
import sys
from typing import Any, List, Optional

from dialcount.core.dial import START_POSITION
from dialcount.core.errors import RotationError
from dialcount.count_run import SCHEMA, SCHEMA_DOC, run_counts, run_counts_json
from dialcount.rules import list_rule_names
from dialcount.trace import format_entry, trace_run


def _read_input_text(args: argparse.Namespace) -> str:
    """
    Priority:
      1) --text
      2) positional input_file
      3) --stdin
    """
    if args.text is not None:
        if args.input_file is not None:
            args.input_file.close()
        return args.text

    if args.input_file is not None:
        with args.input_file as f:
            return f.read()

    if args.stdin:
        return sys.stdin.read()

    raise ValueError("No input provided. Use a file path, --text, or --stdin.")


def _selected_rules(rule: str) -> List[str]:
    if rule == "both":
        return list_rule_names()
    return [rule]


def _emit(payload: dict[str, Any], pretty: bool) -> None:
    if pretty:
        print(json.dumps(payload, ensure_ascii=False, indent=2))
    else:
        print(json.dumps(payload, ensure_ascii=False))


def _report(err: RotationError) -> None:
    where = f"line {err.line_no}: " if err.line_no is not None else ""
    print(f"{where}{err}", file=sys.stderr)


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Count how many times a 100-position dial lands on 0.")
    ap.add_argument("--schema", action="store_true", help="Print schema tag + schema doc path and exit.")
    ap.add_argument("--list", action="store_true", help="List known rule names and exit.")
    ap.add_argument(
        "--rule",
        choices=[*list_rule_names(), "both"],
        default="both",
        help="Counting rule to apply (default: both).",
    )
    ap.add_argument("--start", type=int, default=START_POSITION, help="Starting dial position (default: 50).")
    ap.add_argument(
        "--arithmetic",
        action="store_true",
        default=None,
        help="Count fine-rule hits in closed form instead of stepping.",
    )
    ap.add_argument("--trace", action="store_true", help="Include the per-command trace.")
    ap.add_argument("--json", action="store_true", help="Emit the JSON run payload.")
    ap.add_argument("--pretty", action="store_true", help="Pretty-print JSON output (implies --json).")
    ap.add_argument("--stdin", action="store_true", help="Read commands from stdin.")
    ap.add_argument("--text", default=None, help="Commands given inline, newline separated.")
    ap.add_argument(
        "input_file",
        nargs="?",
        type=argparse.FileType("r", encoding="utf-8"),
        default=None,
        help="File with one command per line.",
    )

    args = ap.parse_args(argv)

    if args.schema:
        print(f"{SCHEMA} {SCHEMA_DOC}")
        return 0

    if args.list:
        for name in list_rule_names():
            print(name)
        return 0

    try:
        text = _read_input_text(args)
    except (OSError, UnicodeDecodeError, ValueError) as e:
        print(f"Invalid input: {e}", file=sys.stderr)
        return 2

    rules = _selected_rules(args.rule)

    if args.json or args.pretty:
        payload = run_counts_json(
            text,
            rules=rules,
            start=args.start,
            trace=args.trace,
            arithmetic=args.arithmetic,
        )
        _emit(payload, pretty=bool(args.pretty))
        return 0 if payload["ok"] else 1

    try:
        counts = run_counts(text, rules, start=args.start, arithmetic=args.arithmetic)
        entries = trace_run(text, start=args.start) if args.trace else []
    except RotationError as e:
        _report(e)
        return 1

    for entry in entries:
        print(format_entry(entry))
    for name in rules:
        print(f"{name}: {counts[name]}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
