from __future__ import annotations

import datetime
import hashlib
import json
from typing import Any, Dict, List, Optional, Sequence

from dialcount.core.dial import START_POSITION
from dialcount.core.errors import RotationError
from dialcount.rules import get_rule, list_rule_names, run_rule
from dialcount.trace import trace_run


SCHEMA = "dialcount-run.v1"
SCHEMA_DOC = "docs/count_run_schema.md"


def _utc_now_z() -> str:
    return datetime.datetime.now(datetime.UTC).isoformat(timespec="seconds").replace("+00:00", "Z")


def _hash_inputs(text: str, rules: List[str], start: int) -> str:
    # Determinism hash should be simple and stable across platforms.
    blob = json.dumps(
        {"input": text, "rules": rules, "start": start},
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
    ).encode("utf-8")
    return hashlib.sha256(blob).hexdigest()


def run_counts(
    text: str,
    rules: Optional[Sequence[str]] = None,
    start: int = START_POSITION,
    arithmetic: Optional[bool] = None,
) -> Dict[str, int]:
    """
    Run each named rule over `text`. Raises RotationError on the first bad
    line; no partial counts are returned.
    """
    names = list(rules) if rules is not None else list_rule_names()
    # unknown names fail before any rule runs
    for name in names:
        get_rule(name)

    return {
        name: run_rule(name, text, start=start, arithmetic=arithmetic)
        for name in names
    }


def run_counts_json(
    text: str,
    rules: Optional[Sequence[str]] = None,
    start: int = START_POSITION,
    trace: bool = False,
    arithmetic: Optional[bool] = None,
) -> Dict[str, Any]:
    """
    Canonical JSON output contract for a dial run.

    Rotation errors become `ok: false` with a typed `error` object; unknown
    rule names raise KeyError.
    """
    names = list(rules) if rules is not None else list_rule_names()
    now = _utc_now_z()
    inputs_hash = _hash_inputs(text, names, start)

    error: Optional[Dict[str, Any]] = None
    counts: Dict[str, int] = {}
    entries: List[Dict[str, Any]] = []
    try:
        counts = run_counts(text, names, start=start, arithmetic=arithmetic)
        if trace:
            entries = [e.as_dict() for e in trace_run(text, start=start)]
    except RotationError as e:
        counts = {}
        entries = []
        error = e.as_dict()

    payload: Dict[str, Any] = {
        "schema": SCHEMA,
        "schema_doc": SCHEMA_DOC,
        "start": start,
        "rules": names,
        "counts": counts,
        "ok": error is None,
        "error": error,
    }
    if trace and error is None:
        payload["trace"] = entries
    payload["meta"] = {
        "tool": "count_run",
        "generated_at": now,
        "determinism": {
            "inputs_hash": inputs_hash,
        },
    }
    return payload
