"""Reading recorded event logs (JSONL) and scenario files (YAML)."""

import json
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import Any

import yaml


def read_jsonl(path: Path | str) -> Iterator[dict[str, Any]]:
    """Yield the event records of a JSONL log, skipping blank lines.

    Raises:
        ValueError: If a line is not JSON or not a JSON object, naming
            the line.
    """
    with open(path) as f:
        for line_num, line in enumerate(f, 1):
            if not line.strip():
                continue
            try:
                event = json.loads(line)
            except json.JSONDecodeError as e:
                raise ValueError(f"Invalid event on line {line_num}: {e.msg}") from e
            if not isinstance(event, dict):
                raise ValueError(f"Invalid event on line {line_num}: expected a JSON object")
            yield event


def write_jsonl(path: Path | str, records: Iterable[dict[str, Any]]) -> int:
    """Write records to a JSONL file.

    Returns:
        Number of records written.
    """
    count = 0
    with open(path, "w") as f:
        for record in records:
            f.write(json.dumps(record, ensure_ascii=False, default=str) + "\n")
            count += 1
    return count


def read_yaml(path: Path | str) -> dict[str, Any]:
    """Load a YAML mapping; an empty file yields an empty dict."""
    with open(path) as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected a mapping at the top of {path}")
    return data
