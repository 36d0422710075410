"""JSONL helpers for scripted sessions and attempt records."""

import json
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import Any

from pydantic import BaseModel


def read_jsonl(path: Path | str) -> Iterator[dict[str, Any]]:
    """Yield each JSON object of a JSONL file, skipping blank lines.

    Raises:
        ValueError: If a line is not valid JSON or not a JSON object.
    """
    with open(path) as f:
        for line_num, line in enumerate(f, 1):
            line = line.strip()
            if not line:
                continue
            try:
                record = json.loads(line)
            except json.JSONDecodeError as e:
                raise ValueError(f"Invalid JSON on line {line_num}: {e}") from e
            if not isinstance(record, dict):
                raise ValueError(f"Line {line_num} is not a JSON object")
            yield record


def write_jsonl(path: Path | str, records: Iterable[dict[str, Any] | BaseModel]) -> int:
    """Write dicts or pydantic models to a JSONL file.

    Returns:
        Number of records written.
    """
    count = 0
    with open(path, "w") as f:
        for record in records:
            if isinstance(record, BaseModel):
                record = record.model_dump(mode="json")
            f.write(json.dumps(record, ensure_ascii=False) + "\n")
            count += 1
    return count
