"""
Action scripts in JSONL format.

Each non-blank line is one action in the dispatcher's wire shape:
{"type": "PLAY_SONG", "args": {"id": 7}}
"""

import json
import os
from typing import Iterable, Iterator, List

from ..core.actions import Action
from ..core.canonical import canonical_json_str
from ..core.errors import ActionScriptError


def read_actions(lines: Iterable[str]) -> Iterator[Action]:
    """
    Parse actions from JSONL lines.

    Raises:
        ActionScriptError: If a line is not a JSON object with a string "type"
    """
    for line_no, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        try:
            rec = json.loads(line)
        except ValueError as e:
            raise ActionScriptError(line_no, f"invalid JSON: {e}") from e
        if not isinstance(rec, dict):
            raise ActionScriptError(line_no, "expected a JSON object")
        if not isinstance(rec.get("type"), str):
            raise ActionScriptError(line_no, "missing action type")
        args = rec.get("args") or {}
        if not isinstance(args, dict):
            raise ActionScriptError(line_no, "args must be a JSON object")
        yield Action(kind=rec["type"], payload=args)


def load_actions(path: str) -> List[Action]:
    """
    Load an action script from disk.

    Raises:
        FileNotFoundError: If path does not exist
        ActionScriptError: If a line cannot be parsed
    """
    with open(path, "r", encoding="utf-8") as f:
        return list(read_actions(f))


def write_actions(path: str, actions: Iterable[Action]) -> int:
    """
    Write actions to a JSONL script, one canonical line per action.

    Returns:
        Number of actions written
    """
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    count = 0
    with open(path, "w", encoding="utf-8") as f:
        for action in actions:
            f.write(canonical_json_str(action.to_dict()))
            f.write("\n")
            count += 1
    return count
