"""
Replay of recorded action scripts.

An action script is a JSONL file of dispatcher actions. Replay folds them over
a starting snapshot in file order.
"""

from .script import load_actions, read_actions, write_actions
from .runner import ReplayResult, replay

__all__ = [
    "load_actions",
    "read_actions",
    "write_actions",
    "ReplayResult",
    "replay",
]
