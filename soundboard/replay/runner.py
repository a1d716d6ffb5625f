"""
Replay runner: fold an action sequence over a snapshot.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, Optional

from ..core.actions import Action
from ..core.reducer import Reducer
from ..core.state import AppState


@dataclass(frozen=True)
class ReplayResult:
    """
    Result of replay operation.

    Fields:
        state: Final state after applying actions
        applied: Number of actions applied
        kind_counts: Actions applied per wire kind
    """
    state: AppState
    applied: int
    kind_counts: Dict[str, int] = field(default_factory=dict)


def replay(
    actions: Iterable[Action],
    reducer: Reducer,
    state: Optional[AppState] = None,
    until: Optional[int] = None,
) -> ReplayResult:
    """
    Apply actions to state in order.

    Args:
        actions: Actions to apply
        reducer: Reducer with registered handlers
        state: Starting snapshot (None = AppState.initial())
        until: Stop after this many actions (None = all)

    Returns:
        ReplayResult with final state and counts
    """
    st = state if state is not None else AppState.initial()
    count = 0
    kind_counts: Dict[str, int] = {}

    for action in actions:
        if until is not None and count >= until:
            break
        st = reducer.apply(st, action)
        count += 1
        kind_counts[action.type] = kind_counts.get(action.type, 0) + 1

    return ReplayResult(state=st, applied=count, kind_counts=kind_counts)
