"""
Reducer: the application's single state transition function.

The reducer is total: every (state, action) pair yields a state. Unknown kinds
and malformed payloads leave the input state untouched; a snapshot is either
fully replaced or not at all.
"""

import logging
from typing import Callable, Dict, Optional, Union

from pyrsistent import thaw

from ..config import ReducerConfig
from ..logging_config import get_logger
from .actions import Action, ActionKind
from .errors import InvalidTransitionError, MalformedPayloadError
from .handlers import register_handlers
from .snapshot import snapshot_json
from .state import AppState

logger = logging.getLogger(__name__)

# Handler signature: (current_state, action, config) -> new_state
Handler = Callable[[AppState, Action, ReducerConfig], AppState]


class Reducer:
    """
    Registry of action handlers for state transitions.

    Usage:
        reducer = Reducer()
        reducer.register(ActionKind.STOP_SONG, on_stop_song)
        new_state = reducer.apply(state, stop_song())
    """

    def __init__(self, config: Optional[ReducerConfig] = None) -> None:
        self.config = config or ReducerConfig()
        self._handlers: Dict[ActionKind, Handler] = {}

    def register(self, kind: Union[ActionKind, str], handler: Handler) -> None:
        """
        Register action handler.

        Args:
            kind: Action kind (enum member or wire spelling)
            handler: Function (state, action, config) -> new_state

        Raises:
            InvalidTransitionError: If kind is not a known action kind
        """
        try:
            kind = ActionKind(kind)
        except ValueError:
            raise InvalidTransitionError(f"Unknown action kind: {kind}") from None
        self._handlers[kind] = handler

    def handles(self, kind: Union[ActionKind, str]) -> bool:
        return kind in self._handlers

    def apply(self, state: AppState, action: Action) -> AppState:
        """
        Apply action to state using the registered handler.

        Args:
            state: Current snapshot
            action: Action to apply

        Returns:
            New snapshot, or state itself for unknown kinds and (unless
            strict_payloads is set) malformed payloads

        Raises:
            MalformedPayloadError: If strict_payloads is set and the payload
                does not match its kind
        """
        log = get_logger(__name__, trace_id=action.type)
        log.debug(action.type)

        handler = self._handlers.get(action.kind)
        if handler is None:
            log.error("type unknown: %s %s", action.type, thaw(action.payload))
            return state

        try:
            new_state = handler(state, action, self.config)
        except MalformedPayloadError as e:
            if self.config.strict_payloads:
                raise
            log.error("%s, keeping current state", e)
            return state

        if self.config.log_snapshots and logger.isEnabledFor(logging.DEBUG):
            log.debug("state %s", snapshot_json(new_state))
        return new_state

    __call__ = apply


def build_reducer(config: Optional[ReducerConfig] = None) -> Reducer:
    """Reducer with every soundboard transition registered."""
    reducer = Reducer(config)
    register_handlers(reducer)
    return reducer


_default_reducer: Optional[Reducer] = None


def app_reducer(state: AppState, action: Action) -> AppState:
    """Apply action with the default reducer (configured from the environment)."""
    global _default_reducer
    if _default_reducer is None:
        _default_reducer = build_reducer(ReducerConfig.from_env())
    return _default_reducer.apply(state, action)
