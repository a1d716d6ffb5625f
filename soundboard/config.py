"""
Reducer configuration.

Environment Variables:
    SOUNDBOARD_TOGGLE_SOURCE: Where toggles read the current flag (payload, state) - default: payload
    SOUNDBOARD_COMMIT_ON_CREATE: Commit and reset the recorded song on CREATE_SONG - default: false
    SOUNDBOARD_STRICT_PAYLOADS: Raise malformed payload errors to the caller - default: false
    SOUNDBOARD_LOG_SNAPSHOTS: Log the redacted state after each transition - default: true
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

TOGGLE_FROM_PAYLOAD = "payload"
TOGGLE_FROM_STATE = "state"
TOGGLE_SOURCES = (TOGGLE_FROM_PAYLOAD, TOGGLE_FROM_STATE)

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _env_bool(env: Mapping[str, str], key: str, default: bool) -> bool:
    val = env.get(key)
    if not val:
        return default
    val = val.strip().lower()
    if val in _TRUE:
        return True
    if val in _FALSE:
        return False
    return default


@dataclass(frozen=True)
class ReducerConfig:
    """
    Behavior switches for transitions whose intended semantics are open.

    Fields:
        toggle_source: "payload" negates the flag supplied by the dispatcher,
            "state" negates the flag held in state
        commit_on_create: CREATE_SONG appends the recorded song to songs and
            resets song/song_title
        strict_payloads: re-raise MalformedPayloadError instead of keeping
            the prior state
        log_snapshots: log the redacted snapshot after each transition
    """
    toggle_source: str = TOGGLE_FROM_PAYLOAD
    commit_on_create: bool = False
    strict_payloads: bool = False
    log_snapshots: bool = True

    def __post_init__(self) -> None:
        if self.toggle_source not in TOGGLE_SOURCES:
            raise ValueError(f"toggle_source must be one of {TOGGLE_SOURCES}, got {self.toggle_source!r}")

    @staticmethod
    def from_env(env: Optional[Mapping[str, str]] = None) -> "ReducerConfig":
        """
        Build config from environment variables.

        Unrecognized values fall back to the defaults.
        """
        env = os.environ if env is None else env
        defaults = ReducerConfig()

        toggle_source = (env.get("SOUNDBOARD_TOGGLE_SOURCE") or "").strip().lower()
        if toggle_source not in TOGGLE_SOURCES:
            toggle_source = defaults.toggle_source

        return ReducerConfig(
            toggle_source=toggle_source,
            commit_on_create=_env_bool(env, "SOUNDBOARD_COMMIT_ON_CREATE", defaults.commit_on_create),
            strict_payloads=_env_bool(env, "SOUNDBOARD_STRICT_PAYLOADS", defaults.strict_payloads),
            log_snapshots=_env_bool(env, "SOUNDBOARD_LOG_SNAPSHOTS", defaults.log_snapshots),
        )
