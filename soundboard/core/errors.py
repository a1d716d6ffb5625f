"""
Exception types for the soundboard state engine.
"""


class SoundboardError(Exception):
    """Base class for all soundboard engine errors."""
    pass


class InvalidTransitionError(SoundboardError):
    """Raised when a handler registration is invalid."""
    pass


class MalformedPayloadError(SoundboardError):
    """Raised when an action payload lacks a required key or has the wrong shape."""

    def __init__(self, kind: str, key: str, reason: str = "missing") -> None:
        self.kind = kind
        self.key = key
        self.reason = reason
        super().__init__(f"malformed action payload for {kind}: {key!r} {reason}")


class ActionScriptError(SoundboardError):
    """Raised when an action script line cannot be parsed."""

    def __init__(self, line_no: int, reason: str) -> None:
        self.line_no = line_no
        self.reason = reason
        super().__init__(f"line {line_no}: {reason}")
