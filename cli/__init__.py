"""
Soundboard CLI - developer tooling for the state engine

Commands:
- soundboard replay - Replay an action script and report the final state
- soundboard kinds - List action kinds
- soundboard version - Show version information
"""

from soundboard import __version__

__all__ = ["__version__"]
