"""
Soundboard State Engine

Action dispatch and state reduction for the soundboard client: tagged actions,
persistent state snapshots and a single transition function.
"""

__version__ = "0.1.0"
