"""
Test suite for the soundboard state engine.

Focus areas:
- Action construction and payload freezing
- Transition table and its invariants
- Socket ownership and release
- Logging of transitions with the socket redacted
- Action script replay and CLI
"""
