"""
Canonical serialization for logging and hashing state snapshots.

Same snapshot always produces the same string, whatever the insertion order
of its maps or the collection types it was built from.
"""

import json
from typing import Any

from pyrsistent import PMap, PSet, PVector


def canonicalize(obj: Any) -> Any:
    """
    Convert arbitrary nested maps/sequences to canonical form.

    Rules:
    - mapping keys rendered as strings and sorted (PMap included)
    - tuples and PVectors converted to lists
    - sets converted to sorted lists
    - recursive normalization
    """
    if isinstance(obj, (dict, PMap)):
        return {str(k): canonicalize(obj[k]) for k in sorted(obj.keys(), key=str)}
    if isinstance(obj, (list, tuple, PVector)):
        return [canonicalize(x) for x in obj]
    if isinstance(obj, (set, frozenset, PSet)):
        return sorted((canonicalize(x) for x in obj), key=repr)
    return obj


def canonical_json_bytes(obj: Any) -> bytes:
    """
    Deterministic JSON bytes.

    Guarantees:
    - sort_keys=True (secondary safety)
    - separators remove whitespace
    - ensure_ascii=False keeps UTF-8 stable
    - values JSON cannot encode are rendered with str()
    """
    canon = canonicalize(obj)
    s = json.dumps(
        canon,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
        default=str,
    )
    return s.encode("utf-8")


def canonical_json_str(obj: Any) -> str:
    """Same as canonical_json_bytes but returns a string."""
    return canonical_json_bytes(obj).decode("utf-8")
