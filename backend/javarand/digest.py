"""Short digest of a drawn sequence.

Two machines that draw the same kind of values from the same raw seed
must print the same digest. Used by scripts.dump_sequence so runs can
be compared without diffing full value lists.
"""
import hashlib
import json
from typing import Any


def sequence_digest(kind: str, seed: int, values: list[Any]) -> str:
    """
    Hash a sequence of drawn values.

    Returns 16-char hex prefix of SHA-256 over canonical JSON of the
    kind, the raw seed and the values. Floats serialize with repr
    precision, so any bit difference changes the digest.
    """
    snapshot = {
        "kind": kind,
        "seed": seed,
        "values": list(values),
    }
    canonical = json.dumps(snapshot, sort_keys=True, separators=(",", ":"))
    return hashlib.sha256(canonical.encode()).hexdigest()[:16]
