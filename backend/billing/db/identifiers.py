"""Identifiers - monotonic ULIDs for primary keys.

Invariants:
    - new_ulid() returns 26-char Crockford base32 strings
    - Successive calls sort strictly ascending, also within one millisecond

Design Decisions:
    - python-ulid supplies encoding and randomness; monotonicity is layered on top
      by incrementing the previous value when the clock has not moved forward
    - Lock-guarded module state: the generator is shared by every request
"""

import threading

from ulid import ULID

_lock = threading.Lock()
_last: ULID | None = None


def new_ulid() -> str:
    global _last
    with _lock:
        candidate = ULID()
        if _last is not None and candidate.milliseconds <= _last.milliseconds:
            candidate = ULID.from_int(int(_last) + 1)
        _last = candidate
        return str(candidate)
