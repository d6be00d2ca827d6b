"""Append-only, hash-chained log of reconstruction requests.

Each entry records the SHA-256 of its predecessor so that a rewritten or
dropped entry breaks the chain.

Entries are typed.  Each event kind has a fixed set of fields and nothing
else is accepted, so a secret or a y-value can never end up in the log:

  solve        digest, k, n, used   – a share set was reconstructed
  reconstruct  k, used              – explicit points were reconstructed
  reject       path, error          – a request failed with a ShareError

``used`` lists the x-coordinates (as strings) that went into the result.
"""

from __future__ import annotations

import hashlib
import json
import time
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Tuple

from sharesolve.errors import ShareError
from sharesolve.loader.shareset import ShareSet

GENESIS_HASH = "0" * 64

EVENT_FIELDS: Dict[str, frozenset] = {
    "solve": frozenset({"digest", "k", "n", "used"}),
    "reconstruct": frozenset({"k", "used"}),
    "reject": frozenset({"path", "error"}),
}


@dataclass(frozen=True)
class AuditEntry:
    timestamp: float
    event: str
    data: Dict[str, Any]
    prev_hash: str
    entry_hash: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "timestamp": self.timestamp,
            "event": self.event,
            "data": self.data,
            "prev_hash": self.prev_hash,
            "entry_hash": self.entry_hash,
        }


def _entry_hash(timestamp: float, event: str, data: Dict[str, Any], prev_hash: str) -> str:
    payload = json.dumps(
        {"timestamp": timestamp, "event": event, "data": data, "prev_hash": prev_hash},
        sort_keys=True,
        separators=(",", ":"),
    )
    return hashlib.sha256(payload.encode()).hexdigest()


class AuditLog:
    """In-memory audit chain of solve / reconstruct / reject events."""

    def __init__(self) -> None:
        self._entries: List[AuditEntry] = []
        self._prev_hash: str = GENESIS_HASH

    def __len__(self) -> int:
        return len(self._entries)

    # ---- typed recorders ----

    def record_solve(self, shareset: ShareSet, used: Iterable[int]) -> AuditEntry:
        return self.append(
            "solve",
            {
                "digest": shareset.digest(),
                "k": shareset.threshold,
                "n": shareset.total,
                "used": [str(x) for x in used],
            },
        )

    def record_reconstruct(self, points: List[Tuple[int, int]]) -> AuditEntry:
        return self.append("reconstruct", {"k": len(points), "used": [str(x) for x, _ in points]})

    def record_reject(self, path: str, error: ShareError) -> AuditEntry:
        # Only the kind: error context may carry share values.
        return self.append("reject", {"path": path, "error": error.kind})

    # ---- chain ----

    def append(self, event: str, data: Dict[str, Any]) -> AuditEntry:
        allowed = EVENT_FIELDS.get(event)
        if allowed is None:
            raise ValueError(f"Unknown audit event '{event}'")
        if set(data) != allowed:
            raise ValueError(
                f"Audit event '{event}' takes fields {sorted(allowed)}, got {sorted(data)}"
            )
        ts = time.time()
        entry = AuditEntry(
            timestamp=ts,
            event=event,
            data=data,
            prev_hash=self._prev_hash,
            entry_hash=_entry_hash(ts, event, data, self._prev_hash),
        )
        self._entries.append(entry)
        self._prev_hash = entry.entry_hash
        return entry

    def entries(self) -> List[Dict[str, Any]]:
        return [e.to_dict() for e in self._entries]

    def history(self, digest: str) -> List[Dict[str, Any]]:
        """All solve entries for the share set with this digest."""
        return [
            e.to_dict()
            for e in self._entries
            if e.event == "solve" and e.data["digest"] == digest
        ]

    def was_solved(self, shareset: ShareSet) -> bool:
        return bool(self.history(shareset.digest()))

    def verify_chain(self) -> bool:
        prev = GENESIS_HASH
        for e in self._entries:
            if e.prev_hash != prev:
                return False
            if e.entry_hash != _entry_hash(e.timestamp, e.event, e.data, e.prev_hash):
                return False
            prev = e.entry_hash
        return True
