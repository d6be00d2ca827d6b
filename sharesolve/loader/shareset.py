"""Share sets – the input documents fed to the reconstructor.

Two document shapes are accepted:

Explicit list (preferred)::

    {"threshold": 3, "total": 4,
     "shares": [{"x": "1", "base": "10", "value": "4"}, ...]}

Legacy keyed form, where object keys double as x-coordinates::

    {"keys": {"n": 4, "k": 3},
     "1": {"base": "10", "value": "4"}, ...}

The legacy form is converted to explicit records on load.  Selection never
relies on document order: shares are sorted by ascending x and the first
``threshold`` of them are used.
"""

from __future__ import annotations

import hashlib
import json
import re
from typing import Any, Dict, List, Union

from pydantic import BaseModel, ConfigDict, StrictInt, StrictStr, ValidationError

from sharesolve.codec.radix import decode_share
from sharesolve.config import MIN_THRESHOLD
from sharesolve.crypto.lagrange import reconstruct
from sharesolve.errors import DuplicateXCoordinate, InsufficientShares, ShareSetError
from sharesolve.share import Share

_LEGACY_KEY_RE = re.compile(r"[0-9]+")


class ShareRecord(BaseModel):
    """One raw, still-encoded share entry."""

    model_config = ConfigDict(frozen=True)

    # Strict so that JSON true/false never pass as 1/0.
    x: Union[StrictStr, StrictInt]
    base: Union[StrictStr, StrictInt]
    value: StrictStr

    def decode(self) -> Share:
        return decode_share(self.x, self.base, self.value)


class ShareSet(BaseModel):
    """Threshold K, total N and the raw share records."""

    model_config = ConfigDict(frozen=True)

    threshold: int
    total: int
    records: List[ShareRecord]

    def model_post_init(self, __context: Any) -> None:
        if self.threshold < MIN_THRESHOLD:
            raise InsufficientShares(
                f"Threshold k={self.threshold} below minimum {MIN_THRESHOLD}",
                k=self.threshold,
            )
        if self.total < self.threshold:
            raise ShareSetError(
                f"Invalid share set: k={self.threshold} exceeds n={self.total}",
                k=self.threshold,
                n=self.total,
            )

    def shares(self) -> List[Share]:
        """Decode every record, in document order."""
        return [r.decode() for r in self.records]

    def select(self) -> List[Share]:
        """Sort decoded shares by ascending x and take the first K."""
        if len(self.records) < self.threshold:
            raise InsufficientShares(
                f"Need {self.threshold} shares, got {len(self.records)}",
                k=self.threshold,
                available=len(self.records),
            )
        ordered = sorted(self.shares(), key=lambda s: s.x)
        # Duplicates anywhere in the set are rejected, not only within the first K.
        for prev, cur in zip(ordered, ordered[1:]):
            if prev.x == cur.x:
                raise DuplicateXCoordinate(
                    f"Share set has more than one record with x={cur.x}",
                    x=cur.x,
                )
        return ordered[: self.threshold]

    def digest(self) -> str:
        """SHA-256 over the canonical JSON of the set (identifies it in audit entries)."""
        canonical = json.dumps(self.model_dump(), sort_keys=True, separators=(",", ":"))
        return hashlib.sha256(canonical.encode()).hexdigest()


def load_shareset(document: Union[str, Dict[str, Any]]) -> ShareSet:
    """Build a ``ShareSet`` from a JSON string or an already-parsed dict."""
    if isinstance(document, str):
        try:
            document = json.loads(document)
        except json.JSONDecodeError as exc:
            raise ShareSetError(f"Invalid JSON: {exc.msg}", line=exc.lineno, column=exc.colno) from exc
    if not isinstance(document, dict):
        raise ShareSetError(f"Share set must be a JSON object, got {type(document).__name__}")

    if "keys" in document:
        fields = _from_legacy(document)
    elif "shares" in document:
        fields = _from_explicit(document)
    else:
        raise ShareSetError("Share set needs either a 'shares' list or a 'keys' object")

    try:
        return ShareSet(**fields)
    except ValidationError as exc:
        raise ShareSetError(f"Malformed share set: {exc.error_count()} validation error(s)",
                            detail=str(exc)) from exc


def solve(shareset: ShareSet) -> int:
    """Reconstruct the secret from the first K shares by ascending x."""
    return reconstruct(shareset.select())


# ------------------------------------------------------------------
# Helpers
# ------------------------------------------------------------------

def _from_explicit(document: Dict[str, Any]) -> Dict[str, Any]:
    shares = document["shares"]
    if not isinstance(shares, list):
        raise ShareSetError("'shares' must be a list")
    if "threshold" not in document:
        raise ShareSetError("Missing 'threshold'")
    return {
        "threshold": document["threshold"],
        "total": document.get("total", len(shares)),
        "records": shares,
    }


def _from_legacy(document: Dict[str, Any]) -> Dict[str, Any]:
    keys = document["keys"]
    if not isinstance(keys, dict) or "k" not in keys or "n" not in keys:
        raise ShareSetError("'keys' must be an object with 'n' and 'k'")

    records: List[Dict[str, Any]] = []
    for key, entry in document.items():
        if not _LEGACY_KEY_RE.fullmatch(key):
            continue
        if not isinstance(entry, dict) or "base" not in entry or "value" not in entry:
            raise ShareSetError(f"Entry {key!r} needs 'base' and 'value'", identifier=key)
        records.append({"x": key, "base": entry["base"], "value": entry["value"]})

    return {"threshold": keys["k"], "total": keys["n"], "records": records}
