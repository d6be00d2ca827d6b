"""The point type shared by the decoder and the reconstructor."""

from __future__ import annotations

from typing import NamedTuple


class Share(NamedTuple):
    """A point (x, y) on the secret-bearing polynomial."""

    x: int
    y: int
