"""Share decoder – turns a textual (x, base, digits) entry into a point.

Digits use the conventional alphabet ``0-9`` then ``a-z`` (case-insensitive),
so bases 2 … 36 are supported.  The value is the positional sum
sum(d_i * base**i), evaluated with Horner's rule on exact ints.

The payload is strict: no sign, no ``0x``/``0b`` prefix, no ``_``
separators and no embedded whitespace.
"""

from __future__ import annotations

import re
from typing import Union

from sharesolve.config import DIGIT_ALPHABET, MAX_BASE, MIN_BASE
from sharesolve.errors import InvalidBase, InvalidDigit, InvalidIdentifier, InvalidValue
from sharesolve.share import Share

_DECIMAL_RE = re.compile(r"[+-]?[0-9]+")
_DIGIT_VALUES = {ch: i for i, ch in enumerate(DIGIT_ALPHABET)}


def parse_identifier(identifier: Union[int, str]) -> int:
    """Parse a share identifier as a base-10 integer."""
    if isinstance(identifier, bool):
        raise InvalidIdentifier(f"Invalid identifier {identifier!r}", identifier=repr(identifier))
    if isinstance(identifier, int):
        return identifier
    if isinstance(identifier, str):
        text = identifier.strip()
        if _DECIMAL_RE.fullmatch(text):
            return int(text)
    raise InvalidIdentifier(f"Invalid identifier {identifier!r}", identifier=repr(identifier))


def parse_value(value: Union[int, str]) -> int:
    """Parse an already-decoded y-value written in base 10."""
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, str) and _DECIMAL_RE.fullmatch(value.strip()):
        return int(value.strip())
    raise InvalidValue(f"Invalid y-value {value!r}", value=repr(value))


def parse_base(base: Union[int, str]) -> int:
    """Parse and range-check a radix."""
    value = None
    if isinstance(base, int) and not isinstance(base, bool):
        value = base
    elif isinstance(base, str) and _DECIMAL_RE.fullmatch(base.strip()):
        value = int(base.strip())
    if value is None:
        raise InvalidBase(f"Base {base!r} is not an integer", base=repr(base))
    if not MIN_BASE <= value <= MAX_BASE:
        raise InvalidBase(
            f"Base {value} outside supported range [{MIN_BASE}, {MAX_BASE}]",
            base=value,
        )
    return value


def digit_value(ch: str, base: int) -> int:
    """Value of a single digit character in *base*."""
    value = _DIGIT_VALUES.get(ch.lower())
    if value is None or value >= base:
        raise InvalidDigit(f"{ch!r} is not a digit in base {base}", digit=ch, base=base)
    return value


def decode(identifier: Union[int, str], base: Union[int, str], digits: str) -> int:
    """Decode *digits* in radix *base*; returns the y-value of share *identifier*."""
    x = parse_identifier(identifier)
    b = parse_base(base)
    if not isinstance(digits, str) or not digits:
        raise InvalidDigit(
            f"Share {x}: empty or non-string digit payload {digits!r}",
            identifier=x,
            base=b,
            digits=repr(digits),
        )

    result = 0
    for pos, ch in enumerate(digits):
        try:
            d = digit_value(ch, b)
        except InvalidDigit:
            raise InvalidDigit(
                f"Share {x}: {ch!r} at position {pos} is not a digit in base {b}",
                identifier=x,
                base=b,
                digits=digits,
                position=pos,
            ) from None
        result = result * b + d
    return result


def decode_share(identifier: Union[int, str], base: Union[int, str], digits: str) -> Share:
    """Decode a full share entry into a ``Share`` point."""
    return Share(parse_identifier(identifier), decode(identifier, base, digits))
