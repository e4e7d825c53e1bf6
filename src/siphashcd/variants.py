from __future__ import annotations

import re
from dataclasses import dataclass

from .siphash import KeyLike, SipHash, _check_rounds, siphash

_GENERIC_NAME = re.compile(r"^siphash-?(\d+)-(\d+)$")
_SHORT_NAME = re.compile(r"^siphash(\d)(\d)$")


@dataclass(frozen=True)
class SipHashVariant:
    """A named SipHash-c-d round parameterization."""

    name: str
    c: int
    d: int

    def __post_init__(self):
        _check_rounds("c", self.c)
        _check_rounds("d", self.d)

    def new(self, key: KeyLike, data=b"") -> SipHash:
        return SipHash(key, self.c, self.d, data)

    def hash(self, key: KeyLike, data) -> int:
        return siphash(key, self.c, self.d, data)


SIPHASH_2_4 = SipHashVariant("siphash24", 2, 4)
SIPHASH_1_3 = SipHashVariant("siphash13", 1, 3)

_KNOWN = {v.name: v for v in (SIPHASH_2_4, SIPHASH_1_3)}


def get_variant(name: str) -> SipHashVariant:
    """
    Look up a variant by name.

    Args:
        name: "siphash24", "siphash13", or the generic "siphash-C-D" form

    Returns:
        The matching SipHashVariant.

    Raises:
        ValueError: If the name is not recognized
        TypeError: If name is not a str
    """
    if not isinstance(name, str):
        raise TypeError(f"variant name must be a str, got {type(name)!r}")
    normalized = name.strip().lower()
    if normalized in _KNOWN:
        return _KNOWN[normalized]
    match = _GENERIC_NAME.match(normalized) or _SHORT_NAME.match(normalized)
    if match is None:
        raise ValueError(f"Unsupported algorithm: {name}")
    c, d = int(match.group(1)), int(match.group(2))
    for variant in _KNOWN.values():
        if (variant.c, variant.d) == (c, d):
            return variant
    return SipHashVariant(f"siphash-{c}-{d}", c, d)


__all__ = ["SIPHASH_1_3", "SIPHASH_2_4", "SipHashVariant", "get_variant"]
