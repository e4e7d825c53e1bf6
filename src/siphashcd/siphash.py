from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import List, MutableSequence, Union

_MASK_64 = 0xFFFFFFFFFFFFFFFF
_BLOCK_SIZE = 8

# "somepseudorandomlygeneratedbytes"
_C0 = 0x736F6D6570736575
_C1 = 0x646F72616E646F6D
_C2 = 0x6C7967656E657261
_C3 = 0x7465646279746573


class ContextFinalizedError(RuntimeError):
    """Raised when a finalized (and wiped) context is used again."""


def _rotl(x: int, b: int) -> int:
    """Rotate left for 64-bit values."""
    return ((x << b) | (x >> (64 - b))) & _MASK_64


def sip_rounds(v: MutableSequence[int], rounds: int) -> None:
    """
    Apply the SipRound permutation ``rounds`` times to ``v`` in place.

    ``v`` holds the four accumulator words v0..v3. Additions wrap modulo 2**64.
    """
    v0, v1, v2, v3 = v
    for _ in range(rounds):
        v0 = (v0 + v1) & _MASK_64
        v2 = (v2 + v3) & _MASK_64
        v1 = _rotl(v1, 13)
        v3 = _rotl(v3, 16)

        v1 ^= v0
        v3 ^= v2
        v0 = _rotl(v0, 32)

        v2 = (v2 + v1) & _MASK_64
        v0 = (v0 + v3) & _MASK_64
        v1 = _rotl(v1, 17)
        v3 = _rotl(v3, 21)

        v1 ^= v2
        v3 ^= v0
        v2 = _rotl(v2, 32)
    v[0], v[1], v[2], v[3] = v0, v1, v2, v3


def _check_rounds(name: str, rounds: int) -> int:
    if isinstance(rounds, bool) or not isinstance(rounds, int):
        raise ValueError(f"{name} must be a positive integer, got {rounds!r}")
    if rounds < 1:
        raise ValueError(f"{name} must be a positive integer, got {rounds}")
    return rounds


def _as_bytes(data, what: str) -> memoryview:
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(f"{what} must be bytes-like")
    view = memoryview(data)
    if not view.contiguous:
        view = memoryview(view.tobytes())
    return view.cast("B")


@dataclass(frozen=True)
class SipHashKey:
    """128-bit SipHash key held as two 64-bit words."""

    k0: int
    k1: int

    def __post_init__(self):
        for name in ("k0", "k1"):
            word = getattr(self, name)
            if not isinstance(word, int) or not 0 <= word <= _MASK_64:
                raise ValueError(f"{name} must be an unsigned 64-bit integer")

    @classmethod
    def from_bytes(cls, key) -> "SipHashKey":
        """Decode a 16-byte little-endian key."""
        raw = _as_bytes(key, "key")
        if raw.nbytes != 16:
            raise ValueError("SipHash key must be exactly 16 bytes")
        k0, k1 = struct.unpack("<QQ", raw)
        return cls(k0, k1)

    def to_bytes(self) -> bytes:
        return struct.pack("<QQ", self.k0, self.k1)

    def __repr__(self) -> str:
        # Keep key material out of reprs and tracebacks.
        return "SipHashKey(<redacted>)"


KeyLike = Union[SipHashKey, bytes, bytearray, memoryview]


def _coerce_key(key: KeyLike) -> SipHashKey:
    if isinstance(key, SipHashKey):
        return key
    return SipHashKey.from_bytes(key)


class SipHashContext:
    """
    Streaming SipHash-c-d state.

    The round counts are supplied to every call rather than stored, so one
    context type serves every SipHash variant. A context is consumed by
    :meth:`finalize`, which wipes it; only :meth:`init` makes it usable again.
    """

    __slots__ = ("_v", "_buf", "_bytes", "_finalized")

    def __init__(self, key: KeyLike):
        self._v: List[int] = [0, 0, 0, 0]
        self._buf = bytearray(_BLOCK_SIZE)
        self._bytes = 0
        self._finalized = False
        self.init(key)

    def init(self, key: KeyLike) -> None:
        k = _coerce_key(key)
        self._v[0] = _C0 ^ k.k0
        self._v[1] = _C1 ^ k.k1
        self._v[2] = _C2 ^ k.k0
        self._v[3] = _C3 ^ k.k1
        self._buf[:] = bytes(_BLOCK_SIZE)
        self._bytes = 0
        self._finalized = False

    def copy(self) -> "SipHashContext":
        self._check_live()
        dup = self.__class__.__new__(self.__class__)
        dup._v = list(self._v)
        dup._buf = bytearray(self._buf)
        dup._bytes = self._bytes
        dup._finalized = False
        return dup

    @property
    def finalized(self) -> bool:
        return self._finalized

    def update(self, c: int, data) -> None:
        """Absorb ``data``, compressing every complete 8-byte block with ``c`` rounds."""
        self._check_live()
        _check_rounds("c", c)
        src = _as_bytes(data, "data")
        length = len(src)
        if length == 0:
            return

        used = self._bytes % _BLOCK_SIZE
        self._bytes += length
        offset = 0

        if used > 0:
            free = _BLOCK_SIZE - used
            if length < free:
                self._buf[used : used + length] = src
                return
            self._buf[used:] = src[:free]
            self._compress(c, struct.unpack("<Q", self._buf)[0])
            offset = free

        end = offset + ((length - offset) & ~(_BLOCK_SIZE - 1))
        for idx in range(offset, end, _BLOCK_SIZE):
            self._compress(c, struct.unpack_from("<Q", src, idx)[0])

        rest = length - end
        if rest:
            self._buf[:rest] = src[end:]

    def finalize(self, c: int, d: int) -> int:
        """Pad, run the finalization rounds, wipe the context and return the digest."""
        self._check_live()
        _check_rounds("c", c)
        _check_rounds("d", d)

        used = self._bytes % _BLOCK_SIZE
        self._buf[used : _BLOCK_SIZE - 1] = bytes(_BLOCK_SIZE - 1 - used)
        self._buf[7] = self._bytes & 0xFF

        self._compress(c, struct.unpack("<Q", self._buf)[0])
        self._v[2] ^= 0xFF
        sip_rounds(self._v, d)

        v0, v1, v2, v3 = self._v
        result = (v0 ^ v1) ^ (v2 ^ v3)
        self.wipe()
        return result

    def final(self, c: int, d: int) -> bytes:
        """Like :meth:`finalize`, with the digest encoded as 8 little-endian bytes."""
        return struct.pack("<Q", self.finalize(c, d))

    def wipe(self) -> None:
        """
        Overwrite the accumulator, pending buffer and length with zeros in place.

        Call this when abandoning a context without finalizing it. The context
        is dead afterwards until :meth:`init` is called.
        """
        for idx in range(4):
            self._v[idx] = 0
        self._buf[:] = bytes(_BLOCK_SIZE)
        self._bytes = 0
        self._finalized = True

    # Internal helpers -------------------------------------------------
    def _compress(self, c: int, m: int) -> None:
        self._v[3] ^= m
        sip_rounds(self._v, c)
        self._v[0] ^= m

    def _check_live(self) -> None:
        if self._finalized:
            raise ContextFinalizedError(
                "SipHash context was finalized; call init() before reusing it"
            )


def siphash(key: KeyLike, c: int, d: int, data) -> int:
    """One-shot SipHash-c-d of ``data``, returned as an unsigned 64-bit integer."""
    ctx = SipHashContext(key)
    ctx.update(c, data)
    return ctx.finalize(c, d)


class SipHash:
    """
    hashlib-style SipHash-c-d object with a streaming API.

    Digests are computed on a copy of the running state, so ``update`` may
    continue after ``digest``.
    """

    digest_size = 8
    block_size = _BLOCK_SIZE

    def __init__(self, key: KeyLike, c: int = 2, d: int = 4, data=b""):
        self._c = _check_rounds("c", c)
        self._d = _check_rounds("d", d)
        self._ctx = SipHashContext(key)
        self.update(data)

    @property
    def name(self) -> str:
        return f"siphash-{self._c}-{self._d}"

    @property
    def rounds(self):
        return self._c, self._d

    def copy(self) -> "SipHash":
        dup = self.__class__.__new__(self.__class__)
        dup._c = self._c
        dup._d = self._d
        dup._ctx = self._ctx.copy()
        return dup

    def update(self, data) -> "SipHash":
        self._ctx.update(self._c, data)
        return self

    def intdigest(self) -> int:
        return self._ctx.copy().finalize(self._c, self._d)

    def digest(self) -> bytes:
        return struct.pack("<Q", self.intdigest())

    def hexdigest(self) -> str:
        return self.digest().hex()


def siphash24(key: KeyLike, data=b"") -> SipHash:
    """Convenience constructor matching hashlib-style usage."""
    return SipHash(key, 2, 4, data)


def siphash13(key: KeyLike, data=b"") -> SipHash:
    """SipHash-1-3 counterpart of :func:`siphash24`."""
    return SipHash(key, 1, 3, data)


__all__ = [
    "ContextFinalizedError",
    "SipHash",
    "SipHashContext",
    "SipHashKey",
    "sip_rounds",
    "siphash",
    "siphash13",
    "siphash24",
]
