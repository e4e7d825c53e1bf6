"""
Streaming, keyed SipHash-c-d for Python.
"""

from .siphash import (
    ContextFinalizedError,
    SipHash,
    SipHashContext,
    SipHashKey,
    sip_rounds,
    siphash,
    siphash13,
    siphash24,
)
from .variants import SIPHASH_1_3, SIPHASH_2_4, SipHashVariant, get_variant
from .vectorized import (
    hash_arrow_array,
    hash_pandas_series,
    hash_polars_series,
)

__all__ = [
    "ContextFinalizedError",
    "SIPHASH_1_3",
    "SIPHASH_2_4",
    "SipHash",
    "SipHashContext",
    "SipHashKey",
    "SipHashVariant",
    "get_variant",
    "sip_rounds",
    "siphash",
    "siphash13",
    "siphash24",
    "hash_arrow_array",
    "hash_pandas_series",
    "hash_polars_series",
]
