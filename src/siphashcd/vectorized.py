from __future__ import annotations

from typing import Any, List

from .siphash import KeyLike, SipHashKey, _coerce_key
from .variants import SipHashVariant, get_variant


def _element_bytes(value: Any):
    if isinstance(value, (bytes, bytearray, memoryview)):
        return value
    if isinstance(value, str):
        return value.encode("utf-8")
    if value is None:
        raise TypeError("Cannot hash a null element")
    raise TypeError(f"Unsupported element type for hashing: {type(value)!r}")


def _hash_all(values, key: SipHashKey, variant: SipHashVariant) -> List[int]:
    return [variant.hash(key, _element_bytes(val)) for val in values]


def hash_pandas_series(series: Any, key: KeyLike, algo: str = "siphash24"):
    """
    Hash a pandas Series of bytes or str into a uint64 Series.
    """
    try:
        import pandas as pd  # type: ignore
    except ModuleNotFoundError as exc:  # pragma: no cover - optional dependency
        raise ImportError(
            "Install pandas to use hash_pandas_series: pip install pandas"
        ) from exc

    hashes = _hash_all(series, _coerce_key(key), get_variant(algo))
    return pd.Series(hashes, index=getattr(series, "index", None), dtype="uint64")


def hash_arrow_array(array: Any, key: KeyLike, algo: str = "siphash24"):
    """
    Hash a pyarrow Array (or values coercible to one) into a uint64 Array.
    """
    try:
        import pyarrow as pa  # type: ignore
    except ModuleNotFoundError as exc:  # pragma: no cover - optional dependency
        raise ImportError(
            "Install pyarrow to use hash_arrow_array: pip install pyarrow"
        ) from exc

    arr = array if hasattr(array, "to_pylist") else pa.array(array)
    hashes = _hash_all(arr.to_pylist(), _coerce_key(key), get_variant(algo))
    return pa.array(hashes, type=pa.uint64())


def hash_polars_series(series: Any, key: KeyLike, algo: str = "siphash24"):
    """
    Hash a polars Series of bytes or str into a UInt64 Series.
    """
    try:
        import polars as pl  # type: ignore
    except ModuleNotFoundError as exc:  # pragma: no cover - optional dependency
        raise ImportError(
            "Install polars to use hash_polars_series: pip install polars"
        ) from exc

    ser = series if hasattr(series, "dtype") else pl.Series(series)
    hashes = _hash_all(ser.to_list(), _coerce_key(key), get_variant(algo))
    name = getattr(ser, "name", None) or "hash"
    return pl.Series(name=name, values=hashes, dtype=pl.UInt64)


__all__ = ["hash_arrow_array", "hash_pandas_series", "hash_polars_series"]
