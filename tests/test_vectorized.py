import pytest

from siphashcd import siphash

KEY = bytes(range(16))
VALUES = [b"", b"\x00", "café"]
EXPECTED = [
    0x726FDB47DD0E0E31,
    0x74F839C593DC67FD,
    siphash(KEY, 2, 4, "café".encode("utf-8")),
]


def test_pandas_series():
    pd = pytest.importorskip("pandas")
    from siphashcd import hash_pandas_series

    series = pd.Series(VALUES, index=[10, 20, 30], dtype=object)
    result = hash_pandas_series(series, KEY)
    assert str(result.dtype) == "uint64"
    assert list(result.index) == [10, 20, 30]
    assert [int(x) for x in result] == EXPECTED


def test_pandas_rejects_nulls():
    pd = pytest.importorskip("pandas")
    from siphashcd import hash_pandas_series

    with pytest.raises(TypeError):
        hash_pandas_series(pd.Series([b"a", None], dtype=object), KEY)


def test_arrow_array():
    pa = pytest.importorskip("pyarrow")
    from siphashcd import hash_arrow_array

    result = hash_arrow_array(pa.array([b"", b"\x00"]), KEY)
    assert result.type == pa.uint64()
    assert result.to_pylist() == EXPECTED[:2]
    assert hash_arrow_array(["café"], KEY, algo="siphash24").to_pylist() == EXPECTED[2:]


def test_polars_series():
    pl = pytest.importorskip("polars")
    from siphashcd import hash_polars_series

    result = hash_polars_series(pl.Series("payload", [b"", b"\x00"]), KEY)
    assert result.dtype == pl.UInt64
    assert result.name == "payload"
    assert result.to_list() == EXPECTED[:2]


def test_variant_selection():
    pa = pytest.importorskip("pyarrow")
    from siphashcd import hash_arrow_array

    result = hash_arrow_array([b"x"], KEY, algo="siphash13")
    assert result.to_pylist() == [siphash(KEY, 1, 3, b"x")]
    with pytest.raises(ValueError):
        hash_arrow_array([b"x"], KEY, algo="unknown")
