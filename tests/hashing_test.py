import pytest

from chaintable.datastructures.hashing import GOLDEN_RATIO_FRACTION, bucket_index, polynomial_hash


def test_polynomial_hash_known_values():
    assert polynomial_hash("") == 0
    assert polynomial_hash("a") == 97
    assert polynomial_hash("ab") == 97 * 31 + 98


def test_polynomial_hash_wraps_to_32_bits():
    key = "z" * 200
    acc = 0
    for ch in key:
        acc = acc * 31 + ord(ch)
    assert polynomial_hash(key) == acc % 2 ** 32
    assert polynomial_hash(key) < 2 ** 32


def test_polynomial_hash_uses_utf8_bytes():
    # "é" encodes to two bytes: 0xC3 0xA9
    assert polynomial_hash("é") == 0xC3 * 31 + 0xA9


def test_golden_ratio_fraction():
    assert GOLDEN_RATIO_FRACTION == pytest.approx(0.6180339887)


def test_bucket_index_known_value():
    # 97 * 0.618033... = 59.949..., frac * 10 = 9.49...
    assert bucket_index("a", 10) == 9
    assert bucket_index("", 10) == 0


def test_bucket_index_is_deterministic_and_in_range():
    for capacity in (1, 2, 7, 10, 20, 1024):
        for i in range(200):
            key = f"key{i}"
            idx = bucket_index(key, capacity)
            assert 0 <= idx < capacity
            assert bucket_index(key, capacity) == idx


def test_bucket_index_is_case_sensitive():
    assert polynomial_hash("Bob") != polynomial_hash("bob")


def test_bucket_index_rejects_bad_input():
    with pytest.raises(ValueError):
        bucket_index("a", 0)
    with pytest.raises(TypeError):
        bucket_index(b"a", 10)
