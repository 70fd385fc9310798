from __future__ import annotations

import random
import sys
import warnings
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from cryptography.utils import CryptographyDeprecationWarning

from dhgroups.crypto.element import Element
from dhgroups.crypto.errors import GeneratorSearchExhausted
from dhgroups.crypto.group import ModpGroupId, lookup
from dhgroups.crypto.primegroup import PrimeGroup


class FixedRandom:
    """randrange() stub that always returns the same candidate and records calls."""

    def __init__(self, value: int) -> None:
        self.value = value
        self.calls: list[tuple[int, int]] = []

    def randrange(self, start: int, stop: int) -> int:
        self.calls.append((start, stop))
        return self.value


def test_generator_of_128_bits_in_modp_2048() -> None:
    g = lookup(ModpGroupId.MODP_2048)
    pg = PrimeGroup.from_modp_group(g, 128)
    assert pg.p == g.modulus
    assert pg.q == (g.modulus - 1) // 2
    assert pg.g != 1
    assert pg.g.bit_length() >= 128
    assert Element.from_value(g, pg.g).pow(pg.q) == Element.from_value(g, 1)
    assert pg.contains(pg.g)


def test_search_with_seeded_rng_is_reproducible() -> None:
    a = PrimeGroup.from_modp_group(5, 256, rng=random.Random(7))
    b = PrimeGroup.from_modp_group(5, 256, rng=random.Random(7))
    assert a == b
    assert pow(a.g, a.q, a.p) == 1


def test_full_length_generator() -> None:
    g = lookup(5)
    pg = PrimeGroup.from_modp_group(g, g.bit_length, rng=random.Random(11))
    assert pg.g.bit_length() == g.bit_length


def test_candidates_drawn_from_two_to_p_minus_two() -> None:
    g = lookup(5)
    rng = FixedRandom(3)
    pg = PrimeGroup.from_modp_group(g, 2, rng=rng)
    assert rng.calls == [(2, g.modulus - 1)]
    assert pg.g == 9


def test_small_safe_prime() -> None:
    pg = PrimeGroup.from_safe_prime(23, 3, rng=random.Random(1))
    assert (pg.p, pg.q) == (23, 11)
    assert pg.g in {4, 6, 8, 9, 12, 13, 16, 18}
    assert pg.contains(pg.g)
    assert not pg.contains(22)
    assert not pg.contains(0)
    assert not pg.contains(23)


def test_trivial_square_is_rejected() -> None:
    # (p - 1)^2 = 1 mod p, so a source stuck on p - 1 can never succeed
    rng = FixedRandom(22)
    try:
        PrimeGroup.from_safe_prime(23, 1, rng=rng, max_attempts=4)
    except GeneratorSearchExhausted as e:
        assert e.attempts == 4
        assert len(rng.calls) == 4
    else:
        raise AssertionError("h == 1 must be rejected")


def test_too_many_bits_fails_fast() -> None:
    g = lookup(5)
    rng = FixedRandom(3)
    try:
        PrimeGroup.from_modp_group(g, g.bit_length + 1, rng=rng)
    except GeneratorSearchExhausted as e:
        assert e.attempts == 0
        assert e.generator_bits == g.bit_length + 1
        assert rng.calls == []
    else:
        raise AssertionError("expected GeneratorSearchExhausted")


def test_search_gives_up_after_max_attempts() -> None:
    g = lookup(14)
    rng = FixedRandom(2)  # 2^2 = 4 has only 3 bits
    try:
        PrimeGroup.from_modp_group(g, 64, rng=rng, max_attempts=5)
    except GeneratorSearchExhausted as e:
        assert e.attempts == 5
        assert "5 attempts" in str(e)
        assert len(rng.calls) == 5
    else:
        raise AssertionError("expected GeneratorSearchExhausted")


def test_exhausted_is_a_runtime_error() -> None:
    try:
        PrimeGroup.from_safe_prime(23, 6)
    except RuntimeError:
        return
    raise AssertionError("expected RuntimeError subclass")


def test_invalid_arguments() -> None:
    cases = [
        lambda: PrimeGroup.from_modp_group(14, 0),
        lambda: PrimeGroup.from_modp_group(14, -5),
        lambda: PrimeGroup.from_safe_prime(24, 3),
        lambda: PrimeGroup.from_safe_prime(3, 1),
        lambda: PrimeGroup.from_safe_prime(23, 3, max_attempts=0),
        lambda: PrimeGroup.from_safe_prime(23, 3, max_attempts=2.5),
        lambda: PrimeGroup.from_safe_prime(23, 3, max_attempts="10"),
        lambda: PrimeGroup.from_safe_prime(23, 3, max_attempts=True),
    ]
    for case in cases:
        try:
            case()
        except ValueError:
            continue
        raise AssertionError("invalid argument accepted")


def test_to_dh_parameters_carries_subgroup() -> None:
    pg = PrimeGroup.from_modp_group(14, 128, rng=random.Random(3))
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", CryptographyDeprecationWarning)
        nums = pg.to_dh_parameters().parameter_numbers()
    assert (nums.p, nums.g, nums.q) == (pg.p, pg.g, pg.q)


def test_prime_group_is_immutable() -> None:
    pg = PrimeGroup.from_safe_prime(23, 2, rng=random.Random(5))
    try:
        pg.g = 2  # type: ignore[misc]
    except AttributeError:
        return
    raise AssertionError("PrimeGroup should be frozen")


def main() -> int:
    tests = [v for k, v in sorted(globals().items()) if k.startswith("test_") and callable(v)]
    failed = 0
    for t in tests:
        try:
            t()
            print(f"[OK] {t.__name__}")
        except Exception as e:
            failed += 1
            print(f"[ERROR] {t.__name__}: {e!r}")
    return 1 if failed else 0


if __name__ == "__main__":
    raise SystemExit(main())
