from __future__ import annotations

import logging
import os
import random
import sys
from contextlib import contextmanager
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from dhgroups.common import config
from dhgroups.crypto.errors import GeneratorSearchExhausted
from dhgroups.crypto.primegroup import PrimeGroup


@contextmanager
def env(name: str, value: str | None):
    old = os.environ.get(name)
    if value is None:
        os.environ.pop(name, None)
    else:
        os.environ[name] = value
    try:
        yield
    finally:
        if old is None:
            os.environ.pop(name, None)
        else:
            os.environ[name] = old


def test_default_max_attempts() -> None:
    with env("DHGROUPS_MAX_GENERATOR_ATTEMPTS", None):
        assert config.max_generator_attempts() == config.DEFAULT_MAX_GENERATOR_ATTEMPTS


def test_max_attempts_from_env() -> None:
    with env("DHGROUPS_MAX_GENERATOR_ATTEMPTS", " 25 "):
        assert config.max_generator_attempts() == 25


def test_bad_max_attempts_is_reported() -> None:
    for bad in ("zero", "-3", "0", "1.5", "1\u00b2", "\u0661\u0662"):
        with env("DHGROUPS_MAX_GENERATOR_ATTEMPTS", bad):
            try:
                config.max_generator_attempts()
            except RuntimeError as e:
                assert "DHGROUPS_MAX_GENERATOR_ATTEMPTS" in str(e)
                continue
            raise AssertionError(f"{bad!r} accepted")


def test_search_uses_configured_ceiling() -> None:
    class Stuck:
        calls = 0

        def randrange(self, start: int, stop: int) -> int:
            Stuck.calls += 1
            return 2  # 2^2 = 4 has only 3 bits

    with env("DHGROUPS_MAX_GENERATOR_ATTEMPTS", "3"):
        try:
            PrimeGroup.from_safe_prime(23, 4, rng=Stuck())
        except GeneratorSearchExhausted as e:
            assert e.attempts == 3
            assert Stuck.calls == 3
        else:
            raise AssertionError("expected GeneratorSearchExhausted")


def test_explicit_ceiling_wins_over_env() -> None:
    with env("DHGROUPS_MAX_GENERATOR_ATTEMPTS", "not-a-number"):
        pg = PrimeGroup.from_safe_prime(23, 2, rng=random.Random(0), max_attempts=50)
        assert pg.contains(pg.g)


def test_log_level() -> None:
    with env("DHGROUPS_LOG_LEVEL", None):
        assert config.log_level() == logging.WARNING
    with env("DHGROUPS_LOG_LEVEL", "debug"):
        assert config.log_level() == logging.DEBUG
    with env("DHGROUPS_LOG_LEVEL", "chatty"):
        try:
            config.log_level()
        except RuntimeError:
            pass
        else:
            raise AssertionError("unknown level accepted")


def test_configure_logging_attaches_one_handler() -> None:
    with env("DHGROUPS_LOG_LEVEL", "INFO"):
        config.configure_logging()
        config.configure_logging()
    logger = logging.getLogger("dhgroups")
    assert logger.level == logging.INFO
    assert len(logger.handlers) == 1


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
