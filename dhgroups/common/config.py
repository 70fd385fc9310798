"""
Runtime settings for the dhgroups package.

Environment variables (loaded via python-dotenv when available):
- DHGROUPS_MAX_GENERATOR_ATTEMPTS  retry ceiling of the subgroup generator search (default 1000)
- DHGROUPS_LOG_LEVEL               level applied by configure_logging() (default WARNING)
"""

from __future__ import annotations

import logging
import os

try:
	from dotenv import load_dotenv

	load_dotenv()  # best-effort – ok if .env is missing
except Exception:
	pass


DEFAULT_MAX_GENERATOR_ATTEMPTS = 1000
DEFAULT_LOG_LEVEL = "WARNING"


def max_generator_attempts() -> int:
	raw = os.getenv("DHGROUPS_MAX_GENERATOR_ATTEMPTS")
	if raw is None or raw.strip() == "":
		return DEFAULT_MAX_GENERATOR_ATTEMPTS
	raw = raw.strip()
	if not (raw.isascii() and raw.isdecimal()) or int(raw) < 1:
		raise RuntimeError(f"DHGROUPS_MAX_GENERATOR_ATTEMPTS must be a positive integer, got {raw!r}")
	return int(raw)


def log_level() -> int:
	name = (os.getenv("DHGROUPS_LOG_LEVEL") or DEFAULT_LOG_LEVEL).strip().upper()
	level = logging.getLevelName(name)
	if not isinstance(level, int):
		raise RuntimeError(f"DHGROUPS_LOG_LEVEL is not a logging level: {name!r}")
	return level


def configure_logging() -> None:
	"""Attach a stderr handler to the package logger at the configured level."""
	logger = logging.getLogger("dhgroups")
	logger.setLevel(log_level())
	if not logger.handlers:
		handler = logging.StreamHandler()
		handler.setFormatter(logging.Formatter("[%(levelname)s] %(name)s: %(message)s"))
		logger.addHandler(handler)


__all__ = [
	"DEFAULT_MAX_GENERATOR_ATTEMPTS",
	"max_generator_attempts",
	"log_level",
	"configure_logging",
]
