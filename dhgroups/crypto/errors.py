"""Exceptions raised by the group catalogue, elements and generator search."""

from __future__ import annotations


class DHGroupError(Exception):
	"""Base class for every error this package raises on purpose."""


class InvalidGroupSelection(DHGroupError, ValueError):
	"""An unknown catalogue identifier was requested."""


class IncompatibleGroupOperation(DHGroupError, TypeError):
	"""Two elements bound to different groups were combined or compared."""


class GeneratorSearchExhausted(DHGroupError, RuntimeError):
	"""No qualifying subgroup generator was found within the retry ceiling."""

	def __init__(self, message: str, attempts: int = 0, generator_bits: int = 0) -> None:
		super().__init__(message)
		self.attempts = attempts
		self.generator_bits = generator_bits


__all__ = [
	"DHGroupError",
	"InvalidGroupSelection",
	"IncompatibleGroupOperation",
	"GeneratorSearchExhausted",
]
