"""
Prime-order subgroup of a safe-prime MODP group, with a freshly searched generator.

For a safe prime p = 2q + 1 the group Z_p* has order 2q. Squaring any
element c in [2, p - 2] lands in the subgroup of order q, so the search
draws c, squares it and keeps h = c^2 mod p unless h is 1 or shorter
than the requested number of bits.

Preconditions (documented, not verified):
- p is a safe prime; only cheap structural checks are made.
- The random source is cryptographically suitable when the group will be
  used for key exchange. The default is secrets.SystemRandom().
"""

from __future__ import annotations

import logging
import secrets
from dataclasses import dataclass
from typing import Any, Optional

from cryptography.hazmat.primitives.asymmetric import dh

from dhgroups.common import config
from dhgroups.crypto.errors import GeneratorSearchExhausted
from dhgroups.crypto.group import GroupParameters, GroupSelector, lookup

logger = logging.getLogger(__name__)


def _search_generator(p: int, generator_bits: int, rng: Any, max_attempts: int) -> int:
	if generator_bits > p.bit_length():
		logger.warning("requested %d-bit generator exceeds %d-bit modulus", generator_bits, p.bit_length())
		raise GeneratorSearchExhausted(
			f"no generator of {generator_bits} bits exists below a {p.bit_length()}-bit modulus",
			attempts=0,
			generator_bits=generator_bits,
		)

	for attempt in range(1, max_attempts + 1):
		c = rng.randrange(2, p - 1)
		h = pow(c, 2, p)
		if h == 1 or h.bit_length() < generator_bits:
			logger.debug("attempt %d rejected (%d bits)", attempt, h.bit_length())
			continue
		logger.info("found %d-bit generator of the order-q subgroup after %d attempt(s)", h.bit_length(), attempt)
		return h

	logger.warning("generator search gave up after %d attempts (wanted >= %d bits)", max_attempts, generator_bits)
	raise GeneratorSearchExhausted(
		f"no suitable generator found in {max_attempts} attempts (wanted >= {generator_bits} bits)",
		attempts=max_attempts,
		generator_bits=generator_bits,
	)


@dataclass(frozen=True)
class PrimeGroup:
	"""Subgroup of prime order q of Z_p*, where p = 2q + 1 and g^q mod p = 1."""

	p: int
	q: int
	g: int

	@classmethod
	def from_modp_group(
		cls,
		group: GroupParameters | GroupSelector,
		generator_bits: int,
		rng: Any = None,
		max_attempts: Optional[int] = None,
	) -> "PrimeGroup":
		"""Search a generator of at least `generator_bits` bits inside a catalogue group.

		`rng` is anything with randrange(start, stop); `max_attempts` falls
		back to DHGROUPS_MAX_GENERATOR_ATTEMPTS.
		Raises GeneratorSearchExhausted if nothing qualifies.
		"""
		params = group if isinstance(group, GroupParameters) else lookup(group)
		return cls.from_safe_prime(params.modulus, generator_bits, rng=rng, max_attempts=max_attempts)

	@classmethod
	def from_safe_prime(
		cls,
		p: int,
		generator_bits: int,
		rng: Any = None,
		max_attempts: Optional[int] = None,
	) -> "PrimeGroup":
		"""Same search for a caller-supplied safe prime p."""
		if isinstance(p, bool) or not isinstance(p, int):
			raise TypeError("p must be an int")
		if p < 5 or p % 2 == 0:
			raise ValueError("p must be an odd safe prime >= 5")
		if isinstance(generator_bits, bool) or not isinstance(generator_bits, int) or generator_bits < 1:
			raise ValueError("generator_bits must be a positive integer")
		if max_attempts is None:
			max_attempts = config.max_generator_attempts()
		if isinstance(max_attempts, bool) or not isinstance(max_attempts, int) or max_attempts < 1:
			raise ValueError("max_attempts must be a positive integer")
		if rng is None:
			rng = secrets.SystemRandom()

		q = (p - 1) // 2
		g = _search_generator(p, generator_bits, rng, max_attempts)
		return cls(p=p, q=q, g=g)

	def contains(self, value: int) -> bool:
		"""True if value is a member of the order-q subgroup."""
		if not 0 < value < self.p:
			return False
		return pow(value, self.q, self.p) == 1

	def to_dh_parameters(self) -> dh.DHParameters:
		"""(p, g, q) as `cryptography` DHParameters.

		Recent `cryptography` releases flag finite-field DH with a
		CryptographyDeprecationWarning when the parameters are built.
		"""
		return dh.DHParameterNumbers(self.p, self.g, q=self.q).parameters()

	def __repr__(self) -> str:
		return f"PrimeGroup(p=<{self.p.bit_length()} bits>, q=<{self.q.bit_length()} bits>, g=<{self.g.bit_length()} bits>)"


__all__ = ["PrimeGroup"]
