"""Elements of a MODP group: values reduced mod p, bound to one catalogue group.

Only multiplication and exponentiation are offered. An element remembers
which group it belongs to, and mixing elements of two groups raises
IncompatibleGroupOperation instead of producing a value.
"""

from __future__ import annotations

from dhgroups.crypto.errors import IncompatibleGroupOperation
from dhgroups.crypto.group import GroupParameters, GroupSelector, lookup


def _as_group(group: GroupParameters | GroupSelector) -> GroupParameters:
	if isinstance(group, GroupParameters):
		return group
	return lookup(group)


def _check_unsigned(name: str, v: int) -> int:
	if isinstance(v, bool) or not isinstance(v, int):
		raise TypeError(f"{name} must be an int, got {type(v).__name__}")
	if v < 0:
		raise ValueError(f"{name} must be non-negative")
	return v


class Element:
	"""Immutable value 0 <= value < p of a specific MODP group."""

	__slots__ = ("_group", "_value")

	def __init__(self, group: GroupParameters | GroupSelector, value: int) -> None:
		g = _as_group(group)
		object.__setattr__(self, "_group", g)
		object.__setattr__(self, "_value", _check_unsigned("value", value) % g.modulus)

	def __setattr__(self, name, value):
		raise AttributeError("Element is immutable")

	def __reduce__(self):
		return (Element, (self._group, self._value))

	# ---------- Constructors ----------

	@classmethod
	def from_value(cls, group: GroupParameters | GroupSelector, value: int) -> "Element":
		return cls(group, value)

	@classmethod
	def identity(cls, group: GroupParameters | GroupSelector) -> "Element":
		return cls(group, 1)

	@classmethod
	def generator(cls, group: GroupParameters | GroupSelector) -> "Element":
		g = _as_group(group)
		return cls(g, g.generator)

	@classmethod
	def from_exponent(cls, group: GroupParameters | GroupSelector, exponent: int) -> "Element":
		"""g^exponent mod p for the group's standard generator, i.e. a DH public value."""
		return cls.generator(group).pow(exponent)

	# ---------- Accessors ----------

	@property
	def group(self) -> GroupParameters:
		return self._group

	@property
	def value(self) -> int:
		return self._value

	# ---------- Arithmetic ----------

	def _same_group(self, other: "Element") -> None:
		if self._group.group_id != other._group.group_id:
			raise IncompatibleGroupOperation(
				f"cannot combine elements of {self._group.name} and {other._group.name}"
			)

	def multiply(self, other: "Element") -> "Element":
		if not isinstance(other, Element):
			raise TypeError(f"cannot multiply Element by {type(other).__name__}")
		self._same_group(other)
		return Element(self._group, (self._value * other._value) % self._group.modulus)

	def pow(self, exponent: int) -> "Element":
		"""self^exponent mod p; exponent 0 gives the identity, also for a zero base."""
		e = _check_unsigned("exponent", exponent)
		# three-argument pow is square-and-multiply, reducing after each step
		return Element(self._group, pow(self._value, e, self._group.modulus))

	def equals(self, other: "Element") -> bool:
		if not isinstance(other, Element):
			raise TypeError(f"cannot compare Element with {type(other).__name__}")
		self._same_group(other)
		return self._value == other._value

	# ---------- Python protocol ----------

	def __mul__(self, other):
		if not isinstance(other, Element):
			return NotImplemented
		return self.multiply(other)

	def __pow__(self, exponent):
		if isinstance(exponent, bool) or not isinstance(exponent, int):
			return NotImplemented
		return self.pow(exponent)

	def __eq__(self, other):
		if not isinstance(other, Element):
			return NotImplemented
		return self.equals(other)

	def __ne__(self, other):
		result = self.__eq__(other)
		if result is NotImplemented:
			return result
		return not result

	def __hash__(self) -> int:
		return hash((int(self._group.group_id), self._value))

	def __int__(self) -> int:
		return self._value

	def __repr__(self) -> str:
		hx = format(self._value, "x")
		short = hx if len(hx) <= 16 else hx[:16] + "..."
		return f"Element({self._group.name}, 0x{short})"


__all__ = ["Element"]
