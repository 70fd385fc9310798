"""Diffie-Hellman arithmetic over the RFC 3526 MODP groups."""

from __future__ import annotations

from dhgroups.crypto.element import Element
from dhgroups.crypto.errors import (
	DHGroupError,
	GeneratorSearchExhausted,
	IncompatibleGroupOperation,
	InvalidGroupSelection,
)
from dhgroups.crypto.group import GroupParameters, ModpGroupId, all_groups, lookup
from dhgroups.crypto.primegroup import PrimeGroup

__version__ = "0.1.0"

__all__ = [
	"Element",
	"GroupParameters",
	"ModpGroupId",
	"PrimeGroup",
	"lookup",
	"all_groups",
	"DHGroupError",
	"InvalidGroupSelection",
	"IncompatibleGroupOperation",
	"GeneratorSearchExhausted",
]
