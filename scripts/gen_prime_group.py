"""
Search a prime-order subgroup generator inside an RFC 3526 MODP group.

Outputs p, q = (p - 1) / 2 and the generator g' in hex on stdout.

Defaults:
- Group: 14 (2048-bit MODP)
- Generator bits: 128
- Retry ceiling: DHGROUPS_MAX_GENERATOR_ATTEMPTS (1000 if unset)

--seed switches to a seeded random.Random so runs are reproducible; never
use it for parameters that will protect real traffic.
"""

from __future__ import annotations

import argparse
import random
import sys
from pathlib import Path

# Ensure imports work when running as a script
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from dhgroups.common import config
from dhgroups.crypto.errors import GeneratorSearchExhausted, InvalidGroupSelection
from dhgroups.crypto.group import all_groups, lookup
from dhgroups.crypto.primegroup import PrimeGroup


def build_parser() -> argparse.ArgumentParser:
	p = argparse.ArgumentParser(description="Find a generator of the order-q subgroup of a MODP group")
	p.add_argument("--group", "-g", default="14", help="RFC 3526 group number or name (e.g. 14, modp2048)")
	p.add_argument("--bits", "-b", type=int, default=128, help="Minimum bit length of the generator")
	p.add_argument("--max-attempts", type=int, default=None, help="Retry ceiling for the search")
	p.add_argument("--seed", type=int, default=None, help="Seed a deterministic PRNG (demo only)")
	p.add_argument("--list", action="store_true", help="List the catalogue and exit")
	return p


def main(argv: list[str] | None = None) -> int:
	args = build_parser().parse_args(argv)
	config.configure_logging()

	if args.list:
		for params in all_groups():
			print(f"{int(params.group_id):>3}  {params.name:<9} g={params.generator}  {params.bit_length} bits")
		return 0

	try:
		params = lookup(args.group)
	except InvalidGroupSelection as e:
		print(f"[ERROR] {e}")
		return 2

	rng = random.Random(args.seed) if args.seed is not None else None
	if rng is not None:
		print("[!] Using a seeded PRNG; output is reproducible and not secret")

	print(f"[*] Searching a >= {args.bits}-bit generator in {params.name} (group {int(params.group_id)}) ...")
	try:
		pg = PrimeGroup.from_modp_group(params, args.bits, rng=rng, max_attempts=args.max_attempts)
	except GeneratorSearchExhausted as e:
		print(f"[ERROR] {e}")
		return 1

	print("[+] Generator found")
	print(f"p = 0x{pg.p:x}")
	print(f"q = 0x{pg.q:x}")
	print(f"g = 0x{pg.g:x}")
	print(f"g bits: {pg.g.bit_length()}")
	return 0


if __name__ == "__main__":
	raise SystemExit(main())
