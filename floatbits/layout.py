from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

import numpy as np


BINARY64_EXPONENT_BITS = 11
# Explicitly stored significand bits; the leading one is implicit.
BINARY64_SIGNIFICAND_BITS = 52
BINARY64_BIAS = 1023

DEFAULT_EXPONENT_BITS = BINARY64_EXPONENT_BITS
DEFAULT_SIGNIFICAND_BITS = BINARY64_SIGNIFICAND_BITS


def _smallest_uint_dtype_for_bits(total_bits: int) -> np.dtype:
	if total_bits <= 8:
		return np.uint8
	elif total_bits <= 16:
		return np.uint16
	elif total_bits <= 32:
		return np.uint32
	else:
		return np.uint64


def clamp_exponent_width(width: int) -> int:
	return max(1, min(BINARY64_EXPONENT_BITS, int(width)))


def clamp_significand_width(width: int) -> int:
	return max(1, min(BINARY64_SIGNIFICAND_BITS, int(width)))


def check_exponent_width(width: int) -> None:
	if not 1 <= width <= BINARY64_EXPONENT_BITS:
		raise ValueError(f"exponent width must be in [1, {BINARY64_EXPONENT_BITS}], got {width}")


def check_significand_width(width: int) -> None:
	if not 1 <= width <= BINARY64_SIGNIFICAND_BITS:
		raise ValueError(f"significand width must be in [1, {BINARY64_SIGNIFICAND_BITS}], got {width}")


@dataclass(frozen=True)
class FieldLayout:
	"""Width pair of a sign/exponent/significand bit layout.

	Packed integers are laid out as [sign | exponent | significand] from
	most-significant to least-significant bits, so the widest layout
	(11 exponent bits, 52 significand bits) fills a uint64 exactly like a
	binary64 double.

	- exponent_bits: 1..11
	- significand_bits: 1..52

	The bias is always 2^(exponent_bits-1) - 1.
	"""

	exponent_bits: int = DEFAULT_EXPONENT_BITS
	significand_bits: int = DEFAULT_SIGNIFICAND_BITS

	def __post_init__(self):
		check_exponent_width(self.exponent_bits)
		check_significand_width(self.significand_bits)
		total_bits = 1 + self.exponent_bits + self.significand_bits
		object.__setattr__(self, "total_bits", total_bits)
		object.__setattr__(self, "bias", (1 << (self.exponent_bits - 1)) - 1)
		object.__setattr__(self, "storage_dtype", _smallest_uint_dtype_for_bits(total_bits))
		# Masks and shifts
		object.__setattr__(self, "significand_mask", (1 << self.significand_bits) - 1)
		object.__setattr__(self, "exponent_mask", (1 << self.exponent_bits) - 1)
		object.__setattr__(self, "sign_shift", self.exponent_bits + self.significand_bits)
		object.__setattr__(self, "exponent_shift", self.significand_bits)

	@property
	def exponent_all_ones(self) -> int:
		return self.exponent_mask

	@property
	def sign_offset(self) -> int:
		return 0

	@property
	def exponent_offset(self) -> int:
		return 1

	@property
	def significand_offset(self) -> int:
		"""Flat index of the first significand bit."""
		return 1 + self.exponent_bits

	def storage_info(self) -> Dict[str, int | np.dtype]:
		return {
			"total_bits": self.total_bits,
			"dtype": self.storage_dtype,
			"exponent_bits": self.exponent_bits,
			"significand_bits": self.significand_bits,
			"bias": self.bias,
		}


BINARY64 = FieldLayout(BINARY64_EXPONENT_BITS, BINARY64_SIGNIFICAND_BITS)
