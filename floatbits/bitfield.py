from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

import numpy as np

from .layout import (
	DEFAULT_EXPONENT_BITS,
	DEFAULT_SIGNIFICAND_BITS,
	FieldLayout,
	check_exponent_width,
	check_significand_width,
)

log = logging.getLogger(__name__)


class BitRegion(enum.Enum):
	SIGN = "sign"
	EXPONENT = "exponent"
	SIGNIFICAND = "significand"


def _bits_to_uint(bits) -> int:
	"""MSB-first bools to an unsigned integer."""
	value = 0
	for b in bits:
		value = (value << 1) | int(bool(b))
	return value


def _uint_to_bits(value: int, width: int) -> List[bool]:
	return [bool((value >> i) & 1) for i in reversed(range(width))]


@dataclass
class BitField:
	"""Mutable sign/exponent/significand bits of a variable-width float.

	Bits are addressed either per region (MSB-first lists) or by a flat index
	over sign ‖ exponent ‖ significand: index 0 is the sign bit, the next
	``exponent_width`` indices are the exponent and the rest the significand.

	Region widths stay within [1, 11] for the exponent and [1, 52] for the
	significand; resizing outside those ranges raises ValueError.
	"""

	sign: bool = False
	exponent: List[bool] = field(default_factory=lambda: [False] * DEFAULT_EXPONENT_BITS)
	significand: List[bool] = field(default_factory=lambda: [False] * DEFAULT_SIGNIFICAND_BITS)

	def __post_init__(self):
		self.sign = bool(self.sign)
		self.exponent = [bool(b) for b in self.exponent]
		self.significand = [bool(b) for b in self.significand]
		check_exponent_width(len(self.exponent))
		check_significand_width(len(self.significand))

	@classmethod
	def zeros(cls, exponent_bits: int = DEFAULT_EXPONENT_BITS, significand_bits: int = DEFAULT_SIGNIFICAND_BITS) -> BitField:
		"""All-false field (value +0.0) with the given region widths."""
		return cls(False, [False] * exponent_bits, [False] * significand_bits)

	@classmethod
	def from_packed(cls, layout: FieldLayout, packed: int) -> BitField:
		"""Build a field from a packed [sign | exponent | significand] integer."""
		packed = int(packed)
		if not 0 <= packed < (1 << layout.total_bits):
			raise ValueError(f"packed value {packed:#x} does not fit in {layout.total_bits} bits")
		return cls(
			bool((packed >> layout.sign_shift) & 1),
			_uint_to_bits((packed >> layout.exponent_shift) & layout.exponent_mask, layout.exponent_bits),
			_uint_to_bits(packed & layout.significand_mask, layout.significand_bits),
		)

	# ---- Read accessors ----
	@property
	def exponent_width(self) -> int:
		return len(self.exponent)

	@property
	def significand_width(self) -> int:
		return len(self.significand)

	@property
	def layout(self) -> FieldLayout:
		return FieldLayout(self.exponent_width, self.significand_width)

	def __len__(self) -> int:
		return 1 + self.exponent_width + self.significand_width

	@property
	def bits(self) -> np.ndarray:
		"""Flat bool array in sign ‖ exponent ‖ significand order."""
		return np.array([self.sign] + self.exponent + self.significand, dtype=bool)

	def region(self, index: int) -> Optional[BitRegion]:
		if index == 0:
			return BitRegion.SIGN
		if 1 <= index < 1 + self.exponent_width:
			return BitRegion.EXPONENT
		if 1 + self.exponent_width <= index < len(self):
			return BitRegion.SIGNIFICAND
		return None

	def cells(self) -> Iterator[Tuple[int, bool, BitRegion]]:
		"""Yield (flat index, bit, region) for every bit, for renderers."""
		for i, b in enumerate(self.bits):
			yield i, bool(b), self.region(i)

	def fields(self) -> Tuple[int, int, int]:
		"""Raw (sign, exponent, significand) integers, each read MSB-first."""
		return int(self.sign), _bits_to_uint(self.exponent), _bits_to_uint(self.significand)

	def packed(self) -> int:
		layout = self.layout
		sign, exp_raw, sig_raw = self.fields()
		return (sign << layout.sign_shift) | (exp_raw << layout.exponent_shift) | sig_raw

	# ---- Mutation ----
	def resize_exponent(self, width: int) -> None:
		check_exponent_width(width)
		log.debug("Resizing exponent %d -> %d", self.exponent_width, width)
		_resize(self.exponent, width)

	def resize_significand(self, width: int) -> None:
		check_significand_width(width)
		log.debug("Resizing significand %d -> %d", self.significand_width, width)
		_resize(self.significand, width)

	def toggle_bit(self, index: int) -> None:
		"""Flip the bit at a flat index. Out-of-range indices are ignored."""
		region = self.region(index)
		if region is None:
			log.debug("Ignoring toggle of bit %d (field has %d bits)", index, len(self))
		elif region is BitRegion.SIGN:
			self.sign = not self.sign
		elif region is BitRegion.EXPONENT:
			i = index - 1
			self.exponent[i] = not self.exponent[i]
		else:
			i = index - 1 - self.exponent_width
			self.significand[i] = not self.significand[i]


def _resize(bits: List[bool], width: int) -> None:
	if width <= len(bits):
		del bits[width:]
	else:
		bits.extend([False] * (width - len(bits)))
