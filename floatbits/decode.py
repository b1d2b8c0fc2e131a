from __future__ import annotations

import numpy as np

from .bitfield import BitField
from .layout import BINARY64_BIAS, BINARY64_EXPONENT_BITS, BINARY64_SIGNIFICAND_BITS, FieldLayout

# Largest layout value_table will enumerate.
MAX_TABLE_BITS = 16

_SIGN_SHIFT = np.uint64(BINARY64_EXPONENT_BITS + BINARY64_SIGNIFICAND_BITS)
_EXPONENT_SHIFT = np.uint64(BINARY64_SIGNIFICAND_BITS)


def _as_binary64(bits: np.ndarray) -> np.ndarray:
	"""Reinterpret uint64 bit patterns as float64, bit for bit."""
	return np.asarray(bits, dtype=np.uint64).view(np.float64)


def _decode_fields(layout: FieldLayout, sign: np.ndarray, exp_raw: np.ndarray, sig_raw: np.ndarray) -> np.ndarray:
	zero = np.uint64(0)
	all_ones = exp_raw == np.uint64(layout.exponent_all_ones)

	# A zero exponent keeps binary64's own zero exponent field, so for narrow
	# layouts these decode as binary64 subnormals, not subnormals of the layout.
	exp_field = np.where(exp_raw != zero, exp_raw + np.uint64(BINARY64_BIAS - layout.bias), zero)
	sig_field = sig_raw << np.uint64(BINARY64_SIGNIFICAND_BITS - layout.significand_bits)
	finite = _as_binary64((sign << _SIGN_SHIFT) | (exp_field << _EXPONENT_SHIFT) | sig_field)

	special = np.where(sig_raw != zero, np.nan, np.where(sign != zero, -np.inf, np.inf))
	return np.where(all_ones, special, finite)


def decode_packed(layout: FieldLayout, packed: np.ndarray | int) -> np.ndarray:
	"""Vectorized decode of packed [sign | exponent | significand] integers to float64."""
	p = np.asarray(packed, dtype=np.uint64)
	sign = (p >> np.uint64(layout.sign_shift)) & np.uint64(1)
	exp_raw = (p >> np.uint64(layout.exponent_shift)) & np.uint64(layout.exponent_mask)
	sig_raw = p & np.uint64(layout.significand_mask)
	return _decode_fields(layout, sign, exp_raw, sig_raw)


def decode(field: BitField) -> float:
	"""Value encoded by the field's current bits.

	Defined for every bit pattern: an all-ones exponent gives NaN (any
	significand bit set) or an infinity carrying the sign bit. Otherwise the
	exponent is rebiased from 2^(e-1) - 1 to binary64's 1023, the significand
	bits are placed at the top of the 52-bit fraction, and the packed pattern
	is read as a binary64 double.
	"""
	return float(decode_packed(field.layout, field.packed()))


def value_table(layout: FieldLayout) -> np.ndarray:
	"""Decoded value of every packed pattern of a small layout, indexed by pattern."""
	if layout.total_bits > MAX_TABLE_BITS:
		raise ValueError(f"value_table supports at most {MAX_TABLE_BITS} bits, layout has {layout.total_bits}")
	return decode_packed(layout, np.arange(1 << layout.total_bits, dtype=np.uint64))
