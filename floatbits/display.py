from __future__ import annotations

import math

import numpy as np

from .bitfield import BitField

# Magnitudes in [FIXED_MIN, FIXED_MAX) print positionally, zero included.
FIXED_MIN = 1e-10
FIXED_MAX = 1e10


def format_value(value: float) -> str:
	"""Shortest round-tripping text for a decoded value.

	Zero and magnitudes in [1e-10, 1e10) use positional notation (``123.0``,
	``-0.0``); everything else uses scientific notation with a bare exponent
	(``1e12``, ``1.5e-11``). NaN is ``NaN`` and the infinities ``inf``/``-inf``.
	"""
	value = float(value)
	if math.isnan(value):
		return "NaN"
	if math.isinf(value):
		return "-inf" if value < 0 else "inf"
	magnitude = abs(value)
	if magnitude == 0.0 or FIXED_MIN <= magnitude < FIXED_MAX:
		return np.format_float_positional(value, unique=True, trim="0")
	mantissa, exponent = np.format_float_scientific(value, unique=True, trim="-").split("e")
	return f"{mantissa}e{int(exponent)}"


def format_bits(field: BitField) -> str:
	"""Bits as '0 10000000000 0000...' with a space between regions."""
	def digits(bits):
		return "".join("1" if b else "0" for b in bits)

	return " ".join([digits([field.sign]), digits(field.exponent), digits(field.significand)])
