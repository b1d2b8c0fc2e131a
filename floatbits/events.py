from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Union

from .bitfield import BitField
from .layout import clamp_exponent_width, clamp_significand_width

log = logging.getLogger(__name__)


def _parse_width(text: str) -> int:
	try:
		return int(str(text).strip())
	except ValueError:
		raise ValueError(f"slider must report a number, got {text!r}") from None


@dataclass(frozen=True)
class SetExponentWidth:
	width: int

	@classmethod
	def from_input(cls, text: str) -> SetExponentWidth:
		return cls(_parse_width(text))


@dataclass(frozen=True)
class SetSignificandWidth:
	width: int

	@classmethod
	def from_input(cls, text: str) -> SetSignificandWidth:
		return cls(_parse_width(text))


@dataclass(frozen=True)
class ToggleBit:
	index: int


Msg = Union[SetExponentWidth, SetSignificandWidth, ToggleBit]


def update(field: BitField, msg: Msg) -> None:
	"""Apply one input event to the field.

	Widths coming from input controls are clamped into the valid range before
	resizing; toggles outside the field are ignored by the field itself.
	"""
	if isinstance(msg, SetExponentWidth):
		width = clamp_exponent_width(msg.width)
		if width != msg.width:
			log.debug("Clamped exponent width %d to %d", msg.width, width)
		field.resize_exponent(width)
	elif isinstance(msg, SetSignificandWidth):
		width = clamp_significand_width(msg.width)
		if width != msg.width:
			log.debug("Clamped significand width %d to %d", msg.width, width)
		field.resize_significand(width)
	elif isinstance(msg, ToggleBit):
		field.toggle_bit(msg.index)
	else:
		raise TypeError(f"Unsupported message type: {type(msg).__name__}")
