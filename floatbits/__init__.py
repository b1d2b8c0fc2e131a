from .bitfield import BitField, BitRegion
from .decode import decode, decode_packed, value_table
from .display import format_bits, format_value
from .layout import BINARY64, FieldLayout, clamp_exponent_width, clamp_significand_width

__all__ = [
	"BINARY64",
	"BitField",
	"BitRegion",
	"FieldLayout",
	"clamp_exponent_width",
	"clamp_significand_width",
	"decode",
	"decode_packed",
	"format_bits",
	"format_value",
	"value_table",
]
