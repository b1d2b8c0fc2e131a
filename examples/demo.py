import logging

from floatbits import BitField, FieldLayout, decode, format_bits, format_value, value_table
from floatbits.events import SetExponentWidth, SetSignificandWidth, ToggleBit, update


def main() -> None:
	logging.basicConfig(level=logging.DEBUG)

	field = BitField.zeros()
	print("Layout:", field.layout.storage_info())
	print(format_bits(field), "=", format_value(decode(field)))

	# 2.0 in binary64: exponent field 100_0000_0000
	field.toggle_bit(1)
	print(format_bits(field), "=", format_value(decode(field)))

	for msg in (SetExponentWidth.from_input("4"), SetSignificandWidth(3), ToggleBit(5), ToggleBit(99)):
		update(field, msg)
		print(msg, "->", format_bits(field), "=", format_value(decode(field)))

	table = value_table(FieldLayout(3, 4))
	print("All 1/3/4 values:")
	print(table)


if __name__ == "__main__":
	main()
