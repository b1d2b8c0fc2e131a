import pytest

from floatbits import BitField, decode
from floatbits.events import SetExponentWidth, SetSignificandWidth, ToggleBit, update


class TestUpdate:
	def test_toggle(self):
		field = BitField.zeros(3, 2)
		update(field, ToggleBit(0))
		assert field.sign

	def test_toggle_out_of_range_ignored(self):
		field = BitField.zeros(3, 2)
		update(field, ToggleBit(100))
		assert field == BitField.zeros(3, 2)

	@pytest.mark.parametrize("width, expected", [(0, 1), (6, 6), (20, 11)])
	def test_exponent_width_clamped(self, width, expected):
		field = BitField.zeros()
		update(field, SetExponentWidth(width))
		assert field.exponent_width == expected

	@pytest.mark.parametrize("width, expected", [(-3, 1), (23, 23), (100, 52)])
	def test_significand_width_clamped(self, width, expected):
		field = BitField.zeros()
		update(field, SetSignificandWidth(width))
		assert field.significand_width == expected

	def test_unknown_message(self):
		with pytest.raises(TypeError):
			update(BitField.zeros(), "toggle")

	def test_session(self):
		field = BitField.zeros()
		for msg in (ToggleBit(1), SetExponentWidth(4), SetSignificandWidth(3), ToggleBit(5)):
			update(field, msg)
		# 0 1000 100: 1.1b * 2^1
		assert decode(field) == 3.0


class TestFromInput:
	def test_parses_slider_text(self):
		assert SetExponentWidth.from_input(" 7 ") == SetExponentWidth(7)
		assert SetSignificandWidth.from_input("23") == SetSignificandWidth(23)

	def test_rejects_non_number(self):
		with pytest.raises(ValueError, match="slider must report a number"):
			SetExponentWidth.from_input("seven")
