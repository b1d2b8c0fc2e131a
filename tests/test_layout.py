import numpy as np
import pytest

from floatbits import BINARY64, FieldLayout, clamp_exponent_width, clamp_significand_width


@pytest.mark.parametrize("e, bias", [(1, 0), (2, 1), (5, 15), (8, 127), (11, 1023)])
def test_bias(e, bias):
	assert FieldLayout(e, 1).bias == bias


def test_binary64_layout():
	assert BINARY64.total_bits == 64
	assert BINARY64.storage_dtype == np.uint64
	assert BINARY64.significand_offset == 12
	assert BINARY64.sign_shift == 63


def test_storage_dtype():
	assert FieldLayout(3, 4).storage_dtype == np.uint8
	assert FieldLayout(5, 10).storage_dtype == np.uint16
	assert FieldLayout(8, 23).storage_dtype == np.uint32


@pytest.mark.parametrize("e, s", [(0, 1), (12, 1), (1, 0), (1, 53)])
def test_invalid_widths(e, s):
	with pytest.raises(ValueError):
		FieldLayout(e, s)


def test_clamping():
	assert clamp_exponent_width(0) == 1
	assert clamp_exponent_width(7) == 7
	assert clamp_exponent_width(30) == 11
	assert clamp_significand_width(-4) == 1
	assert clamp_significand_width(64) == 52


def test_storage_info():
	info = FieldLayout(5, 10).storage_info()
	assert info["total_bits"] == 16
	assert info["bias"] == 15
