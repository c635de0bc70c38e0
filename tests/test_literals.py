"""
Tests for primitive literal emission.
"""

import json
import math

import pytest
from composite_codegen.literals import (
	emit_bool,
	emit_json,
	emit_number,
	emit_string,
	escape_string,
)
from composite_codegen.types import UNDEFINED

# =============================================================================
# Strings
# =============================================================================


class TestStringEmit:
	"""Test string literal emission."""

	def test_simple(self):
		assert emit_string("hello") == '"hello"'
		assert emit_string("") == '""'

	def test_escaping(self):
		assert emit_string('say "hi"') == '"say \\"hi\\""'
		assert emit_string("line1\nline2") == '"line1\\nline2"'
		assert emit_string("tab\there") == '"tab\\there"'
		assert emit_string("back\\slash") == '"back\\\\slash"'

	def test_control_chars(self):
		assert emit_string("\r") == '"\\r"'
		assert emit_string("\b") == '"\\b"'
		assert emit_string("\f") == '"\\f"'
		assert emit_string("\v") == '"\\u000b"'
		assert emit_string("\x00") == '"\\u0000"'
		assert emit_string("\x1f") == '"\\u001f"'

	def test_unicode_line_separators(self):
		assert emit_string("\u2028") == '"\\u2028"'
		assert emit_string("\u2029") == '"\\u2029"'

	def test_non_ascii_kept(self):
		assert emit_string("héllo 世界") == '"héllo 世界"'

	@pytest.mark.parametrize(
		"s",
		[
			'He said "hi"\n',
			"C:\\path\\to\\file",
			"quote ' and \" mixed",
			"\t\r\n\b\f\v\x00\x07",
			"\u2028\u2029",
			"emoji 🎉",
			"</script>",
		],
	)
	def test_round_trip(self, s: str):
		assert json.loads(emit_string(s)) == s

	def test_escape_string_has_no_quotes(self):
		assert escape_string("abc") == "abc"


# =============================================================================
# Numbers and booleans
# =============================================================================


class TestNumberEmit:
	"""Test number literal emission."""

	def test_integers(self):
		assert emit_number(0) == "0"
		assert emit_number(42) == "42"
		assert emit_number(-123) == "-123"
		assert emit_number(10**30) == "1000000000000000000000000000000"

	def test_floats(self):
		assert emit_number(3.14) == "3.14"
		assert emit_number(-0.5) == "-0.5"

	def test_integral_floats(self):
		assert emit_number(1.0) == "1"
		assert emit_number(-2.0) == "-2"
		assert emit_number(1e21) == "1e+21"

	@pytest.mark.parametrize(
		("value", "expected"),
		[
			(1e-6, "0.000001"),
			(1.5e-6, "0.0000015"),
			(0.000123, "0.000123"),
			(1e-7, "1e-7"),
			(-2.5e-8, "-2.5e-8"),
			(1.2345e21, "1.2345e+21"),
			(1.5e300, "1.5e+300"),
			(123456.789, "123456.789"),
			(0.1, "0.1"),
		],
	)
	def test_float_text_matches_js(self, value: float, expected: str):
		assert emit_number(value) == expected

	def test_special_floats(self):
		assert emit_number(math.nan) == "NaN"
		assert emit_number(math.inf) == "Infinity"
		assert emit_number(-math.inf) == "-Infinity"


class TestBoolEmit:
	def test_values(self):
		assert emit_bool(True) == "true"
		assert emit_bool(False) == "false"


# =============================================================================
# JSON payloads
# =============================================================================


class TestJsonEmit:
	"""Test compact JSON emission used for static payloads."""

	def test_compact(self):
		assert emit_json({"key": "hello", "n": [1, 2]}) == '{"key":"hello","n":[1,2]}'

	def test_drops_undefined_members(self):
		assert emit_json({"a": 1, "b": UNDEFINED}) == '{"a":1}'

	def test_undefined_array_items_become_null(self):
		assert emit_json([1, UNDEFINED]) == "[1,null]"

	def test_string(self):
		assert emit_json("ds1") == '"ds1"'
