"""Primitive value -> JavaScript literal text."""

from __future__ import annotations

import json
import math
from decimal import Decimal
from collections.abc import Mapping, Sequence
from typing import Any

from composite_codegen.types import Undefined

_ESCAPES: dict[str, str] = {
	"\\": "\\\\",
	'"': '\\"',
	"\b": "\\b",
	"\f": "\\f",
	"\n": "\\n",
	"\r": "\\r",
	"\t": "\\t",
	"\u2028": "\\u2028",
	"\u2029": "\\u2029",
}


def _escape_char(ch: str) -> str:
	escaped = _ESCAPES.get(ch)
	if escaped is not None:
		return escaped
	code = ord(ch)
	# Control characters and lone surrogates
	if code < 0x20 or 0xD800 <= code <= 0xDFFF:
		return f"\\u{code:04x}"
	return ch


def escape_string(s: str) -> str:
	"""Escape for double-quoted JS string literals.

	The escapes are the JSON subset, so the output also parses as JSON.
	"""
	return "".join(_escape_char(ch) for ch in s)


def emit_string(value: str) -> str:
	return f'"{escape_string(value)}"'


def _js_float_text(value: float) -> str:
	"""Format a finite float the way JS `Number.prototype.toString` does."""
	sign = "-" if value < 0 else ""
	# repr gives the shortest round-tripping digits, same as JS
	parts = Decimal(repr(abs(value))).as_tuple()
	raw = "".join(str(d) for d in parts.digits)
	digits = raw.rstrip("0")
	# value == 0.<digits> * 10**n
	k = len(digits)
	n = int(parts.exponent) + len(raw)
	if k <= n <= 21:
		return f"{sign}{digits}{'0' * (n - k)}"
	if 0 < n <= 21:
		return f"{sign}{digits[:n]}.{digits[n:]}"
	if -6 < n <= 0:
		return f"{sign}0.{'0' * -n}{digits}"
	e = n - 1
	mantissa = digits[0] if k == 1 else f"{digits[0]}.{digits[1:]}"
	return f"{sign}{mantissa}e{'+' if e >= 0 else '-'}{abs(e)}"


def emit_number(value: int | float) -> str:
	if isinstance(value, int):
		return str(value)
	if math.isnan(value):
		return "NaN"
	if math.isinf(value):
		return "Infinity" if value > 0 else "-Infinity"
	# JS prints integral numbers without a fraction up to 1e21
	if value.is_integer() and abs(value) < 1e21:
		return str(int(value))
	return _js_float_text(value)


def emit_bool(value: bool) -> str:
	return "true" if value else "false"


def _strip_undefined(value: Any) -> Any:
	"""Drop UNDEFINED members, the way JSON.stringify does."""
	if isinstance(value, Mapping):
		return {
			str(k): _strip_undefined(v)  # pyright: ignore[reportUnknownArgumentType]
			for k, v in value.items()  # pyright: ignore[reportUnknownVariableType]
			if not isinstance(v, Undefined)
		}
	if isinstance(value, Sequence) and not isinstance(value, str):
		# JSON.stringify turns undefined array items into null
		return [
			None if isinstance(v, Undefined) else _strip_undefined(v)
			for v in value  # pyright: ignore[reportUnknownVariableType]
		]
	return value


def emit_json(value: Any) -> str:
	"""Serialize plain data as a compact JSON literal."""
	return json.dumps(_strip_undefined(value), ensure_ascii=False, separators=(",", ":"))


__all__ = ["emit_bool", "emit_json", "emit_number", "emit_string", "escape_string"]
