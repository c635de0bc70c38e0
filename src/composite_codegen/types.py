"""Composite value schema.

A composite value is the JSON-like tree a low-code designer stores for
component props. Plain data (strings, numbers, lists, dicts) is mixed with a
few tagged shapes, identified by their `type` key:

- `JSExpression`: a JavaScript expression fragment
- `JSFunction`: a JavaScript function fragment
- `JSSlot`: nested child content rendered by a node generator
- `DataSource`: a reference to a runtime-registered data source
- `variable`: deprecated alias for an expression

Objects with `type: "i18n"` are plain objects with a special emitter.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import Any, Literal, NotRequired, TypeAlias, TypedDict


class Undefined:
	"""JS `undefined`. `None` stands for `null`."""

	__slots__: tuple[str, ...] = ()

	def __repr__(self) -> str:
		return "UNDEFINED"

	def __bool__(self) -> bool:
		return False


UNDEFINED = Undefined()


# =============================================================================
# Tagged shapes
# =============================================================================


class JSExpression(TypedDict):
	type: Literal["JSExpression"]
	value: str


class JSFunction(TypedDict):
	type: Literal["JSFunction"]
	value: str


class JSSlot(TypedDict):
	"""Child content. `value` is a node or list of nodes for the node generator."""

	type: Literal["JSSlot"]
	value: NotRequired[Any]
	params: NotRequired[list[str]]
	title: NotRequired[str]


class DataSource(TypedDict):
	type: Literal["DataSource"]
	id: str


class Variable(TypedDict):
	"""Legacy variable binding, equivalent to `JSExpression(value=variable)`."""

	type: Literal["variable"]
	value: Any
	variable: str


class I18nText(TypedDict):
	type: Literal["i18n"]
	key: str
	params: NotRequired[Any]


Primitive: TypeAlias = str | int | float | bool | Undefined | None
CompositeValue: TypeAlias = (
	Primitive
	| Sequence["CompositeValue"]
	| Mapping[str, "CompositeValue"]
	| JSExpression
	| JSFunction
	| JSSlot
	| DataSource
	| Variable
)
CompositeObject: TypeAlias = Mapping[str, CompositeValue]

Kind = Literal[
	"undefined",
	"null",
	"array",
	"variable",
	"expression",
	"function",
	"slot",
	"data_source",
	"object",
	"string",
	"number",
	"boolean",
]

# Scope is owned by the collaborators; the generator only forwards it.
Scope: TypeAlias = Any

NodeGenerator: TypeAlias = Callable[[Any, Scope], str]


# =============================================================================
# Predicates
# =============================================================================


def _tagged(value: Any, tag: str) -> bool:
	return isinstance(value, Mapping) and value.get("type") == tag


def is_js_expression(value: Any) -> bool:
	return _tagged(value, "JSExpression")


def is_js_function(value: Any) -> bool:
	return _tagged(value, "JSFunction")


def is_js_slot(value: Any) -> bool:
	return _tagged(value, "JSSlot")


def is_data_source(value: Any) -> bool:
	return _tagged(value, "DataSource")


def is_variable(value: Any) -> bool:
	return _tagged(value, "variable")


def is_i18n(value: Any) -> bool:
	return _tagged(value, "i18n")


# Tag -> (field, type) the emitters read
REQUIRED_FIELDS: dict[str, tuple[str, type]] = {
	"JSExpression": ("value", str),
	"JSFunction": ("value", str),
	"DataSource": ("id", str),
	"variable": ("variable", str),
}


def malformed_field(value: Any) -> str | None:
	"""Describe the required field a tagged value lacks, or None if it is intact.

	Untagged values and tags without required fields are always intact.
	"""
	if not isinstance(value, Mapping):
		return None
	tag = value.get("type")  # pyright: ignore[reportUnknownMemberType, reportUnknownVariableType]
	if not isinstance(tag, str) or tag not in REQUIRED_FIELDS:
		return None
	field, field_type = REQUIRED_FIELDS[tag]
	if field not in value:
		return f"{tag} requires `{field}`"
	if not isinstance(value[field], field_type):
		return f"{tag}.{field} must be {field_type.__name__}"
	return None


__all__ = [
	"UNDEFINED",
	"CompositeObject",
	"CompositeValue",
	"DataSource",
	"I18nText",
	"JSExpression",
	"JSFunction",
	"JSSlot",
	"Kind",
	"NodeGenerator",
	"Primitive",
	"REQUIRED_FIELDS",
	"Scope",
	"Undefined",
	"Variable",
	"is_data_source",
	"is_i18n",
	"is_js_expression",
	"is_js_function",
	"is_js_slot",
	"is_variable",
	"malformed_field",
]
