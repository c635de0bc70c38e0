"""Composite value -> JavaScript code.

`generate` classifies a value into exactly one kind and routes it to that
kind's emitter, running any hooks registered for the kind first. The
predicate order in `classify` matters: tagged objects have to be recognized
before the generic object branch, and the number check has to exclude `bool`,
which subclasses `int`.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from contextvars import ContextVar
from typing import Any

from composite_codegen.containers import generate_array, generate_object
from composite_codegen.errors import (
	ClassificationError,
	DepthExceededError,
	MissingNodeGeneratorError,
)
from composite_codegen.function_shape import generate_function_value
from composite_codegen.hooks import Emitter, execute_hook_stack
from composite_codegen.literals import emit_bool, emit_json, emit_number, emit_string
from composite_codegen.options import GenerationOptions
from composite_codegen.types import (
	CompositeValue,
	JSExpression,
	Kind,
	Scope,
	Undefined,
	is_data_source,
	is_js_expression,
	is_js_function,
	is_js_slot,
	is_variable,
	malformed_field,
)

logger = logging.getLogger(__name__)

_DEPTH: ContextVar[int] = ContextVar("composite_codegen_depth", default=0)

DEFAULT_OPTIONS = GenerationOptions()


def classify(value: Any) -> Kind:
	"""Return the kind of a composite value.

	Raises ClassificationError for values outside the composite value schema,
	including tagged shapes missing a required field.
	"""
	if isinstance(value, Undefined):
		return "undefined"
	if value is None:
		return "null"
	if isinstance(value, (list, tuple)):
		return "array"
	reason = malformed_field(value)
	if reason is not None:
		raise ClassificationError(value, reason)
	if is_variable(value):
		return "variable"
	if is_js_expression(value):
		return "expression"
	if is_js_function(value):
		return "function"
	if is_js_slot(value):
		return "slot"
	if is_data_source(value):
		return "data_source"
	if isinstance(value, Mapping):
		return "object"
	if isinstance(value, str):
		return "string"
	# bool subclasses int
	if isinstance(value, (int, float)) and not isinstance(value, bool):
		return "number"
	if isinstance(value, bool):
		return "boolean"
	raise ClassificationError(value)


# =============================================================================
# Default emitters
# =============================================================================


def _emit_undefined(value: Any, scope: Scope, options: GenerationOptions) -> str:
	return "undefined"


def _emit_null(value: Any, scope: Scope, options: GenerationOptions) -> str:
	return "null"


def _emit_expression(value: Any, scope: Scope, options: GenerationOptions) -> str:
	return options.expression_generator(value, scope)


def _emit_slot(value: Any, scope: Scope, options: GenerationOptions) -> str:
	if options.node_generator is None:
		if options.on_missing_node_generator == "fail":
			raise MissingNodeGeneratorError()
		logger.warning("JSSlot skipped: no node generator configured")
		return ""
	return options.slot_generator(value, scope, options.node_generator)


def _emit_string(value: Any, scope: Scope, options: GenerationOptions) -> str:
	return emit_string(value)


def _emit_number(value: Any, scope: Scope, options: GenerationOptions) -> str:
	return emit_number(value)


def _emit_bool(value: Any, scope: Scope, options: GenerationOptions) -> str:
	return emit_bool(value)


def _desugar_variable(value: Any) -> JSExpression:
	return JSExpression(type="JSExpression", value=value["variable"])


def _desugar_data_source(value: Any) -> JSExpression:
	return JSExpression(
		type="JSExpression",
		value=f"this.dataSourceMap[{emit_json(value['id'])}]",
	)


EMITTERS: dict[Kind, Emitter] = {
	"undefined": _emit_undefined,
	"null": _emit_null,
	"array": generate_array,
	"expression": _emit_expression,
	"function": generate_function_value,
	"slot": _emit_slot,
	"object": generate_object,
	"string": _emit_string,
	"number": _emit_number,
	"boolean": _emit_bool,
}


def _route(value: Any, scope: Scope, options: GenerationOptions) -> str:
	kind = classify(value)

	# Sugar kinds re-enter as expressions
	if kind == "variable":
		return _route(_desugar_variable(value), scope, options)
	if kind == "data_source":
		return _route(_desugar_data_source(value), scope, options)

	emitter = EMITTERS[kind]
	hooks = options.hooks_for(kind)
	if hooks is not None:
		return execute_hook_stack(value, scope, hooks, emitter, options)
	return emitter(value, scope, options)


def generate(
	value: CompositeValue,
	scope: Scope = None,
	options: GenerationOptions | None = None,
) -> str:
	"""Generate JavaScript code for a composite value.

	Args:
		value: The composite value tree.
		scope: Lexical scope for the collaborators; forwarded unchanged.
		options: Hooks, node generator and collaborators. Defaults apply when omitted.

	Raises:
		ClassificationError: A value in the tree is not a composite value.
		DepthExceededError: The tree is nested deeper than `options.max_depth`,
			or deeper than the interpreter recursion limit allows with the
			configured hooks.
	"""
	opts = options if options is not None else DEFAULT_OPTIONS
	depth = _DEPTH.get() + 1
	if depth > opts.max_depth:
		raise DepthExceededError(opts.max_depth)
	token = _DEPTH.set(depth)
	try:
		return _route(value, scope, opts)
	except RecursionError as exc:
		# Hooks add frames per level, so the interpreter limit can come first
		if depth > 1:
			raise
		logger.debug("Recursion limit hit before max_depth=%d", opts.max_depth)
		raise DepthExceededError(opts.max_depth) from exc
	finally:
		_DEPTH.reset(token)


def generate_composite_type(
	value: CompositeValue,
	scope: Scope = None,
	options: GenerationOptions | None = None,
) -> str:
	"""Alias of `generate` for callers assembling whole modules."""
	return generate(value, scope, options)


__all__ = ["DEFAULT_OPTIONS", "EMITTERS", "classify", "generate", "generate_composite_type"]
