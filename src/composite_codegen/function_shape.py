"""JSFunction emitter.

The fragment's source text decides how the function is emitted:

- LEGACY_FORWARD: the old designer serialized method bindings as
  `function(){this.foo.apply(this,Array.prototype.slice.call(arguments).concat([1,2]))}`.
  These are rewritten to `(...args) => { foo(...args, 1,2); }`.
- BOUND: the body reads `arguments`, which an arrow function would not
  rebind, so the function is kept and bound to `this`.
- ARROW: everything else becomes an arrow function.

The detection is a text heuristic, not a parse of the body.
"""

from __future__ import annotations

import logging
import re
from enum import Enum

from composite_codegen.errors import ClassificationError
from composite_codegen.options import FunctionGenerator, GenerationOptions, KeywordExtractor
from composite_codegen.types import JSFunction, Scope, malformed_field

logger = logging.getLogger(__name__)

LEGACY_HEADER = "function()"
LEGACY_FORWARD_IDIOM = ".apply(this,Array.prototype.slice.call(arguments).concat(["
_STRIPPED_CHARS = re.compile(r"[\r\t\n]")
_BRACKET_GROUP = re.compile(r"\[(.+?)\]")


class FunctionShape(Enum):
	LEGACY_FORWARD = "legacy_forward"
	BOUND = "bound"
	ARROW = "arrow"


def _normalize(code: str) -> str:
	return _STRIPPED_CHARS.sub("", code)


def is_legacy_forward(code: str) -> bool:
	normalized = _normalize(code)
	return normalized.startswith(LEGACY_HEADER) and LEGACY_FORWARD_IDIOM in normalized


def classify_function(code: str, keyword_extractor: KeywordExtractor) -> FunctionShape:
	if is_legacy_forward(code):
		return FunctionShape.LEGACY_FORWARD
	if "arguments" in keyword_extractor(code):
		return FunctionShape.BOUND
	return FunctionShape.ARROW


def rewrite_legacy_forward(code: str) -> str:
	"""Turn a legacy forwarding shim into a variadic arrow function.

	The method name is the text after the first `.`, the extra arguments are
	the first bracketed group. A shim without a bracketed group forwards no
	extra arguments.
	"""
	normalized = _normalize(code)
	parts = normalized.split(".")
	method = parts[1] if len(parts) > 1 else ""
	# NOTE: first-match heuristic; brackets earlier in the body would win
	match = _BRACKET_GROUP.search(normalized)
	if match is None:
		return f"(...args) => {{ {method}(...args); }}"
	return f"(...args) => {{ {method}(...args, {match.group(1)}); }}"


def emit_function_shape(
	fn: JSFunction,
	shape: FunctionShape,
	function_generator: FunctionGenerator,
) -> str:
	if shape is FunctionShape.LEGACY_FORWARD:
		rewritten = rewrite_legacy_forward(fn["value"])
		logger.debug("Rewrote legacy forwarding function to %s", rewritten)
		return function_generator(JSFunction(type="JSFunction", value=rewritten))
	if shape is FunctionShape.BOUND:
		return function_generator(fn, bound=True)
	return function_generator(fn, arrow=True)


def generate_function_value(fn: JSFunction, scope: Scope, options: GenerationOptions) -> str:
	"""Default emitter for the `function` kind."""
	reason = malformed_field(fn)
	if reason is not None:
		raise ClassificationError(fn, reason)
	shape = classify_function(fn["value"], options.keyword_extractor)
	return emit_function_shape(fn, shape, options.function_generator)


__all__ = [
	"FunctionShape",
	"classify_function",
	"emit_function_shape",
	"generate_function_value",
	"is_legacy_forward",
	"rewrite_legacy_forward",
]
