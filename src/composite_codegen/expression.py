"""Default expression and function fragment renderers.

These are the collaborators `GenerationOptions` uses unless the caller plugs
in its own (for instance one that resolves local references through the
scope).
"""

from __future__ import annotations

from typing import Any

import tree_sitter as ts

from composite_codegen.errors import ClassificationError, CodegenError
from composite_codegen.keywords import parse_fragment
from composite_codegen.types import (
	JSExpression,
	JSFunction,
	Scope,
	is_js_expression,
	is_js_function,
	malformed_field,
)

_CONVERTIBLE_FUNCTIONS = {"function", "function_expression"}


def generate_expression(expr: JSExpression, scope: Scope = None) -> str:
	"""Render an expression fragment. Blank expressions render as `null`."""
	if not is_js_expression(expr):
		raise CodegenError(f"Not a JSExpression: {expr!r}")
	reason = malformed_field(expr)
	if reason is not None:
		raise ClassificationError(expr, reason)
	code = expr["value"].strip()
	if not code:
		return "null"
	return code


def _fragment_node(tree: ts.Tree) -> ts.Node | None:
	"""Find the expression inside the `!(...);` wrapper."""
	root = tree.root_node
	if root.has_error or root.named_child_count != 1:
		return None
	stmt = root.named_children[0]
	if stmt.type != "expression_statement" or stmt.named_child_count != 1:
		return None
	unary = stmt.named_children[0]
	paren = unary.child_by_field_name("argument")
	if paren is None or paren.type != "parenthesized_expression":
		return None
	if paren.named_child_count != 1:
		return None
	return paren.named_children[0]


def to_arrow_function(code: str) -> str:
	"""Rewrite a `function` expression as an arrow function.

	Arrow functions, generators and anything that does not parse as a single
	function expression are returned unchanged.
	"""
	src = code.strip()
	node = _fragment_node(parse_fragment(src))
	if node is None or node.type not in _CONVERTIBLE_FUNCTIONS:
		return src

	params = node.child_by_field_name("parameters")
	body = node.child_by_field_name("body")
	if params is None or body is None or params.text is None or body.text is None:
		return src

	is_async = any(child.type == "async" for child in node.children)
	prefix = "async " if is_async else ""
	return f"{prefix}{params.text.decode()} => {body.text.decode()}"


def generate_function(
	fn: JSFunction | Any,
	*,
	bound: bool = False,
	arrow: bool = False,
) -> str:
	"""Render a function fragment.

	Modes:
	- bound: `(<fn>).bind(this)`, so `this` and `arguments` keep working
	- arrow: converted to an arrow function, inheriting the caller's `this`
	- neither: the fragment as written
	"""
	if not (is_js_function(fn) or is_js_expression(fn)):
		raise CodegenError(f"Not a JSFunction: {fn!r}")
	reason = malformed_field(fn)
	if reason is not None:
		raise ClassificationError(fn, reason)
	code: str = fn["value"]
	if bound:
		return f"({code.strip()}).bind(this)"
	if arrow:
		return to_arrow_function(code)
	return code


__all__ = ["generate_expression", "generate_function", "to_arrow_function"]
