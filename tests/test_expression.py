"""
Tests for the default expression and function renderers.
"""

import pytest
from composite_codegen.errors import ClassificationError, CodegenError
from composite_codegen.expression import (
	generate_expression,
	generate_function,
	to_arrow_function,
)


class TestGenerateExpression:
	def test_trims(self):
		assert generate_expression({"type": "JSExpression", "value": "  this.state.a "}) == "this.state.a"

	def test_blank_is_null(self):
		assert generate_expression({"type": "JSExpression", "value": ""}) == "null"
		assert generate_expression({"type": "JSExpression", "value": " \n "}) == "null"

	def test_rejects_other_values(self):
		with pytest.raises(CodegenError, match="Not a JSExpression"):
			generate_expression({"type": "JSFunction", "value": "x"})  # pyright: ignore[reportArgumentType]

	def test_non_string_value_raises(self):
		with pytest.raises(ClassificationError, match="JSExpression.value must be str"):
			generate_expression({"type": "JSExpression", "value": 1})  # pyright: ignore[reportArgumentType]


class TestToArrowFunction:
	"""Test function expression -> arrow function conversion."""

	def test_anonymous_function(self):
		assert (
			to_arrow_function("function(a, b) { return a + b; }")
			== "(a, b) => { return a + b; }"
		)

	def test_named_function_drops_name(self):
		assert to_arrow_function("function onClick() {}") == "() => {}"

	def test_async_function(self):
		assert (
			to_arrow_function("async function(x) { await x; }")
			== "async (x) => { await x; }"
		)

	def test_arrow_unchanged(self):
		assert to_arrow_function("  (a) => a  ") == "(a) => a"

	def test_generator_unchanged(self):
		assert to_arrow_function("function* gen() { yield 1; }") == "function* gen() { yield 1; }"

	def test_non_function_unchanged(self):
		assert to_arrow_function("this.handler") == "this.handler"

	def test_unparseable_unchanged(self):
		assert to_arrow_function("function( {") == "function( {"


class TestGenerateFunction:
	"""Test binding modes."""

	FN = {"type": "JSFunction", "value": "function() { return 1; }"}

	def test_plain(self):
		assert generate_function(self.FN) == "function() { return 1; }"

	def test_bound(self):
		assert generate_function(self.FN, bound=True) == "(function() { return 1; }).bind(this)"

	def test_arrow(self):
		assert generate_function(self.FN, arrow=True) == "() => { return 1; }"

	def test_rejects_other_values(self):
		with pytest.raises(CodegenError, match="Not a JSFunction"):
			generate_function("function() {}")

	def test_missing_value_raises(self):
		with pytest.raises(ClassificationError, match="JSFunction requires `value`"):
			generate_function({"type": "JSFunction"}, bound=True)
