"""
Tests for JSSlot generation.
"""

import logging
from typing import Any

import pytest
from composite_codegen import (
	GenerationOptions,
	MissingNodeGeneratorError,
	generate,
	generate_slot_content,
)

from conftest import render_node


def slot(**fields: Any) -> dict[str, Any]:
	return {"type": "JSSlot", **fields}


class TestSlotWithoutNodeGenerator:
	def test_degrades_to_empty_string(self, caplog: pytest.LogCaptureFixture):
		with caplog.at_level(logging.WARNING, logger="composite_codegen.generator"):
			assert generate(slot(value=[{"componentName": "Div"}])) == ""
		assert "no node generator" in caplog.text

	def test_degraded_slot_inside_object(self):
		assert generate({"children": slot(value=[])}) == '{"children": }'

	def test_fail_policy_raises(self):
		opts = GenerationOptions(on_missing_node_generator="fail")
		with pytest.raises(MissingNodeGeneratorError, match="node generator"):
			generate(slot(value=[]), None, opts)


class TestSlotContent:
	def test_list_of_nodes(self, slot_options: GenerationOptions):
		value = slot(value=[{"componentName": "Div"}, {"componentName": "Span"}])
		assert generate(value, None, slot_options) == "[<Div />,<Span />]"

	def test_single_node(self, slot_options: GenerationOptions):
		assert generate(slot(value={"componentName": "Div"}), None, slot_options) == "<Div />"

	def test_empty_value_is_null(self, slot_options: GenerationOptions):
		assert generate(slot(), None, slot_options) == "null"
		assert generate(slot(value=[]), None, slot_options) == "null"

	def test_params_make_render_function(self, slot_options: GenerationOptions):
		value = slot(params=["item", "index"], value=[{"componentName": "Row"}])
		assert generate(value, None, slot_options) == "(item, index) => ([<Row />])"

	def test_title_comment(self, slot_options: GenerationOptions):
		value = slot(title="header", value={"componentName": "Div"})
		assert generate(value, None, slot_options) == "/* header */ <Div />"

	def test_scope_is_passed_through(self):
		seen: list[Any] = []
		scope = object()

		def spy(node: Any, s: Any) -> str:
			seen.append(s)
			return render_node(node, s)

		opts = GenerationOptions(node_generator=spy)
		generate([slot(value=[{"componentName": "A"}, {"componentName": "B"}])], scope, opts)
		assert seen == [scope, scope]

	def test_slot_hook(self, slot_options: GenerationOptions):
		def wrap(value: Any, scope: Any, o: GenerationOptions, next: Any) -> str:
			return f"(() => {next(value, scope, o)})"

		opts = slot_options.with_handlers(slot=[wrap])
		assert generate(slot(value={"componentName": "Div"}), None, opts) == "(() => <Div />)"

	def test_rejects_non_slot(self):
		with pytest.raises(Exception, match="Not a JSSlot"):
			generate_slot_content({"type": "JSExpression", "value": "x"}, None, render_node)  # pyright: ignore[reportArgumentType]
