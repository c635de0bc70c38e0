from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field, replace
from typing import Any, Literal

from composite_codegen.hooks import HookStack
from composite_codegen.types import JSExpression, JSSlot, NodeGenerator, Scope

MissingNodeGeneratorPolicy = Literal["degrade", "fail"]

ExpressionGenerator = Callable[[JSExpression, Scope], str]
FunctionGenerator = Callable[..., str]
SlotGenerator = Callable[[JSSlot, Scope, NodeGenerator], str]
KeywordExtractor = Callable[[str], set[str]]


def _default_expression_generator() -> ExpressionGenerator:
	from composite_codegen.expression import generate_expression

	return generate_expression


def _default_function_generator() -> FunctionGenerator:
	from composite_codegen.expression import generate_function

	return generate_function


def _default_slot_generator() -> SlotGenerator:
	from composite_codegen.slot import generate_slot_content

	return generate_slot_content


def _default_keyword_extractor() -> KeywordExtractor:
	from composite_codegen.keywords import extract_free_identifiers

	return extract_free_identifiers


@dataclass(frozen=True, slots=True)
class GenerationOptions:
	"""
	Configuration for composite value generation.

	Attributes:
	    handlers: Hook stacks keyed by kind name ("array", "object", "string",
	        "number", "boolean", "expression", "function", "slot", "undefined",
	        "null"). A single hook may be given instead of a sequence.
	    node_generator: Renders a child node of a JSSlot. Only needed when slots
	        are present.
	    on_missing_node_generator: What a JSSlot does without a node generator:
	        "degrade" emits an empty string, "fail" raises.
	    max_depth: Maximum nesting of composite values before generation aborts.
	"""

	handlers: Mapping[str, HookStack] = field(default_factory=dict)
	node_generator: NodeGenerator | None = None
	on_missing_node_generator: MissingNodeGeneratorPolicy = "degrade"
	max_depth: int = 128

	# Collaborators
	expression_generator: ExpressionGenerator = field(
		default_factory=_default_expression_generator
	)
	function_generator: FunctionGenerator = field(
		default_factory=_default_function_generator
	)
	slot_generator: SlotGenerator = field(default_factory=_default_slot_generator)
	keyword_extractor: KeywordExtractor = field(
		default_factory=_default_keyword_extractor
	)

	def with_handlers(self, **handlers: HookStack) -> GenerationOptions:
		"""Return a copy with `handlers` merged over the current ones."""
		merged: dict[str, HookStack] = {**self.handlers, **handlers}
		return replace(self, handlers=merged)

	def hooks_for(self, kind: str) -> HookStack | None:
		hooks: Any = self.handlers.get(kind)
		if not hooks:
			return None
		return hooks


__all__ = [
	"ExpressionGenerator",
	"FunctionGenerator",
	"GenerationOptions",
	"KeywordExtractor",
	"MissingNodeGeneratorPolicy",
	"SlotGenerator",
]
