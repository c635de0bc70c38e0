"""Free identifier extraction from JavaScript fragments.

Parses with tree-sitter's JavaScript grammar. The analysis is lexical, not
scope-aware: a name declared anywhere in the fragment counts as declared
everywhere in it. That is enough to answer "does this function body read
`arguments`?", which is the question the function emitter asks.
"""

from __future__ import annotations

import logging

import tree_sitter as ts
import tree_sitter_javascript as tsjs

logger = logging.getLogger(__name__)

JS_LANGUAGE = ts.Language(tsjs.language())
_parser: ts.Parser | None = None

_REFERENCE_TYPES = {"identifier", "shorthand_property_identifier"}
_DECLARATION_TYPES = {"identifier", "shorthand_property_identifier_pattern"}
_FUNCTION_TYPES = {
	"function",
	"function_expression",
	"function_declaration",
	"generator_function",
	"generator_function_declaration",
	"class",
	"class_declaration",
}
_DEFAULT_VALUE_TYPES = {"assignment_pattern", "object_assignment_pattern"}

# (parent type, field) pairs whose subtree declares names
_BINDING_FIELDS = {
	("variable_declarator", "name"),
	("arrow_function", "parameter"),
	("catch_clause", "parameter"),
	("for_in_statement", "left"),
}


def _get_parser() -> ts.Parser:
	global _parser
	if _parser is None:
		_parser = ts.Parser(JS_LANGUAGE)
	return _parser


def parse_fragment(code: str) -> ts.Tree:
	"""Parse a fragment in expression position: `!(<code>);`."""
	return _get_parser().parse(f"!({code});".encode())


def _text(node: ts.Node) -> str:
	return node.text.decode() if node.text is not None else ""


def _field_children(node: ts.Node) -> list[tuple[ts.Node, str | None]]:
	out: list[tuple[ts.Node, str | None]] = []
	for i, child in enumerate(node.children):
		out.append((child, node.field_name_for_child(i)))
	return out


def extract_free_identifiers(code: str) -> set[str]:
	"""Return identifiers referenced in `code` but not declared in it."""
	if not code or not code.strip():
		return set()

	tree = parse_fragment(code)
	if tree.root_node.has_error:
		logger.debug("Fragment has syntax errors; identifier scan is best-effort")

	referenced: set[str] = set()
	declared: set[str] = set()
	stack: list[tuple[ts.Node, bool]] = [(tree.root_node, False)]

	while stack:
		node, declaring = stack.pop()
		ntype = node.type

		if declaring and ntype in _DECLARATION_TYPES:
			declared.add(_text(node))
			continue
		if not declaring and ntype in _REFERENCE_TYPES:
			referenced.add(_text(node))
			continue

		for child, field in _field_children(node):
			if ntype in _FUNCTION_TYPES and field == "name":
				stack.append((child, True))
			elif ntype == "formal_parameters":
				stack.append((child, True))
			elif ntype in _DEFAULT_VALUE_TYPES and field == "right":
				# Default parameter values are references
				stack.append((child, False))
			elif ntype == "pair_pattern" and field == "key":
				continue
			elif (ntype, field) in _BINDING_FIELDS:
				if ntype == "for_in_statement" and node.child_by_field_name("kind") is None:
					stack.append((child, declaring))
				else:
					stack.append((child, True))
			else:
				stack.append((child, declaring))

	return referenced - declared


__all__ = ["JS_LANGUAGE", "extract_free_identifiers", "parse_fragment"]
