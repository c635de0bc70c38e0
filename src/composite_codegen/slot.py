from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from composite_codegen.errors import CodegenError
from composite_codegen.types import JSSlot, NodeGenerator, Scope, is_js_slot


def _generate_nodes(value: Any, scope: Scope, node_generator: NodeGenerator) -> str:
	if isinstance(value, Sequence) and not isinstance(value, str):
		items = [node_generator(node, scope) for node in value]
		return f"[{','.join(items)}]"
	return node_generator(value, scope)


def generate_slot_content(slot: JSSlot, scope: Scope, node_generator: NodeGenerator) -> str:
	"""Render the child content of a JSSlot.

	A slot with `params` renders as a render function taking those params.
	The scope is passed to the node generator unchanged.
	"""
	if not is_js_slot(slot):
		raise CodegenError(f"Not a JSSlot: {slot!r}")

	value = slot.get("value")
	content = "null" if not value else _generate_nodes(value, scope, node_generator)

	params = slot.get("params")
	title = slot.get("title")
	comment = f"/* {title.replace('*/', '* /')} */ " if title else ""
	if params:
		return f"{comment}({', '.join(params)}) => ({content})"
	return f"{comment}{content}"


__all__ = ["generate_slot_content"]
