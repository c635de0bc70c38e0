from typing import Any

import pytest
from composite_codegen.options import GenerationOptions


def render_node(node: Any, scope: Any) -> str:
	"""Minimal node generator: `<Name />`."""
	return f"<{node['componentName']} />"


@pytest.fixture
def options() -> GenerationOptions:
	return GenerationOptions()


@pytest.fixture
def slot_options() -> GenerationOptions:
	return GenerationOptions(node_generator=render_node)
