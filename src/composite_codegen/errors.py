from __future__ import annotations

from typing import Any


class CodegenError(Exception):
	"""Error during composite value code generation."""


class ClassificationError(CodegenError):
	"""A value is outside the composite value schema."""

	value: Any

	def __init__(self, value: Any, reason: str | None = None) -> None:
		self.value = value
		if reason is None:
			message = f"Unknown composite value kind: {type(value).__name__} ({value!r})"
		else:
			message = f"Malformed composite value: {reason} ({value!r})"
		super().__init__(message)


class DepthExceededError(CodegenError):
	"""Composite value nested deeper than `GenerationOptions.max_depth`."""

	max_depth: int

	def __init__(self, max_depth: int) -> None:
		self.max_depth = max_depth
		super().__init__(f"Composite value nesting exceeds max depth of {max_depth}")


class MissingNodeGeneratorError(CodegenError):
	"""A JSSlot was met but no node generator was configured."""

	def __init__(self) -> None:
		super().__init__(
			"Cannot generate JSSlot content without a node generator "
			+ "(set GenerationOptions.node_generator)"
		)


__all__ = [
	"ClassificationError",
	"CodegenError",
	"DepthExceededError",
	"MissingNodeGeneratorError",
]
