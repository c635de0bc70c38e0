"""Per-kind interception of the default emitters.

A hook wraps the emitter for one kind of composite value:

	def hook(value, scope, options, next):
		return next(value, scope, options)

Hooks run in registration order, the first one outermost. Each receives a
`next` callable that advances the chain; the default emitter is the last
link. A hook may rewrite the value before calling `next`, post-process the
returned code, or return without calling `next` to short-circuit the chain.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Any, Protocol, TypeAlias

from composite_codegen.types import Scope

if TYPE_CHECKING:
	from composite_codegen.options import GenerationOptions

logger = logging.getLogger(__name__)

Emitter: TypeAlias = Callable[[Any, Scope, "GenerationOptions"], str]


class Hook(Protocol):
	def __call__(
		self,
		value: Any,
		scope: Scope,
		options: GenerationOptions,
		next: Emitter,
	) -> str: ...


HookStack: TypeAlias = Hook | Sequence[Hook]


def as_hook_list(hooks: HookStack | None) -> list[Hook]:
	"""Normalize a single hook or a sequence of hooks to a list."""
	if hooks is None:
		return []
	if callable(hooks):
		return [hooks]
	return list(hooks)


def execute_hook_stack(
	value: Any,
	scope: Scope,
	hooks: HookStack,
	default: Emitter,
	options: GenerationOptions,
) -> str:
	"""Run `value` through `hooks`, falling through to `default`."""
	stack = as_hook_list(hooks)

	def dispatch(index: int, value: Any, scope: Scope, options: GenerationOptions) -> str:
		if index >= len(stack):
			return default(value, scope, options)
		hook = stack[index]

		def _next(value: Any, scope: Scope, options: GenerationOptions) -> str:
			return dispatch(index + 1, value, scope, options)

		return hook(value, scope, options, _next)

	logger.debug("Running %d hook(s) around %s", len(stack), getattr(default, "__name__", default))
	return dispatch(0, value, scope, options)


__all__ = ["Emitter", "Hook", "HookStack", "as_hook_list", "execute_hook_stack"]
