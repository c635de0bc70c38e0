"""Array and object emitters.

Elements and property values go back through `generate`, so hooks apply at
every nesting level.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from composite_codegen.literals import emit_json, emit_string
from composite_codegen.options import GenerationOptions
from composite_codegen.types import CompositeObject, CompositeValue, Scope, is_i18n

I18N_HELPER = "this._i18nText"


def generate_array(
	value: Sequence[CompositeValue],
	scope: Scope,
	options: GenerationOptions,
) -> str:
	from composite_codegen.generator import generate

	body = ",".join(generate(v, scope, options) for v in value)
	return f"[{body}]"


def generate_i18n(value: CompositeObject, scope: Scope, options: GenerationOptions) -> str:
	"""`this._i18nText(payload)`, payload being the object minus `type`.

	Bound params need the payload generated as code; without them it is
	plain data and goes out as a JSON literal.
	"""
	from composite_codegen.generator import generate

	payload = {k: v for k, v in value.items() if k != "type"}
	params: Any = payload.get("params")
	if isinstance(params, (Mapping, list, tuple)):
		return f"{I18N_HELPER}({generate(payload, scope, options)})"
	return f"{I18N_HELPER}({emit_json(payload)})"


def generate_object(value: CompositeObject, scope: Scope, options: GenerationOptions) -> str:
	from composite_codegen.generator import generate

	if is_i18n(value):
		return generate_i18n(value, scope, options)

	body = ",\n".join(
		f"{emit_string(str(key))}: {generate(v, scope, options)}" for key, v in value.items()
	)
	return f"{{{body}}}"


__all__ = ["I18N_HELPER", "generate_array", "generate_i18n", "generate_object"]
