"""Composite value -> JavaScript code generation."""

# Errors
from composite_codegen.errors import ClassificationError as ClassificationError
from composite_codegen.errors import CodegenError as CodegenError
from composite_codegen.errors import DepthExceededError as DepthExceededError
from composite_codegen.errors import (
	MissingNodeGeneratorError as MissingNodeGeneratorError,
)

# Collaborators
from composite_codegen.expression import generate_expression as generate_expression
from composite_codegen.expression import generate_function as generate_function

# Function shapes
from composite_codegen.function_shape import FunctionShape as FunctionShape
from composite_codegen.function_shape import classify_function as classify_function

# Generator
from composite_codegen.generator import classify as classify
from composite_codegen.generator import generate as generate
from composite_codegen.generator import (
	generate_composite_type as generate_composite_type,
)

# Hooks
from composite_codegen.hooks import Hook as Hook
from composite_codegen.hooks import execute_hook_stack as execute_hook_stack
from composite_codegen.keywords import (
	extract_free_identifiers as extract_free_identifiers,
)

# Options
from composite_codegen.options import GenerationOptions as GenerationOptions
from composite_codegen.slot import generate_slot_content as generate_slot_content

# Schema
from composite_codegen.types import UNDEFINED as UNDEFINED
from composite_codegen.types import CompositeValue as CompositeValue
from composite_codegen.types import DataSource as DataSource
from composite_codegen.types import JSExpression as JSExpression
from composite_codegen.types import JSFunction as JSFunction
from composite_codegen.types import JSSlot as JSSlot
from composite_codegen.types import Kind as Kind
from composite_codegen.types import Undefined as Undefined
from composite_codegen.types import Variable as Variable
from composite_codegen.version import __version__ as __version__
