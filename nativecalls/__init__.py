"""
Native Call Generator Package

Parses a list of C prototypes and generates:
  1. C# DllImport declarations, one file per runtime
  2. Throwing reference stubs for builds without a native library
  3. A linker export list for the bridging shim
"""

from .types import Definition, ParentRuntime, Runtime
from .errors import NativeCallsError, DefinitionError, DuplicateDefinitionError, UnbalancedBlockError
from .parser import DefinitionParser, parse_definition, parse_definitions
from .platforms import PARENT_RUNTIMES, RUNTIMES, find_runtime
from .code_writer import CodeWriter
from .binding_generator import BindingGenerator
from .reference_generator import ReferenceGenerator
from .export_generator import ExportGenerator
from .generator import generate_native_calls, render_native_calls
from .config import ConfigOption, NativeConfig, read_config_options

__all__ = [
    'Definition', 'ParentRuntime', 'Runtime',
    'NativeCallsError', 'DefinitionError', 'DuplicateDefinitionError', 'UnbalancedBlockError',
    'DefinitionParser', 'parse_definition', 'parse_definitions',
    'PARENT_RUNTIMES', 'RUNTIMES', 'find_runtime',
    'CodeWriter',
    'BindingGenerator', 'ReferenceGenerator', 'ExportGenerator',
    'generate_native_calls', 'render_native_calls',
    'ConfigOption', 'NativeConfig', 'read_config_options',
]
