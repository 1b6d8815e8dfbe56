"""Common Generator - shared layout of the generated C# files"""

from .code_writer import CodeWriter
from .types import Definition

DEFAULT_NAMESPACE = "BearSSL"
DEFAULT_CLASS_NAME = "NativeCalls"


class CommonGenerator:
    """Writes the guard, using directive, namespace and class around the members"""

    def __init__(self, definitions: list[Definition], namespace: str = "", class_name: str = ""):
        self.definitions = definitions
        self.namespace = namespace or DEFAULT_NAMESPACE
        self.class_name = class_name or DEFAULT_CLASS_NAME

    def guard(self) -> str:
        raise NotImplementedError

    def file_name(self) -> str:
        raise NotImplementedError

    def write_members(self, writer: CodeWriter):
        raise NotImplementedError

    def generate(self) -> str:
        writer = CodeWriter()
        writer.line("// AUTO-GENERATED - DO NOT EDIT")
        writer.directive(f"#if {self.guard()}")
        writer.line("using System.Runtime.InteropServices;")
        writer.open_block(f"namespace {self.namespace}")
        writer.open_block(f"internal static class {self.class_name}")
        self.write_members(writer)
        writer.close_block()
        writer.close_block()
        writer.directive("#endif")
        return writer.getvalue()
