"""Reference Generator - emits throwing stubs for reference assembly builds"""

from .code_writer import CodeWriter
from .common_generator import CommonGenerator
from .platforms import REFERENCE_ASSEMBLY


class ReferenceGenerator(CommonGenerator):
    """Generates NativeCalls.ref.cs, compiled only when no native library is bound"""

    def guard(self) -> str:
        return REFERENCE_ASSEMBLY

    def file_name(self) -> str:
        return f"{self.class_name}.ref.cs"

    def write_members(self, writer: CodeWriter):
        for d in self.definitions:
            writer.line(f"public static unsafe {d.signature} => throw null;")
