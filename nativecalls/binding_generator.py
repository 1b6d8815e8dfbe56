"""Binding Generator - emits one DllImport declaration file per runtime"""

from .code_writer import CodeWriter
from .common_generator import CommonGenerator
from .platforms import REFERENCE_ASSEMBLY
from .types import Definition, Runtime


class BindingGenerator(CommonGenerator):
    """Generates NativeCalls.<rid>.cs for a single runtime"""

    def __init__(self, definitions: list[Definition], runtime: Runtime,
                 namespace: str = "", class_name: str = ""):
        super().__init__(definitions, namespace, class_name)
        self.runtime = runtime

    def guard(self) -> str:
        return f"{self.runtime.constant} && !{REFERENCE_ASSEMBLY}"

    def file_name(self) -> str:
        return f"{self.class_name}.{self.runtime.runtime_identifier}.cs"

    def write_members(self, writer: CodeWriter):
        for d in self.definitions:
            writer.line(self._dll_import(d))
            writer.line(f"public static extern unsafe {d.signature};")

    def _dll_import(self, d: Definition) -> str:
        return (
            f'[DllImport("{self.runtime.library_name}", EntryPoint = "{d.name}", '
            f'CallingConvention = CallingConvention.Cdecl)]'
        )
