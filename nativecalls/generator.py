"""Runs every generator over a prototypes file and writes the results"""

from pathlib import Path
from typing import Iterable, Optional

from .binding_generator import BindingGenerator
from .export_generator import ExportGenerator
from .parser import DefinitionParser
from .platforms import RUNTIMES
from .reference_generator import ReferenceGenerator
from .types import Definition, Runtime


def render_native_calls(
    definitions: list[Definition],
    runtimes: Iterable[Runtime] = RUNTIMES,
    namespace: str = "",
    class_name: str = "",
    export_style: str = "plain",
) -> dict[str, str]:
    """Render all outputs in memory, keyed by file name, in generation order."""
    files = {}
    for runtime in runtimes:
        binding = BindingGenerator(definitions, runtime, namespace, class_name)
        files[binding.file_name()] = binding.generate()

    reference = ReferenceGenerator(definitions, namespace, class_name)
    files[reference.file_name()] = reference.generate()

    exports = ExportGenerator(definitions, export_style)
    files[exports.file_name()] = exports.generate()
    return files


def generate_native_calls(
    prototypes: Path,
    output_dir: Path,
    runtimes: Optional[Iterable[Runtime]] = None,
    namespace: str = "",
    class_name: str = "",
    export_style: str = "plain",
    allow_duplicates: bool = False,
) -> list[Path]:
    """Parse the prototypes file and write every generated file.

    Existing files with the same names are replaced. Returns the written
    paths in generation order: one binding file per runtime, the reference
    file, then the export list.
    """
    prototypes = Path(prototypes)
    output_dir = Path(output_dir)

    definitions = DefinitionParser(
        prototypes.read_text(encoding="utf-8"), allow_duplicates
    ).parse()

    files = render_native_calls(
        definitions,
        RUNTIMES if runtimes is None else runtimes,
        namespace,
        class_name,
        export_style,
    )

    output_dir.mkdir(parents=True, exist_ok=True)
    generated = []
    for filename, content in files.items():
        path = output_dir / filename
        path.write_text(content, encoding="utf-8", newline="\n")
        generated.append(path)
    return generated
