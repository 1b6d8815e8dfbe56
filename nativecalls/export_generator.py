"""Export Generator - emits the linker export list for the bridging shim"""

from .types import Definition

EXPORT_STYLES = {
    "plain": "export {name}",
    "msvc": "/link /export:{name}",
}

EXPORT_FILE_NAME = "linkcommands"


class ExportGenerator:
    """Generates one export directive per definition, in input order"""

    def __init__(self, definitions: list[Definition], style: str = "plain"):
        if style not in EXPORT_STYLES:
            raise ValueError(f"unknown export style '{style}' (known: {', '.join(EXPORT_STYLES)})")
        self.definitions = definitions
        self.style = style

    def file_name(self) -> str:
        return EXPORT_FILE_NAME

    def generate(self) -> str:
        template = EXPORT_STYLES[self.style]
        return "".join(template.format(name=d.name) + "\n" for d in self.definitions)
