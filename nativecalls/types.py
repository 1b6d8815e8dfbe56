"""Data types for native call generation"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Definition:
    """One native function prototype"""
    name: str
    return_type: str
    parameters: tuple[str, ...] = field(default_factory=tuple)
    line_number: int = 0

    @property
    def is_void(self) -> bool:
        return self.return_type == "void"

    @property
    def signature(self) -> str:
        """Prototype text rebuilt from the parsed fields"""
        return f"{self.return_type} {self.name}({', '.join(self.parameters)})"

    def __str__(self) -> str:
        return self.signature


@dataclass(frozen=True)
class ParentRuntime:
    """Operating system family shared by several runtimes"""
    runtime_identifier: str
    constant: str
    platform: str
    library_extension: str


@dataclass(frozen=True)
class Runtime:
    """One OS + architecture target"""
    runtime_identifier: str
    constant: str
    parent: ParentRuntime
    is_64bit: bool

    @property
    def architecture(self) -> str:
        return "x64" if self.is_64bit else "x86"

    @property
    def library_name(self) -> str:
        parent_id = self.parent.runtime_identifier.lower()
        return f"bearssl.{parent_id}.{self.architecture}.{self.parent.library_extension}"

    @property
    def display_name(self) -> str:
        return f"{self.parent.platform} ({self.architecture})"
