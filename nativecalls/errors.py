"""Exceptions raised while generating native call bindings"""


class NativeCallsError(Exception):
    """Base class for generator failures"""


class DefinitionError(NativeCallsError, ValueError):
    """A prototype line does not match the supported declaration grammar"""

    def __init__(self, reason: str, line: str = "", line_number: int = 0):
        self.reason = reason
        self.line = line
        self.line_number = line_number
        location = f"line {line_number}: " if line_number else ""
        detail = f" in {line!r}" if line else ""
        super().__init__(f"{location}{reason}{detail}")


class DuplicateDefinitionError(DefinitionError):
    """Two prototypes export the same symbol"""


class UnbalancedBlockError(NativeCallsError):
    """Code writer blocks were closed more often than opened, or left open"""
