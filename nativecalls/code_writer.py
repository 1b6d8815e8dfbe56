"""Line-oriented writer with explicit indentation state"""

from .errors import UnbalancedBlockError

INDENT = "    "


class CodeWriter:
    """Collects output lines, indenting each by the current nesting level.

    Callers open and close nesting explicitly with push_indent/pop_indent,
    or with open_block/close_block which also emit the braces.
    """

    def __init__(self):
        self.lines: list[str] = []
        self.indent = 0

    def push_indent(self):
        self.indent += 1

    def pop_indent(self):
        if self.indent == 0:
            raise UnbalancedBlockError("pop_indent called at indent level 0")
        self.indent -= 1

    def line(self, text: str = "", extra_indent: int = 0):
        """Write one line; extra_indent applies to this line only."""
        if not text:
            self.lines.append("")
            return
        self.lines.append(INDENT * (self.indent + extra_indent) + text)

    def directive(self, text: str):
        """Write a preprocessor line, always at column 0."""
        self.lines.append(text)

    def open_block(self, header: str = ""):
        if header:
            self.line(header)
        self.line("{")
        self.push_indent()

    def close_block(self):
        self.pop_indent()
        self.line("}")

    def getvalue(self) -> str:
        if self.indent != 0:
            raise UnbalancedBlockError(f"{self.indent} block(s) left open")
        return "\n".join(self.lines) + "\n"
