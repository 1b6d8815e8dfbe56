"""Parser for the restricted C prototype grammar

Each non-empty line holds one declaration of the form::

    <return type> <name>(<param>, <param>, ...)

Parameters are kept as the raw text written between the commas. Nested
parentheses, function pointers, arrays and generics are rejected.
"""

import re
from typing import NamedTuple, Optional

from .errors import DefinitionError, DuplicateDefinitionError
from .types import Definition

_TOKEN_RE = re.compile(r'\s*(?:(?P<ident>[A-Za-z_][A-Za-z0-9_]*)|(?P<punct>[*(),]))')


class _Token(NamedTuple):
    kind: str
    text: str
    start: int
    end: int


def _strip_comment(line: str) -> str:
    return line.split('//', 1)[0].strip()


def _tokenize(line: str, line_number: int) -> list[_Token]:
    tokens = []
    pos = 0
    while pos < len(line):
        m = _TOKEN_RE.match(line, pos)
        if not m:
            if not line[pos:].strip():
                break
            column = pos + len(line[pos:]) - len(line[pos:].lstrip()) + 1
            char = line[column - 1]
            raise DefinitionError(f"unexpected character {char!r} at column {column}", line, line_number)
        if m.group('ident'):
            tokens.append(_Token('ident', m.group('ident'), m.start('ident'), m.end('ident')))
        else:
            tokens.append(_Token(m.group('punct'), m.group('punct'), m.start('punct'), m.end('punct')))
        pos = m.end()
    return tokens


def _normalize(text: str) -> str:
    return " ".join(text.split())


def parse_definition(line: str, line_number: int = 0) -> Optional[Definition]:
    """Parse one prototype line. Returns None for blank and comment-only lines."""
    text = _strip_comment(line)
    if not text:
        return None

    tokens = _tokenize(text, line_number)

    open_index = next((i for i, t in enumerate(tokens) if t.kind == '('), None)
    if open_index is None:
        raise DefinitionError("missing parameter list", text, line_number)

    head = tokens[:open_index]
    for token in head:
        if token.kind in (')', ','):
            raise DefinitionError(f"unexpected '{token.text}' before parameter list", text, line_number)
    if not head or head[-1].kind != 'ident':
        raise DefinitionError("missing function name", text, line_number)
    if len(head) < 2:
        raise DefinitionError("missing return type", text, line_number)

    close_index = None
    for i in range(open_index + 1, len(tokens)):
        if tokens[i].kind == '(':
            raise DefinitionError("nested parentheses are not supported", text, line_number)
        if tokens[i].kind == ')':
            close_index = i
            break
    if close_index is None:
        raise DefinitionError("unterminated parameter list", text, line_number)
    if close_index != len(tokens) - 1:
        raise DefinitionError("unexpected text after parameter list", text, line_number)

    name_token = head[-1]
    return_type = _normalize(text[:name_token.start])
    parameters = _parse_parameters(text, tokens[open_index + 1:close_index], line_number)

    return Definition(
        name=name_token.text,
        return_type=return_type,
        parameters=tuple(parameters),
        line_number=line_number,
    )


def _parse_parameters(text: str, tokens: list[_Token], line_number: int) -> list[str]:
    if not tokens:
        return []
    if len(tokens) == 1 and tokens[0].text == 'void':
        return []

    groups: list[list[_Token]] = [[]]
    for token in tokens:
        if token.kind == ',':
            groups.append([])
        else:
            groups[-1].append(token)

    params = []
    for index, group in enumerate(groups, 1):
        if not group:
            raise DefinitionError(f"parameter {index} is empty", text, line_number)
        if group[-1].kind != 'ident':
            raise DefinitionError(f"parameter {index} does not end with an identifier", text, line_number)
        params.append(_normalize(text[group[0].start:group[-1].end]))
    return params


class DefinitionParser:
    """Parses a prototypes file into an ordered list of definitions"""

    def __init__(self, content: str, allow_duplicates: bool = False):
        self.content = content
        self.allow_duplicates = allow_duplicates

    def parse(self) -> list[Definition]:
        definitions = []
        seen: dict[str, int] = {}
        for line_number, line in enumerate(self.content.splitlines(), 1):
            definition = parse_definition(line, line_number)
            if definition is None:
                continue
            if definition.name in seen and not self.allow_duplicates:
                raise DuplicateDefinitionError(
                    f"'{definition.name}' is already declared on line {seen[definition.name]}",
                    line.strip(),
                    line_number,
                )
            seen.setdefault(definition.name, line_number)
            definitions.append(definition)
        return definitions


def parse_definitions(content: str, allow_duplicates: bool = False) -> list[Definition]:
    return DefinitionParser(content, allow_duplicates).parse()
