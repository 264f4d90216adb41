# mathdocx/latex_parser.py
"""
Cursor-based recursive descent parser from a LaTeX math string to an
expression tree.

The parser is permissive: unknown commands degrade to literal runs and stray
closing braces are skipped. Only an unmatched opening brace (or nesting past
``ConverterConfig.max_depth``) aborts the fragment with a ``ParseError``.
"""

import re
from contextlib import contextmanager
from typing import Callable, Dict, List, Optional

from .binding import Item, PendingOperator, ScriptMarker, bind_scripts, fold_operators
from .config import ConverterConfig
from .errors import NestingDepthError, ParseError, UnsupportedConstructError
from .nodes import BaseNode, Fraction, Radical, Row, Run, as_node, restyle
from .symbols import (CONTROL_SYMBOLS, DELIMITER_COMMANDS, FRACTION_COMMANDS, KNOWN_FUNCTIONS, LIMIT_COMMANDS,
                      NARY_OPERATORS, NO_OP_COMMANDS, STYLE_COMMANDS, SYMBOL_MAP, TEXT_COMMANDS)
from .utils.logger import get_logger

logger = get_logger(__name__)

_COMMAND_RE = re.compile(r"\\[a-zA-Z]+")
_NUMBER_RE = re.compile(r"\d+(?:\.\d+)?")


class LatexParser:
    """Parses one math fragment. Instances hold the cursor and are not reused."""

    def __init__(self, source: str, config: Optional[ConverterConfig] = None):
        self.source = source
        self.config = config or ConverterConfig()
        self.pos = 0
        self.depth = 0

    # --- cursor helpers ---
    def _peek(self) -> Optional[str]:
        return self.source[self.pos] if self.pos < len(self.source) else None

    def _skip_whitespace(self) -> None:
        while self.pos < len(self.source) and self.source[self.pos].isspace():
            self.pos += 1

    @contextmanager
    def _nested(self):
        self.depth += 1
        if self.depth > self.config.max_depth:
            raise NestingDepthError(self.config.max_depth, self.pos)
        try:
            yield
        finally:
            self.depth -= 1

    # --- entry point ---
    def parse(self) -> Row:
        return Row(children=self._parse_sequence(closer=None))

    def _parse_sequence(self, closer: Optional[str], start: int = 0) -> List[BaseNode]:
        """
        Parses items until ``closer`` (``}`` or ``]``) or the end of input.

        Args:
            closer (Optional[str]): Character ending this sequence, None at top level.
            start (int): Offset of the opening delimiter, for error messages.

        Returns:
            List[BaseNode]: Nodes with scripts bound and operators folded.
        """
        items: List[Item] = []
        while True:
            self._skip_whitespace()
            char = self._peek()
            if char is None:
                if closer == '}':
                    raise ParseError("Unmatched '{'", start)
                break
            if char == closer:
                self.pos += 1
                break
            if char == '}':
                if closer == ']':
                    # Leave it for the enclosing group, e.g. "{\sqrt[3}".
                    break
                logger.debug("Skipping unmatched '}' at offset %d", self.pos)
                self.pos += 1
                continue
            if char in '^_':
                self.pos += 1
                items.append(ScriptMarker('sup' if char == '^' else 'sub', self._parse_argument()))
                continue
            items.extend(self._parse_atom())
        max_depth = self.config.max_depth
        return fold_operators(bind_scripts(items, max_depth), max_depth)

    def _parse_group(self) -> Row:
        start = self.pos
        self.pos += 1
        with self._nested():
            return Row(children=self._parse_sequence(closer='}', start=start))

    def _parse_atom(self) -> List[Item]:
        char = self._peek()
        if char == '{':
            return [self._parse_group()]
        if char == '\\':
            return self._parse_command()
        number = _NUMBER_RE.match(self.source, self.pos)
        if number:
            self.pos = number.end()
            return [Run(text=number.group())]
        self.pos += 1
        if char == '~':
            return [Run(text=' ')]
        return [Run(text=char)]

    def _parse_argument(self) -> BaseNode:
        """
        Parses a command or script argument: a brace group, or else exactly
        one atom (``x^23`` raises only the ``2``). Missing arguments at the
        end of input become an empty row.
        """
        with self._nested():
            while True:
                self._skip_whitespace()
                char = self._peek()
                if char is None or char == '}':
                    return Row()
                if char == '{':
                    return self._parse_group()
                if char == '\\':
                    items = self._parse_command()
                    if not items:
                        continue  # layout no-op such as \displaystyle
                    nodes = [item.resolve(Row()) if isinstance(item, PendingOperator) else item for item in items]
                    return as_node(nodes)
                self.pos += 1
                return Run(text=char)

    def _read_raw_argument(self) -> str:
        """Returns the verbatim text of a braced argument (for \\text and friends)."""
        self._skip_whitespace()
        char = self._peek()
        if char is None:
            return ''
        if char != '{':
            self.pos += 1
            return char
        start = self.pos
        level = 0
        while self.pos < len(self.source):
            current = self.source[self.pos]
            if current == '\\' and self.pos + 1 < len(self.source):
                self.pos += 2
                continue
            if current == '{':
                level += 1
            elif current == '}':
                level -= 1
                if level == 0:
                    self.pos += 1
                    return self.source[start + 1:self.pos - 1]
            self.pos += 1
        raise ParseError("Unmatched '{'", start)

    # --- commands ---
    def _parse_command(self) -> List[Item]:
        start = self.pos
        match = _COMMAND_RE.match(self.source, self.pos)
        if match is None:
            # Control symbol: a backslash followed by one non-letter.
            token = self.source[self.pos:self.pos + 2]
            self.pos += len(token)
            if token in CONTROL_SYMBOLS:
                text = CONTROL_SYMBOLS[token]
                return [Run(text=text)] if text else []
            return [Run(text=token[1:] or '\\')]

        name = match.group()
        self.pos = match.end()
        handler = _COMMAND_HANDLERS.get(name)
        if handler is not None:
            return handler(self, name)
        if name in SYMBOL_MAP:
            return [Run(text=SYMBOL_MAP[name])]
        if name in KNOWN_FUNCTIONS:
            return [Run(text=name[1:], style='p')]
        if name in NARY_OPERATORS:
            return [self._parse_large_operator(name)]
        if name in STYLE_COMMANDS:
            style = STYLE_COMMANDS[name]
            argument = self._parse_argument()
            return [restyle(argument, style) if style else argument]
        if name in NO_OP_COMMANDS:
            return []

        if self.config.strict:
            raise UnsupportedConstructError(name, start)
        logger.warning("Unknown command '%s' at offset %d, keeping it as literal text.", name, start)
        return [Run(text=name)]

    def _parse_fraction(self, name: str) -> List[Item]:
        numerator = self._parse_argument()
        denominator = self._parse_argument()
        return [Fraction(numerator=numerator, denominator=denominator)]

    def _parse_sqrt(self, name: str) -> List[Item]:
        self._skip_whitespace()
        degree = None
        if self._peek() == '[':
            start = self.pos
            self.pos += 1
            with self._nested():
                degree = as_node(self._parse_sequence(closer=']', start=start))
        body = self._parse_argument()
        return [Radical(body=body, degree=degree)]

    def _parse_text(self, name: str) -> List[Item]:
        return [Run(text=self._read_raw_argument(), style='p')]

    def _parse_delimiter(self, name: str) -> List[Item]:
        # Only the null delimiter is consumed here; a visible one is the next atom.
        self._skip_whitespace()
        if self._peek() == '.':
            self.pos += 1
        return []

    def _parse_large_operator(self, name: str) -> PendingOperator:
        operator = PendingOperator(NARY_OPERATORS[name])
        self._skip_whitespace()
        match = _COMMAND_RE.match(self.source, self.pos)
        if match and match.group() in LIMIT_COMMANDS:
            operator.limit_location = LIMIT_COMMANDS[match.group()]
            self.pos = match.end()
        return operator


# Fixed dispatch table for commands with structural meaning. Read-only.
_COMMAND_HANDLERS: Dict[str, Callable[[LatexParser, str], List[Item]]] = {
    **{name: LatexParser._parse_fraction for name in FRACTION_COMMANDS},
    '\\sqrt': LatexParser._parse_sqrt,
    **{name: LatexParser._parse_text for name in TEXT_COMMANDS},
    **{name: LatexParser._parse_delimiter for name in DELIMITER_COMMANDS},
}


def parse_latex(source: str, config: Optional[ConverterConfig] = None) -> Row:
    """
    Parses a LaTeX math fragment into an expression tree.

    Args:
        source (str): The math fragment, without ``$`` delimiters.
        config (Optional[ConverterConfig]): Strictness and depth settings.

    Returns:
        Row: Root of the expression tree.

    Raises:
        ParseError: On an unmatched opening brace or excessive nesting.
        UnsupportedConstructError: On an unknown command in strict mode.
    """
    return LatexParser(source, config).parse()
