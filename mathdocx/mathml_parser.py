# mathdocx/mathml_parser.py
"""
Front end for math that an external renderer already turned into
presentation MathML. Produces the same expression tree as the LaTeX parser,
so one serializer handles both.
"""

from typing import List, Optional, Union

import latex2mathml.converter
from lxml import etree

from .binding import Item, PendingOperator, fold_operators
from .config import ConverterConfig
from .errors import NestingDepthError, ParseError, UnsupportedConstructError
from .nodes import BaseNode, Fraction, Radical, Row, Run, Subscript, SubSuperscript, Superscript, as_node, flatten
from .symbols import (LARGE_OPERATOR_GLYPHS, MATHML_IGNORED_ELEMENTS, MATHML_ROW_ELEMENTS, MATHML_SCRIPT_ARITY,
                      MATHML_TOKEN_ELEMENTS, MATHML_VARIANT_STYLES)
from .utils.logger import get_logger

logger = get_logger(__name__)

MATHML_NAMESPACE = "http://www.w3.org/1998/Math/MathML"

MarkupInput = Union[str, bytes, etree._Element]


def _local_name(element: etree._Element) -> str:
    return etree.QName(element).localname


def _element_children(element: etree._Element) -> List[etree._Element]:
    # Skips comments and processing instructions.
    return [child for child in element if isinstance(child.tag, str)]


def _collapsed_text(element: etree._Element) -> str:
    return " ".join("".join(element.itertext()).split())


def _large_operator_glyph(element: etree._Element) -> Optional[str]:
    """Returns the first large-operator glyph in the element's flattened text, if any."""
    for char in _collapsed_text(element):
        if char in LARGE_OPERATOR_GLYPHS:
            return char
    return None


class MathMLParser:
    """Converts a MathML tree into an expression tree."""

    def __init__(self, config: Optional[ConverterConfig] = None):
        self.config = config or ConverterConfig()

    def parse(self, markup: MarkupInput) -> Row:
        root = self._load(markup)
        # Grouping wrappers carry no meaning of their own once parsed.
        return flatten(Row(children=fold_operators(self._convert(root, 0), self.config.max_depth)))

    @staticmethod
    def _load(markup: MarkupInput) -> etree._Element:
        if isinstance(markup, str):
            markup = markup.encode('utf-8')
        if isinstance(markup, bytes):
            try:
                return etree.fromstring(markup)
            except etree.XMLSyntaxError as e:
                raise ParseError(f"Malformed MathML: {e}") from e
        if etree.iselement(markup):
            return markup
        raise ParseError(f"Unsupported markup input of type {type(markup).__name__}")

    def _node(self, element: etree._Element, depth: int) -> BaseNode:
        return as_node(fold_operators(self._convert(element, depth + 1), self.config.max_depth))

    def _sequence(self, element: etree._Element, depth: int) -> List[BaseNode]:
        items: List[Item] = []
        for child in _element_children(element):
            items.extend(self._convert(child, depth + 1))
        return fold_operators(items, self.config.max_depth)

    def _convert(self, element: etree._Element, depth: int) -> List[Item]:
        """
        Maps one MathML element onto zero or more items.

        Large operators come back as ``PendingOperator`` so the enclosing
        sequence can hand them the following sibling as operand.

        Args:
            element (etree._Element): The MathML element.
            depth (int): Current element nesting, checked against max_depth.

        Returns:
            List[Item]: Nodes and pending operators, in document order.
        """
        if depth > self.config.max_depth:
            raise NestingDepthError(self.config.max_depth)
        if not isinstance(element.tag, str):
            return []
        name = _local_name(element)

        if name in MATHML_ROW_ELEMENTS:
            return [Row(children=self._sequence(element, depth))]
        if name in MATHML_IGNORED_ELEMENTS:
            return []
        if name == 'mfenced':
            return [self._fenced(element, depth)]
        if name == 'semantics':
            children = _element_children(element)
            return self._convert(children[0], depth + 1) if children else []
        if name in MATHML_TOKEN_ELEMENTS:
            return [self._token(element, name)]

        children = _element_children(element)
        if name == 'mfrac':
            self._check_arity(name, children, 2)
            return [Fraction(numerator=self._node(children[0], depth), denominator=self._node(children[1], depth))]
        if name == 'msqrt':
            return [Radical(body=Row(children=self._sequence(element, depth)))]
        if name == 'mroot':
            self._check_arity(name, children, 2)
            return [Radical(body=self._node(children[0], depth), degree=self._node(children[1], depth))]
        if name in MATHML_SCRIPT_ARITY:
            self._check_arity(name, children, MATHML_SCRIPT_ARITY[name])
            return [self._scripted(name, children, depth)]

        if self.config.strict:
            raise UnsupportedConstructError(name)
        logger.warning("Unsupported MathML element <%s>, keeping its text content.", name)
        return [Run(text=_collapsed_text(element))]

    def _fenced(self, element: etree._Element, depth: int) -> Row:
        """
        ``<mfenced>``: open delimiter, children split by separators, close delimiter.
        The last separator repeats when there are more gaps than separators.
        """
        separators = "".join(element.get('separators', ',').split())
        fenced: List[BaseNode] = [Run(text=element.get('open', '('))]
        for index, child in enumerate(_element_children(element)):
            if index and separators:
                fenced.append(Run(text=separators[min(index - 1, len(separators) - 1)]))
            fenced.append(self._node(child, depth))
        fenced.append(Run(text=element.get('close', ')')))
        return Row(children=fenced)

    def _token(self, element: etree._Element, name: str) -> Item:
        text = _collapsed_text(element)
        if name == 'mo' and text in LARGE_OPERATOR_GLYPHS:
            return PendingOperator(text)
        variant = element.get('mathvariant')
        style = MATHML_VARIANT_STYLES.get(variant) if variant else None
        if style is None and name == 'mtext':
            style = 'p'
        return Run(text=text, style=style)

    def _scripted(self, name: str, children: List[etree._Element], depth: int) -> Item:
        base = children[0]
        glyph = _large_operator_glyph(base)
        first = self._node(children[1], depth)
        second = self._node(children[2], depth) if len(children) == 3 else None

        if glyph is not None:
            location = 'subSup' if name.startswith('msub') or name == 'msup' else 'undOvr'
            if name in ('msup', 'mover'):
                return PendingOperator(glyph, sup=first, limit_location=location)
            return PendingOperator(glyph, sub=first, sup=second, limit_location=location)

        base_node = self._node(base, depth)
        if name in ('msup', 'mover'):
            return Superscript(base=base_node, script=first)
        if name in ('msub', 'munder'):
            return Subscript(base=base_node, script=first)
        return SubSuperscript(base=base_node, sub=first, sup=second)

    @staticmethod
    def _check_arity(name: str, children: List[etree._Element], expected: int) -> None:
        if len(children) != expected:
            raise ParseError(f"<{name}> expects {expected} children, found {len(children)}")


def parse_mathml(markup: MarkupInput, config: Optional[ConverterConfig] = None) -> Row:
    """
    Parses presentation MathML into an expression tree.

    Args:
        markup (MarkupInput): MathML text/bytes or an already parsed lxml element.
        config (Optional[ConverterConfig]): Strictness and depth settings.

    Returns:
        Row: Root of the expression tree.

    Raises:
        ParseError: If the markup is not well-formed XML or an element has the wrong arity.
    """
    return MathMLParser(config).parse(markup)


def render_latex_to_mathml(latex: str, display: bool = False) -> str:
    """Renders LaTeX to MathML with the external ``latex2mathml`` renderer."""
    try:
        return latex2mathml.converter.convert(latex, display='block' if display else 'inline')
    except Exception as e:
        raise ParseError(f"latex2mathml could not render the fragment: {e}") from e
