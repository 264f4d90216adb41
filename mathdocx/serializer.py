# mathdocx/serializer.py
"""
Visitors that walk an expression tree and emit OMML elements, typed
components or Linear-format text. Each node kind has one handler; a kind
without a handler falls back to ``generic_visit``, which concatenates its
children's output.
"""

import re
from typing import Any, List

from lxml import etree

from . import omml
from .components import (AnyMathComponent, MathFraction, MathNary, MathRadical, MathRun, MathSubScript,
                         MathSubSuperScript, MathSuperScript)
from .errors import InvariantViolation
from .nodes import BaseNode, LargeOperator, Row, flatten
from .symbols import INTEGRAL_GLYPHS, KNOWN_FUNCTIONS


def limit_location_for(node: LargeOperator) -> str:
    if node.limit_location is not None:
        return node.limit_location
    return 'subSup' if node.glyph in INTEGRAL_GLYPHS else 'undOvr'


class NodeVisitor:
    """Dispatches ``visit_<kind>`` for each node; every handler returns a list."""

    def visit(self, node: Any) -> List[Any]:
        if not isinstance(node, BaseNode):
            raise InvariantViolation(f"Expected an expression node, got {type(node).__name__}")
        handler = getattr(self, 'visit_' + node.kind, None)
        if handler is None:
            return self.generic_visit(node)
        return handler(node)

    def generic_visit(self, node: BaseNode) -> List[Any]:
        result = []
        for child in node.child_nodes():
            result.extend(self.visit(child))
        return result

    def visit_row(self, node: BaseNode) -> List[Any]:
        return self.generic_visit(node)

    @staticmethod
    def require(node: BaseNode, field: str) -> BaseNode:
        """Returns a structurally required child or fails loudly."""
        value = getattr(node, field, None)
        if value is None:
            raise InvariantViolation(f"{type(node).__name__} node is missing its {field}")
        return value

    def visit_optional(self, node: BaseNode, field: str):
        value = getattr(node, field, None)
        return self.visit(value) if value is not None else None


class OmmlVisitor(NodeVisitor):
    """Emits lxml ``m:*`` elements."""

    def visit_run(self, node) -> List[etree._Element]:
        return [omml.create_run(node.text, node.style)]

    def visit_fraction(self, node) -> List[etree._Element]:
        num = self.visit(self.require(node, 'numerator'))
        den = self.visit(self.require(node, 'denominator'))
        return [omml.create_fraction(num, den)]

    def visit_radical(self, node) -> List[etree._Element]:
        body = self.visit(self.require(node, 'body'))
        return [omml.create_radical(body, self.visit_optional(node, 'degree'))]

    def visit_superscript(self, node) -> List[etree._Element]:
        base = self.visit(self.require(node, 'base'))
        return [omml.create_superscript(base, self.visit(self.require(node, 'script')))]

    def visit_subscript(self, node) -> List[etree._Element]:
        base = self.visit(self.require(node, 'base'))
        return [omml.create_subscript(base, self.visit(self.require(node, 'script')))]

    def visit_subsuperscript(self, node) -> List[etree._Element]:
        base = self.visit(self.require(node, 'base'))
        sub = self.visit(self.require(node, 'sub'))
        return [omml.create_subsup(base, sub, self.visit(self.require(node, 'sup')))]

    def visit_large_operator(self, node) -> List[etree._Element]:
        operand = self.visit(self.require(node, 'operand'))
        return [omml.create_nary(node.glyph, limit_location_for(node), self.visit_optional(node, 'sub'),
                                 self.visit_optional(node, 'sup'), operand)]


class ComponentVisitor(NodeVisitor):
    """Emits typed components with the same structure as ``OmmlVisitor``."""

    def visit_run(self, node) -> List[AnyMathComponent]:
        return [MathRun(text=node.text, style=node.style)]

    def visit_fraction(self, node) -> List[AnyMathComponent]:
        return [MathFraction(numerator=self.visit(self.require(node, 'numerator')),
                             denominator=self.visit(self.require(node, 'denominator')))]

    def visit_radical(self, node) -> List[AnyMathComponent]:
        return [MathRadical(children=self.visit(self.require(node, 'body')),
                            degree=self.visit_optional(node, 'degree'))]

    def visit_superscript(self, node) -> List[AnyMathComponent]:
        return [MathSuperScript(children=self.visit(self.require(node, 'base')),
                                super_script=self.visit(self.require(node, 'script')))]

    def visit_subscript(self, node) -> List[AnyMathComponent]:
        return [MathSubScript(children=self.visit(self.require(node, 'base')),
                              sub_script=self.visit(self.require(node, 'script')))]

    def visit_subsuperscript(self, node) -> List[AnyMathComponent]:
        return [MathSubSuperScript(children=self.visit(self.require(node, 'base')),
                                   sub_script=self.visit(self.require(node, 'sub')),
                                   super_script=self.visit(self.require(node, 'sup')))]

    def visit_large_operator(self, node) -> List[AnyMathComponent]:
        return [MathNary(char=node.glyph, limit_location=limit_location_for(node),
                         sub_script=self.visit_optional(node, 'sub'),
                         super_script=self.visit_optional(node, 'sup'),
                         children=self.visit(self.require(node, 'operand')))]


class LinearVisitor(NodeVisitor):
    """
    Emits Word's Linear format (UnicodeMath) as text pieces.

    Script and fraction arguments go in parentheses, which Word drops when it
    builds the equation up. Bases and n-ary operands of several items use the
    invisible grouping brackets ``〖 〗`` instead, so no parentheses appear.
    """

    def text(self, node: BaseNode) -> str:
        return "".join(self.visit(node))

    def argument(self, node: BaseNode) -> str:
        return f"({self.text(node)})"

    def entity(self, node: BaseNode) -> str:
        text = self.text(node)
        if isinstance(node, Row) and len(flatten(node).children) > 1:
            return f"〖{text}〗"
        return text

    def visit_run(self, node) -> List[str]:
        if node.style == 'p':
            if '\\' + node.text in KNOWN_FUNCTIONS:
                return [node.text + ' ']
            return [f'"{node.text}"']
        return [node.text]

    def visit_fraction(self, node) -> List[str]:
        num = self.argument(self.require(node, 'numerator'))
        return [f"{num}/{self.argument(self.require(node, 'denominator'))}"]

    def visit_radical(self, node) -> List[str]:
        body = self.text(self.require(node, 'body'))
        if node.degree is None:
            return [f"\\sqrt({body})"]
        return [f"\\sqrt({self.text(node.degree)}&{body})"]

    def visit_superscript(self, node) -> List[str]:
        base = self.entity(self.require(node, 'base'))
        return [f"{base}^{self.argument(self.require(node, 'script'))}"]

    def visit_subscript(self, node) -> List[str]:
        base = self.entity(self.require(node, 'base'))
        return [f"{base}_{self.argument(self.require(node, 'script'))}"]

    def visit_subsuperscript(self, node) -> List[str]:
        base = self.entity(self.require(node, 'base'))
        sub = self.argument(self.require(node, 'sub'))
        return [f"{base}_{sub}^{self.argument(self.require(node, 'sup'))}"]

    def visit_large_operator(self, node) -> List[str]:
        operand = self.entity(self.require(node, 'operand'))
        parts = [node.glyph]
        if node.sub is not None:
            parts.append('_' + self.argument(node.sub))
        if node.sup is not None:
            parts.append('^' + self.argument(node.sup))
        parts.append('▒' + operand)
        return ["".join(parts)]


def serialize(tree: BaseNode, display: bool = False, alignment: str = 'center') -> etree._Element:
    """
    Serializes an expression tree to an OMML math root.

    Args:
        tree (BaseNode): Root of the expression tree.
        display (bool): Block equation (``m:oMathPara``) instead of inline ``m:oMath``.
        alignment (str): Justification of a block equation.

    Returns:
        etree._Element: ``m:oMath`` or ``m:oMathPara`` element.
    """
    elements = OmmlVisitor().visit(tree)
    if display:
        return omml.create_math_para(elements, alignment)
    return omml.create_math(elements)


def serialize_to_string(tree: BaseNode, display: bool = False, alignment: str = 'center') -> str:
    return omml.to_string(serialize(tree, display, alignment))


def serialize_components(tree: BaseNode) -> List[AnyMathComponent]:
    return ComponentVisitor().visit(tree)


def serialize_linear(tree: BaseNode) -> str:
    """Renders an expression tree as a Linear-format string, spaces collapsed."""
    return re.sub(' +', ' ', "".join(LinearVisitor().visit(tree))).strip()
