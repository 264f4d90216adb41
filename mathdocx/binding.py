# mathdocx/binding.py
"""
Postfix reductions shared by the LaTeX and MathML front ends.

Parsers emit a flat item stream made of finished nodes plus two kinds of
placeholders: ``ScriptMarker`` for a ``^``/``_`` that still needs its base,
and ``PendingOperator`` for a large operator that still needs its operand.
``bind_scripts`` resolves the markers, ``fold_operators`` the operators.
"""

from typing import List, Optional, Union

from .errors import NestingDepthError
from .nodes import (BaseNode, LargeOperator, LimitLocation, Row, Run, Subscript, SubSuperscript, Superscript,
                    tree_depth)


class ScriptMarker:
    """A ``^`` (``sup``) or ``_`` (``sub``) whose base is the previous item."""

    __slots__ = ('kind', 'script')

    def __init__(self, kind: str, script: BaseNode):
        self.kind, self.script = kind, script

    def __repr__(self) -> str:
        return f"ScriptMarker({self.kind!r}, {self.script!r})"


class PendingOperator:
    """A large operator whose limits may still arrive and whose operand is the next sibling."""

    __slots__ = ('glyph', 'sub', 'sup', 'limit_location')

    def __init__(self, glyph: str, sub: Optional[BaseNode] = None, sup: Optional[BaseNode] = None,
                 limit_location: Optional[LimitLocation] = None):
        self.glyph, self.sub, self.sup, self.limit_location = glyph, sub, sup, limit_location

    def accepts(self, marker: ScriptMarker) -> bool:
        return (self.sub if marker.kind == 'sub' else self.sup) is None

    def attach(self, marker: ScriptMarker) -> None:
        if marker.kind == 'sub':
            self.sub = marker.script
        else:
            self.sup = marker.script

    def resolve(self, operand: BaseNode) -> LargeOperator:
        return LargeOperator(glyph=self.glyph, operand=operand, sub=self.sub, sup=self.sup,
                             limit_location=self.limit_location)

    def __repr__(self) -> str:
        return f"PendingOperator({self.glyph!r}, sub={self.sub!r}, sup={self.sup!r})"


Item = Union[BaseNode, ScriptMarker, PendingOperator]


def _bounded(node: BaseNode, max_depth: Optional[int]) -> BaseNode:
    # Chains of scripts or operators grow the tree without opening a group.
    if max_depth is not None and tree_depth(node) > max_depth:
        raise NestingDepthError(max_depth)
    return node


def _wrap(base: BaseNode, marker: ScriptMarker) -> BaseNode:
    if marker.kind == 'sup':
        return Superscript(base=base, script=marker.script)
    return Subscript(base=base, script=marker.script)


def _merge(scripted: BaseNode, marker: ScriptMarker) -> Optional[BaseNode]:
    """Folds a sub onto a fresh superscript (or vice versa) into one SubSuperscript."""
    if isinstance(scripted, Superscript) and marker.kind == 'sub':
        return SubSuperscript(base=scripted.base, sub=marker.script, sup=scripted.script)
    if isinstance(scripted, Subscript) and marker.kind == 'sup':
        return SubSuperscript(base=scripted.base, sub=scripted.script, sup=marker.script)
    return None


def bind_scripts(items: List[Item], max_depth: Optional[int] = None) -> List[Item]:
    """
    Binds every script marker to the item emitted immediately before it.

    ``pending`` holds the node produced by the previous marker; only that
    node may absorb a script of the opposite kind, so ``x^2_3`` and
    ``x_3^2`` both become ``SubSuperscript(x, 3, 2)`` while ``{x^2}_3``
    stays nested. A marker with nothing before it gets an empty run as base.

    Args:
        items (List[Item]): Item stream from a parser, left to right.
        max_depth (Optional[int]): Deepest tree a bound node may have.

    Returns:
        List[Item]: The stream with no ScriptMarker left in it.

    Raises:
        NestingDepthError: If chained scripts such as ``x^2^2^2...`` nest past ``max_depth``.
    """
    output: List[Item] = []
    pending: Optional[BaseNode] = None
    for item in items:
        if not isinstance(item, ScriptMarker):
            output.append(item)
            pending = None
            continue

        previous = output[-1] if output else None
        if isinstance(previous, PendingOperator) and previous.accepts(item):
            previous.attach(item)
            continue
        if pending is not None and previous is pending:
            merged = _merge(pending, item)
            if merged is not None:
                output[-1] = pending = merged
                continue

        if not output:
            base = Run(text='')
        else:
            base = output.pop()
            if isinstance(base, PendingOperator):
                # Both limit slots are taken; the operator becomes a plain base.
                base = base.resolve(Row())
        pending = _bounded(_wrap(base, item), max_depth)
        output.append(pending)
    return output


def fold_operators(items: List[Item], max_depth: Optional[int] = None) -> List[BaseNode]:
    """
    Gives each pending large operator the immediately following sibling as operand.

    Folding runs right to left so ``\\sum_i \\sum_j a`` nests the inner
    operator (already holding ``a``) inside the outer one. An operator at
    the end of its sequence gets an empty row. With ``max_depth`` set, a run
    of operators nesting deeper than that raises ``NestingDepthError``.
    """
    folded: List[BaseNode] = []
    for item in reversed(items):
        if isinstance(item, PendingOperator):
            operand = folded.pop() if folded else Row()
            folded.append(_bounded(item.resolve(operand), max_depth))
        else:
            folded.append(item)
    folded.reverse()
    return folded
