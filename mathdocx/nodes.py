# mathdocx/nodes.py
"""
Expression tree shared by both parsers and every serializer.

The tree is a closed set of immutable node kinds discriminated on ``kind``.
Nodes are built once per conversion and never mutated afterwards; the helper
functions below return new trees instead of editing in place.
"""

from typing import Annotated, Callable, ClassVar, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

RunStyle = Literal['p', 'b', 'i', 'bi']
LimitLocation = Literal['undOvr', 'subSup']


class BaseNode(BaseModel):
    model_config = ConfigDict(frozen=True)

    # Names of the single-node fields, in serialization order.
    child_fields: ClassVar[Tuple[str, ...]] = ()

    def child_nodes(self) -> List['ExpressionNode']:
        return [getattr(self, name) for name in self.child_fields if getattr(self, name, None) is not None]


class Run(BaseNode):
    kind: Literal['run'] = 'run'
    text: str = ''
    style: Optional[RunStyle] = None


class Row(BaseNode):
    kind: Literal['row'] = 'row'
    children: Tuple['ExpressionNode', ...] = ()

    def child_nodes(self) -> List['ExpressionNode']:
        return list(self.children)


class Fraction(BaseNode):
    kind: Literal['fraction'] = 'fraction'
    numerator: 'ExpressionNode'
    denominator: 'ExpressionNode'
    child_fields: ClassVar[Tuple[str, ...]] = ('numerator', 'denominator')


class Radical(BaseNode):
    kind: Literal['radical'] = 'radical'
    body: 'ExpressionNode'
    degree: Optional['ExpressionNode'] = None
    child_fields: ClassVar[Tuple[str, ...]] = ('degree', 'body')


class Superscript(BaseNode):
    kind: Literal['superscript'] = 'superscript'
    base: 'ExpressionNode'
    script: 'ExpressionNode'
    child_fields: ClassVar[Tuple[str, ...]] = ('base', 'script')


class Subscript(BaseNode):
    kind: Literal['subscript'] = 'subscript'
    base: 'ExpressionNode'
    script: 'ExpressionNode'
    child_fields: ClassVar[Tuple[str, ...]] = ('base', 'script')


class SubSuperscript(BaseNode):
    kind: Literal['subsuperscript'] = 'subsuperscript'
    base: 'ExpressionNode'
    sub: 'ExpressionNode'
    sup: 'ExpressionNode'
    child_fields: ClassVar[Tuple[str, ...]] = ('base', 'sub', 'sup')


class LargeOperator(BaseNode):
    """A sum, integral or similar operator with optional limits.

    ``limit_location`` of ``None`` means the glyph's customary placement:
    integrals take their limits as scripts, everything else above/below.
    """
    kind: Literal['large_operator'] = 'large_operator'
    glyph: str
    operand: 'ExpressionNode'
    sub: Optional['ExpressionNode'] = None
    sup: Optional['ExpressionNode'] = None
    limit_location: Optional[LimitLocation] = None
    child_fields: ClassVar[Tuple[str, ...]] = ('sub', 'sup', 'operand')


ExpressionNode = Annotated[
    Union[Run, Row, Fraction, Radical, Superscript, Subscript, SubSuperscript, LargeOperator],
    Field(discriminator='kind')
]

NODE_TYPES = (Run, Row, Fraction, Radical, Superscript, Subscript, SubSuperscript, LargeOperator)
for _node_type in NODE_TYPES:
    _node_type.model_rebuild()


# --- Tree helpers ---
def map_children(node: BaseNode, fn: Callable[[BaseNode], BaseNode]) -> BaseNode:
    """Returns a copy of ``node`` with ``fn`` applied to each direct child."""
    if isinstance(node, Row):
        return node.model_copy(update={'children': tuple(fn(child) for child in node.children)})
    update = {}
    for name in node.child_fields:
        child = getattr(node, name)
        if child is not None:
            update[name] = fn(child)
    return node.model_copy(update=update) if update else node


def flatten(node: BaseNode) -> BaseNode:
    """Splices rows nested directly inside rows into their parent, recursively."""
    if isinstance(node, Row):
        children = []
        for child in node.children:
            child = flatten(child)
            if isinstance(child, Row):
                children.extend(child.children)
            else:
                children.append(child)
        return Row(children=children)
    return map_children(node, flatten)


def text_content(node: BaseNode) -> str:
    """Concatenates the text of every run in document order."""
    if isinstance(node, Run):
        return node.text
    return "".join(text_content(child) for child in node.child_nodes())


def tree_depth(node: BaseNode) -> int:
    """Number of node levels from ``node`` down to its deepest leaf. Walks with an explicit stack."""
    deepest = 0
    stack = [(node, 1)]
    while stack:
        current, level = stack.pop()
        deepest = max(deepest, level)
        stack.extend((child, level + 1) for child in current.child_nodes())
    return deepest


def restyle(node: BaseNode, style: Optional[RunStyle]) -> BaseNode:
    """Applies a run style to every run in the tree (``\\mathbf`` and friends)."""
    if isinstance(node, Run):
        return node.model_copy(update={'style': style})
    return map_children(node, lambda child: restyle(child, style))


def as_node(items: List[BaseNode]) -> BaseNode:
    """Collapses a parsed sequence into one node: the sole item, or a Row."""
    if len(items) == 1:
        return items[0]
    return Row(children=items)
