"""Expression tree model and tree helpers."""

import pytest
from pydantic import ValidationError

from mathdocx.nodes import (Fraction, LargeOperator, Radical, Row, Run, SubSuperscript, Superscript, flatten,
                            restyle, text_content)
from mathdocx.serializer import serialize_to_string


class TestNodeModel:
    def test_nodes_are_frozen(self) -> None:
        run = Run(text='x')
        with pytest.raises(ValidationError):
            run.text = 'y'

    def test_fraction_requires_both_children(self) -> None:
        with pytest.raises(ValidationError):
            Fraction(numerator=Run(text='a'))

    def test_row_children_are_a_tuple(self) -> None:
        row = Row(children=[Run(text='a'), Run(text='b')])
        assert isinstance(row.children, tuple)
        assert row == Row(children=(Run(text='a'), Run(text='b')))

    def test_child_nodes_order(self) -> None:
        node = SubSuperscript(base=Run(text='x'), sub=Run(text='i'), sup=Run(text='2'))
        assert [text_content(child) for child in node.child_nodes()] == ['x', 'i', '2']

    def test_child_nodes_skip_absent_optionals(self) -> None:
        node = Radical(body=Run(text='x'))
        assert node.child_nodes() == [Run(text='x')]
        op = LargeOperator(glyph='∑', operand=Run(text='a'), sup=Run(text='n'))
        assert op.child_nodes() == [Run(text='n'), Run(text='a')]

    def test_discriminated_union_from_dict(self) -> None:
        node = Superscript(base={'kind': 'run', 'text': 'e'}, script={'kind': 'row', 'children': []})
        assert node.base == Run(text='e')
        assert node.script == Row()


class TestFlatten:
    def test_nested_rows_are_spliced(self) -> None:
        nested = Row(children=[Row(children=[Run(text='a')]),
                               Row(children=[Row(children=[Run(text='b')]), Run(text='c')])])
        assert flatten(nested) == Row(children=[Run(text='a'), Run(text='b'), Run(text='c')])

    def test_flatten_reaches_inside_structures(self) -> None:
        frac = Fraction(numerator=Row(children=[Row(children=[Run(text='1')])]), denominator=Run(text='2'))
        assert flatten(frac).numerator == Row(children=[Run(text='1')])

    def test_flattening_is_transparent_to_serialization(self) -> None:
        leaves = [Run(text='a'), Run(text='+'), Run(text='b')]
        nested = Row(children=[Row(children=leaves[:1]), Row(children=[Row(children=leaves[1:])])])
        flat = Row(children=leaves)
        assert serialize_to_string(nested) == serialize_to_string(flat)
        assert serialize_to_string(flatten(nested)) == serialize_to_string(flat)


class TestHelpers:
    def test_text_content_in_document_order(self) -> None:
        tree = Row(children=[Fraction(numerator=Run(text='a'), denominator=Run(text='b')), Run(text='c')])
        assert text_content(tree) == 'abc'

    def test_restyle_applies_to_every_run(self) -> None:
        tree = Superscript(base=Run(text='v'), script=Row(children=[Run(text='2')]))
        styled = restyle(tree, 'b')
        assert styled.base.style == 'b'
        assert styled.script.children[0].style == 'b'
        assert tree.base.style is None
