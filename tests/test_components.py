"""Typed math components: structure, JSON exchange and OMML rendering."""

import pytest
from lxml import etree
from pydantic import ValidationError

from mathdocx import MathComponentList, components_to_omml, latex_to_components, latex_to_omml
from mathdocx.components import MathFraction, MathNary, MathRadical, MathRun, MathSubSuperScript

from .conftest import xpath


class TestComponentStructure:
    def test_fraction(self) -> None:
        assert latex_to_components(r'\frac{a}{b}') == [
            MathFraction(numerator=[MathRun(text='a')], denominator=[MathRun(text='b')])
        ]

    def test_rows_are_spliced(self) -> None:
        components = latex_to_components('{a{b}}c')
        assert components == [MathRun(text='a'), MathRun(text='b'), MathRun(text='c')]

    def test_scripts_and_radicals(self) -> None:
        sub_sup, radical = latex_to_components(r'x_3^2 \sqrt{y}')
        assert sub_sup == MathSubSuperScript(children=[MathRun(text='x')], sub_script=[MathRun(text='3')],
                                             super_script=[MathRun(text='2')])
        assert radical == MathRadical(children=[MathRun(text='y')], degree=None)

    def test_large_operator(self) -> None:
        nary, = latex_to_components(r'\int_0 f')
        assert nary.char == '∫'
        assert nary.limit_location == 'subSup'
        assert nary.sub_script == [MathRun(text='0')]
        assert nary.super_script is None
        assert nary.children == [MathRun(text='f')]


class TestComponentExchange:
    def test_json_dump_uses_type_tags(self) -> None:
        data = MathComponentList.dump_python(latex_to_components(r'\frac{1}{x}'))
        assert data[0]['type'] == 'fraction'
        assert data[0]['numerator'][0] == {'type': 'run', 'text': '1', 'style': None}

    def test_validate_from_builder_json(self) -> None:
        payload = '[{"type": "nary", "char": "∑", "children": [{"type": "run", "text": "k"}]}]'
        nary, = MathComponentList.validate_json(payload)
        assert isinstance(nary, MathNary)
        assert nary.children == [MathRun(text='k')]

    def test_unknown_type_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            MathComponentList.validate_python([{'type': 'matrix'}])


class TestComponentRendering:
    @pytest.mark.parametrize('source', [
        r'\frac{1}{2}',
        r'x_3^2 + \sqrt[3]{y}',
        r'\sum_{i=1}^{n} a_i',
        r'\text{area } = \pi r^2',
    ])
    def test_components_render_like_the_omml_serializer(self, source: str) -> None:
        from_components = components_to_omml(latex_to_components(source))
        assert etree.tostring(from_components) == etree.tostring(latex_to_omml(source))

    def test_empty_limit_is_shown_but_absent_limit_is_hidden(self) -> None:
        shown = MathNary(char='∑', sub_script=[], children=[]).to_omml()
        assert xpath(shown, 'm:naryPr/m:subHide') == []
        assert xpath(shown, 'm:naryPr/m:supHide/@m:val') == ['1']
        assert len(xpath(shown, 'm:sub')) == 1
