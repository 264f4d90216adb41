"""Converter facade and per-fragment failure isolation."""

from mathdocx import (ConverterConfig, convert_fragment, latex_to_omml, latex_to_omml_string,
                      latex_to_omml_via_mathml, latex_to_tree, mathml_to_omml, mathml_to_tree)
from mathdocx.nodes import Fraction
from mathdocx.omml import m_tag

from .conftest import xpath


class TestConversions:
    def test_latex_to_tree(self) -> None:
        assert isinstance(latex_to_tree(r'\frac{a}{b}').children[0], Fraction)

    def test_mathml_to_tree(self) -> None:
        tree = mathml_to_tree('<math><mfrac><mi>a</mi><mi>b</mi></mfrac></math>')
        assert isinstance(tree.children[0], Fraction)

    def test_latex_to_omml_string(self) -> None:
        xml = latex_to_omml_string(r'\frac{a}{b}')
        assert xml.startswith('<m:oMath')
        assert '<m:f>' in xml

    def test_mathml_to_omml_display(self) -> None:
        root = mathml_to_omml('<math><mi>x</mi></math>', display=True)
        assert root.tag == m_tag('oMathPara')

    def test_alignment_defaults_to_config(self) -> None:
        root = latex_to_omml('x', display=True, config=ConverterConfig(alignment='right'))
        assert xpath(root, 'm:oMathParaPr/m:jc/@m:val') == ['right']

    def test_via_external_renderer(self) -> None:
        root = latex_to_omml_via_mathml(r'\frac{1}{2}')
        assert len(xpath(root, '//m:f')) == 1


class TestConvertFragment:
    def test_success(self) -> None:
        result = convert_fragment('x^2', display=True)
        assert result.ok
        assert result.error is None
        assert result.omml.tag == m_tag('oMathPara')

    def test_parse_failure_is_contained(self) -> None:
        result = convert_fragment(r'\frac{a}{b')
        assert not result.ok
        assert result.omml is None
        assert 'Unmatched' in result.error
        assert result.source == r'\frac{a}{b'

    def test_strict_mode_failure_is_contained(self) -> None:
        result = convert_fragment(r'\foo', config=ConverterConfig(strict=True))
        assert not result.ok
        assert '\\foo' in result.error

    def test_unknown_command_is_not_a_failure_by_default(self) -> None:
        result = convert_fragment(r'\foo{x}')
        assert result.ok

    def test_failures_do_not_affect_following_fragments(self) -> None:
        results = [convert_fragment(source) for source in ['a', '{', 'b']]
        assert [result.ok for result in results] == [True, False, True]

    def test_runaway_chains_fail_the_fragment_only(self) -> None:
        for source in ['x' + '^2' * 600, '\\sum' * 3000 + 'x']:
            result = convert_fragment(source)
            assert not result.ok
            assert 'nesting depth' in result.error
