"""Placing equations into python-docx documents."""

import io

from docx import Document
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.shared import RGBColor

from mathdocx import ConverterConfig
from mathdocx.docx_adapter import (FormulaEntry, add_display_formula, add_inline_formula, append_omml,
                                   build_formula_document)
from mathdocx.omml import m_tag
from mathdocx.serializer import serialize
from mathdocx.nodes import Row, Run


class TestInlineFormula:
    def test_inline_equation_follows_text(self) -> None:
        document = Document()
        paragraph = document.add_paragraph('Area: ')
        assert add_inline_formula(paragraph, r'\pi r^2') is True
        assert len(paragraph._p.findall(m_tag('oMath'))) == 1
        assert paragraph.text == 'Area: '

    def test_failed_fragment_gets_red_fallback(self) -> None:
        document = Document()
        paragraph = document.add_paragraph()
        assert add_inline_formula(paragraph, r'\frac{a}{b') is False
        assert paragraph.runs[-1].text == r'[Formula conversion failed: \frac{a}{b]'
        assert paragraph.runs[-1].font.color.rgb == RGBColor(255, 0, 0)
        assert paragraph._p.findall(m_tag('oMath')) == []

    def test_custom_fallback_template(self) -> None:
        paragraph = Document().add_paragraph()
        add_inline_formula(paragraph, '{', config=ConverterConfig(fallback_template='<<{source}>>'))
        assert paragraph.runs[-1].text == '<<{>>'


class TestDisplayFormula:
    def test_display_equation_paragraph(self) -> None:
        document = Document()
        paragraph = add_display_formula(document, r'\sum_{i=1}^{n} i')
        assert paragraph.alignment == WD_ALIGN_PARAGRAPH.CENTER
        para, = paragraph._p.findall(m_tag('oMathPara'))
        assert para.find(m_tag('oMathParaPr')).find(m_tag('jc')).get(m_tag('val')) == 'center'

    def test_display_alignment(self) -> None:
        paragraph = add_display_formula(Document(), 'x', alignment='left')
        assert paragraph.alignment == WD_ALIGN_PARAGRAPH.LEFT
        para, = paragraph._p.findall(m_tag('oMathPara'))
        assert para.find(m_tag('oMathParaPr')).find(m_tag('jc')).get(m_tag('val')) == 'left'

    def test_append_prebuilt_omml(self) -> None:
        paragraph = Document().add_paragraph()
        append_omml(paragraph, serialize(Row(children=[Run(text='z')])))
        assert len(paragraph._p.findall(m_tag('oMath'))) == 1


class TestFormulaDocument:
    def test_document_survives_save_and_reload(self) -> None:
        entries = [
            {'label': 'Quadratic:', 'latex': r'x = \frac{-b \pm \sqrt{b^2-4ac}}{2a}'},
            FormulaEntry(latex='a^2 + b^2', display=False, label='Pythagoras'),
            {'latex': r'\frac{'},
        ]
        document = build_formula_document(entries)
        buffer = io.BytesIO()
        document.save(buffer)
        buffer.seek(0)

        reloaded = Document(buffer)
        body = reloaded.element.body
        assert len(list(body.iter(m_tag('oMathPara')))) == 1
        # The inline oMath plus the one inside the display oMathPara.
        assert len(list(body.iter(m_tag('oMath')))) == 2
        texts = [paragraph.text for paragraph in reloaded.paragraphs]
        assert 'Quadratic:' in texts
        assert 'Pythagoras ' in texts
        assert '[Formula conversion failed: \\frac{]' in texts

    def test_runaway_formula_does_not_abort_document(self) -> None:
        document = build_formula_document([{'latex': 'x' + '^2' * 600}, {'latex': 'y'}])
        body = document.element.body
        assert len(list(body.iter(m_tag('oMathPara')))) == 1
        assert document.paragraphs[0].runs[-1].font.color.rgb == RGBColor(255, 0, 0)
