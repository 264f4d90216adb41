# mathdocx/docx_adapter.py
"""Places converted equations into python-docx documents."""

from typing import Any, Dict, List, Optional, Union

from docx import Document
from docx.document import Document as DocumentObject
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.shared import RGBColor
from docx.text.paragraph import Paragraph
from lxml import etree
from pydantic import BaseModel

from .config import ConverterConfig
from .converter import convert_fragment

ALIGNMENT_MAP = {
    'left': WD_ALIGN_PARAGRAPH.LEFT,
    'center': WD_ALIGN_PARAGRAPH.CENTER,
    'right': WD_ALIGN_PARAGRAPH.RIGHT,
}
FALLBACK_COLOR = RGBColor(255, 0, 0)


class FormulaEntry(BaseModel):
    latex: str
    display: bool = True
    label: Optional[str] = None


def append_omml(paragraph: Paragraph, omml_element: etree._Element) -> Paragraph:
    """Appends an ``m:oMath``/``m:oMathPara`` element to the paragraph's XML."""
    paragraph._p.append(omml_element)
    return paragraph


def _add_fallback(paragraph: Paragraph, source: str, config: ConverterConfig) -> None:
    paragraph.add_run(config.fallback_text(source)).font.color.rgb = FALLBACK_COLOR


def add_inline_formula(paragraph: Paragraph, latex: str, config: Optional[ConverterConfig] = None) -> bool:
    """
    Adds an inline equation to an existing paragraph.

    Args:
        paragraph (Paragraph): Target python-docx paragraph.
        latex (str): LaTeX math fragment.
        config (Optional[ConverterConfig]): Converter settings.

    Returns:
        bool: False if the fragment failed and a red fallback run was added instead.
    """
    config = config or ConverterConfig()
    result = convert_fragment(latex, display=False, config=config)
    if result.ok:
        append_omml(paragraph, result.omml)
    else:
        _add_fallback(paragraph, latex, config)
    return result.ok


def add_display_formula(document: DocumentObject, latex: str, alignment: Optional[str] = None,
                        config: Optional[ConverterConfig] = None) -> Paragraph:
    """Adds a new paragraph holding a block equation, or the fallback text."""
    config = config or ConverterConfig()
    alignment = alignment or config.alignment
    paragraph = document.add_paragraph()
    paragraph.alignment = ALIGNMENT_MAP.get(alignment, WD_ALIGN_PARAGRAPH.CENTER)
    result = convert_fragment(latex, display=True, config=config.model_copy(update={'alignment': alignment}))
    if result.ok:
        append_omml(paragraph, result.omml)
    else:
        _add_fallback(paragraph, latex, config)
    return paragraph


def build_formula_document(entries: List[Union[FormulaEntry, Dict[str, Any]]],
                           config: Optional[ConverterConfig] = None) -> DocumentObject:
    """
    Generates a document with one paragraph per formula.

    Display entries become centered block equations (preceded by their label,
    if any); inline entries are appended after the label in one paragraph.
    """
    config = config or ConverterConfig()
    document = Document()
    for raw_entry in entries:
        entry = raw_entry if isinstance(raw_entry, FormulaEntry) else FormulaEntry(**raw_entry)
        if entry.display:
            if entry.label:
                document.add_paragraph(entry.label)
            add_display_formula(document, entry.latex, config=config)
        else:
            paragraph = document.add_paragraph(f"{entry.label} " if entry.label else "")
            add_inline_formula(paragraph, entry.latex, config=config)
    return document
