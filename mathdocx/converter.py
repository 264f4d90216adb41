# mathdocx/converter.py
"""
Entry points used by document code: LaTeX or MathML in, OMML or typed
components out. ``convert_fragment`` is the fail-soft variant that a document
builder calls for each formula so one bad fragment never aborts a document.
"""

from typing import List, NamedTuple, Optional

from lxml import etree

from . import omml
from .components import AnyMathComponent
from .config import ConverterConfig
from .errors import MathConversionError
from .latex_parser import parse_latex
from .mathml_parser import MarkupInput, parse_mathml, render_latex_to_mathml
from .nodes import Row
from .serializer import serialize, serialize_components, serialize_linear
from .utils.logger import get_logger

logger = get_logger(__name__)


class FragmentResult(NamedTuple):
    source: str
    omml: Optional[etree._Element]
    error: Optional[str]

    @property
    def ok(self) -> bool:
        return self.omml is not None


def latex_to_tree(source: str, config: Optional[ConverterConfig] = None) -> Row:
    return parse_latex(source, config)


def mathml_to_tree(markup: MarkupInput, config: Optional[ConverterConfig] = None) -> Row:
    return parse_mathml(markup, config)


def latex_to_omml(source: str, display: bool = False, alignment: Optional[str] = None,
                  config: Optional[ConverterConfig] = None) -> etree._Element:
    """
    Converts a LaTeX math fragment into an OMML element.

    Args:
        source (str): LaTeX math, without ``$`` delimiters.
        display (bool): True for a block equation (``m:oMathPara``).
        alignment (Optional[str]): Block justification, defaults to ``config.alignment``.
        config (Optional[ConverterConfig]): Converter settings.

    Returns:
        etree._Element: The ``m:oMath`` / ``m:oMathPara`` element.
    """
    config = config or ConverterConfig()
    return serialize(parse_latex(source, config), display, alignment or config.alignment)


def latex_to_omml_string(source: str, display: bool = False, alignment: Optional[str] = None,
                         config: Optional[ConverterConfig] = None) -> str:
    return omml.to_string(latex_to_omml(source, display, alignment, config))


def mathml_to_omml(markup: MarkupInput, display: bool = False, alignment: Optional[str] = None,
                   config: Optional[ConverterConfig] = None) -> etree._Element:
    config = config or ConverterConfig()
    return serialize(parse_mathml(markup, config), display, alignment or config.alignment)


def latex_to_omml_via_mathml(source: str, display: bool = False, alignment: Optional[str] = None,
                             config: Optional[ConverterConfig] = None) -> etree._Element:
    """Renders with latex2mathml first, then converts through the MathML front end."""
    return mathml_to_omml(render_latex_to_mathml(source, display), display, alignment, config)


def latex_to_components(source: str, config: Optional[ConverterConfig] = None) -> List[AnyMathComponent]:
    return serialize_components(parse_latex(source, config))


def latex_to_linear(source: str, config: Optional[ConverterConfig] = None) -> str:
    """Converts a LaTeX fragment to Word's Linear format, e.g. ``(a)/(b)`` for ``\\frac{a}{b}``."""
    return serialize_linear(parse_latex(source, config))


def convert_fragment(source: str, display: bool = False,
                     config: Optional[ConverterConfig] = None) -> FragmentResult:
    """
    Converts one fragment without letting conversion errors escape.

    Returns:
        FragmentResult: ``omml`` is None and ``error`` is set when the
        fragment could not be converted; the caller substitutes its fallback.
    """
    try:
        return FragmentResult(source, latex_to_omml(source, display, config=config), None)
    except MathConversionError as e:
        logger.warning("Formula conversion failed for %r: %s", source, e)
        return FragmentResult(source, None, str(e))
