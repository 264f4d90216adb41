# mathdocx/__init__.py
"""LaTeX and MathML to OMML conversion for Word documents."""

from .components import AnyMathComponent, MathComponentList, components_to_omml
from .config import ConverterConfig, load_config
from .converter import (FragmentResult, convert_fragment, latex_to_components, latex_to_linear,
                        latex_to_omml, latex_to_omml_string, latex_to_omml_via_mathml, latex_to_tree, mathml_to_omml,
                        mathml_to_tree)
from .errors import (InvariantViolation, MathConversionError, NestingDepthError, ParseError,
                     UnsupportedConstructError)
from .latex_parser import parse_latex
from .mathml_parser import parse_mathml
from .serializer import serialize, serialize_components, serialize_linear, serialize_to_string

__version__ = "0.1.0"

__all__ = [
    "AnyMathComponent", "MathComponentList", "components_to_omml",
    "ConverterConfig", "load_config",
    "FragmentResult", "convert_fragment", "latex_to_components", "latex_to_linear", "latex_to_omml",
    "latex_to_omml_string", "latex_to_omml_via_mathml", "latex_to_tree", "mathml_to_omml", "mathml_to_tree",
    "InvariantViolation", "MathConversionError", "NestingDepthError", "ParseError", "UnsupportedConstructError",
    "parse_latex", "parse_mathml", "serialize", "serialize_components", "serialize_linear", "serialize_to_string",
    "__version__",
]
