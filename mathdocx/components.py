# mathdocx/components.py
"""
Typed math components for document builders that assemble equations from
objects instead of raw XML. One component per OMML construct; every
component can render itself with ``to_omml()``.
"""

from typing import Annotated, List, Literal, Optional, Union

from lxml import etree
from pydantic import BaseModel, Field, TypeAdapter

from . import omml


def _render(components: List['AnyMathComponent']) -> List[etree._Element]:
    return [component.to_omml() for component in components]


class MathRun(BaseModel):
    type: Literal['run'] = 'run'; text: str; style: Optional[Literal['p', 'b', 'i', 'bi']] = None

    def to_omml(self) -> etree._Element:
        return omml.create_run(self.text, self.style)


class MathFraction(BaseModel):
    type: Literal['fraction'] = 'fraction'
    numerator: List['AnyMathComponent'] = Field(default_factory=list)
    denominator: List['AnyMathComponent'] = Field(default_factory=list)

    def to_omml(self) -> etree._Element:
        return omml.create_fraction(_render(self.numerator), _render(self.denominator))


class MathRadical(BaseModel):
    type: Literal['radical'] = 'radical'
    children: List['AnyMathComponent'] = Field(default_factory=list)
    degree: Optional[List['AnyMathComponent']] = None

    def to_omml(self) -> etree._Element:
        degree = _render(self.degree) if self.degree is not None else None
        return omml.create_radical(_render(self.children), degree)


class MathSuperScript(BaseModel):
    type: Literal['superscript'] = 'superscript'
    children: List['AnyMathComponent'] = Field(default_factory=list)
    super_script: List['AnyMathComponent'] = Field(default_factory=list)

    def to_omml(self) -> etree._Element:
        return omml.create_superscript(_render(self.children), _render(self.super_script))


class MathSubScript(BaseModel):
    type: Literal['subscript'] = 'subscript'
    children: List['AnyMathComponent'] = Field(default_factory=list)
    sub_script: List['AnyMathComponent'] = Field(default_factory=list)

    def to_omml(self) -> etree._Element:
        return omml.create_subscript(_render(self.children), _render(self.sub_script))


class MathSubSuperScript(BaseModel):
    type: Literal['subsuperscript'] = 'subsuperscript'
    children: List['AnyMathComponent'] = Field(default_factory=list)
    sub_script: List['AnyMathComponent'] = Field(default_factory=list)
    super_script: List['AnyMathComponent'] = Field(default_factory=list)

    def to_omml(self) -> etree._Element:
        return omml.create_subsup(_render(self.children), _render(self.sub_script), _render(self.super_script))


class MathNary(BaseModel):
    """A large operator. ``None`` limits are hidden, empty lists are shown empty."""
    type: Literal['nary'] = 'nary'
    char: str
    limit_location: Literal['undOvr', 'subSup'] = 'undOvr'
    sub_script: Optional[List['AnyMathComponent']] = None
    super_script: Optional[List['AnyMathComponent']] = None
    children: List['AnyMathComponent'] = Field(default_factory=list)

    def to_omml(self) -> etree._Element:
        sub = _render(self.sub_script) if self.sub_script is not None else None
        sup = _render(self.super_script) if self.super_script is not None else None
        return omml.create_nary(self.char, self.limit_location, sub, sup, _render(self.children))


AnyMathComponent = Annotated[
    Union[MathRun, MathFraction, MathRadical, MathSuperScript, MathSubScript, MathSubSuperScript, MathNary],
    Field(discriminator='type')
]

for _model in (MathRun, MathFraction, MathRadical, MathSuperScript, MathSubScript, MathSubSuperScript, MathNary):
    _model.model_rebuild()

# Validates and dumps component lists exchanged as JSON with a document builder.
MathComponentList = TypeAdapter(List[AnyMathComponent])


def components_to_omml(components: List[AnyMathComponent]) -> etree._Element:
    """Wraps a component list into a single ``m:oMath`` element."""
    return omml.create_math(_render(components))
