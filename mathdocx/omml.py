# mathdocx/omml.py
from typing import Iterable, List, Optional

from lxml import etree

# --- 1. OMML namespaces and constants ---
M_NAMESPACE = "http://schemas.openxmlformats.org/officeDocument/2006/math"
M_PREFIX = "{%s}" % M_NAMESPACE
XML_SPACE = "{http://www.w3.org/XML/1998/namespace}space"
NSMAP = {'m': M_NAMESPACE}


def m_tag(tag_name: str) -> str: return M_PREFIX + tag_name


def _element(tag_name: str) -> etree._Element:
    # Every builder root declares the m prefix; lxml drops the redundant
    # declaration when the element is appended under another m: element.
    return etree.Element(m_tag(tag_name), nsmap=NSMAP)


def _sub(parent: etree._Element, tag_name: str, children: Iterable[etree._Element] = ()) -> etree._Element:
    child = etree.SubElement(parent, m_tag(tag_name))
    for el in children: child.append(el)
    return child


def _flag(parent: etree._Element, tag_name: str, value: str) -> etree._Element:
    flag = etree.SubElement(parent, m_tag(tag_name))
    flag.set(m_tag('val'), value)
    return flag


def extract_text(elements: Iterable[etree._Element]) -> str:
    """Recursively extracts all text from a list of OMML elements."""
    text_parts = []
    for elem in elements:
        for t in elem.iter(m_tag('t')):
            if t.text:
                text_parts.append(t.text)
    return "".join(text_parts)


# --- 2. OMML element builders ---
def create_run(text: str, style: Optional[str] = None) -> etree._Element:
    mr = _element('r')
    if style:
        rpr = _sub(mr, 'rPr')
        _flag(rpr, 'sty', style)
    mt = _sub(mr, 't')
    if text.startswith(' ') or text.endswith(' '): mt.set(XML_SPACE, 'preserve')
    mt.text = text
    return mr


def create_fraction(num: List[etree._Element], den: List[etree._Element]) -> etree._Element:
    mf = _element('f')
    _sub(mf, 'num', num)
    _sub(mf, 'den', den)
    return mf


def create_radical(body: List[etree._Element], degree: Optional[List[etree._Element]] = None) -> etree._Element:
    """``m:deg`` is always emitted; an absent degree is hidden with ``degHide``."""
    mrad = _element('rad')
    mrad_pr = _sub(mrad, 'radPr')
    if degree is None:
        _flag(mrad_pr, 'degHide', '1')
    _sub(mrad, 'deg', degree or [])
    _sub(mrad, 'e', body)
    return mrad


def create_superscript(base: List[etree._Element], sup: List[etree._Element]) -> etree._Element:
    ms_sup = _element('sSup')
    _sub(ms_sup, 'e', base)
    _sub(ms_sup, 'sup', sup)
    return ms_sup


def create_subscript(base: List[etree._Element], sub: List[etree._Element]) -> etree._Element:
    ms_sub = _element('sSub')
    _sub(ms_sub, 'e', base)
    _sub(ms_sub, 'sub', sub)
    return ms_sub


def create_subsup(base: List[etree._Element], sub: List[etree._Element],
                  sup: List[etree._Element]) -> etree._Element:
    ms_sub_sup = _element('sSubSup')
    _sub(ms_sub_sup, 'e', base)
    _sub(ms_sub_sup, 'sub', sub)
    _sub(ms_sub_sup, 'sup', sup)
    return ms_sub_sup


def create_nary(char: str, limit_location: str, sub: Optional[List[etree._Element]],
                sup: Optional[List[etree._Element]], base: List[etree._Element]) -> etree._Element:
    """
    Builds an ``m:nary``. ``m:sub`` and ``m:sup`` are always present; a
    missing limit (``None``) is hidden through ``subHide``/``supHide``.
    """
    mnary = _element('nary')
    mnary_pr = _sub(mnary, 'naryPr')
    _flag(mnary_pr, 'chr', char)
    _flag(mnary_pr, 'limLoc', limit_location)
    if sub is None: _flag(mnary_pr, 'subHide', '1')
    if sup is None: _flag(mnary_pr, 'supHide', '1')
    _sub(mnary, 'sub', sub or [])
    _sub(mnary, 'sup', sup or [])
    _sub(mnary, 'e', base)
    return mnary


# --- 3. Math roots ---
def create_math(elements: Iterable[etree._Element]) -> etree._Element:
    omath = _element('oMath')
    for el in elements: omath.append(el)
    return omath


def create_math_para(elements: Iterable[etree._Element], alignment: str = 'center') -> etree._Element:
    omml_para = _element('oMathPara')
    omml_para_pr = _sub(omml_para, 'oMathParaPr')
    _flag(omml_para_pr, 'jc', alignment)
    omml_para.append(create_math(elements))
    return omml_para


def to_string(element: etree._Element) -> str:
    return etree.tostring(element, encoding='unicode')
