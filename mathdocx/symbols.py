# mathdocx/symbols.py
# Read-only lookup tables shared by both parsers. Built once at import time
# and never mutated, so concurrent conversions can share them.

# --- Symbol and Function Maps ---
GREEK_LETTERS = {'\\alpha': 'α', '\\beta': 'β', '\\gamma': 'γ', '\\delta': 'δ', '\\epsilon': 'ϵ', '\\zeta': 'ζ',
                 '\\eta': 'η', '\\theta': 'θ', '\\iota': 'ι', '\\kappa': 'κ', '\\lambda': 'λ', '\\mu': 'μ', '\\nu': 'ν',
                 '\\xi': 'ξ', '\\omicron': 'ο', '\\pi': 'π', '\\rho': 'ρ', '\\sigma': 'σ', '\\tau': 'τ',
                 '\\upsilon': 'υ', '\\phi': 'ϕ', '\\chi': 'χ', '\\psi': 'ψ', '\\omega': 'ω', '\\Gamma': 'Γ',
                 '\\Delta': 'Δ', '\\Theta': 'Θ', '\\Lambda': 'Λ', '\\Xi': 'Ξ', '\\Pi': 'Π', '\\Sigma': 'Σ',
                 '\\Upsilon': 'Υ', '\\Phi': 'Φ', '\\Psi': 'Ψ', '\\Omega': 'Ω', '\\varepsilon': 'ε', '\\vartheta': 'ϑ',
                 '\\varpi': 'ϖ', '\\varrho': 'ϱ', '\\varsigma': 'ς', '\\varphi': 'φ'}
OPERATORS = {'\\pm': '±', '\\mp': '∓', '\\times': '×', '\\div': '÷', '\\cdot': '⋅', '\\ast': '∗', '\\circ': '∘',
             '\\cup': '∪', '\\cap': '∩', '\\setminus': '∖', '\\in': '∈', '\\notin': '∉', '\\ni': '∋',
             '\\subset': '⊂', '\\supset': '⊃', '\\subseteq': '⊆', '\\supseteq': '⊇', '\\neq': '≠', '\\ne': '≠',
             '\\equiv': '≡', '\\approx': '≈', '\\sim': '∼', '\\simeq': '≃', '\\cong': '≅', '\\propto': '∝',
             '\\le': '≤', '\\leq': '≤', '\\ge': '≥', '\\geq': '≥', '\\ll': '≪', '\\gg': '≫', '\\infty': '∞',
             '\\nabla': '∇', '\\partial': '∂', '\\forall': '∀', '\\exists': '∃', '\\neg': '¬', '\\land': '∧',
             '\\lor': '∨', '\\wedge': '∧', '\\vee': '∨', '\\oplus': '⊕', '\\otimes': '⊗', '\\perp': '⊥',
             '\\parallel': '∥', '\\mid': '∣', '\\angle': '∠', '\\hbar': 'ℏ', '\\ell': 'ℓ', '\\emptyset': '∅',
             '\\prime': '′', '\\leftarrow': '←', '\\rightarrow': '→', '\\to': '→', '\\gets': '←',
             '\\mapsto': '↦', '\\uparrow': '↑', '\\downarrow': '↓', '\\leftrightarrow': '↔', '\\Leftarrow': '⇐',
             '\\Rightarrow': '⇒', '\\implies': '⇒', '\\iff': '⇔', '\\Uparrow': '⇑', '\\Downarrow': '⇓',
             '\\Leftrightarrow': '⇔'}
SYMBOLS = {'\\langle': '⟨', '\\rangle': '⟩', '\\lfloor': '⌊', '\\rfloor': '⌋', '\\lceil': '⌈', '\\rceil': '⌉',
           '\\vert': '|', '\\Vert': '‖', '\\ldots': '…', '\\dots': '…', '\\cdots': '⋯', '\\vdots': '⋮',
           '\\ddots': '⋱', '\\quad': '\u2003', '\\qquad': '\u2003\u2003', '\\degree': '°'}
SYMBOL_MAP = {**GREEK_LETTERS, **OPERATORS, **SYMBOLS}

# Backslash followed by a single non-letter character.
CONTROL_SYMBOLS = {'\\,': '\u2009', '\\:': '\u2005', '\\;': '\u2005', '\\!': '', '\\ ': ' ',
                   '\\{': '{', '\\}': '}', '\\%': '%', '\\$': '$', '\\&': '&', '\\#': '#',
                   '\\_': '_', '\\|': '‖', '\\\\': ' '}

KNOWN_FUNCTIONS = {'\\sin', '\\cos', '\\tan', '\\csc', '\\sec', '\\cot', '\\sinh', '\\cosh', '\\tanh', '\\coth',
                   '\\arcsin', '\\arccos', '\\arctan', '\\log', '\\ln', '\\lg', '\\exp', '\\det', '\\dim',
                   '\\min', '\\max', '\\sup', '\\inf', '\\lim', '\\gcd', '\\arg', '\\deg', '\\ker', '\\Pr'}

NARY_OPERATORS = {'\\sum': '∑', '\\int': '∫', '\\prod': '∏', '\\coprod': '∐', '\\oint': '∮', '\\iint': '∬',
                  '\\iiint': '∭', '\\bigcup': '⋃', '\\bigcap': '⋂'}

# Glyphs recognized as large operators on the MathML path. Σ (U+03A3) is
# included because some renderers emit the Greek letter instead of U+2211.
LARGE_OPERATOR_GLYPHS = frozenset(NARY_OPERATORS.values()) | {'Σ', 'Π'}
INTEGRAL_GLYPHS = frozenset({'∫', '∬', '∭', '∮'})

# Text-like commands whose braced argument is taken verbatim.
TEXT_COMMANDS = {'\\text', '\\textrm', '\\textnormal', '\\mbox', '\\operatorname'}

# Font commands: None leaves the argument unchanged.
STYLE_COMMANDS = {'\\mathrm': 'p', '\\mathbf': 'b', '\\boldsymbol': 'b', '\\mathit': 'i', '\\mathcal': None,
                  '\\mathbb': None, '\\mathsf': None, '\\mathtt': None, '\\mathfrak': None}

FRACTION_COMMANDS = {'\\frac', '\\dfrac', '\\tfrac'}

# Layout commands with no structural meaning.
NO_OP_COMMANDS = {'\\displaystyle', '\\textstyle', '\\scriptstyle', '\\scriptscriptstyle', '\\limits',
                  '\\nolimits'}

# Delimiter sizing. The delimiter that follows is parsed as an ordinary token,
# except the null delimiter "." which produces nothing.
DELIMITER_COMMANDS = {'\\left', '\\right', '\\middle', '\\big', '\\Big', '\\bigg', '\\Bigg', '\\bigl',
                      '\\bigr', '\\Bigl', '\\Bigr', '\\biggl', '\\biggr', '\\Biggl', '\\Biggr'}

LIMIT_COMMANDS = {'\\limits': 'undOvr', '\\nolimits': 'subSup'}

# --- MathML element groups ---
MATHML_ROW_ELEMENTS = {'math', 'mrow', 'mstyle', 'mpadded', 'mphantom', 'menclose', 'merror'}
MATHML_TOKEN_ELEMENTS = {'mi', 'mn', 'mo', 'mtext', 'ms'}
MATHML_IGNORED_ELEMENTS = {'mspace', 'annotation', 'annotation-xml', 'none', 'mprescripts'}
MATHML_SCRIPT_ARITY = {'msup': 2, 'msub': 2, 'msubsup': 3, 'mover': 2, 'munder': 2, 'munderover': 3}
MATHML_VARIANT_STYLES = {'normal': 'p', 'bold': 'b', 'italic': 'i', 'bold-italic': 'bi'}
