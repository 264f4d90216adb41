"""Concurrent conversions share only read-only tables."""

from concurrent.futures import ThreadPoolExecutor

from mathdocx import latex_to_omml_string

SOURCES = [
    r'\frac{a}{b}',
    r'x_3^2',
    r'\sum_{i=1}^{n} i^2',
    r'\sqrt[3]{\frac{1}{x}}',
    r'\int_0^\infty e^{-x} \, dx',
    r'\foo{bar}',
] * 20


def test_parallel_results_match_sequential() -> None:
    expected = [latex_to_omml_string(source) for source in SOURCES]
    with ThreadPoolExecutor(max_workers=8) as pool:
        actual = list(pool.map(latex_to_omml_string, SOURCES))
    assert actual == expected
