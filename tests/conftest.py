"""Shared helpers for the mathdocx test-suite."""

import pytest

from mathdocx.omml import M_NAMESPACE

NS = {'m': M_NAMESPACE}


def xpath(element, path: str):
    """Runs an XPath query with the ``m`` prefix bound to the OMML namespace."""
    return element.xpath(path, namespaces=NS)


@pytest.fixture
def math_ns():
    return NS
