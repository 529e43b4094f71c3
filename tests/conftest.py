import pytest
from bs4 import BeautifulSoup

from tablejson.elements.soup_element import SoupTableElement


@pytest.fixture
def make_table():
    """Parse an HTML snippet and wrap its first <table> as a table element."""

    def _make_table(html: str) -> SoupTableElement:
        soup = BeautifulSoup(html, "html.parser")
        table = soup.find("table")
        assert table is not None, "fixture HTML must contain a <table>"
        return SoupTableElement(table)

    return _make_table
