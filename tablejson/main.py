from typing import Any, List, Optional, Tuple

from .config import DEFAULT_BACKEND, JSON_INDENT
from .elements.base_element import BaseTableElement
from .elements.playwright_element import PlaywrightTableElement
from .elements.selenium_element import SeleniumTableElement
from .elements.soup_element import SoupTableElement
from .extractors.html_table_extractor import HTMLTableExtractor, Record

ELEMENT_ADAPTERS = {
    'playwright': PlaywrightTableElement,
    'selenium': SeleniumTableElement,
    'soup': SoupTableElement,
}


def get_table_element(element: Any, backend: Optional[str] = None) -> BaseTableElement:
    """
    Wrap a table element in the adapter for its backend

    Args:
        element: A BaseTableElement (returned as is), a Playwright ElementHandle
            or Locator, a Selenium WebElement or a BeautifulSoup Tag
        backend (str, optional): Adapter name; detected from the element type when None

    Returns:
        BaseTableElement: The wrapped element

    Raises:
        ValueError: If the backend name is unknown
        TypeError: If no backend was given and no adapter accepts the element
    """
    if isinstance(element, BaseTableElement):
        return element

    if backend:
        backend_name = backend.strip().lower()
        if backend_name not in ELEMENT_ADAPTERS:
            raise ValueError(f"Unsupported backend: {backend}")
        return ELEMENT_ADAPTERS[backend_name](element)

    for adapter in ELEMENT_ADAPTERS.values():
        if adapter.supports(element):
            return adapter(element)

    raise TypeError(f"Unsupported table element type: {type(element).__name__}")


class TableConverter:
    """Convert an already located HTML table into JSON records

    The caller owns the browser session and must keep it valid for the whole
    call. Errors raised by the automation layer propagate unchanged.

    When the table has no <thead>, its first row is used as the header row
    whether it holds <th> or <td> cells. This is a positional heuristic:
    tables whose first row is data will lose that row and get its values as
    column names.
    """

    def __init__(self, backend: Optional[str] = DEFAULT_BACKEND):
        self.backend = backend

    def _wrap(self, table: Any) -> BaseTableElement:
        return get_table_element(table, self.backend)

    def get_headers(self, table: Any) -> Tuple[List[str], bool]:
        return HTMLTableExtractor.get_headers(self._wrap(table))

    def extract_table(self, table: Any) -> Tuple[List[str], List[Record]]:
        """Return the resolved headers together with the records"""
        return HTMLTableExtractor.extract_table(self._wrap(table))

    def extract_records(self, table: Any) -> List[Record]:
        return HTMLTableExtractor.extract_records(self._wrap(table))

    def convert(self, table: Any, indent: Optional[int] = JSON_INDENT) -> str:
        """Convert the table to a JSON array string; indent=None gives compact output"""
        records = self.extract_records(table)
        return HTMLTableExtractor.to_json(records, indent=indent)


def convert_table_to_records(table: Any, backend: Optional[str] = DEFAULT_BACKEND) -> List[Record]:
    return TableConverter(backend).extract_records(table)


def convert_table_to_json(table: Any, backend: Optional[str] = DEFAULT_BACKEND) -> str:
    return TableConverter(backend).convert(table)
