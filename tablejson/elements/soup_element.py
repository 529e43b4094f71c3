from typing import Any, List

from bs4 import Tag

from .base_element import BaseTableElement


class SoupTableElement(BaseTableElement):
    """Adapter for BeautifulSoup tags (already parsed, in-memory HTML)"""

    backend_name = 'soup'

    @classmethod
    def supports(cls, element: Any) -> bool:
        return isinstance(element, Tag)

    def find_all_by_tag(self, tag_name: str) -> List['SoupTableElement']:
        return [SoupTableElement(tag) for tag in self.element.find_all(tag_name)]

    def find_all_by_selector(self, selector: str) -> List['SoupTableElement']:
        return [SoupTableElement(tag) for tag in self.element.select(selector)]

    def text(self) -> str:
        return self.element.get_text()
