from typing import Any, List

from playwright.sync_api import ElementHandle, Locator

from .base_element import BaseTableElement


class PlaywrightTableElement(BaseTableElement):
    """Adapter for Playwright handles from the synchronous API

    Accepts either an ElementHandle or a Locator. Locators are resolved on
    every query, element handles are bound to the node they were created for.
    """

    backend_name = 'playwright'

    @classmethod
    def supports(cls, element: Any) -> bool:
        return isinstance(element, (ElementHandle, Locator))

    def _query_all(self, selector: str) -> List['PlaywrightTableElement']:
        if isinstance(self.element, Locator):
            matches = self.element.locator(selector).all()
        else:
            matches = self.element.query_selector_all(selector)
        return [PlaywrightTableElement(match) for match in matches]

    def find_all_by_tag(self, tag_name: str) -> List['PlaywrightTableElement']:
        # A bare tag name is a valid CSS selector matching descendants
        return self._query_all(tag_name)

    def find_all_by_selector(self, selector: str) -> List['PlaywrightTableElement']:
        return self._query_all(selector)

    def text(self) -> str:
        return self.element.inner_text()
