from typing import Any, List

from selenium.webdriver.common.by import By
from selenium.webdriver.remote.webelement import WebElement

from .base_element import BaseTableElement


class SeleniumTableElement(BaseTableElement):
    """Adapter for Selenium WebElements

    Every query goes through the caller's WebDriver session, so stale element
    and session errors surface from these methods unchanged.
    """

    backend_name = 'selenium'

    @classmethod
    def supports(cls, element: Any) -> bool:
        return isinstance(element, WebElement)

    def find_all_by_tag(self, tag_name: str) -> List['SeleniumTableElement']:
        return [SeleniumTableElement(el) for el in self.element.find_elements(By.TAG_NAME, tag_name)]

    def find_all_by_selector(self, selector: str) -> List['SeleniumTableElement']:
        return [SeleniumTableElement(el) for el in self.element.find_elements(By.CSS_SELECTOR, selector)]

    def text(self) -> str:
        # WebElement.text is the rendered (visible) text
        return self.element.text
