from abc import ABC, abstractmethod
from typing import Any, List


class BaseTableElement(ABC):
    """Base class for table element adapters

    An adapter wraps one element handle owned by the caller (a browser
    automation handle or a parsed HTML tag) and exposes the three queries the
    table extractor needs. Adapters never catch errors raised by the wrapped
    handle.
    """

    backend_name: str = ''

    def __init__(self, element: Any):
        self.element = element

    @classmethod
    @abstractmethod
    def supports(cls, element: Any) -> bool:
        """Return True if this adapter can wrap the given element"""
        pass

    @abstractmethod
    def find_all_by_tag(self, tag_name: str) -> List['BaseTableElement']:
        """Find descendant elements by tag name

        Args:
            tag_name (str): Tag name to match, e.g. "thead" or "tr"

        Returns:
            List[BaseTableElement]: Matching descendants in document order,
                each wrapped in the same adapter type
        """
        pass

    @abstractmethod
    def find_all_by_selector(self, selector: str) -> List['BaseTableElement']:
        """Find descendant elements by CSS selector

        Args:
            selector (str): CSS selector, evaluated with this element as
                ":scope"

        Returns:
            List[BaseTableElement]: Matching descendants in document order
        """
        pass

    @abstractmethod
    def text(self) -> str:
        """Get the text content of the element (untrimmed)"""
        pass

    def trimmed_text(self) -> str:
        return self.text().strip()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.element!r})"
