import logging
from typing import Callable, Iterable, List, Set

from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)


def anchors_in(html: str) -> List[str]:
    """Element ids of a rendered page, in document order."""
    soup = BeautifulSoup(html, "html.parser")
    return [tag["id"] for tag in soup.find_all(id=True)]


class SectionNavigator:
    """
    Smooth-scrolls to a page section by id. Unknown ids are ignored: every
    target is one of the page's own fixed anchors.
    """

    def __init__(self, anchors: Iterable[str], scroller: Callable[[str], None]):
        self._anchors: Set[str] = set(anchors)
        self._scroller = scroller

    @classmethod
    def from_html(cls, html: str, scroller: Callable[[str], None]) -> "SectionNavigator":
        return cls(anchors_in(html), scroller)

    @property
    def anchors(self) -> Set[str]:
        return set(self._anchors)

    def scroll_to(self, section_id: str) -> bool:
        if section_id not in self._anchors:
            logger.debug("No section %r on the page", section_id)
            return False
        self._scroller(section_id)
        return True
