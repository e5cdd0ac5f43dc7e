"""HTML page document the widget renders into."""

import logging
from typing import Dict, Iterable, Optional

from bs4 import BeautifulSoup
from bs4.element import PageElement, Tag

logger = logging.getLogger(__name__)

PRICING_CONTAINER_ID = "pricing-table-container"
FAQ_CONTAINER_ID = "faq-accordion-container"
MAP_CONTAINER_ID = "map-container"

PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8"/>
<meta name="viewport" content="width=device-width, initial-scale=1.0"/>
<title>Topiary Park Living</title>
<link rel="stylesheet" href="/static/css/styles.css"/>
</head>
<body class="bg-white text-secondary">
<main>
<section id="pricing" class="py-16 px-4">
<h2 class="font-serif text-3xl text-primary mb-6">Current Rates</h2>
<div id="pricing-table-container" class="h-80 flex items-center justify-center bg-gray-50 rounded-lg"></div>
</section>
<section id="faq" class="py-16 px-4">
<h2 class="font-serif text-3xl text-primary mb-6">Frequently Asked Questions</h2>
<div id="faq-accordion-container" class="min-h-[200px] flex items-center justify-center"></div>
</section>
<section id="location" class="py-16 px-4">
<h2 class="font-serif text-3xl text-primary mb-6">Location</h2>
<div id="map-container" class="relative h-96 rounded-lg overflow-hidden bg-gray-200 flex items-center justify-center">
<div class="absolute inset-0 bg-primary mix-blend-multiply opacity-20"></div>
<span class="text-secondary">Map loading...</span>
</div>
</section>
</main>
</body>
</html>
"""


class PageDocument:
    """A mutable HTML document addressed by element id.

    Containers are looked up by id and have their content replaced wholesale,
    the same way the site's script swaps container contents in the browser.
    """

    def __init__(self, html: str = PAGE_TEMPLATE, title: Optional[str] = None):
        """Parse the page.

        Args:
            html: Page markup.
            title: Optional replacement for the ``<title>`` text.
        """
        self.soup = BeautifulSoup(html, "html.parser")

        if title and self.soup.title is not None:
            self.soup.title.string = title

    @property
    def head(self) -> Tag:
        """The document ``<head>``, created if the markup has none."""
        head = self.soup.head
        if head is None:
            head = self.soup.new_tag("head")
            root = self.soup.html or self.soup
            root.insert(0, head)
        return head

    def get_element(self, element_id: str) -> Optional[Tag]:
        """Find an element by id."""
        return self.soup.find(id=element_id)

    def new_tag(
        self,
        name: str,
        attrs: Optional[Dict[str, str]] = None,
        string: Optional[str] = None,
    ) -> Tag:
        """Create a detached element owned by this document.

        Args:
            name: Tag name.
            attrs: Attributes; a ``class`` string is split into a class list.
            string: Optional text content, escaped on output.

        Returns:
            The new element.
        """
        attrs = dict(attrs or {})
        if isinstance(attrs.get("class"), str):
            attrs["class"] = attrs["class"].split()

        tag = self.soup.new_tag(name, attrs=attrs)
        if string is not None:
            tag.string = string
        return tag

    def replace_content(self, element_id: str, nodes: Iterable[PageElement]) -> bool:
        """Replace all children of an element.

        Args:
            element_id: Id of the container.
            nodes: New children, in order.

        Returns:
            False if the container does not exist.
        """
        element = self.get_element(element_id)
        if element is None:
            logger.debug(f"Container #{element_id} not found; skipping render")
            return False

        element.clear()
        for node in list(nodes):
            element.append(node)
        return True

    def remove_classes(self, element_id: str, *classes: str) -> None:
        """Remove CSS classes from an element if present."""
        element = self.get_element(element_id)
        if element is None:
            return

        current = element.get("class", [])
        element["class"] = [name for name in current if name not in classes]

    def render(self) -> str:
        """Serialize the document to HTML."""
        return str(self.soup)
