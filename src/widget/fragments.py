"""Builders for the widget's presentational fragments.

Every builder returns detached elements owned by the page document. Field
values are set as element text so they are escaped on output; only FAQ
answers are inserted as (sanitized) markup.
"""

from typing import List, Sequence

from bs4.element import Tag

from .page import PageDocument
from .records import FAQEntry, PricingEntry
from .sanitize import sanitize_rich_text

LOADING_TEXT = "Loading details..."
ERROR_TEXT = "Unable to load current rates."
ERROR_HINT_TEXT = "Please contact us for current rates."
NO_PRICING_TEXT = "No availability at this time."
NO_FAQ_TEXT = "No FAQs available."
AVAILABILITY_TEXT = "Available Now"

MAP_EMBED_URL = (
    "https://www.google.com/maps/embed?pb=!1m18!1m12!1m3!1d3058.630467768475"
    "!2d-82.9910629235288!3d39.96108698396264!2m3!1f0!2f0!3f0!3m2!1i1024!2i768"
    "!4f13.1!3m3!1m2!1s0x883888cb9664673b%3A0x8a9a8a8a8a8a8a8a!2sTopiary%20Park"
    "!5e0!3m2!1sen!2sus!4v1700000000000!5m2!1sen!2sus"
)
MAP_FILTER = "grayscale(100%) invert(92%) sepia(6%) saturate(1000%) hue-rotate(70deg)"

CHEVRON_PATH = "M19 9l-7 7-7-7"


def panel_id(index: int) -> str:
    """Accordion panel id for the FAQ at ``index``."""
    return f"faq-{index}"


def icon_id(panel: str) -> str:
    """Id of the chevron icon belonging to a panel."""
    return f"icon-{panel}"


class FragmentBuilder:
    """Creates widget fragments inside one page document."""

    def __init__(self, document: PageDocument):
        self.document = document

    def loading(self) -> List[Tag]:
        wrapper = self.document.new_tag(
            "div", {"class": "flex justify-center items-center h-full w-full py-8"}
        )
        wrapper.append(
            self.document.new_tag(
                "div", {"class": "animate-spin rounded-full h-8 w-8 border-b-2 border-primary"}
            )
        )
        wrapper.append(
            self.document.new_tag(
                "span", {"class": "ml-3 text-secondary font-medium"}, LOADING_TEXT
            )
        )
        return [wrapper]

    def error(self, message: str = ERROR_TEXT) -> List[Tag]:
        wrapper = self.document.new_tag("div", {"class": "text-center py-8"})
        wrapper.append(
            self.document.new_tag("p", {"class": "text-red-600 font-medium"}, message)
        )
        wrapper.append(
            self.document.new_tag("p", {"class": "text-secondary text-sm mt-1"}, ERROR_HINT_TEXT)
        )
        return [wrapper]

    def empty(self, message: str) -> List[Tag]:
        return [self.document.new_tag("p", {"class": "text-center text-secondary py-4"}, message)]

    def pricing_table(self, entries: Sequence[PricingEntry]) -> List[Tag]:
        """Build the pricing table, one row per entry."""
        new_tag = self.document.new_tag

        wrapper = new_tag("div", {"class": "overflow-x-auto w-full"})
        table = new_tag("table", {"class": "w-full text-left border-collapse"})
        wrapper.append(table)

        thead = new_tag("thead")
        header_row = new_tag("tr", {"class": "border-b border-gray-200"})
        for heading in ("Unit Type", "Price", "Availability"):
            header_row.append(
                new_tag("th", {"class": "py-3 px-4 font-serif font-bold text-primary"}, heading)
            )
        thead.append(header_row)
        table.append(thead)

        tbody = new_tag("tbody")
        for entry in entries:
            row = new_tag("tr", {"class": "border-b border-gray-100 hover:bg-gray-50 transition-colors"})
            row.append(
                new_tag("td", {"class": "py-3 px-4 text-secondary font-medium"}, entry.unit_name)
            )

            price_cell = new_tag("td", {"class": "py-3 px-4 text-secondary"})
            price_cell.append(
                new_tag("span", {"class": "font-bold text-primary"}, entry.display_price)
            )
            if entry.promotion:
                price_cell.append(
                    new_tag(
                        "span",
                        {
                            "class": "ml-2 inline-block bg-accent text-white text-xs px-2 py-0.5 "
                            "rounded-full uppercase tracking-wide font-bold"
                        },
                        entry.promotion,
                    )
                )
            row.append(price_cell)

            row.append(
                new_tag("td", {"class": "py-3 px-4 text-secondary text-sm"}, AVAILABILITY_TEXT)
            )
            tbody.append(row)
        table.append(tbody)

        return [wrapper]

    def faq_accordion(self, entries: Sequence[FAQEntry]) -> List[Tag]:
        """Build the FAQ accordion; panels start closed and are keyed by position."""
        new_tag = self.document.new_tag

        wrapper = new_tag("div", {"class": "space-y-4 w-full", "data-accordion": ""})

        for index, entry in enumerate(entries):
            panel = panel_id(index)

            item = new_tag("div", {"class": "border border-gray-200 rounded-lg overflow-hidden"})

            button = new_tag(
                "button",
                {
                    "type": "button",
                    "class": "w-full flex justify-between items-center p-4 bg-white "
                    "hover:bg-gray-50 transition-colors text-left focus:outline-none",
                    "data-accordion-toggle": panel,
                    "aria-controls": panel,
                    "aria-expanded": "false",
                },
            )
            button.append(
                new_tag("span", {"class": "font-serif font-bold text-primary text-lg"}, entry.question)
            )

            icon = new_tag(
                "svg",
                {
                    "id": icon_id(panel),
                    "class": "w-5 h-5 text-primary transform transition-transform duration-200",
                    "fill": "none",
                    "stroke": "currentColor",
                    "viewBox": "0 0 24 24",
                },
            )
            icon.append(
                new_tag(
                    "path",
                    {
                        "stroke-linecap": "round",
                        "stroke-linejoin": "round",
                        "stroke-width": "2",
                        "d": CHEVRON_PATH,
                    },
                )
            )
            button.append(icon)
            item.append(button)

            content = new_tag(
                "div",
                {
                    "id": panel,
                    "class": "hidden bg-gray-50 p-4 border-t border-gray-100 text-secondary "
                    "leading-relaxed prose max-w-none",
                },
            )
            for node in sanitize_rich_text(entry.answer):
                content.append(node)
            item.append(content)

            wrapper.append(item)

        return [wrapper]

    def map_embed(self) -> List[Tag]:
        iframe = self.document.new_tag(
            "iframe",
            {
                "src": MAP_EMBED_URL,
                "width": "100%",
                "height": "100%",
                "style": f"border:0; filter: {MAP_FILTER};",
                "allowfullscreen": "",
                "loading": "lazy",
                "referrerpolicy": "no-referrer-when-downgrade",
                "title": "Map of Topiary Park, Columbus",
            },
        )
        return [iframe]
