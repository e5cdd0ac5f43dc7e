"""FAQ accordion open/closed state."""

import logging
from typing import Dict, Iterable

from bs4.element import Tag

from .fragments import icon_id
from .page import PageDocument

logger = logging.getLogger(__name__)

HIDDEN_CLASS = "hidden"
ROTATED_CLASS = "rotate-180"


def _set_class(tag: Tag, name: str, present: bool, prepend: bool = False) -> None:
    classes = [c for c in tag.get("class", []) if c != name]
    if present:
        if prepend:
            classes.insert(0, name)
        else:
            classes.append(name)
    tag["class"] = classes


class Accordion:
    """Per-panel visibility for the FAQ accordion.

    Panels are independent: opening one never closes another. State lives
    in ``open_panels`` and is mirrored into the document on every toggle.
    """

    def __init__(self, document: PageDocument):
        self.document = document
        self.open_panels: Dict[str, bool] = {}

    def reset(self, panel_ids: Iterable[str]) -> None:
        """Track a freshly rendered set of panels, all closed."""
        self.open_panels = {panel: False for panel in panel_ids}

    def is_open(self, panel_id: str) -> bool:
        return self.open_panels[panel_id]

    def toggle(self, panel_id: str) -> bool:
        """Flip one panel between open and closed.

        Args:
            panel_id: Id of the panel, e.g. ``faq-0``.

        Returns:
            The panel's new open state.

        Raises:
            KeyError: If the panel is not part of the rendered accordion.
        """
        is_open = not self.open_panels[panel_id]
        self.open_panels[panel_id] = is_open

        content = self.document.get_element(panel_id)
        if content is not None:
            _set_class(content, HIDDEN_CLASS, not is_open, prepend=True)

        icon = self.document.get_element(icon_id(panel_id))
        if icon is not None:
            _set_class(icon, ROTATED_CLASS, is_open)

        button = self.document.soup.find(attrs={"data-accordion-toggle": panel_id})
        if button is not None:
            button["aria-expanded"] = "true" if is_open else "false"

        logger.debug(f"Accordion panel {panel_id} {'opened' if is_open else 'closed'}")
        return is_open
