"""Rich-text sanitization for FAQ answers.

FAQ answers may carry inline markup from Airtable's rich text fields. Only a
small allow-list of formatting tags survives; everything else is unwrapped
to its text, and active content is dropped entirely.
"""

import re
from typing import Dict, FrozenSet, List

from bs4 import BeautifulSoup
from bs4.element import Comment, PageElement

ALLOWED_TAGS: FrozenSet[str] = frozenset(
    {
        "a",
        "b",
        "br",
        "code",
        "em",
        "i",
        "li",
        "ol",
        "p",
        "small",
        "span",
        "strong",
        "sub",
        "sup",
        "u",
        "ul",
    }
)

# Removed together with their content
DROPPED_TAGS: FrozenSet[str] = frozenset(
    {"script", "style", "iframe", "object", "embed", "template", "noscript", "form"}
)

ALLOWED_ATTRIBUTES: Dict[str, FrozenSet[str]] = {
    "a": frozenset({"href", "title", "target", "rel"}),
}

_SAFE_URL = re.compile(r"^(https?:|mailto:|tel:|/|#)", re.IGNORECASE)


def sanitize_rich_text(markup: str) -> List[PageElement]:
    """Parse and clean a rich-text fragment.

    Args:
        markup: Untrusted HTML fragment.

    Returns:
        Detached nodes ready to append into a page.
    """
    fragment = BeautifulSoup(markup, "html.parser")

    for comment in fragment.find_all(string=lambda text: isinstance(text, Comment)):
        comment.extract()

    for tag in list(fragment.find_all(True)):
        if tag.decomposed:
            continue

        if tag.name in DROPPED_TAGS:
            tag.decompose()
            continue

        if tag.name not in ALLOWED_TAGS:
            tag.unwrap()
            continue

        allowed = ALLOWED_ATTRIBUTES.get(tag.name, frozenset())
        for name in list(tag.attrs):
            if name not in allowed:
                del tag[name]

        href = tag.get("href")
        if href is not None and not _SAFE_URL.match(href.strip()):
            del tag["href"]

        if tag.get("target") == "_blank":
            tag["rel"] = "noopener noreferrer"

    return [node.extract() for node in list(fragment.contents)]
