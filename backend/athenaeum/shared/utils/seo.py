"""
SEO Metadata Derivation

Fallback meta title/description for content the admin did not describe.

Rules:
======
- meta_title:       title, whitespace collapsed, cut to SEO_TITLE_MAX_LENGTH (60)
- meta_description: body with HTML and Markdown stripped, cut to
                    SEO_DESCRIPTION_MAX_LENGTH (160)
- Cuts happen at the last space inside the bound; no ellipsis is added.
  A single word longer than the bound is the only case that gets hard-cut.

Only used when the caller supplied no value; explicit meta always wins.

Usage:
======
    seo = SEOMetaDeriver()
    seo.derive_title("Immanuel Kant")                   → "Immanuel Kant"
    seo.derive_description("<p>The <b>critique</b> ...</p>")  → "The critique ..."
"""

import re
from typing import Optional

from bs4 import BeautifulSoup

from athenaeum.config.settings import settings


# Markdown constructs reduced to their visible text
_MD_IMAGE = re.compile(r"!\[([^\]]*)\]\([^)]*\)")
_MD_LINK = re.compile(r"\[([^\]]*)\]\([^)]*\)")
_MD_HEADING = re.compile(r"^\s{0,3}#{1,6}\s*", re.MULTILINE)
_MD_QUOTE = re.compile(r"^\s{0,3}>\s?", re.MULTILINE)
_MD_LIST = re.compile(r"^\s*(?:[-*+]|\d+\.)\s+", re.MULTILINE)
_MD_EMPHASIS = re.compile(r"(\*{1,3}|_{2,3}|~~|`+)")
_WHITESPACE = re.compile(r"\s+")


def truncate_at_word(text: str, limit: int) -> str:
    """
    Cut ``text`` to at most ``limit`` characters without splitting a word.

    Example:
        truncate_at_word("critique of pure reason", 12) → "critique of"
    """
    if len(text) <= limit:
        return text
    window = text[: limit + 1]
    boundary = window.rfind(" ")
    if boundary <= 0:
        return text[:limit]
    return window[:boundary].rstrip()


class SEOMetaDeriver:
    """
    Stateless meta title/description generator shared by all repositories.

    Attributes:
        title_max_length: Upper bound for meta_title
        description_max_length: Upper bound for meta_description
    """

    def __init__(
        self,
        title_max_length: Optional[int] = None,
        description_max_length: Optional[int] = None,
    ) -> None:
        self.title_max_length = title_max_length or settings.SEO_TITLE_MAX_LENGTH
        self.description_max_length = (
            description_max_length or settings.SEO_DESCRIPTION_MAX_LENGTH
        )

    @staticmethod
    def to_plain_text(body: Optional[str]) -> str:
        """Strip HTML tags, Markdown syntax and redundant whitespace."""
        if not body:
            return ""
        text = body
        if "<" in text or "&" in text:
            text = BeautifulSoup(text, "html.parser").get_text(" ")
        text = _MD_IMAGE.sub(r"\1", text)
        text = _MD_LINK.sub(r"\1", text)
        text = _MD_HEADING.sub("", text)
        text = _MD_QUOTE.sub("", text)
        text = _MD_LIST.sub("", text)
        text = _MD_EMPHASIS.sub("", text)
        return _WHITESPACE.sub(" ", text).strip()

    def derive_title(self, title: Optional[str]) -> str:
        """Meta title from the record's title field."""
        plain = _WHITESPACE.sub(" ", title or "").strip()
        return truncate_at_word(plain, self.title_max_length)

    def derive_description(self, body: Optional[str]) -> str:
        """Meta description from the record's body text."""
        return truncate_at_word(self.to_plain_text(body), self.description_max_length)
