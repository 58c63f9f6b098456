"""Extraction of words and suggestions from a Daum dictionary result page."""

from __future__ import annotations

from bs4 import BeautifulSoup, Tag
from loguru import logger

from daumdic.errors import ParseError
from daumdic.models import Lang, Search, Word

SELECTOR_ARTICLE = "#mArticle"
SELECTOR_BOX = ".search_box"
SELECTOR_WORD = ".txt_cleansch, .txt_searchword, .txt_hanjaword"
SELECTOR_LANG = ".tit_word"
SELECTOR_PRONOUNCE = ".sub_read, .txt_pronounce"
SELECTOR_MEANING = ".txt_search"
SELECTOR_ALTERNATIVES = ".link_speller"


def _first_string(root: Tag, selector: str) -> str | None:
    """First non-blank text fragment under any element matching selector."""
    for element in root.select(selector):
        for text in element.stripped_strings:
            return text
    return None


def _full_text(element: Tag) -> str:
    return element.get_text().strip()


def _parse_box(box: Tag) -> Word | None:
    word = _first_string(box, SELECTOR_WORD)
    if word is None:
        return None

    parent = box.parent
    label = _first_string(parent, SELECTOR_LANG) if isinstance(parent, Tag) else None
    if label is None:
        return None

    pronounce_el = box.select_one(SELECTOR_PRONOUNCE)
    pronounce = _full_text(pronounce_el) if pronounce_el is not None else None

    meaning = tuple(
        text for text in (_full_text(el) for el in box.select(SELECTOR_MEANING)) if text
    )

    return Word(
        word=word,
        lang=Lang.from_label(label),
        meaning=meaning,
        pronounce=pronounce,
    )


def parse_document(html: str | bytes) -> Search:
    """
    Parse a search result page.

    Args:
        html: Raw page markup.

    Returns:
        Words found on the page in document order plus spelling suggestions.

    Raises:
        ParseError: The markup does not look like a dictionary result page.
    """
    if not html:
        raise ParseError("empty document")

    document = BeautifulSoup(html, "lxml")
    if document.select_one(SELECTOR_ARTICLE) is None:
        raise ParseError(f"result container {SELECTOR_ARTICLE!r} not found")

    boxes = document.select(SELECTOR_BOX)
    words: list[Word] = []
    for index, box in enumerate(boxes):
        word = _parse_box(box)
        if word is None:
            logger.debug("Skipping search box #{}: missing word or language label", index)
            continue
        words.append(word)

    alternatives = tuple(
        text
        for text in (_full_text(el) for el in document.select(SELECTOR_ALTERNATIVES))
        if text
    )

    if boxes and not words and not alternatives:
        raise ParseError(f"{len(boxes)} search boxes found but no word could be extracted")

    logger.debug("Parsed {} words and {} alternatives", len(words), len(alternatives))
    return Search(words=tuple(words), alternatives=alternatives)
