"""Flattens extracted pages into the single cleaned string every later stage reads.

The rules run in a fixed order: whitespace is collapsed first so the
citation and docket patterns only ever see single spaces.
"""

import re
from collections.abc import Iterable

from legalmind.document.exceptions import EmptyExtractionError
from legalmind.document.models import ExtractedPage
from legalmind.logging.logger import Log

_WHITESPACE_RUN = re.compile(r"\s+")
_SENTENCE_END = re.compile(r"([。！？])\s+")
_CITATION = re.compile(r"第\s*(\d+)\s*條")
_CASE_NUMBER = re.compile(r"(\d+)\s*年度\s*(\w+?)\s*字\s*第\s*(\d+)\s*號")
_COMMA_SPACE = re.compile(r"([，、])\s+")


def normalize(pages: Iterable[ExtractedPage]) -> str:
    """Join page texts and clean them into one normalized string.

    Raises:
        EmptyExtractionError: if nothing but whitespace remains.
    """
    page_list = list(pages)
    joined = "\n".join(page.text for page in page_list)
    text = normalize_text(joined)
    if not text:
        raise EmptyExtractionError(
            f"Normalization of {len(page_list)} pages produced no text"
        )
    Log.info(f"Normalized {len(page_list)} pages into {len(text)} chars")
    return text


def normalize_text(text: str) -> str:
    """Apply the whitespace, sentence, citation, docket and comma rules, then trim."""
    text = _WHITESPACE_RUN.sub(" ", text)
    text = _SENTENCE_END.sub("\\1\n", text)
    text = normalize_citation_spacing(text)
    text = normalize_case_number_spacing(text)
    text = normalize_comma_spacing(text)
    return text.strip()


def normalize_citation_spacing(text: str) -> str:
    """``第 184 條`` -> ``第184條``."""
    return _CITATION.sub(r"第\1條", text)


def normalize_case_number_spacing(text: str) -> str:
    """``112 年度 訴 字第 456 號`` -> ``112年度訴字第456號``."""
    return _CASE_NUMBER.sub(r"\1年度\2字第\3號", text)


def normalize_comma_spacing(text: str) -> str:
    return _COMMA_SPACE.sub(r"\1", text)
