"""
HTML helpers shared by the menu parsers.

Menu pages carry no usable structure, so "today" is isolated by searching for
marker strings around it. `find_spans` is that search, written once.
"""

from bs4 import BeautifulSoup
from dataclasses import dataclass
from typing import List, Optional


@dataclass(frozen=True)
class Span:
    offset: int  # position of the start marker in the searched text
    text: str


def find_spans(
    text: str,
    start: str,
    end: str,
    repeat: bool = False,
    include_start: bool = True,
    from_offset: int = 0,
) -> List[Span]:
    """
    Find text enclosed by start/end marker pairs.

    The end marker is searched after the start marker. The start marker is
    kept in the span unless include_start is False; the end marker never is.
    With repeat, scanning continues after each end marker and all spans are
    returned, otherwise at most one.
    """
    if not start or not end:
        raise ValueError("Start and end markers must not be empty")

    spans: List[Span] = []
    pos = from_offset

    while True:
        begin = text.find(start, pos)
        if begin < 0:
            break
        stop = text.find(end, begin + len(start))
        if stop < 0:
            break

        content_start = begin if include_start else begin + len(start)
        spans.append(Span(offset=begin, text=text[content_start:stop]))

        if not repeat:
            break
        pos = stop + len(end)

    return spans


def find_span(text: str, start: str, end: str, include_start: bool = True) -> Optional[Span]:
    spans = find_spans(text, start, end, include_start=include_start)
    return spans[0] if spans else None


def strip_tags(html: str) -> str:
    """Drop all markup and decode entities, keeping the text exactly as laid out."""
    return BeautifulSoup(html, "html.parser").get_text()


def paragraphs_to_lines(html: str) -> str:
    """Turn each <p> into one line of plain text and drop the remaining markup."""
    soup = BeautifulSoup(html, "html.parser")

    for paragraph in soup.find_all("p"):
        paragraph.replace_with(paragraph.get_text() + "\n")

    return soup.get_text()


def inner_text(html: str) -> str:
    return BeautifulSoup(html, "html.parser").get_text(" ", strip=True)
