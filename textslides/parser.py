"""
Parser for the line-oriented slide markup.

Grammar (each line is trimmed first, blank lines are skipped)::

    ---           page break: close the current slide
    #text         heading of the current slide
    --[a,b,c]     horizontal boxes, one per non-empty comma separated item
    --            start a vertical paragraph
    anything else continuation of the open heading or paragraph

Only one element accumulates text at a time. Any syntax line commits the
open element before doing its own work. Unknown lines with nothing open are
dropped; the parser never raises.
"""
import logging
from dataclasses import dataclass
from typing import List, Optional, Union

from .config import SYNTAX
from .models import HorizontalBlock, Slide, VerticalBlock

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PendingHeading:
    """A heading that may still receive continuation lines."""
    text: str


@dataclass(frozen=True)
class PendingParagraph:
    """A vertical paragraph opened by ``--``."""
    text: str = ""


# None means nothing is open.
OpenElement = Optional[Union[PendingHeading, PendingParagraph]]


class _SlideDraft:
    """Slide under construction; frozen into a :class:`Slide` on close."""

    def __init__(self):
        self.heading = None
        self.blocks = []

    def commit(self, element: OpenElement):
        if isinstance(element, PendingHeading) and element.text:
            self.heading = element.text
        elif isinstance(element, PendingParagraph) and element.text:
            self.blocks.append(VerticalBlock(texts=(element.text,)))

    def freeze(self) -> Slide:
        return Slide(heading=self.heading, blocks=tuple(self.blocks))


def _continue(element: OpenElement, line: str) -> OpenElement:
    if element is None:
        logger.debug("Dropping stray line: %r", line)
        return None
    text = f"{element.text} {line}" if element.text else line
    return type(element)(text)


def _split_items(raw: str) -> List[str]:
    return [item.strip() for item in raw.split(",") if item.strip()]


class MarkupParser:
    """
    Turns markup text into a list of :class:`Slide` objects.

    The parser keeps no state between calls, so one instance can be reused.
    """

    def parse(self, text: str) -> List[Slide]:
        """
        Parse ``text`` into slides.

        Args:
            text: Raw markup, lines separated by ``\\n``.

        Returns:
            Slides in input order. Slides without a heading or any block are
            left out; blank input gives an empty list.
        """
        if not text or not text.strip():
            return []

        # str.strip keeps a byte order mark, so drop it before splitting.
        text = text.lstrip("\ufeff")

        slides = []
        draft = _SlideDraft()
        element = None

        for raw_line in text.split("\n"):
            line = raw_line.strip()
            if not line:
                continue
            element, draft = self._step(element, draft, line, slides)

        draft.commit(element)
        self._close(draft, slides)
        return slides

    def _step(self, element, draft, line, slides):
        """Apply one trimmed line; returns the new (open element, draft)."""
        if SYNTAX["PAGE_BREAK"].fullmatch(line):
            draft.commit(element)
            self._close(draft, slides)
            return None, _SlideDraft()

        heading = SYNTAX["HEADING"].fullmatch(line)
        if heading:
            draft.commit(element)
            return PendingHeading(heading.group(1).strip()), draft

        horizontal = SYNTAX["HORIZONTAL_BOXES"].fullmatch(line)
        if horizontal:
            draft.commit(element)
            items = _split_items(horizontal.group(1))
            if items:
                draft.blocks.append(HorizontalBlock(texts=tuple(items)))
            return None, draft

        if SYNTAX["VERTICAL_BOX"].fullmatch(line):
            draft.commit(element)
            return PendingParagraph(), draft

        return _continue(element, line), draft

    @staticmethod
    def _close(draft: _SlideDraft, slides: List[Slide]):
        slide = draft.freeze()
        if slide.has_content():
            slides.append(slide)


def parse(text: str) -> List[Slide]:
    """Parse markup text with a fresh :class:`MarkupParser`."""
    return MarkupParser().parse(text)
