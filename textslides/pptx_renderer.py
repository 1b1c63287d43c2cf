#!/usr/bin/env python3
"""
PowerPoint renderer for writing positioned text boxes to a .pptx file.
"""

import io
import logging
import math
from typing import BinaryIO, List, Optional, Union

from pptx import Presentation
from pptx.dml.color import RGBColor
from pptx.enum.text import MSO_ANCHOR, MSO_AUTO_SIZE, PP_ALIGN
from pptx.util import Inches, Pt

from .config import LayoutConfig
from .errors import RenderError
from .models import TextBox

logger = logging.getLogger(__name__)

BLANK_LAYOUT_INDEX = 6

# Slide sizes PowerPoint accepts, in EMU (1 inch up to, not including, 56 inches).
MIN_SLIDE_EMU = Inches(1)
MAX_SLIDE_EMU = Inches(56)

ALIGN_MAP = {
    "left": PP_ALIGN.LEFT,
    "center": PP_ALIGN.CENTER,
    "right": PP_ALIGN.RIGHT,
}

VALIGN_MAP = {
    "top": MSO_ANCHOR.TOP,
    "middle": MSO_ANCHOR.MIDDLE,
    "bottom": MSO_ANCHOR.BOTTOM,
}


class PPTXRenderer:
    """
    Writes laid-out pages to a PowerPoint presentation.

    The renderer does no layout of its own: every box is added exactly where
    the layout engine put it.
    """

    def __init__(self, config: Optional[LayoutConfig] = None, debug: bool = False):
        self.config = config or LayoutConfig()
        self.debug = debug

    def render(self, pages: List[List[TextBox]], output: Union[str, BinaryIO]):
        """
        Render pages of TextBox objects to a PowerPoint presentation.

        Args:
            pages: One list of boxes per slide
            output: Path or writable binary file object for the PPTX

        Returns:
            ``output``, after the presentation has been saved to it
        """
        prs = self.build_presentation(pages)
        prs.save(output)
        if self.debug:
            logger.info(f"Saved {len(pages)} slides to {output}")
        return output

    def render_to_bytes(self, pages: List[List[TextBox]]) -> bytes:
        """Render to an in-memory PPTX, e.g. for serving a download."""
        buffer = io.BytesIO()
        self.render(pages, buffer)
        return buffer.getvalue()

    def build_presentation(self, pages: List[List[TextBox]]):
        prs = Presentation()
        prs.slide_width = self._slide_length("width", self.config.slide_width)
        prs.slide_height = self._slide_length("height", self.config.slide_height)

        for page_idx, page in enumerate(pages):
            slide = prs.slides.add_slide(prs.slide_layouts[BLANK_LAYOUT_INDEX])
            for box in page:
                self._add_text_box(slide, box)
            if self.debug:
                logger.info(f"Slide {page_idx + 1}: {len(page)} text boxes")

        return prs

    @staticmethod
    def _slide_length(name: str, inches: float):
        if not math.isfinite(inches) or not MIN_SLIDE_EMU <= Inches(inches) < MAX_SLIDE_EMU:
            raise RenderError(f"Slide {name} must be at least 1 and less than 56 inches, got {inches}")
        return Inches(inches)

    def _add_text_box(self, slide, box: TextBox):
        if not all(math.isfinite(value) for value in (box.x, box.y, box.w, box.h)):
            raise RenderError(f"Text box '{box.text[:30]}' has a non-finite position or size")
        shape = slide.shapes.add_textbox(
            Inches(box.x), Inches(box.y), Inches(box.w), Inches(box.h)
        )
        text_frame = shape.text_frame
        text_frame.word_wrap = True
        text_frame.auto_size = MSO_AUTO_SIZE.NONE
        text_frame.vertical_anchor = VALIGN_MAP.get(box.valign, MSO_ANCHOR.TOP)

        paragraph = text_frame.paragraphs[0]
        paragraph.alignment = ALIGN_MAP.get(box.align, PP_ALIGN.LEFT)

        run = paragraph.add_run()
        run.text = box.text
        font = run.font
        font.name = box.font_face
        if math.isfinite(box.font_size) and box.font_size > 0:
            font.size = Pt(box.font_size)
        font.bold = box.bold
        font.color.rgb = RGBColor.from_string(box.color)
        return shape
