"""Layout engine: turns parsed slides into positioned text boxes."""

import logging
import math
import os
from typing import List, Optional, Sequence, Tuple

from .config import TEXT_COLOR, LayoutConfig, pt_to_inch
from .models import HorizontalBlock, Slide, TextBox, VerticalBlock

logger = logging.getLogger(__name__)

# Heuristic text metrics, relative to the font size.
CHAR_WIDTH_FACTOR = 0.9
LINE_HEIGHT_FACTOR = 1.4

# Narrowest box (inches) the wrap grid will emit.
MIN_BOX_WIDTH = 0.5

DEFAULT_BOXES_PER_ROW = 3


def estimate_text_height(text: str, font_size: float, width: float) -> float:
    """
    Estimate the height of ``text`` wrapped into a box ``width`` inches wide.

    Every character is assumed to be ``0.9 * font size`` wide (full-width
    glyphs included) and each line ``1.4 * font size`` tall. The result is
    never less than one line.

    Args:
        text: Box content.
        font_size: Font size in points.
        width: Box width in inches.

    Returns:
        Estimated height in inches.
    """
    font_inch = pt_to_inch(font_size)
    if not math.isfinite(font_inch) or font_inch <= 0:
        return 0.0

    avg_char_width = font_inch * CHAR_WIDTH_FACTOR
    if math.isfinite(width):
        chars_per_line = max(math.floor(width / avg_char_width), 1)
        lines = math.ceil(len(text) / chars_per_line)
    else:
        # unbounded (or unknown) width: everything fits on one line
        lines = 1
    line_height = font_inch * LINE_HEIGHT_FACTOR
    return max(lines * line_height, line_height)


class LayoutEngine:
    """
    Places headings and content blocks on fixed-size slides.

    Each slide is laid out on its own, top to bottom, starting from the top
    padding. The engine holds only its configuration, so ``layout`` can be
    called any number of times with identical results.
    """

    def __init__(self, config: Optional[LayoutConfig] = None, debug: bool = False):
        self.config = config or LayoutConfig()
        self.debug = debug or os.getenv("TEXTSLIDES_DEBUG") == "1"

    def estimate_text_height(self, text: str, font_size: float, width: float) -> float:
        return estimate_text_height(text, font_size, width)

    def layout(self, slides: Sequence[Slide]) -> List[List[TextBox]]:
        """Lay out every slide; returns one box list per slide, in order."""
        pages = [self.layout_slide(slide) for slide in slides]
        if self.debug:
            logger.info(f"Layout engine placed {len(pages)} slides:")
            for i, boxes in enumerate(pages):
                logger.info(f"  Slide {i+1}: {len(boxes)} boxes")
        return pages

    def layout_slide(self, slide: Slide) -> List[TextBox]:
        boxes, _ = self.layout_slide_with_cursor(slide)
        return boxes

    def layout_slide_with_cursor(self, slide: Slide) -> Tuple[List[TextBox], float]:
        """Lay out one slide and also return the cursor below the last box."""
        boxes = []
        y = self.config.top_padding

        if slide.heading:
            placed, y = self.place_heading(slide.heading, y)
            boxes.extend(placed)

        for block in slide.blocks:
            if isinstance(block, VerticalBlock):
                placed, y = self.place_vertical(block.texts, y)
            elif isinstance(block, HorizontalBlock):
                placed, y = self.place_horizontal(block.texts, y)
            else:
                logger.warning(f"Skipping unsupported block type: {type(block).__name__}")
                continue
            boxes.extend(placed)

        if self.debug and y > self.config.slide_height:
            logger.info(f"Content runs past the slide bottom ({y:.2f}in > {self.config.slide_height}in)")
        return boxes, y

    def place_heading(self, text: str, y: float) -> Tuple[List[TextBox], float]:
        """Place the bold heading box; the cursor moves past it and its margin."""
        cfg = self.config
        width = cfg.content_width
        height = estimate_text_height(text, cfg.heading_font_size, width)

        box = self._box(text, cfg.left_padding, y, width, height, cfg.heading_font_size, bold=True)
        return [box], y + height + pt_to_inch(cfg.heading_margin_bottom)

    def place_vertical(self, texts: Sequence[str], y: float) -> Tuple[List[TextBox], float]:
        """Stack one full-width box per text, each sized to its own content."""
        cfg = self.config
        width = cfg.content_width
        margin = pt_to_inch(cfg.body_box_margin_vertical)

        boxes = []
        for text in texts:
            height = estimate_text_height(text, cfg.body_font_size, width)
            boxes.append(self._box(text, cfg.left_padding, y, width, height, cfg.body_font_size))
            y += height + margin
        return boxes, y

    def place_horizontal(self, texts: Sequence[str], y: float) -> Tuple[List[TextBox], float]:
        """
        Arrange texts in a grid of ``horizontal_boxes_per_row`` columns.

        Boxes in a row share the tallest estimated height of that row. The
        last box in a row is narrowed so it does not cross the right padding,
        but no box is narrower than ``MIN_BOX_WIDTH``.
        """
        if not texts:
            return [], y

        cfg = self.config
        columns = self._columns()
        h_margin = pt_to_inch(cfg.body_box_margin_horizontal)
        v_margin = pt_to_inch(cfg.body_box_margin_vertical)
        right_edge = cfg.slide_width - cfg.right_padding

        # At least one inch per column, whatever the margins leave over.
        available = max(cfg.raw_content_width - h_margin * (columns - 1), columns)
        column_width = available / columns

        boxes = []
        for start in range(0, len(texts), columns):
            row = texts[start:start + columns]

            # Measure the row first, then place it at a shared height.
            row_height = max(
                estimate_text_height(text, cfg.body_font_size, column_width) for text in row
            )

            x = cfg.left_padding
            for text in row:
                width = max(min(column_width, right_edge - x), MIN_BOX_WIDTH)
                boxes.append(self._box(text, x, y, width, row_height, cfg.body_font_size))
                x += column_width + h_margin

            y += row_height + v_margin
        return boxes, y

    def _columns(self) -> int:
        columns = self.config.horizontal_boxes_per_row
        if not columns or not math.isfinite(columns):
            return DEFAULT_BOXES_PER_ROW
        return max(int(columns), 1)

    def _box(self, text, x, y, w, h, font_size, bold=False) -> TextBox:
        return TextBox(
            x=x,
            y=y,
            w=w,
            h=h,
            text=text,
            font_face=self.config.font_face,
            font_size=font_size,
            bold=bold,
            color=TEXT_COLOR,
            align="left",
            valign="top",
        )


def layout(slides: Sequence[Slide], config: Optional[LayoutConfig] = None) -> List[List[TextBox]]:
    """Lay out ``slides`` with a fresh :class:`LayoutEngine`."""
    return LayoutEngine(config).layout(slides)
