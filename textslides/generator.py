#!/usr/bin/env python3
"""
Main slide generator module that ties together parser, layout engine and PowerPoint renderer.
"""

import logging
import os
from pathlib import Path
from typing import List, Mapping, Optional, Union

from .config import LayoutConfig
from .errors import EmptyInputError, NoSlideDataError
from .layout_engine import LayoutEngine
from .models import TextBox
from .parser import MarkupParser
from .pptx_renderer import PPTXRenderer

logger = logging.getLogger(__name__)


class SlideGenerator:
    """
    Main class for generating PowerPoint slides from slide markup.
    """

    def __init__(
        self,
        config: Optional[Union[LayoutConfig, Mapping]] = None,
        *,
        debug: bool = False,
    ):
        """Create a new :class:`SlideGenerator`.

        Parameters
        ----------
        config
            A :class:`LayoutConfig`, or a mapping of option overrides that is
            layered on the defaults (see :meth:`LayoutConfig.from_overrides`).
        debug
            Enable verbose logging.
        """
        if not isinstance(config, LayoutConfig):
            config = LayoutConfig.from_overrides(config)

        self.config = config
        self.debug = debug
        self.parser = MarkupParser()
        self.layout_engine = LayoutEngine(config, debug=debug)
        self.pptx_renderer = PPTXRenderer(config, debug=debug)

    def build(self, text: str) -> List[List[TextBox]]:
        """
        Parse and lay out ``text``.

        Returns:
            One list of positioned boxes per slide.

        Raises:
            EmptyInputError: If ``text`` is empty or whitespace.
            NoSlideDataError: If the markup contains no slide.
        """
        if not text or not text.strip():
            raise EmptyInputError()

        slides = self.parser.parse(text)
        if not slides:
            raise NoSlideDataError()

        if self.debug:
            logger.info(f"Parsed {len(slides)} slides")
        return self.layout_engine.layout(slides)

    def generate(self, text: str, output_path: Union[str, Path] = "presentation.pptx") -> str:
        """
        Generate a PowerPoint presentation from markup text.

        Args:
            text: The slide markup to convert
            output_path: Path where the PPTX file should be saved

        Returns:
            str: Path to the generated PPTX file
        """
        pages = self.build(text)

        output_path = str(output_path)
        if not output_path.endswith(".pptx"):
            output_path = f"{output_path}.pptx"
        parent = os.path.dirname(output_path)
        if parent:
            os.makedirs(parent, exist_ok=True)

        self.pptx_renderer.render(pages, output_path)

        if self.debug:
            logger.info(f"Generated presentation saved to: {output_path}")
            logger.info(f"Total slides: {len(pages)}")

        return output_path

    def generate_bytes(self, text: str) -> bytes:
        """Generate the presentation in memory and return the PPTX bytes."""
        return self.pptx_renderer.render_to_bytes(self.build(text))


def main(argv=None):
    """Command-line entry point for the slide generator."""
    import argparse
    import json
    import sys

    from .config import FONT_OPTIONS
    from .errors import GenerationSkipped, RenderError

    def _build_parser() -> argparse.ArgumentParser:
        defaults = LayoutConfig()
        fonts = ", ".join(option["value"] for option in FONT_OPTIONS)
        p = argparse.ArgumentParser(prog="textslides", description="Convert slide markup text to a PPTX presentation.")
        p.add_argument("input", help="Markup file to convert ('-' reads stdin)")
        p.add_argument("--output", "-o", type=Path, default=Path("presentation.pptx"), help="Destination PPTX path")
        p.add_argument("--font", dest="font_face", help=f"Font family (default: {defaults.font_face}; e.g. {fonts})")
        p.add_argument("--heading-size", dest="heading_font_size", type=float, help=f"Heading font size in pt (default: {defaults.heading_font_size})")
        p.add_argument("--body-size", dest="body_font_size", type=float, help=f"Body font size in pt (default: {defaults.body_font_size})")
        p.add_argument("--heading-margin", dest="heading_margin_bottom", type=float, help=f"Space below the heading in pt (default: {defaults.heading_margin_bottom})")
        p.add_argument("--vertical-margin", dest="body_box_margin_vertical", type=float, help=f"Space between stacked boxes in pt (default: {defaults.body_box_margin_vertical})")
        p.add_argument("--horizontal-margin", dest="body_box_margin_horizontal", type=float, help=f"Space between columns in pt (default: {defaults.body_box_margin_horizontal})")
        p.add_argument("--boxes-per-row", dest="horizontal_boxes_per_row", type=int, help=f"Columns of the horizontal grid (default: {defaults.horizontal_boxes_per_row})")
        p.add_argument("--slide-width", dest="slide_width", type=float, help=f"Slide width in inches (default: {defaults.slide_width})")
        p.add_argument("--slide-height", dest="slide_height", type=float, help=f"Slide height in inches (default: {defaults.slide_height})")
        p.add_argument("--padding-left", dest="content_padding_left", type=float, help=f"Left/right padding in pt (default: {defaults.content_padding_left})")
        p.add_argument("--padding-top", dest="content_padding_top", type=float, help=f"Top padding in pt (default: {defaults.content_padding_top})")
        p.add_argument("--dump-layout", action="store_true", help="Print the positioned boxes as JSON instead of writing a PPTX")
        p.add_argument("--debug", action="store_true", help="Enable verbose logging")
        return p

    def _read_input(source: str) -> str:
        if source == "-":
            return sys.stdin.read()
        path = Path(source)
        if not path.exists():
            logger.error(f"Input file '{path}' not found")
            sys.exit(1)
        try:
            return path.read_text(encoding="utf-8-sig")
        except UnicodeDecodeError as exc:
            logger.error(f"Input file '{path}' is not valid UTF-8: {exc}")
            sys.exit(1)

    # Set up logging
    logging.basicConfig(level=logging.INFO, format="%(levelname)s  %(message)s")

    args = _build_parser().parse_args(argv)
    overrides = {name: getattr(args, name) for name in LayoutConfig().to_dict() if getattr(args, name, None) is not None}

    text = _read_input(args.input)
    generator = SlideGenerator(overrides, debug=args.debug)

    try:
        if args.dump_layout:
            pages = generator.build(text)
            print(json.dumps([[box.to_dict() for box in page] for page in pages], ensure_ascii=False, indent=2))
            return 0
        output_path = generator.generate(text, args.output)
    except GenerationSkipped as exc:
        logger.error(exc.reason)
        sys.exit(1)
    except (RenderError, OSError) as exc:
        logger.error(f"Generation failed: {exc}")
        sys.exit(1)

    logger.info("✅ Presentation written to %s", output_path)
    return 0


if __name__ == "__main__":
    main()
