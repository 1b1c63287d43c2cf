#!/usr/bin/env python3
"""
Demo - Text Slides
==================

Converts demo_content.txt with a couple of layout settings:
• default settings (3 boxes per row, 16:9 canvas)
• a denser variant (smaller fonts, 2 boxes per row, Meiryo)

Run this file to write the decks into ./output.
"""

import logging
import sys
from pathlib import Path

# Add the project root to the path so we can import our modules
project_root = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(project_root))

from textslides.errors import SlideGenerationError
from textslides.generator import SlideGenerator

# Configure logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s [%(levelname)s] %(message)s')
logger = logging.getLogger(__name__)

VARIANTS = {
    "default": {},
    "dense": {
        "headingFontSize": 40,
        "bodyFontSize": 24,
        "horizontalBoxesPerRow": 2,
        "fontFace": "Meiryo",
    },
}


def main():
    content_path = Path(__file__).parent / "demo_content.txt"
    content = content_path.read_text(encoding="utf-8")

    output_dir = Path("output")
    output_dir.mkdir(exist_ok=True)

    for name, overrides in VARIANTS.items():
        logger.info(f"Generating {name} variant...")
        try:
            generator = SlideGenerator(overrides, debug=True)
            pptx_path = generator.generate(content, output_dir / f"demo_{name}.pptx")
            logger.info(f"✅ Generated: {pptx_path}")
        except SlideGenerationError:
            logger.error(f"❌ Error generating {name} variant:", exc_info=True)


if __name__ == "__main__":
    main()
