"""
Text Slides Package

A package for converting a small line-oriented slide markup to PowerPoint
slides with computed layout.
"""

from .config import LayoutConfig
from .errors import (
    ConfigError,
    EmptyInputError,
    GenerationSkipped,
    NoSlideDataError,
    RenderError,
    SlideGenerationError,
)
from .generator import SlideGenerator
from .layout_engine import LayoutEngine, estimate_text_height, layout
from .models import ContentBlock, HorizontalBlock, Slide, TextBox, VerticalBlock
from .parser import MarkupParser, parse
from .pptx_renderer import PPTXRenderer

__all__ = [
    'SlideGenerator', 'MarkupParser', 'LayoutEngine', 'PPTXRenderer', 'LayoutConfig',
    'Slide', 'ContentBlock', 'VerticalBlock', 'HorizontalBlock', 'TextBox',
    'parse', 'layout', 'estimate_text_height',
    'SlideGenerationError', 'ConfigError', 'GenerationSkipped', 'EmptyInputError', 'NoSlideDataError',
    'RenderError',
]
