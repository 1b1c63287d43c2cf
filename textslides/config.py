"""
Layout configuration, markup syntax and unit helpers.

Every option the layout engine understands is a field of
:class:`LayoutConfig`. Sizes and margins are in points, the slide canvas is
in inches, and :func:`pt_to_inch` converts between the two.
"""
import re
from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Mapping, Optional

from .errors import ConfigError

POINTS_PER_INCH = 72

# Box text colour (hex RGB) shared by every text box.
TEXT_COLOR = "333333"

# Minimum content width (inches) used when the paddings eat the whole slide.
MIN_CONTENT_WIDTH = 1.0

# Markup line patterns, matched against a trimmed line.
SYNTAX = {
    "HEADING": re.compile(r"#(.+)"),                  # #text
    "PAGE_BREAK": re.compile(r"---"),                 # ---
    "HORIZONTAL_BOXES": re.compile(r"--\[(.+)\]"),    # --[aaa,bbb,ccc]
    "VERTICAL_BOX": re.compile(r"--"),                # --
}

# Font families offered to a host UI, with their display labels.
FONT_OPTIONS = [
    {"value": "BIZ UDGothic", "label": "BIZ UDゴシック"},
    {"value": "Meiryo", "label": "メイリオ"},
    {"value": "Yu Gothic", "label": "游ゴシック"},
    {"value": "MS Gothic", "label": "MS ゴシック"},
]


def pt_to_inch(pt: float) -> float:
    """Convert points to inches (1pt = 1/72 inch)."""
    return pt / POINTS_PER_INCH


@dataclass(frozen=True)
class LayoutConfig:
    """
    Immutable snapshot of the layout options.

    Attributes:
        slide_width: Canvas width in inches.
        slide_height: Canvas height in inches.
        font_face: Font family for every text box.
        heading_font_size: Heading size in points.
        body_font_size: Body text size in points.
        heading_margin_bottom: Space below the heading in points.
        body_box_margin_vertical: Space between stacked boxes and grid rows in points.
        body_box_margin_horizontal: Space between grid columns in points.
        content_padding_left: Left (and right) canvas margin in points.
        content_padding_top: Top canvas margin in points.
        horizontal_boxes_per_row: Column count of the horizontal wrap grid.
    """
    slide_width: float = 10.0
    slide_height: float = 5.625
    font_face: str = "BIZ UDGothic"
    heading_font_size: float = 60
    body_font_size: float = 40
    heading_margin_bottom: float = 30
    body_box_margin_vertical: float = 10
    body_box_margin_horizontal: float = 20
    content_padding_left: float = 36
    content_padding_top: float = 36
    horizontal_boxes_per_row: int = 3

    @classmethod
    def from_overrides(cls, overrides: Optional[Mapping[str, Any]] = None) -> "LayoutConfig":
        """
        Build a config from the defaults plus ``overrides``.

        Keys may be snake_case field names or their camelCase aliases
        (``headingFontSize``). ``None`` keeps the default. Strings given for
        numeric options are read like form input: the leading number is
        used, and anything unreadable falls back to the default.

        Raises:
            ConfigError: If a key does not name a known option.
        """
        defaults = cls()
        if not overrides:
            return defaults

        unknown = [key for key in overrides if key not in _ALIASES]
        if unknown:
            raise ConfigError(unknown)

        values = {}
        for key, value in overrides.items():
            if value is None:
                continue
            name = _ALIASES[key]
            values[name] = _coerce(name, value, getattr(defaults, name))
        return replace(defaults, **values)

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    # -- derived geometry (inches) -------------------------------------

    @property
    def left_padding(self) -> float:
        return pt_to_inch(self.content_padding_left)

    @property
    def right_padding(self) -> float:
        # The right margin mirrors the left one.
        return pt_to_inch(self.content_padding_left)

    @property
    def top_padding(self) -> float:
        return pt_to_inch(self.content_padding_top)

    @property
    def raw_content_width(self) -> float:
        """Slide width minus both paddings; may be negative."""
        return self.slide_width - self.left_padding - self.right_padding

    @property
    def content_width(self) -> float:
        """Usable width for full-width boxes, never below MIN_CONTENT_WIDTH."""
        return max(self.raw_content_width, MIN_CONTENT_WIDTH)


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


# snake_case field names plus their camelCase spellings (headingFontSize, ...)
_ALIASES = {}
for _f in fields(LayoutConfig):
    _ALIASES[_f.name] = _f.name
    _ALIASES[_camel(_f.name)] = _f.name

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_LEADING_FLOAT = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+))")


def _coerce(name: str, value: Any, default: Any) -> Any:
    if name == "font_face":
        return str(value) or default
    if isinstance(value, str):
        pattern = _LEADING_FLOAT if isinstance(default, float) else _LEADING_INT
        match = pattern.match(value)
        if not match:
            return default
        return type(default)(match.group(1))
    if name == "horizontal_boxes_per_row":
        return int(value)
    return value
