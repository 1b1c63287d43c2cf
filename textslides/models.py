"""
Data models for the slide deck: parsed slides and positioned text boxes.
"""
from dataclasses import asdict, dataclass, field
from typing import Dict, Optional, Tuple

from .config import TEXT_COLOR


@dataclass(frozen=True)
class ContentBlock:
    """
    A run of text items inside a slide.

    Use one of the concrete subclasses; ``kind`` tells them apart when the
    block has been serialised.
    """
    texts: Tuple[str, ...]

    kind = "block"

    def __post_init__(self):
        # Accept any sequence but store an immutable tuple.
        object.__setattr__(self, "texts", tuple(self.texts))
        if not self.texts:
            raise ValueError(f"{type(self).__name__} needs at least one text item")

    def to_dict(self) -> Dict:
        return {"type": self.kind, "texts": list(self.texts)}


@dataclass(frozen=True)
class VerticalBlock(ContentBlock):
    """Paragraphs stacked top to bottom, one box each."""
    kind = "vertical"


@dataclass(frozen=True)
class HorizontalBlock(ContentBlock):
    """Items arranged side by side in a wrapping grid."""
    kind = "horizontal"


BLOCK_TYPES = {
    VerticalBlock.kind: VerticalBlock,
    HorizontalBlock.kind: HorizontalBlock,
}


@dataclass(frozen=True)
class Slide:
    """
    One slide as written in the markup: an optional heading and its blocks.
    """
    heading: Optional[str] = None
    blocks: Tuple[ContentBlock, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "blocks", tuple(self.blocks))

    def has_content(self) -> bool:
        """A slide is worth emitting when it has a heading or any block."""
        return self.heading is not None or len(self.blocks) > 0

    def to_dict(self) -> Dict:
        return {
            "heading": self.heading,
            "blocks": [block.to_dict() for block in self.blocks],
        }

    @classmethod
    def from_dict(cls, data):
        """Rebuild a Slide from the output of :meth:`to_dict`."""
        blocks = []
        for block in data.get("blocks", []):
            block_type = BLOCK_TYPES.get(block.get("type"))
            if block_type is None:
                raise ValueError(f"Unknown block type: {block.get('type')!r}")
            blocks.append(block_type(texts=block.get("texts", [])))
        return cls(heading=data.get("heading"), blocks=tuple(blocks))


@dataclass(frozen=True)
class TextBox:
    """
    A positioned text box ready for rendering.

    Position and size are in inches from the top-left corner of the slide,
    ``font_size`` is in points.
    """
    x: float
    y: float
    w: float
    h: float
    text: str
    font_face: str
    font_size: float
    bold: bool = False
    color: str = TEXT_COLOR
    align: str = "left"
    valign: str = "top"

    @property
    def right(self):
        return self.x + self.w

    @property
    def bottom(self):
        return self.y + self.h

    def to_dict(self) -> Dict:
        return asdict(self)
