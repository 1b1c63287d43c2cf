"""Test layout configuration defaults and overrides."""

import dataclasses

import pytest

from textslides.config import FONT_OPTIONS, SYNTAX, LayoutConfig, pt_to_inch
from textslides.errors import ConfigError


def test_defaults():
    cfg = LayoutConfig()
    assert cfg.slide_width == 10.0
    assert cfg.slide_height == 5.625
    assert cfg.font_face == "BIZ UDGothic"
    assert cfg.heading_font_size == 60
    assert cfg.body_font_size == 40
    assert cfg.heading_margin_bottom == 30
    assert cfg.body_box_margin_vertical == 10
    assert cfg.body_box_margin_horizontal == 20
    assert cfg.content_padding_left == 36
    assert cfg.content_padding_top == 36
    assert cfg.horizontal_boxes_per_row == 3


def test_pt_to_inch():
    assert pt_to_inch(72) == 1
    assert pt_to_inch(36) == 0.5
    assert pt_to_inch(0) == 0


def test_derived_geometry():
    cfg = LayoutConfig()
    assert cfg.left_padding == 0.5
    assert cfg.right_padding == 0.5
    assert cfg.top_padding == 0.5
    assert cfg.content_width == pytest.approx(9.0)


def test_content_width_is_floored_for_narrow_slides():
    cfg = LayoutConfig(slide_width=0.8)
    assert cfg.raw_content_width < 0
    assert cfg.content_width == 1.0


def test_config_is_immutable():
    cfg = LayoutConfig()
    with pytest.raises(dataclasses.FrozenInstanceError):
        cfg.body_font_size = 12


def test_from_overrides_accepts_snake_and_camel_case():
    cfg = LayoutConfig.from_overrides({
        "headingFontSize": 48,
        "body_font_size": 24,
        "fontFace": "Meiryo",
        "horizontalBoxesPerRow": 2,
    })
    assert cfg.heading_font_size == 48
    assert cfg.body_font_size == 24
    assert cfg.font_face == "Meiryo"
    assert cfg.horizontal_boxes_per_row == 2
    # untouched options keep their defaults
    assert cfg.heading_margin_bottom == 30


def test_from_overrides_empty_returns_defaults():
    assert LayoutConfig.from_overrides(None) == LayoutConfig()
    assert LayoutConfig.from_overrides({}) == LayoutConfig()


def test_from_overrides_none_keeps_default():
    cfg = LayoutConfig.from_overrides({"bodyFontSize": None, "fontFace": None})
    assert cfg == LayoutConfig()


def test_unknown_option_is_rejected():
    with pytest.raises(ConfigError) as excinfo:
        LayoutConfig.from_overrides({"bodyFontSize": 20, "colour": "red"})
    assert excinfo.value.unknown_keys == ["colour"]
    assert isinstance(excinfo.value, ValueError)


def test_string_values_are_read_like_form_input():
    cfg = LayoutConfig.from_overrides({
        "headingFontSize": "42pt",
        "bodyFontSize": "abc",
        "bodyBoxMarginVertical": " 15 ",
        "slideWidth": "13.333",
        "fontFace": "",
    })
    assert cfg.heading_font_size == 42
    assert cfg.body_font_size == 40
    assert cfg.body_box_margin_vertical == 15
    assert cfg.slide_width == pytest.approx(13.333)
    assert cfg.font_face == "BIZ UDGothic"


def test_non_positive_values_are_accepted():
    cfg = LayoutConfig.from_overrides({"slideWidth": -1, "horizontalBoxesPerRow": 0})
    assert cfg.slide_width == -1
    assert cfg.horizontal_boxes_per_row == 0


def test_to_dict_round_trip():
    cfg = LayoutConfig(body_font_size=18)
    assert LayoutConfig.from_overrides(cfg.to_dict()) == cfg


@pytest.mark.parametrize("line,name", [
    ("#Title", "HEADING"),
    ("---", "PAGE_BREAK"),
    ("--[a,b]", "HORIZONTAL_BOXES"),
    ("--", "VERTICAL_BOX"),
])
def test_syntax_patterns(line, name):
    assert SYNTAX[name].fullmatch(line)


def test_font_options():
    values = [option["value"] for option in FONT_OPTIONS]
    assert values[0] == LayoutConfig().font_face
    assert "Meiryo" in values
