"""Tests for simple_mermaid.config — modifier keyword resolution."""

import pytest

from simple_mermaid.config import RenderConfig, resolve
from simple_mermaid.errors import ConfigurationError
from simple_mermaid.types import Alignment, FrameStyle

VALID = [
    ((), Alignment.CENTER, FrameStyle.TRANSPARENT),
    (("left",), Alignment.LEFT, FrameStyle.TRANSPARENT),
    (("right",), Alignment.RIGHT, FrameStyle.TRANSPARENT),
    (("center",), Alignment.CENTER, FrameStyle.TRANSPARENT),
    (("framed",), Alignment.CENTER, FrameStyle.FRAMED),
    (("transparent",), Alignment.CENTER, FrameStyle.TRANSPARENT),
    (("left", "framed"), Alignment.LEFT, FrameStyle.FRAMED),
    (("right", "framed"), Alignment.RIGHT, FrameStyle.FRAMED),
    (("center", "framed"), Alignment.CENTER, FrameStyle.FRAMED),
    (("left", "transparent"), Alignment.LEFT, FrameStyle.TRANSPARENT),
    (("center", "transparent"), Alignment.CENTER, FrameStyle.TRANSPARENT),
]


@pytest.mark.parametrize("modifiers,alignment,style", VALID)
def test_resolve_valid(modifiers, alignment, style):
    assert resolve(modifiers) == RenderConfig(alignment, style)


@pytest.mark.parametrize("modifiers", [m for m, _, _ in VALID if len(m) == 2])
def test_resolve_ignores_order(modifiers):
    assert resolve(modifiers) == resolve(reversed(modifiers))


def test_defaults():
    assert resolve() == RenderConfig() == RenderConfig(Alignment.CENTER, FrameStyle.TRANSPARENT)
    assert resolve(["center", "transparent"]) == resolve([])


def test_from_modifiers_alias():
    assert RenderConfig.from_modifiers("framed", "right") == RenderConfig(Alignment.RIGHT, FrameStyle.FRAMED)


def test_render_config_is_frozen():
    config = RenderConfig()
    with pytest.raises(AttributeError):
        config.alignment = Alignment.LEFT  # type: ignore[misc]


@pytest.mark.parametrize(
    "modifiers,message",
    [
        (("left", "right"), "conflicting alignments"),
        (("center", "left"), "conflicting alignments"),
        (("left", "left"), "conflicting alignments"),
        (("framed", "transparent"), "conflicting frame styles"),
        (("left", "right", "framed"), "too many modifiers"),
        (("unknown",), "unknown modifier 'unknown'"),
        (("Left",), "unknown modifier 'Left'"),
        (("left", "bordered"), "unknown modifier 'bordered'"),
    ],
)
def test_resolve_invalid(modifiers, message):
    with pytest.raises(ConfigurationError, match=message):
        resolve(modifiers)


def test_non_string_modifier():
    with pytest.raises(ConfigurationError, match="must be a string"):
        resolve([Alignment.LEFT])  # type: ignore[list-item]


def test_configuration_error_is_value_error():
    with pytest.raises(ValueError):
        resolve(["sideways"])


def test_single_string_is_one_keyword():
    assert resolve("left") == RenderConfig(Alignment.LEFT, FrameStyle.TRANSPARENT)
    with pytest.raises(ConfigurationError, match="unknown modifier 'sideways'"):
        resolve("sideways")
