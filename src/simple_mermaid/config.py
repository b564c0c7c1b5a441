"""Rendering configuration and modifier keyword resolution."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from simple_mermaid.errors import ConfigurationError
from simple_mermaid.types import Alignment, FrameStyle

_logger = logging.getLogger(__name__)

# Every recognized keyword, keyed to the axis it sets.
_VOCABULARY: dict[str, Alignment | FrameStyle] = {
    **{a.value: a for a in Alignment},
    **{s.value: s for s in FrameStyle},
}

MAX_MODIFIERS = 2


@dataclass(frozen=True)
class RenderConfig:
    """Resolved presentation settings for one diagram block."""

    alignment: Alignment = field(default_factory=Alignment.default)
    style: FrameStyle = field(default_factory=FrameStyle.default)

    @classmethod
    def from_modifiers(cls, *modifiers: str) -> RenderConfig:
        return resolve(modifiers)


def _classify(token: object) -> Alignment | FrameStyle:
    if not isinstance(token, str):
        raise ConfigurationError(f"modifier must be a string, got {type(token).__name__}")
    try:
        return _VOCABULARY[token]
    except KeyError:
        known = ", ".join(_VOCABULARY)
        raise ConfigurationError(f"unknown modifier '{token}'; expected one of: {known}") from None


def resolve(modifiers: Iterable[str] = ()) -> RenderConfig:
    """Resolve an unordered set of modifier keywords to a RenderConfig.

    Args:
        modifiers: Zero, one or two keywords from ``left``, ``right``, ``center``,
            ``framed`` and ``transparent``. At most one per axis; order is ignored.
            A single string is taken as one keyword.

    Returns:
        The fully resolved configuration, with defaults for any axis left unset.

    Raises:
        ConfigurationError: On unknown keywords, two keywords on the same axis,
            or more than two keywords.
    """
    if isinstance(modifiers, str):
        modifiers = (modifiers,)
    tokens = list(modifiers)
    if len(tokens) > MAX_MODIFIERS:
        raise ConfigurationError(
            f"too many modifiers ({len(tokens)}): {' '.join(map(str, tokens))}; "
            "use at most one alignment and one frame style"
        )

    alignment: Alignment | None = None
    style: FrameStyle | None = None
    for token in tokens:
        value = _classify(token)
        if isinstance(value, Alignment):
            if alignment is not None:
                raise ConfigurationError(f"conflicting alignments: '{alignment.value}' and '{token}'")
            alignment = value
        else:
            if style is not None:
                raise ConfigurationError(f"conflicting frame styles: '{style.value}' and '{token}'")
            style = value

    config = RenderConfig(
        alignment=alignment or Alignment.default(),
        style=style or FrameStyle.default(),
    )
    _logger.debug("resolved modifiers %r to %s", tokens, config)
    return config
