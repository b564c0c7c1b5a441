"""Shared type definitions for simple-mermaid.

Enums for the two presentation axes a diagram block can be configured on.
"""

from __future__ import annotations

from enum import Enum


class Alignment(Enum):
    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"

    @classmethod
    def default(cls) -> Alignment:
        return cls.CENTER


class FrameStyle(Enum):
    FRAMED = "framed"  # gray frame from the viewer's stylesheet
    TRANSPARENT = "transparent"  # background: transparent

    @classmethod
    def default(cls) -> FrameStyle:
        return cls.TRANSPARENT
