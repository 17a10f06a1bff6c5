from enum import Enum
from typing import Any


class CoerciveEnum(Enum):
    "An enumeration that provides a helper to coerce strings into enumeration members."

    @classmethod
    def coerce(cls, value: Any) -> "CoerciveEnum":
        """
        Attempt to coerce `value` into a member of this enumeration.

        If value is already a member of this enumeration it is returned unchanged.
        Otherwise, if it is a string, attempt to convert it as an enumeration value.
        If that fails, attempt to convert it (case insensitively) by name.

        Raises:
            ValueError: if the value cannot be coerced.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value)
            except ValueError:
                pass
            try:
                return cls[value.upper()]
            except KeyError:
                pass
        raise ValueError(f"{value} is not a valid {cls.__name__}")


class Align(CoerciveEnum):
    "Horizontal alignment of a text run relative to its anchor"

    L = "LEFT"
    "Anchor is the left edge of the text"

    C = "CENTER"
    "Anchor is the middle of the text"

    R = "RIGHT"
    "Anchor is the right edge of the text"

    @classmethod
    def coerce(cls, value: Any) -> "Align":
        if value is None:
            return cls.L
        if isinstance(value, str):
            if value.upper() in ("LEFT", "CENTER", "RIGHT"):
                return cls(value.upper())
        return super().coerce(value)  # type: ignore[return-value]


class PageMode(CoerciveEnum):
    "How the document should be displayed when opened"

    USE_NONE = "UseNone"
    "Neither document outline nor thumbnail images visible"

    USE_OUTLINES = "UseOutlines"
    "Document outline visible"

    USE_THUMBS = "UseThumbs"
    "Thumbnail images visible"

    FULL_SCREEN = "FullScreen"
    "Full-screen mode, with no menu bar, window controls, or any other window visible"


class ImageAlign(int, Enum):
    "Anchor of a placed image along one axis"

    START = 0
    "left / bottom"

    CENTER = 1

    END = 2
    "right / top"
