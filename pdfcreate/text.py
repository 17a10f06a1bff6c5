"""
Incremental assembly of a single BT ... ET text object.

Every TextObject owns its own pending operator buffer, so two text objects
being built at the same time, on the same page or on different pages, never
see each other's operators. Nothing reaches the page's content stream until
end() is called, and then the whole object is appended as one entry.

Usage:

    with page.text() as text:
        text.font(f1).move(72, 720).show("Hello")

or, one step at a time with keyword options:

    text = page.text(start=True, font=f1)
    text = page.text(text, move=(72, 720), text="Hello", end=True)
"""

import logging
import math
from types import TracebackType
from typing import TYPE_CHECKING, Optional

from .errors import PDFCreateException
from .util import Number, escape_parens, format_number, format_numbers

if TYPE_CHECKING:
    from .fonts import CoreFont
    from .page import PageNode
    from .schemas import TextOptions

LOGGER = logging.getLogger(__name__)


def _fixed(value: float) -> str:
    out = f"{value:.5f}"
    return "0.00000" if out == "-0.00000" else out


class TextObject:
    """A text object under construction.

    Each method appends exactly one operator and returns the object itself,
    so calls can be chained.
    """

    def __init__(self, page: "PageNode") -> None:
        self._page = page
        self._ops: list[str] = ["BT"]
        self._fonts: list["CoreFont"] = []
        self.ended = False

    def __repr__(self) -> str:
        return f"TextObject({self.render()!r})"

    def __enter__(self) -> "TextObject":
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc_value: Optional[BaseException],
        traceback: Optional[TracebackType],
    ) -> None:
        if exc_type is None and not self.ended:
            self.end()

    def _push(self, operator: str) -> "TextObject":
        if self.ended:
            raise PDFCreateException("This text object has already been ended")
        self._ops.append(operator)
        return self

    def rise(self, value: Number) -> "TextObject":
        "Text rise, for superscripts & subscripts"
        return self._push(f"{format_number(value)} Ts")

    def render_mode(self, mode: int) -> "TextObject":
        return self._push(f"{int(mode)} Tr")

    def leading(self, value: Number) -> "TextObject":
        return self._push(f"{format_number(value)} TL")

    def char_spacing(self, value: Number) -> "TextObject":
        return self._push(f"{format_number(value)} Tc")

    def word_spacing(self, value: Number) -> "TextObject":
        return self._push(f"{format_number(value)} Tw")

    def horizontal_scale(self, value: Number) -> "TextObject":
        "Horizontal scaling, in percent of the normal width"
        return self._push(f"{format_number(value)} Tz")

    def rotate(self, angle: Number, x: Number = 0, y: Number = 0) -> "TextObject":
        """
        Sets the text matrix to a rotation of `angle` degrees around (x, y).
        A negative pivot coordinate is taken as 0.
        """
        x = x if x > 0 else 0
        y = y if y > 0 else 0
        theta = math.radians(angle)
        cos, sin = math.cos(theta), math.sin(theta)
        return self._push(
            f"{_fixed(cos)} {_fixed(sin)} {_fixed(-sin)} {_fixed(cos)} {format_numbers(x, y)} Tm"
        )

    def font(self, font: "CoreFont") -> "TextObject":
        """
        Selects `font`. Unlike PageNode.string(), no size operand is emitted:
        the size must be set by the surrounding content.
        """
        self._fonts.append(font)
        return self._push(f"{font.name.serialize()} Tf")

    def move(self, x: Number, y: Number) -> "TextObject":
        "Moves to the start of the next line, offset by (x, y)"
        return self._push(f"{format_numbers(x, y)} Td")

    def move_leading(self, x: Number, y: Number) -> "TextObject":
        "Like move(), also setting the leading to -y"
        return self._push(f"{format_numbers(x, y)} TD")

    def newline(self) -> "TextObject":
        return self._push("T*")

    def show(self, text: str) -> "TextObject":
        return self._push(f"({escape_parens(text)}) Tj")

    def apply(self, options: "TextOptions") -> "TextObject":
        "Append the operators requested by one step of keyword options, in a fixed order"
        if options.rise is not None:
            self.rise(options.rise)
        if options.render_mode is not None:
            self.render_mode(options.render_mode)
        if options.leading is not None:
            self.leading(options.leading)
        if options.char_spacing is not None:
            self.char_spacing(options.char_spacing)
        if options.word_spacing is not None:
            self.word_spacing(options.word_spacing)
        if options.horizontal_scale is not None:
            self.horizontal_scale(options.horizontal_scale)
        if options.rotate is not None:
            self.rotate(options.rotate, *(options.pivot or (0, 0)))
        if options.font is not None:
            self.font(options.font)
        if options.move is not None:
            self.move(*options.move)
        if options.move_leading is not None:
            self.move_leading(*options.move_leading)
        if options.newline:
            self.newline()
        if options.text is not None:
            self.show(options.text)
        return self

    def fonts(self) -> list["CoreFont"]:
        return list(self._fonts)

    def render(self) -> str:
        return " ".join(self._ops + ["ET"])

    def end(self) -> str:
        "Close the text object and append it to the page content stream"
        if self.ended:
            raise PDFCreateException("This text object has already been ended")
        rendered = self.render()
        self.ended = True
        self._page._add_text_object(self, rendered)
        LOGGER.debug("text(): %s", rendered)
        return rendered
