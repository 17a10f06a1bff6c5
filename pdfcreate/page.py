"""
The page tree and the per-page content stream builder.

A PageNode owns its kids; the link back to its parent is a weak reference
that is only ever used to look up inherited attributes and to write the
/Parent entry. A node without kids is a leaf page (/Type /Page); a node with
kids is an intermediate /Pages node whose own drawing content is dropped.
"""

import logging
import math
import warnings
import weakref
from typing import TYPE_CHECKING, Any, Optional, Union

from .annotations import PDFAnnotation
from .enums import Align, ImageAlign
from .errors import (
    InvalidOptionValueError,
    MissingPositionWarning,
    ParameterCountError,
    SerializationError,
)
from .fonts import CoreFont
from .image_datastructures import ImageXObject
from .schemas import ImagePlacement, PageOptions, TextOptions, validate_options
from .syntax import PDFContentStream, PDFObject, create_list_string as pdf_list
from .text import TextObject
from .util import (
    Number,
    escape_parens,
    format_box,
    format_number,
    format_numbers,
    numeric_operand,
)

if TYPE_CHECKING:
    from .document import Document

LOGGER = logging.getLogger(__name__)

PAGE_ATTRIBUTES = {
    "media_box": "/MediaBox",
    "crop_box": "/CropBox",
    "art_box": "/ArtBox",
    "trim_box": "/TrimBox",
    "bleed_box": "/BleedBox",
    "rotate": "/Rotate",
}
# Entries that a conforming reader looks up in /Pages ancestors by itself:
INHERITABLE_ATTRIBUTES = ("media_box", "crop_box", "rotate")
MANDATORY_ATTRIBUTES = ("media_box",)

PRINTNL_DEFAULT_X = 20
PRINTNL_DEFAULT_Y = 800
PRINTNL_DEFAULT_SIZE = 12


class PageContentStream(PDFContentStream):
    "The operators of one page, in the order they were added"

    __slots__ = ("_ops",)

    def __init__(self) -> None:
        super().__init__()
        self._ops: list[str] = []

    def append(self, operator: str) -> None:
        self._ops.append(operator)

    def operators(self) -> tuple[str, ...]:
        return tuple(self._ops)

    # method override
    def encoded_contents(self) -> bytes:
        try:
            return "\n".join(self._ops).encode("latin-1")
        except UnicodeEncodeError as error:
            raise SerializationError(
                f"Content stream {self.id} contains characters outside of latin-1: {error}"
            ) from error


class PageNode(PDFObject):
    def __init__(
        self,
        document: "Document",
        parent: Optional["PageNode"],
        attributes: PageOptions,
        name: str,
    ) -> None:
        super().__init__()
        self._document = document
        self._parent = weakref.ref(parent) if parent is not None else None
        self._kids: list[PageNode] = []
        self._attributes: dict[str, Any] = attributes.model_dump(exclude_none=True)
        self._name = name
        self._contents: Optional[PageContentStream] = None
        self._annotations: list[PDFAnnotation] = []
        # printnl() state, kept from one call to the next:
        self._current_font: Optional[CoreFont] = None
        self._current_size: Optional[Number] = None
        self._current_x: Optional[Number] = None
        self._current_y: Optional[Number] = None

    def __repr__(self) -> str:
        obj_id = self._id if self._id is not None else "?"
        return f"PageNode({self._name!r}, id={obj_id}, kids={len(self._kids)})"

    @property
    def document(self) -> "Document":
        return self._document

    @property
    def parent(self) -> Optional["PageNode"]:
        return self._parent() if self._parent is not None else None

    @property
    def name(self) -> str:
        return self._name

    # Page tree

    def _append_kid(self, page: "PageNode") -> None:
        self._kids.append(page)

    def new_page(self, **attributes: Any) -> "PageNode":
        "Creates a page (or intermediate node) below this one"
        return self.document.new_page(parent=self, **attributes)

    def kid_nodes(self) -> list["PageNode"]:
        return list(self._kids)

    def is_leaf(self) -> bool:
        return not self._kids

    def count(self) -> int:
        "Number of leaf pages beneath this node; a leaf counts itself"
        if not self._kids:
            return 1
        return sum(kid.count() for kid in self._kids)

    def kids(self) -> list[int]:
        "Object ids of the immediate kids"
        return [kid.id for kid in self._kids]

    def list(self) -> list["PageNode"]:
        "Pre-order traversal of all descendants, excluding this node"
        nodes: list[PageNode] = []
        for kid in self._kids:
            nodes.append(kid)
            nodes.extend(kid.list())
        return nodes

    def get_attribute(self, name: str) -> Optional[Any]:
        """
        Value of a page attribute (media_box, crop_box, art_box, trim_box, bleed_box, rotate),
        looked up on this node first and then on its ancestors.
        """
        if name not in PAGE_ATTRIBUTES:
            raise InvalidOptionValueError("get_attribute", "name", name)
        node: Optional[PageNode] = self
        while node is not None:
            if name in node._attributes:
                return node._attributes[name]
            node = node.parent
        return None

    def own_attributes(self) -> dict[str, Any]:
        return dict(self._attributes)

    # Content stream

    def _out(self, operator: str) -> None:
        "Append one operator line to this page content stream"
        document = self.document
        document._check_open()
        if self._contents is None:
            self._contents = PageContentStream()
            document.registry.register(self._contents, "pages")
        self._contents.append(operator)

    def content_stream(self) -> Optional[PageContentStream]:
        return self._contents

    def operators(self) -> tuple[str, ...]:
        return self._contents.operators() if self._contents else ()

    def _uses_font(self, font: CoreFont) -> None:
        if not isinstance(font, CoreFont):
            raise InvalidOptionValueError("string", "font", font, "not a font created by Document.font()")
        self.document.resource_catalog.uses_font(self.id, font)

    # Path construction & painting

    def moveto(self, x: Number, y: Number) -> None:
        "Moves the current point to (x, y), omitting any connecting line segment"
        self._out(f"{format_numbers(x, y)} m")

    def lineto(self, x: Number, y: Number) -> None:
        "Appends a straight line segment from the current point to (x, y)"
        self._out(f"{format_numbers(x, y)} l")

    def curveto(
        self, x1: Number, y1: Number, x2: Number, y2: Number, x3: Number, y3: Number
    ) -> None:
        "Appends a cubic Bezier curve to (x3, y3), using (x1, y1) and (x2, y2) as control points"
        self._out(f"{format_numbers(x1, y1, x2, y2, x3, y3)} c")

    def rectangle(self, x: Number, y: Number, w: Number, h: Number) -> None:
        self._out(f"{format_numbers(x, y, w, h)} re")

    def closepath(self) -> None:
        self._out("h")

    def newpath(self) -> None:
        "Ends the path without filling or stroking it"
        self._out("n")

    def stroke(self) -> None:
        self._out("S")

    def closestroke(self) -> None:
        self._out("s")

    def fill(self) -> None:
        "Fills the path using the non-zero winding number rule"
        self._out("f")

    def fill2(self) -> None:
        "Fills the path using the even-odd rule"
        self._out("f*")

    def line(self, x1: Number, y1: Number, x2: Number, y2: Number) -> None:
        "Draws a line between (x1, y1) and (x2, y2): combined moveto / lineto / stroke"
        self._out(f"{format_numbers(x1, y1)} m {format_numbers(x2, y2)} l S")

    def set_width(self, w: Number) -> None:
        "Sets the width of subsequent lines to `w` points"
        self._out(f"{format_number(w)} w")

    # Colors

    def setgray(self, value: Number) -> None:
        self._out(f"{format_number(value)} g")

    def setgraystroke(self, value: Number) -> None:
        self._out(f"{format_number(value)} G")

    def setrgbcolor(self, *rgb: Number) -> None:
        "Sets the fill color, each component between 0.0 and 1.0"
        if len(rgb) != 3:
            raise ParameterCountError("setrgbcolor", 3, len(rgb))
        self._out(f"{format_numbers(*rgb)} rg")

    def setrgbcolorstroke(self, *rgb: Number) -> None:
        "Sets the stroke color, each component between 0.0 and 1.0"
        if len(rgb) != 3:
            raise ParameterCountError("setrgbcolorstroke", 3, len(rgb))
        self._out(f"{format_numbers(*rgb)} RG")

    # Text

    def text(self, text_obj: Optional[TextObject] = None, **options: Any) -> TextObject:
        """
        One step of a multi-call text object, see pdfcreate.text.

        Passing no `text_obj`, or `start=True`, begins a new text object.
        `end=True` closes it and appends it to this page.
        The object is returned so that it can be passed to the next step,
        on this same page.
        """
        step = validate_options(TextOptions, "text", options)
        if text_obj is not None and text_obj._page is not self:
            raise InvalidOptionValueError(
                "text", "text_obj", text_obj, "started on another page"
            )
        if text_obj is None or step.start:
            if text_obj is not None and not text_obj.ended:
                LOGGER.warning("Discarding unfinished text object: %s", text_obj.render())
            text_obj = TextObject(self)
        text_obj.apply(step)
        if step.end:
            text_obj.end()
        return text_obj

    def _add_text_object(self, text_obj: TextObject, rendered: str) -> None:
        for font in text_obj.fonts():
            self._uses_font(font)
        self._out(rendered)

    def string_width(self, font: CoreFont, text: str) -> float:
        """
        Width of `text` in `font` at size 1.
        Multiply by the font size to get the length in user space units.
        """
        if text is None:
            raise InvalidOptionValueError("string_width", "text", text)
        if not isinstance(font, CoreFont):
            raise InvalidOptionValueError("string_width", "font", font, "not a font created by Document.font()")
        return font.get_text_width(text)

    def _aligned_x(
        self, operation: str, font: CoreFont, size: Number, x: Number, text: str, align: Any
    ) -> float:
        try:
            align = Align.coerce(align)
        except ValueError:
            raise InvalidOptionValueError(operation, "align", align) from None
        if align is Align.R:
            return x - size * self.string_width(font, text)
        if align is Align.C:
            return x - size * self.string_width(font, text) / 2
        return x

    def _place_text(
        self,
        font: CoreFont,
        size: Number,
        x: Number,
        y: Number,
        text: str,
        spacing: tuple[str, ...] = (),
    ) -> None:
        self._uses_font(font)
        self._out(
            " ".join(
                (
                    "BT",
                    f"{font.name.serialize()} {format_number(size)} Tf",
                    *spacing,
                    f"{format_numbers(x, y)} Td",
                    f"({escape_parens(text)}) Tj",
                    "ET",
                )
            )
        )

    def string(
        self,
        font: CoreFont,
        size: Number,
        x: Number,
        y: Number,
        text: str,
        align: Union[Align, str, None] = Align.L,
        char_spacing: Union[Number, str, None] = None,
        word_spacing: Union[Number, str, None] = None,
    ) -> None:
        """
        Adds text at the given size and position.
        (x, y) is the bottom left corner of the text for left alignment ("L", the default),
        its bottom right corner for "R" and the middle of its baseline for "C".
        Spacing values that are not numbers are left out.
        """
        x = self._aligned_x("string", font, size, x, text, align)
        spacing: list[str] = []
        for value, operator in ((char_spacing, "Tc"), (word_spacing, "Tw")):
            operand = numeric_operand(value)
            if operand is not None:
                spacing.append(f"{operand} {operator}")
            elif value is not None:
                LOGGER.warning("Ignoring non-numeric %s operand: %r", operator, value)
        self._place_text(font, size, x, y, text, tuple(spacing))

    def stringl(self, font: CoreFont, size: Number, x: Number, y: Number, text: str) -> None:
        self._place_text(font, size, x, y, text)

    def stringr(self, font: CoreFont, size: Number, x: Number, y: Number, text: str) -> None:
        self._place_text(font, size, x - size * self.string_width(font, text), y, text)

    def stringc(self, font: CoreFont, size: Number, x: Number, y: Number, text: str) -> None:
        self._place_text(font, size, x - size * self.string_width(font, text) / 2, y, text)

    def string_underline(
        self,
        font: CoreFont,
        size: Number,
        x: Number,
        y: Number,
        text: str,
        align: Union[Align, str, None] = Align.L,
    ) -> float:
        """
        Draws the underline of a string placed with the same parameters by string(),
        one unit below the baseline. The text itself is not drawn.
        Returns the length of the line, usable as the width of a link annotation.
        """
        length = self.string_width(font, text) * size
        start = self._aligned_x("string_underline", font, size, x, text, align)
        self.line(start, y - 1, start + length, y - 1)
        return length

    def printnl(
        self,
        text: str,
        font: Optional[CoreFont] = None,
        size: Optional[Number] = None,
        x: Optional[Number] = None,
        y: Optional[Number] = None,
    ) -> int:
        """
        Like string(), but every line of `text` goes one line below the previous one,
        the line spacing being the font size.
        The first call should at least give a font; later calls can give only the text.
        Lines running past the bottom of the page are silently outside of the visible area.
        Returns the number of lines printed.
        """
        if font is not None:
            self._current_font = font
        if self._current_font is None:
            raise InvalidOptionValueError(
                "printnl", "font", font, "no font given and none set by a previous call"
            )
        if y is not None:
            self._current_y = y
        if self._current_y is None:
            warnings.warn(
                f"No starting position given, using {PRINTNL_DEFAULT_Y}",
                MissingPositionWarning,
                stacklevel=2,
            )
            self._current_y = PRINTNL_DEFAULT_Y
        if x is not None:
            self._current_x = x
        if self._current_x is None:
            self._current_x = PRINTNL_DEFAULT_X
        if size is not None:
            self._current_size = size
        if self._current_size is None:
            self._current_size = PRINTNL_DEFAULT_SIZE

        lines = text.split("\n")
        while lines and not lines[-1]:
            lines.pop()
        for line in lines:
            self.string(
                self._current_font, self._current_size, self._current_x, self._current_y, line
            )
            self._current_y -= self._current_size
        return len(lines)

    # Images

    def image(self, image: ImageXObject, **placement: Any) -> None:
        """
        Places an image. Options, see pdfcreate.schemas.ImagePlacement:
        xpos, ypos: anchor position
        xalign, yalign: 0 for left / bottom, 1 for centered, 2 for right / top
        xscale, yscale: 1.0 is one unit per pixel, 0 is taken as 1
        rotate, xskew, yskew: angles in radians
        """
        if not isinstance(image, ImageXObject):
            raise InvalidOptionValueError("image", "image", image, "not an image created by Document.image()")
        opts = validate_options(ImagePlacement, "image", placement)
        width = (opts.xscale or 1) * image.width
        height = (opts.yscale or 1) * image.height
        xpos, ypos = opts.xpos, opts.ypos
        if opts.xalign is ImageAlign.CENTER:
            xpos -= width / 2
        elif opts.xalign is ImageAlign.END:
            xpos -= width
        if opts.yalign is ImageAlign.CENTER:
            ypos -= height / 2
        elif opts.yalign is ImageAlign.END:
            ypos -= height

        # All operands are formatted before anything reaches the content stream:
        operators = ["q"]
        if xpos or ypos:
            operators.append(f"1 0 0 1 {format_numbers(xpos, ypos)} cm")
        if opts.rotate:
            sin, cos = math.sin(opts.rotate), math.cos(opts.rotate)
            operators.append(f"{format_numbers(cos, sin, -sin, cos)} 0 0 cm")
        operators.append(f"{format_number(width)} 0 0 {format_number(height)} 0 0 cm")
        if opts.xskew or opts.yskew:
            tan_a, tan_b = math.tan(opts.xskew), math.tan(opts.yskew)
            operators.append(f"1 {format_numbers(tan_a, tan_b)} 1 0 0 cm")
        operators.append(f"{image.resource_name().serialize()} Do")
        operators.append("Q")

        self.document.resource_catalog.uses_image(self.id, image)
        for operator in operators:
            self._out(operator)

    # Annotations

    def add_annotation(self, annotation: PDFAnnotation) -> None:
        annotation.p = self
        self._annotations.append(annotation)

    # Serialization

    def _build_obj_dict(self) -> dict[str, Any]:
        registry = self.document.registry
        parent = self.parent
        obj_dict: dict[str, Any] = {}
        if self._kids or parent is None:
            obj_dict["/Type"] = "/Pages"
            if parent is not None:
                obj_dict["/Parent"] = registry.require(parent)
            obj_dict["/Kids"] = pdf_list([registry.require(kid) for kid in self._kids])
            obj_dict["/Count"] = self.count()
            for name in INHERITABLE_ATTRIBUTES:
                if name in self._attributes:
                    obj_dict[PAGE_ATTRIBUTES[name]] = _format_attribute(self._attributes[name])
            if self._contents is not None:
                LOGGER.warning(
                    "%s has kids: its own content stream (object %d) is not displayed",
                    self._name,
                    self._contents.id,
                )
            return obj_dict

        obj_dict["/Type"] = "/Page"
        obj_dict["/Parent"] = registry.require(parent)
        for name, key in PAGE_ATTRIBUTES.items():
            value = self.get_attribute(name)
            if value is None:
                if name in MANDATORY_ATTRIBUTES:
                    raise SerializationError(
                        f"{self._name} (object {self.id}) has no {key[1:]}, neither set on it nor inherited"
                    )
                continue
            obj_dict[key] = _format_attribute(value)
        obj_dict["/Resources"] = self.document.resource_catalog.resources_dict(
            self.id, registry
        )
        if self._contents is not None:
            obj_dict["/Contents"] = registry.require(self._contents)
        if self._annotations:
            obj_dict["/Annots"] = pdf_list(
                [registry.require(annotation) for annotation in self._annotations]
            )
        return obj_dict


def _format_attribute(value: Any) -> str:
    if isinstance(value, tuple):
        return format_box(value)
    return str(int(value))
