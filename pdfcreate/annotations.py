from typing import TYPE_CHECKING, Optional

from .syntax import (
    Name,
    PDFObject,
    PDFString,
    Raw,
    create_dictionary_string as pdf_dict,
)
from .util import format_numbers

if TYPE_CHECKING:
    from .page import PageNode
    from .schemas import AnnotationOptions


class PDFAnnotation(PDFObject):
    "A link annotation that get serialized as an obj<</>>endobj block"

    def __init__(self, options: "AnnotationOptions") -> None:
        super().__init__()
        self.type = Name("Annot")
        self.subtype = Name(options.subtype)
        self.rect = Raw(
            f"[{format_numbers(options.x, options.y, options.x + options.w, options.y + options.h)}]"
        )
        self.border = Raw(f"[{format_numbers(*options.border)}]")
        self.a = Raw(
            pdf_dict(
                {"/S": "/URI", "/URI": PDFString(options.uri).serialize()},
                field_join=" ",
            )
        )
        self.p: Optional["PageNode"] = None  # must always be set before calling .serialize()
