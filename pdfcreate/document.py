"""
The Document class is the entry point of pdfcreate:

    doc = Document(filename="out.pdf", title="Report", media_box=get_page_size("A4"))
    page = doc.new_page()
    f1 = doc.font(base_font="Helvetica")
    page.stringc(f1, 24, 297, 760, "Hello, world")
    doc.close()

Every indirect object gets its number when it is created:
the pages root first, then pages, content streams, fonts, images
and annotations in call order. close() adds the Info & Catalog
dictionaries, serializes everything and writes it to the sink.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Optional

from pydantic import ValidationError

from .annotations import PDFAnnotation
from .config import Settings, get_settings
from .enums import PageMode
from .errors import (
    InvalidOptionError,
    InvalidOptionValueError,
    SerializationError,
    translate_validation_error,
)
from .fonts import CoreFont
from .image_datastructures import ImageXObject
from .output import OutputProducer
from .page import PageNode
from .registry import ObjectRegistry
from .resources import ResourceCatalog
from .schemas import (
    AnnotationOptions,
    DocumentOptions,
    FontOptions,
    ImageDescriptor,
    PageOptions,
    validate_options,
)
from .util import Box, get_page_size

LOGGER = logging.getLogger(__name__)


class Document:
    "A PDF document under construction"

    def __init__(self, **options: Any) -> None:
        """
        Args:
            filename (str or Path): optional file to write on close()
            fh: optional binary file-like object to write on close(), exclusive with filename
            version (str): PDF version, "1.0" to "1.7"
            page_mode (str): UseNone, UseOutlines, UseThumbs or FullScreen
            title, author, subject, keywords, creator, producer (str): document information
            creation_date (datetime): omitted from the output when not given
            media_box (tuple): default media box of all pages, see get_page_size()
        Raises:
            InvalidOptionError: on an unknown option
            InvalidOptionValueError: on a value outside of the allowed ones,
                including PDFCREATE_* environment settings
        """
        opts = validate_options(DocumentOptions, "Document", options)
        try:
            self.settings: Settings = get_settings()
        except ValidationError as error:
            raise translate_validation_error("Settings", error) from None
        self.filename: Optional[Path] = Path(opts.filename) if opts.filename else None
        self.fh = opts.fh
        self.pdf_version: str = opts.version or self.settings.pdf_version
        self.page_mode = PageMode.coerce(opts.page_mode or self.settings.page_mode)
        self.title = opts.title
        self.author = opts.author
        self.subject = opts.subject
        self.keywords = opts.keywords
        self.creator = opts.creator or self.settings.creator
        self.producer = opts.producer or self.settings.producer
        self.creation_date: Optional[datetime] = opts.creation_date
        self.registry = ObjectRegistry()
        self.resource_catalog = ResourceCatalog()
        self._fonts: list[CoreFont] = []
        self._images: list[ImageXObject] = []
        self._page_count = 0
        self._closed = False
        self.pages_root = PageNode(
            self, None, PageOptions(media_box=opts.media_box), "Pages root"
        )
        self.registry.register(self.pages_root, "pages")

    def __repr__(self) -> str:
        return f"Document(version={self.pdf_version}, objects={len(self.registry)}, closed={self._closed})"

    @property
    def closed(self) -> bool:
        return self._closed

    @staticmethod
    def get_page_size(name: Optional[str] = None) -> Box:
        return get_page_size(name)

    def _check_open(self) -> None:
        if self._closed:
            raise SerializationError("The document has already been closed")

    def _check_owned(self, operation: str, page: PageNode) -> None:
        if not isinstance(page, PageNode) or page._document is not self:
            raise InvalidOptionValueError(operation, "page", page, "not a page of this document")

    def pages(self) -> list[PageNode]:
        "All the nodes of the page tree, in pre-order, excluding the pages root"
        return self.pages_root.list()

    def new_page(self, parent: Optional[PageNode] = None, **attributes: Any) -> PageNode:
        """
        Adds a page below `parent`, the pages root by default.
        Giving a kid to a leaf page turns it into an intermediate node.

        Args:
            media_box, crop_box, art_box, trim_box, bleed_box (tuple): 4 numbers,
                inherited from the ancestors when not given
            rotate (int): multiple of 90
        """
        self._check_open()
        page_attributes = validate_options(PageOptions, "new_page", attributes)
        if parent is None:
            parent = self.pages_root
        self._check_owned("new_page", parent)
        self._page_count += 1
        page = PageNode(self, parent, page_attributes, f"Page {self._page_count}")
        self.registry.register(page, "pages")
        parent._append_kid(page)
        LOGGER.debug("Created %r below %r", page, parent)
        return page

    def font(self, **options: Any) -> CoreFont:
        """
        Declares a standard font, whose resource name is /F1 for the first one, /F2 for the next...

        Args:
            subtype (str): Type0, Type1, Type3 or TrueType, defaults to Type1
            encoding (str): MacRomanEncoding, MacExpertEncoding, WinAnsiEncoding,
                StandardEncoding or PDFDocEncoding, defaults to WinAnsiEncoding
            base_font (str): one of the 14 standard fonts, defaults to Helvetica
        """
        self._check_open()
        opts = validate_options(FontOptions, "font", options)
        font = CoreFont(len(self._fonts) + 1, opts.subtype, opts.encoding, opts.base_font)
        self.registry.register(font, "fonts")
        self._fonts.append(font)
        LOGGER.debug("Declared %r", font)
        return font

    def image(self, descriptor: Optional[ImageDescriptor] = None, **options: Any) -> ImageXObject:
        """
        Embeds an already encoded image, either from an ImageDescriptor
        or from its keyword fields: width, height, color_space,
        bits_per_component, filter, decode_parms & data.
        The resource name is /Image1 for the first image, /Image2 for the next...
        """
        self._check_open()
        if descriptor is None:
            descriptor = validate_options(ImageDescriptor, "image", options)
        elif options:
            raise InvalidOptionError("image", next(iter(options)))
        image = ImageXObject(len(self._images) + 1, descriptor)
        self.registry.register(image, "images")
        self._images.append(image)
        LOGGER.debug("Embedded %r", image)
        return image

    def annotation(self, page: PageNode, **options: Any) -> PDFAnnotation:
        """
        Adds a link annotation to `page`.

        Args:
            uri (str): link target
            x, y, w, h (float): clickable rectangle
            border (tuple): 3 numbers, defaults to no border
        """
        self._check_open()
        self._check_owned("annotation", page)
        opts = validate_options(AnnotationOptions, "annotation", options)
        annotation = PDFAnnotation(opts)
        self.registry.register(annotation, "annotations")
        page.add_annotation(annotation)
        return annotation

    def close(self) -> bytes:
        """
        Serializes the document and writes it to the filename or file handle
        given at creation, if any. This must be the last call on the document.

        Returns:
            the complete PDF document
        Raises:
            SerializationError: if the document was already closed, has no page,
                or references objects that cannot be resolved
        """
        self._check_open()
        self._closed = True
        buffer = OutputProducer(self).bufferize()
        data = bytes(buffer)
        if self.filename is not None:
            self.filename.write_bytes(data)
            LOGGER.debug("Wrote %d bytes to %s", len(data), self.filename)
        elif self.fh is not None:
            self.fh.write(data)
        return data
