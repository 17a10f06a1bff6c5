"""
This module contains the serialization logic that produces a PDF document from a Document instance.
Most of the code in this module is used when Document.close() is called.

The contents of this module are internal to pdfcreate, and not part of the public API.
"""

import logging
from collections import defaultdict
from contextlib import contextmanager
from typing import TYPE_CHECKING, Iterator, Optional

from .enums import PageMode
from .errors import SerializationError
from .page import PageNode
from .syntax import ContentWithoutID, Name, PDFDate, PDFObject, PDFString
from .util import sizeof_fmt

if TYPE_CHECKING:
    from .document import Document

LOGGER = logging.getLogger(__name__)


class PDFHeader(ContentWithoutID):
    """
    The PDF file header:
      1) A line starting with the literal "%PDF-" followed by the file version
      2) A comment line containing four bytes with values >= 128,
         so that file-transfer tools treat the content as binary rather than text.
    """

    def __init__(self, pdf_version: str) -> None:
        self.pdf_version = pdf_version

    def serialize(self) -> str:
        return f"%PDF-{self.pdf_version}\n%éëñ¿"


class PDFInfo(PDFObject):
    def __init__(
        self,
        title: Optional[str],
        subject: Optional[str],
        author: Optional[str],
        keywords: Optional[str],
        creator: Optional[str],
        producer: Optional[str],
        creation_date: Optional[PDFDate],
    ) -> None:
        super().__init__()
        self.title = PDFString(title) if title else None
        self.subject = PDFString(subject) if subject else None
        self.author = PDFString(author) if author else None
        self.keywords = PDFString(keywords) if keywords else None
        self.creator = PDFString(creator) if creator else None
        self.producer = PDFString(producer) if producer else None
        self.creation_date = creation_date


class PDFCatalog(PDFObject):
    def __init__(self, pages: PageNode, page_mode: Optional[PageMode] = None) -> None:
        super().__init__()
        self.type = Name("Catalog")
        self.pages = pages  # Required; shall be an indirect reference
        self.page_mode = Name(page_mode.value) if page_mode else None


class PDFXrefAndTrailer(ContentWithoutID):
    "Cross-reference table & file trailer"

    def __init__(self, output_builder: "OutputProducer") -> None:
        self.output_builder = output_builder
        self.count = output_builder.registry.size
        # Must be set before the call to serialize():
        self.catalog_obj: Optional[PDFCatalog] = None
        self.info_obj: Optional[PDFInfo] = None

    def serialize(self) -> str:
        if self.catalog_obj is None:
            raise SerializationError("Invalid state for XREF production.")
        builder = self.output_builder
        registry = builder.registry
        startxref = str(len(builder.buffer))
        out: list[str] = []
        out.append("xref")
        out.append(f"0 {self.count}")
        out.append("0000000000 65535 f ")
        for obj_id in range(1, self.count):
            out.append(f"{registry.resolve(obj_id):010} 00000 n ")
        out.append("trailer")
        trailer = [f"/Size {self.count}", f"/Root {self.catalog_obj.ref}"]
        if self.info_obj:
            trailer.append(f"/Info {self.info_obj.ref}")
        out.append(f"<< {' '.join(trailer)} >>")
        out.append("startxref")
        out.append(startxref)
        out.append("%%EOF")
        return "\n".join(out)


class OutputProducer:
    "Generates the final bytearray representing the PDF document, based on a Document instance."

    def __init__(self, document: "Document") -> None:
        self.document = document
        self.registry = document.registry
        self.sections_size_per_trace_label: dict[str, int] = defaultdict(int)
        self.buffer: bytearray = bytearray()  # resulting output buffer

    def bufferize(self) -> bytearray:
        """
        Registers the document Info & Catalog objects,
        then serializes every registered object in ascending object number,
        recording the offset of each one for the cross-reference table.
        """
        document = self.document
        registry = self.registry
        pages_root = document.pages_root
        if pages_root.is_leaf():
            raise SerializationError("The document has no pages")

        # 1. setup - the last two object numbers go to the Info & Catalog dictionaries
        info_obj = self._add_info()
        catalog_obj = self._add_catalog()

        # 2. Serializing - Append all PDF objects to the buffer:
        assert (
            not self.buffer
        ), f"Nothing should have been appended to the .buffer at this stage: {self.buffer}"

        self._out(PDFHeader(document.pdf_version).serialize())
        for pdf_obj in registry:
            registry.record_offset(pdf_obj.id, len(self.buffer))
            trace_label = registry.trace_labels_per_obj_id.get(pdf_obj.id)
            if trace_label:
                with self._trace_size(trace_label):
                    self._out(pdf_obj.serialize())
            else:
                self._out(pdf_obj.serialize())
        xref = PDFXrefAndTrailer(self)
        xref.catalog_obj = catalog_obj
        xref.info_obj = info_obj
        self._out(xref.serialize())
        if document.settings.trace_sizes:
            self._log_final_sections_sizes()
        return self.buffer

    def _out(self, data: str) -> None:
        "Append data to the buffer"
        try:
            self.buffer += data.encode("latin1") + b"\n"
        except UnicodeEncodeError as error:
            raise SerializationError(f"Cannot encode PDF output as latin-1: {error}") from error

    def _add_info(self) -> PDFInfo:
        document = self.document
        creation_date = None
        if document.creation_date is not None:
            try:
                creation_date = PDFDate(
                    document.creation_date,
                    with_tz=document.creation_date.tzinfo is not None,
                )
            except Exception as error:
                raise SerializationError(
                    f"Could not format date: {document.creation_date}"
                ) from error
        info_obj = PDFInfo(
            title=document.title,
            subject=document.subject,
            author=document.author,
            keywords=document.keywords,
            creator=document.creator,
            producer=document.producer,
            creation_date=creation_date,
        )
        self.registry.register(info_obj, "info")
        return info_obj

    def _add_catalog(self) -> PDFCatalog:
        document = self.document
        catalog_obj = PDFCatalog(pages=document.pages_root, page_mode=document.page_mode)
        self.registry.register(catalog_obj)
        return catalog_obj

    @contextmanager
    def _trace_size(self, label: str) -> Iterator[None]:
        prev_size = len(self.buffer)
        yield
        self.sections_size_per_trace_label[label] += len(self.buffer) - prev_size

    def _log_final_sections_sizes(self) -> None:
        LOGGER.debug("Final size summary of the biggest document sections:")
        for label, section_size in self.sections_size_per_trace_label.items():
            LOGGER.debug("- %s: %s", label, sizeof_fmt(section_size))
