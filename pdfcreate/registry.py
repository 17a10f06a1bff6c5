"""
Identifier assignment and offset bookkeeping for indirect objects.

Object number 0 heads the free list of the cross-reference table and is never
handed out: the first registered object gets number 1, every later one the
next integer, in call order.
"""

import logging
from typing import Iterator, Optional

from .errors import SerializationError
from .syntax import PDFObject

LOGGER = logging.getLogger(__name__)


class ObjectRegistry:
    def __init__(self) -> None:
        self.obj_id: int = 0  # last assigned PDF object number
        self._objects: dict[int, PDFObject] = {}
        # byte position of each "N 0 obj" marker, filled in by the serializer:
        self.offsets: dict[int, int] = {}
        self.trace_labels_per_obj_id: dict[int, str] = {}

    def __len__(self) -> int:
        return len(self._objects)

    def __iter__(self) -> Iterator[PDFObject]:
        "Yield registered objects in ascending object number"
        for obj_id in range(1, self.obj_id + 1):
            yield self._objects[obj_id]

    @property
    def size(self) -> int:
        "Value of the trailer /Size entry: one past the highest object number"
        return self.obj_id + 1

    def register(self, pdf_obj: PDFObject, trace_label: Optional[str] = None) -> int:
        if pdf_obj.registered:
            raise SerializationError(
                f"{pdf_obj.__class__.__name__} is already registered as object {pdf_obj.id}"
            )
        self.obj_id += 1
        pdf_obj.id = self.obj_id
        self._objects[self.obj_id] = pdf_obj
        if trace_label:
            self.trace_labels_per_obj_id[self.obj_id] = trace_label
        LOGGER.debug("Registered %s as object %d", pdf_obj.__class__.__name__, self.obj_id)
        return self.obj_id

    def get(self, obj_id: int) -> PDFObject:
        try:
            return self._objects[obj_id]
        except KeyError:
            raise SerializationError(f"No object registered with id {obj_id}") from None

    def require(self, pdf_obj: PDFObject) -> str:
        """
        Returns an indirect reference to `pdf_obj`,
        after checking that this very object was registered here.
        """
        if not pdf_obj.registered or self._objects.get(pdf_obj.id) is not pdf_obj:
            raise SerializationError(
                f"Reference to a {pdf_obj.__class__.__name__} that was never registered in this document"
            )
        return pdf_obj.ref

    def record_offset(self, obj_id: int, offset: int) -> None:
        self.offsets[obj_id] = offset

    def resolve(self, obj_id: int) -> int:
        "Byte offset of an object in the last serialized output"
        if obj_id not in self._objects:
            raise SerializationError(f"No object registered with id {obj_id}")
        try:
            return self.offsets[obj_id]
        except KeyError:
            raise SerializationError(
                f"Object {obj_id} has not been serialized yet"
            ) from None
