"""
pdfcreate: builds PDF documents from pages, standard fonts, images and link annotations,
without any dependency on an existing PDF file.
"""

from .config import Settings, get_settings
from .document import Document
from .enums import Align, ImageAlign, PageMode
from .errors import (
    FontMetricsLookupError,
    InvalidOptionError,
    InvalidOptionValueError,
    MissingPositionWarning,
    ParameterCountError,
    PDFCreateException,
    SerializationError,
)
from .fonts import CoreFont
from .image_datastructures import ImageXObject
from .page import PageNode
from .schemas import ImageDescriptor
from .text import TextObject
from .util import get_page_size

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Align",
    "CoreFont",
    "Document",
    "FontMetricsLookupError",
    "ImageAlign",
    "ImageDescriptor",
    "ImageXObject",
    "InvalidOptionError",
    "InvalidOptionValueError",
    "MissingPositionWarning",
    "PageMode",
    "PageNode",
    "ParameterCountError",
    "PDFCreateException",
    "SerializationError",
    "Settings",
    "TextObject",
    "get_page_size",
    "get_settings",
]
