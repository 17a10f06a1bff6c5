from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator
from datetime import datetime
from pathlib import Path
from typing import Any, Literal, Optional, Type, TypeVar, Union

from .config import PDFVersion, PageModeName
from .enums import ImageAlign
from .errors import translate_validation_error
from .fonts import CoreFont

Model = TypeVar("Model", bound=BaseModel)

Box = tuple[float, float, float, float]
Point = tuple[float, float]


def validate_options(model: Type[Model], operation: str, options: dict[str, Any]) -> Model:
    "Build `model` from keyword options, reporting failures with this package's exceptions"
    try:
        return model.model_validate(options)
    except ValidationError as error:
        raise translate_validation_error(operation, error) from None


# Document Schemas
class DocumentOptions(BaseModel):
    filename: Optional[Union[str, Path]] = None
    fh: Optional[Any] = None
    version: Optional[PDFVersion] = None
    page_mode: Optional[PageModeName] = None
    title: Optional[str] = None
    author: Optional[str] = None
    subject: Optional[str] = None
    keywords: Optional[str] = None
    creator: Optional[str] = None
    producer: Optional[str] = None
    creation_date: Optional[datetime] = None
    media_box: Optional[Box] = None

    @field_validator("fh")
    @classmethod
    def fh_must_be_writable(cls, fh: Any) -> Any:
        if fh is not None and not callable(getattr(fh, "write", None)):
            raise ValueError("fh must be a binary file-like object with a write() method")
        return fh

    @model_validator(mode="after")
    def single_sink(self) -> "DocumentOptions":
        if self.filename is not None and self.fh is not None:
            raise ValueError("filename and fh are mutually exclusive")
        return self

    class Config:
        extra = "forbid"


# Page Schemas
class PageOptions(BaseModel):
    media_box: Optional[Box] = None
    crop_box: Optional[Box] = None
    art_box: Optional[Box] = None
    trim_box: Optional[Box] = None
    bleed_box: Optional[Box] = None
    rotate: Optional[int] = None

    @field_validator("rotate")
    @classmethod
    def rotate_by_quarter_turns(cls, rotate: Optional[int]) -> Optional[int]:
        if rotate is not None and rotate % 90:
            raise ValueError("rotate must be a multiple of 90")
        return rotate

    class Config:
        extra = "forbid"


# Font Schemas
FontSubtype = Literal["Type0", "Type1", "Type3", "TrueType"]
FontEncoding = Literal[
    "MacRomanEncoding",
    "MacExpertEncoding",
    "WinAnsiEncoding",
    "StandardEncoding",
    "PDFDocEncoding",
]
BaseFontName = Literal[
    "Courier",
    "Courier-Bold",
    "Courier-BoldOblique",
    "Courier-Oblique",
    "Helvetica",
    "Helvetica-Bold",
    "Helvetica-BoldOblique",
    "Helvetica-Oblique",
    "Times-Roman",
    "Times-Bold",
    "Times-Italic",
    "Times-BoldItalic",
    "Symbol",
    "ZapfDingbats",
]


class FontOptions(BaseModel):
    subtype: FontSubtype = "Type1"
    encoding: FontEncoding = "WinAnsiEncoding"
    base_font: BaseFontName = "Helvetica"

    class Config:
        extra = "forbid"


# Image Schemas
ColorSpace = Literal["DeviceGray", "DeviceRGB", "DeviceCMYK"]
ImageFilter = Literal[
    "DCTDecode",
    "FlateDecode",
    "LZWDecode",
    "RunLengthDecode",
    "CCITTFaxDecode",
    "JPXDecode",
]


class ImageDescriptor(BaseModel):
    width: int = Field(gt=0)
    height: int = Field(gt=0)
    color_space: ColorSpace = "DeviceRGB"
    bits_per_component: Literal[1, 2, 4, 8, 16] = 8
    filter: Optional[ImageFilter] = None
    decode_parms: Optional[str] = None
    data: bytes

    class Config:
        extra = "forbid"


class ImagePlacement(BaseModel):
    xpos: float = 0
    ypos: float = 0
    xalign: ImageAlign = ImageAlign.START
    yalign: ImageAlign = ImageAlign.START
    xscale: float = 1
    yscale: float = 1
    rotate: float = 0  # radians
    xskew: float = 0  # radians
    yskew: float = 0  # radians

    class Config:
        extra = "forbid"


# Text Schemas
class TextOptions(BaseModel):
    """
    One step of a multi-call text object.
    Operators are appended in the order of the fields below.
    """

    start: bool = False
    rise: Optional[float] = None
    render_mode: Optional[int] = Field(default=None, ge=0, le=7)
    leading: Optional[float] = None
    char_spacing: Optional[float] = None
    word_spacing: Optional[float] = None
    horizontal_scale: Optional[float] = None
    rotate: Optional[float] = None  # degrees
    pivot: Optional[Point] = None
    font: Optional[CoreFont] = None
    move: Optional[Point] = None
    move_leading: Optional[Point] = None
    newline: bool = False
    text: Optional[str] = None
    end: bool = False

    class Config:
        extra = "forbid"
        arbitrary_types_allowed = True


# Annotation Schemas
class AnnotationOptions(BaseModel):
    subtype: Literal["Link"] = "Link"
    uri: str
    x: float
    y: float
    w: float = Field(ge=0)
    h: float = Field(ge=0)
    border: tuple[float, float, float] = (0, 0, 0)

    class Config:
        extra = "forbid"
