from typing import TYPE_CHECKING, Optional

from .syntax import Name, PDFContentStream, Raw

if TYPE_CHECKING:
    from .schemas import ImageDescriptor


class ImageXObject(PDFContentStream):
    """
    An image XObject built from an already encoded image.
    Pixel decoding is the caller's business: the data is embedded as given,
    with the filter that the descriptor declares.
    """

    __slots__ = (  # RAM usage optimization
        "_index",
        "type",
        "subtype",
        "width",
        "height",
        "color_space",
        "bits_per_component",
        "decode_parms",
    )

    def __init__(self, index: int, descriptor: "ImageDescriptor") -> None:
        super().__init__(contents=descriptor.data)
        self.type = Name("XObject")
        self.subtype = Name("Image")
        self.width = descriptor.width
        self.height = descriptor.height
        self.color_space = Name(descriptor.color_space)
        self.bits_per_component = descriptor.bits_per_component
        self.filter = Name(descriptor.filter) if descriptor.filter else None
        self.decode_parms: Optional[Raw] = (
            Raw(descriptor.decode_parms) if descriptor.decode_parms else None
        )
        self._index = index

    def __repr__(self) -> str:
        return f"ImageXObject(/Image{self._index}, {self.width}x{self.height})"

    def index(self) -> int:
        return self._index

    def resource_name(self) -> Name:
        return Name(f"Image{self._index}")

    def size(self) -> tuple[float, float]:
        "Intrinsic image size, in pixels"
        return self.width, self.height
