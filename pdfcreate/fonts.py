from .metrics import char_width, widths_for
from .syntax import Name, PDFObject


class CoreFont(PDFObject):
    """
    A font dictionary for one of the standard fonts, which every conforming
    reader provides without embedding.
    The resource name (/F1, /F2...) follows the order in which fonts were declared.
    """

    def __init__(self, index: int, subtype: str, encoding: str, base_font: str) -> None:
        super().__init__()
        self.type = Name("Font")
        self.subtype = Name(subtype)
        self.name = Name(f"F{index}")
        self.base_font = Name(base_font)
        self.encoding = Name(encoding)
        # Useful properties that will not be serialized in the final PDF document:
        self._index = index

    def __repr__(self) -> str:
        return f"CoreFont(/F{self._index}, {self.base_font})"

    def index(self) -> int:
        return self._index

    def get_text_width(self, text: str) -> float:
        """
        Width of `text` at size 1, in text space units.

        Raises:
            FontMetricsLookupError: if the base font has no metrics,
                or a character is outside of the 0-255 range
        """
        widths_for(self.base_font)
        return sum(char_width(self.base_font, char) for char in text) / 1000
