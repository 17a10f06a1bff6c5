"""
Glyph advance widths of the standard Type1 text fonts.

Widths are in thousandths of a text space unit and indexed by single-byte
character code (0-255). Symbol and ZapfDingbats have no entry.
"""

from typing import Sequence

from .errors import FontMetricsLookupError

# fmt: off
CORE_FONT_WIDTHS: dict[str, tuple[int, ...]] = {
    "Courier": (
        599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599,
        599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599,
        599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599,
        599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599,
        599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599,
        599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599,
        599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599,
        599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599,
        599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599,
        599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599,
        599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599,
        599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599,
        599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599,
        599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599,
        599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599,
        599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599,
    ),
    "Courier-Bold": (
        599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599,
        599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599,
        599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599,
        599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599,
        599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599,
        599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599,
        599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599,
        599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599,
        599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599,
        599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599,
        599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599,
        599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599,
        599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599,
        599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599,
        599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599,
        599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599,
    ),
    "Courier-BoldOblique": (
        599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599,
        599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599,
        599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599,
        599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599,
        599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599,
        599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599,
        599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599,
        599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599,
        599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599,
        599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599,
        599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599,
        599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599,
        599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599,
        599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599,
        599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599,
        599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599,
    ),
    "Courier-Oblique": (
        599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599,
        599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599,
        599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599,
        599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599,
        599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599,
        599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599,
        599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599,
        599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599,
        599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599,
        599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599,
        599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599,
        599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599,
        599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599,
        599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599,
        599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599,
        599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599, 599,
    ),
    "Helvetica": (
        277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277,
        277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277,
        277, 277, 354, 555, 555, 888, 666, 220, 332, 332, 388, 583, 277, 332, 277, 277,
        555, 555, 555, 555, 555, 555, 555, 555, 555, 555, 277, 277, 583, 583, 583, 555,
        1014, 666, 666, 721, 721, 666, 610, 777, 721, 277, 499, 666, 555, 832, 721, 777,
        666, 777, 721, 666, 610, 721, 666, 943, 666, 666, 610, 277, 277, 277, 468, 555,
        221, 555, 555, 499, 555, 555, 277, 555, 555, 221, 221, 499, 221, 832, 555, 555,
        555, 555, 332, 499, 277, 555, 499, 721, 499, 499, 499, 333, 259, 333, 583, 277,
        277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277,
        277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277,
        277, 332, 555, 555, 166, 555, 555, 555, 555, 190, 332, 555, 332, 332, 499, 499,
        277, 555, 555, 555, 277, 277, 536, 349, 221, 332, 332, 555, 999, 999, 277, 610,
        277, 332, 332, 332, 332, 332, 332, 332, 332, 277, 332, 332, 277, 332, 332, 332,
        999, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277,
        277, 999, 277, 369, 277, 277, 277, 277, 555, 777, 999, 364, 277, 277, 277, 277,
        277, 888, 277, 277, 277, 277, 277, 277, 221, 610, 943, 610, 277, 277, 277, 277,
    ),
    "Helvetica-Bold": (
        277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277,
        277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277,
        277, 332, 473, 555, 555, 888, 721, 277, 332, 332, 388, 583, 277, 332, 277, 277,
        555, 555, 555, 555, 555, 555, 555, 555, 555, 555, 332, 332, 583, 583, 583, 610,
        974, 721, 721, 721, 721, 666, 610, 777, 721, 277, 555, 721, 610, 832, 721, 777,
        666, 777, 721, 666, 610, 721, 666, 943, 666, 666, 610, 332, 277, 332, 583, 555,
        277, 555, 610, 555, 610, 555, 332, 610, 610, 277, 277, 555, 277, 888, 610, 610,
        610, 610, 388, 555, 332, 610, 555, 777, 555, 555, 499, 388, 279, 388, 583, 277,
        277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277,
        277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277,
        277, 332, 555, 555, 166, 555, 555, 555, 555, 237, 499, 555, 332, 332, 610, 610,
        277, 555, 555, 555, 277, 277, 555, 349, 277, 499, 499, 555, 999, 999, 277, 610,
        277, 332, 332, 332, 332, 332, 332, 332, 332, 277, 332, 332, 277, 332, 332, 332,
        999, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277,
        277, 999, 277, 369, 277, 277, 277, 277, 610, 777, 999, 364, 277, 277, 277, 277,
        277, 888, 277, 277, 277, 277, 277, 277, 277, 610, 943, 610, 277, 277, 277, 277,
    ),
    "Helvetica-BoldOblique": (
        277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277,
        277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277,
        277, 332, 473, 555, 555, 888, 721, 277, 332, 332, 388, 583, 277, 332, 277, 277,
        555, 555, 555, 555, 555, 555, 555, 555, 555, 555, 332, 332, 583, 583, 583, 610,
        974, 721, 721, 721, 721, 666, 610, 777, 721, 277, 555, 721, 610, 832, 721, 777,
        666, 777, 721, 666, 610, 721, 666, 943, 666, 666, 610, 332, 277, 332, 583, 555,
        277, 555, 610, 555, 610, 555, 332, 610, 610, 277, 277, 555, 277, 888, 610, 610,
        610, 610, 388, 555, 332, 610, 555, 777, 555, 555, 499, 388, 279, 388, 583, 277,
        277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277,
        277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277,
        277, 332, 555, 555, 166, 555, 555, 555, 555, 237, 499, 555, 332, 332, 610, 610,
        277, 555, 555, 555, 277, 277, 555, 349, 277, 499, 499, 555, 999, 999, 277, 610,
        277, 332, 332, 332, 332, 332, 332, 332, 332, 277, 332, 332, 277, 332, 332, 332,
        999, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277,
        277, 999, 277, 369, 277, 277, 277, 277, 610, 777, 999, 364, 277, 277, 277, 277,
        277, 888, 277, 277, 277, 277, 277, 277, 277, 610, 943, 610, 277, 277, 277, 277,
    ),
    "Helvetica-Oblique": (
        277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277,
        277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277,
        277, 277, 354, 555, 555, 888, 666, 221, 332, 332, 388, 583, 277, 332, 277, 277,
        555, 555, 555, 555, 555, 555, 555, 555, 555, 555, 277, 277, 583, 583, 583, 555,
        1014, 666, 666, 721, 721, 666, 610, 777, 721, 277, 499, 666, 555, 832, 721, 777,
        666, 777, 721, 666, 610, 721, 666, 943, 666, 666, 610, 277, 277, 277, 468, 555,
        221, 555, 555, 499, 555, 555, 277, 555, 555, 221, 221, 499, 221, 832, 555, 555,
        555, 555, 332, 499, 277, 555, 499, 721, 499, 499, 499, 333, 259, 333, 583, 277,
        277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277,
        277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277,
        277, 332, 555, 555, 166, 555, 555, 555, 555, 190, 332, 555, 332, 332, 499, 499,
        277, 555, 555, 555, 277, 277, 536, 349, 221, 332, 332, 555, 999, 999, 277, 610,
        277, 332, 332, 332, 332, 332, 332, 332, 332, 277, 332, 332, 277, 332, 332, 332,
        999, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277, 277,
        277, 999, 277, 369, 277, 277, 277, 277, 555, 777, 999, 364, 277, 277, 277, 277,
        277, 888, 277, 277, 277, 277, 277, 277, 221, 610, 943, 610, 277, 277, 277, 277,
    ),
    "Times-Bold": (
        249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249,
        249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249,
        249, 332, 554, 499, 499, 999, 832, 332, 332, 332, 499, 569, 249, 332, 249, 277,
        499, 499, 499, 499, 499, 499, 499, 499, 499, 499, 332, 332, 569, 569, 569, 499,
        929, 721, 666, 721, 721, 666, 610, 777, 777, 388, 499, 777, 666, 943, 721, 777,
        610, 777, 721, 555, 666, 721, 721, 999, 721, 721, 666, 332, 277, 332, 580, 499,
        332, 499, 555, 443, 555, 443, 332, 499, 555, 277, 332, 555, 277, 832, 555, 499,
        555, 555, 443, 388, 332, 555, 499, 721, 499, 499, 443, 393, 219, 393, 519, 249,
        249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249,
        249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249,
        249, 332, 499, 499, 166, 499, 499, 499, 499, 277, 499, 499, 332, 332, 555, 555,
        249, 499, 499, 499, 249, 249, 539, 349, 332, 499, 499, 499, 999, 999, 249, 499,
        249, 332, 332, 332, 332, 332, 332, 332, 332, 249, 332, 332, 249, 332, 332, 332,
        999, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249,
        249, 999, 249, 299, 249, 249, 249, 249, 666, 777, 999, 329, 249, 249, 249, 249,
        249, 721, 249, 249, 249, 277, 249, 249, 277, 499, 721, 555, 249, 249, 249, 249,
    ),
    "Times-BoldItalic": (
        249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249,
        249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249,
        249, 388, 554, 499, 499, 832, 777, 332, 332, 332, 499, 569, 249, 332, 249, 277,
        499, 499, 499, 499, 499, 499, 499, 499, 499, 499, 332, 332, 569, 569, 569, 499,
        831, 666, 666, 666, 721, 666, 666, 721, 777, 388, 499, 666, 610, 888, 721, 721,
        610, 721, 666, 555, 610, 721, 666, 888, 666, 610, 610, 332, 277, 332, 569, 499,
        332, 499, 499, 443, 499, 443, 332, 499, 555, 277, 277, 499, 277, 777, 555, 499,
        499, 499, 388, 388, 277, 555, 443, 666, 499, 443, 388, 347, 219, 347, 569, 249,
        249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249,
        249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249,
        249, 388, 499, 499, 166, 499, 499, 499, 499, 277, 499, 499, 332, 332, 555, 555,
        249, 499, 499, 499, 249, 249, 499, 349, 332, 499, 499, 499, 999, 999, 249, 499,
        249, 332, 332, 332, 332, 332, 332, 332, 332, 249, 332, 332, 249, 332, 332, 332,
        999, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249,
        249, 943, 249, 265, 249, 249, 249, 249, 610, 721, 943, 299, 249, 249, 249, 249,
        249, 721, 249, 249, 249, 277, 249, 249, 277, 499, 721, 499, 249, 249, 249, 249,
    ),
    "Times-Italic": (
        249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249,
        249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249,
        249, 332, 419, 499, 499, 832, 777, 332, 332, 332, 499, 674, 249, 332, 249, 277,
        499, 499, 499, 499, 499, 499, 499, 499, 499, 499, 332, 332, 674, 674, 674, 499,
        919, 610, 610, 666, 721, 610, 610, 721, 721, 332, 443, 666, 555, 832, 666, 721,
        610, 721, 610, 499, 555, 721, 610, 832, 610, 555, 555, 388, 277, 388, 421, 499,
        332, 499, 499, 443, 499, 443, 277, 499, 499, 277, 277, 443, 277, 721, 499, 499,
        499, 499, 388, 388, 277, 499, 443, 666, 443, 443, 388, 399, 274, 399, 540, 249,
        249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249,
        249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249,
        249, 388, 499, 499, 166, 499, 499, 499, 499, 213, 555, 499, 332, 332, 499, 499,
        249, 499, 499, 499, 249, 249, 522, 349, 332, 555, 555, 499, 888, 999, 249, 499,
        249, 332, 332, 332, 332, 332, 332, 332, 332, 249, 332, 332, 249, 332, 332, 332,
        888, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249,
        249, 888, 249, 275, 249, 249, 249, 249, 555, 721, 943, 309, 249, 249, 249, 249,
        249, 666, 249, 249, 249, 277, 249, 249, 277, 499, 666, 499, 249, 249, 249, 249,
    ),
    "Times-Roman": (
        249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249,
        249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249,
        249, 332, 407, 499, 499, 832, 777, 332, 332, 332, 499, 563, 249, 332, 249, 277,
        499, 499, 499, 499, 499, 499, 499, 499, 499, 499, 277, 277, 563, 563, 563, 443,
        920, 721, 666, 666, 721, 610, 555, 721, 721, 332, 388, 721, 610, 888, 721, 721,
        555, 721, 666, 555, 610, 721, 721, 943, 721, 721, 610, 332, 277, 332, 468, 499,
        332, 443, 499, 443, 499, 443, 332, 499, 499, 277, 277, 499, 277, 777, 499, 499,
        499, 499, 332, 388, 277, 499, 499, 721, 499, 499, 443, 479, 199, 479, 540, 249,
        249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249,
        249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249,
        249, 332, 499, 499, 166, 499, 499, 499, 499, 179, 443, 499, 332, 332, 555, 555,
        249, 499, 499, 499, 249, 249, 452, 349, 332, 443, 443, 499, 999, 999, 249, 443,
        249, 332, 332, 332, 332, 332, 332, 332, 332, 249, 332, 332, 249, 332, 332, 332,
        999, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249, 249,
        249, 888, 249, 275, 249, 249, 249, 249, 610, 721, 888, 309, 249, 249, 249, 249,
        249, 666, 249, 249, 249, 277, 249, 249, 277, 499, 721, 499, 249, 249, 249, 249,
    ),
}
# fmt: on


def char_width(base_font: str, char: str) -> int:
    "Advance width of a single character, in thousandths of a unit"
    widths = widths_for(base_font)
    code = ord(char)
    if code > 255:
        raise FontMetricsLookupError(
            f"Character {char!r} (U+{code:04X}) is outside the single-byte range of {base_font}"
        )
    return widths[code]


def widths_for(base_font: str) -> Sequence[int]:
    try:
        return CORE_FONT_WIDTHS[base_font]
    except KeyError:
        raise FontMetricsLookupError(f"Unknown font: {base_font}") from None
