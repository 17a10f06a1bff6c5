"""
Various utilities that could not be gathered logically in a specific module.

Numbers written into content streams always go through format_number():
f-string formatting never consults the process locale, so a decimal comma
cannot leak into the output whatever LC_NUMERIC says.
"""

import decimal
import math
import re
from typing import Optional, TypeVar, Union, overload

from .errors import InvalidOptionValueError

Number = Union[int, float, decimal.Decimal]
NumberClass = (int, float, decimal.Decimal)
_StrBytes = TypeVar("_StrBytes", str, bytes)

Box = tuple[float, float, float, float]

# Numeric literals accepted for optional text spacing operands
NUMERIC_LITERAL = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)")

PAGE_SIZES: dict[str, Box] = {
    "A0": (0, 0, 2380, 3368),
    "A1": (0, 0, 1684, 2380),
    "A2": (0, 0, 1190, 1684),
    "A3": (0, 0, 842, 1190),
    "A4": (0, 0, 595, 842),
    "A4L": (0, 0, 842, 595),
    "A5": (0, 0, 421, 595),
    "A6": (0, 0, 297, 421),
    "LETTER": (0, 0, 612, 792),
    "BROADSHEET": (0, 0, 1296, 1584),
    "LEDGER": (0, 0, 1224, 792),
    "TABLOID": (0, 0, 792, 1224),
    "LEGAL": (0, 0, 612, 1008),
    "EXECUTIVE": (0, 0, 522, 756),
    "36X36": (0, 0, 2592, 2592),
}


def get_page_size(name: Optional[str] = None) -> Box:
    """
    Media box of a named paper size, in points.

    Args:
        name (str): case-insensitive paper name, e.g. "A4", "letter", "a4l". Defaults to A4.
    Raises:
        InvalidOptionValueError
    """
    if name is None:
        return PAGE_SIZES["A4"]
    try:
        return PAGE_SIZES[name.upper()]
    except KeyError:
        raise InvalidOptionValueError(
            "get_page_size", "name", name, f"known sizes: {', '.join(PAGE_SIZES)}"
        ) from None


@overload
def escape_parens(s: str) -> str: ...


@overload
def escape_parens(s: bytes) -> bytes: ...


def escape_parens(s: _StrBytes) -> _StrBytes:
    """Add a backslash character before \\, ( and )"""
    if isinstance(s, str):
        return (
            s.replace("\\", "\\\\")
            .replace(")", "\\)")
            .replace("(", "\\(")
            .replace("\r", "\\r")
        )
    return (
        s.replace(b"\\", b"\\\\")
        .replace(b")", b"\\)")
        .replace(b"(", b"\\(")
        .replace(b"\r", b"\\r")
    )


def format_number(x: Number, digits: int = 8) -> str:
    if not math.isfinite(x):
        raise InvalidOptionValueError("format_number", "x", x, "not a finite number")
    # snap tiny values to zero to avoid "-0" and scientific notation
    if abs(x) < 1e-12:
        x = 0.0
    s = f"{x:.{digits}f}"
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    if s == "-0":
        s = "0"
    if s.startswith("."):
        s = "0" + s
    if s.startswith("-."):
        s = s.replace("-.", "-0.", 1)
    return s


def format_numbers(*values: Number) -> str:
    return " ".join(format_number(value) for value in values)


def format_box(box: Box) -> str:
    return f"[{format_numbers(*box)}]"


def numeric_operand(value: Union[Number, str, None]) -> Optional[str]:
    """
    Returns the operand text for an optional numeric value,
    or None when the value is absent or does not look like a number.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, NumberClass):
        return format_number(value)
    if isinstance(value, str) and NUMERIC_LITERAL.fullmatch(value.strip()):
        return format_number(float(value))
    return None


def sizeof_fmt(num: float, suffix: str = "B") -> str:
    # Recipe from: https://stackoverflow.com/a/1094933/636849
    for unit in ["", "Ki", "Mi", "Gi", "Ti", "Pi", "Ei", "Zi"]:
        if abs(num) < 1024:
            return f"{num:3.1f}{unit}{suffix}"
        num /= 1024
    return f"{num:.1f}Yi{suffix}"
