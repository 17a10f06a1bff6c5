"""
Classes & functions that represent core elements of the PDF syntax

Most of what happens in a PDF happens in objects, which are formatted like so:
```
3 0 obj
<</Type /Page
/Parent 1 0 R
/Resources 2 0 R
/Contents 4 0 R>>
endobj
```

The first line says that this is the third object in the structure of the document.

There are 8 kinds of objects (Adobe Reference, 51):

* Boolean values
* Integer and real numbers
* Strings
* Names
* Arrays
* Dictionaries
* Streams
* The null object

The `<<` in the second line and the `>>` in the line preceding `endobj` denote
that it is a dictionary object. Dictionaries map Names to other objects.

Names are the strings preceded by `/`, and valid Names do not have to start with a
capital letter, they can be any ascii characters, # and two characters can
escape non-printable ascii characters, described on page 57.

`3 0 obj` means what follows here is the third object, but the name Type
(represented here by `/Type`) is mapped to an indirect object reference:
`0 obj` vs `0 R`.
"""

import re
from abc import ABC
from binascii import hexlify
from codecs import BOM_UTF16_BE
from datetime import datetime, timezone
from typing import Any, Optional, Sequence

from .errors import SerializationError
from .util import escape_parens, format_number


def clear_empty_fields(d: dict[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in d.items() if v}


def create_dictionary_string(
    dict_: dict[str, Any],
    open_dict: str = "<<",
    close_dict: str = ">>",
    field_join: str = "\n",
    key_value_join: str = " ",
    has_empty_fields: bool = False,
) -> str:
    """format dictionary as PDF dictionary

    @param dict_: dictionary of values to render
    @param open_dict: string to open PDF dictionary
    @param close_dict: string to close PDF dictionary
    @param field_join: string to join fields with
    @param key_value_join: string to join key to value with
    @param has_empty_fields: whether or not to clear_empty_fields first.
    """

    if has_empty_fields:
        dict_ = clear_empty_fields(dict_)

    return "".join(
        [
            open_dict,
            field_join.join(key_value_join.join((k, str(v))) for k, v in dict_.items()),
            close_dict,
        ]
    )


def create_list_string(list_: Sequence[Any]) -> str:
    """format list of strings as PDF array"""
    return f"[{' '.join(str(item) for item in list_)}]"


def iobj_ref(n: int) -> str:
    """format an indirect PDF Object reference from its id number"""
    return f"{n} 0 R"


def create_stream(stream: str | bytes | bytearray) -> str:
    if isinstance(stream, (bytearray, bytes)):
        stream = str(stream, "latin-1")
    return "\n".join(["stream", stream, "endstream"])


class Raw(str):
    """str subclass signifying raw data to be directly emitted to PDF without transformation."""


class Name(str):
    """str subclass signifying a PDF name, which are emitted differently than normal strings."""

    NAME_ESC = re.compile(
        b"[^" + bytes(v for v in range(33, 127) if v not in b"()<>[]{}/%#\\") + b"]"
    )

    def serialize(self) -> str:
        escaped = self.NAME_ESC.sub(
            lambda m: b"#%02X" % m[0][0], self.encode()
        ).decode()
        return f"/{escaped}"


class PDFObject:
    """
    Main features of this class:
    * delay ID assignement
    * implement serializing
    """

    # Registering the ID as a property is required for __slots__ subclasses:
    __slots__ = ("_id",)

    def __init__(self) -> None:
        self._id: Optional[int] = None

    @property
    def id(self) -> int:
        if self._id is None:
            raise SerializationError(
                f"{self.__class__.__name__} has not been registered, so it has no object id"
            )
        return self._id

    @id.setter
    def id(self, n: int) -> None:
        self._id = n

    @property
    def registered(self) -> bool:
        return self._id is not None

    @property
    def ref(self) -> str:
        return iobj_ref(self.id)

    def serialize(self, obj_dict: Optional[dict[str, Any]] = None) -> str:
        "Serialize the PDF object as an obj<</>>endobj text block"
        output: list[str] = []
        output.append(f"{self.id} 0 obj")
        output.append("<<")
        if not obj_dict:
            obj_dict = self._build_obj_dict()
        output.append(create_dictionary_string(obj_dict, open_dict="", close_dict=""))
        output.append(">>")
        output.append("endobj")
        return "\n".join(output)

    def _build_obj_dict(self) -> dict[str, Any]:
        """
        Build the PDF Object associative map to serialize,
        based on this class instance properties.
        The property names are converted from snake_case to CamelCase,
        and prefixed with a slash character "/".
        """
        return build_obj_dict({key: getattr(self, key) for key in dir(self)})


class PDFContentStream(PDFObject):
    __slots__ = ("_contents", "filter", "length")

    def __init__(self, contents: bytes = b"") -> None:
        super().__init__()
        self._contents = contents
        self.filter: Optional[Name] = None
        self.length = len(contents)

    def encoded_contents(self) -> bytes:
        return self._contents

    # method override
    def serialize(self, obj_dict: Optional[dict[str, Any]] = None) -> str:
        contents = self.encoded_contents()
        self.length = len(contents)
        output: list[str] = []
        output.append(f"{self.id} 0 obj")
        output.append("<<")
        if not obj_dict:
            obj_dict = self._build_obj_dict()
        output.append(create_dictionary_string(obj_dict, open_dict="", close_dict=""))
        output.append(">>")
        output.append(create_stream(contents))
        output.append("endobj")
        return "\n".join(output)


def build_obj_dict(key_values: dict[str, Any]) -> dict[str, Any]:
    """
    Build the PDF Object associative map to serialize, based on a key-values dict.
    The property names are converted from snake_case to CamelCase,
    and prefixed with a slash character "/".
    """
    obj_dict: dict[str, Any] = {}
    for key, value in key_values.items():
        if (
            callable(value)
            or key.startswith("_")
            or key in ("id", "ref", "registered")
            or value is None
        ):
            continue
        if hasattr(value, "value"):  # e.g. Enum subclass
            value = value.value
        if isinstance(value, PDFObject):  # indirect object reference
            value = value.ref
        elif hasattr(value, "serialize"):  # e.g. Name, PDFString, PDFArray
            value = value.serialize()
        elif isinstance(value, bool):
            value = str(value).lower()
        elif isinstance(value, (int, float)):
            value = format_number(value)
        obj_dict[f"/{camel_case(key)}"] = value
    return obj_dict


def camel_case(snake_case: str) -> str:
    return "".join(x for x in snake_case.title() if x != "_")


class PDFString(str):
    USE_HEX_ENCODING = True
    """
    Setting this to False can reduce the encoded length of strings,
    but it may not be compatible with all consumers.
    """

    def serialize(self) -> str:
        try:
            self.encode("ascii")
            return f"({escape_parens(str(self))})"
        except UnicodeEncodeError:
            if self.USE_HEX_ENCODING:
                return f"<{hexlify(BOM_UTF16_BE + self.encode('utf-16-be')).decode('latin-1')}>"
            return f"({escape_parens(str(BOM_UTF16_BE + self.encode('utf-16-be'), 'latin-1'))})"


class PDFDate:
    def __init__(self, date: datetime, with_tz: bool = False) -> None:
        self.date = date
        self.with_tz = with_tz

    def __repr__(self) -> str:
        return f"PDFDate({self.date!r}, with_tz={self.with_tz!r})"

    def __str__(self) -> str:
        if self.with_tz:
            assert self.date.tzinfo
            if self.date.tzinfo == timezone.utc:
                out_str = f"D:{self.date:%Y%m%d%H%M%SZ}"
            else:
                out_str = f"D:{self.date:%Y%m%d%H%M%S%z}"
                out_str = out_str[:-2] + "'" + out_str[-2:] + "'"
        else:
            out_str = f"D:{self.date:%Y%m%d%H%M%S}"
        return out_str

    def serialize(self) -> str:
        return PDFString(str(self)).serialize()


class PDFArray(list[Any]):
    def serialize(self) -> str:
        if all(isinstance(elem, PDFObject) for elem in self):
            serialized_elems = " ".join(elem.ref for elem in self)
        elif all(isinstance(elem, (int, float)) for elem in self):
            serialized_elems = " ".join(format_number(elem) for elem in self)
        else:
            serialized_elems = "\n".join(
                elem.ref if isinstance(elem, PDFObject) else str(elem) for elem in self
            )
        return f"[{serialized_elems}]"


class ContentWithoutID(ABC):
    "Emitted content that is not an indirect object: the header, the xref table & trailer"

    def serialize(self) -> str:
        raise NotImplementedError
