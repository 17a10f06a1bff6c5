from __future__ import annotations

import re

import pytest

from pdfcreate import Document, get_page_size
from pdfcreate.config import get_settings

SETTINGS_ENV_VARS = (
    "PDFCREATE_PDF_VERSION",
    "PDFCREATE_PAGE_MODE",
    "PDFCREATE_CREATOR",
    "PDFCREATE_PRODUCER",
    "PDFCREATE_TRACE_SIZES",
)


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Run every test with default settings, whatever the environment says."""
    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def doc():
    return Document(media_box=get_page_size("A4"))


@pytest.fixture
def page(doc):
    return doc.new_page()


@pytest.fixture
def helvetica(doc):
    return doc.font(base_font="Helvetica")


@pytest.fixture
def gray_image(doc):
    return doc.image(
        width=10,
        height=20,
        color_space="DeviceGray",
        bits_per_component=8,
        data=b"\x80" * 200,
    )


def read_xref(data: bytes) -> dict[int, int]:
    """Parse the cross-reference table of a serialized document into {object number: offset}"""
    startxref = int(re.search(rb"startxref\n(\d+)\n%%EOF\n$", data).group(1))
    lines = data[startxref:].split(b"\n")
    assert lines[0] == b"xref"
    first, size = (int(n) for n in lines[1].split())
    assert first == 0
    offsets = {}
    for obj_id, line in enumerate(lines[2 : 2 + size]):
        offset, generation, kind = line.split(b" ")[:3]
        if obj_id == 0:
            assert kind == b"f"
            continue
        assert kind == b"n"
        offsets[obj_id] = int(offset)
    return offsets


def object_text(data: bytes, obj_id: int) -> str:
    """The serialized text of one indirect object, located through the xref table"""
    start = read_xref(data)[obj_id]
    end = data.index(b"endobj", start)
    return data[start:end].decode("latin-1")


@pytest.fixture
def xref():
    return read_xref


@pytest.fixture
def pdf_object():
    return object_text
