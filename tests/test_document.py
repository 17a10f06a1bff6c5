import io
from datetime import datetime, timezone

import pytest
import pdfplumber

from pdfcreate import (
    Document,
    InvalidOptionError,
    InvalidOptionValueError,
    SerializationError,
    get_page_size,
)
from pdfcreate.config import get_settings


def build_sample(**options):
    doc = Document(media_box=get_page_size("A4"), title="Sample", **options)
    f1 = doc.font(base_font="Helvetica")
    f2 = doc.font(base_font="Times-Bold")
    first = doc.new_page()
    first.stringc(f2, 20, 297, 800, "Title (draft)")
    first.line(50, 790, 545, 790)
    first.printnl("line one\nline two", font=f1, size=10, x=50, y=760)
    second = doc.new_page(rotate=180)
    second.setrgbcolor(0.2, 0.4, 0.6)
    second.rectangle(100, 100, 200, 100)
    second.fill()
    doc.annotation(second, uri="https://example.com/(about)", x=100, y=100, w=200, h=100)
    return doc


class TestOptions:
    def test_unknown_option(self):
        with pytest.raises(InvalidOptionError) as error:
            Document(colour="red")
        assert error.value.option == "colour"

    def test_invalid_version(self):
        with pytest.raises(InvalidOptionValueError):
            Document(version="2.0")

    def test_invalid_page_mode(self):
        with pytest.raises(InvalidOptionValueError):
            Document(page_mode="UseAttachments")

    def test_single_sink(self, tmp_path):
        with pytest.raises(InvalidOptionValueError):
            Document(filename=tmp_path / "a.pdf", fh=io.BytesIO())
        with pytest.raises(InvalidOptionValueError):
            Document(fh="not a file")


class TestFonts:
    def test_defaults(self, doc, pdf_object):
        font = doc.font()
        doc.new_page().stringl(font, 12, 0, 0, "x")
        serialized = pdf_object(doc.close(), font.id)
        assert "/Type /Font" in serialized
        assert "/Subtype /Type1" in serialized
        assert "/BaseFont /Helvetica" in serialized
        assert "/Encoding /WinAnsiEncoding" in serialized
        assert "/Name /F1" in serialized

    def test_resource_names_follow_declaration_order(self, doc):
        names = [doc.font(base_font=name).name for name in ("Courier", "Symbol", "Times-Italic")]
        assert names == ["F1", "F2", "F3"]

    @pytest.mark.parametrize(
        "options",
        [
            {"subtype": "Type6"},
            {"encoding": "Latin1Encoding"},
            {"base_font": "Comic-Sans"},
        ],
    )
    def test_invalid_values(self, doc, options):
        with pytest.raises(InvalidOptionValueError):
            doc.font(**options)

    def test_unknown_option(self, doc):
        with pytest.raises(InvalidOptionError):
            doc.font(size=12)


class TestSerialization:
    def test_header_and_trailer(self):
        data = build_sample().close()
        assert data.startswith(b"%PDF-1.2\n%")
        assert all(byte >= 128 for byte in data.split(b"\n")[1][1:5])
        assert data.endswith(b"startxref\n" + str(data.rindex(b"xref\n0 ")).encode() + b"\n%%EOF\n")

    def test_version(self):
        assert build_sample(version="1.4").close().startswith(b"%PDF-1.4\n")

    def test_xref_offsets_point_at_objects(self, xref):
        data = build_sample().close()
        offsets = xref(data)
        assert sorted(offsets) == list(range(1, len(offsets) + 1))
        for obj_id, offset in offsets.items():
            assert data[offset:].startswith(f"{obj_id} 0 obj\n".encode()), obj_id

    def test_xref_entries_are_20_bytes(self):
        data = build_sample().close()
        table = data[data.rindex(b"\nxref\n") + 1 :].split(b"trailer")[0]
        entries = table.split(b"\n", 2)[2]
        assert len(entries) % 20 == 0
        assert entries.startswith(b"0000000000 65535 f \n")

    def test_object_numbering(self):
        doc = Document(media_box=get_page_size())
        page = doc.new_page()
        font = doc.font()
        page.stringl(font, 12, 0, 0, "x")
        data = doc.close()
        assert (doc.pages_root.id, page.id, font.id, page.content_stream().id) == (1, 2, 3, 4)
        # Info & Catalog come last:
        assert b"/Size 7 /Root 6 0 R /Info 5 0 R" in data
        assert doc.registry.resolve(6) == data.index(b"6 0 obj")

    def test_deterministic_output(self):
        assert build_sample().close() == build_sample().close()

    def test_round_trip(self):
        data = build_sample(author="Jane Doe", page_mode="UseOutlines").close()
        with pdfplumber.open(io.BytesIO(data)) as pdf:
            assert len(pdf.pages) == 2
            assert pdf.metadata["Title"] == "Sample"
            assert pdf.metadata["Author"] == "Jane Doe"
            assert pdf.metadata["Creator"] == "pdfcreate"
            assert pdf.doc.catalog["PageMode"].name == "UseOutlines"
            assert pdf.pages[1].rotation == 180
            text = pdf.pages[0].extract_text()
        assert "Title (draft)" in text
        assert "line two" in text

    def test_info(self, pdf_object):
        doc = build_sample(
            subject="Tests",
            keywords="pdf, tests",
            producer="unit",
            creation_date=datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc),
        )
        data = doc.close()
        info = pdf_object(data, doc.registry.size - 2)
        assert "/Title (Sample)" in info
        assert "/Subject (Tests)" in info
        assert "/Keywords (pdf, tests)" in info
        assert "/Producer (unit)" in info
        assert "/CreationDate (D:20240102030405Z)" in info

    def test_no_creation_date_by_default(self):
        assert b"/CreationDate" not in build_sample().close()

    def test_non_ascii_info_is_utf16(self):
        data = build_sample(author="Zoë").close()
        assert b"/Author <feff005a006f00eb>" in data

    def test_page_mode(self):
        data = build_sample(page_mode="FullScreen").close()
        assert b"/PageMode /FullScreen" in data
        assert b"/PageMode /UseNone" in build_sample().close()


class TestAnnotations:
    def test_link(self, doc, page, pdf_object):
        annotation = doc.annotation(page, uri="https://example.com", x=10, y=20, w=100, h=12)
        data = doc.close()
        serialized = pdf_object(data, annotation.id)
        assert "/Type /Annot" in serialized
        assert "/Subtype /Link" in serialized
        assert "/Rect [10 20 110 32]" in serialized
        assert "/Border [0 0 0]" in serialized
        assert "/A <</S /URI /URI (https://example.com)>>" in serialized
        assert f"/P {page.id} 0 R" in serialized
        assert f"/Annots [{annotation.id} 0 R]" in pdf_object(data, page.id)

    def test_link_under_underlined_text(self, doc, page, helvetica):
        width = page.string_underline(helvetica, 12, 72, 700, "example.com")
        page.stringl(helvetica, 12, 72, 700, "example.com")
        doc.annotation(page, uri="https://example.com", x=72, y=699, w=width, h=12)
        with pdfplumber.open(io.BytesIO(doc.close())) as pdf:
            links = pdf.pages[0].hyperlinks
        assert [link["uri"] for link in links] == ["https://example.com"]

    def test_invalid_annotation(self, doc, page):
        with pytest.raises(InvalidOptionError):
            doc.annotation(page, uri="https://example.com", x=0, y=0, w=1, h=1, color="red")
        with pytest.raises(InvalidOptionValueError):
            doc.annotation(page, uri="https://example.com", x=0, y=0, w=-1, h=1)
        with pytest.raises(InvalidOptionValueError):
            doc.annotation(page, x=0, y=0, w=1, h=1)
        other = Document(media_box=get_page_size())
        with pytest.raises(InvalidOptionValueError):
            doc.annotation(other.new_page(), uri="https://example.com", x=0, y=0, w=1, h=1)


class TestClose:
    def test_no_pages(self, doc):
        with pytest.raises(SerializationError):
            doc.close()

    def test_close_twice(self, doc, page):
        doc.close()
        assert doc.closed
        with pytest.raises(SerializationError):
            doc.close()

    def test_nothing_can_be_added_after_close(self, doc, page):
        doc.close()
        with pytest.raises(SerializationError):
            doc.new_page()
        with pytest.raises(SerializationError):
            doc.font()

    def test_write_to_filename(self, tmp_path):
        path = tmp_path / "out.pdf"
        data = build_sample(filename=str(path)).close()
        assert path.read_bytes() == data

    def test_write_to_file_handle(self):
        fh = io.BytesIO()
        data = build_sample(fh=fh).close()
        assert fh.getvalue() == data


class TestSettings:
    def test_defaults(self):
        settings = get_settings()
        assert settings.pdf_version == "1.2"
        assert settings.page_mode == "UseNone"
        assert settings.creator == "pdfcreate"

    def test_environment(self, monkeypatch):
        monkeypatch.setenv("PDFCREATE_PDF_VERSION", "1.5")
        monkeypatch.setenv("PDFCREATE_CREATOR", "report-service")
        get_settings.cache_clear()
        doc = build_sample()
        assert doc.pdf_version == "1.5"
        data = doc.close()
        assert data.startswith(b"%PDF-1.5\n")
        assert b"/Creator (report-service)" in data

    def test_options_win_over_settings(self, monkeypatch):
        monkeypatch.setenv("PDFCREATE_PDF_VERSION", "1.5")
        get_settings.cache_clear()
        assert build_sample(version="1.3").pdf_version == "1.3"

    @pytest.mark.parametrize(
        "name, value", [("PDFCREATE_PDF_VERSION", "9.9"), ("PDFCREATE_PAGE_MODE", "UseAttachments")]
    )
    def test_invalid_environment(self, monkeypatch, name, value):
        monkeypatch.setenv(name, value)
        get_settings.cache_clear()
        with pytest.raises(InvalidOptionValueError) as error:
            Document()
        assert error.value.operation == "Settings"

    def test_size_trace_is_logged(self, caplog):
        with caplog.at_level("DEBUG", logger="pdfcreate.output"):
            build_sample().close()
        assert "- pages:" in caplog.text
        assert "- fonts:" in caplog.text
