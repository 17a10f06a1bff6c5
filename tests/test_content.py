import locale

import pytest

from pdfcreate import (
    Document,
    InvalidOptionValueError,
    ParameterCountError,
    SerializationError,
    get_page_size,
)


def test_path_operators(page):
    page.moveto(10, 20)
    page.lineto(30.5, 40)
    page.curveto(1, 2, 3, 4, 5, 6)
    page.rectangle(0, 0, 100, 50)
    page.closepath()
    page.newpath()
    page.stroke()
    page.closestroke()
    page.fill()
    page.fill2()
    page.set_width(0.75)
    assert page.operators() == (
        "10 20 m",
        "30.5 40 l",
        "1 2 3 4 5 6 c",
        "0 0 100 50 re",
        "h",
        "n",
        "S",
        "s",
        "f",
        "f*",
        "0.75 w",
    )


def test_line_is_a_single_entry(page):
    page.line(0, 0, 100, 50)
    assert page.operators() == ("0 0 m 100 50 l S",)


def test_colors(page):
    page.setgray(0.5)
    page.setgraystroke(0)
    page.setrgbcolor(1, 0.25, 0)
    page.setrgbcolorstroke(0, 0, 1)
    assert page.operators() == ("0.5 g", "0 G", "1 0.25 0 rg", "0 0 1 RG")


def test_rgb_needs_three_components(page):
    with pytest.raises(ParameterCountError):
        page.setrgbcolorstroke(1, 0)
    with pytest.raises(TypeError):
        page.setrgbcolor(1, 0, 0, 1)
    assert page.operators() == ()


def test_content_stream_is_created_on_first_drawing(doc, page):
    assert page.content_stream() is None
    page.stroke()
    stream = page.content_stream()
    assert stream.id == page.id + 1
    page.fill()
    assert page.content_stream() is stream


def test_content_stream_serialization(doc, page, pdf_object):
    page.moveto(1, 2)
    page.lineto(3, 4)
    stream_id = page.content_stream().id
    data = doc.close()
    serialized = pdf_object(data, stream_id)
    assert "/Length 11" in serialized
    assert serialized.endswith("stream\n1 2 m\n3 4 l\nendstream\n")
    assert f"/Contents {stream_id} 0 R" in pdf_object(data, page.id)


def test_numbers_ignore_the_process_locale(page):
    previous = locale.setlocale(locale.LC_NUMERIC)
    for name in ("de_DE.UTF-8", "fr_FR.UTF-8", "de_DE", "fr_FR"):
        try:
            locale.setlocale(locale.LC_NUMERIC, name)
            break
        except locale.Error:
            continue
    else:
        pytest.skip("no locale with a decimal comma is installed")
    try:
        assert locale.localeconv()["decimal_point"] == ","
        page.moveto(1.5, 2.25)
        page.setrgbcolor(0.1, 0.2, 0.3)
    finally:
        locale.setlocale(locale.LC_NUMERIC, previous)
    assert page.operators() == ("1.5 2.25 m", "0.1 0.2 0.3 rg")


def test_drawing_after_close(doc, page):
    page.stroke()
    doc.close()
    with pytest.raises(SerializationError):
        page.fill()


def test_text_outside_latin1_fails_at_close(doc, page, helvetica):
    page.stringl(helvetica, 12, 10, 10, "snow ☃")
    with pytest.raises(SerializationError):
        doc.close()


@pytest.mark.parametrize("value", [float("nan"), float("inf")])
def test_non_finite_operands_are_rejected(page, value):
    with pytest.raises(InvalidOptionValueError):
        page.moveto(value, 1)
    with pytest.raises(InvalidOptionValueError):
        page.setrgbcolor(0, value, 0)
    assert page.operators() == ()


def test_page_keeps_its_document_alive():
    page = Document(media_box=get_page_size()).new_page()
    page.moveto(1, 2)
    assert page.operators() == ("1 2 m",)
    assert page.document.close().startswith(b"%PDF-")
