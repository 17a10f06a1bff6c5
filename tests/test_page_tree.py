import io

import pytest
import pdfplumber

from pdfcreate import (
    Document,
    InvalidOptionError,
    InvalidOptionValueError,
    SerializationError,
    get_page_size,
)


@pytest.fixture
def tree(doc):
    """
    root
    ├── section (rotated, Letter)
    │   ├── first
    │   └── second (A5)
    └── last
    """
    section = doc.new_page(media_box=get_page_size("Letter"), rotate=90)
    first = section.new_page()
    second = doc.new_page(parent=section, media_box=get_page_size("A5"))
    last = doc.new_page()
    return section, first, second, last


def test_count(doc, tree):
    section, first, _, last = tree
    assert doc.pages_root.count() == 3
    assert section.count() == 2
    assert first.count() == 1
    assert last.count() == 1


def test_kids_are_immediate_children(doc, tree):
    section, first, second, last = tree
    assert doc.pages_root.kids() == [section.id, last.id]
    assert section.kids() == [first.id, second.id]
    assert last.kids() == []


def test_list_is_pre_order_and_excludes_self(doc, tree):
    section, first, second, last = tree
    assert doc.pages_root.list() == [section, first, second, last]
    assert section.list() == [first, second]
    assert last.list() == []


def test_parent_links(doc, tree):
    section, first, _, last = tree
    assert first.parent is section
    assert last.parent is doc.pages_root
    assert doc.pages_root.parent is None


def test_attributes_are_inherited(doc, tree):
    section, first, second, last = tree
    assert first.get_attribute("media_box") == get_page_size("Letter")
    assert first.get_attribute("rotate") == 90
    assert second.get_attribute("media_box") == get_page_size("A5")
    assert second.get_attribute("rotate") == 90
    assert last.get_attribute("media_box") == get_page_size("A4")
    assert last.get_attribute("rotate") is None
    assert last.get_attribute("crop_box") is None


def test_unknown_attribute_name(page):
    with pytest.raises(InvalidOptionValueError):
        page.get_attribute("color")


def test_page_options_are_validated(doc):
    with pytest.raises(InvalidOptionError):
        doc.new_page(size="A4")
    with pytest.raises(InvalidOptionValueError):
        doc.new_page(rotate=45)
    with pytest.raises(InvalidOptionValueError):
        doc.new_page(media_box=(0, 0, 100))


def test_parent_must_belong_to_the_document(doc):
    other = Document(media_box=get_page_size())
    foreign = other.new_page()
    with pytest.raises(InvalidOptionValueError):
        doc.new_page(parent=foreign)


def test_serialized_tree(doc, tree, xref, pdf_object):
    section, first, second, last = tree
    data = doc.close()

    root = pdf_object(data, doc.pages_root.id)
    assert "/Type /Pages" in root
    assert f"/Kids [{section.id} 0 R {last.id} 0 R]" in root
    assert "/Count 3" in root
    assert "/MediaBox [0 0 595 842]" in root
    assert "/Parent" not in root

    intermediate = pdf_object(data, section.id)
    assert "/Type /Pages" in intermediate
    assert "/Count 2" in intermediate
    assert f"/Parent {doc.pages_root.id} 0 R" in intermediate
    assert "/MediaBox [0 0 612 792]" in intermediate
    assert "/Rotate 90" in intermediate

    leaf = pdf_object(data, second.id)
    assert "/Type /Page\n" in leaf
    assert f"/Parent {section.id} 0 R" in leaf
    assert "/MediaBox [0 0 421 595]" in leaf
    assert "/Rotate 90" in leaf
    assert "/Resources" in leaf
    assert "/Contents" not in leaf

    with pdfplumber.open(io.BytesIO(data)) as pdf:
        assert len(pdf.pages) == 3
        assert [float(v) for v in pdf.pages[0].page_obj.mediabox] == [0, 0, 612, 792]
        assert pdf.pages[0].rotation == 90
        assert [float(v) for v in pdf.pages[2].page_obj.mediabox] == [0, 0, 595, 842]


@pytest.mark.parametrize("page_count", [1, 2, 7])
def test_page_count_matches(page_count):
    doc = Document(media_box=get_page_size("Letter"))
    for _ in range(page_count):
        doc.new_page()
    data = doc.close()
    assert f"/Count {page_count}".encode() in data
    assert data.count(b"/Type /Page\n") == page_count
    with pdfplumber.open(io.BytesIO(data)) as pdf:
        assert len(pdf.pages) == page_count


def test_missing_media_box():
    doc = Document()
    doc.new_page()
    with pytest.raises(SerializationError):
        doc.close()


def test_media_box_on_the_page_only():
    doc = Document()
    doc.new_page(media_box=get_page_size("A6"))
    data = doc.close()
    assert b"/MediaBox [0 0 297 421]" in data


def test_content_of_intermediate_node_is_dropped(doc, caplog):
    parent = doc.new_page()
    parent.moveto(1, 2)
    parent.new_page()
    with caplog.at_level("WARNING", logger="pdfcreate.page"):
        data = doc.close()
    assert "not displayed" in caplog.text
    assert b"/Contents" not in data
