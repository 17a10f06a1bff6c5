import pytest

from pdfcreate import SerializationError
from pdfcreate.registry import ObjectRegistry
from pdfcreate.syntax import Name, PDFObject


class Dummy(PDFObject):
    def __init__(self, label):
        super().__init__()
        self.type = Name(label)


def test_ids_are_sequential_from_one():
    registry = ObjectRegistry()
    objects = [Dummy("A"), Dummy("B"), Dummy("C")]
    assert [registry.register(obj) for obj in objects] == [1, 2, 3]
    assert list(registry) == objects
    assert registry.size == 4
    assert registry.get(2) is objects[1]


def test_object_cannot_be_registered_twice():
    registry = ObjectRegistry()
    obj = Dummy("A")
    registry.register(obj)
    with pytest.raises(SerializationError):
        registry.register(obj)
    with pytest.raises(SerializationError):
        ObjectRegistry().register(obj)


def test_unregistered_object_has_no_id():
    with pytest.raises(SerializationError):
        Dummy("A").id


def test_require_checks_identity():
    registry, other = ObjectRegistry(), ObjectRegistry()
    mine, foreign = Dummy("A"), Dummy("B")
    registry.register(mine)
    other.register(foreign)
    assert registry.require(mine) == "1 0 R"
    with pytest.raises(SerializationError):
        registry.require(foreign)
    with pytest.raises(SerializationError):
        registry.require(Dummy("C"))


def test_resolve():
    registry = ObjectRegistry()
    registry.register(Dummy("A"))
    with pytest.raises(SerializationError):
        registry.resolve(1)
    with pytest.raises(SerializationError):
        registry.resolve(2)
    registry.record_offset(1, 15)
    assert registry.resolve(1) == 15


def test_serialize():
    registry = ObjectRegistry()
    obj = Dummy("Catalog")
    registry.register(obj)
    assert obj.serialize() == "1 0 obj\n<<\n/Type /Catalog\n>>\nendobj"
