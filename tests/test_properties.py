import pytest

from vcardkit.properties import PropertyKey, PropertyStore


def test_key_parse_and_render():
    key = PropertyKey.parse("ADR;WORK;POSTAL")
    assert key.name == "ADR"
    assert key.params == ("WORK", "POSTAL")
    assert str(key) == "ADR;WORK;POSTAL"


def test_key_equality_is_structural():
    assert PropertyKey.parse("TEL;CELL") == PropertyKey("TEL", ("CELL",))
    assert PropertyKey.of("TEL", "") == PropertyKey("TEL")
    assert PropertyKey.parse("TEL;WORK;VOICE") != PropertyKey.parse("TEL;VOICE;WORK")


def test_key_with_params():
    key = PropertyKey("PHOTO").with_params("ENCODING=b", "TYPE=JPEG")
    assert str(key) == "PHOTO;ENCODING=b;TYPE=JPEG"


def test_empty_name_rejected():
    with pytest.raises(ValueError):
        PropertyKey("")


def test_overwrite_keeps_position():
    store = PropertyStore()
    store.set("A", "1")
    store.set("B", "2")
    store.set("A", "3")
    assert list(store.lines()) == ["A:3", "B:2"]
    assert len(store) == 2


def test_string_and_key_address_same_slot():
    store = PropertyStore()
    store.set("EMAIL;INTERNET", "a@b.c")
    assert store.get(PropertyKey("EMAIL", ("INTERNET",))) == "a@b.c"
    assert "EMAIL;INTERNET" in store
    assert "EMAIL" not in store
    assert store.get("EMAIL", "") == ""


def test_key_spelling_is_kept():
    key = PropertyKey.parse("x-Custom;;A")
    assert key.name == "x-Custom"
    assert key.params == ("", "A")
    assert str(key) == "x-Custom;;A"
    store = PropertyStore()
    store.set("x-Custom;;A", "v")
    assert list(store.lines()) == ["x-Custom;;A:v"]
    assert "X-CUSTOM;A" not in store
