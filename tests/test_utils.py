import pytest

from vcardkit.utils import fetch_bytes, load_image_bytes, normalize_filename


def test_normalize_filename():
    assert normalize_filename(["Jane", "Doe"]) == "jane_doe"
    assert normalize_filename("  Jane   Doe ") == "jane_doe"
    assert normalize_filename("Ærøskøbing Café", separator="-") == "aeroskobing-cafe"
    assert normalize_filename(["", ""]) == ""
    assert normalize_filename("___") == ""


def test_fetch_local_file(tmp_path):
    p = tmp_path / "a.bin"
    p.write_bytes(b"abc")
    assert fetch_bytes(str(p)) == b"abc"


def test_fetch_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        fetch_bytes(str(tmp_path / "nope.jpg"))


def test_fetch_url(monkeypatch):
    class Resp:
        content = b"img"

        def raise_for_status(self):
            pass

    seen = []
    monkeypatch.setattr("vcardkit.utils.requests.get", lambda url: seen.append(url) or Resp())
    assert fetch_bytes("https://example.com/a.png") == b"img"
    assert seen == ["https://example.com/a.png"]


def test_load_image_bytes(tmp_path):
    assert load_image_bytes(str(tmp_path / "missing.jpg")) is None
    p = tmp_path / "p.jpg"
    p.write_bytes(b"x")
    assert load_image_bytes(str(p)) == b"x"
