from vcardkit.folding import fold, unfold


def test_short_line_is_unchanged():
    line = "FN:Jane Doe\r\n"
    assert fold(line) == line


def test_exactly_75_bytes_is_not_folded():
    line = "X" * 75 + "\r\n"
    assert fold(line) == line


def test_76_bytes_folds_in_two():
    line = "X" * 76 + "\r\n"
    out = fold(line)
    assert out == "X" * 75 + "\r\n" + " X\r\n"
    assert out.endswith("\r\n") and not out.endswith("\r\n\r\n")


def test_every_physical_line_fits_75_bytes():
    line = "NOTE:" + "abcdefghij" * 40 + "\r\n"
    out = fold(line)
    physical = out.split("\r\n")
    assert physical[-1] == ""
    for i, part in enumerate(physical[:-1]):
        assert len(part.encode("utf-8")) <= 75
        if i:
            assert part.startswith(" ")
    assert len(physical[1]) == 75


def test_unfold_restores_original():
    line = "NOTE:" + "0123456789" * 30
    assert unfold(fold(line + "\r\n")) == line + "\r\n"


def test_multibyte_characters_are_not_split():
    line = "FN:" + "é" * 60 + "\r\n"  # 123 bytes
    out = fold(line)
    for part in out.split("\r\n")[:-1]:
        assert len(part.encode("utf-8")) <= 75
    assert unfold(out) == line


def test_byte_length_governs_not_characters():
    line = "N:" + "ü" * 40  # 42 chars, 82 bytes
    assert fold(line) != line
    assert "\r\n " in fold(line)


def test_line_without_terminator():
    line = "X" * 80
    out = fold(line)
    assert out == "X" * 75 + "\r\n XXXXX"


def test_wide_charset_counts_its_own_octets():
    line = "NOTE:" + "x" * 60 + "\r\n"  # 65 chars, 130 bytes in utf-16
    assert fold(line) == line
    out = fold(line, encoding="utf-16")
    parts = out.split("\r\n")[:-1]
    assert len(parts) > 1
    for part in parts:
        assert len(part.encode("utf-16-le")) <= 75
    assert unfold(out) == line
