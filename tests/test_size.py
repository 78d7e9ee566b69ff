import pytest

from lsmeta.size import GB, KB, MB, TB, Size, SizeFlag, Unit


def test_render_byte():
    size = Size(42)
    assert size.value_string(SizeFlag.DEFAULT) == "42"
    assert size.unit_string(SizeFlag.DEFAULT) == "B"
    assert size.unit_string(SizeFlag.SHORT) == "B"
    assert size.unit_string(SizeFlag.BYTES) == ""


@pytest.mark.parametrize(
    "nbytes, value, long_unit, short_unit",
    [
        (4 * KB, "4.0", "KB", "K"),
        (42 * KB, "42", "KB", "K"),
        (420 * KB + 420, "420", "KB", "K"),
        (4 * MB, "4.0", "MB", "M"),
        (42 * MB, "42", "MB", "M"),
        (420 * MB + 420 * KB, "420", "MB", "M"),
        (4 * GB, "4.0", "GB", "G"),
        (42 * GB, "42", "GB", "G"),
        (420 * GB + 420 * MB, "420", "GB", "G"),
        (4 * TB, "4.0", "TB", "T"),
        (42 * TB, "42", "TB", "T"),
        (420 * TB + 420 * GB, "420", "TB", "T"),
    ],
)
def test_render_units(nbytes, value, long_unit, short_unit):
    size = Size(nbytes)
    assert size.value_string(SizeFlag.DEFAULT) == value
    assert size.unit_string(SizeFlag.DEFAULT) == long_unit
    assert size.unit_string(SizeFlag.SHORT) == short_unit


def test_render_with_a_fraction():
    size = Size(42 * KB + 103)
    assert size.value_string() == "42"
    assert size.unit_string() == "KB"


def test_render_with_a_truncated_fraction():
    size = Size(42 * KB + 1)
    assert size.value_string() == "42"
    assert size.unit_string() == "KB"


def test_render_small_fraction_keeps_decimal():
    assert Size(KB + KB // 2).value_string() == "1.5"


def test_render_short_nospaces():
    size = Size(42 * KB)
    assert size.render(SizeFlag.SHORT, 2) == "42K"
    assert size.render(SizeFlag.SHORT, 3) == " 42K"


def test_render_default_has_space():
    assert Size(42 * KB).render(SizeFlag.DEFAULT, 4) == "  42 KB"


def test_render_without_alignment():
    assert Size(42).render() == "42 B"


def test_bytes_flag_uses_bytes():
    size = Size(42 * MB)
    assert size.unit(SizeFlag.BYTES) is Unit.BYTE
    assert size.value_string(SizeFlag.BYTES) == str(42 * MB)


def test_alignment_too_narrow():
    with pytest.raises(ValueError):
        Size(42 * KB).render(SizeFlag.SHORT, 1)


@pytest.mark.parametrize(
    "nbytes, elem",
    [(10, "file_small"), (MB, "file_medium"), (GB, "file_large")],
)
def test_colorize_by_magnitude(nbytes, elem):
    painted = Size(nbytes).render_value(
        SizeFlag.DEFAULT, lambda text, e: f"[{e}:{text}]"
    )
    assert painted.startswith(f"[{elem}:")


def test_render_colorized_parts():
    rendered = Size(42 * KB).render(
        SizeFlag.SHORT, None, lambda text, e: f"<{text}>"
    )
    assert rendered == "<42><K>"