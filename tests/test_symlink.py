import os

from lsmeta.symlink import SymLink


def ansi_missing(text, elem):
    if elem == "missing_symlink_target":
        return f"\x1b[38;5;124m{text}\x1b[39m"
    return text


def test_symlink_render_default_valid_target_nocolor():
    link = SymLink(target="/target", valid=True)
    assert link.render() == " \u21d2 /target"


def test_symlink_render_default_invalid_target_nocolor():
    link = SymLink(target="/target", valid=False)
    assert link.render() == " \u21d2 /target"


def test_symlink_render_default_invalid_target_withcolor():
    link = SymLink(target="/target", valid=False)
    assert link.render(colorize=ansi_missing) == " \u21d2 \x1b[38;5;124m/target\x1b[39m"


def test_valid_target_uses_symlink_elem():
    link = SymLink(target="/target", valid=True)
    assert link.render("->", lambda t, e: f"[{e}]{t}") == " -> [symlink]/target"


def test_non_link_renders_nothing(tmp_path):
    path = tmp_path / "plain.txt"
    path.write_text("x")
    link = SymLink.from_path(path)
    assert link.symlink_string() is None
    assert link.valid is False
    assert link.render() == ""


def test_from_path_relative_valid(tmp_path):
    (tmp_path / "real.txt").write_text("x")
    os.symlink("real.txt", tmp_path / "link")
    link = SymLink.from_path(tmp_path / "link")
    assert link.symlink_string() == "real.txt"
    assert link.valid is True


def test_from_path_absolute_valid(tmp_path):
    target = tmp_path / "real.txt"
    target.write_text("x")
    os.symlink(target, tmp_path / "link")
    link = SymLink.from_path(tmp_path / "link")
    assert link.symlink_string() == str(target)
    assert link.valid is True


def test_from_path_broken(tmp_path):
    os.symlink("missing.txt", tmp_path / "link")
    link = SymLink.from_path(tmp_path / "link")
    assert link.symlink_string() == "missing.txt"
    assert link.valid is False
    assert link.render(colorize=ansi_missing) == " \u21d2 \x1b[38;5;124mmissing.txt\x1b[39m"