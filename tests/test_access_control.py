from lsmeta.access_control import AccessControl


def tag(text, elem):
    return f"<{elem}>{text}"


def test_acl_only_indicator():
    access_control = AccessControl.from_data(True, b"", b"")
    assert access_control.render_method(tag) == "<acl>+"


def test_smack_only_indicator():
    access_control = AccessControl.from_data(False, b"", b"a")
    assert access_control.render_method(tag) == "<context>."


def test_acl_and_selinux_indicator():
    access_control = AccessControl.from_data(True, b"a", b"")
    assert access_control.render_method(tag) == "<acl>+"


def test_no_method_indicator():
    access_control = AccessControl.from_data(False, b"", b"")
    assert access_control.render_method(tag) == "<acl>"


def test_selinux_context():
    access_control = AccessControl.from_data(False, b"a", b"")
    assert access_control.render_context(tag) == "<context>a"


def test_smack_context_only():
    access_control = AccessControl.from_data(False, b"", b"b")
    assert access_control.render_context(tag) == "<context>b"


def test_selinux_and_smack_context():
    access_control = AccessControl.from_data(False, b"a", b"b")
    assert access_control.render_context(tag) == "<context>a+b"


def test_no_context():
    access_control = AccessControl.from_data(False, b"", b"")
    assert access_control.render_context(tag) == "<context>?"


def test_invalid_utf8_is_replaced():
    access_control = AccessControl.from_data(False, b"\xff", b"")
    assert access_control.selinux_context == "\ufffd"


def test_for_missing_path_has_no_data(tmp_path):
    access_control = AccessControl.for_path(tmp_path / "missing")
    assert access_control == AccessControl(False, "", "")
    assert access_control.render_method() == ""
    assert access_control.render_context() == "?"


def test_for_existing_path_renders_known_marker(tmp_path):
    path = tmp_path / "file.txt"
    path.write_text("")
    access_control = AccessControl.for_path(path)
    assert access_control.render_method() in ("", "+", ".")