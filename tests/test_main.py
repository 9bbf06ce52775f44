import json

import pytest

from ghupdate.main import AUTHOR, VERSION, main, version_document


def test_version_document_round_trip():
    text = version_document("0.0.1", "hly")
    assert json.loads(text) == {"version": "0.0.1", "author": "hly"}


def test_version_document_keys_sorted():
    text = version_document("0.0.1", "hly")
    assert text.index('"author"') < text.index('"version"')


def test_version_document_indent_four():
    lines = version_document(VERSION, AUTHOR).splitlines()
    assert lines[0] == "{"
    assert lines[1] == '    "author": "hly",'
    assert lines[-1] == "}"


def test_version_document_keeps_unicode():
    text = version_document("1.0.0", "作者")
    assert "作者" in text


def test_main_help_exits_cleanly(capsys):
    with pytest.raises(SystemExit) as info:
        main(["--help"])
    assert info.value.code == 0
    assert "update" in capsys.readouterr().out


def test_main_rejects_unknown_option():
    with pytest.raises(SystemExit) as info:
        main(["--bogus"])
    assert info.value.code == 2