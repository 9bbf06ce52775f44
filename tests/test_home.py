from ghupdate.home import LATEST_VERSION_PREFIX, NO_LOGS, Home, parse_logs
from ghupdate.request import Release


def test_parse_logs_drops_heading_and_blank_lines():
    text = "## 更新日志\r\n- fix a\r\n\r\n  - add b \t\n"
    assert parse_logs(text) == ["- fix a", "- add b"]


def test_parse_logs_only_spaces_and_tabs_trimmed():
    assert parse_logs("\tline\r") == ["line\r"]


def test_parse_logs_empty():
    assert parse_logs("") == []


def test_parse_logs_whitespace_only_lines():
    assert parse_logs("   \n\t\t\n") == []


def test_render_logs_with_body():
    home = Home()
    home.render_logs(Release(tag_name="v2.1.0", body="更新日志\n- one\n- two"))
    assert home.latest_version_text == LATEST_VERSION_PREFIX + "v2.1.0"
    assert home.logs == ["- one", "- two"]


def test_render_logs_without_body():
    home = Home()
    home.render_logs(Release(tag_name="v3.0.0"))
    assert home.logs == [NO_LOGS]
    assert home.latest_version_text.endswith("v3.0.0")


def test_render_logs_ignores_untagged_release():
    home = Home()
    before = home.latest_version_text
    home.render_logs(Release(body="- ignored"))
    assert home.latest_version_text == before
    assert home.logs == []


def test_render_logs_replaces_previous_logs():
    home = Home()
    home.render_logs(Release(tag_name="v1", body="- a"))
    home.render_logs(Release(tag_name="v2", body="- b"))
    assert home.logs == ["- b"]


def test_initial_window_settings():
    home = Home()
    assert (home.width, home.height) == (600, 400)
    assert home.title == "程序更新"
    assert home.current_version_text == "当前版本：v1.0.1"