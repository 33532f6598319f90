from __future__ import annotations

from dataclasses import fields
from pathlib import Path

import pytest

from deferable_css.config import DeferableCSSConfig, parse_alias_spec
from deferable_css.errors import ConfigurationError, ErrorHandler, LogSinkHandler
from deferable_css.filesystem import preload_script_path
from deferable_css.models import Disabled, ExactPath, PathSpec, SameAsName, UrlSpec
from deferable_css.utils import candidate_filenames, is_url, strip_css_suffix, unique


@pytest.mark.parametrize(
    "value, expected",
    [
        ("1", SameAsName()),
        (1, SameAsName()),
        (True, SameAsName()),
        ("", Disabled()),
        (None, Disabled()),
        (False, Disabled()),
        ("0", Disabled()),
        ("reset", PathSpec("reset")),
        ("vendor/theme.min.css", PathSpec("vendor/theme.min.css")),
        ("https://cdn.example.com/x.css", UrlSpec("https://cdn.example.com/x.css")),
        ("//cdn.example.com/x.css", UrlSpec("//cdn.example.com/x.css")),
        (Path("/srv/css/x.css"), ExactPath(Path("/srv/css/x.css"))),
    ],
)
def test_parse_alias_spec(value, expected):
    assert parse_alias_spec(value) == expected


def test_parse_alias_spec_rejects_absolute_strings():
    with pytest.raises(ConfigurationError, match="relative path"):
        parse_alias_spec("/srv/css/x.css")


def test_url_detection():
    assert is_url("http://example.com/a.css")
    assert is_url("//example.com/a.css")
    assert not is_url("css/a.css")
    assert not is_url("a.css")


def test_strip_css_suffix():
    assert strip_css_suffix("reset.min.css") == "reset"
    assert strip_css_suffix("reset.css") == "reset"
    assert strip_css_suffix("reset") == "reset"
    assert strip_css_suffix("theme.less") == "theme.less"


def test_candidate_order():
    assert candidate_filenames("reset") == ["reset.min.css", "reset.css", "reset"]
    assert candidate_filenames("reset", prefer_min=False) == [
        "reset.css",
        "reset.min.css",
        "reset",
    ]
    assert candidate_filenames("reset.css") == ["reset.css", "reset.min.css"]
    assert candidate_filenames("reset.min.css", prefer_min=False) == [
        "reset.min.css",
        "reset.css",
    ]


def test_unique_keeps_first_occurrence():
    assert unique(["b", "a", "b", "c", "a"]) == ["b", "a", "c"]


def test_defaults(tmp_path):
    config = DeferableCSSConfig(aliases={"reset": 1}, css_root=str(tmp_path))
    assert config.css_root == tmp_path
    assert config.url_base_path == "/"
    assert config.prefer_min is True
    assert config.inline_max == 1024
    assert config.defer_css is True
    assert config.include_noscript is True
    assert config.use_cdn_links is False
    assert config.asset_id is None
    assert config.preload_script == preload_script_path()
    assert config.alias_specs == {"reset": SameAsName()}
    assert isinstance(config.error_handler, ErrorHandler)


def test_derived_defaults_follow_their_sources(tmp_path):
    config = DeferableCSSConfig(
        aliases={},
        css_root=tmp_path,
        defer_css=False,
        cdn_links={"reset": "https://cdn.example.com/reset.css"},
    )
    assert config.include_noscript is False
    assert config.use_cdn_links is True


def test_invalid_options_raise_by_default(tmp_path):
    with pytest.raises(ConfigurationError, match="inline_max"):
        DeferableCSSConfig(aliases={}, css_root=tmp_path, inline_max=-1)
    with pytest.raises(ConfigurationError, match="asset_id"):
        DeferableCSSConfig(aliases={}, css_root=tmp_path, asset_id="")
    with pytest.raises(ConfigurationError, match="alias 'abs'"):
        DeferableCSSConfig(aliases={"abs": "/etc/x.css"}, css_root=tmp_path)


def test_absolute_alias_is_disabled_when_log_does_not_raise(tmp_path, log_calls):
    config = DeferableCSSConfig(
        aliases={"abs": "/etc/x.css"}, css_root=tmp_path, log=log_calls
    )
    assert isinstance(config.error_handler, LogSinkHandler)
    assert config.alias_specs == {"abs": Disabled()}
    assert log_calls.calls[0][0] == "error"


def test_bundled_preload_script_exists():
    assert preload_script_path().is_file()


def test_derived_fields_are_declared(tmp_path):
    config = DeferableCSSConfig(aliases={"reset": 1}, css_root=tmp_path)
    derived = {f.name for f in fields(config) if not f.init}
    assert derived == {"alias_specs", "error_handler"}
    assert "error_handler" not in repr(config)
