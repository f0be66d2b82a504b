"""Tests for source classification and reference resolution."""

import os
from pathlib import Path

import pytest

from codexskill.core.source import (
    SourceKind,
    classify_source,
    is_http,
    resolve_reference,
    source_to_path,
)


class TestClassifySource:
    @pytest.mark.parametrize(
        "value, kind",
        [
            ("https://example.com/index.json", SourceKind.HTTP),
            ("http://example.com/index.json", SourceKind.HTTP),
            ("file:///srv/registry/index.json", SourceKind.FILE_URL),
            ("/srv/registry/index.json", SourceKind.PATH),
            ("registry/index.json", SourceKind.PATH),
            ("ftp://example.com/index.json", SourceKind.PATH),
        ],
    )
    def test_classifies_each_kind(self, value: str, kind: SourceKind):
        assert classify_source(value) == kind

    def test_is_http_requires_scheme_prefix(self):
        assert is_http("https://h/x")
        assert not is_http("httpx/index.json")
        assert not is_http("file:///x")


class TestSourceToPath:
    def test_file_url_is_decoded(self):
        assert source_to_path("file:///srv/my%20registry/index.json") == Path(
            "/srv/my registry/index.json"
        )

    def test_plain_path_passes_through(self):
        assert source_to_path("registry/index.json") == Path("registry/index.json")

    def test_http_is_rejected(self):
        with pytest.raises(ValueError):
            source_to_path("https://example.com/index.json")


class TestResolveReference:
    @pytest.mark.parametrize(
        "base",
        [
            "https://h/a/b/index.json",
            "file:///x/y/index.json",
            "/x/y/index.json",
            "relative/index.json",
        ],
    )
    @pytest.mark.parametrize(
        "ref",
        [
            "https://cdn.example.com/demo/v1.skill",
            "http://mirror.example.com/m.json",
            "file:///opt/skills/demo.skill",
        ],
    )
    def test_absolute_reference_wins(self, base: str, ref: str):
        assert resolve_reference(base, ref) == ref

    def test_http_base_collapses_parent_segments(self):
        assert (
            resolve_reference("https://h/a/b/index.json", "../m.json")
            == "https://h/a/m.json"
        )

    def test_http_base_sibling_reference(self):
        assert (
            resolve_reference("https://h/a/index.json", "demo/manifest.json")
            == "https://h/a/demo/manifest.json"
        )

    def test_http_base_percent_encodes_reference(self):
        assert (
            resolve_reference("https://h/a/index.json", "my skill/manifest.json")
            == "https://h/a/my%20skill/manifest.json"
        )

    def test_path_base_joins_parent_directory(self):
        assert resolve_reference("/x/y/index.json", "m.json") == os.path.abspath(
            "/x/y/m.json"
        )

    def test_path_base_collapses_parent_segments(self):
        assert resolve_reference("/x/y/index.json", "../z/m.json") == os.path.abspath(
            "/x/z/m.json"
        )

    def test_file_url_base_resolves_to_path(self):
        assert resolve_reference(
            "file:///x/y/index.json", "demo/manifest.json"
        ) == os.path.abspath("/x/y/demo/manifest.json")

    def test_relative_path_base_is_made_absolute(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert resolve_reference("registry/index.json", "demo/m.json") == str(
            tmp_path / "registry" / "demo" / "m.json"
        )
