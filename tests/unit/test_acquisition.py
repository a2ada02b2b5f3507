"""Tests for GeoLite2 download, extraction and merge."""

from __future__ import annotations

import io
import tarfile
import zipfile
from pathlib import Path
from typing import Any, Dict
from unittest.mock import patch

import pytest

from ipmetaindex.errors import ArchiveFailure, ConnectionFailure, IoFailure
from ipmetaindex.geoip.acquisition import (
    GeoLite2Orchestrator,
    descend_single_subdirectory,
    extract_archive,
    join_path_files,
)
from ipmetaindex.settings import IndexSettings

from tests.fixtures.geolite2_fixtures import geolite2_files


def _make_zip(path: Path, members: Dict[str, str]) -> Path:
    with zipfile.ZipFile(path, "w") as bundle:
        for name, content in members.items():
            bundle.writestr(name, content)
    return path


def _make_tar(path: Path, members: Dict[str, str]) -> Path:
    with tarfile.open(path, "w:gz") as bundle:
        for name, content in members.items():
            data = content.encode("utf-8")
            info = tarfile.TarInfo(name)
            info.size = len(data)
            bundle.addfile(info, io.BytesIO(data))
    return path


def _fake_download(url: str, dest_dir: Path, *, prefix: str, suffix: str, **_: Any) -> Path:
    """Stand-in for download_to_file that writes the edition's fixture archive."""
    key = prefix.split("-", 1)[1]
    edition = {"asn": "GeoLite2-ASN-CSV", "city": "GeoLite2-City-CSV", "country": "GeoLite2-Country-CSV"}[key]
    members = {f"{edition}_20231114/{name}": content for name, content in geolite2_files()[key].items()}
    members[f"{edition}_20231114/LICENSE.txt"] = "license"
    return _make_zip(dest_dir / f"{prefix}-1{suffix}", members)


class TestDescendSingleSubdirectory:
    """Flattening of wrapper directories."""

    def test_descends_through_nested_single_directories(self, tmp_path: Path) -> None:
        inner = tmp_path / "a" / "b" / "c"
        inner.mkdir(parents=True)
        (inner / "data.csv").write_text("x", encoding="utf-8")

        assert descend_single_subdirectory(tmp_path) == inner

    def test_stops_at_level_with_files(self, tmp_path: Path) -> None:
        (tmp_path / "sub").mkdir()
        (tmp_path / "readme.txt").write_text("x", encoding="utf-8")

        assert descend_single_subdirectory(tmp_path) == tmp_path

    def test_several_directories_are_ambiguous(self, tmp_path: Path) -> None:
        (tmp_path / "one").mkdir()
        (tmp_path / "two").mkdir()

        with pytest.raises(ArchiveFailure):
            descend_single_subdirectory(tmp_path)

    def test_empty_directory_is_returned(self, tmp_path: Path) -> None:
        assert descend_single_subdirectory(tmp_path) == tmp_path


class TestExtractArchive:
    """Archive extraction into unique directories."""

    @pytest.mark.parametrize("maker, name", [(_make_zip, "edition.zip"), (_make_tar, "edition.tar.gz")])
    def test_zip_and_tar_are_flattened(self, tmp_path: Path, scratch_dir: Path, maker: Any, name: str) -> None:
        archive = maker(tmp_path / name, {"GeoLite2-City-CSV_20231114/GeoLite2-City-Blocks-IPv4.csv": "network\n"})

        root, data_dir = extract_archive(archive, scratch_dir, reason="Cannot extract city database")

        assert root.parent == scratch_dir
        assert data_dir.name == "GeoLite2-City-CSV_20231114"
        assert (data_dir / "GeoLite2-City-Blocks-IPv4.csv").read_text(encoding="utf-8") == "network\n"

    def test_each_extraction_gets_its_own_directory(self, tmp_path: Path, scratch_dir: Path) -> None:
        archive = _make_zip(tmp_path / "edition.zip", {"a.csv": "x"})

        first, _ = extract_archive(archive, scratch_dir, reason="r")
        second, _ = extract_archive(archive, scratch_dir, reason="r")

        assert first != second

    def test_unsupported_format_fails_with_reason(self, tmp_path: Path, scratch_dir: Path) -> None:
        archive = tmp_path / "edition.zip"
        archive.write_text("<html>rate limited</html>", encoding="utf-8")

        with pytest.raises(ArchiveFailure) as exc_info:
            extract_archive(archive, scratch_dir, reason="Cannot extract ASN database")

        assert exc_info.value.reason == "Cannot extract ASN database"
        assert list(scratch_dir.iterdir()) == []

    def test_unsafe_member_is_rejected(self, tmp_path: Path, scratch_dir: Path) -> None:
        archive = _make_zip(tmp_path / "evil.zip", {"../escape.csv": "x"})

        with pytest.raises(ArchiveFailure):
            extract_archive(archive, scratch_dir, reason="Cannot extract country database")

        assert not (scratch_dir.parent / "escape.csv").exists()

    def test_unsafe_tar_member_is_rejected(self, tmp_path: Path, scratch_dir: Path) -> None:
        archive = _make_tar(tmp_path / "evil.tar.gz", {"../escape.csv": "x"})

        with pytest.raises(ArchiveFailure) as exc_info:
            extract_archive(archive, scratch_dir, reason="Cannot extract ASN database")

        assert exc_info.value.reason == "Cannot extract ASN database"
        assert not (scratch_dir.parent / "escape.csv").exists()
        assert list(scratch_dir.iterdir()) == []

    def test_ambiguous_layout_fails(self, tmp_path: Path, scratch_dir: Path) -> None:
        archive = _make_zip(tmp_path / "two.zip", {"one/a.csv": "x", "two/b.csv": "y"})

        with pytest.raises(ArchiveFailure) as exc_info:
            extract_archive(archive, scratch_dir, reason="Cannot extract city database")

        assert exc_info.value.reason == "Cannot extract city database"
        assert list(scratch_dir.iterdir()) == []


class TestJoinPathFiles:
    """Merging extracted trees."""

    def test_files_are_copied_and_later_sources_win(self, tmp_path: Path, scratch_dir: Path) -> None:
        first = tmp_path / "first"
        second = tmp_path / "second"
        for source in (first, second):
            source.mkdir()
            (source / "nested").mkdir()
        (first / "shared.csv").write_text("first", encoding="utf-8")
        (first / "only-first.csv").write_text("1", encoding="utf-8")
        (second / "shared.csv").write_text("second", encoding="utf-8")

        merged = join_path_files([first, second], scratch_dir)

        assert sorted(path.name for path in merged.iterdir()) == ["only-first.csv", "shared.csv"]
        assert (merged / "shared.csv").read_text(encoding="utf-8") == "second"

    def test_missing_source_fails(self, tmp_path: Path, scratch_dir: Path) -> None:
        with pytest.raises(IoFailure) as exc_info:
            join_path_files([tmp_path / "absent"], scratch_dir)

        assert exc_info.value.reason == "Cannot copy database files"
        assert list(scratch_dir.iterdir()) == []


class TestGeoLite2Orchestrator:
    """End-to-end acquisition with downloads patched out."""

    def test_license_key_is_required(self, scratch_dir: Path) -> None:
        with pytest.raises(ValueError):
            GeoLite2Orchestrator(IndexSettings(scratch_dir=scratch_dir))

    def test_build_produces_records_and_cleans_up(self, index_settings: IndexSettings) -> None:
        with patch("ipmetaindex.geoip.acquisition.download_to_file", side_effect=_fake_download) as download:
            records = GeoLite2Orchestrator(index_settings).build()

        assert len(records) == 5
        assert list(index_settings.scratch_dir.iterdir()) == []

        urls = [call.args[0] for call in download.call_args_list]
        assert [url.split("edition_id=")[1].split("&")[0] for url in urls] == [
            "GeoLite2-ASN-CSV",
            "GeoLite2-City-CSV",
            "GeoLite2-Country-CSV",
        ]
        assert all("license_key=test-license-key" in url for url in urls)
        assert download.call_args_list[0].kwargs["secret"] == "test-license-key"

    def test_keep_files_leaves_scratch_content(self, index_settings: IndexSettings) -> None:
        with patch("ipmetaindex.geoip.acquisition.download_to_file", side_effect=_fake_download):
            GeoLite2Orchestrator(index_settings, keep_files=True).build()

        names = [path.name for path in index_settings.scratch_dir.iterdir()]
        assert any(name.startswith("geoip_") and name.endswith("_db") for name in names)

    def test_download_failure_stops_the_sequence(self, index_settings: IndexSettings) -> None:
        calls = []

        def failing(url: str, dest_dir: Path, **kwargs: Any) -> Path:
            calls.append(kwargs["prefix"])
            if kwargs["prefix"] == "GeoLite2-city":
                raise ConnectionFailure("Cannot download maxmind City")
            return _fake_download(url, dest_dir, **kwargs)

        with patch("ipmetaindex.geoip.acquisition.download_to_file", side_effect=failing):
            with pytest.raises(ConnectionFailure) as exc_info:
                GeoLite2Orchestrator(index_settings).build()

        assert exc_info.value.reason == "Cannot download maxmind City"
        assert calls == ["GeoLite2-asn", "GeoLite2-city"]
        assert list(index_settings.scratch_dir.iterdir()) == []

    def test_corrupt_archive_leaves_no_directories(self, index_settings: IndexSettings) -> None:
        def html_page(url: str, dest_dir: Path, *, prefix: str, suffix: str, **_: Any) -> Path:
            path = dest_dir / f"{prefix}-1{suffix}"
            path.write_text("<html>rate limited</html>", encoding="utf-8")
            return path

        with patch("ipmetaindex.geoip.acquisition.download_to_file", side_effect=html_page):
            with pytest.raises(ArchiveFailure) as exc_info:
                GeoLite2Orchestrator(index_settings).build()

        assert exc_info.value.reason == "Cannot extract city database"
        assert list(index_settings.scratch_dir.iterdir()) == []

    def test_unusable_tables_fail_processing(self, index_settings: IndexSettings) -> None:
        def empty_archive(url: str, dest_dir: Path, *, prefix: str, suffix: str, **_: Any) -> Path:
            return _make_zip(dest_dir / f"{prefix}-1{suffix}", {"README.txt": "nothing here"})

        with patch("ipmetaindex.geoip.acquisition.download_to_file", side_effect=empty_archive):
            with pytest.raises(IoFailure) as exc_info:
                GeoLite2Orchestrator(index_settings).build()

        assert exc_info.value.reason == "Cannot process database files"
