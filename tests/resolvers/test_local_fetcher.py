"""Tests for the local Maven repository fetcher."""

from __future__ import annotations

from pathlib import Path

from license_check.models.coordinate import PackageCoordinate
from license_check.resolvers.local import LocalRepositoryFetcher


def _write_pom(root: Path, coordinate: PackageCoordinate, content: str) -> Path:
    path = root / coordinate.repository_path
    path.parent.mkdir(parents=True)
    path.write_text(content, encoding="utf-8")
    return path


class TestLocalRepositoryFetcher:
    """Tests for LocalRepositoryFetcher."""

    def test_reads_pom(self, tmp_path: Path) -> None:
        """Test reading a POM laid out like ~/.m2/repository."""
        coordinate = PackageCoordinate.parse("org.slf4j:slf4j-api:2.0.9")
        _write_pom(tmp_path, coordinate, "<project/>")

        fetcher = LocalRepositoryFetcher(tmp_path)
        assert fetcher.fetch(coordinate) == "<project/>"
        assert (tmp_path / "org" / "slf4j" / "slf4j-api" / "2.0.9" / "slf4j-api-2.0.9.pom").is_file()

    def test_missing_pom(self, tmp_path: Path) -> None:
        """Test that a missing POM yields None."""
        fetcher = LocalRepositoryFetcher(tmp_path)
        assert fetcher.fetch(PackageCoordinate.parse("g:a:1")) is None

    def test_root_accepts_string(self, tmp_path: Path) -> None:
        """Test that the root may be given as a string."""
        fetcher = LocalRepositoryFetcher(str(tmp_path))
        assert fetcher.root == tmp_path
