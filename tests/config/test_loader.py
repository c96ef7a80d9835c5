"""Tests for configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from license_check.config.loader import (
    apply_overrides,
    find_config_file,
    load_config,
    load_config_file,
)
from license_check.exceptions import ConfigurationError
from license_check.models.config import CheckConfig


class TestFindConfigFile:
    """Tests for find_config_file."""

    def test_finds_yaml(self, tmp_path: Path) -> None:
        """Test that .license-check.yaml is found."""
        config = tmp_path / ".license-check.yaml"
        config.write_text("excludes: []\n")
        assert find_config_file(tmp_path) == config

    def test_prefers_yaml_over_yml(self, tmp_path: Path) -> None:
        """Test that .yaml takes precedence over .yml."""
        (tmp_path / ".license-check.yml").write_text("")
        (tmp_path / ".license-check.yaml").write_text("")
        assert find_config_file(tmp_path) == tmp_path / ".license-check.yaml"

    def test_finds_yml(self, tmp_path: Path) -> None:
        """Test that .license-check.yml is found."""
        (tmp_path / ".license-check.yml").write_text("")
        assert find_config_file(tmp_path) == tmp_path / ".license-check.yml"

    def test_none_found(self, tmp_path: Path) -> None:
        """Test that None is returned when no file exists."""
        assert find_config_file(tmp_path) is None


class TestLoadConfigFile:
    """Tests for load_config_file."""

    def test_full_config(self, tmp_path: Path) -> None:
        """Test loading every supported key."""
        path = tmp_path / "config.yaml"
        path.write_text(
            "max_search_depth: 5\n"
            "excludes:\n"
            "  - org.example:internal:1.0\n"
            "blacklist:\n"
            "  - gpl-3.0\n"
            "repositories:\n"
            "  - https://repo.example.com/maven2\n"
            "offline: true\n"
            "timeout: 10\n"
            "scopes: [compile, runtime]\n"
        )
        config = load_config_file(path)
        assert config.max_search_depth == 5
        assert config.excludes == ["org.example:internal:1.0"]
        assert config.deny_list == ["gpl-3.0"]
        assert config.repositories == ["https://repo.example.com/maven2"]
        assert config.offline is True
        assert config.timeout == 10
        assert config.scopes == ["compile", "runtime"]

    def test_empty_file(self, tmp_path: Path) -> None:
        """Test that an empty file gives the defaults."""
        path = tmp_path / "config.yaml"
        path.write_text("")
        assert load_config_file(path) == CheckConfig()

    def test_comment_only_file(self, tmp_path: Path) -> None:
        """Test that a comment-only file gives the defaults."""
        path = tmp_path / "config.yaml"
        path.write_text("# nothing configured\n")
        assert load_config_file(path) == CheckConfig()

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        """Test that a YAML syntax error is reported."""
        path = tmp_path / "config.yaml"
        path.write_text("excludes: [unclosed\n")
        with pytest.raises(ConfigurationError) as exc_info:
            load_config_file(path)
        assert "Invalid YAML syntax" in str(exc_info.value)

    def test_non_mapping(self, tmp_path: Path) -> None:
        """Test that a non-mapping root is rejected."""
        path = tmp_path / "config.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigurationError) as exc_info:
            load_config_file(path)
        assert "expected a mapping" in str(exc_info.value)

    def test_validation_error(self, tmp_path: Path) -> None:
        """Test that invalid values are reported with their location."""
        path = tmp_path / "config.yaml"
        path.write_text("max_search_depth: 0\n")
        with pytest.raises(ConfigurationError) as exc_info:
            load_config_file(path)
        assert "max_search_depth" in str(exc_info.value)

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test that an unreadable file is reported."""
        with pytest.raises(ConfigurationError) as exc_info:
            load_config_file(tmp_path / "missing.yaml")
        assert "Cannot read configuration file" in str(exc_info.value)


class TestLoadConfig:
    """Tests for load_config."""

    def test_explicit_path(self, tmp_path: Path) -> None:
        """Test loading from an explicit path."""
        path = tmp_path / "custom.yaml"
        path.write_text("max_search_depth: 3\n")
        assert load_config(str(path)).max_search_depth == 3

    def test_discovered(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test auto-discovery in the current directory."""
        (tmp_path / ".license-check.yaml").write_text("excludes: [a:b:1]\n")
        monkeypatch.chdir(tmp_path)
        assert load_config().excludes == ["a:b:1"]

    def test_defaults(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that defaults are used when nothing is found."""
        monkeypatch.chdir(tmp_path)
        assert load_config() == CheckConfig()


class TestApplyOverrides:
    """Tests for apply_overrides."""

    def test_lists_are_extended(self) -> None:
        """Test that excludes and deny entries are appended."""
        config = CheckConfig(excludes=["a:b:1"], deny_list=["gpl-3.0"])
        merged = apply_overrides(config, excludes=["c:d:2"], deny_list=["agpl-3.0"])
        assert merged.excludes == ["a:b:1", "c:d:2"]
        assert merged.deny_list == ["gpl-3.0", "agpl-3.0"]

    def test_scalars_replace(self) -> None:
        """Test that given scalar options replace configured values."""
        config = CheckConfig(max_search_depth=4)
        merged = apply_overrides(
            config,
            max_search_depth=8,
            repositories=["https://mirror.example.com"],
            local_repository="/tmp/m2",
            offline=True,
            rules_file="rules.txt",
        )
        assert merged.max_search_depth == 8
        assert merged.repositories == ["https://mirror.example.com"]
        assert merged.local_repository == "/tmp/m2"
        assert merged.offline is True
        assert merged.rules_file == "rules.txt"

    def test_unset_options_keep_config(self) -> None:
        """Test that omitted options leave the configuration alone."""
        config = CheckConfig(max_search_depth=4, offline=True)
        assert apply_overrides(config) == config

    def test_invalid_override(self) -> None:
        """Test that invalid merged values are reported."""
        with pytest.raises(ConfigurationError) as exc_info:
            apply_overrides(CheckConfig(), max_search_depth=0)
        assert "Invalid options" in str(exc_info.value)
