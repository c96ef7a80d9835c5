"""Tests for constants module."""

from license_check.constants import (
    DEFAULT_MAX_SEARCH_DEPTH,
    DEFAULT_REPOSITORY_URL,
    EXIT_ERROR,
    EXIT_ISSUES,
    EXIT_SUCCESS,
    RESULT_FAIL_MESSAGE,
    RESULT_PASS_MESSAGE,
)


class TestExitCodes:
    """Tests for exit code constants."""

    def test_exit_codes_are_distinct(self) -> None:
        """Test that exit codes do not collide."""
        assert len({EXIT_SUCCESS, EXIT_ISSUES, EXIT_ERROR}) == 3

    def test_success_is_zero(self) -> None:
        """Test that success maps to the conventional zero exit code."""
        assert EXIT_SUCCESS == 0


class TestDefaults:
    """Tests for default values."""

    def test_default_search_depth(self) -> None:
        """Test the default parent search depth."""
        assert DEFAULT_MAX_SEARCH_DEPTH == 12

    def test_default_repository_is_maven_central(self) -> None:
        """Test the default remote repository."""
        assert DEFAULT_REPOSITORY_URL == "https://repo1.maven.org/maven2"

    def test_result_messages(self) -> None:
        """Test that result messages start with RESULT."""
        assert RESULT_PASS_MESSAGE.startswith("RESULT:")
        assert "Build fails" in RESULT_FAIL_MESSAGE
