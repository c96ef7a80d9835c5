"""License rule models for license-check."""

from __future__ import annotations

import re

from pydantic import BaseModel, Field, field_validator


class LicenseRule(BaseModel):
    """One entry of the license rule table.

    Maps any license name matched by ``pattern`` to the canonical ``code``.
    Patterns are searched case-insensitively anywhere in the name.
    """

    model_config = {"extra": "forbid", "frozen": True}

    code: str = Field(min_length=1, description="Canonical license code")
    display_name: str = Field(description="Human-readable license name")
    pattern: str = Field(min_length=1, description="Regular expression to search for")

    @field_validator("pattern")
    @classmethod
    def _check_pattern_compiles(cls, value: str) -> str:
        try:
            re.compile(value, re.IGNORECASE)
        except re.error as e:
            raise ValueError(f"invalid regular expression: {e}") from e
        return value

    def matches(self, license_name: str) -> bool:
        """Check whether this rule's pattern occurs in a license name.

        Args:
            license_name: Free-text license name from package metadata.

        Returns:
            True if the pattern is found anywhere in the name.
        """
        # re keeps its own cache of compiled patterns
        return re.search(self.pattern, license_name, re.IGNORECASE) is not None
