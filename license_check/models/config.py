"""Configuration Pydantic models for license-check."""
from __future__ import annotations

from typing import List, Optional

from pydantic import AliasChoices, BaseModel, Field

from license_check.constants import (
    DEFAULT_MAX_SEARCH_DEPTH,
    DEFAULT_REPOSITORY_URL,
    DEFAULT_TIMEOUT_SECONDS,
)


class CheckConfig(BaseModel):
    """Configuration for license-check.

    Every field has a default, so a partial (or empty) configuration
    file is valid.
    """

    model_config = {"extra": "forbid", "populate_by_name": True}

    max_search_depth: int = Field(
        default=DEFAULT_MAX_SEARCH_DEPTH,
        ge=1,
        description="Maximum number of parent POMs to follow per dependency.",
    )
    excludes: List[str] = Field(
        default_factory=list,
        description="Coordinates (group:artifact:version) to skip entirely. "
        "Matching is case-insensitive.",
    )
    deny_list: List[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("deny_list", "blacklist"),
        description="License codes that fail the check even when resolved. "
        "Matching is case-insensitive.",
    )
    repositories: List[str] = Field(
        default_factory=lambda: [DEFAULT_REPOSITORY_URL],
        min_length=1,
        description="Remote Maven repository base URLs, tried in order.",
    )
    local_repository: Optional[str] = Field(
        default=None,
        description="Local Maven repository directory, searched before "
        "remote repositories (defaults to ~/.m2/repository if present).",
    )
    offline: bool = Field(
        default=False,
        description="Only read POMs from the local repository.",
    )
    rules_file: Optional[str] = Field(
        default=None,
        description="Extra rule table evaluated before the bundled rules.",
    )
    timeout: float = Field(
        default=DEFAULT_TIMEOUT_SECONDS,
        gt=0,
        description="Timeout in seconds for each remote repository request.",
    )
    scopes: Optional[List[str]] = Field(
        default=None,
        description="Dependency scopes to evaluate when reading a project "
        "POM (None evaluates every scope).",
    )
