"""Configuration file discovery and loading for license-check."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Optional, Sequence

import yaml
from pydantic import ValidationError

from license_check.config.defaults import DEFAULT_CONFIG_NAMES, get_default_config
from license_check.exceptions import ConfigurationError
from license_check.models.config import CheckConfig


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Find configuration file in the specified directory.

    Searches for `.license-check.yaml` first, then `.license-check.yml`.

    Args:
        start_dir: Directory to search. Defaults to current working directory.

    Returns:
        Path to the configuration file if found, None otherwise.
    """
    search_dir = start_dir or Path.cwd()
    for name in DEFAULT_CONFIG_NAMES:
        config_path = search_dir / name
        if config_path.exists():
            return config_path
    return None


def load_config_file(path: Path) -> CheckConfig:
    """Load and validate configuration from a YAML file.

    Args:
        path: Path to the configuration file.

    Returns:
        Validated CheckConfig instance.

    Raises:
        ConfigurationError: If file cannot be read, has invalid YAML,
            or fails Pydantic validation.
    """
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, PermissionError) as e:
        raise ConfigurationError(
            f"Cannot read configuration file '{path}': {e}"
        ) from e

    if not content.strip():
        return get_default_config()

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigurationError(
            f"Invalid YAML syntax in '{path}': {e}"
        ) from e

    # Empty or comment-only YAML parses to None
    if data is None:
        return get_default_config()

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Invalid configuration in '{path}': "
            f"expected a mapping at root level, got {type(data).__name__}"
        )

    try:
        return CheckConfig.model_validate(data)
    except ValidationError as e:
        error_messages = _format_validation_errors(e)
        raise ConfigurationError(
            f"Invalid configuration in '{path}': {error_messages}"
        ) from e


def _format_validation_errors(error: ValidationError) -> str:
    """Format Pydantic validation errors into a readable string.

    Args:
        error: The Pydantic ValidationError.

    Returns:
        Formatted error message string.
    """
    messages: list[str] = []
    for err in error.errors():
        loc = ".".join(str(x) for x in err["loc"]) if err["loc"] else "root"
        msg = err["msg"]
        messages.append(f"{loc}: {msg}")
    return "; ".join(messages)


def load_config(config_path: str | None = None) -> CheckConfig:
    """Load configuration from file or use defaults.

    If a config_path is provided, loads from that file.
    Otherwise, searches for a configuration file in the current directory.
    If no file is found, returns default configuration.

    Args:
        config_path: Optional path to configuration file.
            If provided, must exist and be valid.

    Returns:
        CheckConfig with loaded or default values.

    Raises:
        ConfigurationError: If the specified config file is invalid,
            or if auto-discovered config file is invalid.
    """
    if config_path is not None:
        return load_config_file(Path(config_path))

    discovered = find_config_file()
    if discovered is not None:
        return load_config_file(discovered)

    return get_default_config()


def apply_overrides(
    config: CheckConfig,
    *,
    excludes: Sequence[str] = (),
    deny_list: Sequence[str] = (),
    max_search_depth: Optional[int] = None,
    repositories: Sequence[str] = (),
    local_repository: Optional[str] = None,
    offline: Optional[bool] = None,
    rules_file: Optional[str] = None,
) -> CheckConfig:
    """Merge command-line options into a loaded configuration.

    Exclude and deny entries are appended to the configured lists;
    repositories replace the configured ones; scalar options replace
    the configured value when given.

    Args:
        config: Configuration loaded from file or defaults.
        excludes: Extra coordinates to exclude.
        deny_list: Extra license codes to deny.
        max_search_depth: Parent search depth to use instead.
        repositories: Repository URLs to use instead.
        local_repository: Local repository directory to use instead.
        offline: Whether to use only the local repository.
        rules_file: Extra rule table to use instead.

    Returns:
        A new, validated CheckConfig.

    Raises:
        ConfigurationError: If the merged values are invalid.
    """
    data: dict[str, Any] = config.model_dump()
    data["excludes"] = [*config.excludes, *excludes]
    data["deny_list"] = [*config.deny_list, *deny_list]
    if max_search_depth is not None:
        data["max_search_depth"] = max_search_depth
    if repositories:
        data["repositories"] = list(repositories)
    if local_repository is not None:
        data["local_repository"] = local_repository
    if offline is not None:
        data["offline"] = offline
    if rules_file is not None:
        data["rules_file"] = rules_file

    try:
        return CheckConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid options: {_format_validation_errors(e)}"
        ) from e
