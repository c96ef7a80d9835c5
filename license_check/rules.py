"""License rule table loading.

The rule table is a tab-separated text resource with four columns per
line: canonical code, short id, display name, and pattern. Only columns
0, 2 and 3 are used; the short id column is informational. Blank lines
and lines starting with ``#`` are ignored.

A line with fewer than four columns, or with a pattern that is not a
valid regular expression, fails loading with RuleTableError. Rule order
is significant: the classifier uses the first rule whose pattern
matches, so more specific patterns must appear first.
"""
from __future__ import annotations

from functools import lru_cache
from importlib import resources
from pathlib import Path

from pydantic import ValidationError

from license_check.exceptions import RuleTableError
from license_check.models.rules import LicenseRule

RULE_TABLE_RESOURCE = "licenses.txt"

EXPECTED_COLUMNS = 4


def parse_rule_table(text: str, source: str = "<rules>") -> tuple[LicenseRule, ...]:
    """Parse rule table text into an ordered tuple of rules.

    Args:
        text: Raw table contents.
        source: Name of the table, used in error messages.

    Returns:
        Rules in table order.

    Raises:
        RuleTableError: If a line is malformed or the table has no rules.
    """
    rules: list[LicenseRule] = []

    for line_number, line in enumerate(text.splitlines(), start=1):
        if not line.strip() or line.lstrip().startswith("#"):
            continue

        columns = line.split("\t")
        if len(columns) < EXPECTED_COLUMNS:
            raise RuleTableError(
                f"{source}:{line_number}: expected {EXPECTED_COLUMNS} "
                f"tab-separated columns, got {len(columns)}"
            )

        try:
            rules.append(
                LicenseRule(
                    code=columns[0].strip(),
                    display_name=columns[2].strip(),
                    pattern=columns[3].strip(),
                )
            )
        except ValidationError as e:
            messages = "; ".join(
                f"{'.'.join(str(x) for x in err['loc']) or 'rule'}: {err['msg']}"
                for err in e.errors()
            )
            raise RuleTableError(f"{source}:{line_number}: {messages}") from e

    if not rules:
        raise RuleTableError(f"{source}: rule table contains no rules")

    return tuple(rules)


def load_rule_file(path: Path) -> tuple[LicenseRule, ...]:
    """Load a rule table from a file on disk.

    Args:
        path: Path to the rule table.

    Returns:
        Rules in table order.

    Raises:
        RuleTableError: If the file cannot be read or is malformed.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise RuleTableError(f"Cannot read rule table '{path}': {e}") from e
    return parse_rule_table(text, source=str(path))


@lru_cache(maxsize=1)
def load_rule_table() -> tuple[LicenseRule, ...]:
    """Load the bundled rule table.

    The table is read once per process; later calls return the same
    immutable tuple.

    Returns:
        Bundled rules in table order.

    Raises:
        RuleTableError: If the bundled table is malformed.
    """
    text = (
        resources.files("license_check.data")
        .joinpath(RULE_TABLE_RESOURCE)
        .read_text(encoding="utf-8")
    )
    return parse_rule_table(text, source=RULE_TABLE_RESOURCE)


def build_rule_table(rules_file: str | Path | None = None) -> tuple[LicenseRule, ...]:
    """Build the effective rule table.

    Rules from ``rules_file`` are placed before the bundled rules, so
    project-specific patterns take precedence.

    Args:
        rules_file: Optional path to an extra rule table.

    Returns:
        Effective rules in evaluation order.

    Raises:
        RuleTableError: If either table is malformed.
    """
    bundled = load_rule_table()
    if rules_file is None:
        return bundled
    return load_rule_file(Path(rules_file)) + bundled
