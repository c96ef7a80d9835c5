"""License name classification against the rule table."""
from __future__ import annotations

from typing import Optional, Sequence

from license_check.models.rules import LicenseRule
from license_check.rules import build_rule_table


class LicenseClassifier:
    """Maps free-text license names to canonical license codes.

    Rules are tried in order and the first match wins.
    """

    def __init__(self, rules: Sequence[LicenseRule]) -> None:
        """Initialize the classifier.

        Args:
            rules: Ordered rule table. Must not be empty.
        """
        if not rules:
            raise ValueError("rule table must contain at least one rule")
        self._rules = tuple(rules)

    @classmethod
    def default(cls, rules_file: Optional[str] = None) -> LicenseClassifier:
        """Create a classifier over the bundled rules.

        Args:
            rules_file: Optional extra rule table, placed before the
                bundled rules.

        Returns:
            LicenseClassifier for the effective rule table.

        Raises:
            RuleTableError: If a rule table is malformed.
        """
        return cls(build_rule_table(rules_file))

    @property
    def rules(self) -> tuple[LicenseRule, ...]:
        return self._rules

    def find_rule(self, license_name: Optional[str]) -> Optional[LicenseRule]:
        """Find the first rule matching a license name.

        Args:
            license_name: Free-text license name, or None.

        Returns:
            The matching rule, or None if the name is None or no rule
            matches.
        """
        if license_name is None:
            return None
        for rule in self._rules:
            if rule.matches(license_name):
                return rule
        return None

    def classify(self, license_name: Optional[str]) -> Optional[str]:
        """Classify a license name into a canonical code.

        Args:
            license_name: Free-text license name, or None.

        Returns:
            Canonical code like ``apache-2.0``, or None if the name is
            None or matches no rule.
        """
        rule = self.find_rule(license_name)
        return rule.code if rule is not None else None
