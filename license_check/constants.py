"""Constants for license-check."""

# Exit codes
EXIT_SUCCESS = 0  # Every dependency resolved and allowed
EXIT_ISSUES = 1  # At least one dependency unresolved or denied
EXIT_ERROR = 2  # Check could not run (bad config, rule table, project file)

# Maximum number of parent POMs to follow, in case of malformed metadata
DEFAULT_MAX_SEARCH_DEPTH = 12

DEFAULT_REPOSITORY_URL = "https://repo1.maven.org/maven2"

DEFAULT_TIMEOUT_SECONDS = 30.0

RESULT_PASS_MESSAGE = "RESULT: license check complete, no issues found."
RESULT_FAIL_MESSAGE = (
    "RESULT: At least one license could not be verified or appears on your "
    "deny list. Build fails."
)

ABOUT_TEXT = (
    "This tool validates that the artifacts you depend on declare a license "
    "in their POM (directly or through a parent POM) and that the license "
    "matches a known open source license. If no match is found, or the "
    "license is on your deny list, the check fails. It does not constitute "
    "legal advice."
)
