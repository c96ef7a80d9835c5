"""Maven dependency license checker.

Walks each dependency's POM parent chain to find its declared license,
classifies the license into a canonical code, and fails the build when a
license cannot be verified or is on the deny list.
"""

__version__ = "0.1.0"
