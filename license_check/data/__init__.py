"""Bundled data files for license-check."""
