"""Metadata fetchers, POM parsing, and license resolution."""

from license_check.resolvers.base import ChainedFetcher, MetadataFetcher
from license_check.resolvers.dependency import (
    parse_coordinates,
    read_coordinates_file,
    read_project_dependencies,
)
from license_check.resolvers.license import LicenseResolver
from license_check.resolvers.local import LocalRepositoryFetcher
from license_check.resolvers.pom import parse_license_name, parse_parent_coordinate
from license_check.resolvers.remote import RemoteRepositoryFetcher

__all__ = [
    "ChainedFetcher",
    "LicenseResolver",
    "LocalRepositoryFetcher",
    "MetadataFetcher",
    "RemoteRepositoryFetcher",
    "parse_coordinates",
    "parse_license_name",
    "parse_parent_coordinate",
    "read_coordinates_file",
    "read_project_dependencies",
]
