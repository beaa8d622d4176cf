"""Orig source archive building.

Public API:
    build_artifacts_archive(pkg_def, impl=None, settings=None) -> Path
    Specs(settings=None, impl=None).build_artifacts_archive(pkg_def) -> Path
    resolve_destination(pkg_name, architecture, spec_output_path) -> Path
    resolve_archive_path(pkg_name, version, spec_output_path) -> Path
"""

from archiver.specs.archive import Specs, build_artifacts_archive
from archiver.specs.impl import CompressOptions, DefaultImpl, Impl
from archiver.specs.paths import resolve_archive_path, resolve_destination
from archiver.specs.types import (
    ArchiveError,
    CompressionError,
    ExtractionError,
    FilesystemError,
    InvalidArgumentError,
    PackageDefinition,
    PackageVariation,
    RetrievalError,
    UnexpectedStatusError,
)

__all__ = [
    "ArchiveError",
    "CompressOptions",
    "CompressionError",
    "DefaultImpl",
    "ExtractionError",
    "FilesystemError",
    "Impl",
    "InvalidArgumentError",
    "PackageDefinition",
    "PackageVariation",
    "RetrievalError",
    "Specs",
    "UnexpectedStatusError",
    "build_artifacts_archive",
    "resolve_archive_path",
    "resolve_destination",
]
