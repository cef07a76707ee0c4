"""
Summary: Public surface for the aggregation use cases.
Why: Provide one import path for the directory aggregator, walker, and their types.
"""

from .diagnostics import AggregationDiagnostics, SkippedDirectory, SkippedEntry, SkippedFile
from .directory_aggregator import aggregate_directory, aggregate_entries
from .ports import FilesystemPort, TagExtractorPort
from .processing_types import AggregationEvent, DirectoryResult
from .tree_walker import walk

__all__ = [
    "AggregationDiagnostics",
    "AggregationEvent",
    "DirectoryResult",
    "FilesystemPort",
    "SkippedDirectory",
    "SkippedEntry",
    "SkippedFile",
    "TagExtractorPort",
    "aggregate_directory",
    "aggregate_entries",
    "walk",
]
