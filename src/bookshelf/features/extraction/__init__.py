"""
Summary: Public surface for tag extraction modules.
Why: Provide a stable import path for the aggregator and tests.
"""

from .format_extractors import (
    FlacExtractor,
    M4aExtractor,
    Mp3Extractor,
    OggVorbisExtractor,
    OpusExtractor,
)
from .tag_extractor import TagExtractor

__all__ = [
    "TagExtractor",
    "Mp3Extractor",
    "FlacExtractor",
    "OpusExtractor",
    "OggVorbisExtractor",
    "M4aExtractor",
]
