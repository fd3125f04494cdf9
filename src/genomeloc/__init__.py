"""
genomeloc: genomic interval algebra

Immutable one-based, closed genome locations with overlap, merge,
subtraction, distance and ordering operations.
"""

__version__ = "0.1.0"

from genomeloc.core import (
    END_OF_CONTIG,
    INFINITE_DISTANCE,
    UNMAPPED,
    WHOLE_GENOME,
    ContigLengthLookup,
    GenomeLoc,
    GenomeLocError,
    HasGenomeLocation,
    InvalidArgumentError,
    Locatable,
    NullArgumentError,
    SequenceDictionary,
    SequenceRecord,
    merge_pair,
    merge_sorted,
    set_start,
    set_stop,
)
from genomeloc.log import setup_logging

__all__ = [
    "GenomeLoc",
    "UNMAPPED",
    "WHOLE_GENOME",
    "END_OF_CONTIG",
    "INFINITE_DISTANCE",
    "Locatable",
    "HasGenomeLocation",
    "merge_pair",
    "merge_sorted",
    "set_start",
    "set_stop",
    "ContigLengthLookup",
    "SequenceDictionary",
    "SequenceRecord",
    "GenomeLocError",
    "InvalidArgumentError",
    "NullArgumentError",
    "setup_logging",
]
