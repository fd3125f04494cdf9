"""Core data structures: genome locations and sequence dictionaries."""

from genomeloc.core.exceptions import (
    GenomeLocError,
    InvalidArgumentError,
    NullArgumentError,
)
from genomeloc.core.genome_loc import (
    END_OF_CONTIG,
    INFINITE_DISTANCE,
    UNMAPPED,
    WHOLE_GENOME,
    GenomeLoc,
    HasGenomeLocation,
    Locatable,
    UnmappedLoc,
    WholeGenomeLoc,
    merge_pair,
    merge_sorted,
    set_start,
    set_stop,
)
from genomeloc.core.sequence_dictionary import (
    ContigLengthLookup,
    SequenceDictionary,
    SequenceRecord,
)

__all__ = [
    "GenomeLoc",
    "UnmappedLoc",
    "WholeGenomeLoc",
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
]
