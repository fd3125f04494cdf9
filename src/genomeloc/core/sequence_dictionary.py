"""
Contig length lookup used for distances that span several contigs.

A GenomeLoc only knows the index of its contig. Measuring how far apart two
locations on different contigs are requires the length of every contig in
between, in reference order. Anything that answers ``sequence_length(index)``
can be passed in; SequenceDictionary is the stock implementation.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from genomeloc.core.exceptions import InvalidArgumentError

if TYPE_CHECKING:
    import pysam

logger = logging.getLogger(__name__)


class ContigLengthLookup(Protocol):
    """Read-only mapping from contig index to contig length."""

    def sequence_length(self, index: int) -> int: ...


@dataclass(slots=True, frozen=True)
class SequenceRecord:
    """One reference contig: its name and length in base pairs."""

    name: str
    length: int

    def __post_init__(self) -> None:
        """Validate contig length."""
        if self.length < 0:
            raise InvalidArgumentError(
                f"Contig length cannot be negative: {self.name}={self.length}"
            )


@dataclass(slots=True, frozen=True)
class SequenceDictionary:
    """
    Ordered, immutable list of reference contigs.

    The position of a record is its contig index, matching
    ``GenomeLoc.contig_index``.

    Example:
        >>> seq_dict = SequenceDictionary.from_lengths({"chr1": 100, "chr2": 50})
        >>> seq_dict.sequence_length(1)
        50
    """

    records: tuple[SequenceRecord, ...] = ()

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, int]]) -> SequenceDictionary:
        """
        Build a dictionary from ``(name, length)`` pairs in reference order.

        Args:
            pairs: Contig names and lengths

        Returns:
            New SequenceDictionary
        """
        records = tuple(SequenceRecord(name, length) for name, length in pairs)
        logger.debug(f"Built sequence dictionary with {len(records)} contigs")
        return cls(records)

    @classmethod
    def from_lengths(cls, lengths: Mapping[str, int]) -> SequenceDictionary:
        """Build a dictionary from a name -> length mapping, keeping its order."""
        return cls.from_pairs(lengths.items())

    @classmethod
    def from_alignment_header(cls, header: pysam.AlignmentHeader) -> SequenceDictionary:
        """
        Build a dictionary from the @SQ lines of a SAM/BAM header.

        Args:
            header: Header of an opened pysam.AlignmentFile

        Returns:
            New SequenceDictionary with contigs in header order
        """
        return cls.from_pairs(zip(header.references, header.lengths))

    def sequence_length(self, index: int) -> int:
        """
        Return the length of the contig at ``index``.

        Raises:
            InvalidArgumentError: If no contig has that index
        """
        if not 0 <= index < len(self.records):
            raise InvalidArgumentError(
                f"Contig index {index} not in sequence dictionary "
                f"of {len(self.records)} contigs"
            )
        return self.records[index].length

    @property
    def names(self) -> list[str]:
        """Contig names in reference order."""
        return [record.name for record in self.records]

    def __len__(self) -> int:
        return len(self.records)
