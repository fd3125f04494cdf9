"""
GenomeLoc - immutable genomic location and its interval algebra.

A GenomeLoc is a one-based, closed span ``[start, stop]`` on a reference
contig identified by its index in the sequence dictionary. Start and stop may
be any integer: bounds validation against the reference belongs to whoever
builds the location, not to the location itself.

Two special locations exist:
- UNMAPPED: no genomic location (e.g. an unaligned read). Sorts after
  every mapped location.
- WHOLE_GENOME: a span covering everything.

Both are distinct variants (UnmappedLoc, WholeGenomeLoc), so a plain
GenomeLoc built with the same fields is never mistaken for a sentinel.

Example:
    >>> a = GenomeLoc("chr1", 0, 1, 10)
    >>> b = GenomeLoc("chr1", 0, 11, 20)
    >>> str(a.merge(b))
    'chr1:1-20'
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Protocol, runtime_checkable

from genomeloc.core.exceptions import non_null, validate_arg

if TYPE_CHECKING:
    from genomeloc.core.sequence_dictionary import ContigLengthLookup

logger = logging.getLogger(__name__)

# stop value meaning "through the end of the contig"
END_OF_CONTIG = 2**31 - 1

# distance between locations on different contigs
INFINITE_DISTANCE = 2**31 - 1


@runtime_checkable
class Locatable(Protocol):
    """Anything with a contig name and a one-based closed [start, end]."""

    @property
    def contig(self) -> Optional[str]: ...

    @property
    def start(self) -> int: ...

    @property
    def end(self) -> int: ...


@runtime_checkable
class HasGenomeLocation(Protocol):
    """Anything that can report its GenomeLoc."""

    @property
    def location(self) -> GenomeLoc: ...


def _compare(a: int, b: int) -> int:
    return (a > b) - (a < b)


@dataclass(slots=True, frozen=True, eq=False)
class GenomeLoc:
    """
    Immutable genomic location, one-based and closed on both ends.

    Equality and hashing use only ``(contig_index, start, stop)``; the contig
    name is for display.
    """

    contig: Optional[str]
    contig_index: int
    start: int
    stop: int

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def end(self) -> int:
        """Alias of ``stop`` for Locatable consumers."""
        return self.stop

    @property
    def is_unmapped(self) -> bool:
        return False

    @property
    def is_whole_genome(self) -> bool:
        return False

    @property
    def location(self) -> GenomeLoc:
        return self

    @property
    def start_location(self) -> GenomeLoc:
        """Single-base location at ``start``."""
        return GenomeLoc(self.contig, self.contig_index, self.start, self.start)

    @property
    def stop_location(self) -> GenomeLoc:
        """Single-base location at ``stop``."""
        return GenomeLoc(self.contig, self.contig_index, self.stop, self.stop)

    @property
    def size(self) -> int:
        """Number of bases covered. Non-positive for inverted spans."""
        return self.stop - self.start + 1

    # ------------------------------------------------------------------
    # Predicates
    # ------------------------------------------------------------------

    def on_same_contig(self, that: GenomeLoc) -> bool:
        return self.contig_index == that.contig_index

    def disjoint(self, that: GenomeLoc) -> bool:
        """True if no base is shared with ``that``."""
        return (
            self.contig_index != that.contig_index
            or self.start > that.stop
            or that.start > self.stop
        )

    def overlaps(self, that: GenomeLoc) -> bool:
        return not self.disjoint(that)

    def discontinuous(self, that: GenomeLoc) -> bool:
        """True if there is at least a one-base gap between the two spans."""
        return (
            self.contig_index != that.contig_index
            or self.start - 1 > that.stop
            or that.start - 1 > self.stop
        )

    def contiguous(self, that: GenomeLoc) -> bool:
        """True if the spans overlap or abut."""
        return not self.discontinuous(that)

    def contains(self, that: GenomeLoc) -> bool:
        return (
            self.on_same_contig(that)
            and self.start <= that.start
            and self.stop >= that.stop
        )

    # ------------------------------------------------------------------
    # Set-like operations
    # ------------------------------------------------------------------

    def _check_same_mapping(self, that: GenomeLoc) -> None:
        validate_arg(
            self.is_unmapped == that.is_unmapped,
            f"Tried to merge a mapped and an unmapped genome loc: {self} and {that}",
        )

    def merge(self, that: GenomeLoc) -> GenomeLoc:
        """
        Return the span covering both locations.

        Args:
            that: Location contiguous with this one

        Returns:
            ``[min(starts), max(stops)]``, or UNMAPPED if both are unmapped

        Raises:
            InvalidArgumentError: If exactly one operand is unmapped or the
                two are not contiguous
        """
        self._check_same_mapping(that)
        if self.is_unmapped:
            return UNMAPPED
        validate_arg(
            self.contiguous(that),
            f"The two genome locs need to be contiguous: {self} and {that}",
        )
        return GenomeLoc(
            self.contig,
            self.contig_index,
            min(self.start, that.start),
            max(self.stop, that.stop),
        )

    def union(self, that: GenomeLoc) -> GenomeLoc:
        return self.merge(that)

    def intersect(self, that: GenomeLoc) -> GenomeLoc:
        """
        Return the bases shared by both locations.

        Raises:
            InvalidArgumentError: If exactly one operand is unmapped or the
                two do not overlap
        """
        self._check_same_mapping(that)
        if self.is_unmapped:
            return UNMAPPED
        validate_arg(
            self.overlaps(that),
            f"The two genome locs need to overlap: {self} and {that}",
        )
        return GenomeLoc(
            self.contig,
            self.contig_index,
            max(self.start, that.start),
            min(self.stop, that.stop),
        )

    def subtract(self, that: GenomeLoc) -> list[GenomeLoc]:
        """
        Remove the bases of ``that`` from this location.

        |------------------ self ------------------|
                |------- that -------|
        yields
        |-------|                    |-------------|

        Args:
            that: Location overlapping this one

        Returns:
            Zero, one or two locations, left piece first

        Raises:
            InvalidArgumentError: If exactly one operand is unmapped or the
                two do not overlap
        """
        self._check_same_mapping(that)
        if self.is_unmapped:
            return [UNMAPPED]
        if self == that:
            return []
        validate_arg(
            self.overlaps(that),
            f"The two genome locs need to overlap: {self} and {that}",
        )

        left = GenomeLoc(self.contig, self.contig_index, self.start, that.start - 1)
        right = GenomeLoc(self.contig, self.contig_index, that.stop + 1, self.stop)
        return [loc for loc in (left, right) if loc.size > 0]

    def split(self, split_point: int) -> tuple[GenomeLoc, GenomeLoc]:
        """
        Split into ``[start, split_point - 1]`` and ``[split_point, stop]``.

        Raises:
            InvalidArgumentError: If split_point lies outside [start, stop]
        """
        validate_arg(
            self.start <= split_point <= self.stop,
            f"Unable to split contig {self} at split point {split_point}; "
            f"split point is not contained in region.",
        )
        return (
            GenomeLoc(self.contig, self.contig_index, self.start, split_point - 1),
            GenomeLoc(self.contig, self.contig_index, split_point, self.stop),
        )

    def endpoint_span(self, that: GenomeLoc) -> GenomeLoc:
        """
        Return the span from the leftmost start to the rightmost stop.

        Unlike merge, the two locations may be separated by a gap.

        Raises:
            InvalidArgumentError: If either is unmapped or the contig names
                differ
        """
        validate_arg(
            not self.is_unmapped and not that.is_unmapped,
            f"Cannot get endpoint span for unmapped genome locs: {self} and {that}",
        )
        validate_arg(
            self.contig == that.contig,
            f"Cannot get endpoint span for genome locs on different contigs: "
            f"{self} and {that}",
        )
        return GenomeLoc(
            self.contig,
            self.contig_index,
            min(self.start, that.start),
            max(self.stop, that.stop),
        )

    # ------------------------------------------------------------------
    # Distances
    # ------------------------------------------------------------------

    def distance(self, that: GenomeLoc) -> int:
        """Distance between start positions, INFINITE_DISTANCE across contigs."""
        if not self.on_same_contig(that):
            return INFINITE_DISTANCE
        return abs(self.start - that.start)

    def min_distance(self, that: GenomeLoc) -> int:
        """
        Smallest distance between any base of this location and any of ``that``.

        Returns 0 for overlapping locations and INFINITE_DISTANCE across
        contigs.
        """
        if not self.on_same_contig(that):
            return INFINITE_DISTANCE
        if self.is_before(that):
            return that.start - self.stop
        if that.is_before(self):
            return self.start - that.stop
        return 0

    def reciprocal_overlap_fraction(self, that: GenomeLoc) -> float:
        """
        Minimum fraction of either location covered by their intersection.

        ``chr1:1-10`` and ``chr1:6-25`` share 5 bases: 50% of the first but
        25% of the second, so the result is 0.25.
        """
        if self.disjoint(that):
            return 0.0
        shared = self.intersect(that).size
        return min(shared / self.size, shared / that.size)

    def distance_across_contigs(
        self, that: GenomeLoc, lookup: ContigLengthLookup
    ) -> int:
        """
        Count the bases between two locations, crossing contigs if necessary.

        On the same contig this is ``min_distance``. Otherwise it is the
        distance from the earlier location to the end of its contig, plus
        the later location's start, plus the full length of every contig in
        between (in dictionary order).

        Args:
            that: Other location
            lookup: Contig lengths by index, e.g. a SequenceDictionary

        Returns:
            Number of bases separating the two locations
        """
        if self.on_same_contig(that):
            return self.min_distance(that)

        if self.contig_index < that.contig_index:
            first, second = self, that
        else:
            first, second = that, self

        distance = lookup.sequence_length(first.contig_index) - first.stop
        distance += second.start
        for index in range(first.contig_index + 1, second.contig_index):
            distance += lookup.sequence_length(index)

        logger.debug(f"Distance from {first} to {second} across contigs: {distance}")
        return distance

    # ------------------------------------------------------------------
    # Ordering
    # ------------------------------------------------------------------

    def compare_contigs(self, that: GenomeLoc) -> int:
        """-1, 0 or 1 as this contig index is below, equal to or above that's."""
        return _compare(self.contig_index, that.contig_index)

    def compare_to(self, that: GenomeLoc) -> int:
        """
        Total order: contig index, then start, then stop.

        UNMAPPED sorts after every mapped location.

        Returns:
            -1, 0 or 1
        """
        if self is that:
            return 0
        if self.is_unmapped and that.is_unmapped:
            return 0
        if self.is_unmapped:
            return 1
        if that.is_unmapped:
            return -1

        cmp_contig = self.compare_contigs(that)
        if cmp_contig != 0:
            return cmp_contig
        cmp_start = _compare(self.start, that.start)
        if cmp_start != 0:
            return cmp_start
        return _compare(self.stop, that.stop)

    def max(self, that: GenomeLoc) -> GenomeLoc:
        """Return the greater of the two locations; ties return self."""
        return that if self.compare_to(that) < 0 else self

    def is_before(self, that: GenomeLoc) -> bool:
        """True if this location ends before ``that`` starts."""
        comparison = self.compare_contigs(that)
        return comparison == -1 or (comparison == 0 and self.stop < that.start)

    def is_past(self, that: GenomeLoc) -> bool:
        """True if this location starts after ``that`` ends."""
        comparison = self.compare_contigs(that)
        return comparison == 1 or (comparison == 0 and self.start > that.stop)

    def is_between(self, left: GenomeLoc, right: GenomeLoc) -> bool:
        return self.compare_to(left) >= 0 and self.compare_to(right) <= 0

    # ------------------------------------------------------------------
    # Dunder methods
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GenomeLoc):
            return NotImplemented
        if self.is_unmapped or other.is_unmapped:
            return self.is_unmapped and other.is_unmapped
        return (
            self.contig_index == other.contig_index
            and self.start == other.start
            and self.stop == other.stop
        )

    def __hash__(self) -> int:
        return hash((self.contig_index, self.start, self.stop))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, GenomeLoc):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, GenomeLoc):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, GenomeLoc):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, GenomeLoc):
            return NotImplemented
        return self.compare_to(other) >= 0

    def __str__(self) -> str:
        if self.is_unmapped:
            return "unmapped"
        through_end = self.stop == END_OF_CONTIG
        if through_end and self.start == 1:
            return f"{self.contig}"
        if through_end or self.start == self.stop:
            return f"{self.contig}:{self.start}"
        return f"{self.contig}:{self.start}-{self.stop}"


class UnmappedLoc(GenomeLoc):
    """Location of records with no alignment. Use the UNMAPPED constant."""

    __slots__ = ()

    def __init__(self) -> None:
        GenomeLoc.__init__(self, None, -1, 0, 0)

    @property
    def is_unmapped(self) -> bool:
        return True

    def __repr__(self) -> str:
        return "UNMAPPED"


class WholeGenomeLoc(GenomeLoc):
    """Location spanning the whole genome. Use the WHOLE_GENOME constant."""

    __slots__ = ()

    def __init__(self) -> None:
        GenomeLoc.__init__(self, "all", -1, 0, 0)

    @property
    def is_whole_genome(self) -> bool:
        return True

    def __repr__(self) -> str:
        return "WHOLE_GENOME"


UNMAPPED: GenomeLoc = UnmappedLoc()
WHOLE_GENOME: GenomeLoc = WholeGenomeLoc()


def merge_pair(a: GenomeLoc, b: GenomeLoc) -> GenomeLoc:
    """
    Merge two contiguous, mapped locations into one.

    Raises:
        InvalidArgumentError: If either is unmapped or they are not contiguous
    """
    validate_arg(
        not a.is_unmapped and not b.is_unmapped,
        f"Tried to merge unmapped genome locs: {a} and {b}",
    )
    validate_arg(
        a.contiguous(b),
        f"The two genome locs need to be contiguous: {a} and {b}",
    )
    return GenomeLoc(a.contig, a.contig_index, min(a.start, b.start), max(a.stop, b.stop))


def merge_sorted(locs: Iterable[GenomeLoc]) -> Optional[GenomeLoc]:
    """
    Merge a run of contiguous locations into a single location.

    Locations are folded left to right with merge_pair, so callers must pass
    them already sorted by the GenomeLoc total order (e.g. ``sorted(locs)``).

    Args:
        locs: Sorted, contiguous, mapped locations

    Returns:
        The merged location, or None if ``locs`` is empty

    Raises:
        InvalidArgumentError: If any location is unmapped or two neighbours
            are not contiguous
    """
    locs = list(locs)
    validate_arg(
        not any(loc.is_unmapped for loc in locs),
        "Tried to merge unmapped genome locs",
    )

    result: Optional[GenomeLoc] = None
    for loc in locs:
        result = loc if result is None else merge_pair(result, loc)

    logger.debug(f"Merged {len(locs)} genome locs into {result}")
    return result


def set_start(loc: GenomeLoc, start: int) -> GenomeLoc:
    """
    Copy ``loc`` with a new start.

    The stop is not checked against the new start, so callers may build
    spans that run off a contig end (e.g. for overhanging reads).

    Raises:
        NullArgumentError: If loc is None
    """
    non_null(loc)
    return GenomeLoc(loc.contig, loc.contig_index, start, loc.stop)


def set_stop(loc: GenomeLoc, stop: int) -> GenomeLoc:
    """
    Copy ``loc`` with a new stop. No consistency check against start.

    Raises:
        NullArgumentError: If loc is None
    """
    non_null(loc)
    return GenomeLoc(loc.contig, loc.contig_index, loc.start, stop)
