"""Shared pytest fixtures for genomeloc tests."""

from __future__ import annotations

import pytest

from genomeloc import GenomeLoc, SequenceDictionary


def loc(start: int, stop: int, contig: str = "chr1", index: int = 0) -> GenomeLoc:
    """Shorthand for a location on chr1."""
    return GenomeLoc(contig, index, start, stop)


@pytest.fixture
def seq_dict() -> SequenceDictionary:
    """Three contigs of lengths 100, 50 and 80."""
    return SequenceDictionary.from_lengths({"chr1": 100, "chr2": 50, "chr3": 80})


@pytest.fixture
def sample_locs() -> list[GenomeLoc]:
    """Mapped locations covering overlap, abutting, gap and cross-contig cases."""
    return [
        loc(1, 10),
        loc(5, 15),
        loc(11, 20),
        loc(30, 30),
        loc(1, 100),
        loc(1, 5, "chr2", 1),
        loc(40, 60, "chr3", 2),
    ]
