########## LICENCE ##########
# DesignAnnot
# Copyright (C) 2024 Genome Research Ltd
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as
# published by the Free Software Foundation, either version 3 of the
# License, or (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.
#############################

from __future__ import annotations

import heapq
import logging
from dataclasses import dataclass, field
from itertools import groupby
from typing import Any, Callable, Generator, Iterable, Iterator

from .contig_order import ContigOrder
from .engine import MergeJoinEngine
from .enums import RecordKind
from .errors import UnsortedInput
from .genomic_range import GenomicPosition, GenomicRange
from .region import RegionRecord
from .stats import AnnotationStats
from .transcript import TranscriptRecord


@dataclass(slots=True)
class LocusRecords:
    """Records starting at a reference position"""

    cursor: GenomicPosition
    intervals: list[GenomicRange] = field(default_factory=list)
    transcripts: list[TranscriptRecord] = field(default_factory=list)
    regions: list[RegionRecord] = field(default_factory=list)

    def add(self, kind: RecordKind, record) -> None:
        match kind:
            case RecordKind.INTERVAL:
                self.intervals.append(record)
            case RecordKind.TRANSCRIPT:
                self.transcripts.append(record)
            case RecordKind.REGION:
                self.regions.append(record)


@dataclass(slots=True)
class _KeyedStream:
    order: ContigOrder
    kind: RecordKind
    records: Iterable[Any]
    get_range: Callable[[Any], GenomicRange]

    def __iter__(self) -> Iterator[tuple[tuple[int, int], RecordKind, Any]]:
        prev_key: tuple[int, int] | None = None
        for record in self.records:
            r = self.get_range(record)
            k = self.order.start_key(r)
            if prev_key is not None and k < prev_key:
                raise UnsortedInput(
                    f"Unsorted {self.kind.name.lower()} records: "
                    f"{r.region} found after position {self.order.contigs[prev_key[0]]}:{prev_key[1]}!")
            prev_key = k
            yield k, self.kind, record


def _get_self(r: GenomicRange) -> GenomicRange:
    return r


def _get_range(record: TranscriptRecord | RegionRecord) -> GenomicRange:
    return record.range


@dataclass(slots=True)
class ReferenceTraversal:
    """
    Merge the coordinate-sorted interval, transcript, and region streams
    into a sequence of reference loci, each carrying the records starting there
    """

    order: ContigOrder
    intervals: Iterable[GenomicRange]
    transcripts: Iterable[TranscriptRecord] = ()
    regions: Iterable[RegionRecord] = ()

    def __iter__(self) -> Generator[LocusRecords, None, None]:
        streams = [
            _KeyedStream(self.order, RecordKind.INTERVAL, self.intervals, _get_self),
            _KeyedStream(self.order, RecordKind.TRANSCRIPT, self.transcripts, _get_range),
            _KeyedStream(self.order, RecordKind.REGION, self.regions, _get_range)
        ]

        # Ties are broken by stream kind, preserving the order within each stream
        merged = heapq.merge(*streams, key=lambda x: (x[0], x[1]))

        for (rank, pos), items in groupby(merged, key=lambda x: x[0]):
            locus = LocusRecords(GenomicPosition(self.order.contigs[rank], pos))
            for _, kind, record in items:
                locus.add(kind, record)
            yield locus


def run_traversal(engine: MergeJoinEngine, traversal: Iterable[LocusRecords]) -> AnnotationStats:
    for locus in traversal:
        engine.advance(
            locus.cursor,
            intervals=locus.intervals,
            transcripts=locus.transcripts,
            regions=locus.regions)

    n = engine.flush()
    logging.debug("Flushed %d intervals at the end of the input." % n)

    return engine.stats
