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

import logging
from typing import Callable, Iterable, Sequence

from .annotation_state import AnnotationState
from .buffers import IntervalBuffer, RegionSlot, TranscriptBuffer
from .constants import DEFAULT_REGION_LABEL_PREFIX
from .contig_order import ContigOrder
from .errors import DuplicateAnnotationError, MalformedRegionLabelError
from .genomic_range import GenomicPosition, GenomicRange
from .region import RegionRecord
from .stats import AnnotationStats
from .transcript import TranscriptRecord


EmitFunction = Callable[[GenomicRange, AnnotationState], None]


class MergeJoinEngine:
    """
    Single forward pass over the reference, annotating intervals with the
    transcripts and target regions overlapping them

    Each call to `advance` ingests the records starting at the cursor, joins
    all the live intervals against the live transcripts and the current
    region, and finally evicts the records the cursor has moved past.
    Evicted intervals are passed to the emit function along with their
    annotation.

    Records must be delivered in coordinate order within each stream, or
    overlaps may be missed silently.
    """

    def __init__(
        self,
        order: ContigOrder,
        emit: EmitFunction,
        region_prefix: str = DEFAULT_REGION_LABEL_PREFIX
    ) -> None:
        if not region_prefix:
            raise ValueError("Invalid region label prefix: empty!")
        self.order = order
        self.emit = emit
        self.region_prefix = region_prefix
        self.intervals = IntervalBuffer(region_prefix=region_prefix)
        self.transcripts = TranscriptBuffer()
        self.region = RegionSlot()
        self.cursor: GenomicPosition | None = None
        self.stats = AnnotationStats()
        self._closed = False

    @property
    def update_count(self) -> int:
        return self.stats.updates

    @property
    def is_closed(self) -> bool:
        return self._closed

    def _check_cursor(self, cursor: GenomicPosition) -> None:
        if self._closed:
            raise RuntimeError("Can't advance the cursor after the end of the traversal!")
        if (
            self.cursor is not None and
            self.order.position_key(cursor) < self.order.position_key(self.cursor)
        ):
            raise ValueError(f"Reference cursor moved backwards from {self.cursor} to {cursor}!")

    def _ingest_region(self, region: RegionRecord) -> None:
        try:
            label = region.get_label(prefix=self.region_prefix)
        except MalformedRegionLabelError as ex:
            logging.warning("Region %s skipped: %s" % (region.range.region, ex.args[0]))
            self.stats.malformed_regions += 1
            label = None

        self.region.replace(region, label)
        self.stats.regions += 1

    def _ingest(
        self,
        intervals: Iterable[GenomicRange],
        transcripts: Iterable[TranscriptRecord]
    ) -> None:
        for interval in intervals:
            self.intervals.add(interval)

        for transcript in transcripts:
            if self.transcripts.add(transcript):
                self.stats.transcripts += 1

    def _update(
        self,
        interval: GenomicRange,
        state: AnnotationState,
        gene: str,
        exons: list[GenomicRange],
        exon_numbers: list[int]
    ) -> None:
        try:
            state.update(gene, exons, exon_numbers)
        except DuplicateAnnotationError as ex:
            raise DuplicateAnnotationError(
                f"Gene {gene} attached twice to interval {interval.region}!") from ex

    def _join(self) -> int:
        n = 0
        for interval, state in self.intervals:
            for transcript in self.transcripts:
                if (
                    transcript.range.overlaps(interval) and
                    not state.has_gene(transcript.gene_name)
                ):
                    exons, exon_numbers = transcript.get_exons_in_range(interval)
                    self._update(interval, state, transcript.gene_name, exons, exon_numbers)
                    n += 1
        return n

    def _join_region(self) -> int:
        region = self.region.region
        label = self.region.label
        if region is None or label is None:
            return 0

        n = 0
        for interval, state in self.intervals:
            if (
                region.range.overlaps(interval) and
                not state.has_exon(label.gene_label, label.exon_number)
            ):
                self._update(interval, state, label.gene_label, [region.range], [label.exon_number])
                n += 1
        return n

    def _join_regions(self, regions: Sequence[RegionRecord]) -> int:
        if not regions:
            return self._join_region()

        # Each region starting at the cursor is joined before the next replaces it
        n = 0
        for region in regions:
            self._ingest_region(region)
            n += self._join_region()
        return n

    def _emit(self, interval: GenomicRange, state: AnnotationState) -> None:
        self.emit(interval, state)
        self.stats.intervals += 1

    def _evict(self, cursor: GenomicPosition) -> None:
        n = self.transcripts.evict_before(self.order, cursor)
        if n > 0:
            logging.debug("Evicted %d transcripts at %s." % (n, cursor))

        for interval, state in self.intervals.evict_before(self.order, cursor):
            self._emit(interval, state)

        if self.region.clear_before(self.order, cursor):
            logging.debug("Cleared the current region at %s." % cursor)

    def advance(
        self,
        cursor: GenomicPosition,
        intervals: Iterable[GenomicRange] = (),
        transcripts: Iterable[TranscriptRecord] = (),
        regions: Sequence[RegionRecord] = ()
    ) -> int:
        """Process the records visible at a new cursor position, returning the number of transcript updates"""

        self._check_cursor(cursor)
        self.cursor = cursor
        self.stats.loci += 1

        self._ingest(intervals, transcripts)
        n = self._join()
        self.stats.updates += n
        self.stats.region_updates += self._join_regions(regions)
        self._evict(cursor)

        return n

    def flush(self) -> int:
        """Emit all the intervals left in the buffer at the end of the input"""

        if self._closed:
            raise RuntimeError("Traversal already completed!")
        self._closed = True

        remaining = self.intervals.drain(self.order)
        for interval, state in remaining:
            self._emit(interval, state)

        self.transcripts = TranscriptBuffer()
        self.region.clear()

        return len(remaining)
