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

from dataclasses import dataclass, field
from typing import Iterator

from .annotation_state import AnnotationState
from .constants import DEFAULT_REGION_LABEL_PREFIX
from .contig_order import ContigOrder
from .genomic_range import GenomicPosition, GenomicRange
from .region import RegionLabel, RegionRecord
from .transcript import TranscriptRecord


AnnotatedInterval = tuple[GenomicRange, AnnotationState]


@dataclass(slots=True)
class IntervalBuffer:
    region_prefix: str = DEFAULT_REGION_LABEL_PREFIX
    _states: dict[GenomicRange, AnnotationState] = field(default_factory=dict, init=False, repr=False)

    def __len__(self) -> int:
        return len(self._states)

    def __contains__(self, r: GenomicRange) -> bool:
        return r in self._states

    def __iter__(self) -> Iterator[AnnotatedInterval]:
        return iter(self._states.items())

    def __getitem__(self, r: GenomicRange) -> AnnotationState:
        return self._states[r]

    def add(self, r: GenomicRange) -> AnnotationState:
        """Get the state of an interval, registering it if new"""

        # Key on a plain range, whatever the record type
        k = r.to_range()
        state = self._states.get(k)
        if state is None:
            state = AnnotationState(region_prefix=self.region_prefix)
            self._states[k] = state
        return state

    def _pop_sorted(self, order: ContigOrder, ranges: list[GenomicRange]) -> list[AnnotatedInterval]:
        return [
            (r, self._states.pop(r))
            for r in order.sort_ranges(ranges)
        ]

    def evict_before(self, order: ContigOrder, cursor: GenomicPosition) -> list[AnnotatedInterval]:
        return self._pop_sorted(order, [
            r for r in self._states
            if order.is_before(r, cursor)
        ])

    def drain(self, order: ContigOrder) -> list[AnnotatedInterval]:
        return self._pop_sorted(order, list(self._states))


@dataclass(slots=True)
class TranscriptBuffer:
    # Insertion-ordered set
    _transcripts: dict[TranscriptRecord, None] = field(default_factory=dict, init=False, repr=False)

    def __len__(self) -> int:
        return len(self._transcripts)

    def __contains__(self, transcript: TranscriptRecord) -> bool:
        return transcript in self._transcripts

    def __iter__(self) -> Iterator[TranscriptRecord]:
        return iter(self._transcripts)

    def add(self, transcript: TranscriptRecord) -> bool:
        if transcript in self._transcripts:
            return False
        self._transcripts[transcript] = None
        return True

    def evict_before(self, order: ContigOrder, cursor: GenomicPosition) -> int:
        evicted = [
            t for t in self._transcripts
            if order.is_before(t.range, cursor)
        ]
        for t in evicted:
            del self._transcripts[t]
        return len(evicted)


@dataclass(slots=True)
class RegionSlot:
    region: RegionRecord | None = None
    label: RegionLabel | None = None

    @property
    def is_empty(self) -> bool:
        return self.region is None

    def replace(self, region: RegionRecord, label: RegionLabel | None) -> None:
        self.region = region
        self.label = label

    def clear(self) -> None:
        self.region = None
        self.label = None

    def clear_before(self, order: ContigOrder, cursor: GenomicPosition) -> bool:
        if self.region is not None and order.is_before(self.region.range, cursor):
            self.clear()
            return True
        return False
