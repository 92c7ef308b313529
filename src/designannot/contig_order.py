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
from typing import Iterable

from .enums import Comparison
from .errors import UnknownContig
from .genomic_range import GenomicPosition, GenomicRange


@dataclass(slots=True)
class ContigOrder:
    """Fixed ranking of the contigs of a reference, usually its dictionary order"""

    contigs: list[str]
    _ranks: dict[str, int] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._ranks = {}
        for contig in self.contigs:
            if contig in self._ranks:
                raise ValueError(f"Duplicate contig '{contig}' in the reference dictionary!")
            self._ranks[contig] = len(self._ranks)

    @classmethod
    def from_names(cls, contigs: Iterable[str]) -> ContigOrder:
        return cls(list(contigs))

    def __len__(self) -> int:
        return len(self.contigs)

    def __contains__(self, contig: str) -> bool:
        return contig in self._ranks

    def rank(self, contig: str) -> int:
        try:
            return self._ranks[contig]
        except KeyError:
            raise UnknownContig(contig)

    def position_key(self, pos: GenomicPosition) -> tuple[int, int]:
        return self.rank(pos.contig), pos.position

    def start_key(self, r: GenomicRange) -> tuple[int, int]:
        return self.rank(r.contig), r.start

    def range_key(self, r: GenomicRange) -> tuple[int, int, int]:
        return self.rank(r.contig), r.start, r.end

    def compare(self, a: GenomicRange, b: GenomicRange) -> Comparison:
        ka = self.range_key(a)
        kb = self.range_key(b)
        return (
            Comparison.BEFORE if ka < kb else
            Comparison.AFTER if ka > kb else
            Comparison.SAME
        )

    def is_before(self, r: GenomicRange, cursor: GenomicPosition) -> bool:
        """Whether the range ends strictly before the cursor position"""

        range_rank = self.rank(r.contig)
        cursor_rank = self.rank(cursor.contig)
        return (
            range_rank < cursor_rank or
            (range_rank == cursor_rank and r.end < cursor.position)
        )

    def sort_ranges(self, ranges: Iterable[GenomicRange]) -> list[GenomicRange]:
        return sorted(ranges, key=self.range_key)
