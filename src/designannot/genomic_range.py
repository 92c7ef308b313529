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

from dataclasses import dataclass


def get_region(contig: str, start: int, end: int) -> str:
    return f"{contig}:{start}-{end}"


@dataclass(slots=True, frozen=True)
class GenomicPosition:
    contig: str
    position: int

    def __post_init__(self) -> None:
        if not self.contig or self.position < 1:
            raise ValueError("Invalid genomic position!")

    def __str__(self) -> str:
        return f"{self.contig}:{self.position}"


@dataclass(slots=True, frozen=True)
class GenomicRange:
    """One-based, end-inclusive range on a contig"""

    contig: str
    start: int
    end: int

    def __post_init__(self) -> None:
        if not (
            self.contig
            and self.start >= 1
            and self.start <= self.end
        ):
            raise ValueError(f"Invalid genomic range {self.contig}:{self.start}-{self.end}!")

    def __len__(self) -> int:
        return self.end - self.start + 1

    def __str__(self) -> str:
        return self.region

    def __lt__(self, other: GenomicRange) -> bool:
        if other.contig != self.contig:
            raise ValueError("Can't compare across contigs!")
        return (self.start, self.end) < (other.start, other.end)

    def __contains__(self, other: GenomicRange) -> bool:
        return (
            other.contig == self.contig and
            self.start <= other.start and
            other.end <= self.end
        )

    @property
    def region(self) -> str:
        return get_region(self.contig, self.start, self.end)

    @property
    def start_position(self) -> GenomicPosition:
        return GenomicPosition(self.contig, self.start)

    def overlaps(self, other: GenomicRange) -> bool:
        return (
            other.contig == self.contig and
            self.start <= other.end and
            other.start <= self.end
        )

    def to_range(self) -> GenomicRange:
        return GenomicRange(self.contig, self.start, self.end)
