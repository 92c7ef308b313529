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

from .genomic_range import GenomicRange


STRANDS = frozenset(['+', '-'])


class Strand(str):
    """Transcript orientation on the reference"""

    def __new__(cls, s: str) -> Strand:
        if s not in STRANDS:
            raise ValueError(f"Invalid transcript strand '{s}'!")
        return str.__new__(cls, s)

    @property
    def is_plus(self) -> bool:
        return self == '+'

    @property
    def is_minus(self) -> bool:
        return self == '-'


@dataclass(slots=True, frozen=True)
class Exon(GenomicRange):
    number: int

    def __post_init__(self) -> None:
        GenomicRange.__post_init__(self)
        if self.number < 0:
            raise ValueError("Invalid exon number!")


@dataclass(slots=True, frozen=True)
class TranscriptRecord:
    """Gene model spanning all of its exons"""

    name: str
    gene_name: str
    strand: Strand
    range: GenomicRange
    exons: tuple[Exon, ...]

    def __post_init__(self) -> None:
        if not self.gene_name:
            raise ValueError("Invalid transcript: missing gene name!")
        for exon in self.exons:
            if exon not in self.range:
                raise ValueError(f"Invalid transcript {self.name}: exon {exon.region} out of range!")
        object.__setattr__(self, 'exons', tuple(sorted(self.exons)))

    @property
    def contig(self) -> str:
        return self.range.contig

    def exons_within(self, r: GenomicRange) -> list[Exon]:
        """Exons overlapping the given range, ordered by position"""

        return [
            exon
            for exon in self.exons
            if exon.overlaps(r)
        ]

    def get_exons_in_range(self, r: GenomicRange) -> tuple[list[GenomicRange], list[int]]:
        exons = self.exons_within(r)
        return [exon.to_range() for exon in exons], [exon.number for exon in exons]
