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
from enum import IntEnum
from typing import Generator

from ..genomic_range import GenomicRange
from ..transcript import Exon, Strand, TranscriptRecord
from .csv import load_numbered_csv
from .utils import get_invalid_record, parse_int_list


class RefGeneField(IntEnum):
    BIN = 0
    NAME = 1
    CHROM = 2
    STRAND = 3
    TX_START = 4
    TX_END = 5
    CDS_START = 6
    CDS_END = 7
    EXON_COUNT = 8
    EXON_STARTS = 9
    EXON_ENDS = 10
    SCORE = 11
    NAME2 = 12


def parse_refgene_record(r: list[str], offset: int = 0) -> TranscriptRecord:
    """
    Parse a UCSC refGene (genePred) record

    Exons are numbered from zero in genomic order. The gene name is taken
    from the 'name2' column, if present, or from the transcript name.
    """

    def get(f: RefGeneField) -> str:
        return r[f + offset]

    if len(r) <= RefGeneField.EXON_ENDS + offset:
        raise ValueError("Too few refGene columns")

    name = get(RefGeneField.NAME)
    contig = get(RefGeneField.CHROM)
    name2_index = RefGeneField.NAME2 + offset
    gene_name = r[name2_index].strip() if len(r) > name2_index else ''

    exon_starts = parse_int_list(get(RefGeneField.EXON_STARTS))
    exon_ends = parse_int_list(get(RefGeneField.EXON_ENDS))
    exon_count = int(get(RefGeneField.EXON_COUNT))
    if not (len(exon_starts) == len(exon_ends) == exon_count):
        raise ValueError(f"Exon count mismatch in transcript {name}")

    # Convert zero-based half-open coordinates
    exons = tuple(
        Exon(contig, start + 1, end, i)
        for i, (start, end) in enumerate(sorted(zip(exon_starts, exon_ends)))
    )

    return TranscriptRecord(
        name,
        gene_name or name,
        Strand(get(RefGeneField.STRAND)),
        GenomicRange(contig, int(get(RefGeneField.TX_START)) + 1, int(get(RefGeneField.TX_END))),
        exons)


@dataclass(slots=True)
class RefGeneLoader:
    fp: str
    has_bin: bool = True

    def load(self) -> Generator[TranscriptRecord, None, None]:
        # Without the bin column, all fields shift to the left
        offset = 0 if self.has_bin else -1
        for line, r in load_numbered_csv(self.fp, delimiter='\t', comment_prefixes=('#',)):
            try:
                yield parse_refgene_record(r, offset=offset)
            except ValueError as ex:
                raise get_invalid_record(self.fp, line, ex)
