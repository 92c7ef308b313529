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

from ..constants import BED_EXT
from ..genomic_range import GenomicRange
from ..region import RegionRecord
from .csv import load_numbered_csv
from .utils import get_invalid_record, parse_bed_range

BED_COMMENT_PREFIXES = ('#', 'track', 'browser')


class BedField(IntEnum):
    CONTIG = 0
    START = 1
    END = 2
    NAME = 3


def is_bed_file(fp: str) -> bool:
    return fp.lower().endswith(BED_EXT)


def parse_bed_record(r: list[str]) -> GenomicRange:
    if len(r) <= BedField.END:
        raise ValueError("Too few BED columns")
    return parse_bed_range(r[BedField.CONTIG], r[BedField.START], r[BedField.END])


def load_bed_ranges(fp: str) -> Generator[GenomicRange, None, None]:
    for line, r in load_numbered_csv(fp, delimiter='\t', comment_prefixes=BED_COMMENT_PREFIXES):
        try:
            yield parse_bed_record(r)
        except ValueError as ex:
            raise get_invalid_record(fp, line, ex)


@dataclass(slots=True)
class BedRegionLoader:
    """Load target regions, labelled by the BED name field"""

    fp: str

    @staticmethod
    def parse_record(r: list[str]) -> RegionRecord:
        label = r[BedField.NAME].strip() if len(r) > BedField.NAME else None
        return RegionRecord(parse_bed_record(r), label or None)

    def load(self) -> Generator[RegionRecord, None, None]:
        for line, r in load_numbered_csv(self.fp, delimiter='\t', comment_prefixes=BED_COMMENT_PREFIXES):
            try:
                yield self.parse_record(r)
            except ValueError as ex:
                raise get_invalid_record(self.fp, line, ex)
