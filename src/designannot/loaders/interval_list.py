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
from dataclasses import dataclass
from enum import IntEnum
from typing import Generator

from ..genomic_range import GenomicRange
from .bed import is_bed_file, load_bed_ranges
from .csv import load_numbered_csv
from .utils import get_invalid_record, parse_region

INTERVAL_LIST_HEADER_PREFIX = '@'


class IntervalListField(IntEnum):
    CONTIG = 0
    START = 1
    END = 2
    STRAND = 3
    NAME = 4


def parse_interval_list_record(r: list[str]) -> GenomicRange:
    if len(r) == 1:
        return parse_region(r[0])
    if len(r) <= IntervalListField.END:
        raise ValueError("Too few interval list columns")
    return GenomicRange(
        r[IntervalListField.CONTIG],
        int(r[IntervalListField.START]),
        int(r[IntervalListField.END]))


@dataclass(slots=True)
class IntervalListLoader:
    """
    Load target intervals from a Picard interval list, a list of region
    strings (e.g. 'chr1:100-200'), or a BED file (by file extension)
    """

    fp: str

    def _load_interval_list(self) -> Generator[GenomicRange, None, None]:
        for line, r in load_numbered_csv(
            self.fp,
            delimiter='\t',
            comment_prefixes=(INTERVAL_LIST_HEADER_PREFIX, '#')
        ):
            try:
                yield parse_interval_list_record(r)
            except ValueError as ex:
                raise get_invalid_record(self.fp, line, ex)

    def load(self) -> Generator[GenomicRange, None, None]:
        if is_bed_file(self.fp):
            logging.debug("Loading intervals from BED file '%s'." % self.fp)
            return load_bed_ranges(self.fp)
        logging.debug("Loading intervals from interval list '%s'." % self.fp)
        return self._load_interval_list()
