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
import re

from charset_normalizer import detect

from ..errors import InvalidRecord
from ..genomic_range import GenomicRange


region_re = re.compile(r'^(?P<contig>[^:\s]+):(?P<start>[\d,]+)(?:-(?P<end>[\d,]+))?$')


def detect_encoding(fp: str) -> str:
    with open(fp, 'rb') as rfh:
        encoding = detect(rfh.read(10000))['encoding'] or 'utf-8'
    logging.debug("File '%s' encoding: %s." % (fp, encoding))
    return encoding


def parse_list(s: str, delimiter: str = ',') -> list[str]:
    return [
        item for item in [
            raw.strip()
            for raw in s.split(delimiter)
        ]
        if item
    ]


def parse_int_list(s: str, delimiter: str = ',') -> list[int]:
    return [int(x) for x in parse_list(s, delimiter=delimiter)]


def parse_region(s: str) -> GenomicRange:
    """Parse a region string such as 'chr1:1,000-2,000' or 'chr1:1500'"""

    m = region_re.match(s.strip())
    if m is None:
        raise ValueError(f"Invalid region '{s}'")
    start = int(m.group('start').replace(',', ''))
    end_s = m.group('end')
    end = int(end_s.replace(',', '')) if end_s else start
    return GenomicRange(m.group('contig'), start, end)


def parse_bed_range(contig: str, start: str, end: str) -> GenomicRange:
    """Convert a zero-based, half-open BED range; empty ranges are rejected"""

    bed_start = int(start)
    bed_end = int(end)
    if bed_end <= bed_start:
        raise ValueError(f"Empty BED range {contig}:{bed_start}-{bed_end}!")
    return GenomicRange(contig, bed_start + 1, bed_end)


def get_invalid_record(fp: str, line: int, ex: Exception) -> InvalidRecord:
    reason = str(ex.args[0]).rstrip('!') if ex.args else type(ex).__name__
    return InvalidRecord(fp, line, reason)
