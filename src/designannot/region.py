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

import re
from dataclasses import dataclass

from .constants import DEFAULT_REGION_LABEL_PREFIX, REGION_LABEL_SEPARATOR_RE
from .errors import MalformedRegionLabelError
from .genomic_range import GenomicRange


region_label_separator_re = re.compile(REGION_LABEL_SEPARATOR_RE)


@dataclass(slots=True, frozen=True)
class RegionLabel:
    gene_label: str
    exon_number: int


def parse_region_label(label: str | None, prefix: str = DEFAULT_REGION_LABEL_PREFIX) -> RegionLabel:
    """
    Split a target region name (e.g. 'TCGA6K_f12') into the gene label
    ('TCGA_TCGA6K') and the zero-based exon number (11)
    """

    if not label:
        raise MalformedRegionLabelError("Missing region label!")

    parts = region_label_separator_re.split(label)
    if len(parts) < 2 or not parts[0]:
        raise MalformedRegionLabelError(f"Invalid region label '{label}': missing exon suffix!")

    try:
        exon_number = int(parts[1])
    except ValueError:
        raise MalformedRegionLabelError(f"Invalid region label '{label}': exon number not an integer!")

    if exon_number < 1:
        raise MalformedRegionLabelError(f"Invalid region label '{label}': exon number not strictly positive!")

    return RegionLabel(prefix + parts[0], exon_number - 1)


@dataclass(slots=True, frozen=True)
class RegionRecord:
    range: GenomicRange
    label: str | None = None

    def get_label(self, prefix: str = DEFAULT_REGION_LABEL_PREFIX) -> RegionLabel:
        return parse_region_label(self.label, prefix=prefix)
