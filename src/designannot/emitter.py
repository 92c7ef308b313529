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
from typing import TextIO

from .annotation_state import AnnotationState
from .genomic_range import GenomicRange


def format_annotation_line(interval: GenomicRange, state: AnnotationState) -> str:
    return '\t'.join([
        interval.contig,
        str(interval.start),
        str(interval.end),
        state.render()
    ])


@dataclass(slots=True)
class OutputEmitter:
    fh: TextIO
    lines: int = 0

    def __call__(self, interval: GenomicRange, state: AnnotationState) -> None:
        self.fh.write(format_annotation_line(interval, state))
        self.fh.write('\n')
        self.lines += 1
