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

import os
import pathlib

from designannot.contig_order import ContigOrder
from designannot.genomic_range import GenomicRange
from designannot.transcript import Exon, Strand, TranscriptRecord

from .constants import CONTIGS


def get_data_file_path(fp):
    return os.path.join(pathlib.Path(__file__).parent.absolute(), 'data', fp)


def get_contig_order(contigs=None):
    return ContigOrder.from_names(contigs or CONTIGS)


def get_transcript(gene, contig, start, end, exons=(), name=None, strand='+'):
    return TranscriptRecord(
        name or f"NM_{gene}",
        gene,
        Strand(strand),
        GenomicRange(contig, start, end),
        tuple(
            Exon(contig, exon_start, exon_end, exon_number)
            for exon_start, exon_end, exon_number in exons
        ))


class EmitCollector:
    def __init__(self):
        self.emitted = []

    def __call__(self, interval, state):
        self.emitted.append((interval, state.render()))

    @property
    def intervals(self):
        return [interval for interval, _ in self.emitted]

    @property
    def lines(self):
        return {
            interval: annotation
            for interval, annotation in self.emitted
        }
