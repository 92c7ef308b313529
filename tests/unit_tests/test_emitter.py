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

from io import StringIO
from designannot.annotation_state import AnnotationState
from designannot.emitter import OutputEmitter, format_annotation_line
from designannot.genomic_range import GenomicRange


def test_format_annotation_line():
    state = AnnotationState()
    state.update('geneA', [GenomicRange('chr1', 160, 170)], [3])
    assert format_annotation_line(GenomicRange('chr1', 100, 200), state) == 'chr1\t100\t200\tgeneA[exon_3]'


def test_output_emitter():
    fh = StringIO()
    emitter = OutputEmitter(fh)
    emitter(GenomicRange('chr1', 100, 200), AnnotationState())
    emitter(GenomicRange('chr2', 5, 6), AnnotationState())
    assert fh.getvalue() == 'chr1\t100\t200\tUnknown\nchr2\t5\t6\tUnknown\n'
    assert emitter.lines == 2
