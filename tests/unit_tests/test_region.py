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

import pytest
from designannot.errors import MalformedRegionLabelError
from designannot.genomic_range import GenomicRange
from designannot.region import RegionLabel, RegionRecord, parse_region_label


@pytest.mark.parametrize('label,exp_gene,exp_exon_number', [
    ('TCGA6K_f12', 'TCGA_TCGA6K', 11),
    ('TCGA6K_r1', 'TCGA_TCGA6K', 0),
    ('BRCA1_f3', 'TCGA_BRCA1', 2)
])
def test_parse_region_label(label, exp_gene, exp_exon_number):
    assert parse_region_label(label) == RegionLabel(exp_gene, exp_exon_number)


@pytest.mark.parametrize('label', [
    None,
    '',
    'TCGA6K',
    'TCGA6K_fx',
    'TCGA6K_f',
    'TCGA6K_f0',
    '_f12'
])
def test_parse_region_label_malformed(label):
    with pytest.raises(MalformedRegionLabelError):
        parse_region_label(label)


def test_parse_region_label_prefix():
    assert parse_region_label('X_f2', prefix='REGION_').gene_label == 'REGION_X'


def test_region_record_get_label():
    region = RegionRecord(GenomicRange('chr1', 10, 20), 'TCGA6K_f12')
    assert region.get_label() == RegionLabel('TCGA_TCGA6K', 11)

    with pytest.raises(MalformedRegionLabelError):
        RegionRecord(GenomicRange('chr1', 10, 20)).get_label()
