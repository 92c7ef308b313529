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
from designannot.errors import InvalidRecord
from designannot.genomic_range import GenomicRange
from designannot.loaders.bed import BedRegionLoader, load_bed_ranges
from designannot.loaders.interval_list import IntervalListLoader
from designannot.loaders.refgene import RefGeneLoader, parse_refgene_record
from designannot.loaders.reference import load_contig_order
from designannot.loaders.utils import parse_region
from designannot.region import RegionRecord
from .constants import (
    CONTIGS, FASTA_FP, FAI_FP, INTERVAL_BED_FP, INTERVAL_LIST_FP, REFGENE_FP, REGION_BED_FP, REGION_LIST_FP,
    SEQ_DICT_FP
)
from .utils import get_data_file_path


REFGENE_RECORD = [
    '585', 'NM_0001', 'chr1', '+', '149', '380', '149', '380', '3',
    '149,159,349,', '155,170,360,', '0', 'geneA', 'cmpl', 'cmpl', '0,0,0,'
]


def write_lines(tmp_path, fn, lines):
    fp = tmp_path / fn
    fp.write_text(''.join(f"{line}\n" for line in lines))
    return str(fp)


@pytest.mark.parametrize('s,exp', [
    ('chr1:100-200', GenomicRange('chr1', 100, 200)),
    ('chr1:1,000-2,000', GenomicRange('chr1', 1000, 2000)),
    ('chr2:55', GenomicRange('chr2', 55, 55))
])
def test_parse_region(s, exp):
    assert parse_region(s) == exp


@pytest.mark.parametrize('s', ['chr1', 'chr1:a-b', 'chr1:200-100'])
def test_parse_region_invalid(s):
    with pytest.raises(ValueError):
        parse_region(s)


def test_interval_list_loader():
    intervals = list(IntervalListLoader(get_data_file_path(INTERVAL_LIST_FP)).load())
    assert intervals == [
        GenomicRange('chr1', 100, 200),
        GenomicRange('chr1', 300, 400),
        GenomicRange('chr1', 1020, 1100),
        GenomicRange('chr2', 50, 60)
    ]


def test_interval_list_loader_bed():
    intervals = list(IntervalListLoader(get_data_file_path(INTERVAL_BED_FP)).load())
    assert intervals == [
        GenomicRange('chr1', 100, 200),
        GenomicRange('chr1', 300, 400)
    ]


def test_interval_list_loader_regions():
    intervals = list(IntervalListLoader(get_data_file_path(REGION_LIST_FP)).load())
    assert intervals == [
        GenomicRange('chr1', 100, 200),
        GenomicRange('chr1', 1020, 1100),
        GenomicRange('chr2', 55, 55)
    ]


def test_interval_list_loader_invalid(tmp_path):
    fp = write_lines(tmp_path, 'invalid.interval_list', [
        '@HD\tVN:1.0',
        'chr1\t100\t200\t+\tt1',
        'chr1\t300\tx\t+\tt2'
    ])
    with pytest.raises(InvalidRecord, match='line 3'):
        list(IntervalListLoader(fp).load())


def test_load_bed_ranges_invalid(tmp_path):
    fp = write_lines(tmp_path, 'invalid.bed', ['chr1\t100'])
    with pytest.raises(InvalidRecord):
        list(load_bed_ranges(fp))


@pytest.mark.parametrize('line', ['chr1\t100\t100', 'chr1\t100\t90'])
def test_load_bed_ranges_empty(tmp_path, line):
    fp = write_lines(tmp_path, 'empty.bed', ['chr1\t9\t20', line])
    with pytest.raises(InvalidRecord, match='line 2.*Empty BED range'):
        list(load_bed_ranges(fp))


def test_bed_region_loader():
    regions = list(BedRegionLoader(get_data_file_path(REGION_BED_FP)).load())
    assert regions == [
        RegionRecord(GenomicRange('chr1', 310, 320), 'TCGA6K_f3'),
        RegionRecord(GenomicRange('chr1', 330, 340), 'TCGA6K_f3'),
        RegionRecord(GenomicRange('chr1', 350, 355), 'TCGA6K_r4'),
        RegionRecord(GenomicRange('chr1', 1030, 1040), 'BROKEN')
    ]


def test_bed_region_loader_no_name(tmp_path):
    fp = write_lines(tmp_path, 'regions.bed', ['chr1\t9\t20', 'chr1\t29\t40\t '])
    assert [r.label for r in BedRegionLoader(fp).load()] == [None, None]


def test_parse_refgene_record():
    transcript = parse_refgene_record(REFGENE_RECORD)
    assert transcript.name == 'NM_0001'
    assert transcript.gene_name == 'geneA'
    assert transcript.strand.is_plus
    assert transcript.range == GenomicRange('chr1', 150, 380)
    assert [(e.start, e.end, e.number) for e in transcript.exons] == [
        (150, 155, 0),
        (160, 170, 1),
        (350, 360, 2)
    ]


def test_parse_refgene_record_no_bin():
    transcript = parse_refgene_record(REFGENE_RECORD[1:], offset=-1)
    assert transcript.gene_name == 'geneA'
    assert transcript.range == GenomicRange('chr1', 150, 380)


def test_parse_refgene_record_no_gene_name():
    transcript = parse_refgene_record(REFGENE_RECORD[:11])
    assert transcript.gene_name == 'NM_0001'


@pytest.mark.parametrize('i,value', [
    # Exon count
    (8, '2'),
    # Strand
    (3, '*'),
    # Transcript end
    (5, 'x')
])
def test_parse_refgene_record_invalid(i, value):
    r = REFGENE_RECORD.copy()
    r[i] = value
    with pytest.raises(ValueError):
        parse_refgene_record(r)


def test_refgene_loader():
    transcripts = list(RefGeneLoader(get_data_file_path(REFGENE_FP)).load())
    assert [t.name for t in transcripts] == ['NM_0001', 'NM_0003', 'NM_0002']
    assert [t.gene_name for t in transcripts] == ['geneA', 'geneA', 'geneB']


def test_refgene_loader_invalid(tmp_path):
    fp = write_lines(tmp_path, 'refGene.txt', ['585\tNM_1\tchr1\t+\t10'])
    with pytest.raises(InvalidRecord, match='line 1'):
        list(RefGeneLoader(fp).load())


@pytest.mark.parametrize('fp', [FASTA_FP, FAI_FP, SEQ_DICT_FP])
def test_load_contig_order(fp):
    order = load_contig_order(get_data_file_path(fp))
    assert order.contigs == CONTIGS


def test_load_contig_order_empty(tmp_path):
    fp = write_lines(tmp_path, 'empty.dict', ['@HD\tVN:1.0'])
    with pytest.raises(ValueError):
        load_contig_order(fp)
