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

import json
from click.testing import CliRunner
import pytest
from designannot import __version__
from designannot.cli import main
from designannot.config import AnnotationConfig
from designannot.main_config import get_main_config_from_config
from .constants import (
    EXPECTED_OUTPUT, FAI_FP, INTERVAL_LIST_FP, REFGENE_FP, REGION_BED_FP, UNSORTED_INTERVAL_LIST_FP)
from .utils import get_data_file_path


def get_annotate_args(interval_fp=INTERVAL_LIST_FP, output_fp=None, regions=True):
    args = [
        'annotate',
        get_data_file_path(interval_fp),
        get_data_file_path(REFGENE_FP),
        get_data_file_path(FAI_FP)
    ]
    if regions:
        args += ['--regions', get_data_file_path(REGION_BED_FP)]
    if output_fp:
        args += ['-o', output_fp]
    return args


def read_lines(fp):
    with open(fp) as fh:
        return fh.read().splitlines()


def test_annotate(tmp_path):
    output_fp = str(tmp_path / 'out.tsv')
    result = CliRunner().invoke(main, get_annotate_args(output_fp=output_fp))
    assert result.exit_code == 0
    assert read_lines(output_fp) == EXPECTED_OUTPUT


def test_annotate_stdout():
    result = CliRunner().invoke(main, get_annotate_args(regions=False))
    assert result.exit_code == 0
    assert result.stdout.splitlines() == [
        line.split('\tTCGA_')[0]
        for line in EXPECTED_OUTPUT
    ]


def test_annotate_config_out(tmp_path):
    output_fp = str(tmp_path / 'out.tsv')
    config_fp = str(tmp_path / 'config.json')
    result = CliRunner().invoke(main, [
        *get_annotate_args(output_fp=output_fp),
        '--region-prefix', 'REGION_',
        '--config-out', config_fp
    ])
    assert result.exit_code == 0

    with open(config_fp) as fh:
        d = json.load(fh)
    assert d['appVersion'] == __version__
    assert d['params']['regionLabelPrefix'] == 'REGION_'
    assert d['params']['outputFilePath'] == output_fp

    assert read_lines(output_fp)[1].endswith('\tREGION_TCGA6K[exon_2,exon_3]')


def test_annotate_unsorted(tmp_path):
    output_fp = str(tmp_path / 'out.tsv')
    result = CliRunner().invoke(main, get_annotate_args(
        interval_fp=UNSORTED_INTERVAL_LIST_FP, output_fp=output_fp))
    assert result.exit_code == 1


def test_annotate_missing_file():
    result = CliRunner().invoke(main, get_annotate_args(interval_fp='missing.interval_list'))
    assert result.exit_code == 2


def test_main_config(tmp_path):
    output_fp = str(tmp_path / 'out.tsv')
    config_fp = str(tmp_path / 'config.json')
    config = AnnotationConfig(
        interval_fp=get_data_file_path(INTERVAL_LIST_FP),
        refgene_fp=get_data_file_path(REFGENE_FP),
        reference_fp=get_data_file_path(FAI_FP),
        region_fp=get_data_file_path(REGION_BED_FP),
        output_fp=output_fp)
    get_main_config_from_config(config).write(config_fp)

    result = CliRunner().invoke(main, ['-c', config_fp])
    assert result.exit_code == 0
    assert read_lines(output_fp) == EXPECTED_OUTPUT


@pytest.mark.parametrize('content,exit_code', [
    ('{', 1),
    (json.dumps({'appName': 'other'}), 1)
])
def test_main_config_invalid(tmp_path, content, exit_code):
    config_fp = tmp_path / 'config.json'
    config_fp.write_text(content)
    result = CliRunner().invoke(main, ['-c', str(config_fp)])
    assert result.exit_code == exit_code


def test_main_no_config():
    result = CliRunner().invoke(main, [])
    assert result.exit_code == 2


def test_main_version():
    result = CliRunner().invoke(main, ['--version'])
    assert result.exit_code == 0
    assert __version__ in result.output
