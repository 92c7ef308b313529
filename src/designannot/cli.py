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

import errno
import logging
import os
from typing import Optional

import click

from . import __version__
from .annotate import run_annotation
from .common_cli import existing_file, exit_on_error, log_option, output_file, write_config
from .config import AnnotationConfig
from .constants import DEFAULT_REGION_LABEL_PREFIX, STDOUT_PATH
from .main_config import load_main_config


def check_input_files(config: AnnotationConfig) -> None:
    for fp in config.input_file_paths:
        if not os.path.isfile(fp):
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), fp)


@click.group(invoke_without_command=True)
@click.option('-c', '--config', 'config_fp', type=existing_file, help="Configuration file path")
@log_option
@click.version_option(__version__)
@click.pass_context
@exit_on_error
def main(ctx: click.Context, config_fp: Optional[str]):
    if ctx.invoked_subcommand is None:
        if not config_fp:
            raise click.UsageError("Configuration required if no subcommand is specified!")

        # Load configuration
        config = load_main_config(config_fp)

        # Check application version
        if config.app_version != __version__:
            logging.warning(
                "Application version in configuration differs (%s vs. %s)!" %
                (config.app_version, __version__))

        # Check input files
        check_input_files(config.params)

        run_annotation(config.params)
        ctx.exit(0)


@click.command()
@click.argument('interval_fp', type=existing_file, metavar='INTERVALS')
@click.argument('refgene_fp', type=existing_file, metavar='REFGENE')
@click.argument('reference_fp', type=existing_file, metavar='REFERENCE')
@click.option('--regions', 'region_fp', type=existing_file, help="Target region BED file path")
@click.option('-o', '--output', 'output_fp', type=output_file, default=STDOUT_PATH, help="Output file path")
@click.option(
    '--region-prefix',
    default=DEFAULT_REGION_LABEL_PREFIX,
    show_default=True,
    help="Gene label prefix for target region annotations")
@click.option('--no-bin', 'no_bin', is_flag=True, help="The refGene file has no bin column")
@click.option('--config-out', 'config_out_fp', type=output_file, help="Write the run configuration to file")
@log_option
@exit_on_error
def annotate(
    interval_fp: str,
    refgene_fp: str,
    reference_fp: str,
    region_fp: str | None,
    output_fp: str,
    region_prefix: str,
    no_bin: bool,
    config_out_fp: str | None
) -> None:
    """
    Annotate target intervals with overlapping genes and exons

    \b
    INTERVALS is the interval list, region list, or BED file path
    REFGENE is the UCSC refGene file path
    REFERENCE is the reference FASTA, FASTA index, or sequence dictionary path
    """

    config = AnnotationConfig(
        interval_fp=interval_fp,
        refgene_fp=refgene_fp,
        reference_fp=reference_fp,
        region_fp=region_fp,
        output_fp=output_fp,
        region_prefix=region_prefix,
        refgene_has_bin=not no_bin)

    if config_out_fp:
        write_config(config, config_out_fp)

    run_annotation(config)


main.add_command(annotate)
