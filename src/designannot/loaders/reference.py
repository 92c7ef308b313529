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

import logging
from contextlib import contextmanager
from typing import Generator

from pysam import FastaFile

from ..constants import FAI_EXT, SEQ_DICT_EXT
from ..contig_order import ContigOrder
from .csv import load_csv, load_numbered_csv
from .utils import get_invalid_record

SEQ_DICT_SEQUENCE_TAG = '@SQ'
SEQ_DICT_NAME_PREFIX = 'SN:'


def get_fasta_file(fp: str) -> FastaFile:
    try:
        return FastaFile(fp)
    except IOError as ex:
        logging.critical("Failed to load reference file!")
        raise ex


@contextmanager
def open_fasta(fp: str) -> Generator[FastaFile, None, None]:
    ff = get_fasta_file(fp)
    try:
        yield ff
    finally:
        ff.close()


def load_fai_contigs(fp: str) -> list[str]:
    return [r[0] for r in load_csv(fp, delimiter='\t') if r]


def load_seq_dict_contigs(fp: str) -> list[str]:
    """Collect the sequence names from the @SQ lines of a SAM sequence dictionary"""

    contigs: list[str] = []
    for line, r in load_numbered_csv(fp, delimiter='\t'):
        if r[0] != SEQ_DICT_SEQUENCE_TAG:
            continue
        names = [f[len(SEQ_DICT_NAME_PREFIX):] for f in r[1:] if f.startswith(SEQ_DICT_NAME_PREFIX)]
        if len(names) != 1 or not names[0]:
            raise get_invalid_record(fp, line, ValueError("Missing sequence name"))
        contigs.append(names[0])
    return contigs


def load_fasta_contigs(fp: str) -> list[str]:
    with open_fasta(fp) as ff:
        return list(ff.references)


def load_contig_order(fp: str) -> ContigOrder:
    """Load the contig order from a FASTA index, a sequence dictionary, or an indexed FASTA file"""

    if fp.endswith(FAI_EXT):
        contigs = load_fai_contigs(fp)
    elif fp.endswith(SEQ_DICT_EXT):
        contigs = load_seq_dict_contigs(fp)
    else:
        contigs = load_fasta_contigs(fp)

    if not contigs:
        raise ValueError(f"No contigs found in reference file '{fp}'!")

    logging.debug("Loaded %d contigs from '%s'." % (len(contigs), fp))
    return ContigOrder.from_names(contigs)
