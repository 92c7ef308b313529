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

import sys
from contextlib import contextmanager, nullcontext
from typing import Generator, TextIO

from .constants import STDOUT_PATH


@contextmanager
def open_output(fp: str) -> Generator[TextIO, None, None]:
    """Open a text file for writing, or standard output for '-'"""

    with (nullcontext(sys.stdout) if fp == STDOUT_PATH else open(fp, 'w')) as fh:
        yield fh
        fh.flush()
