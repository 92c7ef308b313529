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


class InvalidConfig(Exception):
    pass


class InvalidRecord(ValueError):
    def __init__(self, fp: str, line: int, reason: str) -> None:
        super().__init__(f"Invalid record at line {line} in '{fp}': {reason}!")
        self.fp = fp
        self.line = line


class UnknownContig(ValueError):
    def __init__(self, contig: str) -> None:
        super().__init__(f"Contig '{contig}' not found in the reference dictionary!")
        self.contig = contig


class UnsortedInput(ValueError):
    pass


class DuplicateAnnotationError(Exception):
    pass


class MalformedRegionLabelError(ValueError):
    pass
