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
from dataclasses import dataclass


@dataclass(slots=True, init=False)
class AnnotationStats:
    loci: int
    updates: int
    region_updates: int
    intervals: int
    transcripts: int
    regions: int
    malformed_regions: int

    def __init__(self) -> None:
        self.loci = 0
        self.updates = 0
        self.region_updates = 0
        self.intervals = 0
        self.transcripts = 0
        self.regions = 0
        self.malformed_regions = 0

    def log(self) -> None:
        logging.info(
            "Visited %d loci: %d intervals annotated with %d transcript updates "
            "from %d transcripts and %d region updates from %d regions." %
            (self.loci, self.intervals, self.updates, self.transcripts, self.region_updates, self.regions))

        if self.malformed_regions > 0:
            logging.warning("%d regions were skipped due to malformed labels!" % self.malformed_regions)
