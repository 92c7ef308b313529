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
import os
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .constants import DEFAULT_REGION_LABEL_PREFIX, STDOUT_PATH
from .errors import InvalidConfig


class AnnotationConfig(BaseModel):

    # Input files
    interval_fp: str = Field(alias='intervalFilePath')
    refgene_fp: str = Field(alias='refGeneFilePath')
    reference_fp: str = Field(alias='referenceFilePath')
    region_fp: Optional[str] = Field(alias='regionFilePath', default=None)

    # Output file
    output_fp: str = Field(alias='outputFilePath', default=STDOUT_PATH)

    # Parameters
    region_prefix: str = Field(alias='regionLabelPrefix', default=DEFAULT_REGION_LABEL_PREFIX)
    refgene_has_bin: bool = Field(alias='refGeneHasBin', default=True)

    model_config = ConfigDict(populate_by_name=True)

    def __init__(self, **data: Any) -> None:
        super().__init__(**data)
        if not self.is_valid():
            raise InvalidConfig()

    @property
    def input_file_paths(self) -> List[str]:
        fps: List[str] = [
            self.interval_fp,
            self.refgene_fp,
            self.reference_fp
        ]
        if self.region_fp is not None:
            fps.append(self.region_fp)
        return fps

    @property
    def writes_to_stdout(self) -> bool:
        return self.output_fp == STDOUT_PATH

    def write(self, fp: str) -> None:
        with open(fp, 'w') as fh:
            fh.write(self.model_dump_json(by_alias=True))

    def is_valid(self) -> bool:
        success: bool = True

        # Validate region label prefix
        if not self.region_prefix or any(c.isspace() for c in self.region_prefix):
            logging.error("Invalid region label prefix '%s'!" % self.region_prefix)
            success = False

        # Validate output file path
        if not self.writes_to_stdout:
            output_fp = os.path.abspath(self.output_fp)
            if any(os.path.abspath(fp) == output_fp for fp in self.input_file_paths):
                logging.error("Output file path '%s' matches an input file!" % self.output_fp)
                success = False

        return success
