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
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from . import __version__ as APP_VERSION
from .config import AnnotationConfig
from .errors import InvalidConfig


class MainConfig(BaseModel):
    app_name: Literal['designannot'] = Field(alias='appName', default='designannot')
    app_version: str = Field(alias='appVersion', default=APP_VERSION)
    params: AnnotationConfig = Field()

    model_config = ConfigDict(populate_by_name=True)

    def write(self, fp: str) -> None:
        with open(fp, 'w') as fh:
            fh.write(self.model_dump_json(by_alias=True))


def get_main_config_from_config(config: AnnotationConfig) -> MainConfig:
    return MainConfig(params=config)


def load_main_config(fp: str) -> MainConfig:
    with open(fp) as fh:
        try:
            config_dict = json.load(fh)
        except json.JSONDecodeError:
            raise InvalidConfig("not a JSON")

    try:
        config = MainConfig.model_validate(config_dict)
    except ValidationError as ex:
        raise InvalidConfig(f"{ex.error_count()} validation errors")

    # Nested models are validated without running their own checks
    if not config.params.is_valid():
        raise InvalidConfig()

    return config
