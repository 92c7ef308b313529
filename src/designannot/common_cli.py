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

from functools import wraps
import logging
import sys
import click

from .config import AnnotationConfig
from .errors import DuplicateAnnotationError, InvalidConfig, InvalidRecord, UnknownContig, UnsortedInput
from .main_config import get_main_config_from_config


existing_file = click.Path(exists=True, file_okay=True, dir_okay=False)
output_file = click.Path(file_okay=True, dir_okay=False, allow_dash=True)


def set_logger(ctx: click.Context, param: click.Parameter, value: str) -> None:
    logging.basicConfig(level=logging._nameToLevel[value.upper()])


def log_option(f):
    return click.option(
        '--log',
        default='WARNING',
        type=click.Choice(list(logging._nameToLevel.keys()), case_sensitive=False),
        callback=set_logger,
        expose_value=False,
        is_eager=True,
        help="Logging level")(f)


def exit_on_error(f):
    """Report fatal errors and exit with a non-zero status"""

    @wraps(f)
    def wrapper(*args, **kwargs):
        try:
            return f(*args, **kwargs)

        except InvalidConfig as ex:
            logging.critical("Invalid configuration%s!" % (': ' + ex.args[0] if ex.args else ''))
            sys.exit(1)

        except (DuplicateAnnotationError, InvalidRecord, UnknownContig, UnsortedInput) as ex:
            logging.critical(ex.args[0])
            sys.exit(1)

        except (PermissionError, FileNotFoundError, IsADirectoryError) as ex:
            logging.critical(ex)
            sys.exit(1)

        except (OSError, ValueError) as ex:
            logging.critical("Annotation failed: %s" % ex)
            sys.exit(1)

    return wrapper


def write_config(config: AnnotationConfig, fp: str) -> None:
    try:
        get_main_config_from_config(config).write(fp)
    except (PermissionError, IsADirectoryError):
        logging.error("Failed to write configuration to '%s'!" % fp)
