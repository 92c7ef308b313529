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

# Annotation placeholders
UNKNOWN_ANNOTATION = 'Unknown'
INTRON_UTR_ANNOTATION = 'Intron/UTR'

# Exon descriptor template
EXON_LABEL_FORMAT = 'exon_%d'

# Gene label prefix for annotations derived from auxiliary target regions
DEFAULT_REGION_LABEL_PREFIX = 'TCGA_'

# Forward and reverse separators between the region name and exon number
REGION_LABEL_SEPARATOR_RE = '_f|_r'

# Standard output path
STDOUT_PATH = '-'

# Reference index and dictionary file extensions
FAI_EXT = '.fai'
SEQ_DICT_EXT = '.dict'
BED_EXT = '.bed'
