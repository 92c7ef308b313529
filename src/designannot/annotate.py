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

from .config import AnnotationConfig
from .contig_order import ContigOrder
from .emitter import OutputEmitter
from .engine import MergeJoinEngine
from .loaders.bed import BedRegionLoader
from .loaders.interval_list import IntervalListLoader
from .loaders.refgene import RefGeneLoader
from .loaders.reference import load_contig_order
from .stats import AnnotationStats
from .traversal import ReferenceTraversal, run_traversal
from .utils import open_output


def get_traversal(config: AnnotationConfig, order: ContigOrder) -> ReferenceTraversal:
    return ReferenceTraversal(
        order,
        IntervalListLoader(config.interval_fp).load(),
        RefGeneLoader(config.refgene_fp, has_bin=config.refgene_has_bin).load(),
        BedRegionLoader(config.region_fp).load() if config.region_fp else ())


def run_annotation(config: AnnotationConfig) -> AnnotationStats:
    """Annotate all intervals in a single pass, writing one line per interval"""

    # Load the reference contig order
    order = load_contig_order(config.reference_fp)

    with open_output(config.output_fp) as fh:
        emitter = OutputEmitter(fh)
        engine = MergeJoinEngine(order, emitter, region_prefix=config.region_prefix)
        stats = run_traversal(engine, get_traversal(config, order))

    stats.log()
    return stats
