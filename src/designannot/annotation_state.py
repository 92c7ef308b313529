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

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from .constants import DEFAULT_REGION_LABEL_PREFIX, EXON_LABEL_FORMAT, INTRON_UTR_ANNOTATION, UNKNOWN_ANNOTATION
from .errors import DuplicateAnnotationError
from .genomic_range import GenomicRange


@dataclass(slots=True)
class AnnotationState:
    """Genes and exons accumulated for a single interval"""

    gene_names: list[str] = field(default_factory=list)
    exons_by_gene: dict[str, list[GenomicRange]] = field(default_factory=dict)
    exon_numbers_by_gene: dict[str, list[int]] = field(default_factory=dict)
    region_prefix: str = DEFAULT_REGION_LABEL_PREFIX

    def __len__(self) -> int:
        return len(self.gene_names)

    @property
    def is_empty(self) -> bool:
        return len(self.gene_names) == 0

    def is_region_label(self, gene: str) -> bool:
        return gene.startswith(self.region_prefix)

    def has_gene(self, gene: str) -> bool:
        return gene in self.exons_by_gene

    def has_exon(self, gene: str, exon_number: int) -> bool:
        return exon_number in self.exon_numbers_by_gene.get(gene, ())

    def update(self, gene: str, exons: Sequence[GenomicRange], exon_numbers: Sequence[int]) -> int:
        """
        Attach a gene and the exons it has within the interval

        A gene with no exons is recorded as intronic or UTR. Genes derived
        from target regions may be updated again, one exon at a time, and
        exon numbers already recorded for them are skipped. Any other gene
        may only be attached once.

        Returns the number of exons added.
        """

        if len(exons) != len(exon_numbers):
            raise ValueError("Exon ranges and numbers differ in length!")

        if not self.has_gene(gene):
            self.gene_names.append(gene)
            self.exons_by_gene[gene] = list(exons)
            self.exon_numbers_by_gene[gene] = list(exon_numbers)
            return len(exons)

        if not self.is_region_label(gene):
            raise DuplicateAnnotationError(f"Attempting to annotate the same (non-region) gene twice: {gene}!")

        gene_exons = self.exons_by_gene[gene]
        gene_exon_numbers = self.exon_numbers_by_gene[gene]
        n = 0
        for exon, exon_number in zip(exons, exon_numbers):
            if exon_number not in gene_exon_numbers:
                gene_exons.append(exon)
                gene_exon_numbers.append(exon_number)
                n += 1

        assert len(gene_exons) == len(gene_exon_numbers)
        return n

    def render_gene(self, gene: str) -> str:
        exon_numbers = self.exon_numbers_by_gene[gene]
        exons_str = ','.join(
            EXON_LABEL_FORMAT % exon_number
            for exon_number in exon_numbers
        ) if exon_numbers else INTRON_UTR_ANNOTATION
        return f"{gene}[{exons_str}]"

    def render(self) -> str:
        if not self.gene_names:
            return UNKNOWN_ANNOTATION
        return '\t'.join(map(self.render_gene, self.gene_names))
