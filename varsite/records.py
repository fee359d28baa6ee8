"""
Interchange record for variants.

This is the canonical representation used at the boundary to genotyping and
serialization: a contig, a 0-based half-open span, the reference allele and an
alternate allele that may be unset.
"""
from dataclasses import dataclass
from typing import Optional


@dataclass
class Variant:
    contig_name: str
    start: int  # 0-based
    end: int  # 0-based, exclusive
    reference_allele: str
    alternate_allele: Optional[str] = None  # None means unset

    def __repr__(self):
        return "Variant({!r}, {}, {}, {!r}, {!r})".format(
            self.contig_name, self.start, self.end, self.reference_allele, self.alternate_allele
        )

    def has_alternate_allele(self) -> bool:
        return self.alternate_allele is not None
