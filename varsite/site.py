"""
Discovered variant sites.

A VariantSite is the unit handed from variant discovery to genotyping: a
contig, a 0-based start, the reference allele and, if known, the alternate
allele. Sites without an alternate allele are symbolic models of a non-ref
allele ("something varies here").
"""
from dataclasses import dataclass
from typing import Optional, Union

from .records import Variant
from .region import RegionLike

# Generic reference allele used for symbolic sites
NON_REF_PLACEHOLDER = "N"


class VariantSiteError(Exception):
    pass


class InvalidVariantSite(VariantSiteError):
    pass


class MissingAlternateAllele(VariantSiteError):
    pass


@dataclass(frozen=True)
class VariantSite:
    """
    A variant site and its alleles.

    Coordinates are 0-based. The site covers the half-open interval
    [start, end), where end is derived from the length of the reference allele.

    Use one of the from_* constructors instead of calling this directly.
    """

    contig_name: str
    start: int
    reference_allele: str
    alternate_allele: Optional[str] = None

    def __post_init__(self):
        if self.start < 0:
            raise InvalidVariantSite(f"Negative start position {self.start} on {self.contig_name}")
        if self.reference_allele is None:
            raise InvalidVariantSite("Reference allele must not be None")
        if self.alternate_allele is not None and not self.alternate_allele:
            raise InvalidVariantSite(
                f"Empty alternate allele at {self.contig_name}:{self.start + 1}"
            )

    @classmethod
    def from_variant(cls, variant: Variant) -> "VariantSite":
        """
        Build a site from an interchange record. The record's end is ignored.

        The alternate allele of the record must be set. Use from_region for
        symbolic records.
        """
        if variant.alternate_allele is None:
            raise MissingAlternateAllele(
                "Variant at {}:{} has no alternate allele".format(
                    variant.contig_name, variant.start + 1
                )
            )
        return cls(
            variant.contig_name,
            int(variant.start),
            variant.reference_allele,
            variant.alternate_allele,
        )

    @classmethod
    def from_alleles(
        cls, contig_name: str, start: int, reference_allele: str, alternate_allele: str
    ) -> "VariantSite":
        """Build a site with a known substitution"""
        if not reference_allele:
            raise InvalidVariantSite(f"Empty reference allele at {contig_name}:{start + 1}")
        return cls(contig_name, start, reference_allele, alternate_allele)

    @classmethod
    def from_region(cls, region: RegionLike) -> "VariantSite":
        """
        Build a symbolic non-ref site at the start of a region.

        The reference allele is the generic placeholder "N", so the site is
        always a single base long, whatever the region's end is.
        """
        return cls(region.reference_name, int(region.start), NON_REF_PLACEHOLDER, None)

    def is_non_ref_model(self) -> bool:
        """True if this is a symbolic model of a non-ref allele"""
        return self.alternate_allele is None

    @property
    def end(self) -> int:
        return self.start + len(self.reference_allele)

    @property
    def length(self) -> int:
        return len(self.reference_allele)

    def overlaps(self, other: Union["VariantSite", RegionLike]) -> bool:
        """
        Whether this site overlaps another site or a region on the same contig.

        Intervals are half-open: a site ending where the other one starts does
        not overlap it. Alleles are not compared. A region end of None is
        unbounded. Empty intervals overlap nothing.
        """
        if isinstance(other, VariantSite):
            contig_name, start, end = other.contig_name, other.start, other.end
        else:
            contig_name, start, end = other.reference_name, other.start, other.end
        if self.start == self.end or start == end:
            return False
        return (
            self.contig_name == contig_name
            and (end is None or self.start < end)
            and self.end > start
        )

    def to_variant(self) -> Variant:
        """Return the interchange record for this site"""
        variant = Variant(
            contig_name=self.contig_name,
            start=self.start,
            end=self.end,
            reference_allele=self.reference_allele,
        )
        if self.alternate_allele is not None:
            variant.alternate_allele = self.alternate_allele
        return variant

    def _sort_key(self):
        return (
            self.contig_name,
            self.start,
            self.end,
            self.reference_allele,
            self.alternate_allele is not None,
            self.alternate_allele or "",
        )

    def __lt__(self, other):
        if not isinstance(other, VariantSite):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __le__(self, other):
        if not isinstance(other, VariantSite):
            return NotImplemented
        return self._sort_key() <= other._sort_key()

    def __gt__(self, other):
        if not isinstance(other, VariantSite):
            return NotImplemented
        return self._sort_key() > other._sort_key()

    def __ge__(self, other):
        if not isinstance(other, VariantSite):
            return NotImplemented
        return self._sort_key() >= other._sort_key()

    def __str__(self):
        alt = "<NON_REF>" if self.alternate_allele is None else self.alternate_allele
        return f"{self.contig_name}:{self.start + 1}-{self.end} {self.reference_allele}>{alt}"
