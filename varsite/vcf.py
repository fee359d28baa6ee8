"""
Functions for reading VCFs into interchange records and variant sites.
"""
import os
import logging
from os import PathLike
from typing import Iterator, List, Optional, Union

from pysam import VariantFile, VariantRecord

from .records import Variant
from .region import Region
from .site import VariantSite
from .utils import warn_once

logger = logging.getLogger(__name__)

# ALT alleles that stand for "any allele other than the reference" in gVCFs
NON_REF_ALLELES = frozenset(("<NON_REF>", "<*>"))


class VcfError(Exception):
    pass


class VcfIndexMissing(VcfError):
    pass


class VcfInvalidChromosome(VcfError):
    pass


def is_symbolic(allele: str) -> bool:
    """
    Whether allele is not a plain base sequence: <ID> alleles, breakends
    and the spanning deletion allele '*'.
    """
    return allele == "*" or allele.startswith("<") or "[" in allele or "]" in allele


def variants_from_record(record: VariantRecord) -> List[Variant]:
    """
    Return one interchange record per ALT allele of a VCF record.

    <NON_REF> and <*> become records without an alternate allele that span
    the whole reference block (INFO/END is honoured). Other symbolic alleles
    are skipped.
    """
    variants = []
    for alt in record.alts or ():
        if alt in NON_REF_ALLELES:
            alternate_allele = None
        elif is_symbolic(alt):
            warn_once(
                logger,
                "Skipping symbolic allele %s at %s:%d.",
                alt,
                record.chrom,
                record.pos,
            )
            continue
        else:
            alternate_allele = alt
        variants.append(
            Variant(
                contig_name=record.chrom,
                start=record.start,
                end=record.stop,
                reference_allele=record.ref,
                alternate_allele=alternate_allele,
            )
        )
    return variants


def site_from_variant(variant: Variant) -> VariantSite:
    """
    Turn an interchange record into a site.

    Records without an alternate allele are reference blocks and become
    symbolic sites at the start of the block.
    """
    if variant.has_alternate_allele():
        return VariantSite.from_variant(variant)
    return VariantSite.from_region(Region(variant.contig_name, variant.start, variant.end))


class VcfReader:
    """
    Read a VCF file as a stream of interchange records.
    """

    def __init__(self, path: Union[str, PathLike]):
        self._path = path
        self._vcf_reader = VariantFile(os.fspath(path))
        self.contigs = list(self._vcf_reader.header.contigs)
        logger.debug("Found %d contig(s) in the VCF header.", len(self.contigs))

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()

    def close(self):
        self._vcf_reader.close()

    def index_exists(self) -> bool:
        """Check if VCF is indexed (.tbi or .csi)"""
        return self._vcf_reader.index is not None

    def _fetch(self, chromosome: str, start: int = 0, end: Optional[int] = None):
        try:
            records = self._vcf_reader.fetch(chromosome, start=start, stop=end)
        except ValueError as e:
            if "invalid contig" in e.args[0]:
                raise VcfInvalidChromosome(e.args[0]) from None
            elif "fetch requires an index" in e.args[0]:
                raise VcfIndexMissing(f"{self._path} is missing an index (.tbi or .csi)") from None
            else:
                raise
        return records

    def fetch(self, chromosome: str, start: int = 0, end: Optional[int] = None) -> Iterator[Variant]:
        """
        Yield records from a single chromosome, optionally restricted to a
        region. Requires an index.
        """
        for record in self._fetch(chromosome, start=start, end=end):
            yield from variants_from_record(record)

    def __iter__(self) -> Iterator[Variant]:
        for record in self._vcf_reader:
            yield from variants_from_record(record)

    def sites(self, region: Optional[Region] = None) -> Iterator[VariantSite]:
        """Yield sites, either from the whole file or from one region"""
        if region is None:
            variants = iter(self)
        else:
            variants = self.fetch(region.reference_name, region.start, region.end)
        n = 0
        for variant in variants:
            n += 1
            yield site_from_variant(variant)
        logger.debug("Read %d site(s) from %s", n, self._path)
