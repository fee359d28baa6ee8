from varsite.records import Variant
from varsite.region import InvalidRegion, Region
from varsite.site import VariantSite
from varsite.vcf import VcfReader


class CommandLineError(Exception):
    """An anticipated command-line error occurred. This ends up as a user-visible error message"""


def format_site(site: VariantSite) -> str:
    """
    Return contig, start, end, reference and alternate allele as tab-separated
    columns. An unset alternate allele is written as '.'.
    """
    variant: Variant = site.to_variant()
    alt = variant.alternate_allele if variant.has_alternate_allele() else "."
    return "\t".join(
        [variant.contig_name, str(variant.start), str(variant.end), variant.reference_allele, alt]
    )


def open_vcf(path):
    try:
        return VcfReader(path)
    except OSError as e:
        raise CommandLineError(f"Error while opening VCF file {path!r}: {e}")
    except ValueError as e:
        raise CommandLineError(f"Unable to read {path!r} as VCF: {e}")


def parse_region(spec: str) -> Region:
    try:
        return Region.parse(spec)
    except InvalidRegion as e:
        raise CommandLineError(f"Invalid region {spec!r}: {e}")
