"""
List the variant sites in a VCF file

Every ALT allele of a record becomes one site. gVCF reference blocks
(ALT <NON_REF> or <*>) become symbolic sites, which are printed with '.' as
their alternate allele. Output columns are contig, 0-based start, end,
reference allele and alternate allele.
"""
import sys
import logging

from varsite.cli import format_site, open_vcf, parse_region
from varsite.utils import plural_s

logger = logging.getLogger(__name__)


# fmt: off
def add_arguments(parser):
    add = parser.add_argument
    add("vcf", metavar="VCF", help="VCF file")
    add("--region", metavar="REGION", default=None,
        help="Only read records in REGION, given as chrom[:start[-end]]. "
        "Requires an indexed VCF.")
    group = parser.add_mutually_exclusive_group()
    group.add_argument("--non-ref-only", dest="kind", action="store_const", const="non-ref",
        help="Only print symbolic non-ref sites")
    group.add_argument("--concrete-only", dest="kind", action="store_const", const="concrete",
        help="Only print sites with a known alternate allele")
# fmt: on


def run_sites(vcf, region=None, kind=None, output=None):
    if output is None:
        output = sys.stdout
    region = parse_region(region) if region is not None else None
    n = 0
    with open_vcf(vcf) as reader:
        for site in reader.sites(region):
            if kind == "non-ref" and not site.is_non_ref_model():
                continue
            if kind == "concrete" and site.is_non_ref_model():
                continue
            print(format_site(site), file=output)
            n += 1
    logger.info("Wrote %d site%s", n, plural_s(n))


def main(args):
    run_sites(**vars(args))
