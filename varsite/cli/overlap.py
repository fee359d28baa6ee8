"""
Report variant sites that overlap regions or other sites

Sites are read from VCF as in the 'sites' subcommand and joined against
regions given with --region or --bed, or against the sites of a second VCF
given with --against. Intervals are half-open, so a site ending where a region
starts does not overlap it. Alleles are ignored.

Each output line contains the site columns (contig, start, end, ref, alt)
followed by the columns of what it overlaps: contig, start and end for
regions (end is '.' if unbounded), the five site columns for sites.
"""
import sys
import logging

from varsite.cli import CommandLineError, format_site, open_vcf, parse_region
from varsite.overlap import join_regions, join_sites
from varsite.region import InvalidRegion, read_bed
from varsite.utils import plural_s

logger = logging.getLogger(__name__)


# fmt: off
def add_arguments(parser):
    add = parser.add_argument
    add("vcf", metavar="VCF", help="VCF file with the sites to test")
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("--region", metavar="REGION", dest="regions", action="append",
        help="Region given as chrom[:start[-end]]. Can be used multiple times.")
    group.add_argument("--bed", metavar="BED",
        help="BED file with regions (may be compressed)")
    group.add_argument("--against", metavar="VCF",
        help="Second VCF file; report pairs of overlapping sites")
# fmt: on


def format_region(region) -> str:
    end = "." if region.end is None else str(region.end)
    return f"{region.reference_name}\t{region.start}\t{end}"


def load_regions(regions=None, bed=None):
    if regions:
        return [parse_region(spec) for spec in regions]
    try:
        return list(read_bed(bed))
    except OSError as e:
        raise CommandLineError(f"Error while reading BED file {bed!r}: {e}")
    except InvalidRegion as e:
        raise CommandLineError(e)


def run_overlap(vcf, regions=None, bed=None, against=None, output=None):
    if output is None:
        output = sys.stdout
    with open_vcf(vcf) as reader:
        sites = list(reader.sites())
    logger.info("Read %d site%s from %s", len(sites), plural_s(len(sites)), vcf)

    n = 0
    if against is not None:
        with open_vcf(against) as reader:
            others = list(reader.sites())
        logger.info("Read %d site%s from %s", len(others), plural_s(len(others)), against)
        for site, other in join_sites(sites, others):
            print(format_site(site), format_site(other), sep="\t", file=output)
            n += 1
    else:
        region_list = load_regions(regions, bed)
        logger.info("Testing against %d region%s", len(region_list), plural_s(len(region_list)))
        for site, region in join_regions(sites, region_list):
            print(format_site(site), format_region(region), sep="\t", file=output)
            n += 1
    logger.info("Found %d overlap%s", n, plural_s(n))


def main(args):
    run_overlap(**vars(args))
