from io import StringIO

from pytest import raises

from varsite.cli import CommandLineError, format_site
from varsite.cli.sites import run_sites
from varsite.region import Region
from varsite.site import VariantSite
from varsite.vcf import VcfIndexMissing


def test_format_site():
    assert format_site(VariantSite.from_alleles("chr1", 837214, "G", "C")) == (
        "chr1\t837214\t837215\tG\tC"
    )
    assert format_site(VariantSite.from_region(Region("chr1", 100, 500))) == (
        "chr1\t100\t101\tN\t."
    )


def test_sites(candidates_vcf):
    out = StringIO()
    run_sites(str(candidates_vcf), output=out)
    assert out.getvalue().splitlines() == [
        "chr1\t100\t101\tN\t.",
        "chr1\t199\t200\tG\tC",
        "chr1\t299\t301\tAT\tA",
        "chr1\t299\t301\tAT\tATT",
        "chr2\t9\t10\tT\tG",
        "chr2\t9\t10\tN\t.",
    ]


def test_sites_non_ref_only(candidates_vcf):
    out = StringIO()
    run_sites(str(candidates_vcf), kind="non-ref", output=out)
    assert out.getvalue().splitlines() == ["chr1\t100\t101\tN\t.", "chr2\t9\t10\tN\t."]


def test_sites_concrete_only(candidates_vcf):
    out = StringIO()
    run_sites(str(candidates_vcf), kind="concrete", output=out)
    assert len(out.getvalue().splitlines()) == 4
    assert "\tN\t." not in out.getvalue()


def test_sites_region(indexed_candidates_vcf):
    out = StringIO()
    run_sites(indexed_candidates_vcf, region="chr2", output=out)
    assert out.getvalue().splitlines() == ["chr2\t9\t10\tT\tG", "chr2\t9\t10\tN\t."]


def test_sites_region_requires_index(candidates_vcf):
    with raises(VcfIndexMissing):
        run_sites(str(candidates_vcf), region="chr1:1-1000", output=StringIO())


def test_sites_invalid_region(candidates_vcf):
    with raises(CommandLineError):
        run_sites(str(candidates_vcf), region="chr1:x-y", output=StringIO())
