import pysam
from pytest import fixture

VCF_HEADER = """\
##fileformat=VCFv4.2
##contig=<ID=chr1,length=100000>
##contig=<ID=chr2,length=100000>
##INFO=<ID=END,Number=1,Type=Integer,Description="End position of the record">
##ALT=<ID=NON_REF,Description="Any non-reference allele">
##ALT=<ID=DEL,Description="Deletion">
#CHROM\tPOS\tID\tREF\tALT\tQUAL\tFILTER\tINFO
"""

CANDIDATES = """\
chr1\t101\t.\tA\t<NON_REF>\t.\t.\tEND=150
chr1\t200\t.\tG\tC\t50\tPASS\t.
chr1\t300\t.\tAT\tA,ATT\t50\tPASS\t.
chr1\t400\t.\tC\t<DEL>\t.\t.\tEND=450
chr1\t500\t.\tC\t.\t.\t.\t.
chr2\t10\t.\tT\tG,<NON_REF>\t.\t.\t.
"""

OTHER_CANDIDATES = """\
chr1\t200\t.\tG\tT\t50\tPASS\t.
chr1\t302\t.\tC\tG\t50\tPASS\t.
chr2\t10\t.\tT\tA\t50\tPASS\t.
"""


def write_vcf(path, records):
    path.write_text(VCF_HEADER + records)
    return path


@fixture
def candidates_vcf(tmp_path):
    return write_vcf(tmp_path / "candidates.vcf", CANDIDATES)


@fixture
def other_vcf(tmp_path):
    return write_vcf(tmp_path / "other.vcf", OTHER_CANDIDATES)


@fixture
def indexed_candidates_vcf(candidates_vcf):
    return pysam.tabix_index(str(candidates_vcf), preset="vcf", force=True)
