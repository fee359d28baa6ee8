import gzip

from pytest import raises
from varsite.region import Region, InvalidRegion, read_bed


def test_parse_region():
    assert Region.parse("chr1") == Region("chr1", 0, None)
    assert Region.parse("chr1:101-200") == Region("chr1", 100, 200)
    assert Region.parse("chr1:101") == Region("chr1", 100, None)
    assert Region.parse("chr1:101:200") == Region("chr1", 100, 200)


def test_region_start_greater_than_end():
    with raises(InvalidRegion):
        Region.parse("chr1:500-200")
    with raises(InvalidRegion):
        Region.parse("chr1:500-200:17")
    with raises(InvalidRegion):
        Region.parse("chr1:a-b")


def test_region_invalid():
    with raises(InvalidRegion):
        Region.parse(":100-200")
    with raises(InvalidRegion):
        Region.parse("chr1:0-10")


def test_region_str():
    assert str(Region("chr1", 100, 200)) == "chr1:101-200"
    assert str(Region("chr1", 100, None)) == "chr1:101-"
    assert Region.parse(str(Region("chrX", 9, 30))) == Region("chrX", 9, 30)


def test_read_bed(tmp_path):
    path = tmp_path / "regions.bed"
    path.write_text(
        "track name=test\n"
        "# comment\n"
        "chr1\t0\t100\tfirst\n"
        "\n"
        "chr2\t50\t60\n"
    )
    assert list(read_bed(path)) == [Region("chr1", 0, 100), Region("chr2", 50, 60)]


def test_read_compressed_bed(tmp_path):
    path = tmp_path / "regions.bed.gz"
    with gzip.open(path, "wt") as f:
        f.write("chr1\t10\t20\n")
    assert list(read_bed(path)) == [Region("chr1", 10, 20)]


def test_read_bed_too_few_columns(tmp_path):
    path = tmp_path / "broken.bed"
    path.write_text("chr1\t10\t20\nchr1\t30\n")
    with raises(InvalidRegion) as e:
        list(read_bed(path))
    assert ":2:" in str(e.value)


def test_read_bed_invalid_interval(tmp_path):
    path = tmp_path / "broken.bed"
    path.write_text("chr1\t20\t10\n")
    with raises(InvalidRegion):
        list(read_bed(path))
    path.write_text("chr1\tx\t10\n")
    with raises(InvalidRegion):
        list(read_bed(path))
