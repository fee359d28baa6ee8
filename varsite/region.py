"""
Genomic regions and BED input.
"""
import logging
from dataclasses import dataclass
from os import PathLike
from typing import Iterator, Optional, Protocol, Union

from xopen import xopen

from .utils import plural_s

logger = logging.getLogger(__name__)


class InvalidRegion(Exception):
    pass


class RegionLike(Protocol):
    """Anything with a reference name and a 0-based half-open span"""

    reference_name: str
    start: int
    end: Optional[int]


@dataclass(frozen=True)
class Region:
    reference_name: str
    start: int
    end: Optional[int]  # None extends to the end of the contig

    def __repr__(self):
        return f'Region("{self.reference_name}", {self.start}, {self.end})'

    def __str__(self):
        if self.end is None:
            return f"{self.reference_name}:{self.start + 1}-"
        return f"{self.reference_name}:{self.start + 1}-{self.end}"

    @staticmethod
    def parse(spec: str) -> "Region":
        """
        Parse a region given as chrom[:start[-end]] with a 1-based, inclusive
        start and end.

        >>> Region.parse("chr1")
        Region("chr1", 0, None)
        >>> Region.parse("chr1:")
        Region("chr1", 0, None)
        >>> Region.parse("chr1:101")
        Region("chr1", 100, None)
        >>> Region.parse("chr1:101-")
        Region("chr1", 100, None)
        >>> Region.parse("chr1:101-200")
        Region("chr1", 100, 200)
        >>> Region.parse("chr1:101:200")  # for backwards compatibility
        Region("chr1", 100, 200)
        """
        reference_name, _, coordinates = spec.partition(":")
        if not reference_name:
            raise InvalidRegion(f"Region {spec!r} has no reference name")
        if not coordinates:
            return Region(reference_name, 0, None)
        sep = ":" if ":" in coordinates else "-"
        start_text, _, end_text = coordinates.partition(sep)
        try:
            start = int(start_text) - 1
            end = int(end_text) if end_text else None
        except ValueError:
            raise InvalidRegion("Region must be specified as chrom[:start[-end]]") from None
        if start < 0:
            raise InvalidRegion("start of region must be at least 1")
        if end is not None and end <= start:
            raise InvalidRegion("end is before start in specified region")
        return Region(reference_name, start, end)


def read_bed(path: Union[str, PathLike]) -> Iterator[Region]:
    """
    Yield regions from a BED file, which may be compressed.

    Only the first three columns are used. Comment, track and browser lines
    are skipped.
    """
    n = 0
    with xopen(path) as f:
        for line_number, line in enumerate(f, start=1):
            line = line.rstrip("\r\n")
            if not line or line.startswith(("#", "track", "browser")):
                continue
            fields = line.split("\t")
            if len(fields) < 3:
                raise InvalidRegion(f"{path}:{line_number}: expected at least three columns")
            try:
                start, end = int(fields[1]), int(fields[2])
            except ValueError:
                raise InvalidRegion(f"{path}:{line_number}: start and end must be integers") from None
            if start < 0 or end < start:
                raise InvalidRegion(f"{path}:{line_number}: invalid interval {start}-{end}")
            n += 1
            yield Region(fields[0], start, end)
    logger.debug("Read %d region%s from %s", n, plural_s(n), path)
