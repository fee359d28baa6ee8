"""
Join variant sites against regions or against other sites.

The joins only narrow down candidates by contig and start position; whether a
pair is reported is always decided by VariantSite.overlaps.
"""
import logging
from collections import defaultdict
from typing import Dict, Iterable, Iterator, List, Tuple, TypeVar

from .region import RegionLike
from .site import VariantSite

logger = logging.getLogger(__name__)

T = TypeVar("T")


def overlapping(sites: Iterable[VariantSite], region: RegionLike) -> Iterator[VariantSite]:
    """Yield the sites that overlap region"""
    return (site for site in sites if site.overlaps(region))


def _group_by_contig(items: Iterable[T], contig_of) -> Dict[str, List[T]]:
    groups: Dict[str, List[T]] = defaultdict(list)
    for item in items:
        groups[contig_of(item)].append(item)
    for group in groups.values():
        group.sort(key=lambda item: item.start)
    return groups


def _join(sites: Iterable[VariantSite], groups: Dict[str, List[T]]) -> Iterator[Tuple[VariantSite, T]]:
    n = 0
    contig_name = None
    group: List[T] = []
    i = 0
    active: List[T] = []
    for site in sorted(sites):
        if site.contig_name != contig_name:
            contig_name = site.contig_name
            group = groups.get(contig_name, [])
            i = 0
            active = []
        # sites come in order of start, so anything ending before this one
        # cannot overlap any later site either
        active = [other for other in active if other.end is None or other.end > site.start]
        while i < len(group) and group[i].start < site.end:
            active.append(group[i])
            i += 1
        for other in active:
            if site.overlaps(other):
                n += 1
                yield site, other
    logger.debug("Found %d overlapping pair(s)", n)


def join_regions(
    sites: Iterable[VariantSite], regions: Iterable[RegionLike]
) -> Iterator[Tuple[VariantSite, RegionLike]]:
    """
    Yield (site, region) for every site that overlaps a region.

    Pairs are ordered by site, then by region start.
    """
    return _join(sites, _group_by_contig(regions, lambda region: region.reference_name))


def join_sites(
    left: Iterable[VariantSite], right: Iterable[VariantSite]
) -> Iterator[Tuple[VariantSite, VariantSite]]:
    """
    Yield (a, b) for every site a from left that overlaps a site b from right.
    Alleles are not compared.
    """
    return _join(left, _group_by_contig(right, lambda site: site.contig_name))
