__all__ = ["__version__", "VariantSite", "Variant", "Region"]

from ._version import version as __version__
from .records import Variant
from .region import Region
from .site import VariantSite
