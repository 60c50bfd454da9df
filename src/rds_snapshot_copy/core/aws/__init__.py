"""AWS core modules."""

from .pagination import collect_pages
from .rds import RDSManager
from .kms import KMSManager

__all__ = [
    "collect_pages",
    "RDSManager",
    "KMSManager",
]
