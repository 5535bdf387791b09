"""Collector protocol and stock collectors."""

from . import collectors
from .collector import Collector, identity_finisher

__all__ = [
    "Collector",
    "collectors",
    "identity_finisher",
]
