from .collector import Collector, collectors
from .config import StreamConfig
from .kernel import (
    Evidence,
    NoSuchElementError,
    StreamConsumedError,
    StreamError,
    Trace,
    is_equal,
)
from .optional import Optional
from .stream import Stream, natural_order, ops

__all__ = [
    # Core
    "Stream",
    "Optional",
    "Collector",
    "collectors",
    "ops",
    "is_equal",
    "natural_order",
    # Config
    "StreamConfig",
    # Errors
    "StreamError",
    "NoSuchElementError",
    "StreamConsumedError",
    # Tracing
    "Evidence",
    "Trace",
]
