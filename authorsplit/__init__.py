"""Top-level package for authorsplit.

This package splits document lines into tokens with exact source locations,
optional normalization, and optional stemming. The main entry points are
`process` and `SplitPipeline`.
"""

from .config import ConfigLoader, SplitConfig
from .errors import ConfigurationError, MappingError, SplitStageError
from .models.datatypes import Document, Line, Location, Token
from .pipeline import SplitPipeline, process

__all__ = [
    "ConfigLoader",
    "ConfigurationError",
    "Document",
    "Line",
    "Location",
    "MappingError",
    "SplitConfig",
    "SplitPipeline",
    "SplitStageError",
    "Token",
    "__version__",
    "process",
]

__version__ = "0.1.0"
