"""FauxSON package root.

Forgiving JSON extraction for text that is supposed to be JSON but often is
not. The public API is the ``FauxSON`` parser, the ``parse`` shortcut and the
schema types exported from ``fauxson.schemas``.
"""

__version__ = "0.1.0"

from fauxson.config_loader import load_parser_config  # noqa: F401
from fauxson.parser import FauxSON, parse  # noqa: F401
from fauxson.schemas import *  # noqa: F401,F403
from fauxson.schemas import __all__ as SCHEMA_EXPORTS

__all__ = ["__version__", "FauxSON", "parse", "load_parser_config"] + SCHEMA_EXPORTS
