"""Top-level package for fixedbits."""

import importlib.metadata as importlib_metadata

from fixedbits.base import *  # noqa: F401,F403
from fixedbits.bitarray import *  # noqa: F401,F403

__version__ = importlib_metadata.version(__name__)
