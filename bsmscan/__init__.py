"""bsmscan: Check parameter points of extended scalar sectors against viability constraints."""
from importlib.metadata import version

__all__ = ["__version__"]

try:
    __version__ = version("bsmscan")
except Exception:  # pragma: no cover - package metadata not available in dev
    __version__ = "0.1.0"
