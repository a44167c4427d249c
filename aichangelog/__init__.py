"""AI-powered changelog generator for git repositories."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("aichangelog")
except PackageNotFoundError:
    # Fallback for development mode
    __version__ = "0.0.0-dev"
