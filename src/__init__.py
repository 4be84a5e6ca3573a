"""antiplag: n-gram plagiarism detection across a document collection."""

from antiplag.version import __version__

__all__ = ["__version__"]
