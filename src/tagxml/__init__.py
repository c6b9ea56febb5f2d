"""tagxml package."""

__all__ = [
    "Document",
    "RawInput",
    "TagMode",
    "TagSession",
    "build",
    "sanitize",
    "serialize",
]
__version__ = "0.1.0"

from .core import TagSession
from .document import Document, RawInput, build
from .sanitize import sanitize
from .serializer import TagMode, serialize
