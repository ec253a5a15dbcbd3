"""
texdsl - Programmatic TeX document builder

Assembles a tree of typed TeX elements (directives, environments, lists,
beamer frames) and renders it into a well-formed document, so callers never
hand-build markup strings.
"""

__version__ = "1.0.0"

from .lib import (
    TeXDocument,
    TeXError,
    TeXWriteError,
    TeXStructureError,
    tex,
    LOG,
    state_connectToLogger,
)

__all__ = [
    "TeXDocument",
    "TeXError",
    "TeXWriteError",
    "TeXStructureError",
    "tex",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
