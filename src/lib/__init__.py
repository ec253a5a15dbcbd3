"""
texdsl - Programmatic TeX document builder

Builds a tree of typed TeX elements and renders it to well-formed text.
"""

__version__ = "1.0.0"

from .elements import TextElement, Tag, ContentTag, tag_render
from .tags import (
    TeXContentTag,
    CustomTag,
    Document,
    DocumentClass,
    UsePackage,
    Title,
    Author,
    Date,
    FrameTitle,
    Item,
    Itemize,
    Enumerate,
    Math,
    LeftAlignment,
    RightAlignment,
    CenterAlignment,
    Frame,
)
from .errors import TeXError, TeXWriteError, TeXStructureError
from .document import TeXDocument, tex
from .log import LOG, state_connectToLogger, state_disconnectFromLogger, state_connected, logger_configure

__all__ = [
    "TextElement",
    "Tag",
    "ContentTag",
    "tag_render",
    "TeXContentTag",
    "CustomTag",
    "Document",
    "DocumentClass",
    "UsePackage",
    "Title",
    "Author",
    "Date",
    "FrameTitle",
    "Item",
    "Itemize",
    "Enumerate",
    "Math",
    "LeftAlignment",
    "RightAlignment",
    "CenterAlignment",
    "Frame",
    "TeXDocument",
    "TeXError",
    "TeXWriteError",
    "TeXStructureError",
    "tex",
    "LOG",
    "state_connectToLogger",
    "state_disconnectFromLogger",
    "state_connected",
    "logger_configure",
    "__version__",
]
