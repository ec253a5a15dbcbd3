"""
Exception hierarchy for texdsl
"""


class TeXError(Exception):
    """Base class for texdsl errors"""
    pass


class TeXWriteError(TeXError):
    """Raised when the document cannot be encoded or the byte sink fails"""
    pass


class TeXStructureError(TeXError):
    """Raised when a factory call would build a malformed tree"""
    pass
