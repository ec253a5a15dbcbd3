"""
Models package for texdsl

Contains the element discriminator, capability protocols and option types.
"""

from .elements import TagKind, Renderable, ChildContainer, Option, Options, options_collect

__all__ = [
    "TagKind",
    "Renderable",
    "ChildContainer",
    "Option",
    "Options",
    "options_collect",
]
