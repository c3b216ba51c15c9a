"""Selection adapters - implementations of BoundarySelector port."""

from .scripted import ScriptedSelector

__all__ = ['ScriptedSelector']
