"""Adapters - concrete implementations of application ports."""

from .selection.scripted import ScriptedSelector
from .store.memory_store import InMemoryGeometryStore

__all__ = ['InMemoryGeometryStore', 'ScriptedSelector']
