"""Store adapters - implementations of GeometryStore port."""

from .memory_store import InMemoryGeometryStore, MemoryTransaction

__all__ = ['InMemoryGeometryStore', 'MemoryTransaction']
