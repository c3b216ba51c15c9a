"""Domain services - pure business logic, no external dependencies."""

from .label_resolution import resolve_label
from .containment import collect_contents

__all__ = ['resolve_label', 'collect_contents']
