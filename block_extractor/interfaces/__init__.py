"""Interfaces - entry points the host calls into."""

from .commands import HostSession, create_block_from_cube, invoke, list_commands

__all__ = ['HostSession', 'create_block_from_cube', 'invoke', 'list_commands']
