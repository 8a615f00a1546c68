"""Utilities for sail."""

from .config_manager import ConfigManager
from .deadline import Deadline
from .path_resolver import PathResolver

__all__ = ['ConfigManager', 'Deadline', 'PathResolver']
