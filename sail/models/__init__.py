"""Models for sail."""

from .config import SailConfig
from .mount import Mount
from .runner import RunMode, Runner

__all__ = [
    'SailConfig',
    'Mount',
    'RunMode',
    'Runner'
]
