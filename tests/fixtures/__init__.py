"""Shared pytest fixtures."""

from .core import *  # noqa: F401,F403
from .data import *  # noqa: F401,F403
