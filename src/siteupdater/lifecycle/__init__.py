"""Activation, deactivation and uninstall flows."""

from .activator import Activator
from .deactivator import Deactivator
from .uninstaller import Uninstaller

__all__ = ["Activator", "Deactivator", "Uninstaller"]
