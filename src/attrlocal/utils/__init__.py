"""
attrlocal utilities package
"""

from .config import void_warning_enabled

__all__ = ["void_warning_enabled"]
