"""
Utility helpers for the scene player
"""

from .enum_helper import EnumHelper

__all__ = [
    'EnumHelper',
]
