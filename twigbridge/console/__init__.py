"""
Console Package
"""
from twigbridge.console.command import Command

__all__ = [
    'Command',
]
