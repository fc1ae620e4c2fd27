"""
Exceptions Package
View resolution errors
"""
from twigbridge.exceptions.custom import (
    FrameworkException,
    ViewException,
    InvalidNameError,
    UnknownNamespaceError,
    NotFoundError,
)

__all__ = [
    'FrameworkException',
    'ViewException',
    'InvalidNameError',
    'UnknownNamespaceError',
    'NotFoundError',
]
