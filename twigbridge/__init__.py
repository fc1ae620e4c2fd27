"""
TwigBridge
Twig-style (Jinja2) templates for Laravel-style applications
"""

__version__ = '0.1.0'

from twigbridge.exceptions import (
    ViewException,
    InvalidNameError,
    UnknownNamespaceError,
    NotFoundError,
)
from twigbridge.view import FileViewFinder, NamespaceForm, ViewFinderLoader
from twigbridge.support import TwigTemplateEngine
from twigbridge.providers import TwigServiceProvider, LoggingServiceProvider

__all__ = [
    '__version__',

    # View resolution
    'FileViewFinder',
    'NamespaceForm',
    'ViewFinderLoader',

    # Errors
    'ViewException',
    'InvalidNameError',
    'UnknownNamespaceError',
    'NotFoundError',

    # Engine
    'TwigTemplateEngine',

    # Providers
    'TwigServiceProvider',
    'LoggingServiceProvider',
]
