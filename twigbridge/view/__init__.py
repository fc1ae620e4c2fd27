"""
View Package
View name resolution and the template loader built on it
"""
from twigbridge.view.finder import FileViewFinder, NamespaceForm
from twigbridge.view.loader import ViewFinderLoader

__all__ = [

    # Core
    'FileViewFinder',
    'NamespaceForm',
    'ViewFinderLoader',
]
