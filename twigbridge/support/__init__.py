"""
Bridge Support Classes
"""

from twigbridge.support.storage import Storage
from twigbridge.support.env_helper import EnvHelper
from twigbridge.support.config import Config
from twigbridge.support.twig_engine import TwigTemplateEngine

__all__ = [
    'Storage',
    'EnvHelper',
    'Config',
    'TwigTemplateEngine',
]
