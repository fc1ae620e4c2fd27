"""
Service Providers
"""
from twigbridge.providers.logging_service_provider import LoggingServiceProvider
from twigbridge.providers.twig_service_provider import TwigServiceProvider

__all__ = [
    'LoggingServiceProvider',
    'TwigServiceProvider',
]
