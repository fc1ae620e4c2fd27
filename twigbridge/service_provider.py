"""
Service Provider Base Class
Laravel-style service providers for registering the bridge with a host application
"""
from abc import ABC
from typing import Any


class ServiceProvider(ABC):
    """
    Base Service Provider class

    The host application passed in must expose:
        singleton(key, instance)   bind a shared instance
        make(key)                  resolve a bound instance

    The host calls register() on every provider first, then boot().
    """

    def __init__(self, app: Any):
        self.app = app

    def register(self):
        """
        Register services in the container
        Called when the provider is registered (before booting)

        Example:
            self.app.singleton('view.finder', FileViewFinder(paths=[...]))
        """
        pass

    def boot(self):
        """
        Bootstrap services (after all providers are registered)

        Example:
            self.register_views()
        """
        pass

    def provides(self) -> list:
        """Container keys bound by this provider"""
        return []
