"""
Base Command Class
Laravel-style command base class for Artisan-like CLIs
"""
from abc import ABC, abstractmethod
from typing import Optional


class Command(ABC):

    # Command name (e.g., "twig:lint")
    name: str = ""

    # Command description
    description: str = ""

    # Command signature (for help display)
    signature: Optional[str] = None

    def __init__(self):
        if not self.signature:
            self.signature = self.name

    @abstractmethod
    async def handle(self, *args, **kwargs):
        """
        Execute the command logic

        Returns:
            int: Exit code (0 for success, non-zero for error)
        """
        pass

    # Output helpers
    def info(self, message: str):
        """Print info message"""
        print(f"ℹ {message}")

    def success(self, message: str):
        """Print success message"""
        print(f"✅ {message}")

    def error(self, message: str):
        """Print error message"""
        print(f"❌ {message}")

    def warning(self, message: str):
        """Print warning message"""
        print(f"⚠ {message}")

    def line(self, message: str = ""):
        """Print plain line"""
        print(message)
