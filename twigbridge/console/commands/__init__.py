"""
Bridge Console Commands
"""
from twigbridge.console.commands.lint_command import LintCommand

__all__ = [
    'LintCommand',
]
