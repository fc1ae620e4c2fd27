"""
Lint Command
Checks Twig templates for syntax errors
"""
import json
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, TYPE_CHECKING

from twigbridge.console.command import Command
from twigbridge.defaults import DEFAULT_LINT_FORMAT, DEFAULT_LINT_FORMATS
from twigbridge.exceptions import NotFoundError

if TYPE_CHECKING:
    from twigbridge.support.twig_engine import TwigTemplateEngine


class LintCommand(Command):
    """Lint Twig templates"""

    name = "twig:lint"
    description = "Lint the syntax of Twig templates"
    signature = "twig:lint {filename?*} {--file=*} {--directory=*} {--format=text}"

    def __init__(self, engine: 'TwigTemplateEngine'):
        super().__init__()
        self.engine = engine

    async def handle(
        self,
        *names: str,
        files: Optional[Iterable[str]] = None,
        directories: Optional[Iterable[str]] = None,
        format: str = DEFAULT_LINT_FORMAT,
        **kwargs
    ):
        """
        Lint templates by view name, file path or directory

        With no names, files or directories every template the
        loaders know about is checked.

        Returns:
            0 when every template is valid, 1 otherwise

        Raises:
            RuntimeError: a named template cannot be loaded
            ValueError: unknown output format
        """
        if format not in DEFAULT_LINT_FORMATS:
            raise ValueError(f"The format '{format}' is not supported.")

        files = list(files or [])
        directories = list(directories or [])
        details = []

        for name in names:
            details.append(self.validate(self.get_contents(name), name))

        for file in files:
            details.append(self.validate(self.read_file(file), file))

        for directory in directories:
            for file in self.find_files(directory):
                details.append(self.validate(self.read_file(file), file))

        if not (names or files or directories):
            for name in self.all_templates():
                details.append(self.validate(self.get_contents(name), name))
            # dotted file names have no view name, lint them by path
            for file in self.engine.viewfinder_loader.unaddressable_files():
                details.append(self.validate(self.read_file(file), file))

        if format == 'json':
            self.display_json(details)
        else:
            self.display_text(details)

        return 0 if all(detail['valid'] for detail in details) else 1

    def get_contents(self, name: str) -> str:
        try:
            return self.engine.get_source(name)
        except NotFoundError as e:
            raise RuntimeError(f"File or directory '{name}' is not readable") from e

    def read_file(self, file: str) -> str:
        try:
            return Path(file).read_text(encoding=self.engine.viewfinder_loader.encoding)
        except OSError as e:
            raise RuntimeError(f"File or directory '{file}' is not readable") from e

    def find_files(self, directory: str) -> List[str]:
        """Files under directory ending with a registered extension"""
        suffixes = tuple('.' + extension for extension in self.engine.finder.get_extensions())

        return sorted(
            str(path) for path in Path(directory).rglob('*')
            if path.is_file() and path.name.endswith(suffixes)
        )

    def all_templates(self) -> List[str]:
        names = set(self.engine.array_loader.list_templates())
        names.update(self.engine.viewfinder_loader.list_templates())
        return sorted(names)

    def validate(self, source: str, file: str) -> Dict[str, Any]:
        error = self.engine.lint_source(source, file)

        return {
            'file': file,
            'valid': error is None,
            'line': error.lineno if error else None,
            'message': error.message if error else None,
        }

    def display_text(self, details: List[Dict[str, Any]]):
        errors = 0

        for detail in details:
            if detail['valid']:
                self.success(f"OK in {detail['file']}")
                continue

            errors += 1
            self.error(f"KO in {detail['file']} (line {detail['line']})")
            self.line(f"  >> {detail['message']}")

        if errors:
            self.warning(f"{len(details) - errors} Twig files have valid syntax and {errors} contain errors.")
        else:
            self.success(f"All {len(details)} Twig files contain valid syntax.")

    def display_json(self, details: List[Dict[str, Any]]):
        self.line(json.dumps(details, indent=4))
