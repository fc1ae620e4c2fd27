"""
View Finder Loader
Jinja2 loader that locates templates through a FileViewFinder
"""
from pathlib import Path
from typing import Callable, List, Optional, Tuple, TYPE_CHECKING

from jinja2 import BaseLoader, TemplateNotFound

from twigbridge.defaults import DEFAULT_TWIG_ENCODING
from twigbridge.exceptions import NotFoundError
from twigbridge.logging import getLogger

if TYPE_CHECKING:
    from jinja2 import Environment
    from twigbridge.view.finder import FileViewFinder

logger = getLogger(__name__)


class ViewFinderLoader(BaseLoader):
    """
    Load templates by logical view name

    A missing view becomes jinja2.TemplateNotFound; namespace configuration
    errors (InvalidNameError, UnknownNamespaceError) propagate unchanged.

    Example:
        env = Environment(loader=ViewFinderLoader(finder))
        env.get_template('admin::dashboard')
    """

    def __init__(self, finder: 'FileViewFinder', encoding: str = DEFAULT_TWIG_ENCODING):
        self.finder = finder
        self.encoding = encoding

    def get_source(self, environment: 'Environment', template: str) -> Tuple[str, str, Callable[[], bool]]:
        try:
            path = Path(self.finder.find(template))
        except NotFoundError as e:
            raise TemplateNotFound(template, message=str(e)) from e

        try:
            mtime = path.stat().st_mtime
            source = path.read_text(encoding=self.encoding)
        except OSError as e:
            logger.warning("View [%s] resolved to unreadable file %s: %s", template, path, e)
            raise TemplateNotFound(template) from e

        def uptodate() -> bool:
            try:
                return path.stat().st_mtime == mtime
            except OSError:
                return False

        return source, str(path), uptodate

    def exists(self, template: str) -> bool:
        """Whether the finder can resolve the template name"""
        try:
            self.finder.find(template)
        except NotFoundError:
            return False
        return True

    def list_templates(self) -> List[str]:
        """
        Every file under the search paths whose name ends with a
        registered extension, as view names (extension stripped).
        Files found through namespace hints are prefixed 'namespace::'.

        Files whose name still contains a dot (app.min.twig, v1.2/page.twig)
        cannot be addressed by view name and are left out; see
        unaddressable_files().
        """
        return sorted({name for name, _ in self._scan() if name is not None})

    def unaddressable_files(self) -> List[str]:
        """Template files on disk that no view name resolves to"""
        return sorted({str(file) for name, file in self._scan() if name is None})

    def _scan(self) -> List[Tuple[Optional[str], Path]]:
        found = []

        for directory in self.finder.get_paths():
            found.extend(self._templates_in(directory))

        delimiter = self.finder.HINT_PATH_DELIMITER
        for namespace, hints in self.finder.get_hints().items():
            for directory in hints:
                found.extend(
                    (f'{namespace}{delimiter}{name}' if name is not None else None, file)
                    for name, file in self._templates_in(directory)
                )

        return found

    def _templates_in(self, directory: str) -> List[Tuple[Optional[str], Path]]:
        root = Path(directory)
        if not root.is_dir():
            return []

        # Longest first so 'blade.php' wins over 'php'
        suffixes = sorted(
            ('.' + extension for extension in self.finder.get_extensions()),
            key=len,
            reverse=True
        )

        templates = []
        for file in root.rglob('*'):
            if not file.is_file():
                continue
            relative = file.relative_to(root).as_posix()
            for suffix in suffixes:
                if relative.endswith(suffix):
                    name = relative[:-len(suffix)]
                    if '.' in name:
                        logger.debug("Template %s has no view name", file)
                        name = None
                    templates.append((name, file))
                    break

        return templates
