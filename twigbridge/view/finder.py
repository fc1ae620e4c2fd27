"""
File View Finder
Resolves logical view names to template files on disk

Works like the Laravel finder but also accepts full names with an extension
and Twig-style namespaces, e.g.

    finder.find('directory.flup.someJavascript.js')

tries directory/flup/someJavascript.js first, then
directory/flup/someJavascript/js.<extension> for every registered extension.
"""
import re
from enum import Enum
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Tuple, Union

from twigbridge.defaults import (
    DEFAULT_VIEW_EXTENSIONS,
    DEFAULT_HINT_PATH_DELIMITER,
    DEFAULT_HINT_PATH_TWIG_DELIMITER,
)
from twigbridge.exceptions import InvalidNameError, UnknownNamespaceError, NotFoundError
from twigbridge.logging import getLogger
from twigbridge.support.storage import Storage

logger = getLogger(__name__)

# Every dot that still has another dot somewhere after it
_INNER_DOTS = re.compile(r'\.(?=.*\.)')

Hints = Union[str, Sequence[str]]


class NamespaceForm(Enum):
    """Syntax a namespaced view name was written in"""
    AT = 'at'                      # @namespace/view/path
    DOUBLE_COLON = 'double_colon'  # namespace::view


class FileViewFinder:
    """
    Locate view files by name

    State owned by the instance:
        paths       ordered search directories
        hints       namespace -> ordered hint directories
        extensions  extensions tried in priority order
        views       resolved name -> path cache (see flush())

    Not safe for concurrent mutation; share one instance per thread or
    serialize access.
    """

    HINT_PATH_DELIMITER = DEFAULT_HINT_PATH_DELIMITER
    HINT_PATH_TWIG_DELIMITER = DEFAULT_HINT_PATH_TWIG_DELIMITER

    def __init__(
        self,
        files: Any = None,
        paths: Union[Sequence[str], Mapping[str, str], None] = None,
        extensions: Optional[Sequence[str]] = None
    ):
        """
        Args:
            files: Filesystem collaborator, an object with exists(path) or a
                   callable path -> bool (defaults to Storage)
            paths: Search directories, or an alias -> directory mapping
            extensions: Extensions in priority order
        """
        self.files = files if files is not None else Storage
        self._exists: Callable[[str], bool] = (
            self.files.exists if hasattr(self.files, 'exists') else self.files
        )

        self.named_paths: Dict[str, str] = {}
        if isinstance(paths, Mapping):
            self.named_paths = {str(alias): str(path) for alias, path in paths.items()}
            self.paths: List[str] = list(self.named_paths.values())
        else:
            self.paths = [str(path) for path in (paths or [])]

        self.hints: Dict[str, List[str]] = {}
        self.views: Dict[str, str] = {}
        self.extensions: List[str] = list(
            extensions if extensions is not None else DEFAULT_VIEW_EXTENSIONS
        )

    def find(self, name: str) -> str:
        """
        Get the fully qualified location of the view

        Raises:
            NotFoundError: no candidate file exists
            InvalidNameError: malformed namespaced name
            UnknownNamespaceError: namespace has no hint paths
        """
        if name in self.views:
            return self.views[name]

        raw_name = name
        name = name.strip()

        if not name:
            raise InvalidNameError("View name cannot be empty.", name=raw_name)

        if name in self.views:
            path = self.views[name]
        elif self.has_hint_information(name) and not self._is_path_alias(name):
            path = self.find_namespaced_view(name)
        else:
            path = self.find_in_paths(name, self.paths)

        self.views[name] = self.views[raw_name] = path
        return path

    def find_in_paths(self, name: str, paths: Sequence[str], identifier: Optional[str] = None) -> str:
        """
        Find the given view in the list of paths

        Args:
            name: View name relative to the paths
            paths: Directories to search, in order
            identifier: Name the caller asked for, used in errors (defaults to name)
        """
        identifier = identifier or name
        search_paths = list(paths)

        if name.startswith(self.HINT_PATH_TWIG_DELIMITER) and '/' in name:
            alias, remainder = name.split('/', 1)
            aliased_path = self._named_path(alias)
            if aliased_path is not None:
                if not remainder.strip():
                    raise InvalidNameError(f"View [{identifier}] has an invalid name.", name=identifier)
                search_paths.append(aliased_path)
                name = remainder

        candidates = self.get_possible_view_files(name)
        for path in search_paths:
            for file in candidates:
                view_path = f'{path}/{file}'
                if self._exists(view_path):
                    logger.debug("View [%s] resolved to %s", identifier, view_path)
                    return view_path

        logger.debug("View [%s] not found in %s", identifier, search_paths)
        raise NotFoundError(f"View [{identifier}] not found.", name=identifier, paths=search_paths)

    def find_namespaced_view(self, name: str) -> str:
        """Get the path to a template with a named path"""
        namespace, view = self.parse_namespace_segments(name)

        return self.find_in_paths(view, self.hints[namespace], identifier=name)

    def parse_namespace_segments(self, name: str) -> Tuple[str, str]:
        """
        Split a namespaced name into (namespace, view)

        Raises:
            InvalidNameError: delimiter missing, wrong segment count or empty view
            UnknownNamespaceError: namespace was never registered
        """
        form = self._namespace_form(name)

        if form is NamespaceForm.AT:
            segments = name.split('/', 1)
            if len(segments) < 2 or len(segments[0]) < 2:
                raise InvalidNameError(f"View [{name}] has an invalid name.", name=name)
            namespace = segments[0][len(self.HINT_PATH_TWIG_DELIMITER):]
        else:
            segments = name.split(self.HINT_PATH_DELIMITER)
            if len(segments) != 2:
                raise InvalidNameError(f"View [{name}] has an invalid name.", name=name)
            namespace = segments[0]

        # 'admin::' would otherwise resolve to the hint directory itself
        if not segments[1].strip():
            raise InvalidNameError(f"View [{name}] has an invalid name.", name=name)

        if namespace not in self.hints:
            raise UnknownNamespaceError(
                f"No hint path defined for [{namespace}].", namespace=namespace
            )

        return namespace, segments[1]

    def _namespace_form(self, name: str) -> NamespaceForm:
        if name.startswith(self.HINT_PATH_TWIG_DELIMITER):
            return NamespaceForm.AT
        return NamespaceForm.DOUBLE_COLON

    def _is_path_alias(self, name: str) -> bool:
        """@alias/view where alias is a named search path rather than a namespace"""
        if not name.startswith(self.HINT_PATH_TWIG_DELIMITER) or '/' not in name:
            return False

        alias = name.split('/', 1)[0]
        namespace = alias[len(self.HINT_PATH_TWIG_DELIMITER):]
        return self._named_path(alias) is not None and namespace not in self.hints

    def _named_path(self, alias: str) -> Optional[str]:
        """Directory registered under '@alias' or 'alias', if any"""
        if alias in self.named_paths:
            return self.named_paths[alias]
        return self.named_paths.get(alias[len(self.HINT_PATH_TWIG_DELIMITER):])

    def get_possible_view_files(self, name: str) -> List[str]:
        """
        Get the candidate file names for a view, in the order they are tried

        The first candidate keeps the last dot so 'a.b.c.js' can be a real
        file a/b/c.js; the rest are 'a/b/c/js.<extension>'.
        """
        # namespaces will not be removed
        possible_files = [_INNER_DOTS.sub('/', name)]
        slashed = name.replace('.', '/')
        possible_files.extend(f'{slashed}.{extension}' for extension in self.extensions)

        return possible_files

    def has_hint_information(self, name: str) -> bool:
        """Returns whether or not the view name has any hint information"""
        return (
            name.find(self.HINT_PATH_DELIMITER) > 0
            or name.startswith(self.HINT_PATH_TWIG_DELIMITER)
        )

    def add_extension(self, extension: str):
        """Register an extension with the finder, taking highest priority"""
        if extension in self.extensions:
            self.extensions.remove(extension)

        self.extensions.insert(0, extension)

    def add_location(self, location: str):
        """Add a location to the finder"""
        self.paths.append(str(location))

    def prepend_location(self, location: str):
        """Prepend a location to the finder"""
        self.paths.insert(0, str(location))

    def add_namespace(self, namespace: str, hints: Hints):
        """Add a namespace hint to the finder"""
        self.hints[namespace] = self.hints.get(namespace, []) + self._normalize_hints(hints)

    def prepend_namespace(self, namespace: str, hints: Hints):
        """Prepend a namespace hint to the finder"""
        self.hints[namespace] = self._normalize_hints(hints) + self.hints.get(namespace, [])

    def replace_namespace(self, namespace: str, hints: Hints):
        """Replace the namespace hints for the given namespace"""
        self.hints[namespace] = self._normalize_hints(hints)

    @staticmethod
    def _normalize_hints(hints: Hints) -> List[str]:
        if isinstance(hints, (str, bytes)) or not isinstance(hints, Sequence):
            return [str(hints)]
        return [str(hint) for hint in hints]

    def flush(self):
        """Flush the cache of located views"""
        self.views = {}

    def get_extensions(self) -> List[str]:
        return list(self.extensions)

    def get_filesystem(self) -> Any:
        return self.files

    def get_hints(self) -> Dict[str, List[str]]:
        return {namespace: list(hints) for namespace, hints in self.hints.items()}

    def get_paths(self) -> List[str]:
        return list(self.paths)
