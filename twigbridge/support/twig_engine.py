"""
Twig Template Engine Integration
Jinja2 environment wired to the view finder
"""

from typing import Optional, Dict, Any, List, Union, TYPE_CHECKING
from jinja2 import ChoiceLoader, DictLoader, Environment, TemplateNotFound, TemplateSyntaxError

from twigbridge.exceptions import NotFoundError
from twigbridge.view.loader import ViewFinderLoader

if TYPE_CHECKING:
    from jinja2.ext import Extension
    from twigbridge.view.finder import FileViewFinder


class TwigTemplateEngine:
    """Twig-style template engine wrapper for the bridge"""

    def __init__(
        self,
        finder: 'FileViewFinder',
        templates: Optional[Dict[str, str]] = None,
        options: Optional[Dict[str, Any]] = None,
        extensions: Optional[List[Union[str, type]]] = None,
        globals: Optional[Dict[str, Any]] = None,
        encoding: Optional[str] = None
    ):
        """
        Initialize the engine

        Args:
            finder: FileViewFinder used to locate templates
            templates: In-memory templates, checked before the finder
            options: jinja2.Environment options; 'debug' and 'cache' are
                     consumed here and not forwarded
            extensions: Jinja2 extensions (import strings or classes)
            globals: Variables available in every template
            encoding: Template file encoding
        """
        from twigbridge.defaults import (
            DEFAULT_TWIG_DEBUG_EXTENSION,
            DEFAULT_TWIG_ENCODING,
            DEFAULT_TWIG_ENVIRONMENT,
        )
        if encoding is None:
            encoding = DEFAULT_TWIG_ENCODING

        environment_options = dict(DEFAULT_TWIG_ENVIRONMENT)
        environment_options.update(options or {})
        self.debug = bool(environment_options.pop('debug', False))
        # compiled template caching is left to jinja2's in-memory cache
        environment_options.pop('cache', None)

        load = list(extensions or [])
        if self.debug and DEFAULT_TWIG_DEBUG_EXTENSION not in load:
            load.insert(0, DEFAULT_TWIG_DEBUG_EXTENSION)

        self.finder = finder
        self.array_loader = DictLoader(dict(templates or {}))
        self.viewfinder_loader = ViewFinderLoader(finder, encoding=encoding)

        self.environment = Environment(
            loader=ChoiceLoader([self.array_loader, self.viewfinder_loader]),
            extensions=load,
            **environment_options
        )

        # Global context (available in all templates)
        self.globals = dict(globals or {})

    def render(self, template_path: str, context: Optional[Dict[str, Any]] = None) -> str:
        """
        Render a template
        Returns:
            Rendered string
        """
        template_context = {}
        template_context.update(self.globals)
        template_context.update(context or {})

        return self.environment.get_template(template_path).render(template_context)

    def add_global(self, key: str, value: Any):
        """Add a global variable available in all templates"""
        self.globals[key] = value

    def add_globals(self, globals_dict: Dict[str, Any]):
        """Add multiple global variables"""
        self.globals.update(globals_dict)

    def get_globals(self) -> Dict[str, Any]:
        """Get all global variables"""
        return self.globals.copy()

    def add_extension(self, extension: Union[str, type, 'Extension']):
        """Add a Jinja2 extension after construction"""
        self.environment.add_extension(extension)

    def view_exists(self, template_path: str) -> bool:
        """
        Check if a view/template exists
        Example:
            if twig.view_exists('errors.404'):
                return twig.render('errors.404')
        """
        if template_path in self.array_loader.mapping:
            return True
        return self.viewfinder_loader.exists(template_path)

    def get_source(self, template_path: str) -> str:
        """
        Raw template source

        Raises:
            NotFoundError: no loader knows the template
        """
        try:
            source, _, _ = self.environment.loader.get_source(self.environment, template_path)
        except TemplateNotFound as e:
            raise NotFoundError(
                f"Unable to find template [{template_path}].", name=template_path
            ) from e
        return source

    def lint(self, template_path: str) -> bool:
        """
        Check a template for syntax errors

        Returns:
            True when the template parses, False otherwise

        Raises:
            NotFoundError: the template does not exist
        """
        source = self.get_source(template_path)
        return self.lint_source(source, template_path) is None

    def lint_source(self, source: str, name: Optional[str] = None) -> Optional[TemplateSyntaxError]:
        """Parse source, returning the syntax error or None"""
        try:
            self.environment.parse(source, name)
        except TemplateSyntaxError as e:
            return e
        return None

    def flush(self):
        """Forget resolved view paths and cached templates"""
        self.finder.flush()
        if self.environment.cache is not None:
            self.environment.cache.clear()
