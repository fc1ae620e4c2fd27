"""
Twig Service Provider
Binds the view finder, the Jinja2 engine and the lint command
"""
from twigbridge.service_provider import ServiceProvider
from twigbridge.support import Config, Storage, TwigTemplateEngine
from twigbridge.view import FileViewFinder
from twigbridge.console.commands.lint_command import LintCommand
from twigbridge.defaults import (
    DEFAULT_VIEW_EXTENSIONS,
    DEFAULT_TWIG_ENCODING,
    DEFAULT_TWIG_ENVIRONMENT,
    DEFAULT_TWIG_FILE_EXTENSIONS,
)
from twigbridge.logging import getLogger

logger = getLogger(__name__)


class TwigServiceProvider(ServiceProvider):
    """
    Service provider for the Twig bridge

    Reads config/view.py:
        PATHS           search directories (default: resources/views)
        EXTENSIONS      finder extension priority list

    and config/twigbridge.py:
        TWIG = {
            'file_extensions': ['twig'],
            'namespaces': {'admin': 'resources/admin/views'},
            'environment': {'autoescape': True, 'debug': False},
            'globals': {},
            'templates': {},
            'encoding': 'utf-8',
        }
        EXTENSIONS = {'enabled': ['jinja2.ext.do']}
    """

    def register(self):
        """Register finder, engine and commands in the container"""
        self.register_finder()
        self.register_engine()
        self.register_commands()

    def boot(self):
        """Apply configured file extensions and namespaces to the finder"""
        self.register_file_extensions()
        self.register_namespaces()

    def register_finder(self):
        paths = Config.get('view.PATHS') or [Storage.views()]
        extensions = Config.get('view.EXTENSIONS', DEFAULT_VIEW_EXTENSIONS)

        self.app.singleton('view.finder', FileViewFinder(paths=paths, extensions=extensions))

    def register_engine(self):
        engine = TwigTemplateEngine(
            finder=self.app.make('view.finder'),
            templates=Config.get('twigbridge.TWIG.templates', {}),
            options=Config.get('twigbridge.TWIG.environment', DEFAULT_TWIG_ENVIRONMENT),
            extensions=Config.get('twigbridge.EXTENSIONS.enabled', []),
            globals=Config.get('twigbridge.TWIG.globals', {}),
            encoding=Config.get('twigbridge.TWIG.encoding', DEFAULT_TWIG_ENCODING),
        )

        self.app.singleton('twig.loader.viewfinder', engine.viewfinder_loader)
        self.app.singleton('twig', engine)

    def register_commands(self):
        self.app.singleton('command.twig.lint', LintCommand(self.app.make('twig')))

    def register_file_extensions(self):
        """Register the Twig file extensions with the finder"""
        finder = self.app.make('view.finder')

        for extension in Config.get('twigbridge.TWIG.file_extensions', DEFAULT_TWIG_FILE_EXTENSIONS):
            finder.add_extension(extension)

    def register_namespaces(self):
        """Register the configured Twig namespaces with the finder"""
        finder = self.app.make('view.finder')

        for namespace, hints in Config.get('twigbridge.TWIG.namespaces', {}).items():
            finder.add_namespace(namespace, hints)
            logger.debug("Registered view namespace [%s]", namespace)

    def provides(self) -> list:
        return [
            'view.finder',
            'twig.loader.viewfinder',
            'twig',
            'command.twig.lint',
        ]
