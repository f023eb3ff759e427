"""
Management command that renders one document to its HTML fragment.

Useful for checking what the Content API will return for a file.
"""

from django.core.management.base import BaseCommand, CommandError

from viewer.files import ResolutionError, read_document, resolve_document
from viewer.markdown import render_markdown


class Command(BaseCommand):
    help = 'Render a markdown document from the document root to HTML'

    def add_arguments(self, parser):
        parser.add_argument(
            'path',
            type=str,
            help='Document path relative to the document root',
        )
        parser.add_argument(
            '--root',
            type=str,
            help='Document root (default: MARKVIEW_ROOT)',
        )

    def handle(self, *args, **options):
        try:
            path = resolve_document(options['path'], root=options.get('root'))
            markdown_text = read_document(path)
        except ResolutionError as exc:
            raise CommandError(f'{exc.message}: {exc.path}') from exc

        self.stdout.write(render_markdown(markdown_text))
