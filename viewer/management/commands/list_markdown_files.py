"""
Management command that lists the documents the viewer can serve.
"""

from django.core.management.base import BaseCommand

from viewer.files import scan_markdown_files


class Command(BaseCommand):
    help = 'List every markdown document reachable from the document root'

    def add_arguments(self, parser):
        parser.add_argument(
            '--root',
            type=str,
            help='Directory to scan (default: MARKVIEW_ROOT)',
        )

    def handle(self, *args, **options):
        files = scan_markdown_files(options.get('root'))

        for file in files:
            self.stdout.write(file)

        self.stdout.write(
            self.style.SUCCESS(f'\n{len(files)} document(s) found')
        )
