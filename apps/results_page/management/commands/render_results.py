from django.core.management.base import BaseCommand, CommandError

from apps.results_page.rendering import render_fragment, render_full_page
from apps.results_page.selectors import SelectorKind, SelectorPair
from apps.utils.errors import RenderFailure


class Command(BaseCommand):
    help = "Render the results table (or the full page) for an event / user pair."

    def add_arguments(self, parser):
        parser.add_argument('--eventid', default='', help="Event selector (defaults to %s)." % SelectorKind.EVENT.default)
        parser.add_argument('--userno', default='', help="User selector (defaults to %s)." % SelectorKind.USER.default)
        parser.add_argument('--full', action='store_true', help="Render the whole page instead of the fragment.")

    def handle(self, *args, **options):
        selectors = SelectorPair.from_params({
            SelectorKind.EVENT.param: options['eventid'],
            SelectorKind.USER.param: options['userno'],
        })

        try:
            if options['full']:
                body = render_full_page(selectors)
            else:
                body = render_fragment(selectors)
        except RenderFailure as e:
            raise CommandError(str(e)) from e

        self.stdout.write(body)
