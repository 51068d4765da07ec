from pathlib import Path

from django.core.management import call_command
from django.core.management.base import BaseCommand, CommandError

from apps.trivia_quizzes.models import Quiz

FIXTURE = Path(__file__).resolve().parents[2] / "fixtures" / "quizzes_seed.json"


class Command(BaseCommand):
    help = "Load the sample capitals into the quiz catalog"

    def add_arguments(self, parser):
        parser.add_argument(
            "--fixture",
            default=str(FIXTURE),
            help="JSON fixture to load (default: the bundled capitals)",
        )

    def handle(self, *args, **opts):
        fixture = Path(opts["fixture"])
        if not fixture.is_file():
            raise CommandError(f"fixture not found: {fixture}")

        before = Quiz.objects.count()
        call_command("loaddata", str(fixture), verbosity=0)
        after = Quiz.objects.count()
        self.stdout.write(self.style.SUCCESS(f"Catalog now holds {after} quizzes ({after - before} new)."))
