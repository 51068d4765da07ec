from datetime import timedelta

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from apps.trivia_quizzes.store import GameSessionStore


class Command(BaseCommand):
    help = "Delete random-play games nobody has touched for a while"

    def add_arguments(self, parser):
        parser.add_argument(
            "--hours",
            type=int,
            default=None,
            help="Idle time before a game is removed (default: RANDOM_PLAY_GAME_TTL_HOURS)",
        )

    def handle(self, *args, **opts):
        hours = opts["hours"]
        if hours is None:
            hours = getattr(settings, "RANDOM_PLAY_GAME_TTL_HOURS", 24)
        if hours < 0:
            raise CommandError("--hours must be >= 0")

        deleted = GameSessionStore().purge_stale(timedelta(hours=hours))
        self.stdout.write(self.style.SUCCESS(f"Purged {deleted} stale random-play games."))
