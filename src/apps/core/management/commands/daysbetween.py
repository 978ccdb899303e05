"""Print the number of days between two ISO-8601 dates."""

from datetime import datetime

from django.core.management.base import BaseCommand, CommandError

from apps.core.dates import days_between


def _parse(value: str) -> datetime:
    try:
        return datetime.fromisoformat(value)
    except ValueError as exc:
        raise CommandError(f"Invalid date: {value!r}") from exc


class Command(BaseCommand):
    help = "Print the whole number of days between BEGIN and END."

    def add_arguments(self, parser) -> None:
        parser.add_argument("begin", help="ISO-8601 date or datetime")
        parser.add_argument("end", help="ISO-8601 date or datetime")

    def handle(self, *args, **options) -> None:
        days = days_between(_parse(options["begin"]), _parse(options["end"]))
        self.stdout.write(str(days))
