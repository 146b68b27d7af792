import json
from django.core.management.base import BaseCommand, CommandError
from django.db import transaction

from scheduler.data.models import ReviewSchedule
from scheduler.services.reviews import record_review
from studyaid.models import Note

SAMPLE_NOTES = [
    {"topic": "Photosynthesis", "content": "Light reactions happen in the thylakoid membranes."},
    {"topic": "French Revolution", "content": "Began in 1789 with the storming of the Bastille."},
    {"topic": "Derivatives", "content": "The derivative of x^n is n*x^(n-1)."},
]


class Command(BaseCommand):
    help = "Replace a user's notes with demo notes and give each one a first review"

    def add_arguments(self, parser):
        parser.add_argument("--user-id", type=int, default=1, help="Owner of the demo notes")
        parser.add_argument(
            "--file", help="JSON file with a list of {\"topic\", \"content\"} objects"
        )
        parser.add_argument(
            "--difficulty", type=int, default=3, help="Rating used for the first review (1-5)"
        )

    def handle(self, *args, **options):
        user_id = options["user_id"]
        if not 1 <= options["difficulty"] <= 5:
            raise CommandError("--difficulty must be between 1 and 5")
        notes = SAMPLE_NOTES
        if options.get("file"):
            try:
                with open(options["file"]) as json_file:
                    notes = json.load(json_file)
            except (OSError, ValueError) as e:
                raise CommandError(f"Error loading notes: {e}")
            if not isinstance(notes, list) or not all(isinstance(item, dict) for item in notes):
                raise CommandError("Notes file must hold a list of {\"topic\", \"content\"} objects")

        with transaction.atomic():
            ReviewSchedule.objects.filter(user_id=user_id).delete()
            Note.objects.filter(user_id=user_id).delete()
            self.stdout.write(self.style.SUCCESS(f"Cleared existing data for user {user_id}"))

            for item in notes:
                note = Note.objects.create(
                    user_id=user_id,
                    topic=item.get("topic") or Note.DEFAULT_TOPIC,
                    content=item.get("content", ""),
                )
                record_review(user_id, note.pk, note.topic, options["difficulty"])

        self.stdout.write(
            self.style.SUCCESS(f"Seeded {len(notes)} notes with review schedules")
        )
