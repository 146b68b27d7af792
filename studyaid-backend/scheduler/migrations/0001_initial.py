import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="ReviewSchedule",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("user_id", models.PositiveIntegerField()),
                ("note_id", models.PositiveIntegerField()),
                ("topic", models.CharField(blank=True, default="", max_length=255)),
                ("difficulty_level", models.PositiveSmallIntegerField()),
                ("ease_factor", models.FloatField(default=2.5)),
                ("repetition_count", models.PositiveIntegerField(default=1)),
                ("interval_days", models.PositiveIntegerField(default=1)),
                ("last_reviewed", models.DateTimeField(default=django.utils.timezone.now)),
                ("next_review_date", models.DateTimeField(default=django.utils.timezone.now)),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now)),
            ],
            options={
                "ordering": ["next_review_date", "id"],
                "indexes": [models.Index(fields=["user_id", "next_review_date"], name="schedule_user_next_idx")],
                "unique_together": {("user_id", "note_id")},
            },
        ),
    ]
