from django.apps import AppConfig


class StudyaidConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "studyaid"
    verbose_name = "Study aid"
