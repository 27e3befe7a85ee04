from django.apps import AppConfig


class DrfTimeUUIDConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "drf_timeuuid"

    def ready(self):
        # run extra user configuration checks
        import drf_timeuuid.checks  # noqa: F401
