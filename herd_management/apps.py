from django.apps import AppConfig


class HerdManagementConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "herd_management"
    verbose_name = "Herd Management"
