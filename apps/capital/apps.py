from django.apps import AppConfig


class CapitalConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.capital'
    label = 'capital'
    verbose_name = 'Capital'
