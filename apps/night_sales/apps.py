from django.apps import AppConfig


class NightSalesConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.night_sales'
    label = 'night_sales'
    verbose_name = 'Night Sales'
