from django.apps import AppConfig


class HtsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'hts'
    verbose_name = 'Hedera Token Service'
