from django.apps import AppConfig


class GeneratorConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.generator'
    label = 'generator'
    verbose_name = 'Gerador de dados de teste'
