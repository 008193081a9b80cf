from django.apps import AppConfig


class ResultsPageConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.results_page'
    label = 'results_page'
