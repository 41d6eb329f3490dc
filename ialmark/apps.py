from django.apps import AppConfig


class IalmarkConfig(AppConfig):
    name = "ialmark"
    verbose_name = "Inline attribute lists"
