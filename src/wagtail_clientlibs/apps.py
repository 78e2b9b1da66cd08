"""Django app configuration for wagtail-clientlibs."""

from django.apps import AppConfig


class WagtailClientlibsConfig(AppConfig):
    name = "wagtail_clientlibs"
    verbose_name = "Wagtail Client Libraries"
