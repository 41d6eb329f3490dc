import django
import pytest
from django.conf import settings


def pytest_configure():
    if not settings.configured:
        settings.configure(
            INSTALLED_APPS=["ialmark"],
            TEMPLATES=[
                {
                    "BACKEND": "django.template.backends.django.DjangoTemplates",
                    "APP_DIRS": True,
                }
            ],
        )
    django.setup()


@pytest.fixture
def settings_override():
    """Apply Django setting overrides for the duration of a test."""
    from django.test import override_settings

    overrides = []

    def apply(**kwargs):
        override = override_settings(**kwargs)
        override.enable()
        overrides.append(override)

    yield apply

    for override in reversed(overrides):
        override.disable()
