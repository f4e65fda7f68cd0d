"""
Generator settings, read from the ``GENERATOR`` dict in Django settings.

    GENERATOR = {
        'FAKER_LOCALE': 'pt_BR',
        'VARIABLE_PRODUCT_CHANCE': 30,
    }

Missing keys fall back to DEFAULTS.
"""

from django.conf import settings

DEFAULTS = {
    'FAKER_LOCALE': 'pt_BR',
    'FAKER_SEED': None,
    'VARIABLE_PRODUCT_CHANCE': 30,
    'MAX_BATCH_SIZE': 100,
    'IMAGE_SIZE': 600,
}


def generator_settings(name):
    if name not in DEFAULTS:
        raise KeyError(f"Unknown generator setting: {name}")
    user_settings = getattr(settings, 'GENERATOR', None) or {}
    return user_settings.get(name, DEFAULTS[name])
