import pytest
from rest_framework.test import APIClient

from apps.generator.generators import ProductGenerator


@pytest.fixture(autouse=True)
def media_root(settings, tmp_path):
    """Write generated images to a temporary directory."""
    settings.MEDIA_ROOT = str(tmp_path / 'media')
    return settings.MEDIA_ROOT


@pytest.fixture(autouse=True)
def small_images(settings):
    settings.GENERATOR = {
        **settings.GENERATOR,
        'FAKER_SEED': None,
        'IMAGE_SIZE': 32,
    }
    return settings.GENERATOR


@pytest.fixture
def generator():
    return ProductGenerator(seed=1234)


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def admin_api_client(admin_user):
    client = APIClient()
    client.force_authenticate(user=admin_user)
    return client
