import pytest
from django.urls import reverse

from apps.catalog.models import Product, Variant

pytestmark = pytest.mark.django_db


@pytest.fixture
def variable_product(generator):
    return generator.generate_variable_product()


def test_list_products(api_client, generator):
    generator.generate_batch(2, product_type=Product.SIMPLE)

    response = api_client.get(reverse('product-list'))

    assert response.status_code == 200
    assert response.data['count'] == 2
    first = response.data['results'][0]
    assert first['product_type'] == Product.SIMPLE
    assert first['price_range']['min'] is not None


def test_filter_products_by_type(api_client, generator, variable_product):
    generator.generate_simple_product()

    response = api_client.get(reverse('product-list'), {'product_type': Product.VARIABLE})

    assert response.status_code == 200
    assert [item['id'] for item in response.data['results']] == [variable_product.id]


def test_product_detail_includes_attributes_and_variants(api_client, variable_product):
    url = reverse('product-detail', kwargs={'slug': variable_product.slug})

    response = api_client.get(url)

    assert response.status_code == 200
    assert response.data['product_type'] == Product.VARIABLE
    assert len(response.data['variants']) == variable_product.variants.count()
    assert len(response.data['attributes']) == variable_product.get_variation_attributes().count()
    assert all(attribute['is_variation'] for attribute in response.data['attributes'])
    assert response.data['image'] is not None


def test_filter_variants_by_product(api_client, generator, variable_product):
    generator.generate_variable_product()

    response = api_client.get(reverse('variant-list'), {'product': variable_product.slug})

    assert response.status_code == 200
    assert response.data['count'] == variable_product.variants.count()
    assert {item['product'] for item in response.data['results']} == {variable_product.id}


def test_filter_variants_by_attribute(api_client, variable_product):
    variant = variable_product.variants.first()
    attr_slug, option_slug = next(iter(variant.get_options_dict().items()))

    response = api_client.get(
        reverse('variant-list'), {'attribute': f'{attr_slug}:{option_slug}'}
    )

    assert response.status_code == 200
    assert variant.id in {item['id'] for item in response.data['results']}
    for item in response.data['results']:
        assert item['attributes'][attr_slug] == option_slug


def test_generate_requires_admin(api_client):
    response = api_client.post(reverse('product-generate'), {'amount': 1}, format='json')

    assert response.status_code in (401, 403)
    assert Product.objects.count() == 0


def test_generate_products(admin_api_client):
    response = admin_api_client.post(
        reverse('product-generate'), {'amount': 2, 'type': 'variable'}, format='json'
    )

    assert response.status_code == 201
    assert response.data['created'] == 2
    assert Product.objects.filter(product_type=Product.VARIABLE).count() == 2
    assert Variant.objects.exists()


def test_generate_rejects_too_many_products(settings, admin_api_client):
    settings.GENERATOR = {**settings.GENERATOR, 'MAX_BATCH_SIZE': 3}

    response = admin_api_client.post(reverse('product-generate'), {'amount': 4}, format='json')

    assert response.status_code == 400
    assert 'amount' in response.data
    assert Product.objects.count() == 0


def test_generate_rejects_unknown_type(admin_api_client):
    response = admin_api_client.post(
        reverse('product-generate'), {'amount': 1, 'type': 'grouped'}, format='json'
    )

    assert response.status_code == 400
    assert 'type' in response.data


def test_categories_and_tags_are_listed(api_client, generator):
    generator.generate_simple_product()

    categories = api_client.get(reverse('category-list'))
    tags = api_client.get(reverse('tag-list'))

    assert categories.status_code == 200
    assert categories.data['count'] >= 1
    assert tags.data['count'] >= 1


@pytest.mark.parametrize('method', ['put', 'patch', 'delete'])
def test_product_detail_is_read_only(api_client, admin_api_client, generator, method):
    product = generator.generate_simple_product()
    url = reverse('product-detail', kwargs={'slug': product.slug})

    for client in (api_client, admin_api_client):
        response = getattr(client, method)(url, {'name': 'Outro'}, format='json')
        assert response.status_code == 405

    product.refresh_from_db()
    assert product.name != 'Outro'
    assert Product.objects.filter(pk=product.pk).exists()


def test_products_cannot_be_created_through_the_list(api_client, admin_api_client):
    for client in (api_client, admin_api_client):
        response = client.post(reverse('product-list'), {'name': 'Novo'}, format='json')
        assert response.status_code == 405

    assert Product.objects.count() == 0
