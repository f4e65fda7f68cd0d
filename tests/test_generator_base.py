from decimal import Decimal

import pytest

from apps.catalog.models import Category, Tag, ProductImage
from apps.generator.exceptions import InvalidRangeError, UnknownTaxonomyError
from apps.generator.generators import Generator


@pytest.fixture
def base_generator():
    return Generator(seed=42)


def test_number_in_range_uses_default_bounds_when_empty(base_generator):
    values = {base_generator.number_in_range((), (1, 3)) for _ in range(200)}

    assert values == {1, 2, 3}


def test_number_in_range_uses_explicit_bounds(base_generator):
    assert base_generator.number_in_range([7, 7], (1, 200)) == 7
    assert 10 <= base_generator.number_in_range((10, 20), (1, 200)) <= 20


@pytest.mark.parametrize('bounds', [(20, 10), (1,), ('a', 'b')])
def test_number_in_range_rejects_bad_bounds(base_generator, bounds):
    with pytest.raises(InvalidRangeError):
        base_generator.number_in_range(bounds, (1, 200))


def test_random_price_has_two_decimal_places(base_generator):
    for _ in range(100):
        price = base_generator.random_price(1, 1000)
        assert Decimal('1.00') <= price <= Decimal('1000.00')
        assert price.as_tuple().exponent == -2


def test_sale_price_is_a_discount_of_up_to_75_percent(base_generator):
    for price in (Decimal('1.00'), Decimal('19.90'), Decimal('999.99')):
        for _ in range(50):
            sale_price = base_generator.sale_price_for(price)
            assert sale_price < price
            assert sale_price >= (price * Decimal('0.25')).quantize(Decimal('0.01'))


def test_sale_price_of_small_prices_stays_below_price(base_generator):
    for _ in range(200):
        sale_price = base_generator.sale_price_for(Decimal('0.50'))
        assert Decimal('0.12') <= sale_price <= Decimal('0.49')


def test_no_sale_price_for_a_single_cent(base_generator):
    assert base_generator.sale_price_for(Decimal('0.01')) is None


def test_seeded_generators_repeat_values():
    first = Generator(seed=99)
    second = Generator(seed=99)

    assert [first.random_price(1, 1000) for _ in range(5)] == \
        [second.random_price(1, 1000) for _ in range(5)]


@pytest.mark.django_db
def test_generate_term_ids_creates_missing_terms(base_generator):
    term_ids = base_generator.generate_term_ids(4, 'category')

    assert len(term_ids) == 4
    assert len(set(term_ids)) == 4
    assert Category.objects.count() == 4
    assert set(term_ids) == set(Category.objects.values_list('id', flat=True))


@pytest.mark.django_db
def test_generate_term_ids_reuses_existing_terms(base_generator):
    existing = [Tag.objects.create(name=f'Tag {i}').id for i in range(6)]

    term_ids = base_generator.generate_term_ids(3, 'tag')

    assert len(term_ids) == 3
    assert set(term_ids) <= set(existing)
    assert Tag.objects.count() == 6


def test_generate_term_ids_rejects_unknown_taxonomy(base_generator):
    with pytest.raises(UnknownTaxonomyError):
        base_generator.generate_term_ids(2, 'brand')


@pytest.mark.django_db
def test_generate_image_stores_processed_file(base_generator):
    image = base_generator.generate_image(alt_text='Camiseta azul')

    assert image.pk is not None
    assert image.alt_text == 'Camiseta azul'
    assert image.image.name.startswith('products/')
    assert image.image.name.endswith('.jpg')
    assert image.image.storage.exists(image.image.name)
    assert ProductImage.objects.count() == 1
