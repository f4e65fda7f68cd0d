from decimal import Decimal
from unittest import mock

import pytest
from django.utils.text import slugify

from apps.catalog.models import (
    Product,
    ProductAttribute,
    AttributeOption,
    ProductImage,
    Variant,
    VariantAttribute,
    StockStatus,
)
from apps.generator.exceptions import InvalidBatchError, InvalidRangeError
from apps.generator.generators import attribute_combinations

pytestmark = pytest.mark.django_db


# =============================================================================
# Combinations
# =============================================================================

def test_attribute_combinations_first_attribute_varies_slowest():
    combinations = attribute_combinations([['p', 'm'], ['azul', 'preto']])

    assert combinations == [
        ('p', 'azul'),
        ('p', 'preto'),
        ('m', 'azul'),
        ('m', 'preto'),
    ]


def test_attribute_combinations_ignores_empty_lists():
    assert attribute_combinations([]) == []
    assert attribute_combinations([[], []]) == []
    assert attribute_combinations([['a', 'b'], []]) == [('a',), ('b',)]


# =============================================================================
# Simple products
# =============================================================================

def test_generate_simple_product_defaults(generator):
    product = generator.generate_simple_product()
    product.refresh_from_db()

    assert product.product_type == Product.SIMPLE
    assert 1 <= len(product.name.split()) <= 5
    assert product.sku.startswith(f"{slugify(product.name)}-")
    assert len(product.sku.rsplit('-', 1)[1]) == 8
    assert Decimal('1.00') <= product.regular_price <= Decimal('1000.00')
    if product.sale_price is not None:
        assert product.sale_price < product.regular_price
    assert product.date_on_sale_to is not None
    for dimension in (product.height, product.width, product.length, product.weight):
        assert 1 <= dimension <= 200
    assert product.manage_stock is False
    assert product.stock_quantity is None
    assert product.stock_status == StockStatus.IN_STOCK
    assert product.backorders in ('yes', 'no', 'notify')
    assert product.catalog_visibility == 'visible'
    assert product.tax_status == 'taxable'
    assert 0 <= product.total_sales <= 10000
    assert 0 <= product.menu_order <= 10000
    assert product.description
    assert product.is_downloadable is False
    assert 1 <= product.categories.count() <= 10
    assert 1 <= product.tags.count() <= 10
    assert product.image is not None
    assert product.gallery_images.count() <= 3
    assert product.variants.count() == 0


def test_generate_simple_product_uses_explicit_values(generator):
    product = generator.generate_simple_product(
        height=10, width=20, length=30, weight=2, price='19.90', is_virtual=True
    )
    product.refresh_from_db()

    assert (product.height, product.width, product.length, product.weight) == (10, 20, 30, 2)
    assert product.regular_price == Decimal('19.90')
    assert product.is_virtual is True


def test_simple_products_link_existing_products(generator):
    first = generator.generate_simple_product()
    second = generator.generate_simple_product()

    assert not first.upsells.exists()
    assert set(second.upsells.values_list('id', flat=True)) == {first.id}
    assert set(second.cross_sells.values_list('id', flat=True)) == {first.id}


def test_simple_products_link_up_to_ten_newest_products(generator):
    earlier = [Product.objects.create(name=f'Produto {i}') for i in range(12)]

    product = generator.generate_simple_product()

    upsell_ids = set(product.upsells.values_list('id', flat=True))
    assert upsell_ids == {item.id for item in earlier[-10:]}
    assert product.id not in upsell_ids


# =============================================================================
# Variable products
# =============================================================================

def test_generate_variable_product_creates_one_variant_per_combination(generator):
    product = generator.generate_variable_product()

    attributes = list(product.get_variation_attributes())
    assert 1 <= len(attributes) <= 3

    expected = 1
    for attribute in attributes:
        option_count = attribute.get_options().count()
        assert 2 <= option_count <= 4
        assert attribute.is_visible
        expected *= option_count

    variants = list(product.variants.all())
    assert len(variants) == expected

    combinations = {
        tuple(sorted(variant.attribute_options.values_list('id', flat=True)))
        for variant in variants
    }
    assert len(combinations) == expected
    for variant in variants:
        assert variant.attribute_options.count() == len(attributes)
        assert variant.name.startswith(f"{product.name} - ")


def test_variable_product_shares_price_and_dimensions(generator):
    product = generator.generate_variable_product(
        height=[5, 5], width=[6, 8], length=(), weight=(1, 1), price=[10, 10]
    )
    variants = list(product.variants.all())

    assert product.product_type == Product.VARIABLE
    assert product.regular_price is None
    assert {variant.regular_price for variant in variants} == {Decimal('10.00')}
    assert len({variant.sale_price for variant in variants}) == 1
    assert {variant.height for variant in variants} == {5}
    assert {variant.weight for variant in variants} == {1}
    assert len({variant.width for variant in variants}) == 1
    assert 6 <= variants[0].width <= 8
    assert 1 <= variants[0].length <= 200
    for variant in variants:
        assert variant.image is not None
        assert variant.sku is None


def test_variable_product_stock_settings_apply_to_variants(generator):
    for _ in range(4):
        product = generator.generate_variable_product()
        for variant in product.variants.all():
            assert variant.manage_stock == product.manage_stock
            if product.manage_stock:
                assert -100 <= variant.stock_quantity <= 100
            else:
                assert variant.stock_quantity is None
                assert variant.stock_status == StockStatus.IN_STOCK


def test_variable_product_variants_are_sorted(generator):
    product = generator.generate_variable_product()

    menu_orders = list(product.variants.order_by('menu_order').values_list('menu_order', flat=True))
    assert menu_orders == list(range(len(menu_orders)))


def test_variable_product_with_invalid_range_creates_nothing(generator):
    with pytest.raises(InvalidRangeError):
        generator.generate_variable_product(price=[100, 1])

    assert Product.objects.count() == 0
    assert ProductImage.objects.count() == 0


def test_variable_product_is_rolled_back_when_a_variant_fails(generator):
    with mock.patch.object(
        VariantAttribute.objects, 'create', side_effect=RuntimeError('disk full')
    ):
        with pytest.raises(RuntimeError):
            generator.generate_variable_product()

    assert Product.objects.count() == 0
    assert Variant.objects.count() == 0
    assert ProductAttribute.objects.count() == 0
    assert AttributeOption.objects.count() == 0
    assert ProductImage.objects.count() == 0


def test_generate_attributes_uses_distinct_attribute_types(generator):
    product = Product.objects.create(name='Base', product_type=Product.VARIABLE)

    attributes = generator.generate_attributes(product, 3)

    assert len(attributes) == 3
    assert len({attribute.attribute_type_id for attribute in attributes}) == 3
    for attribute in attributes:
        values = list(attribute.get_options().values_list('value', flat=True))
        assert all(value[:1] == value[:1].upper() for value in values)


# =============================================================================
# Shape choice and batches
# =============================================================================

def test_generate_picks_variable_by_configured_chance(settings, generator):
    settings.GENERATOR = {**settings.GENERATOR, 'VARIABLE_PRODUCT_CHANCE': 100}
    with mock.patch.object(generator, 'generate_variable_product') as variable, \
            mock.patch.object(generator, 'generate_simple_product') as simple:
        result = generator.generate()

    assert result is variable.return_value
    simple.assert_not_called()


def test_generate_picks_simple_by_configured_chance(settings, generator):
    settings.GENERATOR = {**settings.GENERATOR, 'VARIABLE_PRODUCT_CHANCE': 0}
    with mock.patch.object(generator, 'generate_variable_product') as variable, \
            mock.patch.object(generator, 'generate_simple_product') as simple:
        result = generator.generate()

    assert result is simple.return_value
    variable.assert_not_called()


def test_generate_batch_of_one_type(generator):
    products = generator.generate_batch(3, product_type=Product.SIMPLE)

    assert len(products) == 3
    assert all(product.product_type == Product.SIMPLE for product in products)
    assert Product.objects.count() == 3


@pytest.mark.parametrize('amount, product_type', [
    (0, None),
    (101, None),
    ('5', None),
    (2, 'grouped'),
    (True, None),
])
def test_generate_batch_rejects_bad_requests(generator, amount, product_type):
    with pytest.raises(InvalidBatchError):
        generator.generate_batch(amount, product_type=product_type)

    assert Product.objects.count() == 0


# =============================================================================
# Helpers
# =============================================================================

def test_get_existing_product_ids_without_products(generator):
    assert generator.get_existing_product_ids() == []


def test_get_existing_product_ids_returns_the_newest(generator):
    products = [Product.objects.create(name=f'Produto {i}') for i in range(15)]
    newest_ids = {product.id for product in products[-10:]}

    product_ids = generator.get_existing_product_ids(limit=5)

    assert len(product_ids) == 10
    assert set(product_ids) == newest_ids


def test_get_existing_product_ids_skips_excluded_product(generator):
    products = [Product.objects.create(name=f'Produto {i}') for i in range(3)]

    product_ids = generator.get_existing_product_ids(exclude=products[-1])

    assert sorted(product_ids) == [products[0].id, products[1].id]


def test_gallery_is_empty_or_has_up_to_three_images(generator):
    sizes = set()
    for _ in range(30):
        image_ids = generator.maybe_get_gallery_image_ids()
        sizes.add(len(image_ids))
        assert ProductImage.objects.filter(id__in=image_ids).count() == len(image_ids)

    assert sizes <= {0, 1, 2, 3}
    assert 0 in sizes


def test_variants_are_saved_with_product(generator):
    product = generator.generate_variable_product()

    assert Variant.objects.filter(product=product).count() == product.variant_count
    assert product.history.count() >= 2
