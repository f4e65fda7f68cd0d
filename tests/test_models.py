from decimal import Decimal

import pytest

from apps.catalog.models import (
    Product,
    Category,
    Tag,
    AttributeType,
    ProductAttribute,
    AttributeOption,
    Variant,
    VariantAttribute,
    StockStatus,
    Backorders,
)

pytestmark = pytest.mark.django_db


def _variable_product(name='Camiseta'):
    product = Product.objects.create(name=name, product_type=Product.VARIABLE)
    color = AttributeType.objects.create(name='Cor', display_order=1)
    size = AttributeType.objects.create(name='Tamanho', display_order=2)
    for attribute_type in (color, size):
        ProductAttribute.objects.create(
            product=product, attribute_type=attribute_type, is_variation=True
        )
    azul = AttributeOption.objects.create(attribute_type=color, product=product, value='Azul')
    preto = AttributeOption.objects.create(attribute_type=color, product=product, value='Preto')
    medio = AttributeOption.objects.create(attribute_type=size, product=product, value='M')
    return product, azul, preto, medio


def test_slug_is_generated_and_deduplicated():
    first = Product.objects.create(name='Camiseta Básica')
    second = Product.objects.create(name='Camiseta Básica')

    assert first.slug == 'camiseta-basica'
    assert second.slug == 'camiseta-basica-1'


def test_empty_sku_is_stored_as_null():
    Product.objects.create(name='Sem SKU', sku='')
    Product.objects.create(name='Outro sem SKU', sku='')

    assert Product.objects.filter(sku__isnull=True).count() == 2


@pytest.mark.parametrize('quantity, backorders, expected', [
    (10, Backorders.NO, StockStatus.IN_STOCK),
    (0, Backorders.NO, StockStatus.OUT_OF_STOCK),
    (-5, Backorders.NOTIFY, StockStatus.ON_BACKORDER),
    (-5, Backorders.YES, StockStatus.ON_BACKORDER),
])
def test_managed_stock_sets_stock_status(quantity, backorders, expected):
    product = Product.objects.create(
        name='Linha', manage_stock=True, stock_quantity=quantity, backorders=backorders
    )

    assert product.stock_status == expected


def test_unmanaged_stock_clears_quantity_and_keeps_status():
    product = Product.objects.create(
        name='Linha', manage_stock=False, stock_quantity=15, stock_status=StockStatus.ON_BACKORDER
    )

    assert product.stock_quantity is None
    assert product.stock_status == StockStatus.ON_BACKORDER


def test_sale_properties():
    product = Product(name='Tinta', regular_price=Decimal('100.00'), sale_price=Decimal('75.00'))

    assert product.is_on_sale
    assert product.discount_percentage == 25
    assert product.active_price == Decimal('75.00')

    product.sale_price = None
    assert not product.is_on_sale
    assert product.discount_percentage == 0
    assert product.active_price == Decimal('100.00')


def test_variant_name_uses_attribute_options():
    product, azul, _, medio = _variable_product()
    variant = Variant.objects.create(product=product, regular_price=Decimal('10.00'))
    assert variant.name == 'Camiseta'

    VariantAttribute.objects.create(variant=variant, attribute_option=azul)
    VariantAttribute.objects.create(variant=variant, attribute_option=medio)
    variant.refresh_name()

    assert variant.name == 'Camiseta - Azul / M'
    assert variant.get_options_dict() == {'cor': 'azul', 'tamanho': 'm'}
    assert variant.get_option_value('cor') == 'Azul'


def test_variant_keeps_one_option_per_attribute_type():
    product, azul, preto, _ = _variable_product()
    variant = Variant.objects.create(product=product)

    VariantAttribute.objects.create(variant=variant, attribute_option=azul)
    VariantAttribute.objects.create(variant=variant, attribute_option=preto)

    assert list(variant.attribute_options.all()) == [preto]


def test_sort_variations_renumbers_menu_order():
    product, *_ = _variable_product()
    first = Variant.objects.create(product=product, menu_order=40)
    second = Variant.objects.create(product=product, menu_order=7)
    third = Variant.objects.create(product=product, menu_order=40)

    product.sort_variations()

    ordered = list(product.variants.order_by('menu_order').values_list('id', 'menu_order'))
    assert ordered == [(second.id, 0), (first.id, 1), (third.id, 2)]


def test_price_range_of_variable_product():
    product, *_ = _variable_product()
    Variant.objects.create(product=product, regular_price=Decimal('50.00'))
    Variant.objects.create(
        product=product, regular_price=Decimal('80.00'), sale_price=Decimal('30.00')
    )
    Variant.objects.create(product=product, regular_price=Decimal('5.00'), is_active=False)

    assert product.get_price_range() == (Decimal('30.00'), Decimal('50.00'))


def test_price_range_of_simple_product():
    product = Product.objects.create(name='Pincel', regular_price=Decimal('12.50'))

    assert product.get_price_range() == (Decimal('12.50'), Decimal('12.50'))


def test_variation_attributes_exclude_non_variation_ones():
    product, *_ = _variable_product()
    material = AttributeType.objects.create(name='Material')
    ProductAttribute.objects.create(product=product, attribute_type=material, is_variation=False)

    slugs = [attribute.attribute_type.slug for attribute in product.get_variation_attributes()]
    assert slugs == ['cor', 'tamanho']


def test_category_path_and_descendants():
    pintura = Category.objects.create(name='Pintura')
    tintas = Category.objects.create(name='Tintas', parent=pintura)
    tecido = Category.objects.create(name='Tinta para Tecido', parent=tintas)

    assert tecido.full_path == 'Pintura > Tintas > Tinta para Tecido'
    assert tecido.level == 2
    assert pintura.get_descendants() == [tintas, tecido]


def test_tag_slug_is_unique():
    Tag.objects.create(name='Promoção')
    second = Tag.objects.create(name='promoção')

    assert second.slug == 'promocao-1'
