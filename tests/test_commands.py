from io import StringIO

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError

from apps.catalog.models import Product, Variant

pytestmark = pytest.mark.django_db


def _run(*args):
    out = StringIO()
    call_command('generate_products', *args, stdout=out)
    return out.getvalue()


def test_generate_simple_products():
    output = _run('3', '--type', 'simple')

    assert Product.objects.filter(product_type=Product.SIMPLE).count() == 3
    assert 'Successfully generated 3 products' in output
    assert '3 simple' in output


def test_generate_variable_products_reports_variants():
    output = _run('1', '--type', 'variable')

    product = Product.objects.get()
    assert product.product_type == Product.VARIABLE
    assert f'1 variable ({Variant.objects.count()} variants)' in output


def test_generate_rejects_amount_out_of_range(settings):
    settings.GENERATOR = {**settings.GENERATOR, 'MAX_BATCH_SIZE': 2}

    with pytest.raises(CommandError, match='between 1 and 2'):
        _run('3')
    with pytest.raises(CommandError):
        _run('0')

    assert Product.objects.count() == 0


def test_generate_rejects_unknown_type():
    with pytest.raises(CommandError):
        _run('1', '--type', 'grouped')


def test_seed_makes_output_reproducible():
    _run('1', '--type', 'simple', '--seed', '7')
    first = Product.objects.get()
    first_name, first_price = first.name, first.regular_price
    Product.objects.all().delete()

    _run('1', '--type', 'simple', '--seed', '7')
    second = Product.objects.get()

    assert second.name == first_name
    assert second.regular_price == first_price
