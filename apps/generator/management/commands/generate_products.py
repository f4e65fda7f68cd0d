"""
Generate random simple and variable products for testing.

Usage:
  python manage.py generate_products
  python manage.py generate_products 25 --type variable --seed 42
"""

from django.core.management.base import BaseCommand, CommandError

from apps.catalog.models import Product
from apps.generator.exceptions import GeneratorError
from apps.generator.generators import ProductGenerator


class Command(BaseCommand):
    help = 'Creates random simple and variable products with images, taxonomies and variants'

    def add_arguments(self, parser):
        parser.add_argument(
            'amount',
            nargs='?',
            type=int,
            default=10,
            help='Number of products to generate (default: 10)'
        )
        parser.add_argument(
            '--type',
            dest='product_type',
            choices=[Product.SIMPLE, Product.VARIABLE],
            help='Only generate products of this type'
        )
        parser.add_argument(
            '--seed',
            type=int,
            help='Seed the random data for reproducible output'
        )

    def handle(self, *args, **options):
        amount = options['amount']
        product_type = options.get('product_type')

        self.stdout.write(f'Generating {amount} products...')

        generator = ProductGenerator(seed=options.get('seed'))
        try:
            products = generator.generate_batch(amount, product_type=product_type)
        except GeneratorError as exc:
            raise CommandError(str(exc)) from exc

        variable_count = sum(1 for product in products if product.is_variable)
        variant_count = sum(product.variant_count for product in products if product.is_variable)

        self.stdout.write(self.style.SUCCESS(f'Successfully generated {len(products)} products'))
        self.stdout.write(f'   - {len(products) - variable_count} simple')
        self.stdout.write(f'   - {variable_count} variable ({variant_count} variants)')
