"""
Product data generator.

Fabricates simple and variable products with random names, prices, stock
settings, taxonomies and images. Every record is saved through the catalog
models; variable products get one variant per attribute option combination.
"""

import itertools
import logging
from datetime import timedelta, timezone as dt_timezone
from decimal import Decimal

from django.db import transaction
from django.utils import timezone
from django.utils.text import slugify

from apps.catalog.models import (
    Product,
    AttributeType,
    ProductAttribute,
    AttributeOption,
    Variant,
    VariantAttribute,
    TaxStatus,
    StockStatus,
    Backorders,
)
from apps.generator.conf import generator_settings
from apps.generator.exceptions import InvalidBatchError
from .base import Generator, ucfirst

logger = logging.getLogger(__name__)

DIMENSION_RANGE = (1, 200)
PRICE_RANGE = (1, 1000)
STOCK_RANGE = (-100, 100)
PRODUCT_TYPES = (Product.SIMPLE, Product.VARIABLE)


def attribute_combinations(option_lists):
    """
    Cartesian product of per-attribute option lists.

    The first attribute varies slowest. Empty option lists are ignored, so no
    input (or only empty lists) yields no combinations.

    >>> attribute_combinations([['p', 'm'], ['azul']])
    [('p', 'azul'), ('m', 'azul')]
    """
    option_lists = [list(options) for options in option_lists if options]
    if not option_lists:
        return []
    return list(itertools.product(*option_lists))


class ProductGenerator(Generator):
    """Generates random simple and variable products."""

    def generate(self):
        """Return a new product, variable with VARIABLE_PRODUCT_CHANCE percent."""
        is_variable = self.faker.boolean(
            chance_of_getting_true=generator_settings('VARIABLE_PRODUCT_CHANCE')
        )
        if is_variable:
            return self.generate_variable_product()
        return self.generate_simple_product()

    def generate_batch(self, amount, product_type=None):
        """Generate ``amount`` products, all of ``product_type`` when given."""
        max_batch_size = generator_settings('MAX_BATCH_SIZE')
        if isinstance(amount, bool) or not isinstance(amount, int) \
                or not 1 <= amount <= max_batch_size:
            raise InvalidBatchError(
                f"Amount must be between 1 and {max_batch_size}, got {amount!r}"
            )
        if product_type is not None and product_type not in PRODUCT_TYPES:
            raise InvalidBatchError(f"Unknown product type: {product_type}")

        if product_type == Product.SIMPLE:
            make = self.generate_simple_product
        elif product_type == Product.VARIABLE:
            make = self.generate_variable_product
        else:
            make = self.generate

        products = [make() for _ in range(amount)]
        logger.info(
            "Generated %d products (%d variable)",
            len(products),
            sum(1 for product in products if product.is_variable)
        )
        return products

    def generate_simple_product(
        self,
        height=None,
        width=None,
        length=None,
        weight=None,
        price=None,
        is_virtual=False
    ):
        """Generate and save a simple product; explicit values are used as-is."""
        faker = self.faker
        name = self.product_name()

        height = self.number_in_range((), DIMENSION_RANGE) if height is None else height
        width = self.number_in_range((), DIMENSION_RANGE) if width is None else width
        length = self.number_in_range((), DIMENSION_RANGE) if length is None else length
        weight = self.number_in_range((), DIMENSION_RANGE) if weight is None else weight
        price = self.random_price(*PRICE_RANGE) if price is None else Decimal(str(price))
        is_on_sale = faker.boolean(chance_of_getting_true=30)
        sale_price = self.sale_price_for(price) if is_on_sale else None

        with transaction.atomic():
            image = self.generate_image(alt_text=name)
            gallery_ids = self.maybe_get_gallery_image_ids()

            product = Product.objects.create(
                product_type=Product.SIMPLE,
                name=name,
                featured=faker.boolean(),
                catalog_visibility='visible',
                description='\n\n'.join(faker.paragraphs(nb=faker.random_int(min=1, max=5))),
                short_description=faker.text(),
                sku=f"{slugify(name)}-{faker.ean8()}",
                regular_price=price,
                sale_price=sale_price,
                date_on_sale_from=None,
                date_on_sale_to=self.sale_end_date(),
                total_sales=faker.random_int(min=0, max=10000),
                tax_status=TaxStatus.TAXABLE,
                tax_class='',
                manage_stock=False,
                stock_quantity=None,
                stock_status=StockStatus.IN_STOCK,
                backorders=faker.random_element(Backorders.values),
                sold_individually=faker.boolean(chance_of_getting_true=20),
                height=height,
                width=width,
                length=length,
                weight=weight,
                reviews_allowed=faker.boolean(),
                purchase_note=faker.text() if faker.boolean() else '',
                menu_order=faker.random_int(min=0, max=10000),
                is_virtual=is_virtual,
                is_downloadable=False,
                image=image,
            )
            self.link_relations(product, gallery_ids)

        logger.debug("Generated simple product %s (%s)", product.pk, product.name)
        return product

    def generate_variable_product(
        self,
        height=(),
        width=(),
        length=(),
        weight=(),
        price=(),
        is_virtual=False
    ):
        """
        Generate and save a variable product with its variants.

        Dimension and price arguments are (min, max) bounds; every variant
        gets values drawn once for the whole product.
        """
        faker = self.faker
        name = self.product_name()
        will_manage_stock = faker.boolean()
        nr_attributes = faker.random_int(min=1, max=3)

        height = self.number_in_range(height, DIMENSION_RANGE)
        width = self.number_in_range(width, DIMENSION_RANGE)
        length = self.number_in_range(length, DIMENSION_RANGE)
        weight = self.number_in_range(weight, DIMENSION_RANGE)
        if price:
            price = Decimal(self.number_in_range(price, PRICE_RANGE))
        else:
            price = self.random_price(*PRICE_RANGE)
        is_on_sale = faker.boolean(chance_of_getting_true=30)
        sale_price = self.sale_price_for(price) if is_on_sale else None

        with transaction.atomic():
            image = self.generate_image(alt_text=name)
            gallery_ids = self.maybe_get_gallery_image_ids()

            # Saved first: variants and attributes need the product ID.
            product = Product.objects.create(
                product_type=Product.VARIABLE,
                name=name,
                featured=faker.boolean(chance_of_getting_true=10),
                tax_status=TaxStatus.TAXABLE,
                tax_class='',
                manage_stock=will_manage_stock,
                stock_quantity=self.stock_quantity(will_manage_stock),
                stock_status=StockStatus.IN_STOCK,
                backorders=faker.random_element(Backorders.values),
                sold_individually=faker.boolean(chance_of_getting_true=20),
                reviews_allowed=faker.boolean(),
                purchase_note=faker.text() if faker.boolean() else '',
                menu_order=faker.random_int(min=0, max=10000),
                image=image,
            )
            self.link_relations(product, gallery_ids)
            self.generate_attributes(product, nr_attributes)

            # One variant for each attribute option combination.
            option_lists = [
                list(attribute.get_options())
                for attribute in product.get_variation_attributes()
            ]
            for combination in attribute_combinations(option_lists):
                variant = Variant.objects.create(
                    product=product,
                    regular_price=price,
                    sale_price=sale_price,
                    date_on_sale_from=None,
                    date_on_sale_to=self.sale_end_date(),
                    tax_status=TaxStatus.TAXABLE,
                    tax_class='',
                    manage_stock=will_manage_stock,
                    stock_quantity=self.stock_quantity(will_manage_stock),
                    stock_status=StockStatus.IN_STOCK,
                    height=height,
                    width=width,
                    length=length,
                    weight=weight,
                    is_virtual=is_virtual,
                    is_downloadable=False,
                    image=self.generate_image(alt_text=name),
                )
                for option in combination:
                    VariantAttribute.objects.create(variant=variant, attribute_option=option)
                variant.refresh_name()

            product.sort_variations()
            product.save()

        logger.debug(
            "Generated variable product %s (%s) with %d variants",
            product.pk, product.name, product.variant_count
        )
        return product

    def generate_attributes(self, product, count):
        """Attach ``count`` random variation attributes with 2-4 options each."""
        faker = self.faker
        attributes = []
        used_slugs = set()

        for _ in range(count):
            name, slug = '', ''
            while not slug or slug in used_slugs:
                name = ucfirst(' '.join(faker.words(faker.random_int(min=1, max=3))))
                slug = slugify(name)
            used_slugs.add(slug)

            attribute_type, _ = AttributeType.objects.get_or_create(
                slug=slug,
                defaults={'name': name}
            )
            attribute = ProductAttribute.objects.create(
                product=product,
                attribute_type=attribute_type,
                position=0,
                is_visible=True,
                is_variation=True,
            )

            values = {}
            for word in faker.words(faker.random_int(min=2, max=4), unique=True):
                value = ucfirst(word)
                if slugify(value):
                    values.setdefault(slugify(value), value)

            for display_order, value in enumerate(values.values()):
                AttributeOption.objects.create(
                    attribute_type=attribute_type,
                    product=product,
                    value=value,
                    display_order=display_order,
                )
            attributes.append(attribute)

        return attributes

    def link_relations(self, product, gallery_ids):
        """Set the many-to-many relations shared by both product shapes."""
        faker = self.faker
        product.upsells.set(self.get_existing_product_ids(exclude=product))
        product.cross_sells.set(self.get_existing_product_ids(exclude=product))
        product.categories.set(
            self.generate_term_ids(faker.random_int(min=1, max=10), 'category')
        )
        product.tags.set(
            self.generate_term_ids(faker.random_int(min=1, max=10), 'tag')
        )
        product.gallery_images.set(gallery_ids)

    def maybe_get_gallery_image_ids(self):
        """10% chance of a gallery with 1 to 3 new images."""
        if not self.faker.boolean(chance_of_getting_true=10):
            return []
        return [
            self.generate_image().id
            for _ in range(self.faker.random_int(min=1, max=3))
        ]

    def get_existing_product_ids(self, limit=5, exclude=None):
        """The IDs of the 2 * limit newest products, in random order."""
        queryset = Product.objects.all()
        if exclude is not None:
            queryset = queryset.exclude(pk=exclude.pk)
        product_ids = list(
            queryset.order_by('-created_at', '-id').values_list('id', flat=True)[:limit * 2]
        )
        if not product_ids:
            return []
        self.faker.random.shuffle(product_ids)
        return product_ids

    def product_name(self):
        return ' '.join(self.faker.words(self.faker.random_int(min=1, max=5)))

    def stock_quantity(self, manage_stock):
        if not manage_stock:
            return None
        return self.faker.random_int(min=STOCK_RANGE[0], max=STOCK_RANGE[1])

    def sale_end_date(self):
        """Random date no later than one month from now."""
        return self.faker.date_time(
            tzinfo=dt_timezone.utc,
            end_datetime=timezone.now() + timedelta(days=30)
        )
