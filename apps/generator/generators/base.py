"""
Base class for the catalog data generators.

Holds the Faker instance and the helpers every generator needs: random
images, taxonomy terms and bounded numbers/prices.
"""

import io
import logging
from decimal import Decimal, ROUND_HALF_UP

from django.core.files.base import ContentFile
from faker import Faker
from PIL import Image, ImageDraw

from apps.catalog.models import Category, Tag, ProductImage
from apps.generator.conf import generator_settings
from apps.generator.exceptions import InvalidRangeError, UnknownTaxonomyError

logger = logging.getLogger(__name__)

CENTS = Decimal('0.01')

TAXONOMIES = {
    'category': Category,
    'tag': Tag,
}


def ucfirst(value):
    return value[:1].upper() + value[1:]


class Generator:
    """Shared state and helpers for data generators."""

    def __init__(self, faker=None, locale=None, seed=None):
        self.faker = faker or Faker(locale or generator_settings('FAKER_LOCALE'))
        if seed is None:
            seed = generator_settings('FAKER_SEED')
        if seed is not None:
            self.faker.seed_instance(seed)

    # -------------------------------------------------------------------------
    # Numbers
    # -------------------------------------------------------------------------

    def number_in_range(self, bounds, default):
        """
        Random integer inside ``bounds`` given as (min, max), both inclusive.
        Empty bounds use ``default`` instead.
        """
        if not bounds:
            bounds = default
        try:
            low, high = (int(value) for value in bounds)
        except (TypeError, ValueError) as exc:
            raise InvalidRangeError(f"Expected a (min, max) pair, got {bounds!r}") from exc
        if low > high:
            raise InvalidRangeError(f"Range minimum {low} is greater than maximum {high}")
        return self.faker.random_int(min=low, max=high)

    def random_price(self, low, high):
        """Decimal price with two places between low and high."""
        low_cents = int(Decimal(str(low)) * 100)
        high_cents = int(Decimal(str(high)) * 100)
        if low_cents > high_cents:
            raise InvalidRangeError(f"Price minimum {low} is greater than maximum {high}")
        cents = self.faker.random_int(min=low_cents, max=high_cents)
        return (Decimal(cents) / 100).quantize(CENTS)

    def sale_price_for(self, price):
        """
        Discount price by a random 1% to 75%.

        The result is always at least one cent below ``price``; prices of a
        cent or less have no sale price and return None.
        """
        if price <= CENTS:
            return None
        percentage = Decimal(self.faker.random_int(min=100, max=7500)) / 100
        sale_price = price - (price / 100) * percentage
        return min(sale_price.quantize(CENTS, rounding=ROUND_HALF_UP), price - CENTS)

    # -------------------------------------------------------------------------
    # Images
    # -------------------------------------------------------------------------

    def generate_image(self, alt_text=None):
        """Render a random two-colour image and store it as a ProductImage."""
        size = generator_settings('IMAGE_SIZE')
        background = self._random_color()
        image = Image.new('RGB', (size, size), background)

        draw = ImageDraw.Draw(image)
        margin = self.faker.random_int(min=0, max=size // 4)
        shape = [margin, margin, size - margin, size - margin]
        if self.faker.boolean():
            draw.ellipse(shape, fill=self._random_color())
        else:
            draw.rectangle(shape, fill=self._random_color())

        buffer = io.BytesIO()
        image.save(buffer, format='PNG')

        product_image = ProductImage(
            alt_text=alt_text or ucfirst(' '.join(self.faker.words(3)))
        )
        product_image.image.save(
            f"{self.faker.uuid4()}.png",
            ContentFile(buffer.getvalue()),
            save=True
        )
        logger.debug("Generated image %s", product_image.image.name)
        return product_image

    def _random_color(self):
        return tuple(self.faker.random_int(min=0, max=255) for _ in range(3))

    # -------------------------------------------------------------------------
    # Taxonomies
    # -------------------------------------------------------------------------

    def generate_term_ids(self, limit, taxonomy):
        """
        Return ``limit`` random term IDs of a taxonomy ('category' or 'tag').
        New terms are created when fewer than ``limit`` exist.
        """
        model = TAXONOMIES.get(taxonomy)
        if model is None:
            raise UnknownTaxonomyError(f"Unknown taxonomy: {taxonomy}")

        term_ids = list(model.objects.values_list('id', flat=True))
        created = 0
        while len(term_ids) < limit:
            term = model.objects.create(name=self.term_name())
            term_ids.append(term.id)
            created += 1

        if created:
            logger.debug("Created %d %s terms", created, taxonomy)

        self.faker.random.shuffle(term_ids)
        return term_ids[:limit]

    def term_name(self):
        words = self.faker.words(self.faker.random_int(min=1, max=2))
        return ucfirst(' '.join(words))
