from django.db import models
from simple_history.models import HistoricalRecords

from .base import SellableItem
from .category import unique_slug


class Product(SellableItem):
    """
    Base product model.
    A simple product carries its own price and stock; a variable product
    defines attributes whose option combinations become variants.
    """
    SIMPLE = 'simple'
    VARIABLE = 'variable'
    PRODUCT_TYPE_CHOICES = [
        (SIMPLE, 'Simples'),
        (VARIABLE, 'Variável'),
    ]

    CATALOG_VISIBILITY_CHOICES = [
        ('visible', 'Loja e busca'),
        ('catalog', 'Somente loja'),
        ('search', 'Somente busca'),
        ('hidden', 'Oculto'),
    ]

    product_type = models.CharField(
        max_length=20,
        choices=PRODUCT_TYPE_CHOICES,
        default=SIMPLE,
        verbose_name='Tipo'
    )
    name = models.CharField(
        max_length=255,
        verbose_name='Nome'
    )
    slug = models.SlugField(
        max_length=255,
        unique=True,
        verbose_name='Slug'
    )
    description = models.TextField(
        blank=True,
        verbose_name='Descrição'
    )
    short_description = models.TextField(
        blank=True,
        verbose_name='Descrição curta'
    )
    featured = models.BooleanField(
        default=False,
        verbose_name='Destaque'
    )
    catalog_visibility = models.CharField(
        max_length=20,
        choices=CATALOG_VISIBILITY_CHOICES,
        default='visible',
        verbose_name='Visibilidade no catálogo'
    )
    total_sales = models.PositiveIntegerField(
        default=0,
        verbose_name='Total de vendas'
    )
    sold_individually = models.BooleanField(
        default=False,
        verbose_name='Vendido individualmente'
    )
    reviews_allowed = models.BooleanField(
        default=True,
        verbose_name='Permitir avaliações'
    )
    purchase_note = models.TextField(
        blank=True,
        verbose_name='Nota de compra'
    )

    # Linked products
    upsells = models.ManyToManyField(
        'self',
        blank=True,
        symmetrical=False,
        related_name='upsold_by',
        verbose_name='Upsells'
    )
    cross_sells = models.ManyToManyField(
        'self',
        blank=True,
        symmetrical=False,
        related_name='cross_sold_by',
        verbose_name='Vendas cruzadas'
    )

    # Taxonomies
    categories = models.ManyToManyField(
        'Category',
        blank=True,
        related_name='products',
        verbose_name='Categorias'
    )
    tags = models.ManyToManyField(
        'Tag',
        blank=True,
        related_name='products',
        verbose_name='Tags'
    )

    # Images
    image = models.ForeignKey(
        'ProductImage',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='+',
        verbose_name='Imagem principal'
    )
    gallery_images = models.ManyToManyField(
        'ProductImage',
        blank=True,
        related_name='+',
        verbose_name='Galeria'
    )

    # History tracking
    history = HistoricalRecords()

    class Meta:
        ordering = ['name']
        verbose_name = 'Produto'
        verbose_name_plural = 'Produtos'

    def __str__(self):
        return self.name

    def save(self, *args, **kwargs):
        if not self.slug:
            self.slug = unique_slug(Product, self.name, instance=self, max_length=255)
        super().save(*args, **kwargs)

    @property
    def is_variable(self):
        return self.product_type == self.VARIABLE

    @property
    def variant_count(self):
        return self.variants.count()

    def get_price_range(self):
        """Return (min, max) active price; variable products use their variants."""
        if not self.is_variable:
            return self.active_price, self.active_price
        prices = [
            variant.active_price
            for variant in self.variants.filter(is_active=True)
            if variant.active_price is not None
        ]
        if not prices:
            return None, None
        return min(prices), max(prices)

    def sort_variations(self):
        """Renumber variant menu_order 0..n-1, keeping their current order."""
        variants = list(self.variants.order_by('menu_order', 'id'))
        for position, variant in enumerate(variants):
            variant.menu_order = position
        self.variants.model.objects.bulk_update(variants, ['menu_order'])
        return variants

    def get_variation_attributes(self):
        """Return this product's attributes used for variations, by position."""
        return self.product_attributes.filter(
            is_variation=True
        ).select_related('attribute_type').order_by('position', 'id')
