from django.db import models
from simple_history.models import HistoricalRecords

from .base import SellableItem


class Variant(SellableItem):
    """
    Variation of a variable product with its own price, stock and image.
    Each variant is a unique combination of attribute options.
    """
    product = models.ForeignKey(
        'catalog.Product',
        on_delete=models.CASCADE,
        related_name='variants',
        verbose_name='Produto'
    )
    name = models.CharField(
        max_length=255,
        blank=True,
        verbose_name='Nome',
        help_text='Nome personalizado (gerado automaticamente se vazio)'
    )
    image = models.ForeignKey(
        'catalog.ProductImage',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='+',
        verbose_name='Imagem'
    )

    # Attribute options for this variant
    attribute_options = models.ManyToManyField(
        'catalog.AttributeOption',
        through='VariantAttribute',
        related_name='variants',
        verbose_name='Opções de atributos'
    )

    # History tracking
    history = HistoricalRecords()

    class Meta:
        ordering = ['product', 'menu_order', 'id']
        verbose_name = 'Variante'
        verbose_name_plural = 'Variantes'

    def __str__(self):
        return self.name or self.sku or f"{self.product.name} #{self.pk}"

    def save(self, *args, **kwargs):
        if not self.name:
            self.name = self._generate_name()
        super().save(*args, **kwargs)

    def _generate_name(self):
        """Generate variant name from product name and attribute options."""
        if not self.pk:
            return self.product.name

        options = self.variantattribute_set.select_related(
            'attribute_option__attribute_type'
        ).order_by('attribute_option__attribute_type__display_order', 'id')

        if not options.exists():
            return self.product.name

        option_strings = [
            opt.attribute_option.get_display_value()
            for opt in options
        ]
        return f"{self.product.name} - {' / '.join(option_strings)}"

    def refresh_name(self):
        """Rebuild the generated name once the attribute options are linked."""
        self.name = self._generate_name()
        self.save(update_fields=['name', 'updated_at'])

    def get_option_value(self, attribute_slug):
        """Get the option value for a specific attribute type."""
        try:
            va = self.variantattribute_set.select_related(
                'attribute_option__attribute_type'
            ).get(attribute_option__attribute_type__slug=attribute_slug)
            return va.attribute_option.value
        except VariantAttribute.DoesNotExist:
            return None

    def get_options_dict(self):
        """Return dict of {attribute_slug: option_slug}"""
        return {
            va.attribute_option.attribute_type.slug: va.attribute_option.slug
            for va in self.variantattribute_set.select_related(
                'attribute_option__attribute_type'
            )
        }


class VariantAttribute(models.Model):
    """
    Through model linking Variant to AttributeOption.
    Ensures each variant has only one value per attribute type.
    """
    variant = models.ForeignKey(
        Variant,
        on_delete=models.CASCADE,
        verbose_name='Variante'
    )
    attribute_option = models.ForeignKey(
        'catalog.AttributeOption',
        on_delete=models.CASCADE,
        verbose_name='Opção de Atributo'
    )

    class Meta:
        unique_together = ['variant', 'attribute_option']
        verbose_name = 'Atributo da Variante'
        verbose_name_plural = 'Atributos das Variantes'

    def __str__(self):
        return f"{self.variant} - {self.attribute_option}"

    def save(self, *args, **kwargs):
        # Ensure only one option per attribute type per variant
        existing = VariantAttribute.objects.filter(
            variant=self.variant,
            attribute_option__attribute_type=self.attribute_option.attribute_type
        ).exclude(pk=self.pk)

        if existing.exists():
            existing.delete()

        super().save(*args, **kwargs)
