from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models

from .choices import TaxStatus, StockStatus, Backorders, resolve_stock_status


def dimension_field(verbose_name):
    return models.DecimalField(
        max_digits=10,
        decimal_places=3,
        null=True,
        blank=True,
        validators=[MinValueValidator(Decimal('0'))],
        verbose_name=verbose_name
    )


class SellableItem(models.Model):
    """
    Price, tax, stock and shipping profile shared by products and variations.
    """
    sku = models.CharField(
        max_length=100,
        unique=True,
        null=True,
        blank=True,
        verbose_name='SKU'
    )

    # Pricing
    regular_price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[MinValueValidator(Decimal('0.00'))],
        verbose_name='Preço regular'
    )
    sale_price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[MinValueValidator(Decimal('0.00'))],
        verbose_name='Preço promocional'
    )
    date_on_sale_from = models.DateTimeField(
        null=True,
        blank=True,
        verbose_name='Promoção a partir de'
    )
    date_on_sale_to = models.DateTimeField(
        null=True,
        blank=True,
        verbose_name='Promoção até'
    )

    # Tax
    tax_status = models.CharField(
        max_length=20,
        choices=TaxStatus.choices,
        default=TaxStatus.TAXABLE,
        verbose_name='Status fiscal'
    )
    tax_class = models.CharField(
        max_length=100,
        blank=True,
        verbose_name='Classe de imposto'
    )

    # Inventory
    manage_stock = models.BooleanField(
        default=False,
        verbose_name='Gerenciar estoque'
    )
    stock_quantity = models.IntegerField(
        null=True,
        blank=True,
        verbose_name='Quantidade em estoque'
    )
    stock_status = models.CharField(
        max_length=20,
        choices=StockStatus.choices,
        default=StockStatus.IN_STOCK,
        verbose_name='Status do estoque'
    )
    backorders = models.CharField(
        max_length=10,
        choices=Backorders.choices,
        default=Backorders.NO,
        verbose_name='Encomendas'
    )

    # Physical properties
    height = dimension_field('Altura')
    width = dimension_field('Largura')
    length = dimension_field('Comprimento')
    weight = dimension_field('Peso')

    is_virtual = models.BooleanField(
        default=False,
        verbose_name='Virtual'
    )
    is_downloadable = models.BooleanField(
        default=False,
        verbose_name='Download'
    )
    menu_order = models.IntegerField(
        default=0,
        verbose_name='Ordem no menu'
    )
    is_active = models.BooleanField(
        default=True,
        verbose_name='Ativo'
    )

    created_at = models.DateTimeField(
        auto_now_add=True,
        verbose_name='Criado em'
    )
    updated_at = models.DateTimeField(
        auto_now=True,
        verbose_name='Atualizado em'
    )

    class Meta:
        abstract = True

    def save(self, *args, **kwargs):
        if not self.sku:
            self.sku = None
        if not self.manage_stock:
            self.stock_quantity = None
        self.stock_status = resolve_stock_status(
            self.manage_stock, self.stock_quantity, self.backorders, self.stock_status
        )
        super().save(*args, **kwargs)

    @property
    def active_price(self):
        if self.is_on_sale:
            return self.sale_price
        return self.regular_price

    @property
    def is_on_sale(self):
        return bool(
            self.sale_price is not None
            and self.regular_price is not None
            and self.sale_price < self.regular_price
        )

    @property
    def discount_percentage(self):
        if not self.is_on_sale:
            return 0
        return int(((self.regular_price - self.sale_price) / self.regular_price) * 100)

    @property
    def is_in_stock(self):
        return self.stock_status != StockStatus.OUT_OF_STOCK
