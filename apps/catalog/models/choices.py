from django.db import models


class TaxStatus(models.TextChoices):
    TAXABLE = 'taxable', 'Tributável'
    SHIPPING = 'shipping', 'Somente frete'
    NONE = 'none', 'Nenhum'


class StockStatus(models.TextChoices):
    IN_STOCK = 'instock', 'Em estoque'
    OUT_OF_STOCK = 'outofstock', 'Sem estoque'
    ON_BACKORDER = 'onbackorder', 'Sob encomenda'


class Backorders(models.TextChoices):
    NO = 'no', 'Não permitir'
    NOTIFY = 'notify', 'Permitir, avisando o cliente'
    YES = 'yes', 'Permitir'


def resolve_stock_status(manage_stock, stock_quantity, backorders, current):
    """Stock status implied by managed stock; unmanaged stock keeps current."""
    if not manage_stock or stock_quantity is None:
        return current
    if stock_quantity > 0:
        return StockStatus.IN_STOCK
    if backorders == Backorders.NO:
        return StockStatus.OUT_OF_STOCK
    return StockStatus.ON_BACKORDER
