"""
Catalog models for ecommerce with simple and variable products.

Model Hierarchy:
- Product: Simple product or variable product parent
- AttributeType: Dynamic attribute types (Color, Size, Material)
- ProductAttribute: Attribute attached to a product, flagged for variations
- AttributeOption: Values of an attribute for one product (Azul, P, 230m)
- Variant: Variation of a variable product, one option per attribute
- Category / Tag: Product taxonomies
- ProductImage: Image attachments with thumbnails
"""

from .choices import TaxStatus, StockStatus, Backorders
from .category import Category, Tag
from .image import ProductImage
from .product import Product
from .attribute import AttributeType, ProductAttribute, AttributeOption
from .variant import Variant, VariantAttribute

__all__ = [
    'TaxStatus',
    'StockStatus',
    'Backorders',
    'Category',
    'Tag',
    'ProductImage',
    'Product',
    'AttributeType',
    'ProductAttribute',
    'AttributeOption',
    'Variant',
    'VariantAttribute',
]
