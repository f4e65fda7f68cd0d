from .serializers import (
    ProductSerializer,
    ProductListSerializer,
    ProductDetailSerializer,
    CategorySerializer,
    TagSerializer,
    ProductImageSerializer,
    AttributeTypeSerializer,
    ProductAttributeSerializer,
    AttributeOptionSerializer,
    VariantListSerializer,
    VariantDetailSerializer,
    GenerateProductsSerializer,
)

__all__ = [
    'ProductSerializer',
    'ProductListSerializer',
    'ProductDetailSerializer',
    'CategorySerializer',
    'TagSerializer',
    'ProductImageSerializer',
    'AttributeTypeSerializer',
    'ProductAttributeSerializer',
    'AttributeOptionSerializer',
    'VariantListSerializer',
    'VariantDetailSerializer',
    'GenerateProductsSerializer',
]
