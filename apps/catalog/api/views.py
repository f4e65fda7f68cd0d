import logging

from rest_framework import viewsets, filters, status
from rest_framework.decorators import action
from rest_framework.permissions import IsAdminUser
from rest_framework.response import Response
from django_filters.rest_framework import DjangoFilterBackend
from django.db.models import Prefetch

from apps.catalog.models import (
    Product,
    Category,
    Tag,
    AttributeType,
    Variant,
)
from apps.generator.exceptions import GeneratorError
from apps.generator.generators import ProductGenerator
from .serializers import (
    ProductListSerializer,
    ProductDetailSerializer,
    CategorySerializer,
    TagSerializer,
    AttributeTypeSerializer,
    VariantListSerializer,
    VariantDetailSerializer,
    GenerateProductsSerializer,
)
from .filters import ProductFilter, VariantFilter

logger = logging.getLogger(__name__)


class ProductViewSet(viewsets.ReadOnlyModelViewSet):
    """
    API endpoint for products.

    list: List all products
    retrieve: Get product detail with attributes and variants
    generate: Create random products for testing
    """
    queryset = Product.objects.all()
    lookup_field = 'slug'
    filterset_class = ProductFilter
    filter_backends = [DjangoFilterBackend, filters.SearchFilter, filters.OrderingFilter]
    search_fields = ['name', 'sku', 'description']
    ordering_fields = ['name', 'regular_price', 'menu_order', 'created_at']
    ordering = ['name']

    def get_serializer_class(self):
        if self.action == 'list':
            return ProductListSerializer
        elif self.action == 'retrieve':
            return ProductDetailSerializer
        return GenerateProductsSerializer

    def get_queryset(self):
        queryset = super().get_queryset()
        if self.action == 'retrieve':
            queryset = queryset.select_related('image').prefetch_related(
                Prefetch(
                    'variants',
                    queryset=Variant.objects.filter(is_active=True).prefetch_related(
                        'variantattribute_set__attribute_option__attribute_type'
                    )
                ),
                'product_attributes__attribute_type',
                'categories',
                'tags',
                'gallery_images',
            )
        return queryset

    @action(detail=False, methods=['post'], permission_classes=[IsAdminUser])
    def generate(self, request):
        """
        Generate random products.

        Expected payload:
        {
            "amount": 5,
            "type": "variable"
        }
        """
        serializer = GenerateProductsSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            products = ProductGenerator().generate_batch(
                serializer.validated_data['amount'],
                product_type=serializer.validated_data.get('type'),
            )
        except GeneratorError as e:
            logger.warning("Product generation rejected: %s", e)
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        data = ProductListSerializer(products, many=True, context={'request': request}).data
        return Response({'created': len(products), 'products': data}, status=status.HTTP_201_CREATED)


class VariantViewSet(viewsets.ReadOnlyModelViewSet):
    """
    API endpoint for variants.

    Supports filtering by product, attributes, price range, stock status.
    """
    queryset = Variant.objects.select_related('product', 'image').prefetch_related(
        'variantattribute_set__attribute_option__attribute_type'
    )
    filterset_class = VariantFilter
    filter_backends = [DjangoFilterBackend, filters.SearchFilter, filters.OrderingFilter]
    search_fields = ['sku', 'name', 'product__name']
    ordering_fields = ['regular_price', 'stock_quantity', 'menu_order', 'created_at']
    ordering = ['product', 'menu_order']

    def get_serializer_class(self):
        if self.action == 'retrieve':
            return VariantDetailSerializer
        return VariantListSerializer


class CategoryViewSet(viewsets.ReadOnlyModelViewSet):
    """
    API endpoint for product categories.
    """
    queryset = Category.objects.select_related('parent')
    serializer_class = CategorySerializer
    lookup_field = 'slug'
    filter_backends = [DjangoFilterBackend, filters.SearchFilter]
    filterset_fields = ['parent', 'is_active']
    search_fields = ['name']


class TagViewSet(viewsets.ReadOnlyModelViewSet):
    """
    API endpoint for product tags.
    """
    queryset = Tag.objects.all()
    serializer_class = TagSerializer
    lookup_field = 'slug'
    filter_backends = [filters.SearchFilter]
    search_fields = ['name']


class AttributeTypeViewSet(viewsets.ReadOnlyModelViewSet):
    """
    API endpoint for attribute types (Color, Size, etc).
    """
    queryset = AttributeType.objects.all()
    serializer_class = AttributeTypeSerializer
    lookup_field = 'slug'
    filter_backends = [filters.SearchFilter, filters.OrderingFilter]
    search_fields = ['name']
    ordering = ['display_order', 'name']
