from django_filters import rest_framework as filters
from apps.catalog.models import Product, Variant, StockStatus


class ProductFilter(filters.FilterSet):
    """Filter for products by type, taxonomies and price."""

    category = filters.CharFilter(field_name='categories__slug', distinct=True)
    tag = filters.CharFilter(field_name='tags__slug', distinct=True)

    # Price filters
    min_price = filters.NumberFilter(field_name='regular_price', lookup_expr='gte')
    max_price = filters.NumberFilter(field_name='regular_price', lookup_expr='lte')

    on_sale = filters.BooleanFilter(field_name='sale_price', lookup_expr='isnull', exclude=True)

    class Meta:
        model = Product
        fields = ['product_type', 'featured', 'stock_status', 'is_active']


class VariantFilter(filters.FilterSet):
    """Filter for variants with support for dynamic attributes."""

    product = filters.CharFilter(field_name='product__slug')
    product_id = filters.NumberFilter(field_name='product__id')

    # Price filters
    min_price = filters.NumberFilter(field_name='regular_price', lookup_expr='gte')
    max_price = filters.NumberFilter(field_name='regular_price', lookup_expr='lte')

    # Stock filters
    in_stock = filters.BooleanFilter(method='filter_in_stock')

    # Attribute filters
    attribute = filters.CharFilter(method='filter_by_attribute')

    class Meta:
        model = Variant
        fields = ['product', 'product_id', 'is_active', 'stock_status']

    def filter_in_stock(self, queryset, name, value):
        if value is True:
            return queryset.exclude(stock_status=StockStatus.OUT_OF_STOCK)
        elif value is False:
            return queryset.filter(stock_status=StockStatus.OUT_OF_STOCK)
        return queryset

    def filter_by_attribute(self, queryset, name, value):
        """
        Filter by attribute in format: attribute_slug:option_slug
        Example: ?attribute=color:azul
        """
        if ':' not in value:
            return queryset

        attr_slug, option_slug = value.split(':', 1)
        return queryset.filter(
            variantattribute__attribute_option__attribute_type__slug=attr_slug,
            variantattribute__attribute_option__slug=option_slug
        )
