from rest_framework import serializers
from apps.catalog.models import (
    Product,
    Category,
    Tag,
    ProductImage,
    AttributeType,
    ProductAttribute,
    AttributeOption,
    Variant,
    VariantAttribute,
)
from apps.generator.conf import generator_settings


# =============================================================================
# Taxonomy Serializers
# =============================================================================

class CategorySerializer(serializers.ModelSerializer):
    full_path = serializers.CharField(read_only=True)

    class Meta:
        model = Category
        fields = ['id', 'name', 'slug', 'parent', 'full_path', 'display_order', 'is_active']


class TagSerializer(serializers.ModelSerializer):
    class Meta:
        model = Tag
        fields = ['id', 'name', 'slug']


# =============================================================================
# Image Serializer
# =============================================================================

class ProductImageSerializer(serializers.ModelSerializer):
    thumbnail_url = serializers.SerializerMethodField()

    class Meta:
        model = ProductImage
        fields = ['id', 'image', 'thumbnail_url', 'alt_text']

    def get_thumbnail_url(self, obj):
        if obj.thumbnail:
            request = self.context.get('request')
            if request:
                return request.build_absolute_uri(obj.thumbnail.url)
            return obj.thumbnail.url
        return None


# =============================================================================
# Attribute Serializers
# =============================================================================

class AttributeOptionSerializer(serializers.ModelSerializer):
    class Meta:
        model = AttributeOption
        fields = ['id', 'value', 'slug', 'display_value', 'color_hex', 'display_order']


class ProductAttributeSerializer(serializers.ModelSerializer):
    name = serializers.CharField(source='attribute_type.name', read_only=True)
    slug = serializers.CharField(source='attribute_type.slug', read_only=True)
    options = serializers.SerializerMethodField()

    class Meta:
        model = ProductAttribute
        fields = ['id', 'name', 'slug', 'position', 'is_visible', 'is_variation', 'options']

    def get_options(self, obj):
        return AttributeOptionSerializer(obj.get_options(), many=True).data


class AttributeTypeSerializer(serializers.ModelSerializer):
    class Meta:
        model = AttributeType
        fields = ['id', 'name', 'slug', 'datatype', 'display_order']


# =============================================================================
# Variant Serializers
# =============================================================================

class VariantAttributeSerializer(serializers.ModelSerializer):
    attribute_type = serializers.CharField(
        source='attribute_option.attribute_type.name', read_only=True
    )
    attribute_slug = serializers.CharField(
        source='attribute_option.attribute_type.slug', read_only=True
    )
    value = serializers.CharField(
        source='attribute_option.value', read_only=True
    )

    class Meta:
        model = VariantAttribute
        fields = ['id', 'attribute_option', 'attribute_type', 'attribute_slug', 'value']


class VariantListSerializer(serializers.ModelSerializer):
    """Lightweight serializer for variant lists."""
    product_name = serializers.CharField(source='product.name', read_only=True)
    attributes = serializers.SerializerMethodField()
    is_in_stock = serializers.BooleanField(read_only=True)
    is_on_sale = serializers.BooleanField(read_only=True)
    discount_percentage = serializers.IntegerField(read_only=True)

    class Meta:
        model = Variant
        fields = [
            'id', 'sku', 'name', 'product', 'product_name',
            'regular_price', 'sale_price', 'stock_quantity', 'stock_status',
            'menu_order', 'is_active', 'is_in_stock', 'is_on_sale',
            'discount_percentage', 'attributes'
        ]

    def get_attributes(self, obj):
        return obj.get_options_dict()


class VariantDetailSerializer(serializers.ModelSerializer):
    """Full variant serializer with all related data."""
    product_name = serializers.CharField(source='product.name', read_only=True)
    product_slug = serializers.CharField(source='product.slug', read_only=True)
    image = ProductImageSerializer(read_only=True)
    variant_attributes = VariantAttributeSerializer(
        source='variantattribute_set', many=True, read_only=True
    )
    is_in_stock = serializers.BooleanField(read_only=True)
    is_on_sale = serializers.BooleanField(read_only=True)
    discount_percentage = serializers.IntegerField(read_only=True)

    class Meta:
        model = Variant
        fields = [
            'id', 'product', 'product_name', 'product_slug',
            'sku', 'name', 'regular_price', 'sale_price',
            'date_on_sale_from', 'date_on_sale_to',
            'tax_status', 'tax_class',
            'manage_stock', 'stock_quantity', 'stock_status', 'backorders',
            'height', 'width', 'length', 'weight',
            'is_virtual', 'is_downloadable', 'menu_order', 'is_active',
            'is_in_stock', 'is_on_sale', 'discount_percentage',
            'image', 'variant_attributes',
            'created_at', 'updated_at'
        ]


# =============================================================================
# Product Serializers
# =============================================================================

class ProductSerializer(serializers.ModelSerializer):
    """Base product serializer."""
    class Meta:
        model = Product
        fields = [
            'id', 'product_type', 'name', 'slug', 'description',
            'short_description', 'sku', 'featured', 'catalog_visibility',
            'regular_price', 'sale_price', 'date_on_sale_from', 'date_on_sale_to',
            'tax_status', 'tax_class', 'manage_stock', 'stock_quantity',
            'stock_status', 'backorders', 'sold_individually',
            'height', 'width', 'length', 'weight',
            'reviews_allowed', 'purchase_note', 'menu_order',
            'is_virtual', 'is_downloadable', 'categories', 'tags',
            'upsells', 'cross_sells', 'is_active',
            'created_at', 'updated_at'
        ]


class ProductListSerializer(serializers.ModelSerializer):
    """Product list with counts."""
    variant_count = serializers.IntegerField(read_only=True)
    price_range = serializers.SerializerMethodField()

    class Meta:
        model = Product
        fields = [
            'id', 'product_type', 'name', 'slug', 'sku', 'featured',
            'stock_status', 'is_active', 'variant_count', 'price_range'
        ]

    def get_price_range(self, obj):
        min_price, max_price = obj.get_price_range()
        return {'min': min_price, 'max': max_price}


class ProductDetailSerializer(ProductSerializer):
    """Full product detail with variants, attributes and images."""
    categories = CategorySerializer(many=True, read_only=True)
    tags = TagSerializer(many=True, read_only=True)
    image = ProductImageSerializer(read_only=True)
    gallery_images = ProductImageSerializer(many=True, read_only=True)
    attributes = ProductAttributeSerializer(
        source='product_attributes', many=True, read_only=True
    )
    variants = VariantListSerializer(many=True, read_only=True)
    price_range = serializers.SerializerMethodField()
    is_on_sale = serializers.BooleanField(read_only=True)

    class Meta(ProductSerializer.Meta):
        fields = ProductSerializer.Meta.fields + [
            'image', 'gallery_images', 'attributes', 'variants',
            'price_range', 'is_on_sale', 'total_sales'
        ]

    def get_price_range(self, obj):
        min_price, max_price = obj.get_price_range()
        return {'min': min_price, 'max': max_price}


# =============================================================================
# Generator Serializer
# =============================================================================

class GenerateProductsSerializer(serializers.Serializer):
    """Validates a request to generate random products."""
    amount = serializers.IntegerField(min_value=1, default=10)
    type = serializers.ChoiceField(
        choices=[Product.SIMPLE, Product.VARIABLE],
        required=False,
        allow_null=True,
    )

    def validate_amount(self, value):
        max_batch_size = generator_settings('MAX_BATCH_SIZE')
        if value > max_batch_size:
            raise serializers.ValidationError(
                f'Ensure this value is less than or equal to {max_batch_size}.'
            )
        return value
