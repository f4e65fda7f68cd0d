from django import forms
from django.contrib import admin, messages
from django.template.response import TemplateResponse
from django.views.decorators.http import require_http_methods
from django.utils.html import format_html
from django.urls import path, reverse
from django.shortcuts import redirect
from import_export import resources, fields
from import_export.admin import ImportExportModelAdmin
from import_export.widgets import ForeignKeyWidget, ManyToManyWidget
from adminsortable2.admin import SortableAdminMixin
from simple_history.admin import SimpleHistoryAdmin

from apps.generator.conf import generator_settings
from apps.generator.exceptions import GeneratorError
from apps.generator.generators import ProductGenerator
from .models import (
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


def image_preview_html(image, height=50):
    if not image or not image.image:
        return '-'
    return format_html(
        '<img src="{}" style="max-height: {}px; max-width: 100px;" />',
        image.thumbnail_small.url if image.thumbnail_small else image.image.url,
        height
    )


# =============================================================================
# Import/Export Resources
# =============================================================================

class ProductResource(resources.ModelResource):
    """Resource for importing/exporting products."""

    categories = fields.Field(
        column_name='categories',
        attribute='categories',
        widget=ManyToManyWidget(Category, field='slug', separator='|')
    )
    tags = fields.Field(
        column_name='tags',
        attribute='tags',
        widget=ManyToManyWidget(Tag, field='slug', separator='|')
    )

    class Meta:
        model = Product
        import_id_fields = ['slug']
        fields = (
            'slug', 'name', 'product_type', 'sku', 'regular_price', 'sale_price',
            'manage_stock', 'stock_quantity', 'stock_status', 'backorders',
            'height', 'width', 'length', 'weight', 'featured',
            'categories', 'tags', 'is_active'
        )
        export_order = fields


class VariantResource(resources.ModelResource):
    """Resource for importing/exporting variants."""

    product_slug = fields.Field(
        column_name='product_slug',
        attribute='product',
        widget=ForeignKeyWidget(Product, 'slug')
    )

    class Meta:
        model = Variant
        fields = (
            'id', 'product_slug', 'name', 'sku', 'regular_price', 'sale_price',
            'manage_stock', 'stock_quantity', 'stock_status',
            'height', 'width', 'length', 'weight', 'menu_order', 'is_active'
        )
        export_order = fields


# =============================================================================
# Inlines
# =============================================================================

class ProductAttributeInline(admin.TabularInline):
    model = ProductAttribute
    extra = 0
    fields = ['attribute_type', 'position', 'is_visible', 'is_variation']
    autocomplete_fields = ['attribute_type']


class AttributeOptionInline(admin.TabularInline):
    model = AttributeOption
    extra = 0
    fields = ['attribute_type', 'value', 'display_value', 'color_hex', 'display_order']


class VariantAttributeInline(admin.TabularInline):
    model = VariantAttribute
    extra = 1
    autocomplete_fields = ['attribute_option']


class VariantInline(admin.TabularInline):
    model = Variant
    extra = 0
    fields = ['name', 'regular_price', 'sale_price', 'stock_quantity', 'stock_status', 'is_active']
    readonly_fields = ['name']
    show_change_link = True
    can_delete = False

    def has_add_permission(self, request, obj=None):
        return False


# =============================================================================
# Forms
# =============================================================================

class GenerateProductsForm(forms.Form):
    amount = forms.IntegerField(label='Quantidade', min_value=1, initial=10)
    type = forms.ChoiceField(
        label='Tipo',
        required=False,
        choices=[('', 'Aleatório')] + Product.PRODUCT_TYPE_CHOICES,
    )

    def clean_amount(self):
        amount = self.cleaned_data['amount']
        max_batch_size = generator_settings('MAX_BATCH_SIZE')
        if amount > max_batch_size:
            raise forms.ValidationError(f'Máximo de {max_batch_size} produtos por vez.')
        return amount


# =============================================================================
# Model Admins
# =============================================================================

@admin.register(Product)
class ProductAdmin(ImportExportModelAdmin, SimpleHistoryAdmin):
    resource_class = ProductResource
    list_display = [
        'name', 'product_type', 'sku', 'regular_price', 'sale_price',
        'stock_status', 'variant_count', 'featured', 'is_active', 'image_preview'
    ]
    list_filter = ['product_type', 'featured', 'stock_status', 'is_active', 'categories']
    search_fields = ['name', 'slug', 'sku', 'description']
    prepopulated_fields = {'slug': ('name',)}
    autocomplete_fields = ['categories', 'tags', 'upsells', 'cross_sells']
    raw_id_fields = ['image']
    filter_horizontal = ['gallery_images']
    readonly_fields = ['variant_count', 'created_at', 'updated_at']
    inlines = [ProductAttributeInline, AttributeOptionInline, VariantInline]
    list_per_page = 50

    fieldsets = (
        (None, {
            'fields': ('product_type', 'name', 'slug', 'sku', 'is_active', 'featured', 'catalog_visibility')
        }),
        ('Descrição', {
            'fields': ('description', 'short_description', 'purchase_note')
        }),
        ('Preços', {
            'fields': (
                'regular_price', 'sale_price', 'date_on_sale_from', 'date_on_sale_to',
                'tax_status', 'tax_class'
            )
        }),
        ('Estoque', {
            'fields': (
                'manage_stock', 'stock_quantity', 'stock_status', 'backorders',
                'sold_individually'
            )
        }),
        ('Envio', {
            'fields': ('height', 'width', 'length', 'weight', 'is_virtual', 'is_downloadable'),
            'classes': ('collapse',)
        }),
        ('Relacionamentos', {
            'fields': ('categories', 'tags', 'upsells', 'cross_sells', 'image', 'gallery_images')
        }),
        ('Informações', {
            'fields': ('total_sales', 'reviews_allowed', 'menu_order', 'variant_count', 'created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    def image_preview(self, obj):
        return image_preview_html(obj.image, height=40)
    image_preview.short_description = 'Imagem'

    def get_urls(self):
        urls = [
            path(
                'generate/',
                self.admin_site.admin_view(
                    require_http_methods(["GET", "POST"])(self.generate_view)
                ),
                name='catalog_product_generate',
            ),
        ]
        return urls + super().get_urls()

    def generate_view(self, request):
        """
        Confirmation form for generating random products.
        GET shows the form; POST (amount, type) generates and returns to the changelist.
        """
        changelist_url = reverse('admin:catalog_product_changelist')
        if not self.has_add_permission(request):
            self.message_user(request, 'Sem permissão para gerar produtos.', messages.ERROR)
            return redirect(changelist_url)

        if request.method == 'POST':
            form = GenerateProductsForm(request.POST)
            if form.is_valid():
                try:
                    products = ProductGenerator().generate_batch(
                        form.cleaned_data['amount'],
                        product_type=form.cleaned_data['type'] or None,
                    )
                except GeneratorError as e:
                    self.message_user(request, f'Erro ao gerar produtos: {e}', messages.ERROR)
                    return redirect(changelist_url)

                self.message_user(request, f'{len(products)} produtos gerados.', messages.SUCCESS)
                return redirect(changelist_url)
        else:
            form = GenerateProductsForm()

        context = {
            **self.admin_site.each_context(request),
            'title': 'Gerar produtos aleatórios',
            'opts': self.model._meta,
            'form': form,
        }
        return TemplateResponse(request, 'admin/catalog/product/generate.html', context)


@admin.register(Category)
class CategoryAdmin(SortableAdminMixin, admin.ModelAdmin):
    list_display = ['full_path', 'slug', 'is_active', 'display_order']
    list_filter = ['is_active']
    search_fields = ['name', 'slug']
    prepopulated_fields = {'slug': ('name',)}
    autocomplete_fields = ['parent']


@admin.register(Tag)
class TagAdmin(admin.ModelAdmin):
    list_display = ['name', 'slug', 'product_count']
    search_fields = ['name', 'slug']
    prepopulated_fields = {'slug': ('name',)}

    def product_count(self, obj):
        return obj.products.count()
    product_count.short_description = 'Produtos'


@admin.register(ProductImage)
class ProductImageAdmin(admin.ModelAdmin):
    list_display = ['__str__', 'alt_text', 'image_preview', 'created_at']
    search_fields = ['alt_text', 'image']
    readonly_fields = ['image_preview', 'created_at']

    def image_preview(self, obj):
        return image_preview_html(obj)
    image_preview.short_description = 'Preview'


@admin.register(AttributeType)
class AttributeTypeAdmin(SortableAdminMixin, admin.ModelAdmin):
    list_display = ['name', 'slug', 'datatype', 'option_count', 'display_order']
    search_fields = ['name', 'slug']
    prepopulated_fields = {'slug': ('name',)}

    def option_count(self, obj):
        return obj.options.count()
    option_count.short_description = 'Opções'


@admin.register(AttributeOption)
class AttributeOptionAdmin(admin.ModelAdmin):
    list_display = ['value', 'display_value', 'attribute_type', 'product', 'color_swatch', 'display_order']
    list_filter = ['attribute_type']
    search_fields = ['value', 'display_value', 'attribute_type__name', 'product__name']
    autocomplete_fields = ['attribute_type', 'product']

    def color_swatch(self, obj):
        if obj.color_hex:
            return format_html(
                '<div style="width: 20px; height: 20px; background-color: {}; '
                'border: 1px solid #ccc; border-radius: 3px;"></div>',
                obj.color_hex
            )
        return '-'
    color_swatch.short_description = 'Cor'


@admin.register(Variant)
class VariantAdmin(ImportExportModelAdmin, SimpleHistoryAdmin):
    resource_class = VariantResource
    list_display = [
        'name', 'product', 'regular_price', 'sale_price',
        'stock_quantity', 'stock_status_display', 'menu_order', 'is_active', 'image_preview'
    ]
    list_filter = ['product__product_type', 'stock_status', 'manage_stock', 'is_active']
    list_editable = ['regular_price', 'sale_price', 'is_active']
    search_fields = ['sku', 'name', 'product__name']
    autocomplete_fields = ['product']
    raw_id_fields = ['image']
    readonly_fields = [
        'created_at', 'updated_at', 'is_on_sale', 'discount_percentage', 'is_in_stock'
    ]
    inlines = [VariantAttributeInline]
    list_per_page = 50

    fieldsets = (
        (None, {
            'fields': ('product', 'sku', 'name', 'image', 'menu_order', 'is_active')
        }),
        ('Preços', {
            'fields': (
                'regular_price', 'sale_price', 'date_on_sale_from', 'date_on_sale_to',
                'tax_status', 'tax_class'
            )
        }),
        ('Estoque', {
            'fields': ('manage_stock', 'stock_quantity', 'stock_status', 'backorders', 'is_in_stock')
        }),
        ('Físico', {
            'fields': ('height', 'width', 'length', 'weight', 'is_virtual', 'is_downloadable'),
            'classes': ('collapse',)
        }),
        ('Informações', {
            'fields': ('is_on_sale', 'discount_percentage', 'created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    actions = ['activate_variants', 'deactivate_variants']

    def stock_status_display(self, obj):
        if not obj.manage_stock:
            return format_html('<span style="color: blue;">Não rastreado</span>')
        if obj.stock_status == 'outofstock':
            return format_html('<span style="color: red;">Sem estoque</span>')
        if obj.stock_status == 'onbackorder':
            return format_html('<span style="color: orange;">Sob encomenda</span>')
        return format_html('<span style="color: green;">Em estoque</span>')
    stock_status_display.short_description = 'Status Estoque'

    def image_preview(self, obj):
        return image_preview_html(obj.image, height=40)
    image_preview.short_description = 'Imagem'

    @admin.action(description='Ativar variantes selecionadas')
    def activate_variants(self, request, queryset):
        count = queryset.update(is_active=True)
        self.message_user(request, f'{count} variantes ativadas.')

    @admin.action(description='Desativar variantes selecionadas')
    def deactivate_variants(self, request, queryset):
        count = queryset.update(is_active=False)
        self.message_user(request, f'{count} variantes desativadas.')


# =============================================================================
# Admin Site Configuration
# =============================================================================

admin.site.site_header = 'Ecommerce Admin'
admin.site.site_title = 'Ecommerce'
admin.site.index_title = 'Painel de Administração'
