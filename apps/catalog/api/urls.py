from django.urls import path, include
from rest_framework.routers import DefaultRouter

from .views import (
    ProductViewSet,
    VariantViewSet,
    CategoryViewSet,
    TagViewSet,
    AttributeTypeViewSet,
)

router = DefaultRouter()
router.register(r'products', ProductViewSet, basename='product')
router.register(r'variants', VariantViewSet, basename='variant')
router.register(r'categories', CategoryViewSet, basename='category')
router.register(r'tags', TagViewSet, basename='tag')
router.register(r'attribute-types', AttributeTypeViewSet, basename='attribute-type')

urlpatterns = [
    path('', include(router.urls)),
]
