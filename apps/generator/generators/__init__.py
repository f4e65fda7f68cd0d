from .base import Generator
from .product import ProductGenerator, attribute_combinations

__all__ = [
    'Generator',
    'ProductGenerator',
    'attribute_combinations',
]
