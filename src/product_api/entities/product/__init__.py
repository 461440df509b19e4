"""Entity package: Product.

- Product / ProductCreate: API-facing domain models
- ProductTable: database persistence model
- ProductRepository: session-bound data access
"""

from .entity import Product, ProductCreate
from .repository import ProductRepository
from .table import ProductTable

__all__ = ["Product", "ProductCreate", "ProductRepository", "ProductTable"]
