"""
Shopify Storefront integration modules.

Modules:
    api_client - GraphQL client for the Storefront API
    queries    - GraphQL documents
    operations - Catalog listing, product lookup and cart mutations
"""

from .api_client import StorefrontAPIClient, normalize_shop_domain
from .operations import Storefront

__all__ = [
    # API Client
    'StorefrontAPIClient',
    'normalize_shop_domain',
    # Operations
    'Storefront',
]
