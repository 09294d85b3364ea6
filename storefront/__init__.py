"""
Storefront Catalog & Cart

Modules:
    models      - Schema validation for catalog/cart entities (pydantic)
    catalog     - Normalization, variant resolution, listing and display helpers
    shopify     - Storefront GraphQL client and catalog/cart operations
    cart        - Process-wide cart state
    common      - Shared utilities (config loader, logging, constants)
"""

__version__ = "0.1.0"
