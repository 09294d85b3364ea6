"""
Shared constants for the project.

This module contains application-wide constants that should have a single source of truth.
"""

# Storefront API version used when none is configured
DEFAULT_API_VERSION = "2024-10"

# Page size for catalog listing
DEFAULT_PAGE_SIZE = 10

# Quantity selector bounds (inclusive)
MIN_QUANTITY = 1
MAX_QUANTITY = 100

# Option axes derived during normalization
COLOR_OPTION = "color"
SIZE_OPTION = "size"

# Collection tab meaning "no filter"
ALL_COLLECTIONS = "all"

# Execution contexts selecting the access token
SERVER_CONTEXT = "server"
CLIENT_CONTEXT = "client"
