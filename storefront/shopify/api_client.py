"""
Storefront API Client

GraphQL client for the Shopify Storefront API.
Handles access-token selection by execution context and error reporting.
"""

import logging
from typing import Any, Dict, Optional

import requests

from ..common.constants import CLIENT_CONTEXT, DEFAULT_API_VERSION, SERVER_CONTEXT
from ..exceptions import GraphQLError, TransportError

logger = logging.getLogger(__name__)


def normalize_shop_domain(shop: str) -> str:
    """
    Turn a shop name, myshopify domain or URL into a bare domain.

    Example:
        >>> normalize_shop_domain("https://my-store.myshopify.com/")
        'my-store.myshopify.com'
        >>> normalize_shop_domain("my-store")
        'my-store.myshopify.com'
    """
    domain = shop.strip().replace("https://", "").replace("http://", "")
    domain = domain.split("/")[0]
    if "." not in domain:
        domain = f"{domain}.myshopify.com"
    return domain


class StorefrontAPIClient:
    """
    Client for the Storefront GraphQL endpoint.

    Server-side calls authenticate with the private token and forward the
    buyer's IP; client-side calls use the public token.

    Usage:
        with StorefrontAPIClient(shop="my-store", private_access_token="shpat_xxx") as client:
            data = client.graphql_request(query, {"handle": "t-shirt"})
    """

    def __init__(
        self,
        shop: str,
        public_access_token: str = "",
        private_access_token: str = "",
        api_version: Optional[str] = None,
        context: str = SERVER_CONTEXT,
    ):
        """
        Initialize the API client.

        Args:
            shop: Shop name, myshopify domain, custom domain or URL
            public_access_token: Storefront token for client-originated calls
            private_access_token: Storefront token for server-originated calls
            api_version: Storefront API version (e.g. "2024-10")
            context: SERVER_CONTEXT or CLIENT_CONTEXT
        """
        if context not in (SERVER_CONTEXT, CLIENT_CONTEXT):
            raise ValueError(f"Unsupported context: {context}")

        self.shop = normalize_shop_domain(shop)
        self.api_version = api_version or DEFAULT_API_VERSION
        self.context = context
        self.graphql_url = f"https://{self.shop}/api/{self.api_version}/graphql.json"

        self.session = requests.Session()
        self.session.headers.update({"Content-Type": "application/json"})
        if context == SERVER_CONTEXT:
            self.session.headers["Shopify-Storefront-Private-Token"] = private_access_token
        else:
            self.session.headers["X-Shopify-Storefront-Access-Token"] = public_access_token

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.session.close()

    def close(self):
        self.session.close()

    def _request_headers(self, buyer_ip: str) -> Dict[str, str]:
        if self.context == SERVER_CONTEXT:
            return {"Shopify-Storefront-Buyer-IP": buyer_ip}
        return {}

    def graphql_request(
        self,
        query: str,
        variables: Optional[Dict[str, Any]] = None,
        buyer_ip: str = "",
        timeout: int = 30
    ) -> Dict[str, Any]:
        """
        Make a GraphQL request.

        Args:
            query: GraphQL query or mutation
            variables: Query variables
            buyer_ip: Buyer IP forwarded on server-side calls
            timeout: Request timeout in seconds

        Returns:
            Response data (without 'data' wrapper)

        Raises:
            TransportError: network failure, HTTP error status, non-JSON body
                or a "data" value that is not an object
            GraphQLError: the response reports errors
        """
        payload = {"query": query, "variables": variables or {}}

        try:
            response = self.session.post(
                self.graphql_url,
                json=payload,
                headers=self._request_headers(buyer_ip),
                timeout=timeout
            )
        except requests.exceptions.RequestException as e:
            logger.error("Request failed: %s", e)
            raise TransportError(None, str(e)) from e

        if response.status_code >= 400:
            logger.error("API Error %d: %s", response.status_code, response.text[:200])
            raise TransportError(response.status_code, response.text)

        try:
            result = response.json()
        except ValueError as e:
            logger.error("Invalid JSON from %s", self.graphql_url)
            raise TransportError(response.status_code, response.text) from e

        if not isinstance(result, dict):
            raise TransportError(response.status_code, response.text)

        errors = result.get("errors")
        if errors:
            logger.error("GraphQL Errors: %s", errors)
            raise GraphQLError([
                str(err.get("message", "")) if isinstance(err, dict) else str(err)
                for err in errors
            ])

        data = result.get("data") or {}
        if not isinstance(data, dict):
            logger.error("Unexpected data in response: %.200r", data)
            raise TransportError(response.status_code, f"Response data is not an object: {data!r}")
        return data
