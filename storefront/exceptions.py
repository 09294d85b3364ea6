"""
Storefront Errors

Every failure raised by this package derives from StorefrontError.
"""

from typing import Dict, List, Optional


class StorefrontError(Exception):
    """Base class for storefront failures."""


class TransportError(StorefrontError):
    """Non-success HTTP response, network failure or unreadable body."""

    def __init__(self, status_code: Optional[int], body: str):
        self.status_code = status_code
        self.body = body
        if status_code is None:
            message = body
        else:
            message = f"{status_code} {body}"
        super().__init__(message)


class GraphQLError(StorefrontError):
    """The API answered but reported errors."""

    def __init__(self, messages: List[str]):
        self.messages = list(messages)
        super().__init__("\n".join(self.messages))


class SchemaValidationError(StorefrontError):
    """
    A payload does not conform to the data model.

    Attributes:
        entity: Name of the entity being validated (e.g. "Product")
        issues: One dict per violation with keys field, message, type
    """

    def __init__(self, entity: str, issues: List[Dict[str, str]]):
        self.entity = entity
        self.issues = issues
        details = "; ".join(f"{i['field']}: {i['message']}" for i in issues)
        super().__init__(f"{entity} failed validation: {details}")

    @property
    def fields(self) -> List[str]:
        return [issue["field"] for issue in self.issues]


class NormalizationError(SchemaValidationError):
    """A normalized record no longer satisfies the data model."""


class NotFoundError(StorefrontError):
    """Requested entity does not exist."""
