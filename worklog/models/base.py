"""Base model for all data models in the worklog engine.

This module provides a base Pydantic model with common configuration
and helper methods for serialization/deserialization.
"""

from pydantic import BaseModel, ConfigDict


class BaseDataModel(BaseModel):
    """Base class for all data models.

    Provides common configuration for:
    - Validation with type checking
    - Serialization to/from dictionaries
    - Immutability (frozen models)
    - Arbitrary types support for dates and datetimes

    Example:
        >>> class Client(BaseDataModel):
        ...     id: str
        ...     name: str
        >>> client = Client(id="c1", name="Acme")
        >>> client.name
        'Acme'
        >>> client.model_dump()
        {'id': 'c1', 'name': 'Acme'}
    """

    model_config = ConfigDict(
        # Allow arbitrary types like date, datetime
        arbitrary_types_allowed=True,
        # Use lax type coercion (ISO strings -> dates)
        strict=False,
        # Reject unknown fields
        extra="forbid",
        # Value objects are immutable after creation
        frozen=True,
    )
