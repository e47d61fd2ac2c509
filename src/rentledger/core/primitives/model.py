# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class Model(BaseModel):
    """Base Pydantic model with common configuration.

    Immutable, slot-based models for efficient attribute access and reduced
    memory footprint. Mutable runtime state is handled outside of models.
    """

    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        frozen=True,
        slots=True,
        extra="forbid",  # Catches typos in settings immediately
    )


class Record(BaseModel):
    """Base model for rows read from the application datastore.

    Rows arrive either in the application's camelCase shape (``propertyId``)
    or in the datastore's snake_case shape (``property_id``); both populate
    the same field. Columns this library does not know about are dropped.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )
