# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import Union

from pydantic import Field
from typing_extensions import Annotated

PositiveInt = Annotated[int, Field(ge=0, strict=True)]
PositiveFloat = Annotated[float, Field(ge=0)]

# Datastore identifiers are numeric in the application but arrive as
# strings from some import paths.
EntityId = Union[int, str]
