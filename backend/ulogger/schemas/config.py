"""Config Schemas — runtime configuration update payloads.

Invariants:
    - values maps option name -> raw value; coercion to string happens in the service
"""

from typing import Any

from pydantic import BaseModel, Field


class ConfigUpdate(BaseModel):
    values: dict[str, Any] = Field(min_length=1)


class ConfigResponse(BaseModel):
    changed: bool | None = None
    config: dict[str, str]
