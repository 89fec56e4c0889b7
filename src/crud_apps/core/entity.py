"""
Base entity model.

Entities are frozen pydantic models identified by an integer id. Changing a
field means building an updated copy, which only the owning repository does.
"""

from pydantic import BaseModel, ConfigDict, Field


class Entity(BaseModel):
    """A record with a unique, immutable integer identifier"""

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., description="Unique identifier within its repository")
