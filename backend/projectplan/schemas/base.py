# backend/projectplan/schemas/base.py
from pydantic import BaseModel, ConfigDict, Field

class BaseSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

class TimestampMixin(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    # Stored and returned under the persisted record's field names
    created_at: str = Field(alias="createAt")
    updated_at: str = Field(alias="updateAt")
