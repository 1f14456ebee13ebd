from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """JSON bodies use camelCase keys; Python code uses snake_case."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


class SuccessResponse(CamelModel):
    success: bool = True
