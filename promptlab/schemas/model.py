from promptlab.schemas.base import CamelModel


class ModelInfo(CamelModel):
    id: str
    provider: str
    display_name: str
