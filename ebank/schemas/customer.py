from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Optional

class CamelModel(BaseModel):
    # JSON uses camelCase, python code keeps snake_case
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

class CustomerCreate(CamelModel):
    name: str
    email: str

class CustomerDTO(CustomerCreate):
    id: Optional[int] = None
