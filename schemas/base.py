# schemas/base.py
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

# Largest value an Integer primary key column can hold
MAX_ID = 2_147_483_647


class CamelModel(BaseModel):
     """Base schema: camelCase on the wire, snake_case in Python."""

     model_config = ConfigDict(
          alias_generator=to_camel,
          populate_by_name=True,
          from_attributes=True,
     )
