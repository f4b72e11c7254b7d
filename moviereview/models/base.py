from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    Shared config for records and schemas: snake_case attributes in Python,
    camelCase keys on the wire (the web client reads `releaseYear`,
    `averageRating`, `totalCount`, ...).
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        use_enum_values=True,
        str_strip_whitespace=True,
    )
