"""Shared schema building blocks"""

from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    Base schema for the public API.

    Fields are snake_case in Python and camelCase on the wire
    ("billing_period" <-> "billingPeriod"); either spelling is accepted on input.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        str_strip_whitespace=True,
    )


# Currency amounts stay Decimal in Python and go out as JSON numbers
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]

