"""Shared base model for ledger entities"""

from pydantic import BaseModel as PydanticBaseModel


class BaseModel(PydanticBaseModel):
    """
    Base for all ledger records

    Assignment is validated so in-place updates keep the same guarantees
    as construction.
    """

    class Config:
        validate_assignment = True
        str_strip_whitespace = True
