# bakery/schemas.py
# Role: Pydantic request/response shapes for the transactions API.

import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class TransactionIn(BaseModel):
    """Fields a client sends on create and on (full-replace) update."""

    # min_length applies to the stripped text
    model_config = ConfigDict(str_strip_whitespace=True)

    date: datetime.date
    description: str = Field(min_length=1)
    amount: float = Field(ge=0, allow_inf_nan=False)
    type: Literal["income", "expense"]
    category: str = Field(min_length=1)


class TransactionOut(TransactionIn):
    model_config = ConfigDict(from_attributes=True)

    id: int
