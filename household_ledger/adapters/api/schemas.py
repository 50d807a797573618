"""Request bodies accepted by the HTTP API.

Only shapes and types are declared here; business limits (lengths, age
range, positive amounts, known codes) are enforced by the use cases so the
messages stay identical across every entry point.
"""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class PersonIn(BaseModel):
    """Body for creating or updating a person."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., alias="nome")
    age: int = Field(..., alias="idade")


class CategoryIn(BaseModel):
    """Body for creating a category."""

    model_config = ConfigDict(populate_by_name=True)

    description: str = Field(..., alias="descricao")
    purpose: int = Field(..., alias="finalidade")


class TransactionIn(BaseModel):
    """Body for creating or updating a transaction."""

    model_config = ConfigDict(populate_by_name=True)

    description: str = Field(..., alias="descricao")
    amount: Decimal = Field(..., alias="valor")
    type: int = Field(..., alias="tipo")
    category_id: int = Field(..., alias="categoriaId")
    person_id: int = Field(..., alias="pessoaId")


__all__ = ["PersonIn", "CategoryIn", "TransactionIn"]
