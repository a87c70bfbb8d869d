"""Types contraints partagés par les schémas"""

from typing import Annotated

from pydantic import AfterValidator, StringConstraints
from pydantic_core import PydanticCustomError


def _reject_blank(value: str) -> str:
    if not value.strip():
        raise PydanticCustomError("not_blank", "must not be blank")
    return value


def NotBlank(max_length: int):
    """Chaîne obligatoire, non vide, de longueur bornée"""
    return Annotated[str, StringConstraints(max_length=max_length), AfterValidator(_reject_blank)]


def Bounded(max_length: int):
    return Annotated[str, StringConstraints(max_length=max_length)]


Color = Bounded(7)
