"""Store-wide options."""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field
from pydantic.functional_validators import AfterValidator

__all__ = ["StoreOptions", "DEFAULT_DELIMITER", "DEFAULT_ENCODING", "check_delimiter"]

DEFAULT_DELIMITER = ","
DEFAULT_ENCODING = "utf-8"


def check_delimiter(v: str) -> str:
    """Return ``v`` if it is a usable list delimiter, else raise ValueError."""
    if len(v) != 1:
        raise ValueError("Delimiter must be exactly one character")
    if v in "\r\n":
        raise ValueError("Delimiter cannot be a line break")
    return v


Delimiter = Annotated[str, AfterValidator(check_delimiter)]


class StoreOptions(BaseModel):
    """Options applied by a ConfigStore.

    Attributes:
        delimiter: Separator used by get_list/set_list when none is given.
        encoding: Text encoding used by load and save.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    delimiter: Delimiter = DEFAULT_DELIMITER
    encoding: str = Field(default=DEFAULT_ENCODING, min_length=1)
