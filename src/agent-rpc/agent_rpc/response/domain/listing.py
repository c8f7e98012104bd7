"""ListResponse: a list of strings (list_disk)."""

from pydantic import BaseModel, StrictStr


class ListResponse(BaseModel, frozen=True):
    value: list[StrictStr]
