"""SimpleResponse: a single scalar value (ping, start)."""

from pydantic import BaseModel, StrictBool, StrictFloat, StrictInt, StrictStr

Scalar = StrictStr | StrictInt | StrictFloat | StrictBool


class SimpleResponse(BaseModel, frozen=True):
    value: Scalar
