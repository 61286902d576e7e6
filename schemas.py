import re
from pydantic import BaseModel, ConfigDict, Field, ValidationError
from typing import Annotated, Optional

from errors import INVALID_ID, INVALID_JSON, InvalidRequest

INT64_MIN = -2**63
INT64_MAX = 2**63 - 1

# Same range as a BIGINT column; anything wider is a wrong type, not a value
Int64 = Annotated[int, Field(ge=INT64_MIN, le=INT64_MAX)]

ID_PATTERN = re.compile(r"[+-]?[0-9]+")

class EmailAccountBase(BaseModel):
    conta: str
    empresa_id: Int64
    crd_id: Optional[str] = None
    tipo_conta: str

class EmailAccountCreate(EmailAccountBase):
    # No coercion: "5" is not an empresa_id
    model_config = ConfigDict(strict=True)

    # Accepted for symmetry with responses, never used on insert
    id: Optional[Int64] = None

class EmailAccountResponse(EmailAccountBase):
    model_config = ConfigDict(from_attributes=True)

    id: int

class MessageResponse(BaseModel):
    message: str


def parse_account_id(raw: str) -> int:
    """Plain signed decimal only: no spaces, underscores or fractions."""
    if not ID_PATTERN.fullmatch(raw):
        raise InvalidRequest(INVALID_ID, detail=repr(raw))
    value = int(raw)
    if not INT64_MIN <= value <= INT64_MAX:
        raise InvalidRequest(INVALID_ID, detail=f"{raw!r} out of range")
    return value


def parse_account_body(body: bytes) -> EmailAccountCreate:
    # Decoded as JSON whatever the Content-Type header says
    try:
        return EmailAccountCreate.model_validate_json(body)
    except ValidationError as e:
        raise InvalidRequest(INVALID_JSON, detail=e.errors(include_url=False)) from e
