"""Decoding of page responses received from the remote source."""

import json
from typing import List, Literal, Optional, Union

from pydantic import BaseModel, Field, ValidationError

from pagedlist.domain import NetworkError, Page, Record


class RecordPayload(BaseModel):
    id: int
    display_name: str


class PagePayload(BaseModel):
    type: Literal["page"]
    records: List[RecordPayload] = Field(default_factory=list)
    next_cursor: Optional[str] = None


class ErrorPayload(BaseModel):
    type: Literal["error"]
    description: str = "Unknown error"


def build_request(cursor: Optional[str]) -> str:
    return json.dumps({"action": "get_page", "cursor": cursor})


def decode_page(message: Union[str, bytes, dict]) -> Page:
    """Turn a response message into a Page.

    Raises:
        NetworkError: if the source reported an error or sent something that
            is not a page
    """
    if isinstance(message, (str, bytes)):
        try:
            message = json.loads(message)
        except json.JSONDecodeError as e:
            raise NetworkError(f"Malformed page response: {e}") from e

    if not isinstance(message, dict):
        raise NetworkError("Malformed page response: expected an object")

    try:
        if message.get("type") == "error":
            raise NetworkError(ErrorPayload(**message).description)
        payload = PagePayload(**message)
    except ValidationError as e:
        raise NetworkError(f"Malformed page response: {e}") from e

    return Page(
        records=tuple(
            Record(id=item.id, display_name=item.display_name)
            for item in payload.records
        ),
        next_cursor=payload.next_cursor,
    )

