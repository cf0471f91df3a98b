"""Response models for the cleaning API."""

from pydantic import BaseModel


class CleanResponse(BaseModel):
    """Response body for the POST /clean endpoint."""

    html: str


class DemoResponse(BaseModel):
    """The sample capture and its cleaned form."""

    input: str
    output: str
