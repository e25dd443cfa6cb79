"""Response models shared by every entity kind."""

from pydantic import BaseModel


class DeleteAllResult(BaseModel):
    """Number of records removed by a delete-all request."""

    count: int
