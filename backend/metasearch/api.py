from sqlmodel import SQLModel


class SearchRequest(SQLModel):
    """Search request model."""

    term: str


class ErrorResponse(SQLModel):
    """Error response model."""

    message: str
