"""Branch model."""

from pydantic import BaseModel


class Branch(BaseModel):
    """Repository branch as returned by the branches API."""

    name: str
    sha: str = ""
    protected: bool = False
