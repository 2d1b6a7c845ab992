"""Repository contents entry."""

import base64

from pydantic import BaseModel, ConfigDict


class FileContent(BaseModel):
    """One entry of the contents API: a file, dir, symlink or submodule.

    Only entries of type ``file`` fetched individually carry ``content``.
    """

    model_config = ConfigDict(extra="ignore")

    type: str
    path: str = ""
    name: str = ""
    sha: str = ""
    encoding: str | None = None
    content: str | None = None

    def decoded(self) -> str:
        """Return content as UTF-8 text; invalid bytes become U+FFFD."""
        return base64.b64decode(self.content or "").decode("utf-8", errors="replace")
