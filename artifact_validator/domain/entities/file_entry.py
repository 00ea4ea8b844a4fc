from pydantic import BaseModel, Field


class FileEntry(BaseModel, frozen=True, strict=True):
    """One node of a file-tree snapshot."""

    path: str
    size: int = Field(ge=0)
    is_dir: bool
