from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

ImportKind = Literal["import", "export", "require"]


class ImportRecord(BaseModel):
    """One import site found by the source walker; checked once and discarded."""
    model_config = ConfigDict(arbitrary_types_allowed=True)

    specifier: str = Field(..., description="The specifier exactly as written.")
    kind: ImportKind = Field("import", description="The syntax the specifier came from.")
    line: int = Field(1, description="1-based line of the node diagnostics attach to.")
    column: int = Field(1, description="1-based column of the node diagnostics attach to.")
    node: Optional[Any] = Field(None, exclude=True, description="Opaque syntax node for the host.")
