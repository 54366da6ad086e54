"""
Query Parameters.

The named options forwarded verbatim to the Full Results API on each request.
Timeout fields are hints for the remote service only; the client never uses
them to bound its own wait.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from wolfcli.core.config import get_app_config, get_default_appid
from wolfcli.core.exceptions import ArgumentError


class QueryParams(BaseModel):
    """Parameters of one API query, in wire order."""

    model_config = ConfigDict(extra="forbid")

    input: str
    podstate: str = "Step-by-step solution"
    totaltimeout: int = Field(default=30, ge=0, le=255)
    podtimeout: int = Field(default=30, ge=0, le=255)
    formattimeout: int = Field(default=30, ge=0, le=255)
    parsetimeout: int = Field(default=30, ge=0, le=255)
    scantimeout: int = Field(default=30, ge=0, le=255)
    appid: str
    reinterpret: bool = True

    def to_query(self, output: str = "json") -> list[tuple[str, str]]:
        """Ordered query-string pairs; booleans are sent as true/false."""
        pairs = [("output", output)]
        for name, value in self.model_dump().items():
            if isinstance(value, bool):
                pairs.append((name, "true" if value else "false"))
            else:
                pairs.append((name, str(value)))
        return pairs

    def with_input(self, text: str) -> "QueryParams":
        """Copy with only the query text replaced."""
        return self.model_copy(update={"input": text})


def build_params(input: str, **overrides: Any) -> QueryParams:
    """
    Build QueryParams from configured defaults plus explicit overrides.

    None-valued overrides are ignored so callers can pass optional CLI values
    straight through.

    Raises:
        ArgumentError: If a value has the wrong type or is out of range
    """
    defaults = get_app_config().application.defaults
    values: dict[str, Any] = defaults.model_dump()
    values["appid"] = get_default_appid()
    values.update({k: v for k, v in overrides.items() if v is not None})
    values["input"] = input
    try:
        return QueryParams(**values)
    except PydanticValidationError as e:
        fields = {".".join(str(p) for p in err["loc"]): err["msg"] for err in e.errors()}
        raise ArgumentError(
            f"Invalid query parameters: {', '.join(sorted(fields))}",
            details=fields,
        ) from e
