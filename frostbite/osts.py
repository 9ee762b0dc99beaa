"""Reader/writer for the ``.osts`` Office Script container."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel


class OstsFormatError(ValueError):
    """The file is not a valid .osts container."""


class OstsScript(BaseModel):
    """An Office Script as saved by Excel; only ``body`` holds code."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

    version: str = "0.3.0"
    body: str = ""
    description: str = ""
    no_code_metadata: Any = ""  # null, string or object in saved scripts
    parameter_info: str = ""
    api_info: str = ""

    @classmethod
    def from_json(cls, text: str) -> OstsScript:
        try:
            data: Any = json.loads(text)
        except json.JSONDecodeError as e:
            raise OstsFormatError(f"Invalid .osts JSON: {e}") from e
        if not isinstance(data, dict):
            raise OstsFormatError("Invalid .osts file: top level must be an object")
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise OstsFormatError(f"Invalid .osts file: {e}") from e

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)

    def with_body(self, body: str) -> OstsScript:
        return self.model_copy(update={"body": body})


def read_osts(path: Path) -> OstsScript:
    return OstsScript.from_json(Path(path).read_text(encoding="utf-8"))


def write_osts(script: OstsScript, path: Path) -> Path:
    path = Path(path)
    path.write_text(script.to_json(), encoding="utf-8")
    return path
