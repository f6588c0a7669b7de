from __future__ import annotations

from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field


class ViolationEntry(BaseModel):
    model_config = ConfigDict(extra="forbid")

    rule: str
    kind: str
    message: str
    specifier: str
    start: int = Field(..., ge=0, description="Character offset of the import declaration")
    width: int = Field(..., ge=0)
    line: int = Field(..., ge=1, description="1-based line of the declaration start")
    column: int = Field(..., ge=1, description="1-based column of the declaration start")


class FileResult(BaseModel):
    model_config = ConfigDict(extra="forbid")

    path: str
    imports: int = Field(0, ge=0, description="Import declarations found in the file")
    violations: List[ViolationEntry] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.violations


class CheckResult(BaseModel):
    model_config = ConfigDict(extra="forbid")

    rule: str
    enabled: bool = True
    options: Dict[str, bool] = Field(default_factory=dict)
    files: List[FileResult] = Field(default_factory=list)
    total_files: int = 0
    total_violations: int = 0

    @property
    def ok(self) -> bool:
        return self.total_violations == 0


__all__ = ["ViolationEntry", "FileResult", "CheckResult"]
