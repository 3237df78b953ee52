from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, Field, model_validator

from extlint.analyzers.ast_models import ImportRecord


class IssueLocation(BaseModel):
    file_path: str = Field(..., description="The path to the file where the issue was found.")
    line: int = Field(..., description="The line number of the issue.")
    column: Optional[int] = Field(None, description="The column number of the issue.")


class Issue(BaseModel):
    id: str = ""
    rule_id: str = Field(..., description="The identifier of the rule that was triggered.")
    severity: Literal["info", "warning", "error"] = Field(..., description="The severity of the issue.")
    message: str = Field(..., description="A human-readable description of the issue.")
    location: IssueLocation = Field(..., description="The location of the issue in the codebase.")
    symbol: Optional[str] = Field(None, description="The import specifier associated with the issue.")
    tags: List[str] = Field(default_factory=list, description="Tags for categorizing the issue.")

    @model_validator(mode="before")
    def generate_id(cls, data):
        if isinstance(data, dict) and not data.get("id"):
            rule_id = data.get("rule_id")
            location = data.get("location")
            if rule_id and location:
                if isinstance(location, dict):
                    file_path = location.get("file_path", "unknown-file")
                    line = location.get("line", 0)
                    data["id"] = f"{rule_id}:{file_path}:{line}"
                elif isinstance(location, IssueLocation):
                    data["id"] = f"{rule_id}:{location.file_path}:{location.line}"
        return data


class ProjectIssuesSummary(BaseModel):
    total_issues: int = Field(..., description="The total number of issues found.")
    by_severity: Dict[str, int] = Field(default_factory=dict, description="A count of issues grouped by severity.")
    by_rule: Dict[str, int] = Field(default_factory=dict, description="A count of issues grouped by rule ID.")


class FileSnapshot(BaseModel):
    path: str = Field(..., description="The path to the file, relative to the scan root.")
    language: str = Field(..., description="The language grammar used to parse the file.")
    imports: List[ImportRecord] = Field(default_factory=list, description="Import sites found in the file.")
    issues: List[Issue] = Field(default_factory=list, description="A list of issues identified in the file.")


class ScanMetadata(BaseModel):
    timestamp: datetime = Field(..., description="The timestamp when the scan was run.")
    project_name: str = Field(..., description="The name of the scanned project.")
    root: str = Field(..., description="The absolute path of the scan root.")
    file_count: int = Field(..., description="The number of files in the scan.")
    tool_version: str = Field(..., description="The version of the extlint tool.")


class ProjectSnapshot(BaseModel):
    metadata: ScanMetadata = Field(..., description="Metadata for the scan.")
    files: List[FileSnapshot] = Field(..., description="A list of snapshots for each scanned file.")
    issues_summary: Optional[ProjectIssuesSummary] = Field(None, description="Summary of project issues.")
