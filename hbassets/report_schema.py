from __future__ import annotations

from typing import Optional

from pydantic import BaseModel


class TemplateInfo(BaseModel):
    fullPath: str
    logicalPath: str
    name: str
    isPartial: bool
    isEmber: bool
    preprocessor: Optional[str] = None


class CompileReport(BaseModel):
    tool_version: str
    template: TemplateInfo
    shape: str
    mimeType: str
    output: str
    sizeBytes: int
