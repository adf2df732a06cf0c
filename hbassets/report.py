from __future__ import annotations

from .composer import select_shape
from .engine import HandlebarsTemplate
from .report_schema import CompileReport, TemplateInfo
from .version import tool_version


def build_report(template: HandlebarsTemplate, output: str) -> CompileReport:
    """Describe one compiled template: classification, chosen wrapper and generated code."""
    tp = template.template_path
    return CompileReport(
        tool_version=tool_version(),
        template=TemplateInfo(
            fullPath=tp.full_path,
            logicalPath=tp.logical_path,
            name=tp.relative_path,
            isPartial=tp.is_partial,
            isEmber=tp.is_ember,
            preprocessor=tp.preprocessor,
        ),
        shape=select_shape(tp, template.config).value,
        mimeType=template.default_mime_type,
        output=output,
        sizeBytes=len(output.encode("utf-8")),
    )


__all__ = ["build_report"]
