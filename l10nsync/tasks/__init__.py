"""Import, export and template tasks."""

from .discovery import discover_locales
from .export_task import ExportTask
from .import_task import ImportTask
from .shell import ToolRunner
from .templates_task import TemplatesTask

__all__ = [
    "ExportTask",
    "ImportTask",
    "TemplatesTask",
    "ToolRunner",
    "discover_locales",
]
