from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Dict, Optional
import logging

from admin_reports.exports.delivery import FileSink
from admin_reports.exports.encoders import Dataset, encode_csv, encode_spreadsheet

logger = logging.getLogger(__name__)


class UnknownFormatError(ValueError):
    pass


@dataclass(frozen=True)
class ExportFormat:
    name: str
    extension: str
    media_type: str
    encoder: Callable[[Dataset], Optional[str]]


@dataclass(frozen=True)
class ExportArtifact:
    content: str
    filename: str
    media_type: str


CSV = ExportFormat("csv", ".csv", "text/csv;charset=utf-8;", encode_csv)
# XML spreadsheet, despite the legacy extension
EXCEL = ExportFormat("xls", ".xls", "application/vnd.ms-excel", encode_spreadsheet)

FORMATS: Dict[str, ExportFormat] = {f.name: f for f in (CSV, EXCEL)}


def get_format(name: str) -> ExportFormat:
    try:
        return FORMATS[name.lower()]
    except KeyError:
        raise UnknownFormatError(f"unknown export format: {name!r}") from None


def build_artifact(dataset: Dataset, filename: str, fmt: ExportFormat) -> Optional[ExportArtifact]:
    content = fmt.encoder(dataset)
    if content is None:
        return None
    return ExportArtifact(content=content, filename=f"{filename}{fmt.extension}", media_type=fmt.media_type)


def export(dataset: Dataset, filename: str, fmt: ExportFormat | str, sink: FileSink) -> Optional[ExportArtifact]:
    """Encode ``dataset`` and hand the file to ``sink``.

    An empty dataset is a no-op: a warning is logged, the sink is not called
    and None is returned.
    """
    if isinstance(fmt, str):
        fmt = get_format(fmt)
    artifact = build_artifact(dataset, filename, fmt)
    if artifact is None:
        logger.warning("No data to export")
        return None
    sink.deliver(artifact.content, artifact.filename, artifact.media_type)
    return artifact


def export_to_csv(dataset: Dataset, filename: str, sink: FileSink) -> Optional[ExportArtifact]:
    return export(dataset, filename, CSV, sink)


def export_to_excel(dataset: Dataset, filename: str, sink: FileSink) -> Optional[ExportArtifact]:
    return export(dataset, filename, EXCEL, sink)
