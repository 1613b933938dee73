from __future__ import annotations
from typing import Any, List, Mapping, Optional, Sequence
from xml.sax.saxutils import escape

from admin_reports.exports.cells import Text, cell_text, cell_type, classify

Record = Mapping[str, Any]
Dataset = Sequence[Record]

CSV_DELIMITER = ","
CSV_QUOTE = '"'
ROW_SEPARATOR = "\n"

# Spreadsheet 2003 XML; the prolog is written verbatim so strict readers accept it
SPREADSHEET_PROLOG = (
    '<?xml version="1.0" encoding="UTF-8"?>\n'
    '<?mso-application progid="Excel.Sheet"?>\n'
    '<Workbook xmlns="urn:schemas-microsoft-com:office:spreadsheet"\n'
    ' xmlns:ss="urn:schemas-microsoft-com:office:spreadsheet">\n'
    '<Worksheet ss:Name="Report">\n'
    '<Table>\n'
)
SPREADSHEET_EPILOG = "</Table></Worksheet></Workbook>"

_XML_ENTITIES = {'"': "&quot;", "'": "&apos;"}


def header_row(dataset: Dataset) -> List[str]:
    """Column order for the whole export: the first record's key order."""
    return list(dataset[0].keys())


def escape_xml(text: str) -> str:
    # saxutils handles &, < and > (ampersand first); quotes are added here
    return escape(text, _XML_ENTITIES)


def csv_field(value: Any) -> str:
    cell = classify(value)
    text = cell_text(cell)
    if isinstance(cell, Text) and (CSV_DELIMITER in text or CSV_QUOTE in text):
        return CSV_QUOTE + text.replace(CSV_QUOTE, CSV_QUOTE * 2) + CSV_QUOTE
    return text


def encode_csv(dataset: Dataset) -> Optional[str]:
    """Encode records as CSV text, or None when there is nothing to export.

    Only text containing a comma or a double quote is quoted. Embedded
    newlines are written as-is.
    """
    if not dataset:
        return None
    headers = header_row(dataset)
    lines = [CSV_DELIMITER.join(headers)]
    for row in dataset:
        lines.append(CSV_DELIMITER.join(csv_field(row.get(h)) for h in headers))
    return ROW_SEPARATOR.join(lines)


def _xml_cell(value: Any) -> str:
    return '<Cell><Data ss:Type="{}">{}</Data></Cell>'.format(
        cell_type(value).value, escape_xml(cell_text(value))
    )


def encode_spreadsheet(dataset: Dataset) -> Optional[str]:
    """Encode records as a single-sheet SpreadsheetML workbook named ``Report``."""
    if not dataset:
        return None
    headers = header_row(dataset)
    parts = [SPREADSHEET_PROLOG, "<Row>"]
    parts.extend(_xml_cell(Text(h)) for h in headers)
    parts.append("</Row>")
    for row in dataset:
        parts.append("<Row>")
        parts.extend(_xml_cell(row.get(h)) for h in headers)
        parts.append("</Row>")
    parts.append(SPREADSHEET_EPILOG)
    return "".join(parts)
