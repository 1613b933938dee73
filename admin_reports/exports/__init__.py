"""Exports: tabular encoders and file delivery.

- cells.py: tagged cell values and Number/String typing
- encoders.py: CSV and SpreadsheetML (XML) encoders
- delivery.py: file sinks (directory, Flask download)
- exporter.py: export entry points tying encoders to sinks
"""
