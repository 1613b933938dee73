"""Report data: row shapes, sales aggregation and the JSON-backed store.

- models.py: report row dataclasses and filters
- aggregate.py: order filtering, per-panchayat sales summary, totals
- store.py: ReportStore loading report source data from JSON
"""
