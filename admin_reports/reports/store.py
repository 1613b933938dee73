from __future__ import annotations
from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Optional, Type
import json
import logging
from pathlib import Path

from admin_reports.reports.aggregate import filter_orders, records, sales_summary, sales_totals
from admin_reports.reports.models import (
    CookPerformanceRow,
    DeliverySettlementRow,
    ReferralReportRow,
    ReportFilters,
    SalesTotals,
)

logger = logging.getLogger(__name__)

REPORT_KINDS = ("sales", "cook", "delivery", "referral")

# Base download names; the exporter appends the extension
REPORT_FILENAMES = {
    "sales": "sales-report",
    "cook": "cook-performance",
    "delivery": "delivery-settlement",
    "referral": "referral-commission",
}

_ROW_TYPES: Dict[str, Type[Any]] = {
    "cook": CookPerformanceRow,
    "delivery": DeliverySettlementRow,
    "referral": ReferralReportRow,
}


def _shape(row_type: Type[Any], raw: Dict[str, Any]) -> Dict[str, Any]:
    """Project a pre-aggregated record onto the report's column order."""
    return {f.name: raw.get(f.name) for f in fields(row_type)}


@dataclass
class ReportStore:
    """Read-only stand-in for the remote store: already-shaped report rows."""
    orders: List[Dict[str, Any]] = field(default_factory=list)
    cooks: List[Dict[str, Any]] = field(default_factory=list)
    delivery: List[Dict[str, Any]] = field(default_factory=list)
    referrals: List[Dict[str, Any]] = field(default_factory=list)

    @staticmethod
    def from_json_path(path: str | Path) -> "ReportStore":
        p = Path(path)
        if not p.exists():
            logger.warning("Report data file %s not found; using an empty store", p)
            return ReportStore()
        data = json.loads(p.read_text(encoding="utf-8"))
        return ReportStore(
            orders=list(data.get("orders", [])),
            cooks=list(data.get("cooks", [])),
            delivery=list(data.get("delivery", [])),
            referrals=list(data.get("referrals", [])),
        )

    def _raw(self, kind: str) -> List[Dict[str, Any]]:
        return {"cook": self.cooks, "delivery": self.delivery, "referral": self.referrals}[kind]

    def report_rows(self, kind: str, filters: Optional[ReportFilters] = None) -> List[Dict[str, Any]]:
        if kind not in REPORT_KINDS:
            raise KeyError(kind)
        if kind == "sales":
            orders = filter_orders(self.orders, filters or ReportFilters())
            return records(sales_summary(orders))
        row_type = _ROW_TYPES[kind]
        return [_shape(row_type, r) for r in self._raw(kind)]

    def totals(self, filters: Optional[ReportFilters] = None) -> SalesTotals:
        return sales_totals(filter_orders(self.orders, filters or ReportFilters()))
