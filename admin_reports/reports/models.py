from __future__ import annotations
from dataclasses import dataclass, asdict
from datetime import date
from typing import Any, Dict, Mapping, Optional

ALL = "all"


class _Row:
    def as_record(self) -> Dict[str, Any]:
        # asdict keeps field declaration order, which is the export column order
        return asdict(self)


@dataclass(frozen=True)
class SalesReportRow(_Row):
    panchayat_name: str
    total_orders: int = 0
    total_sales: float = 0
    delivered_orders: int = 0
    cancelled_orders: int = 0
    pending_orders: int = 0


@dataclass(frozen=True)
class CookPerformanceRow(_Row):
    cook_id: str
    kitchen_name: str
    total_orders: int
    accepted_orders: int
    rejected_orders: int
    completed_orders: int
    average_rating: float
    total_earnings: float


@dataclass(frozen=True)
class DeliverySettlementRow(_Row):
    staff_id: str
    staff_name: str
    total_deliveries: int
    collected_amount: float
    job_earnings: float
    total_settled: float
    pending_settlement: float


@dataclass(frozen=True)
class ReferralReportRow(_Row):
    referrer_id: str
    referrer_name: str
    referral_code: str
    total_referrals: int
    total_commission: float
    pending_commission: float
    paid_commission: float


@dataclass(frozen=True)
class SalesTotals:
    orders: int
    sales: float
    delivered: int
    cancelled: int


def _parse_date(raw: Optional[str], name: str) -> Optional[date]:
    if raw in (None, ""):
        return None
    try:
        return date.fromisoformat(str(raw)[:10])
    except ValueError:
        raise ValueError(f"{name} must be an ISO date (YYYY-MM-DD)") from None


@dataclass(frozen=True)
class ReportFilters:
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    service_type: str = ALL
    panchayat_id: str = ALL

    @staticmethod
    def from_mapping(query: Mapping[str, Any]) -> "ReportFilters":
        f = ReportFilters(
            start_date=_parse_date(query.get("start_date"), "start_date"),
            end_date=_parse_date(query.get("end_date"), "end_date"),
            service_type=query.get("service_type") or ALL,
            panchayat_id=query.get("panchayat_id") or ALL,
        )
        if f.start_date and f.end_date and f.start_date > f.end_date:
            raise ValueError("start_date must not be after end_date")
        return f
