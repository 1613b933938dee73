from __future__ import annotations
from datetime import date
from typing import Any, Dict, Iterable, List, Optional

from admin_reports.reports.models import ALL, ReportFilters, SalesReportRow, SalesTotals

UNKNOWN_PANCHAYAT = "Unknown"


def _order_date(order: Dict[str, Any]) -> Optional[date]:
    raw = order.get("created_at")
    if not raw:
        return None
    try:
        return date.fromisoformat(str(raw)[:10])
    except ValueError:
        return None


def _amount(order: Dict[str, Any]) -> float:
    return order.get("total_amount") or 0


def _panchayat_name(order: Dict[str, Any]) -> str:
    p = order.get("panchayats")
    if isinstance(p, dict) and p.get("name"):
        return p["name"]
    return order.get("panchayat_name") or UNKNOWN_PANCHAYAT


def filter_orders(orders: Iterable[Dict[str, Any]], filters: ReportFilters) -> List[Dict[str, Any]]:
    """Apply the date range, service type and panchayat filters, keeping order."""
    out: List[Dict[str, Any]] = []
    for o in orders:
        if filters.start_date or filters.end_date:
            d = _order_date(o)
            if d is None:
                continue
            if filters.start_date and d < filters.start_date:
                continue
            if filters.end_date and d > filters.end_date:
                continue
        if filters.service_type != ALL and o.get("service_type") != filters.service_type:
            continue
        if filters.panchayat_id != ALL and o.get("panchayat_id") != filters.panchayat_id:
            continue
        out.append(o)
    return out


def sales_summary(orders: Iterable[Dict[str, Any]]) -> List[SalesReportRow]:
    """Group orders per panchayat in first-seen order."""
    acc: Dict[str, Dict[str, Any]] = {}
    for o in orders:
        name = _panchayat_name(o)
        g = acc.setdefault(name, {
            "panchayat_name": name,
            "total_orders": 0,
            "total_sales": 0,
            "delivered_orders": 0,
            "cancelled_orders": 0,
            "pending_orders": 0,
        })
        g["total_orders"] += 1
        g["total_sales"] += _amount(o)
        status = o.get("status")
        if status == "delivered":
            g["delivered_orders"] += 1
        elif status == "cancelled":
            g["cancelled_orders"] += 1
        elif status == "pending":
            g["pending_orders"] += 1
    return [SalesReportRow(**g) for g in acc.values()]


def sales_totals(orders: Iterable[Dict[str, Any]]) -> SalesTotals:
    orders = list(orders)
    return SalesTotals(
        orders=len(orders),
        sales=sum(_amount(o) for o in orders),
        delivered=sum(1 for o in orders if o.get("status") == "delivered"),
        cancelled=sum(1 for o in orders if o.get("status") == "cancelled"),
    )


def records(rows: Iterable[Any]) -> List[Dict[str, Any]]:
    return [r.as_record() for r in rows]
