import json
import tempfile
import unittest
from datetime import date
from pathlib import Path

from admin_reports.exports.encoders import encode_csv
from admin_reports.reports.aggregate import filter_orders, records, sales_summary, sales_totals
from admin_reports.reports.models import ReportFilters, SalesTotals
from admin_reports.reports.store import ReportStore

ORDERS = [
    {"created_at": "2024-05-01T10:00:00Z", "service_type": "food", "panchayat_id": "p1",
     "panchayats": {"name": "Rampur"}, "status": "delivered", "total_amount": 250},
    {"created_at": "2024-05-02T11:00:00Z", "service_type": "grocery", "panchayat_id": "p2",
     "panchayats": {"name": "Sitapur"}, "status": "cancelled", "total_amount": 100.5},
    {"created_at": "2024-05-03T12:00:00Z", "service_type": "food", "panchayat_id": "p1",
     "panchayats": {"name": "Rampur"}, "status": "pending", "total_amount": None},
    {"created_at": "2024-06-01T09:00:00Z", "service_type": "food", "panchayat_id": None,
     "panchayats": None, "status": "delivered", "total_amount": 40},
]


class TestAggregate(unittest.TestCase):
    def test_sales_summary_groups_in_first_seen_order(self):
        rows = sales_summary(ORDERS)
        self.assertEqual([r.panchayat_name for r in rows], ["Rampur", "Sitapur", "Unknown"])
        rampur = rows[0]
        self.assertEqual(rampur.total_orders, 2)
        self.assertEqual(rampur.total_sales, 250)
        self.assertEqual((rampur.delivered_orders, rampur.cancelled_orders, rampur.pending_orders), (1, 0, 1))

    def test_totals(self):
        self.assertEqual(sales_totals(ORDERS), SalesTotals(orders=4, sales=390.5, delivered=2, cancelled=1))

    def test_filters(self):
        f = ReportFilters(start_date=date(2024, 5, 2), end_date=date(2024, 5, 31))
        self.assertEqual(len(filter_orders(ORDERS, f)), 2)
        self.assertEqual(len(filter_orders(ORDERS, ReportFilters(service_type="food"))), 3)
        self.assertEqual(len(filter_orders(ORDERS, ReportFilters(panchayat_id="p2"))), 1)
        self.assertEqual(len(filter_orders(ORDERS, ReportFilters())), 4)

    def test_filters_from_mapping(self):
        f = ReportFilters.from_mapping({"start_date": "2024-05-01", "service_type": "food"})
        self.assertEqual(f.start_date, date(2024, 5, 1))
        self.assertIsNone(f.end_date)
        self.assertEqual(f.panchayat_id, "all")
        with self.assertRaises(ValueError):
            ReportFilters.from_mapping({"start_date": "yesterday"})
        with self.assertRaises(ValueError):
            ReportFilters.from_mapping({"start_date": "2024-06-01", "end_date": "2024-05-01"})

    def test_records_feed_the_encoder_in_column_order(self):
        txt = encode_csv(records(sales_summary(ORDERS[:1])))
        self.assertEqual(txt, "panchayat_name,total_orders,total_sales,delivered_orders,cancelled_orders,pending_orders\n"
                              "Rampur,1,250,1,0,0")


class TestStore(unittest.TestCase):
    def test_from_json_and_report_rows(self):
        data = {
            "orders": ORDERS,
            "cooks": [{"total_orders": 3, "cook_id": "c1", "kitchen_name": "Maa's Kitchen",
                       "accepted_orders": 3, "rejected_orders": 0, "completed_orders": 2,
                       "average_rating": 4.5, "total_earnings": 900}],
            "referrals": [{"referrer_id": "u1", "referrer_name": "Asha", "referral_code": "ASHA10"}],
        }
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "data.json"
            path.write_text(json.dumps(data), encoding="utf-8")
            store = ReportStore.from_json_path(path)
        cooks = store.report_rows("cook")
        self.assertEqual(list(cooks[0].keys())[:2], ["cook_id", "kitchen_name"])
        self.assertEqual(store.report_rows("delivery"), [])
        ref = store.report_rows("referral")[0]
        self.assertIsNone(ref["paid_commission"])
        self.assertEqual(len(store.report_rows("sales", ReportFilters(panchayat_id="p1"))), 1)
        with self.assertRaises(KeyError):
            store.report_rows("payroll")

    def test_missing_file_gives_empty_store(self):
        with self.assertLogs("admin_reports.reports.store", level="WARNING"):
            store = ReportStore.from_json_path("/nonexistent/report_data.json")
        self.assertEqual(store.report_rows("sales"), [])


if __name__ == "__main__":
    unittest.main()
