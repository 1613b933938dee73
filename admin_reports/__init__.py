"""Admin reporting exports.

Sales, cook-performance, delivery-settlement and referral-commission reports
with CSV and SpreadsheetML downloads. See `admin_reports/exports/`.
"""
