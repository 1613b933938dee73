from __future__ import annotations
from dataclasses import asdict
import logging

from flask import Flask, request, jsonify, Response

from admin_reports.config.env import PRIVILEGED_ROLES, get_auth_config, get_store_config
from admin_reports.exports.delivery import ResponseSink
from admin_reports.exports.exporter import UnknownFormatError, export, get_format
from admin_reports.reports.models import ReportFilters
from admin_reports.reports.store import REPORT_FILENAMES, REPORT_KINDS, ReportStore

logger = logging.getLogger(__name__)

app = Flask(__name__)
# Keep report columns in export order
app.json.sort_keys = False

# Configuration helpers (overridable via app.config in tests)

def _get_api_key() -> str | None:
    if 'API_KEY' in app.config:
        return app.config.get('API_KEY')
    return get_auth_config().api_key


def _get_store() -> ReportStore:
    store = app.config.get('REPORT_STORE')
    if store is None:
        store = ReportStore.from_json_path(get_store_config().data_path)
        app.config['REPORT_STORE'] = store
    return store


def _is_privileged() -> bool:
    if request.headers.get('X-Role') not in PRIVILEGED_ROLES:
        return False
    api_key = _get_api_key()
    if api_key and request.headers.get('X-API-Key') != api_key:
        return False
    return True


def _filters() -> ReportFilters:
    return ReportFilters.from_mapping(request.args)


@app.before_request
def _require_admin():
    if request.path.startswith('/reports') and not _is_privileged():
        return jsonify({'error': 'access_denied'}), 403
    return None


@app.errorhandler(ValueError)
def _bad_request(exc: ValueError):
    return jsonify({'error': str(exc)}), 400


@app.get('/reports')
def list_reports():
    return jsonify({'reports': list(REPORT_KINDS)})


@app.get('/reports/sales/totals')
def get_sales_totals():
    return jsonify(asdict(_get_store().totals(_filters())))


@app.get('/reports/<kind>')
def get_report(kind: str):
    if kind not in REPORT_KINDS:
        return jsonify({'error': 'report_not_found'}), 404
    rows = _get_store().report_rows(kind, _filters())
    return jsonify({'report': kind, 'rows': rows})


@app.get('/reports/<kind>/export.<fmt>')
def export_report(kind: str, fmt: str):
    if kind not in REPORT_KINDS:
        return jsonify({'error': 'report_not_found'}), 404
    try:
        export_format = get_format(fmt)
    except UnknownFormatError:
        return jsonify({'error': 'format_not_found'}), 404
    rows = _get_store().report_rows(kind, _filters())
    sink = ResponseSink()
    artifact = export(rows, REPORT_FILENAMES[kind], export_format, sink)
    if artifact is None:
        # Nothing to export; no file is produced
        return Response(status=204)
    logger.info("Export %s as %s for %s", kind, artifact.filename, request.headers.get('X-Role'))
    return sink.response


if __name__ == '__main__':
    app.run(host='0.0.0.0', port=8000)
