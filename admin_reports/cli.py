import logging
import sys

from admin_reports.config.env import get_export_config, get_log_level, get_store_config
from admin_reports.exports.delivery import DirectorySink
from admin_reports.exports.exporter import FORMATS, export
from admin_reports.reports.store import REPORT_FILENAMES, REPORT_KINDS, ReportStore

USAGE = "Usage: python -m admin_reports.cli <{}> <{}> [out_dir]".format(
    "|".join(REPORT_KINDS), "|".join(FORMATS)
)


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if len(args) < 2 or args[0] not in REPORT_KINDS or args[1] not in FORMATS:
        print(USAGE, file=sys.stderr)
        return 2
    logging.basicConfig(level=get_log_level(), format="%(levelname)s %(name)s: %(message)s")
    kind, fmt = args[0], args[1]
    out_dir = args[2] if len(args) > 2 else get_export_config().output_dir

    store = ReportStore.from_json_path(get_store_config().data_path)
    sink = DirectorySink(out_dir)
    artifact = export(store.report_rows(kind), REPORT_FILENAMES[kind], fmt, sink)
    if artifact is not None:
        print(sink.path_for(artifact.filename))
    return 0


if __name__ == "__main__":
    sys.exit(main())
