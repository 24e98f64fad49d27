import logging
import sys

from sysmon.config import get_settings
from sysmon.models.errors import CollectorError
from sysmon.services import snapshot_collector
from sysmon.services.report import render_report


def main() -> int:
    """
    Print a one-shot snapshot report of the local machine.

    Returns 0 after printing the report, 1 if any required source failed.
    """
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        snapshot = snapshot_collector.collect_snapshot()
    except CollectorError as exc:
        print(f"An error occurred: {exc}", file=sys.stderr)
        return 1

    for line in render_report(snapshot):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
