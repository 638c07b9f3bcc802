"""CLI entry-point for the FMA ereport device report.

Usage examples
--------------
# Report from an event log only:
python -m src.analyzer --fmlog fmdump.jsonl

# Enrich with a hardware-inventory snapshot and write to a file:
python -m src.analyzer --fmlog fmdump.jsonl --hwgrok hwgrok.json --out out/report.txt
"""

from __future__ import annotations

import argparse
import logging
import sys

from src.analyzer.pipeline import RunConfig, run_report
from src.analyzer.reporter import write_report
from src.contracts.errors import FmReportError
from src.shared.logger import setup_logging

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="fmreport",
        description="Summarise FMA ereports per device, optionally enriched with hwgrok data",
    )
    p.add_argument(
        "--fmlog",
        required=True,
        help="Event log: one JSON object per line (e.g. fmdump -AV output as JSON).",
    )
    p.add_argument(
        "--hwgrok",
        default=None,
        help="Hardware-inventory JSON document used to enrich the report (optional).",
    )
    p.add_argument(
        "--config",
        default=None,
        help=(
            "YAML settings (admission prefixes, report layout). Default: built-in "
            "values. config/fmreport.yaml is a template spelling out those defaults."
        ),
    )
    p.add_argument(
        "--out",
        default=None,
        help="Write the report to this file instead of stdout.",
    )
    p.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level. Default: WARNING",
    )
    return p


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    config = RunConfig(
        fmlog_path=args.fmlog,
        hwgrok_path=args.hwgrok,
        config_path=args.config,
    )

    try:
        result = run_report(config)
        if args.out:
            write_report(result["report"], args.out)
    except (OSError, FmReportError) as exc:
        log.error("Aborting, no report produced: %s", exc)
        return 1

    if not args.out:
        sys.stdout.write(result["report"])
    return 0


if __name__ == "__main__":
    sys.exit(main())
