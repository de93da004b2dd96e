# main.py
import argparse
import logging
import sys

from common.logging_utils import setup_logging
from common.constants import LHV_UNIT
from common.results import format_report, write_results_csv
from combustion.combustor import Combustor
from io_loader import load_fuel, SAMPLE_FUEL

log = logging.getLogger(__name__)


def run_fuel_case(fuel_path: str | None = None, *, csv_outdir: str | None = None, run_id: str | None = None):
    if fuel_path:
        name, fuel = load_fuel(fuel_path)
    else:
        name, fuel = "sample", SAMPLE_FUEL

    result = Combustor(fuel, name=name).run()

    if csv_outdir:
        if not run_id:
            from datetime import datetime
            run_id = datetime.now().strftime("%Y%m%d-%H%M%S")
        path = write_results_csv(result, csv_outdir, run_id)
        log.info(f"Results written to {path}", extra={"fuel": name, "step": "csv"})

    return result


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Dry/combustible mass and lower heating value of a fuel")
    ap.add_argument("--fuel", default=None, help="YAML fuel composition (default: built-in sample)")
    ap.add_argument("--log", default="INFO")
    ap.add_argument("--csv", default=None, metavar="OUTDIR", help="write a summary CSV into OUTDIR")
    ap.add_argument("--run-id", default=None)
    ap.add_argument("--unit", default=LHV_UNIT, help="label printed after heating values")
    args = ap.parse_args(argv)

    setup_logging(args.log)

    try:
        result = run_fuel_case(args.fuel, csv_outdir=args.csv, run_id=args.run_id)
    except (ValueError, KeyError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    print(format_report(result, unit=args.unit))
    return 0


if __name__ == "__main__":
    sys.exit(main())
