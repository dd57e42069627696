# vista_dates/cli.py
from __future__ import annotations

import argparse
import logging
import logging.config
from pathlib import Path
from typing import Callable, Dict, List, Optional

import pandas as pd

from vista_dates.controllers import date_utils
from vista_dates.controllers.numeric_format import (
    convert_date_from_fileman_to_vista,
    convert_date_from_vista_to_fileman,
    remove_trailing_zeros,
    zero_pad_vista_date_time,
)
from vista_dates.data_model.exceptions import VistaDateError
from vista_dates.utilities import LOGGING
from vista_dates.utilities.string_util import is_nullish

logging.config.dictConfig(LOGGING)
log = logging.getLogger(__name__)

Converter = Callable[[str], Optional[str]]

_ZONE_TARGETS = ("utc", "from-utc")


def _to_vista(value: str) -> Optional[str]:
    local = date_utils.parse_to_local(value)
    return date_utils.format_vista_date_time(local)


def _to_fileman(value: str) -> Optional[str]:
    local = date_utils.parse_to_local(value)
    return date_utils.format_fileman_date_time(local)


def build_converter(target: str, time_zone: Optional[str] = None) -> Converter:
    """Return the single-value conversion for a ``--to`` target."""
    if target in _ZONE_TARGETS and time_zone is None:
        raise SystemExit(f"--tz is required for --to {target}")

    converters: Dict[str, Converter] = {
        "local": date_utils.parse_to_local,
        "offset": date_utils.parse_to_offset,
        "utc": lambda v: date_utils.parse_to_utc(v, time_zone),
        "from-utc": lambda v: date_utils.parse_from_utc(v, time_zone),
        "vista": _to_vista,
        "fileman": _to_fileman,
        "to-vista": convert_date_from_fileman_to_vista,
        "to-fileman": convert_date_from_vista_to_fileman,
        "trim": remove_trailing_zeros,
        "pad": zero_pad_vista_date_time,
    }
    try:
        return converters[target]
    except KeyError:
        raise SystemExit(f"Unknown conversion target: {target}") from None


def convert_column(
    df: pd.DataFrame, column: str, convert: Converter, skip_errors: bool = False
) -> pd.DataFrame:
    """
    Convert ``df[column]`` cell by cell into a new frame.

    Nullish cells become "". A cell that fails to convert aborts the run
    unless ``skip_errors`` is set, in which case it is logged and left empty.
    """
    if column not in df.columns:
        raise SystemExit(f"Column not found: {column}")

    converted: List[str] = []
    for row, value in enumerate(df[column].tolist()):
        if is_nullish(value):
            converted.append("")
            continue
        try:
            result = convert(str(value))
        except VistaDateError as e:
            if not skip_errors:
                raise
            log.warning("Row %d: could not convert %r: %s", row, value, e)
            result = None
        converted.append(result or "")

    out = df.copy()
    out[column] = converted
    return out


def main(argv: Optional[List[str]] = None) -> None:
    ap = argparse.ArgumentParser(
        description="Convert VistA / FileMan / relative date values."
    )
    ap.add_argument("value", nargs="?", help="Single value to convert (e.g. 3181021.0612, T+3@NOON)")
    ap.add_argument("--to", default="local",
                    choices=["local", "offset", "utc", "from-utc", "vista", "fileman",
                             "to-vista", "to-fileman", "trim", "pad"],
                    help="Conversion target (default: local)")
    ap.add_argument("--tz", help="IANA time zone for --to utc / from-utc (e.g. America/New_York)")

    # Batch mode
    ap.add_argument("--csv", type=Path, help="Input CSV file; converts one column")
    ap.add_argument("--column", help="CSV column holding the date values")
    ap.add_argument("--output", type=Path, help="Output CSV path (default: overwrite input)")
    ap.add_argument("--skip-errors", action="store_true",
                    help="Leave unparseable cells empty instead of aborting")

    args = ap.parse_args(argv)
    convert = build_converter(args.to, args.tz)

    if args.csv is None:
        if args.value is None:
            ap.error("a value or --csv is required")
        print(convert(args.value) or "")
        return

    if not args.csv.is_file():
        raise SystemExit(f"Input CSV not found: {args.csv}")
    if not args.column:
        raise SystemExit("--column is required with --csv")

    df = pd.read_csv(args.csv, dtype=str, keep_default_na=False)
    out = convert_column(df, args.column, convert, skip_errors=args.skip_errors)
    output = args.output or args.csv
    output.parent.mkdir(parents=True, exist_ok=True)
    out.to_csv(output, index=False)
    log.info("Converted %d rows of %s into %s", len(out), args.column, output)


if __name__ == "__main__":
    main()
