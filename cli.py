"""
Minimal CLI for calibration smoke-tests and offline export (no GUI unless `show`).

Usage examples:
  python -m FuelsysDataTool.cli configure --layout pow2 --numeric fixed --output ws.json
  python -m FuelsysDataTool.cli tables --table PressEst --output press_est.csv
  python -m FuelsysDataTool.cli lookup --layout orig

Commands:
  - configure: build and publish a configuration, print the workspace
  - tables: export the canonical (or remapped) dataset or one table
  - formats: print the four numeric format slots for a representation
  - lookup: print lookup block settings for a layout
  - show: open the table viewer (needs the `ui` extra)
"""
from __future__ import annotations

import argparse
import csv
import json
import logging
import os
import sys
from typing import Any, List

from . import api
from . import calibration as CAL
from . import io as IO
from . import numeric_types as NT
from .anchors import ANCHORS, ORIGINS
from .errors import CalibrationError
from .lookup_policy import lookup_settings
from .remap import remap as remap_layout
from .workspace import Workspace


def _fail_on_drift() -> None:
    guarded = [
        "HYS", "ZERO_THRESH", "ST_RANGE", "THROTTLE_SW", "SPEED_SW", "EGO_SW", "MAP_SW",
        "ENGINE_SPEED", "SPEED_MAX", "EGO_MAX", "KI",
    ]
    mismatches: List[str] = []
    for k in guarded:
        if float(ANCHORS[k]) != float(getattr(CAL, k)):
            note = f" ({ORIGINS[k]})" if k in ORIGINS else ""
            mismatches.append(f"{k}: anchors={ANCHORS[k]!r} vs calibration={getattr(CAL, k)!r}{note}")
    if mismatches:
        raise SystemExit("Calibration drift detected (anchors vs runtime):\n" + "\n".join(" - " + m for m in mismatches))


def _write_output(obj: Any, path: str | None) -> None:
    if not path:
        json.dump(obj, sys.stdout, ensure_ascii=False)
        sys.stdout.write("\n")
        return
    ext = os.path.splitext(path)[1].lower()
    if ext == ".json":
        with open(path, "w", encoding="utf-8") as f:
            json.dump(obj, f, ensure_ascii=False)
    elif ext == ".csv":
        # dict of scalars -> one header row and one value row
        if isinstance(obj, dict) and all(not isinstance(v, (list, dict)) for v in obj.values()):
            with open(path, "w", newline="", encoding="utf-8") as f:
                w = csv.writer(f)
                w.writerow(list(obj.keys()))
                w.writerow([obj[k] for k in obj.keys()])
        else:
            raise SystemExit("CSV output needs flat scalar data (use --table for a single table, or .json)")
    else:
        raise SystemExit(f"Unsupported output extension: {ext} (use .json or .csv)")


def _setup_logging(level: str | None) -> None:
    name = (level or os.getenv("FUELSYS_LOG_LEVEL", "WARNING")).upper()
    logging.basicConfig(level=getattr(logging, name, logging.WARNING), format="%(asctime)s - %(levelname)s - %(message)s")


def cmd_configure(args: argparse.Namespace) -> int:
    if args.fail_on_drift:
        _fail_on_drift()
    ws = Workspace()
    api.configure(ws, args.layout, args.numeric)
    _write_output(IO.workspace_to_dict(ws.snapshot()), args.output)
    return 0


def cmd_tables(args: argparse.Namespace) -> int:
    if args.fail_on_drift:
        _fail_on_drift()
    if args.layout == "orig":
        dataset = api.canonical_dataset()
    else:
        dataset = remap_layout(args.layout).dataset
    if args.table:
        if args.output and args.output.lower().endswith(".csv"):
            IO.write_table_csv(dataset, args.table, args.output)
            return 0
        headers, rows = IO.table_rows(dataset, args.table)
        _write_output({"headers": headers, "rows": rows}, args.output)
        return 0
    _write_output(IO.dataset_to_dict(dataset), args.output)
    return 0


def cmd_formats(args: argparse.Namespace) -> int:
    formats = NT.select(args.numeric)
    out = {slot: {**fmt.model_dump(mode="json"), "name": fmt.name, "quantity": NT.SLOT_QUANTITIES[slot]}
           for slot, fmt in formats.items()}
    _write_output(out, args.output)
    return 0


def cmd_lookup(args: argparse.Namespace) -> int:
    _write_output(lookup_settings(args.layout).model_dump(mode="json"), args.output)
    return 0


def cmd_show(args: argparse.Namespace) -> int:
    from .ui.main import main as ui_main  # Qt only when asked for
    return ui_main(layout=args.layout, numeric=args.numeric)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="FuelsysDataTool.cli", description="Fuel-system calibration data CLI")
    p.add_argument("--log-level", required=False, help="DEBUG, INFO, WARNING (default: $FUELSYS_LOG_LEVEL or WARNING)")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_cfg = sub.add_parser("configure", help="Build a configuration and print the published workspace")
    p_cfg.add_argument("--layout", default="orig", help="orig or pow2")
    p_cfg.add_argument("--numeric", default="float", help="float or fixed")
    p_cfg.add_argument("--output", required=False, help="Output file (.json)")
    p_cfg.add_argument("--fail-on-drift", action="store_true", help="Fail if calibration differs from anchors")
    p_cfg.set_defaults(func=cmd_configure)

    p_tab = sub.add_parser("tables", help="Export the dataset for a layout, or a single table")
    p_tab.add_argument("--layout", default="orig", help="orig or pow2")
    p_tab.add_argument("--table", required=False, help="Table name, e.g. PressEst")
    p_tab.add_argument("--output", required=False, help="Output file (.json, or .csv with --table)")
    p_tab.add_argument("--fail-on-drift", action="store_true", help="Fail if calibration differs from anchors")
    p_tab.set_defaults(func=cmd_tables)

    p_fmt = sub.add_parser("formats", help="Show numeric format slots for a representation")
    p_fmt.add_argument("--numeric", default="float", help="float or fixed")
    p_fmt.add_argument("--output", required=False, help="Output file (.json)")
    p_fmt.set_defaults(func=cmd_formats)

    p_lk = sub.add_parser("lookup", help="Show lookup block settings for a layout")
    p_lk.add_argument("--layout", default="orig", help="orig or pow2")
    p_lk.add_argument("--output", required=False, help="Output file (.json or .csv)")
    p_lk.set_defaults(func=cmd_lookup)

    p_show = sub.add_parser("show", help="Open the table viewer (requires PySide6 and pyqtgraph)")
    p_show.add_argument("--layout", default="orig", help="orig or pow2")
    p_show.add_argument("--numeric", default="float", help="float or fixed")
    p_show.set_defaults(func=cmd_show)

    return p


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _setup_logging(args.log_level)
    try:
        return args.func(args)
    except CalibrationError as e:
        sys.stderr.write(f"error: {e}\n")
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
