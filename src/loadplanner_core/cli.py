from __future__ import annotations

import argparse
import json
import logging
import sys
from importlib import metadata
from typing import Any, Dict, List, Optional, Sequence

import yaml

from .containers import CONTAINER_PRESETS, container_preset
from .engine import PlacementRun, place
from .models import Container, PalletType
from .units import format_float, format_percent, parse_bool, parse_float


def _get_app_version() -> str:
    try:
        return metadata.version("loadplanner-core")
    except metadata.PackageNotFoundError:
        return "dev"


def _as_float(value: Any) -> float:
    if isinstance(value, str):
        return parse_float(value)
    return float(value)


def parse_container(value: Any) -> Container:
    if isinstance(value, str):
        return container_preset(value)
    if isinstance(value, dict):
        return Container(length=_as_float(value["length"]), width=_as_float(value["width"]))
    raise ValueError(f"container must be a preset name or a mapping, got {value!r}")


def parse_pallet_types(entries: Any) -> List[PalletType]:
    if not isinstance(entries, list):
        raise ValueError("pallets must be a list")
    types: List[PalletType] = []
    for position, entry in enumerate(entries, start=1):
        if not isinstance(entry, dict):
            raise ValueError(f"pallet #{position} must be a mapping")
        types.append(
            PalletType(
                id=entry.get("id", position),
                length=_as_float(entry["length"]),
                width=_as_float(entry["width"]),
                quantity=entry.get("quantity", entry.get("qty", 1)),
                allow_rotation=parse_bool(entry.get("allow_rotation", True)),
                color=entry.get("color"),
            )
        )
    return types


def load_job(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: job file must contain a mapping")
    return data


def placements_payload(run: PlacementRun) -> Dict[str, Any]:
    return {
        "placements": [
            {
                "id": inst.type_id,
                "instance": inst.instance_index,
                "placed": inst.placed,
                "x": inst.x,
                "y": inst.y,
                "length": inst.final_length,
                "width": inst.final_width,
                "rotated": inst.rotated,
                "color": inst.color,
            }
            for inst in run.placements
        ],
        "stats": {
            "totalPallets": run.stats.total_pallets,
            "placedPallets": run.stats.placed_pallets,
            "efficiency": run.stats.efficiency,
            "executionTimeMs": run.stats.execution_time_ms,
            "strategy": run.stats.strategy,
        },
    }


def format_summary(run: PlacementRun) -> str:
    stats = run.stats
    lines = [
        f"Strategy:   {stats.strategy or '-'}",
        f"Placed:     {stats.placed_pallets}/{stats.total_pallets}",
        f"Efficiency: {format_percent(stats.efficiency)}",
        f"Time:       {format_float(stats.execution_time_ms)} ms",
    ]
    for type_id, count in stats.placed_by_type.items():
        lines.append(f"  {type_id}: {count}")
    for outcome in run.outcomes:
        status = format_float(outcome.score, 4) if outcome.ok else f"failed ({outcome.error})"
        lines.append(f"  [{outcome.kind}] {status}")
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="loadplanner",
        description="Place pallets on a container floor.",
    )
    parser.add_argument("job", help="YAML file with container, clearance and pallets")
    parser.add_argument(
        "--container",
        help=f"override the container preset ({', '.join(CONTAINER_PRESETS)})",
    )
    parser.add_argument("--clearance", help="override the clearance in cm")
    parser.add_argument("--json", action="store_true", help="print placements as JSON")
    parser.add_argument("-v", "--verbose", action="store_true")
    parser.add_argument("--version", action="version", version=_get_app_version())
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        job = load_job(args.job)
        container = parse_container(args.container or job.get("container", "40ft"))
        clearance_raw = args.clearance if args.clearance is not None else job.get("clearance", 0)
        clearance = _as_float(clearance_raw)
        pallet_types = parse_pallet_types(job.get("pallets", []))
        run = place(pallet_types, container, clearance)
    except (OSError, yaml.YAMLError, KeyError, TypeError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if args.json:
        print(json.dumps(placements_payload(run), ensure_ascii=False, indent=2))
    else:
        print(format_summary(run))
    return 0


__all__ = ["main", "build_parser"]
