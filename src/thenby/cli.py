from __future__ import annotations

import argparse
import csv
import json
import logging
from pathlib import Path
from typing import Any, Dict, List

from .models import SortSpec
from .registry import ComparatorRegistry, default_registry

logger = logging.getLogger(__name__)


def _load_json(path: Path) -> List[Dict[str, Any]]:
    with path.open("r", encoding="utf-8") as f:
        data = json.load(f)
    if isinstance(data, dict):
        # Maybe wrapped object with key like 'items'
        for key in ("items", "data", "records"):
            if key in data and isinstance(data[key], list):
                return list(data[key])
        raise ValueError("JSON must be an array or object with 'items'/'data'/'records' list")
    if not isinstance(data, list):
        raise ValueError("JSON must be an array of objects")
    return list(data)


def _load_csv(path: Path) -> List[Dict[str, Any]]:
    with path.open("r", encoding="utf-8", newline="") as f:
        reader = csv.DictReader(f)
        return [dict(row) for row in reader]


def _load_dataset(path: str) -> List[Dict[str, Any]]:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(str(p))
    suffix = p.suffix.lower()
    if suffix == ".json":
        return _load_json(p)
    if suffix == ".csv":
        return _load_csv(p)
    raise ValueError("Unsupported dataset format. Use .csv or .json")


def _comparators_epilog(registry: ComparatorRegistry) -> str:
    lines = ["comparators usable as cmp in a sort spec:"]
    for name in registry.names():
        lines.append(f"  {name:<10} {registry.describe(name) or ''}".rstrip())
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Sort a dataset by a multi-key sort spec",
        epilog=_comparators_epilog(default_registry),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("dataset", help="Dataset file (.csv or .json)")
    parser.add_argument("spec", help="Sort spec YAML file")
    parser.add_argument("--output", default="-", help="Output file path or '-' for stdout")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )

    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    records = _load_dataset(args.dataset)
    spec = SortSpec.from_yaml_file(args.spec)
    logger.info("Sorting %d records by %s", len(records), ", ".join(k.key for k in spec.keys))

    comparator = spec.build()
    result = comparator.sort(records)

    output = json.dumps(result, indent=2, ensure_ascii=False)
    if args.output == "-":
        print(output)
    else:
        Path(args.output).write_text(output, encoding="utf-8")


if __name__ == "__main__":
    main()
