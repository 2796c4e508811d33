from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any, Mapping, Sequence

from .aggregation.reporting import print_summary
from .aggregation.run_manager import run_from_config
from .config_loader import load_config
from .utils.logging_utils import configure_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="voting-power",
        description="Compute Shapley-Shubik and Banzhaf indices of vector weighted voting games.",
    )
    parser.add_argument(
        "command",
        nargs="?",
        help="Subcommand (optional, currently only 'compute').",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        required=True,
        help="Path to YAML configuration file.",
    )
    parser.add_argument(
        "--log-config",
        type=Path,
        default=None,
        help="Optional logging dictConfig YAML file.",
    )
    parser.add_argument(
        "--show",
        action="store_true",
        help="Print the results table to stdout.",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    if args.command not in (None, "compute"):
        parser.error(f"Unknown command: {args.command}")

    cfg = load_config(args.config)
    log_config = args.log_config
    if log_config is None:
        logging_cfg: Mapping[str, Any] = cfg.get("logging") or {}
        if logging_cfg.get("config"):
            log_config = Path(logging_cfg["config"])
    configure_logging(log_config)

    result_df = run_from_config(args.config, cfg=cfg)
    if args.show:
        print_summary(result_df, sys.stdout)


if __name__ == "__main__":
    main()
