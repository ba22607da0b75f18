"""
Reconstruct secrets from share documents.

Usage:
    share-recovery shares1.json shares2.json
    share-recovery --config share-recovery.json --workers 8
    share-recovery data/*.yaml --on-invalid-share skip --json-logs
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from .config import load_config
from .decoder import INVALID_SHARE_POLICIES
from .service.batch import SecretRecoveryRunner
from .utils.logging import configure_logging
from .utils.metrics import CompositeMetrics, InMemoryMetrics, MetricsSink
from .utils.prometheus_metrics import PrometheusMetrics

BANNER = "--- Shamir's Secret Sharing Solver ---"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Reconstruct secrets from threshold share documents")
    parser.add_argument(
        "paths",
        nargs="*",
        help="Share documents (JSON or YAML); defaults to the configured inputs",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Configuration file (default: $SHARE_RECOVERY_CONFIG or ./share-recovery.json)",
    )
    parser.add_argument("--workers", type=int, default=None, help="Documents processed in parallel")
    parser.add_argument(
        "--on-invalid-share",
        choices=INVALID_SHARE_POLICIES,
        default=None,
        help="Abort a document on an undecodable share, or skip the share",
    )
    parser.add_argument("--log-level", type=str, default=None, help="Logging level (default: INFO)")
    parser.add_argument("--json-logs", action="store_true", help="Emit logs as JSON")
    parser.add_argument("--metrics-port", type=int, default=None, help="Expose Prometheus metrics on this port")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        config, _ = load_config(args.config)
    except ValueError as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return 2

    # Command-line values override the file.
    if args.workers is not None:
        if args.workers <= 0:
            print("--workers must be positive", file=sys.stderr)
            return 2
        config.max_workers = args.workers
    if args.on_invalid_share is not None:
        config.on_invalid_share = args.on_invalid_share
    if args.log_level:
        config.logging.level = args.log_level.upper()
    if args.json_logs:
        config.logging.json_output = True
    if args.metrics_port is not None:
        config.metrics_port = args.metrics_port

    configure_logging(config.logging.level, config.logging.json_output, config.logging.log_file)

    sinks: List[MetricsSink] = [InMemoryMetrics()]
    if config.metrics_port is not None:
        prometheus = PrometheusMetrics()
        prometheus.start_server(config.metrics_port)
        sinks.append(prometheus)
    runner = SecretRecoveryRunner(config, metrics=CompositeMetrics(sinks))

    print(BANNER)
    outcomes = runner.run(args.paths or None)
    for outcome in outcomes:
        print(outcome.describe())
    return 0 if all(o.ok for o in outcomes) else 1


if __name__ == "__main__":
    sys.exit(main())
