"""
Command-line entry point for the sensor log analyzer.

    sensorlog                      read stdin, report to stdout
    sensorlog readings.txt         read a file, report to stdout
    sensorlog readings.txt out.txt read a file, report to a file
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from dotenv import load_dotenv

from sensorlog.analysis import SensorLogAnalyzer
from sensorlog.core.config import STD_METHODS, config
from sensorlog.core.exceptions import SensorLogError
from sensorlog.core.logging_config import setup_logging

load_dotenv()

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sensorlog",
        description="Report extremes and per-sensor mean/standard deviation of a sensor log",
    )
    parser.add_argument(
        "input",
        nargs="?",
        help="Sensor log to read (default: standard input)",
    )
    parser.add_argument(
        "output",
        nargs="?",
        help="File to write the report to (default: standard output)",
    )
    parser.add_argument(
        "--std-method",
        choices=STD_METHODS,
        default=None,
        help=f"Standard deviation method (default: {config.analysis.std_method})",
    )
    parser.add_argument(
        "--decimals",
        type=int,
        default=None,
        help=f"Decimal places for mean and deviation (default: {config.analysis.decimal_places})",
    )
    parser.add_argument("--log-level", default=None, help=f"Logging level (default: {config.log_level})")
    return parser


def run(
    input_path: Optional[str],
    output_path: Optional[str],
    std_method: Optional[str] = None,
    decimals: Optional[int] = None,
) -> int:
    """
    Run one analysis and return the process exit status.

    The output file is opened only after the log has been fully validated,
    so a failed run leaves it untouched.
    """
    try:
        analyzer = SensorLogAnalyzer(std_method=std_method, decimal_places=decimals)
        if input_path is None:
            logger.info("Reading sensor data from STDIN")
            report = analyzer.analyze(sys.stdin)
        else:
            report = analyzer.analyze(input_path)

        text = analyzer.render(report)
        if output_path is None:
            sys.stdout.write(text)
            sys.stdout.flush()
        else:
            with open(output_path, "w", encoding="utf-8") as sink:
                sink.write(text)
            logger.info(f"Report written to {output_path}")
    except SensorLogError as e:
        logger.error(f"Terminating program ({type(e).__name__}: {e})")
        return 1
    except OSError as e:
        logger.error(f"Could not write report to '{output_path}': {e}")
        return 1

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(level=args.log_level)
    return run(args.input, args.output, std_method=args.std_method, decimals=args.decimals)


if __name__ == "__main__":
    sys.exit(main())
