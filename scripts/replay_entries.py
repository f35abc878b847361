#!/usr/bin/env python3
"""
Replay exported crossovers over a candle history and list the entry points.

Usage:
    python scripts/replay_entries.py candles.json crossovers.json
    python scripts/replay_entries.py candles.json crossovers.json --json --log-level DEBUG
"""

import argparse
import asyncio
import sys
from pathlib import Path

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from xover_app.config.loader import ConfigLoader
from xover_app.data.parsers import parse_candles_json, parse_crossovers_json
from xover_app.engine import EntryPointEngine
from xover_app.errors import ConfigurationError, DataQualityError
from xover_app.logging.config import configure_logging
from xover_app.positions.store import OpenPositionStore
from xover_app.sources.replay import ReplayCrossoverSource
from xover_app.utils.time import format_timestamp


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="List historical crossover entry points")
    parser.add_argument("candles", type=Path, help="JSON array of candles")
    parser.add_argument("crossovers", type=Path, help="JSON array of exported crossovers")
    parser.add_argument("--config-dir", type=Path, default=None,
                        help="Directory holding instruments.yaml")
    parser.add_argument("--log-level", default="WARNING")
    parser.add_argument("--json", action="store_true", help="Emit JSON log lines")
    return parser


async def run(args: argparse.Namespace) -> int:
    candles = parse_candles_json(args.candles.read_bytes())
    if not candles:
        print("❌ Candle file is empty")
        return 1

    ticker = candles[0].ticker
    config = ConfigLoader.create(args.config_dir).load_indicator_config(ticker)
    source = ReplayCrossoverSource(parse_crossovers_json(args.crossovers.read_bytes()))

    engine = EntryPointEngine(source, OpenPositionStore(), config)
    entries = await engine.historical_entry_points(candles)

    print(f"\n📊 {ticker}: {format_timestamp(candles[0].time)} - {format_timestamp(candles[-1].time)}")
    print(f"Found {len(entries)} historical entry points")
    for crossover in entries:
        print(f"  • {format_timestamp(crossover.time)}  "
              f"macd={crossover.macd.cross} rsi={crossover.rsi} "
              f"k={crossover.stoch.k} d={crossover.stoch.d}")
    return 0


def main() -> None:
    args = build_parser().parse_args()
    configure_logging(level=args.log_level, format_json=args.json)

    try:
        sys.exit(asyncio.run(run(args)))
    except (DataQualityError, ConfigurationError) as e:
        print(f"❌ {type(e).__name__}: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
