#!/usr/bin/env python3
"""Démo - parcours des scénarios de callbacks en ligne de commande.

Scénarios disponibles :
    delegates  appel direct d'un Transformer
    plugins    transformation en place (liste et tableau numpy)
    multicast  rapport de progression vers plusieurs observateurs
    events     alerte de hausse de prix sur une action

Usage:
    python3 demo.py events
    python3 demo.py multicast --progress-file /tmp/progress.txt -v
"""

import argparse
import logging
import sys
from dataclasses import replace
from decimal import Decimal

import numpy as np

from multicast.app import (
    ConsoleProgressWriter,
    FileProgressWriter,
    PriceAlertMonitor,
    Stock,
    hard_work,
)
from multicast.config import Settings
from multicast.engine import (
    PROGRESS_REPORTER,
    TRANSFORMER,
    CallbackList,
    apply_in_place,
    invoke,
    square,
)


def run_delegates(settings: Settings) -> None:
    transformer = CallbackList.of(TRANSFORMER, square)
    print(f"answer: {invoke(transformer, 3)}")


def run_plugins(settings: Settings) -> None:
    values = [1, 2, 3]
    apply_in_place(values, square)
    print(" ".join(str(value) for value in values))  # 1 4 9

    array = np.arange(1, 6)
    apply_in_place(array, square)
    print(array)


def run_multicast(settings: Settings) -> None:
    reporter = CallbackList.of(
        PROGRESS_REPORTER,
        ConsoleProgressWriter(),
        FileProgressWriter(settings.progress_file),
    )
    hard_work(reporter, steps=settings.progress_steps, pause=settings.progress_pause)


def run_events(settings: Settings) -> None:
    stock = Stock("THPW", Decimal("27.10"))
    monitor = PriceAlertMonitor(threshold=settings.alert_threshold)
    stock.subscribe(monitor.on_price_changed)
    stock.price = Decimal("31.59")

    stock.unsubscribe(monitor.on_price_changed)
    stock.price = Decimal("40.00")

    for symbol, event in monitor.alerts:
        print(f"Alert, {symbol}: {event.last_price} -> {event.new_price}")


SCENARIOS = {
    "delegates": run_delegates,
    "plugins": run_plugins,
    "multicast": run_multicast,
    "events": run_events,
}


def main(argv=None) -> int:
    """Lance le scénario choisi."""
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("scenario", choices=sorted(SCENARIOS))
    parser.add_argument("--progress-file", default=None)
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    settings = Settings.from_env()
    if args.progress_file:
        settings = replace(settings, progress_file=args.progress_file)

    SCENARIOS[args.scenario](settings)
    return 0


if __name__ == "__main__":
    sys.exit(main())
