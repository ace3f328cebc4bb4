#!/usr/bin/env python3
"""
Console demo for the BJJ Scoreboard.

Builds a short match between two random competitors and prints the
scoreboard once per second until the clock runs out.
"""
import argparse

from bjj_scoreboard import APP_TITLE, CompetitorNumber, Points, setup_logging
from bjj_scoreboard.services import RandomCompetitorGenerator, ServiceFactory


def main() -> None:
    parser = argparse.ArgumentParser(description=APP_TITLE)
    parser.add_argument("--duration", type=int, default=10, help="match length in seconds")
    parser.add_argument("--seed", type=int, default=None, help="seed for random competitors")
    args = parser.parse_args()

    setup_logging()

    factory = ServiceFactory(
        generator=RandomCompetitorGenerator(seed=args.seed),
        duration_seconds=args.duration,
    )
    match = factory.create_match()
    print(match)

    def on_tick(m) -> None:
        m.add_score(Points.for_technique("takedown"), CompetitorNumber.ONE)
        print(m)

    factory.create_runner(match, on_tick=on_tick).run()


if __name__ == "__main__":
    main()
