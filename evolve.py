# /// script
# requires-python = ">=3.12"
# dependencies = ["pydantic>=2.0"]
# ///
"""Evolve drafting agents through simulated baseball seasons.

Usage:
    uv run evolve.py --generations 100 --seed 42
    uv run evolve.py --rankings 500 --roster data/character_data.json
"""

from __future__ import annotations

import argparse
import logging
import sys

from config import DEFAULT_NUM_AGENTS, get_roster_path, get_seed
from evolution import EvolutionSimulator
from models import GenerationResult
from rankings import format_player_rankings, run_player_rankings
from report import format_generation, format_simulation_summary
from roster import load_players

DEFAULT_CLI_GENERATIONS = 100


def _winning_roster(sim: EvolutionSimulator) -> list[str]:
    if not sim.ranked_agents:
        return []
    winner = sim.ranked_agents[0]
    lines = [f"Team: {winner.team.name} (Agent {winner.id})"]
    for idx, p in enumerate(winner.team.players, start=1):
        star = " (captain)" if p is winner.team.captain else ""
        lines.append(
            f"{idx}. {p.name}{star} - Pitching: {p.pitching}, Batting: {p.batting}, "
            f"Fielding: {p.fielding}, Running: {p.running}"
        )
    return lines


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Evolve drafting agents through simulated baseball tournaments."
    )
    parser.add_argument(
        "--generations", type=int, default=DEFAULT_CLI_GENERATIONS,
        help=f"Number of generations to run (default: {DEFAULT_CLI_GENERATIONS}).",
    )
    parser.add_argument(
        "--agents", type=int, default=DEFAULT_NUM_AGENTS,
        help=f"Population size (default: {DEFAULT_NUM_AGENTS}).",
    )
    parser.add_argument(
        "--seed", type=int, default=None,
        help="Random seed. Falls back to DRAFT_EVOLUTION_SEED.",
    )
    parser.add_argument(
        "--roster", default=None,
        help="Path to the roster JSON. Falls back to DRAFT_EVOLUTION_ROSTER.",
    )
    parser.add_argument(
        "--rankings", type=int, default=None, metavar="N",
        help="Run N random tournaments and rank players instead of evolving.",
    )
    parser.add_argument(
        "--verbose", action="store_true",
        help="Log per-generation detail.",
    )
    parser.add_argument(
        "--quiet", action="store_true",
        help="Only print the final summary.",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    try:
        seed = args.seed if args.seed is not None else get_seed()
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.generations < 1 or args.agents < 1:
        print("Error: --generations and --agents must be positive.", file=sys.stderr)
        return 1

    roster_path = args.roster or get_roster_path()
    players = load_players(roster_path)
    if not players:
        print(f"Warning: no players loaded from {roster_path}", file=sys.stderr)

    if args.rankings is not None:
        rankings = run_player_rankings(players, iterations=args.rankings, seed=seed)
        print(format_player_rankings(rankings))
        return 0

    sim = EvolutionSimulator(
        num_agents=args.agents,
        max_generations=args.generations,
        roster_loader=lambda: load_players(roster_path),
        seed=seed,
    )

    if not args.quiet:
        def show(result: GenerationResult) -> None:
            print(format_generation(result))

        sim.set_generation_complete_callback(show)

    results = sim.run_simulation()
    print()
    print(format_simulation_summary(results, sim.global_player_stats, _winning_roster(sim)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
