"""Entry point: ``python -m draft_lottery``.

Supports two modes:
  - ``python -m draft_lottery``             → Run a paced lottery in the terminal
  - ``python -m draft_lottery simulate``    → Estimate pick odds over many lotteries
"""

from __future__ import annotations

import argparse
import logging
import sys
import time

from pydantic import TypeAdapter
from pydantic import ValidationError as SchemaError

from draft_lottery.config import LotteryConfig
from draft_lottery.core.enums import Domain, Phase
from draft_lottery.core.errors import LotteryError
from draft_lottery.core.models import Entity, PickRecord
from draft_lottery.core.pool import EntityPool, create_pool
from draft_lottery.core.teams import DEFAULT_TEAMS, load_teams
from draft_lottery.engine.driver import TimedDriver
from draft_lottery.engine.sequencer import LotterySequencer, SequencerSnapshot
from draft_lottery.engine.simulate import simulate_lottery
from draft_lottery.systems.rng import DeterministicRNG
from draft_lottery.utils.logging import setup_logging

logger = logging.getLogger(__name__)

_records_ta = TypeAdapter(list[PickRecord])


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Weighted Draft Lottery")
    sub = parser.add_subparsers(dest="command")

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--seed", type=int, default=42)
    common.add_argument("--teams", type=str, default=None, help="JSON team list (default: built-in teams)")
    common.add_argument("--log-level", type=str, default="INFO", choices=["DEBUG", "INFO", "WARNING"])
    common.add_argument("--degenerate", type=str, default="raise", choices=["raise", "uniform"])

    # --- Paced lottery (default) ---
    run = sub.add_parser("run", parents=[common], help="Run the lottery with reveal pacing (default)")
    run.add_argument("--draw-delay", type=float, default=2.0)
    run.add_argument("--reveal", type=float, default=4.0)
    run.add_argument("--fast", action="store_true", help="Skip all delays")
    run.add_argument("--json", action="store_true", help="Print final results as JSON")

    # --- Monte Carlo ---
    sim = sub.add_parser("simulate", parents=[common], help="Estimate pick probabilities")
    sim.add_argument("--runs", type=int, default=10000)

    return parser


def _load_pool(path: str | None) -> EntityPool:
    entities: list[Entity] = load_teams(path) if path else list(DEFAULT_TEAMS)
    return create_pool(entities)


def _describe(entity: Entity) -> str:
    odds = entity.metadata.get("odds_text")
    return f"{entity.name} ({odds})" if odds else entity.name


def _print_reveal(snap: SequencerSnapshot) -> None:
    if snap.phase == Phase.REVEALING and snap.current_draw_result is not None:
        result = snap.current_draw_result
        print(f"Pick {result.pick_number}: {_describe(result.winner)}", flush=True)


def _run_lottery(args: argparse.Namespace) -> int:
    config = LotteryConfig(
        seed=args.seed,
        draw_delay_seconds=0.0 if args.fast else args.draw_delay,
        reveal_seconds=0.0 if args.fast else args.reveal,
        degenerate_policy=args.degenerate,
        log_level=args.log_level,
    )
    # Results JSON owns stdout; logs move to stderr
    setup_logging(config.log_level, stream=sys.stderr if args.json else None)

    pool = _load_pool(args.teams)
    rng = DeterministicRNG(config.seed)
    sequencer = LotterySequencer(
        pool, rng.stream(Domain.DRAW), degenerate_policy=config.policy,
    )
    if not args.json:
        sequencer.subscribe(_print_reveal)

    snap = TimedDriver.from_config(sequencer, config, sleep=time.sleep).run()

    if args.json:
        records = [PickRecord.from_result(r) for r in snap.results]
        print(_records_ta.dump_json(records, indent=2).decode())
        return 0

    print("Results")
    for result in snap.results:
        print(f"  {result.pick_number}. {_describe(result.winner)}")
    return 0


def _run_simulation(args: argparse.Namespace) -> int:
    config = LotteryConfig(
        seed=args.seed,
        simulation_runs=args.runs,
        degenerate_policy=args.degenerate,
        log_level=args.log_level,
    )
    setup_logging(config.log_level)

    pool = _load_pool(args.teams)
    dist = simulate_lottery(
        pool, config.simulation_runs, DeterministicRNG(config.seed),
        degenerate_policy=config.policy,
    )

    width = max(len("Team"), *(len(eid) for eid in dist.entity_ids))
    header = " ".join(f"{'#' + str(i + 1):>7}" for i in range(pool.total_picks))
    print(f"{'Team':<{width}} {header}     avg")
    for eid in dist.entity_ids:
        cells = " ".join(
            f"{dist.probability(eid, i):>7.1%}" for i in range(pool.total_picks)
        )
        avg = dist.expected_pick(eid)
        avg_text = f"{avg:>7.2f}" if avg is not None else f"{'-':>7}"
        print(f"{eid:<{width}} {cells} {avg_text}")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    argv = list(sys.argv[1:] if argv is None else argv)

    # Default to run mode if no subcommand given
    if not argv or argv[0] not in ("run", "simulate", "-h", "--help"):
        argv = ["run", *argv]
    args = parser.parse_args(argv)

    try:
        if args.command == "simulate":
            return _run_simulation(args)
        return _run_lottery(args)
    except (LotteryError, SchemaError, OSError) as exc:
        logger.error("Lottery failed: %s", exc)
        return 1


if __name__ == "__main__":
    sys.exit(main())
