#!/usr/bin/env python3
"""
Allotment - Entry point for a command-line budget report.

Usage:
    python main.py                                  # Everything at minimum
    python main.py --preset even                    # Spread the budget evenly
    python main.py --preset random --seed 7         # Reproducible random split
    python main.py --set health=150e9 --sub health.hospitals=80e9 --finalize
"""

import argparse
import logging

from allotment import BudgetSession, engine, get_settings
from allotment.utils.formatting import format_currency, format_percent

logger = logging.getLogger(__name__)

PRESETS = ("even", "minimum", "random")


def parse_assignment(text: str) -> tuple[str, float]:
    """Parse ``KEY=AMOUNT`` into a (key, amount) pair."""
    key, sep, value = text.partition("=")
    if not sep or not key.strip():
        raise argparse.ArgumentTypeError(f"expected KEY=AMOUNT, got {text!r}")
    try:
        return key.strip(), float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid amount in {text!r}") from None


def parse_sub_assignment(text: str) -> tuple[str, str, float]:
    """Parse ``SERVICE.SUB=AMOUNT`` into a (service, sub, amount) triple."""
    key, amount = parse_assignment(text)
    service_id, sep, sub_service_id = key.partition(".")
    if not sep or not service_id or not sub_service_id:
        raise argparse.ArgumentTypeError(f"expected SERVICE.SUB=AMOUNT, got {text!r}")
    return service_id, sub_service_id, amount


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Allotment budget allocation report")
    parser.add_argument("--preset", choices=PRESETS, help="Bulk distribution to start from")
    parser.add_argument("--seed", type=int, default=None, help="Seed for --preset random")
    parser.add_argument(
        "--set",
        dest="services",
        action="append",
        type=parse_assignment,
        default=[],
        metavar="SERVICE=AMOUNT",
        help="Set a service allocation (repeatable)",
    )
    parser.add_argument(
        "--sub",
        dest="subs",
        action="append",
        type=parse_sub_assignment,
        default=[],
        metavar="SERVICE.SUB=AMOUNT",
        help="Set a sub-service allocation (repeatable)",
    )
    parser.add_argument("--finalize", action="store_true", help="Mark the budget as finalized")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every edit")
    return parser


def apply_edits(session: BudgetSession, args: argparse.Namespace) -> None:
    """Replay the requested preset and edits on the session."""
    if args.preset == "even":
        session.distribute_evenly()
    elif args.preset == "random":
        session.randomize(seed=args.seed)
    elif args.preset == "minimum":
        session.reset_to_minimum()

    for service_id, amount in args.services:
        session.update_service(service_id, amount)
    for service_id, sub_service_id, amount in args.subs:
        session.update_sub(service_id, sub_service_id, amount)

    if args.finalize:
        if session.can_finalize():
            session.finalize()
        else:
            left = format_currency(engine.remaining(session.state), session.state.currency_symbol)
            logger.warning(f"Not finalizing: {left} still unallocated")


def render_report(session: BudgetSession) -> str:
    """Plain-text report of the session's allocation and classification."""
    state = session.state
    symbol = state.currency_symbol
    lines = []

    for service in session.catalog:
        info = engine.allocation_info(state, service)
        status = "AT MINIMUM" if info.at_minimum else info.status
        lines.append(
            f"{service.name:<30} {format_currency(info.amount, symbol):>9} "
            f"{format_percent(info.percentage):>7}  tier {info.current_tier}  {status}"
        )
        for sub in service.sub_services:
            share = engine.sub_range_percentage(state, service.id, sub.id)
            amount = state.sub_allocation(service.id, sub.id)
            marker = "  at minimum" if session.is_sub_at_minimum(service.id, sub.id) else ""
            lines.append(f"    {sub.name:<26} {format_currency(amount, symbol):>9} {format_percent(share):>7}{marker}")

    lines.append("")
    lines.append(f"Allocated: {format_currency(engine.allocated_total(state), symbol)}")
    lines.append(f"Remaining: {format_currency(engine.remaining(state), symbol)}")
    lines.append(f"Ready:     {'yes' if session.can_finalize() else 'no'}")
    lines.append(f"Finalized: {'yes' if state.is_finalized else 'no'}")

    summary = session.summary()
    lines.append("")
    if summary.identity is None:
        lines.append("Identity:  none yet")
    else:
        kind = " (compound)" if summary.identity.is_compound else ""
        lines.append(f"Identity:  {summary.identity.emoji} {summary.identity.name}{kind}")
    if summary.traits:
        lines.append("Traits:    " + ", ".join(f"{t.rule.emoji} {t.name}" for t in summary.traits))
    if summary.style is not None:
        lines.append(f"Style:     {summary.style.emoji} {summary.style.name}")

    return "\n".join(lines)


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.DEBUG if args.verbose else getattr(logging, get_settings().log_level.upper(), logging.INFO)
    logging.basicConfig(level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    session = BudgetSession()
    logger.debug(f"Starting from budget {session.state.total_budget:,.0f}")
    apply_edits(session, args)
    print(render_report(session))


if __name__ == "__main__":
    main()
