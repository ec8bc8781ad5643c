"""Command-line interface for generating and inspecting scouting schedules."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Sequence

from scouting_scheduler.config import SchedulerConfig, load_config
from scouting_scheduler.domain.db import get_session, init_database, reset_database
from scouting_scheduler.domain.models import ValidationError
from scouting_scheduler.domain.repositories import ScheduleRepository
from scouting_scheduler.engine.generator import generate_from_config
from scouting_scheduler.io.export import export_full_schedule, write_exports
from scouting_scheduler.io.import_csv import import_personnel_csv
from scouting_scheduler.io.import_json import load_schedule_file
from scouting_scheduler.io.summary import summarize_schedule
from scouting_scheduler.log import configure_logging
from scouting_scheduler.queries import get_next_scouter_for_position, get_scouter_assignments, is_last_match_of_turn
from scouting_scheduler.services.fairness import suggested_max_matches
from scouting_scheduler.services.positions import positions_per_match
from scouting_scheduler.services.turns import build_shift_config
from scouting_scheduler.validator import CAPACITY_ERROR, validate_schedule_config


def _print_issues(issues: Sequence[ValidationError]) -> None:
    for issue in issues:
        tag = "ERROR" if issue.is_error else "WARN"
        print(f"[{tag}] {issue}")


def _print_cap_hint(cfg: SchedulerConfig, issues: Sequence[ValidationError]) -> None:
    if not any(issue.message == CAPACITY_ERROR for issue in issues):
        return
    suggested = suggested_max_matches(
        cfg.event.total_matches, positions_per_match(cfg.event), len(cfg.personnel.scouters)
    )
    print(f"[INFO] Smallest feasible max matches per scouter: {suggested}")


def _load(args: argparse.Namespace):
    cfg = load_config(args.config)
    if args.personnel:
        cfg.personnel = import_personnel_csv(args.personnel)
    configure_logging(args.log_level or cfg.log_level)
    return cfg


def _cmd_validate(args: argparse.Namespace) -> None:
    """Check a configuration without generating."""
    cfg = _load(args)
    shifts = build_shift_config(cfg.event.total_matches, cfg.break_points)
    errors = validate_schedule_config(cfg.event, cfg.personnel, shifts, cfg.constraints)
    if errors:
        _print_issues(errors)
        _print_cap_hint(cfg, errors)
        raise SystemExit(1)
    print(f"[OK] Configuration is feasible: {len(shifts.turns)} turns over {cfg.event.total_matches} matches")


def _cmd_generate(args: argparse.Namespace) -> None:
    """Generate a schedule, export it and optionally store it."""
    cfg = _load(args)
    result = generate_from_config(cfg)
    _print_issues(result.errors)
    _print_issues(result.warnings)
    if not result.success:
        _print_cap_hint(cfg, result.errors)
        print("[ERROR] Schedule not generated")
        raise SystemExit(1)

    schedule = result.schedule
    written = write_exports(schedule, args.out_dir)
    for path in written.values():
        print(f"[OK] Wrote {path}")

    if args.db:
        session = get_session(args.db)
        try:
            record = ScheduleRepository.save(session, schedule, result.warnings)
            print(f"[OK] Stored schedule #{record.id} in {args.db}")
        finally:
            session.close()

    print(summarize_schedule(schedule))


def _cmd_assignments(args: argparse.Namespace) -> None:
    """List one scouter's matches, turn by turn."""
    schedule = load_schedule_file(args.schedule)
    turns = get_scouter_assignments(schedule, args.scouter)
    if not turns:
        print(f"No assignments for {args.scouter}")
        return

    for turn in turns:
        print(f"Turn {turn.turn} (matches {turn.start_match}-{turn.end_match})")
        for entry in turn.assignments:
            line = f"  Match {entry.match_number} - {entry.position} (lead: {entry.lead_scouter})"
            boundary = is_last_match_of_turn(schedule, entry.match_number, args.scouter)
            if boundary.is_last:
                successor = get_next_scouter_for_position(schedule, entry.match_number, entry.position)
                line += f"  <- last of turn {boundary.turn_number}"
                if successor:
                    line += f", hand over to {successor}"
            print(line)


def _cmd_summarize(args: argparse.Namespace) -> None:
    print(summarize_schedule(load_schedule_file(args.schedule)))


def _cmd_init_db(args: argparse.Namespace) -> None:
    if args.reset:
        reset_database(args.db)
        print(f"[OK] Database reset, stored schedules removed: {args.db}")
        return
    init_database(args.db)
    print(f"[OK] Database initialized: {args.db}")


def _cmd_history(args: argparse.Namespace) -> None:
    session = get_session(args.db)
    try:
        records = ScheduleRepository.get_all(session)
        if not records:
            print("No stored schedules.")
        for record in records:
            print(
                f"#{record.id}  {record.created_at:%Y-%m-%d %H:%M}  {record.event_label}  "
                f"{record.total_matches} matches  {record.warning_count} warning(s)"
            )
    finally:
        session.close()


def _cmd_fetch(args: argparse.Namespace) -> None:
    session = get_session(args.db)
    try:
        record = ScheduleRepository.get_by_id(session, args.id)
        if record is None:
            print(f"[ERROR] No stored schedule #{args.id}")
            raise SystemExit(1)
        schedule = ScheduleRepository.load(record)
    finally:
        session.close()
    Path(args.out).write_text(export_full_schedule(schedule), encoding="utf-8")
    print(f"[OK] Wrote {args.out}")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="scouting-scheduler", description="Scouting crew schedule generator")
    parser.add_argument("--db", default=None, help="Database URL for stored schedules")
    parser.add_argument("--log-level", default=None, help="Logging level (default: from config)")
    sub = parser.add_subparsers(dest="command", required=True)

    v = sub.add_parser("validate", help="Check a configuration for blocking errors")
    v.add_argument("--config", help="Path to config YAML/JSON (default: FRC preset)")
    v.add_argument("--personnel", help="Optional roster CSV (role,name) replacing config personnel")
    v.set_defaults(func=_cmd_validate)

    g = sub.add_parser("generate", help="Generate and export a schedule")
    g.add_argument("--config", help="Path to config YAML/JSON (default: FRC preset)")
    g.add_argument("--personnel", help="Optional roster CSV (role,name) replacing config personnel")
    g.add_argument("--out-dir", default=".", help="Directory for exported files")
    g.set_defaults(func=_cmd_generate)

    a = sub.add_parser("assignments", help="Show one scouter's assignments")
    a.add_argument("--schedule", required=True, help="Path to full_schedule.json")
    a.add_argument("--scouter", required=True)
    a.set_defaults(func=_cmd_assignments)

    s = sub.add_parser("summarize", help="Summarize a schedule JSON")
    s.add_argument("--schedule", required=True)
    s.set_defaults(func=_cmd_summarize)

    i = sub.add_parser("init-db", help="Create the schedule tables")
    i.add_argument("--reset", action="store_true", help="Drop and recreate the tables (deletes stored schedules)")
    i.set_defaults(func=_cmd_init_db)

    h = sub.add_parser("history", help="List stored schedules")
    h.set_defaults(func=_cmd_history)

    f = sub.add_parser("fetch", help="Export a stored schedule to JSON")
    f.add_argument("--id", type=int, required=True)
    f.add_argument("--out", required=True)
    f.set_defaults(func=_cmd_fetch)

    args = parser.parse_args(argv)
    if args.command in {"init-db", "history", "fetch"} and not args.db:
        args.db = load_config(None).db_url
    if not hasattr(args, "config"):
        configure_logging(args.log_level or "INFO")
    args.func(args)


if __name__ == "__main__":
    main()
