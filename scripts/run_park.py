"""CLI for running one simulated day at the park from a JSON scenario."""
from __future__ import annotations

import argparse
import json
from dataclasses import asdict
from pathlib import Path
from typing import Dict, List, Optional

from park import Simulation, StatusSnapshot, enable_console_logging
from park.reporting import format_announcement, format_recap, format_status_line
from park.scenario import ScenarioConfig, build_simulation


def load_config(path: Optional[Path], router: Optional[str] = None) -> ScenarioConfig:
    data = json.loads(path.read_text()) if path else {}
    if router:
        data["router"] = {"name": router}
    return ScenarioConfig.model_validate(data)


def attach_console(simulation: Simulation, show_status: bool) -> None:
    def announce(payload: Dict[str, object]) -> None:
        print(format_announcement(payload["time"], payload["message"]))

    for event in ("open", "closing", "closed"):
        simulation.on_event(event, announce)
    if show_status:
        simulation.on_event("status", lambda snapshot: print(format_status_line(snapshot)))


def collect_status(simulation: Simulation) -> List[Dict]:
    snapshots: List[Dict] = []

    def record(snapshot: StatusSnapshot) -> None:
        snapshots.append(asdict(snapshot))

    simulation.on_event("status", record)
    return snapshots


def save_results(output_path: Optional[Path], data: Dict) -> None:
    if not output_path:
        return
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(data, indent=2))


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "config",
        type=Path,
        nargs="?",
        help="Path to a JSON scenario file (defaults to the built-in park)",
    )
    parser.add_argument("--seed", type=int, help="Seed for visitor group sizes")
    parser.add_argument("--router", help="Ride selection policy, e.g. shortest_wait or random")
    parser.add_argument("--output", type=Path, help="Optional file path to write results as JSON")
    parser.add_argument("--log-level", help="Enable console logging at this level")
    parser.add_argument("--quiet", action="store_true", help="Do not print status lines")
    args = parser.parse_args()

    if args.log_level:
        enable_console_logging(level=args.log_level)

    try:
        config = load_config(args.config, args.router)
        simulation = build_simulation(config, random_seed=args.seed)
    except ValueError as exc:
        parser.error(str(exc))

    attach_console(simulation, show_status=not args.quiet)
    snapshots = collect_status(simulation)
    recap = simulation.run()

    for line in format_recap(recap):
        print(line)

    save_results(
        args.output,
        {
            "scenario": config.name,
            "description": config.description,
            "router": simulation.router_name,
            "final_time": simulation.current_time,
            "recap": asdict(recap),
            "status_over_time": snapshots,
        },
    )
    if args.output:
        print(f"Saved results to {args.output}")


if __name__ == "__main__":
    main()
