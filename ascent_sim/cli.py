"""
Ascent Kernel - CLI

The single entry point for running the graph-mode, streaming and orbit
demonstrations from a terminal.
"""

import argparse
import dataclasses
import logging
import os
import sys

from .config import PRESETS
from .mass import get_propellant_fraction
from .orbit import create_demo_orbits
from .orbital_elements import ApsisTracker, compute_orbital_elements
from .streaming import run_realtime
from .trajectory import calculate_trajectory

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def parse_args(argv=None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Rocket ascent kernel",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument(
        "--preset", "-p",
        choices=sorted(PRESETS),
        default="orbit",
        help="Vehicle and flight plan preset"
    )
    parser.add_argument(
        "--end",
        type=float,
        default=None,
        help="Override the preset end time (s)"
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Suppress verbose output"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    graph = subparsers.add_parser("graph", help="Run graph mode and chart the channels")
    graph.add_argument(
        "--output-dir", "-o",
        type=str,
        default="plots",
        help="Directory to save output plots"
    )
    graph.add_argument(
        "--no-plots",
        action="store_true",
        help="Skip plot generation"
    )

    subparsers.add_parser("stream", help="Stream the 3D ascent in real time")

    orbit = subparsers.add_parser("orbit", help="Propagate the demo circular orbits")
    orbit.add_argument(
        "--output-dir", "-o",
        type=str,
        default=None,
        help="Directory to save the orbit plot"
    )

    return parser.parse_args(argv)


def build_config(args):
    """Preset selected on the command line, with overrides applied."""
    config = PRESETS[args.preset]()
    if args.end is not None:
        config = dataclasses.replace(config, end=args.end)
    return config


def _resolve_dir(output_dir: str) -> str:
    if os.path.isabs(output_dir):
        return output_dir
    return os.path.join(os.getcwd(), output_dir)


def run_graph(args) -> None:
    config = build_config(args)
    record = calculate_trajectory(config)

    print("\n" + "="*60)
    print("GRAPH MODE SUMMARY")
    print("="*60)
    print(f"Preset: {args.preset}")
    print(f"Samples: {len(record)}")
    if len(record) > 0:
        print(f"Last sample: t={record.times()[-1]:.0f} s, "
              f"alt={record.altitude[-1].value/1000:.2f} km")
    print(f"Thrusting samples: {len(record.meta.thrust_section)}")
    print(f"Coasting samples: {len(record.meta.coast_section)}")
    if record.meta.impact is not None:
        print(f"Impact: t={record.meta.impact.time:.0f} s, "
              f"v={record.meta.impact.velocity:.1f} m/s")
    print("="*60 + "\n")

    if not args.no_plots and len(record) > 0:
        from .plotting import plot_trajectory_record

        plot_dir = _resolve_dir(args.output_dir)
        print(f">> Generating Plots in: {plot_dir}")
        plot_trajectory_record(record, plot_dir)


def run_stream(args) -> None:
    config = build_config(args)
    tracker = ApsisTracker()

    def on_progress(sample):
        print(f"t={sample.time:7.0f} s | alt={sample.altitude/1000:9.2f} km | "
              f"v={sample.speed:8.1f} m/s | "
              f"propellant={get_propellant_fraction(sample.mass, config) * 100:6.2f}%")
        event = tracker.update(sample.position)
        if event is not None:
            print(f"   >> {event.kind.value}: {event.altitude/1000:.2f} km")

    steps = run_realtime(config, on_progress)
    print(f"\nStreamed {steps} steps")


def run_orbit(args) -> None:
    histories = create_demo_orbits()

    print("\n" + "="*60)
    print("DEMO ORBITS")
    print("="*60)
    for i, history in enumerate(histories):
        print(f"Orbit {i + 1}: {compute_orbital_elements(history)}")
    print("="*60 + "\n")

    if args.output_dir is not None:
        from .plotting import plot_orbits

        plot_dir = _resolve_dir(args.output_dir)
        os.makedirs(plot_dir, exist_ok=True)
        plot_orbits(histories, os.path.join(plot_dir, 'orbits.png'))


COMMANDS = {
    "graph": run_graph,
    "stream": run_stream,
    "orbit": run_orbit,
}


def main(argv=None):
    """Main execution flow."""
    args = parse_args(argv)

    # Configure verbosity
    if args.quiet:
        logging.getLogger("ascent_sim").setLevel(logging.WARNING)

    try:
        COMMANDS[args.command](args)
    except Exception as e:
        logger.error(f"Simulation failed: {e}", exc_info=True)
        print(f"\n[ERROR] Simulation failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
