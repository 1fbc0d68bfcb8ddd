"""
Ascent Kernel - Plot Rendering

Renders simulation output to PNG files:
- one chart per graph-mode channel, thrusting and coasting series
- 3D flight path of a 3D or streamed run
- 3D view of propagated orbits with their apsides
"""

import logging
import os
from typing import List, Sequence

import matplotlib
matplotlib.use("Agg")  # Non-interactive backend for batch processing
import matplotlib.pyplot as plt
import numpy as np

from . import constants as C
from .orbital_elements import compute_orbital_elements, get_positions
from .types import CHANNEL_LABELS, TrajectoryRecord
from .utils import magnitudes

logger = logging.getLogger(__name__)


def configure_plot_style() -> None:
    """Shared matplotlib defaults for every chart."""
    plt.rcParams.update({
        'figure.figsize': (10, 6),
        'savefig.dpi': 150,
        'axes.grid': True,
        'axes.axisbelow': True,
        'grid.alpha': 0.3,
        'font.size': 11,
        'axes.titlesize': 13,
        'axes.labelsize': 12,
        'legend.fontsize': 10,
        'legend.framealpha': 0.95,
        'lines.linewidth': 1.8,
        'xtick.direction': 'in',
        'ytick.direction': 'in',
    })


def plot_channel(record: TrajectoryRecord, channel: str, output_dir: str) -> str:
    """Generate one channel chart.

    Args:
        record: Graph-mode TrajectoryRecord
        channel: Channel name, a key of CHANNEL_LABELS
        output_dir: Directory to save the plot

    Returns:
        Path to saved plot file
    """
    points = getattr(record, channel)
    coast_times = set(record.meta.coast_section)
    thrusting = record.thrusting(channel)
    coasting = [p for p in points if p.time in coast_times]

    fig, ax = plt.subplots()
    if thrusting:
        ax.plot([p.time for p in thrusting], [p.value for p in thrusting],
                'r-', label='thrusting')
    if coasting:
        ax.plot([p.time for p in coasting], [p.value for p in coasting],
                'b-', label='coasting')
    if record.meta.impact is not None and points:
        ax.axvline(record.meta.impact.time, color='k', linestyle='--',
                   label=f'Impact ({record.meta.impact.velocity:.0f} m/s)')

    ax.set_xlabel('Time (s)')
    ax.set_ylabel(CHANNEL_LABELS[channel])
    ax.set_title(CHANNEL_LABELS[channel], fontweight='bold')
    if thrusting or coasting:
        ax.legend(loc='best')

    plt.tight_layout()
    path = os.path.join(output_dir, f'{channel}.png')
    fig.savefig(path, bbox_inches='tight')
    plt.close(fig)

    return path


def plot_trajectory_record(record: TrajectoryRecord, output_dir: str) -> List[str]:
    """Render every channel of a graph-mode record.

    Returns:
        Paths of the written files, in channel order
    """
    os.makedirs(output_dir, exist_ok=True)
    configure_plot_style()
    paths = [plot_channel(record, channel, output_dir) for channel in CHANNEL_LABELS]
    logger.info(f"Wrote {len(paths)} charts to {output_dir}")
    return paths


def plot_flight_path(samples: Sequence, path: str) -> str:
    """3D flight path of a list of FlightSamples, coloured by altitude."""
    positions = np.array([s.position for s in samples]) / 1000
    altitudes = magnitudes(positions) - C.R_EARTH / 1000

    fig = plt.figure(figsize=(10, 8))
    ax = fig.add_subplot(111, projection='3d')
    ax.plot(positions[:, 0], positions[:, 1], positions[:, 2],
            linewidth=1.0, color='gray', alpha=0.5)
    scatter = ax.scatter(positions[:, 0], positions[:, 1], positions[:, 2],
                         c=altitudes, cmap='viridis', s=4)
    fig.colorbar(scatter, ax=ax, label='Altitude (km)')

    ax.set_xlabel('x (km)')
    ax.set_ylabel('y (km)')
    ax.set_zlabel('z (km)')
    ax.set_title('Flight Path', fontweight='bold')

    plt.tight_layout()
    fig.savefig(path, bbox_inches='tight')
    plt.close(fig)
    logger.info(f"Wrote flight path to {path}")
    return path


def plot_orbits(histories: Sequence, path: str, show_apsides: bool = True) -> str:
    """3D render of propagated orbits.

    Args:
        histories: Orbit histories of (position, velocity) pairs
        path: Output file
        show_apsides: Mark apoapsis and periapsis of each orbit
    """
    fig = plt.figure(figsize=(10, 8))
    ax = fig.add_subplot(111, projection='3d')

    for i, history in enumerate(histories):
        positions = np.array(get_positions(history)) / 1000
        ax.plot(positions[:, 0], positions[:, 1], positions[:, 2],
                label=f'Orbit {i + 1}')
        if show_apsides:
            elements = compute_orbital_elements(history)
            apo = elements.apoapsis / 1000
            peri = elements.periapsis / 1000
            ax.scatter([apo[0]], [apo[1]], [apo[2]], c='cyan', marker='^', s=40)
            ax.scatter([peri[0]], [peri[1]], [peri[2]], c='magenta', marker='v', s=40)

    ax.set_xlabel('x (km)')
    ax.set_ylabel('y (km)')
    ax.set_zlabel('z (km)')
    ax.set_title('Orbits', fontweight='bold')
    ax.legend(loc='upper right')

    plt.tight_layout()
    fig.savefig(path, bbox_inches='tight')
    plt.close(fig)
    logger.info(f"Wrote {len(histories)} orbits to {path}")
    return path
