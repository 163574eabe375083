#!/usr/bin/env python3
"""
Sensor curve computation - sensor force versus mass of water added.

Sweeps the state engine over a grid of water masses to produce the F-m
curve of the problem, with the three key points marked:
- A: water touches the block bottom (sensor still reads the weight)
- B: buoyancy equals weight (sensor reads zero)
- C: block fully submerged (sensor reading stabilises)

Also provides the sample sequence an external playback timer feeds to the
engine. Scheduling itself is left to the caller.
"""

import numpy as np

from submerge.errors import DomainError
from submerge.physics.constants import PhysicalConstants
from submerge.physics.derived import KeyPoints, compute_derived_values
from submerge.physics.state import compute_state

# Sampling defaults (kg)
DEFAULT_MAX_MASS_KG = 3.5
DEFAULT_CURVE_STEP_KG = 0.1
DEFAULT_PLAYBACK_STEP_KG = 0.02
KEY_POINT_TOLERANCE_KG = 0.1

KEY_POINT_LABELS = {
    'touch': 'A: touch',
    'float': 'B: float',
    'submerged': 'C: submerged',
}


def _check_sampling(max_mass: float, step: float) -> None:
    if not max_mass >= 0:
        raise DomainError(f"Maximum water mass must be >= 0 kg (got {max_mass})")
    if not step > 0:
        raise ValueError(f"Step must be > 0 kg (got {step})")


def sample_masses(max_mass: float = DEFAULT_MAX_MASS_KG,
                  step: float = DEFAULT_CURVE_STEP_KG) -> np.ndarray:
    """
    Evenly spaced water masses from 0 to max_mass inclusive.

    Grid points are multiples of *step*; max_mass is appended when it is
    not itself on the grid.
    """
    _check_sampling(max_mass, step)

    n = int(np.floor(max_mass / step + 1e-9))
    masses = np.arange(n + 1) * step
    if max_mass - masses[-1] > 1e-9:
        masses = np.append(masses, max_mass)
    else:
        masses[-1] = min(masses[-1], max_mass)
    return masses


def compute_sensor_curve(constants: PhysicalConstants,
                         max_mass: float = DEFAULT_MAX_MASS_KG,
                         step: float = DEFAULT_CURVE_STEP_KG,
                         verbose: bool = True) -> dict:
    """
    Compute the sensor force curve over [0, max_mass].

    Args:
        constants: Physical constants
        max_mass: Upper end of the sweep (kg)
        step: Grid spacing (kg)
        verbose: Print progress

    Returns:
        Dictionary with constants, derived values, key points, the sampled
        curve (rounded for charting) and a summary
    """
    derived = compute_derived_values(constants)
    masses = sample_masses(max_mass, step)

    if verbose:
        print(f"  Sampling {len(masses)} points from 0 to {max_mass} kg")

    curve = []
    forces = np.empty(len(masses))
    for i, m in enumerate(masses):
        state = compute_state(float(m), constants, derived)
        forces[i] = state.sensor_force
        curve.append({
            'water_mass_kg': round(state.water_mass, 2),
            'sensor_force_N': round(state.sensor_force, 2),
            'buoyancy_N': round(state.buoyancy, 2),
            'water_height_m': round(state.water_height, 4),
            'phase': state.phase.value,
        })

    i_min = int(np.argmin(forces))
    summary = {
        'point_count': len(curve),
        'max_mass_kg': max_mass,
        'step_kg': step,
        'initial_sensor_force_N': round(float(forces[0]), 2),
        'final_sensor_force_N': round(float(forces[-1]), 2),
        'min_sensor_force_N': round(float(forces[i_min]), 2),
        'min_sensor_force_mass_kg': round(float(masses[i_min]), 2),
        'max_sensor_force_N': round(float(forces.max()), 2),
    }

    if verbose:
        kp = derived.key_points
        print(f"  Key points: touch={kp.touch_kg:.2f} kg, float={kp.float_kg:.2f} kg, "
              f"submerged={kp.submerged_kg:.2f} kg")

    return {
        'validator': 'curve',
        'constants': constants.to_dict(),
        'derived': derived.to_dict(),
        'key_points': derived.key_points.to_dict(),
        'curve': curve,
        'summary': summary,
    }


def playback_masses(start: float = 0.0,
                    max_mass: float = DEFAULT_MAX_MASS_KG,
                    step: float = DEFAULT_PLAYBACK_STEP_KG):
    """
    Yield the masses a playback timer feeds to the engine, one per tick.

    Each tick advances by *step*, capped at max_mass; playback ends once the
    cap is reached. Starting at or beyond the cap yields nothing.
    """
    _check_sampling(max_mass, step)
    if not start >= 0:
        raise DomainError(f"Start mass must be >= 0 kg (got {start})")

    mass = start
    while mass < max_mass:
        mass = min(mass + step, max_mass)
        yield mass


def nearest_key_point(mass: float, key_points: KeyPoints,
                      tolerance: float = KEY_POINT_TOLERANCE_KG):
    """
    Name of the key point closest to *mass* if it lies within tolerance.

    Returns:
        'touch', 'float', 'submerged' or None
    """
    candidates = {
        'touch': key_points.touch_kg,
        'float': key_points.float_kg,
        'submerged': key_points.submerged_kg,
    }
    name, value = min(candidates.items(), key=lambda item: abs(mass - item[1]))
    if abs(mass - value) < tolerance:
        return name
    return None


def plot_sensor_curve(curve_result: dict, output_path: str, current_mass: float = None):
    """
    Generate a PNG plot of the sensor curve.

    Args:
        curve_result: Result from compute_sensor_curve
        output_path: Path for output PNG file
        current_mass: Optional water mass to highlight on the curve (kg)
    """
    import matplotlib
    matplotlib.use('Agg')  # Non-interactive backend
    import matplotlib.pyplot as plt

    curve = curve_result['curve']
    masses = [p['water_mass_kg'] for p in curve]
    forces = [p['sensor_force_N'] for p in curve]

    fig, ax = plt.subplots(figsize=(10, 6))

    ax.plot(masses, forces, '-', color='#334155', linewidth=2, label='Sensor force F')
    ax.set_xlabel('Water added m (kg)', fontsize=12)
    ax.set_ylabel('Sensor reading F (N)', fontsize=12)
    ax.set_xlim(0, curve_result['summary']['max_mass_kg'])
    ax.set_ylim(0, max(forces) + 1)
    ax.grid(True, alpha=0.3, linestyle='--')

    # Key points, placed on the unrounded engine values
    constants = curve_result['constants']
    derived = curve_result['derived']
    key_points = curve_result['key_points']
    weight = constants['block_weight_N']
    final_force = abs(derived['max_buoyancy_N'] - weight)
    markers = [
        ('touch', key_points['touch_kg'], weight, '#3b82f6'),
        ('float', key_points['float_kg'], 0.0, '#f59e0b'),
        ('submerged', key_points['submerged_kg'], final_force, '#ef4444'),
    ]
    for name, m, f, color in markers:
        ax.plot(m, f, 'o', color=color, markersize=8, markeredgecolor='white')
        ax.annotate(KEY_POINT_LABELS[name], xy=(m, f), xytext=(0, 10),
                    textcoords='offset points', ha='center', fontsize=10, color=color)

    if current_mass is not None:
        current = np.interp(current_mass, masses, forces)
        ax.plot(current_mass, current, 'o', color='#ef4444', markersize=10,
                markeredgecolor='white', label=f'm = {current_mass:.2f} kg')

    summary = curve_result['summary']
    stats_text = (
        f"Start: {summary['initial_sensor_force_N']:.1f} N\n"
        f"Minimum: {summary['min_sensor_force_N']:.1f} N at {summary['min_sensor_force_mass_kg']:.2f} kg\n"
        f"Final: {summary['final_sensor_force_N']:.1f} N"
    )
    ax.text(0.02, 0.98, stats_text, transform=ax.transAxes, fontsize=10,
            verticalalignment='top', bbox=dict(boxstyle='round', facecolor='white', alpha=0.8))

    plt.title('Sensor reading F versus water added m', fontsize=14)
    ax.legend(loc='upper right')

    plt.tight_layout()
    plt.savefig(output_path, dpi=150, bbox_inches='tight')
    plt.close(fig)

    print(f"✓ Sensor curve plot saved to {output_path}")
