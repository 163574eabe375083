#!/usr/bin/env python3
"""
Sensor curve computation - sensor force versus mass of water added.

Usage:
    python -m submerge.curve \
        --constants constant/reference.json \
        --output artifact/curve.json \
        --output-png artifact/curve.png
"""

import sys
import os
import json
import argparse

from submerge.errors import SubmergeError
from submerge.physics.constants import REFERENCE_CONSTANTS, load_constants
from .compute import (compute_sensor_curve, plot_sensor_curve,
                      DEFAULT_MAX_MASS_KG, DEFAULT_CURVE_STEP_KG)


def main():
    parser = argparse.ArgumentParser(
        description='Compute the sensor force curve over added water mass',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument('--constants',
                        help='Path to constants JSON file (default: reference problem)')
    parser.add_argument('--output', required=True,
                        help='Path to output JSON file')
    parser.add_argument('--output-png',
                        help='Path to output PNG plot (optional, defaults to same name as output with .png)')
    parser.add_argument('--no-png', action='store_true',
                        help='Skip the PNG plot')
    parser.add_argument('--max-mass', type=float, default=DEFAULT_MAX_MASS_KG,
                        help=f'Upper end of the sweep in kg (default: {DEFAULT_MAX_MASS_KG})')
    parser.add_argument('--step', type=float, default=DEFAULT_CURVE_STEP_KG,
                        help=f'Sample spacing in kg (default: {DEFAULT_CURVE_STEP_KG})')
    parser.add_argument('--current-mass', type=float,
                        help='Water mass to highlight on the plot in kg')
    parser.add_argument('--quiet', action='store_true',
                        help='Suppress progress output')

    args = parser.parse_args()

    if args.constants and not os.path.exists(args.constants):
        print(f"ERROR: Constants file not found: {args.constants}", file=sys.stderr)
        sys.exit(1)

    verbose = not args.quiet

    if verbose:
        print(f"Computing sensor curve: {args.constants or 'reference constants'}")

    try:
        constants = load_constants(args.constants) if args.constants else REFERENCE_CONSTANTS
        result = compute_sensor_curve(constants, max_mass=args.max_mass,
                                      step=args.step, verbose=verbose)
    except (SubmergeError, ValueError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)

    os.makedirs(os.path.dirname(args.output) or '.', exist_ok=True)
    with open(args.output, 'w') as f:
        json.dump(result, f, indent=2)

    if verbose:
        summary = result['summary']
        print(f"✓ Sensor curve data saved to {args.output}")
        print(f"  Points: {summary['point_count']}")
        print(f"  Start: {summary['initial_sensor_force_N']:.2f} N")
        print(f"  Minimum: {summary['min_sensor_force_N']:.2f} N "
              f"at {summary['min_sensor_force_mass_kg']:.2f} kg")
        print(f"  Final: {summary['final_sensor_force_N']:.2f} N")

    if args.no_png:
        return

    png_path = args.output_png
    if not png_path:
        png_path = os.path.splitext(args.output)[0] + '.png'

    plot_sensor_curve(result, png_path, current_mass=args.current_mass)


if __name__ == "__main__":
    main()
