#!/usr/bin/env python3
"""
State engine - derived values and the physical state at one water mass.

Usage:
    python -m submerge.physics \
        --constants constant/reference.json \
        --mass 1.5 \
        --output artifact/state.json
"""

import sys
import os
import json
import argparse

from submerge.errors import SubmergeError
from .constants import REFERENCE_CONSTANTS, load_constants
from .derived import compute_derived_values
from .state import compute_state, rod_load


def main():
    parser = argparse.ArgumentParser(
        description='Compute the buoyancy sensor state for a mass of added water',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument('--constants',
                        help='Path to constants JSON file (default: reference problem)')
    parser.add_argument('--mass', type=float, required=True,
                        help='Mass of water added in kg')
    parser.add_argument('--output',
                        help='Path to output JSON file (default: print to stdout)')
    parser.add_argument('--quiet', action='store_true',
                        help='Suppress progress output')

    args = parser.parse_args()

    if args.constants and not os.path.exists(args.constants):
        print(f"ERROR: Constants file not found: {args.constants}", file=sys.stderr)
        sys.exit(1)

    verbose = not args.quiet and args.output is not None

    try:
        constants = load_constants(args.constants) if args.constants else REFERENCE_CONSTANTS
        derived = compute_derived_values(constants)
        state = compute_state(args.mass, constants, derived)
    except SubmergeError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)

    result = {
        'validator': 'state',
        'constants': constants.to_dict(),
        'derived': derived.to_dict(),
        'state': state.to_dict(),
        'rod_load': rod_load(state, constants),
    }

    if args.output is None:
        json.dump(result, sys.stdout, indent=2)
        print()
        return

    os.makedirs(os.path.dirname(args.output) or '.', exist_ok=True)
    with open(args.output, 'w') as f:
        json.dump(result, f, indent=2)

    if verbose:
        print(f"✓ State computed at m = {state.water_mass:.2f} kg ({state.phase.value})")
        print(f"  Water height: {state.water_height:.4f} m")
        print(f"  Submerged height: {state.block_submerged_height:.4f} m")
        print(f"  Buoyancy: {state.buoyancy:.2f} N")
        print(f"  Sensor force: {state.sensor_force:.2f} N ({result['rod_load']})")
        print(f"  Output: {args.output}")


if __name__ == "__main__":
    main()
