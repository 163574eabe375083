#!/usr/bin/env python3
"""
Worked solution - answers the textbook questions from the state engine.

Usage:
    python -m submerge.solution \
        --constants constant/reference.json \
        --output artifact/solution.json
"""

import sys
import os
import json
import argparse

from submerge.errors import SubmergeError
from submerge.physics.constants import REFERENCE_CONSTANTS, load_constants
from .solve import solve_problem


def main():
    parser = argparse.ArgumentParser(description='Solve the buoyancy sensor problem')
    parser.add_argument('--constants',
                        help='Path to constants JSON file (default: reference problem)')
    parser.add_argument('--output', required=True, help='Path to output JSON artifact')
    parser.add_argument('--quiet', action='store_true',
                        help='Suppress progress output')

    args = parser.parse_args()

    if args.constants and not os.path.exists(args.constants):
        print(f"ERROR: Constants file not found: {args.constants}", file=sys.stderr)
        sys.exit(1)

    verbose = not args.quiet

    try:
        constants = load_constants(args.constants) if args.constants else REFERENCE_CONSTANTS
        result = solve_problem(constants)
    except SubmergeError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)

    os.makedirs(os.path.dirname(args.output) or '.', exist_ok=True)
    with open(args.output, 'w') as f:
        json.dump(result, f, indent=2)

    if verbose:
        a1, a2, a3, a4 = result['answers']
        print(f"✓ Solution complete")
        print(f"  1. Block mass: {a1['block_mass_kg']:.2f} kg")
        print(f"  2. Max buoyancy: {a2['max_buoyancy_N']:.2f} N")
        print(f"  3. Block density: {a3['block_density_kg_m3']:.1f} kg/m³")
        print(f"  4. Bottom pressure: {a4['pressure_Pa']:.0f} Pa, force: {a4['force_N']:.1f} N")
        print(f"  Output: {args.output}")


if __name__ == "__main__":
    main()
