#!/usr/bin/env python3
"""
Worked answers to the textbook problem, read off the state engine.

1. Mass of the block: G = F1 before the water touches it, m = G / g.
2. Maximum buoyancy: once submerged the rod is compressed, F_max = G + F2.
3. Density of the block: V = F_max / (rho g), rho_block = m / V.
4. Pressure and force on the container bottom when the water first
   touches the block: p = rho g h, F = p S.
"""

from submerge.physics.constants import PhysicalConstants
from submerge.physics.derived import compute_derived_values
from submerge.physics.state import compute_state, rod_load


def _answer(question: int, title: str, values: dict) -> dict:
    return {'question': question, 'title': title, **values}


def solve_problem(constants: PhysicalConstants) -> dict:
    """
    Solve the four textbook questions for a set of constants.

    Args:
        constants: Physical constants

    Returns:
        Dictionary with the answers and the state at each key point
    """
    derived = compute_derived_values(constants)
    kp = derived.key_points

    # Depth when the surface reaches the block bottom
    touch_state = compute_state(kp.touch_kg, constants, derived)
    depth_m = touch_state.water_height
    pressure_Pa = constants.water_density * constants.gravity * depth_m
    bottom_force_N = pressure_Pa * constants.container_area

    answers = [
        _answer(1, 'Mass of the block', {
            'block_weight_N': constants.block_weight,
            'block_mass_kg': derived.block_mass,
        }),
        _answer(2, 'Maximum buoyancy', {
            'final_sensor_force_N': constants.max_sensor_force,
            'max_buoyancy_N': derived.max_buoyancy,
        }),
        _answer(3, 'Density of the block', {
            'block_volume_m3': derived.block_volume,
            'block_density_kg_m3': derived.block_density,
        }),
        _answer(4, 'Container bottom at first contact', {
            'water_depth_m': depth_m,
            'pressure_Pa': pressure_Pa,
            'force_N': bottom_force_N,
        }),
    ]

    key_states = {}
    for name, mass in (('touch', kp.touch_kg), ('float', kp.float_kg),
                       ('submerged', kp.submerged_kg)):
        state = compute_state(mass, constants, derived)
        key_states[name] = {
            **state.to_dict(),
            # Float point sits on a rounding edge, so balance is judged loosely
            'rod_load': rod_load(state, constants, tolerance=1e-6),
        }

    return {
        'validator': 'solution',
        'constants': constants.to_dict(),
        'answers': answers,
        'key_points': kp.to_dict(),
        'key_states': key_states,
    }
