import json
import sys

import pytest

from submerge.physics.__main__ import main as physics_main
from submerge.solution.__main__ import main as solution_main
from submerge.solution.solve import solve_problem


@pytest.fixture
def solution(constants):
    return solve_problem(constants)


def _answer(solution, question):
    return next(a for a in solution['answers'] if a['question'] == question)


def test_block_mass(solution):
    assert _answer(solution, 1)['block_mass_kg'] == pytest.approx(0.5)


def test_max_buoyancy(solution):
    assert _answer(solution, 2)['max_buoyancy_N'] == pytest.approx(12.0)


def test_block_density(solution):
    a = _answer(solution, 3)
    assert a['block_volume_m3'] == pytest.approx(1.2e-3)
    assert a['block_density_kg_m3'] == pytest.approx(416.667, rel=1e-4)


def test_bottom_pressure_at_touch(solution):
    a = _answer(solution, 4)
    assert a['water_depth_m'] == pytest.approx(0.1)
    assert a['pressure_Pa'] == pytest.approx(1000.0)
    assert a['force_N'] == pytest.approx(10.0)


def test_rod_load_at_key_points(solution):
    states = solution['key_states']
    assert states['touch']['rod_load'] == 'tension'
    assert states['float']['rod_load'] == 'none'
    assert states['submerged']['rod_load'] == 'compression'
    assert states['submerged']['sensor_force_N'] == pytest.approx(7.0)
    assert states['submerged']['phase'] == 'rising'
    assert states['touch']['phase'] == 'below'


def test_solution_cli(tmp_path, monkeypatch, capsys):
    out = tmp_path / "solution.json"
    monkeypatch.setattr(sys, 'argv', ['solution', '--output', str(out)])
    solution_main()
    data = json.loads(out.read_text())
    assert data['validator'] == 'solution'
    assert len(data['answers']) == 4
    assert "Block mass: 0.50 kg" in capsys.readouterr().out


def test_solution_cli_rejects_bad_constants(tmp_path, monkeypatch, capsys):
    constants_path = tmp_path / "bad.json"
    constants_path.write_text(json.dumps({'gravity_N_kg': 0}))
    monkeypatch.setattr(sys, 'argv', ['solution', '--constants', str(constants_path),
                                      '--output', str(tmp_path / "s.json")])
    with pytest.raises(SystemExit) as excinfo:
        solution_main()
    assert excinfo.value.code == 1
    assert "gravity" in capsys.readouterr().err


class TestPhysicsCli:
    def test_state_to_stdout(self, monkeypatch, capsys):
        monkeypatch.setattr(sys, 'argv', ['physics', '--mass', '3.5'])
        physics_main()
        data = json.loads(capsys.readouterr().out)
        assert data['state']['phase'] == 'above'
        assert data['state']['sensor_force_N'] == pytest.approx(7.0)
        assert data['rod_load'] == 'compression'

    def test_state_to_file(self, tmp_path, monkeypatch):
        out = tmp_path / "state.json"
        constants_path = tmp_path / "constants.json"
        constants_path.write_text(json.dumps({'max_sensor_force_N': 3.0}))
        monkeypatch.setattr(sys, 'argv', ['physics', '--constants', str(constants_path),
                                          '--mass', '0.5', '--output', str(out), '--quiet'])
        physics_main()
        data = json.loads(out.read_text())
        assert data['constants']['max_sensor_force_N'] == 3.0
        assert data['derived']['max_buoyancy_N'] == pytest.approx(8.0)
        assert data['state']['sensor_force_N'] == pytest.approx(5.0)

    def test_negative_mass(self, monkeypatch, capsys):
        monkeypatch.setattr(sys, 'argv', ['physics', '--mass', '-1'])
        with pytest.raises(SystemExit) as excinfo:
            physics_main()
        assert excinfo.value.code == 1
        assert "Water mass must be >= 0" in capsys.readouterr().err
