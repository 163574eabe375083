import json
import sys

import numpy as np
import pytest

from submerge.curve.__main__ import main as curve_main
from submerge.curve.compute import (
    compute_sensor_curve,
    nearest_key_point,
    playback_masses,
    plot_sensor_curve,
    sample_masses,
)
from submerge.errors import DomainError


class TestSampling:
    def test_default_grid_includes_endpoint(self):
        masses = sample_masses()
        assert len(masses) == 36
        assert masses[0] == 0.0
        assert masses[-1] == 3.5
        assert np.all(np.diff(masses) > 0)

    def test_off_grid_maximum_appended(self):
        masses = sample_masses(1.05, 0.1)
        assert masses[-1] == 1.05
        assert len(masses) == 12

    def test_zero_maximum(self):
        assert list(sample_masses(0.0, 0.1)) == [0.0]

    def test_negative_maximum_rejected(self):
        with pytest.raises(DomainError):
            sample_masses(-1.0, 0.1)

    @pytest.mark.parametrize("step", [0.0, -0.1])
    def test_non_positive_step_rejected(self, step):
        with pytest.raises(ValueError):
            sample_masses(1.0, step)


class TestSensorCurve:
    def test_reference_curve(self, constants):
        result = compute_sensor_curve(constants, verbose=False)
        curve = result['curve']
        assert len(curve) == 36
        assert curve[0]['sensor_force_N'] == 5.0
        assert curve[0]['phase'] == 'below'
        assert curve[-1]['sensor_force_N'] == 7.0
        assert curve[-1]['phase'] == 'above'

    def test_summary(self, constants):
        summary = compute_sensor_curve(constants, verbose=False)['summary']
        assert summary['initial_sensor_force_N'] == 5.0
        assert summary['final_sensor_force_N'] == 7.0
        assert summary['min_sensor_force_N'] == 0.0
        assert summary['min_sensor_force_mass_kg'] == 1.5
        assert summary['max_sensor_force_N'] == 7.0

    def test_key_points_included(self, constants):
        result = compute_sensor_curve(constants, verbose=False)
        assert result['key_points'] == {'touch_kg': 1.0, 'float_kg': 1.5, 'submerged_kg': 2.2}

    def test_json_serialisable(self, constants):
        json.dumps(compute_sensor_curve(constants, step=0.5, verbose=False))

    def test_verbose_output(self, constants, capsys):
        compute_sensor_curve(constants, step=0.5, verbose=True)
        out = capsys.readouterr().out
        assert "Sampling 8 points" in out
        assert "float=1.50 kg" in out


class TestPlayback:
    def test_steps_to_cap(self):
        assert list(playback_masses(0.0, 2.0, 0.5)) == [0.5, 1.0, 1.5, 2.0]

    def test_last_step_capped(self):
        masses = list(playback_masses(0.0, 1.0, 0.4))
        assert masses == pytest.approx([0.4, 0.8, 1.0])
        assert masses[-1] == 1.0

    def test_default_playback_ends_at_maximum(self):
        masses = list(playback_masses())
        assert masses[-1] == 3.5
        assert all(a < b for a, b in zip(masses, masses[1:]))

    def test_start_at_cap_yields_nothing(self):
        assert list(playback_masses(3.5, 3.5, 0.02)) == []

    def test_negative_start_rejected(self):
        with pytest.raises(DomainError):
            list(playback_masses(-0.5, 1.0, 0.1))


class TestNearestKeyPoint:
    @pytest.mark.parametrize("mass, expected", [
        (1.05, 'touch'),
        (1.45, 'float'),
        (2.15, 'submerged'),
        (1.3, None),
        (0.0, None),
    ])
    def test_proximity(self, derived, mass, expected):
        assert nearest_key_point(mass, derived.key_points) == expected

    def test_tolerance_is_strict(self, derived):
        assert nearest_key_point(1.5, derived.key_points, tolerance=0.0) is None


def test_plot_written(constants, tmp_path):
    result = compute_sensor_curve(constants, verbose=False)
    png = tmp_path / "curve.png"
    plot_sensor_curve(result, str(png), current_mass=1.5)
    assert png.exists()
    assert png.stat().st_size > 0


class TestCli:
    def test_writes_json_without_plot(self, tmp_path, monkeypatch):
        out = tmp_path / "artifact" / "curve.json"
        monkeypatch.setattr(sys, 'argv', ['curve', '--output', str(out), '--no-png', '--quiet'])
        curve_main()
        data = json.loads(out.read_text())
        assert data['validator'] == 'curve'
        assert data['summary']['point_count'] == 36
        assert not (tmp_path / "artifact" / "curve.png").exists()

    def test_writes_plot_next_to_json(self, tmp_path, monkeypatch):
        out = tmp_path / "curve.json"
        monkeypatch.setattr(sys, 'argv', ['curve', '--output', str(out), '--step', '0.5', '--quiet'])
        curve_main()
        assert (tmp_path / "curve.png").exists()

    def test_missing_constants_file(self, tmp_path, monkeypatch, capsys):
        monkeypatch.setattr(sys, 'argv', ['curve', '--constants', str(tmp_path / "nope.json"),
                                          '--output', str(tmp_path / "c.json")])
        with pytest.raises(SystemExit) as excinfo:
            curve_main()
        assert excinfo.value.code == 1
        assert "Constants file not found" in capsys.readouterr().err

    def test_invalid_step(self, tmp_path, monkeypatch, capsys):
        monkeypatch.setattr(sys, 'argv', ['curve', '--output', str(tmp_path / "c.json"),
                                          '--step', '0', '--quiet'])
        with pytest.raises(SystemExit):
            curve_main()
        assert "ERROR" in capsys.readouterr().err
