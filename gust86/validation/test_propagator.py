"""
Tests for Batch Ephemeris Evaluation
====================================

Tests:
------
TestBuildTimeGrid
  - test_known_solution_uniform_grid     : exact multiple of the step
  - test_final_time_always_included      : final time appended when the span is not a multiple
  - test_single_sample                   : time_o = time_f gives one sample
  - test_final_time_snapped              : no near-duplicate final sample
  - test_error_invalid_inputs            : ValueError on a non-positive step or inverted span

TestPropagateEphemeris
  - test_known_solution_matches_state    : columns equal the orbit's state() output
  - test_skipped_samples_are_nan         : non-converged samples are skipped and left NaN
  - test_all_samples_skipped             : success is False when nothing was evaluated
  - test_osculating_elements             : osculating sma matches the reference radius
  - test_build_trajectory_theories       : theory names select the trajectory class

TestRunPropagations
  - test_results_per_satellite           : one result per satellite, keyed by name

TestCompareEphemerides
  - test_known_solution_identical        : zero error for identical ephemerides
  - test_known_solution_constant_offset  : RMS and max equal a constant offset
  - test_skipped_samples_ignored         : NaN samples do not enter the statistics
  - test_failed_inputs                   : success is False for failed inputs or mismatched grids

TestWriter
  - test_csv_columns                     : CSV columns and rows of a written ephemeris

Usage:
------
  python -m pytest gust86/validation/test_propagator.py -v
"""
import pytest
import numpy  as np
import pandas as pd

from datetime import datetime

from gust86.model.errors                   import NumericalNonConvergence
from gust86.model.satellites               import Satellite
from gust86.model.time_converter           import utc_to_tdb_seconds
from gust86.propagation.trajectory         import StateVector
from gust86.propagation.gust86_orbit       import Gust86Orbit
from gust86.propagation.mean_element_orbit import MeanElementOrbit
from gust86.propagation.propagator         import build_time_grid, build_trajectory, propagate_ephemeris, run_propagations
from gust86.propagation.comparison         import compare_ephemerides
from gust86.utility.writer                 import write_ephemeris_csv, EPHEMERIS_COLUMNS


class FlakyTrajectory:
  """
  Trajectory whose Kepler iteration fails at chosen times.
  """
  frame           = 'J2000'
  period          = 1.0
  bounding_radius = 1.0

  def __init__(self, failing_times):
    self.failing_times = set(failing_times)

  def state(self, time_s):
    if time_s in self.failing_times:
      raise NumericalNonConvergence("not converged", iterations=50)
    return StateVector([time_s, 0.0, 0.0], [0.0, 1.0, 0.0])


class TestBuildTimeGrid:

  def test_known_solution_uniform_grid(self):
    time_array = build_time_grid(0.0, 3600.0, 600.0)
    assert np.allclose(time_array, [0.0, 600.0, 1200.0, 1800.0, 2400.0, 3000.0, 3600.0])

  def test_final_time_always_included(self):
    time_array = build_time_grid(-100.0, 150.0, 100.0)
    assert np.allclose(time_array, [-100.0, 0.0, 100.0, 150.0])

  def test_single_sample(self):
    assert np.array_equal(build_time_grid(5.0, 5.0, 60.0), [5.0])

  def test_final_time_snapped(self):
    # One UTC day is 86400.000027 s of TDB
    time_o     = utc_to_tdb_seconds(datetime(1986, 1, 24))
    time_f     = utc_to_tdb_seconds(datetime(1986, 1, 25))
    time_array = build_time_grid(time_o, time_f, 3600.0)

    assert len(time_array) == 25
    assert time_array[-1] == time_f
    assert np.min(np.diff(time_array)) > 3599.0

    time_array = build_time_grid(0.0, 7200.0 + 1e-5, 3600.0)
    assert np.array_equal(time_array, [0.0, 3600.0, 7200.0 + 1e-5])

    time_array = build_time_grid(0.0, 7201.0, 3600.0)
    assert np.array_equal(time_array, [0.0, 3600.0, 7200.0, 7201.0])

  @pytest.mark.parametrize("time_o, time_f, step", [(0.0, 10.0, 0.0), (0.0, 10.0, -1.0), (10.0, 0.0, 1.0)])
  def test_error_invalid_inputs(self, time_o, time_f, step):
    with pytest.raises(ValueError):
      build_time_grid(time_o, time_f, step)


class TestPropagateEphemeris:

  def test_known_solution_matches_state(self):
    orbit      = Gust86Orbit('miranda')
    time_array = build_time_grid(0.0, 86400.0, 3600.0)

    result = propagate_ephemeris(orbit, time_array)

    assert result['success']
    assert result['frame'] == 'J2000'
    assert result['skipped'] == []
    assert result['state'].shape == (6, 25)
    for idx in [0, 7, 24]:
      assert np.array_equal(result['state'][:, idx], orbit.state(time_array[idx]).as_array())

  def test_skipped_samples_are_nan(self):
    time_array = np.array([0.0, 1.0, 2.0, 3.0])
    result     = propagate_ephemeris(FlakyTrajectory([1.0, 3.0]), time_array)

    assert result['success']
    assert result['skipped'] == [1, 3]
    assert np.all(np.isnan(result['state'][:, [1, 3]]))
    assert np.array_equal(result['state'][0, [0, 2]], [0.0, 2.0])
    assert '2 skipped' in result['message']

    # Without a gravitational parameter no elements are computed
    assert np.all(np.isnan(result['coe']['sma']))

  def test_all_samples_skipped(self):
    result = propagate_ephemeris(FlakyTrajectory([0.0]), [0.0])

    assert not result['success']
    assert result['skipped'] == [0]

  def test_osculating_elements(self, supported_satellites):
    result = propagate_ephemeris(Gust86Orbit('oberon'), build_time_grid(0.0, 864000.0, 86400.0))

    mean_radius = supported_satellites['OBERON']['mean_radius__km']
    assert np.allclose(result['coe']['sma'], mean_radius, rtol=0.01)
    assert np.all(result['coe']['ecc'] < 0.01)

  def test_build_trajectory_theories(self):
    assert type(build_trajectory('titania'))                 is Gust86Orbit
    assert type(build_trajectory('titania', theory='MEAN'))  is MeanElementOrbit
    assert build_trajectory(3, frame='eclipj2000').frame     == 'ECLIPJ2000'

    with pytest.raises(ValueError):
      build_trajectory('titania', theory='numerical')


class TestRunPropagations:

  def test_results_per_satellite(self):
    time_array = build_time_grid(0.0, 7200.0, 3600.0)
    results    = run_propagations([Satellite.ARIEL, 'oberon'], time_array, theory='mean')

    assert list(results.keys()) == ['Ariel', 'Oberon']
    for name, result in results.items():
      assert result['success']
      assert result['name'] == name
      assert result['state'].shape == (6, 3)


class TestCompareEphemerides:

  @staticmethod
  def make_result(state, time_array=None):
    state = np.asarray(state, dtype=float)
    if time_array is None:
      time_array = np.arange(state.shape[1], dtype=float)
    return {'success': True, 'time': time_array, 'state': state}

  def test_known_solution_identical(self):
    result     = propagate_ephemeris(Gust86Orbit('umbriel'), build_time_grid(0.0, 3600.0, 600.0))
    comparison = compare_ephemerides(result, result)

    assert comparison['success']
    assert comparison['pos_error_max'] == 0.0
    assert comparison['vel_error_max'] == 0.0

  def test_known_solution_constant_offset(self):
    state_ref  = np.zeros((6, 4))
    state_test = state_ref.copy()
    state_test[0, :] += 3.0
    state_test[5, :] += 0.5

    comparison = compare_ephemerides(self.make_result(state_ref), self.make_result(state_test))

    assert np.isclose(comparison['pos_error_rms'], 3.0)
    assert np.isclose(comparison['pos_error_max'], 3.0)
    assert np.isclose(comparison['vel_error_rms'], 0.5)
    assert comparison['num_valid'] == 4

  def test_skipped_samples_ignored(self):
    state_ref  = np.zeros((6, 3))
    state_test = np.zeros((6, 3))
    state_test[:, 1]  = np.nan
    state_test[1, 2] += 4.0

    comparison = compare_ephemerides(self.make_result(state_ref), self.make_result(state_test))

    assert comparison['num_valid'] == 2
    assert np.isnan(comparison['pos_error'][1])
    assert np.isclose(comparison['pos_error_max'], 4.0)
    assert np.isclose(comparison['pos_error_rms'], np.sqrt(8.0))

  def test_failed_inputs(self):
    result = self.make_result(np.zeros((6, 3)))

    assert not compare_ephemerides({'success': False, 'message': 'offline'}, result)['success']
    assert not compare_ephemerides(result, self.make_result(np.zeros((6, 3)), time_array=np.array([0.0, 1.0, 5.0])))['success']
    assert not compare_ephemerides(result, self.make_result(np.zeros((6, 2))))['success']


class TestWriter:

  def test_csv_columns(self, tmp_path):
    result   = propagate_ephemeris(FlakyTrajectory([60.0]), build_time_grid(0.0, 120.0, 60.0))
    filepath = write_ephemeris_csv(result, tmp_path / 'files' / 'flaky.csv')

    ephemeris_df = pd.read_csv(filepath)

    assert list(ephemeris_df.columns) == EPHEMERIS_COLUMNS
    assert len(ephemeris_df) == 3
    assert ephemeris_df['utc'][0].startswith('2000-01-01T11:58:55')
    assert np.isnan(ephemeris_df['pos_x'][1])
    assert np.isclose(ephemeris_df['pos_x'][2], 120.0)
