"""
Unit Tests for the Phase Angles and Perturbation Series
=======================================================

Tests:
------
TestPhaseAngles
  - test_known_solution_epoch_angles_equal_phases : angles at t = 0 are the published phases
  - test_sanity_check_reduction_keeps_sign        : fmod reduction keeps the sign of the argument
  - test_sanity_check_reduced_range               : |angle| < 2π for large |t|
  - test_stacked_order                            : stacked vector is (an, ae, ai)

TestSeriesTables
  - test_tables_are_read_only         : coefficient and multiplier arrays cannot be modified
  - test_multiplier_shape             : one row of 15 multipliers per term
  - test_free_modes_skip_zero_coeffs  : zero free-mode coefficients produce no term
  - test_forced_flags                 : terms without an mean longitude angle are free

TestEvaluateElements
  - test_known_solution_miranda_secular_longitude : Miranda bias at t = 0 is -0.23805158
  - test_secular_longitude_rate                   : secular longitude grows at the published rate
  - test_sanity_check_mean_motion                 : n within 1e-3 of the mean longitude frequency
  - test_sanity_check_small_eccentricity          : e < 0.01 for every satellite
  - test_known_solution_inclinations              : Miranda tilted by about 4.3 deg, others below 0.5 deg
  - test_free_only_evaluation                     : include_forced=False equals the free-mode sums
  - test_accepts_satellite_names                  : names and indices select the same tables

Usage:
------
  python -m pytest gust86/validation/test_series.py -v
"""
import pytest
import numpy as np

from gust86.model.constants    import GUST86CONSTANTS, CONVERTER
from gust86.model.satellites   import Satellite
from gust86.model.phase_angles import PhaseAngles, propagate_phase_angles, reduce_angle
from gust86.model.series       import SERIES, SeriesTable, Term, _free_modes, evaluate_elements, secular_longitude


class TestPhaseAngles:
  """
  Tests for the linear propagation of the phase angles.
  """

  def test_known_solution_epoch_angles_equal_phases(self):
    angles = propagate_phase_angles(0.0)

    assert np.array_equal(angles.an, GUST86CONSTANTS.PHASE.N)
    assert np.array_equal(angles.ae, GUST86CONSTANTS.PHASE.E)
    assert np.array_equal(angles.ai, GUST86CONSTANTS.PHASE.I)

  def test_sanity_check_reduction_keeps_sign(self):
    assert np.isclose(reduce_angle(np.array( 7.0)),  7.0 - CONVERTER.TWO_PI)
    assert np.isclose(reduce_angle(np.array(-7.0)), -7.0 + CONVERTER.TWO_PI)
    assert reduce_angle(np.array(-0.5)) == -0.5

  @pytest.mark.parametrize("time_d", [-1.0e4, -123.456, 0.5, 1.0e4, 3.0e5])
  def test_sanity_check_reduced_range(self, time_d):
    angles = propagate_phase_angles(time_d).stacked()

    assert angles.shape == (15,)
    assert np.all(np.isfinite(angles))
    assert np.all(np.abs(angles) < CONVERTER.TWO_PI)

  def test_stacked_order(self):
    angles = PhaseAngles(np.zeros(5), np.ones(5), 2.0 * np.ones(5))
    stacked = angles.stacked()

    assert np.array_equal(stacked[0:5],   np.zeros(5))
    assert np.array_equal(stacked[5:10],  np.ones(5))
    assert np.array_equal(stacked[10:15], 2.0 * np.ones(5))


class TestSeriesTables:
  """
  Tests for the static coefficient tables.
  """

  def test_tables_are_read_only(self):
    table = SERIES[Satellite.MIRANDA].mean_longitude

    with pytest.raises(ValueError):
      table.coeffs[0] = 0.0
    with pytest.raises(ValueError):
      table.multipliers[0, 0] = 0.0

  def test_multiplier_shape(self, satellite):
    series = SERIES[satellite]
    for table in series:
      assert table.multipliers.shape == (len(table), 15)
      assert table.coeffs.shape      == (len(table),)

  def test_free_modes_skip_zero_coeffs(self):
    terms = _free_modes('ai', [0.0, 2.0e-4, 0.0, 0.0, -1.0e-5])

    assert [term.coeff for term in terms] == [2.0e-4, -1.0e-5]
    assert terms[0].ai == (0, 1, 0, 0, 0)
    assert terms[1].ai == (0, 0, 0, 0, 1)
    assert terms[0].an == (0, 0, 0, 0, 0)

  def test_forced_flags(self):
    table = SeriesTable(terms=[
      Term(1.0, an=(1, -1, 0, 0, 0)),
      Term(1.0, ae=(0,  1, 0, 0, 0)),
      Term(1.0, an=(0,  0, 1, -2, 0), ae=(0, 0, 1, 0, 0)),
    ])
    assert list(table.is_forced) == [True, False, True]


class TestEvaluateElements:
  """
  Tests for the evaluation of the element series.
  """

  def test_known_solution_miranda_secular_longitude(self):
    assert np.isclose(secular_longitude(0.0, Satellite.MIRANDA), -0.23805158, rtol=0.0, atol=1e-15)

  def test_secular_longitude_rate(self):
    time_d = 100.0
    delta  = secular_longitude(time_d, Satellite.TITANIA) - secular_longitude(0.0, Satellite.TITANIA)
    assert np.isclose(delta, SERIES[Satellite.TITANIA].mean_longitude.rate * time_d, rtol=1e-12)

  @pytest.mark.parametrize("time_d", [-5000.0, 0.0, 2500.25])
  def test_sanity_check_mean_motion(self, satellite, time_d):
    elements = evaluate_elements(time_d, satellite)
    assert np.isclose(elements.mean_motion, GUST86CONSTANTS.FREQUENCY.N[satellite], rtol=1e-3)

  @pytest.mark.parametrize("time_d", [-10000.0, 0.0, 10000.0])
  def test_sanity_check_small_eccentricity(self, satellite, time_d):
    elements = evaluate_elements(time_d, satellite)
    assert 0.0 < elements.eccentricity < 0.01

  @pytest.mark.parametrize("time_d", [-10000.0, 0.0, 7305.5])
  def test_known_solution_inclinations(self, satellite, time_d):
    inc_deg = evaluate_elements(time_d, satellite).inclination * CONVERTER.DEG_PER_RAD

    if satellite == Satellite.MIRANDA:
      assert 4.0 < inc_deg < 4.7
    else:
      assert inc_deg < 0.5

  def test_free_only_evaluation(self):
    time_d   = 1234.5
    series   = SERIES[Satellite.MIRANDA]
    elements = evaluate_elements(time_d, Satellite.MIRANDA, include_forced=False)
    angles   = propagate_phase_angles(time_d).stacked()

    free      = ~series.eccentricity.is_forced
    arguments = series.eccentricity.multipliers[free] @ angles
    k_free    = np.sum(series.eccentricity.coeffs[free] * np.cos(arguments))
    h_free    = np.sum(series.eccentricity.coeffs[free] * np.sin(arguments))

    assert np.isclose(elements.k, k_free, rtol=1e-12)
    assert np.isclose(elements.h, h_free, rtol=1e-12)
    assert elements.mean_motion    == series.mean_motion.bias
    assert elements.mean_longitude == series.mean_longitude.secular(time_d)

  def test_accepts_satellite_names(self):
    by_member = evaluate_elements(42.0, Satellite.UMBRIEL)
    by_name   = evaluate_elements(42.0, 'umbriel')
    by_index  = evaluate_elements(42.0, 2)

    assert by_member == by_name == by_index
