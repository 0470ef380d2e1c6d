"""
GUST86 Perturbation Series
==========================

Trigonometric series of the GUST86 theory (Laskar & Jacobson, 1987) giving the
non-singular orbital elements of the five major Uranian satellites.

For each satellite the theory is four literal tables over the 15 phase angles
(an, ae, ai) of `phase_angles.py`:

  mean motion         n       = bias + Σ c·cos(arg)
  mean longitude      L       = bias + rate·t + Σ c·sin(arg)
  eccentricity vector k + i·h = Σ c·exp(i·arg)
  inclination vector  q + i·p = Σ c·exp(i·arg)

where every `arg` is an integer combination of the phase angles. The
coefficients below are the published values and must not be edited.
"""
import numpy as np

from typing import NamedTuple, Sequence

from gust86.model.satellites   import Satellite
from gust86.model.phase_angles import propagate_phase_angles


NO_ANGLE = (0, 0, 0, 0, 0)


class NonSingularElements(NamedTuple):
  """
  Non-singular orbital elements of one satellite at one instant.
    mean_motion    : n [rad/day]
    mean_longitude : L [rad], not reduced
    h              : e·sin(ϖ)
    k              : e·cos(ϖ)
    p              : sin(i/2)·sin(Ω)
    q              : sin(i/2)·cos(Ω)
  """
  mean_motion    : float
  mean_longitude : float
  h              : float
  k              : float
  p              : float
  q              : float

  @property
  def eccentricity(self) -> float:
    return float(np.hypot(self.h, self.k))

  @property
  def inclination(self) -> float:
    """
    Inclination on the Uranus equator [rad].
    """
    return float(2.0 * np.arcsin(np.hypot(self.p, self.q)))


class Term(NamedTuple):
  """
  One series term: coefficient and the integer multipliers of an, ae, ai.
  """
  coeff : float
  an    : tuple = NO_ANGLE
  ae    : tuple = NO_ANGLE
  ai    : tuple = NO_ANGLE


def _free_modes(
  family : str,
  coeffs : Sequence[float],
) -> list:
  """
  Terms whose argument is a single proper-mode angle ae[j] or ai[j].
  Zero coefficients mark modes absent from the published table.
  """
  terms = []
  for idx, coeff in enumerate(coeffs):
    if coeff == 0.0:
      continue
    unit = tuple(1 if j == idx else 0 for j in range(5))
    terms.append(Term(coeff, **{family: unit}))
  return terms


class SeriesTable:
  """
  One element's series, stored as a coefficient vector and a (terms x 15)
  argument-multiplier matrix so that every satellite is evaluated by the same
  code path.
  """
  def __init__(
    self,
    terms : Sequence[Term],
    bias  : float = 0.0,
    rate  : float = 0.0,
  ):
    self.bias  = bias
    self.rate  = rate
    self.terms = tuple(terms)

    coeffs      = np.array([term.coeff for term in self.terms], dtype=float)
    multipliers = np.array(
      [term.an + term.ae + term.ai for term in self.terms],
      dtype=float,
    ).reshape(-1, 15)

    # Forced terms depend on at least one mean longitude argument
    is_forced = np.any(multipliers[:, :5] != 0.0, axis=1)

    for array in (coeffs, multipliers, is_forced):
      array.flags.writeable = False

    self.coeffs      = coeffs
    self.multipliers = multipliers
    self.is_forced   = is_forced

  def __len__(self) -> int:
    return len(self.terms)

  def secular(
    self,
    time_d : float,
  ) -> float:
    """
    Constant bias plus secular drift [rad/day]·[day].
    """
    return self.bias + self.rate * time_d

  def _coeffs_and_arguments(
    self,
    angles         : np.ndarray,
    include_forced : bool,
  ) -> tuple[np.ndarray, np.ndarray]:
    arguments = self.multipliers @ angles
    if include_forced:
      return self.coeffs, arguments
    keep = ~self.is_forced
    return self.coeffs[keep], arguments[keep]

  def cosine_sum(
    self,
    angles         : np.ndarray,
    include_forced : bool = True,
  ) -> float:
    coeffs, arguments = self._coeffs_and_arguments(angles, include_forced)
    return float(np.sum(coeffs * np.cos(arguments)))

  def sine_sum(
    self,
    angles         : np.ndarray,
    include_forced : bool = True,
  ) -> float:
    coeffs, arguments = self._coeffs_and_arguments(angles, include_forced)
    return float(np.sum(coeffs * np.sin(arguments)))


class SatelliteSeries(NamedTuple):
  mean_motion    : SeriesTable
  mean_longitude : SeriesTable
  eccentricity   : SeriesTable
  inclination    : SeriesTable


_MIRANDA = SatelliteSeries(
  mean_motion = SeriesTable(
    bias  = 4.44352267,
    terms = [
      Term(-3.492e-5,   an=(1, -3, 2, 0, 0)),
      Term( 8.47e-6,    an=(2, -6, 4, 0, 0)),
      Term( 1.31e-6,    an=(3, -9, 6, 0, 0)),
      Term(-5.228e-5,   an=(1, -1, 0, 0, 0)),
      Term(-1.3665e-4,  an=(2, -2, 0, 0, 0)),
    ],
  ),
  mean_longitude = SeriesTable(
    bias  = -0.23805158,
    rate  = 4.44519055,
    terms = [
      Term( 0.02547217, an=(1, -3, 2, 0, 0)),
      Term(-0.00308831, an=(2, -6, 4, 0, 0)),
      Term(-3.181e-4,   an=(3, -9, 6, 0, 0)),
      Term(-3.749e-5,   an=(4, -12, 8, 0, 0)),
      Term(-5.785e-5,   an=(1, -1, 0, 0, 0)),
      Term(-6.232e-5,   an=(2, -2, 0, 0, 0)),
      Term(-2.795e-5,   an=(3, -3, 0, 0, 0)),
    ],
  ),
  eccentricity = SeriesTable(
    terms = _free_modes('ae', [1.31238e-3, 7.181e-5, 6.977e-5, 6.75e-6, 6.27e-6]) + [
      Term( 1.941e-4,   an=( 1, 0, 0, 0, 0)),
      Term(-1.2331e-4,  an=(-1, 2, 0, 0, 0)),
      Term( 3.952e-5,   an=(-2, 3, 0, 0, 0)),
    ],
  ),
  inclination = SeriesTable(
    terms = _free_modes('ai', [0.03787171, 2.701e-5, 3.076e-5, 1.218e-5, 5.37e-6]),
  ),
)

_ARIEL = SatelliteSeries(
  mean_motion = SeriesTable(
    bias  = 2.49254257,
    terms = [
      Term( 2.55e-6,    an=(1, -3,  2, 0, 0)),
      Term(-4.216e-5,   an=(0,  1, -1, 0, 0)),
      Term(-1.0256e-4,  an=(0,  2, -2, 0, 0)),
    ],
  ),
  mean_longitude = SeriesTable(
    bias  = 3.09804641,
    rate  = 2.49295252,
    terms = [
      Term(-0.0018605,  an=(1,  -3,  2,  0, 0)),
      Term( 2.1999e-4,  an=(2,  -6,  4,  0, 0)),
      Term( 2.31e-5,    an=(3,  -9,  6,  0, 0)),
      Term( 4.3e-6,     an=(4, -12,  8,  0, 0)),
      Term(-9.011e-5,   an=(0,   1, -1,  0, 0)),
      Term(-9.107e-5,   an=(0,   2, -2,  0, 0)),
      Term(-4.275e-5,   an=(0,   3, -3,  0, 0)),
      Term(-1.649e-5,   an=(0,   2,  0, -2, 0)),
    ],
  ),
  eccentricity = SeriesTable(
    terms = _free_modes('ae', [-3.35e-6, 1.18763e-3, 8.6159e-4, 7.15e-5, 5.559e-5]) + [
      Term(-8.46e-5,    an=(0, -1, 2, 0, 0)),
      Term( 9.181e-5,   an=(0, -2, 3, 0, 0)),
      Term( 2.003e-5,   an=(0, -1, 0, 2, 0)),
      Term( 8.977e-5,   an=(0,  1, 0, 0, 0)),
    ],
  ),
  inclination = SeriesTable(
    terms = _free_modes('ai', [-1.2175e-4, 3.5825e-4, 2.9008e-4, 9.778e-5, 3.397e-5]),
  ),
)

_UMBRIEL = SatelliteSeries(
  mean_motion = SeriesTable(
    bias  = 1.5159549,
    terms = [
      Term( 9.74e-6,    an=(0, 0, 1, -2, 0), ae=(0, 0, 1, 0, 0)),
      Term(-1.06e-4,    an=(0, 1, -1, 0, 0)),
      Term( 5.416e-5,   an=(0, 2, -2, 0, 0)),
      Term(-2.359e-5,   an=(0, 0, 1, -1, 0)),
      Term(-7.07e-5,    an=(0, 0, 2, -2, 0)),
      Term(-3.628e-5,   an=(0, 0, 3, -3, 0)),
    ],
  ),
  mean_longitude = SeriesTable(
    bias  = 2.28540169,
    rate  = 1.51614811,
    terms = [
      Term( 6.6057e-4,  an=(1,  -3,  2,  0, 0)),
      Term(-7.651e-5,   an=(2,  -6,  4,  0, 0)),
      Term(-8.96e-6,    an=(3,  -9,  6,  0, 0)),
      Term(-2.53e-6,    an=(4, -12,  8,  0, 0)),
      Term(-5.291e-5,   an=(0,   0,  1, -4, 3)),
      Term(-7.34e-6,    an=(0,   0,  1, -2, 0), ae=(0, 0, 0, 0, 1)),
      Term(-1.83e-6,    an=(0,   0,  1, -2, 0), ae=(0, 0, 0, 1, 0)),
      Term( 1.4791e-4,  an=(0,   0,  1, -2, 0), ae=(0, 0, 1, 0, 0)),
      Term(-7.77e-6,    an=(0,   0,  1, -2, 0), ae=(0, 1, 0, 0, 0)),
      Term( 9.776e-5,   an=(0,   1, -1,  0, 0)),
      Term( 7.313e-5,   an=(0,   2, -2,  0, 0)),
      Term( 3.471e-5,   an=(0,   3, -3,  0, 0)),
      Term( 1.889e-5,   an=(0,   4, -4,  0, 0)),
      Term(-6.789e-5,   an=(0,   0,  1, -1, 0)),
      Term(-8.286e-5,   an=(0,   0,  2, -2, 0)),
      Term(-3.381e-5,   an=(0,   0,  3, -3, 0)),
      Term(-1.579e-5,   an=(0,   0,  4, -4, 0)),
      Term(-1.021e-5,   an=(0,   0,  1,  0, -1)),
      Term(-1.708e-5,   an=(0,   0,  2,  0, -2)),
    ],
  ),
  eccentricity = SeriesTable(
    terms = _free_modes('ae', [-2.1e-7, -2.2795e-4, 3.90469e-3, 3.0917e-4, 2.2192e-4]) + [
      Term( 2.934e-5,   an=(0,  1,  0, 0, 0)),
      Term( 2.62e-5,    an=(0,  0,  1, 0, 0)),
      Term( 5.119e-5,   an=(0, -1,  2, 0, 0)),
      Term(-1.0386e-4,  an=(0, -2,  3, 0, 0)),
      Term(-2.716e-5,   an=(0, -3,  4, 0, 0)),
      Term(-1.622e-5,   an=(0,  0,  0, 1, 0)),
      Term( 5.4923e-4,  an=(0,  0, -1, 2, 0)),
      Term( 3.47e-5,    an=(0,  0, -2, 3, 0)),
      Term( 1.281e-5,   an=(0,  0, -3, 4, 0)),
      Term( 2.181e-5,   an=(0,  0, -1, 0, 2)),
      Term( 4.625e-5,   an=(0,  0,  1, 0, 0)),
    ],
  ),
  inclination = SeriesTable(
    terms = _free_modes('ai', [-1.086e-5, -8.151e-5, 1.11336e-3, 3.5014e-4, 1.065e-4]),
  ),
)

_TITANIA = SatelliteSeries(
  mean_motion = SeriesTable(
    bias  = 0.72166316,
    terms = [
      Term(-2.64e-6,    an=(0, 0, 1, -2,  0), ae=(0, 0, 1, 0, 0)),
      Term(-2.16e-6,    an=(0, 0, 0,  2, -3), ae=(0, 0, 0, 0, 1)),
      Term( 6.45e-6,    an=(0, 0, 0,  2, -3), ae=(0, 0, 0, 1, 0)),
      Term(-1.11e-6,    an=(0, 0, 0,  2, -3), ae=(0, 0, 1, 0, 0)),
      Term(-6.223e-5,   an=(0, 1, 0, -1,  0)),
      Term(-5.613e-5,   an=(0, 0, 1, -1,  0)),
      Term(-3.994e-5,   an=(0, 0, 0,  1, -1)),
      Term(-9.185e-5,   an=(0, 0, 0,  2, -2)),
      Term(-5.831e-5,   an=(0, 0, 0,  3, -3)),
      Term(-3.86e-5,    an=(0, 0, 0,  4, -4)),
      Term(-2.618e-5,   an=(0, 0, 0,  5, -5)),
      Term(-1.806e-5,   an=(0, 0, 0,  6, -6)),
    ],
  ),
  mean_longitude = SeriesTable(
    bias  = 0.85635879,
    rate  = 0.72171851,
    terms = [
      Term( 2.061e-5,   an=(0, 0, 1, -4,  3)),
      Term(-2.07e-6,    an=(0, 0, 1, -2,  0), ae=(0, 0, 0, 0, 1)),
      Term(-2.88e-6,    an=(0, 0, 1, -2,  0), ae=(0, 0, 0, 1, 0)),
      Term(-4.079e-5,   an=(0, 0, 1, -2,  0), ae=(0, 0, 1, 0, 0)),
      Term( 2.11e-6,    an=(0, 0, 1, -2,  0), ae=(0, 1, 0, 0, 0)),
      Term(-5.183e-5,   an=(0, 0, 0,  2, -3), ae=(0, 0, 0, 0, 1)),
      Term( 1.5987e-4,  an=(0, 0, 0,  2, -3), ae=(0, 0, 0, 1, 0)),
      Term(-3.505e-5,   an=(0, 0, 0,  2, -3), ae=(0, 0, 1, 0, 0)),
      Term(-1.56e-6,    an=(0, 0, 0,  3, -4), ae=(0, 0, 0, 0, 1)),
      Term( 4.054e-5,   an=(0, 1, 0, -1,  0)),
      Term( 4.617e-5,   an=(0, 0, 1, -1,  0)),
      Term(-3.1776e-4,  an=(0, 0, 0,  1, -1)),
      Term(-3.0559e-4,  an=(0, 0, 0,  2, -2)),
      Term(-1.4836e-4,  an=(0, 0, 0,  3, -3)),
      Term(-8.292e-5,   an=(0, 0, 0,  4, -4)),
      Term(-4.998e-5,   an=(0, 0, 0,  5, -5)),
      Term(-3.156e-5,   an=(0, 0, 0,  6, -6)),
      Term(-2.056e-5,   an=(0, 0, 0,  7, -7)),
      Term(-1.369e-5,   an=(0, 0, 0,  8, -8)),
    ],
  ),
  eccentricity = SeriesTable(
    terms = _free_modes('ae', [-2e-8, -1.29e-6, -3.2451e-4, 9.3281e-4, 1.12089e-3]) + [
      Term( 3.386e-5,   an=(0,  1,  0,  0, 0)),
      Term( 1.746e-5,   an=(0,  0,  0,  1, 0)),
      Term( 1.658e-5,   an=(0, -1,  0,  2, 0)),
      Term( 2.889e-5,   an=(0,  0,  1,  0, 0)),
      Term(-3.586e-5,   an=(0,  0, -1,  2, 0)),
      Term(-1.786e-5,   an=(0,  0,  0,  1, 0)),
      Term(-3.21e-5,    an=(0,  0,  0,  0, 1)),
      Term(-1.7783e-4,  an=(0,  0,  0, -1, 2)),
      Term( 7.9343e-4,  an=(0,  0,  0, -2, 3)),
      Term( 9.948e-5,   an=(0,  0,  0, -3, 4)),
      Term( 4.483e-5,   an=(0,  0,  0, -4, 5)),
      Term( 2.513e-5,   an=(0,  0,  0, -5, 6)),
      Term( 1.543e-5,   an=(0,  0,  0, -6, 7)),
    ],
  ),
  inclination = SeriesTable(
    terms = _free_modes('ai', [-1.43e-6, -1.06e-6, -1.4013e-4, 6.8572e-4, 3.7832e-4]),
  ),
)

_OBERON = SatelliteSeries(
  mean_motion = SeriesTable(
    bias  = 0.46658054,
    terms = [
      Term( 2.08e-6,    an=(0, 0, 0, 2, -3), ae=(0, 0, 0, 0, 1)),
      Term(-6.22e-6,    an=(0, 0, 0, 2, -3), ae=(0, 0, 0, 1, 0)),
      Term( 1.07e-6,    an=(0, 0, 0, 2, -3), ae=(0, 0, 1, 0, 0)),
      Term(-4.31e-5,    an=(0, 1, 0, 0, -1)),
      Term(-3.894e-5,   an=(0, 0, 1, 0, -1)),
      Term(-8.011e-5,   an=(0, 0, 0, 1, -1)),
      Term( 5.906e-5,   an=(0, 0, 0, 2, -2)),
      Term( 3.749e-5,   an=(0, 0, 0, 3, -3)),
      Term( 2.482e-5,   an=(0, 0, 0, 4, -4)),
      Term( 1.684e-5,   an=(0, 0, 0, 5, -5)),
    ],
  ),
  mean_longitude = SeriesTable(
    bias  = -0.9155918,
    rate  = 0.46669212,
    terms = [
      Term(-7.82e-6,    an=(0, 0, 1, -4,  3)),
      Term( 5.129e-5,   an=(0, 0, 0,  2, -3), ae=(0, 0, 0, 0, 1)),
      Term(-1.5824e-4,  an=(0, 0, 0,  2, -3), ae=(0, 0, 0, 1, 0)),
      Term( 3.451e-5,   an=(0, 0, 0,  2, -3), ae=(0, 0, 1, 0, 0)),
      Term( 4.751e-5,   an=(0, 1, 0,  0, -1)),
      Term( 3.896e-5,   an=(0, 0, 1,  0, -1)),
      Term( 3.5973e-4,  an=(0, 0, 0,  1, -1)),
      Term( 2.8278e-4,  an=(0, 0, 0,  2, -2)),
      Term( 1.386e-4,   an=(0, 0, 0,  3, -3)),
      Term( 7.803e-5,   an=(0, 0, 0,  4, -4)),
      Term( 4.729e-5,   an=(0, 0, 0,  5, -5)),
      Term( 3e-5,       an=(0, 0, 0,  6, -6)),
      Term( 1.962e-5,   an=(0, 0, 0,  7, -7)),
      Term( 1.311e-5,   an=(0, 0, 0,  8, -8)),
    ],
  ),
  eccentricity = SeriesTable(
    terms = _free_modes('ae', [0.0, -3.5e-7, 7.453e-5, -7.5868e-4, 1.39734e-3]) + [
      Term( 3.9e-5,     an=(0,  1, 0,  0, 0)),
      Term( 1.766e-5,   an=(0, -1, 0,  0, 2)),
      Term( 3.242e-5,   an=(0,  0, 1,  0, 0)),
      Term( 7.975e-5,   an=(0,  0, 0,  1, 0)),
      Term( 7.566e-5,   an=(0,  0, 0,  0, 1)),
      Term( 1.3404e-4,  an=(0,  0, 0, -1, 2)),
      Term(-9.8726e-4,  an=(0,  0, 0, -2, 3)),
      Term(-1.2609e-4,  an=(0,  0, 0, -3, 4)),
      Term(-5.742e-5,   an=(0,  0, 0, -4, 5)),
      Term(-3.241e-5,   an=(0,  0, 0, -5, 6)),
      Term(-1.999e-5,   an=(0,  0, 0, -6, 7)),
      Term(-1.294e-5,   an=(0,  0, 0, -7, 8)),
    ],
  ),
  inclination = SeriesTable(
    terms = _free_modes('ai', [-4.4e-7, -3.1e-7, 3.689e-5, -5.9633e-4, 4.5169e-4]),
  ),
)


SERIES = {
  Satellite.MIRANDA : _MIRANDA,
  Satellite.ARIEL   : _ARIEL,
  Satellite.UMBRIEL : _UMBRIEL,
  Satellite.TITANIA : _TITANIA,
  Satellite.OBERON  : _OBERON,
}


def secular_longitude(
  time_d    : float,
  satellite : Satellite,
) -> float:
  """
  Mean longitude without any periodic contribution: bias + rate·t [rad].
  """
  return SERIES[Satellite.parse(satellite)].mean_longitude.secular(time_d)


def evaluate_elements(
  time_d         : float,
  satellite      : Satellite,
  include_forced : bool = True,
) -> NonSingularElements:
  """
  Evaluate the GUST86 series of one satellite.

  Input:
  ------
    time_d : float
      Time since the GUST86 epoch (JD 2444239.5) [days].
    satellite : Satellite
      Satellite whose tables are summed.
    include_forced : bool
      If False, keep only the secular parts and the free proper modes
      (terms whose argument contains no mean longitude angle).

  Output:
  -------
    elements : NonSingularElements
      Mean motion [rad/day], mean longitude [rad], h, k, p, q.
  """
  series = SERIES[Satellite.parse(satellite)]
  angles = propagate_phase_angles(time_d).stacked()

  mean_motion    = series.mean_motion.secular(time_d)    + series.mean_motion.cosine_sum(angles, include_forced)
  mean_longitude = series.mean_longitude.secular(time_d) + series.mean_longitude.sine_sum(angles, include_forced)

  # Complex series: cosine part is k (resp. q), sine part is h (resp. p)
  k = series.eccentricity.cosine_sum(angles, include_forced)
  h = series.eccentricity.sine_sum(angles, include_forced)
  q = series.inclination.cosine_sum(angles, include_forced)
  p = series.inclination.sine_sum(angles, include_forced)

  return NonSingularElements(
    mean_motion    = mean_motion,
    mean_longitude = mean_longitude,
    h              = h,
    k              = k,
    p              = p,
    q              = q,
  )
