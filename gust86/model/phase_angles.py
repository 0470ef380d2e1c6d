import numpy as np

from typing import NamedTuple

from gust86.model.constants import GUST86CONSTANTS, CONVERTER


class PhaseAngles(NamedTuple):
  """
  Perturbing-frequency phase angles at one instant, each of shape (5,) [rad].
    an : mean longitude arguments
    ae : proper pericenter arguments
    ai : proper node arguments
  """
  an : np.ndarray
  ae : np.ndarray
  ai : np.ndarray

  def stacked(self) -> np.ndarray:
    """
    Return the 15 angles as one vector ordered (an, ae, ai).
    """
    return np.concatenate((self.an, self.ae, self.ai))


def reduce_angle(
  angle : np.ndarray,
) -> np.ndarray:
  """
  Reduce an angle modulo one full turn, keeping its sign (fmod convention).
  """
  return np.fmod(angle, CONVERTER.TWO_PI)


def propagate_phase_angles(
  time_d : float,
) -> PhaseAngles:
  """
  Advance the fixed GUST86 phase angles linearly in time.

  Input:
  ------
    time_d : float
      Time since the GUST86 epoch (JD 2444239.5) [days]. May be negative.

  Output:
  -------
    angles : PhaseAngles
      Reduced angles an, ae, ai [rad].
  """
  an = reduce_angle(GUST86CONSTANTS.FREQUENCY.N * time_d + GUST86CONSTANTS.PHASE.N)
  ae = reduce_angle(GUST86CONSTANTS.FREQUENCY.E * time_d + GUST86CONSTANTS.PHASE.E)
  ai = reduce_angle(GUST86CONSTANTS.FREQUENCY.I * time_d + GUST86CONSTANTS.PHASE.I)
  return PhaseAngles(an, ae, ai)
