"""
GUST86 Orbit
============

Analytic orbit of one major Uranian satellite. A query runs the whole chain
without keeping any state between calls:

  time -> phase angles -> series elements -> Kepler solution
       -> Uranus-equatorial state [AU, AU/day] -> target frame [km, km/s]
"""
import numpy as np

from typing import Union

from gust86.model.constants        import CONVERTER, TIMESCALES, GUST86CONSTANTS
from gust86.model.satellites       import Satellite
from gust86.model.series           import NonSingularElements, evaluate_elements
from gust86.model.orbit_converter  import OrbitConverter
from gust86.model.frame_converter  import FrameConverter
from gust86.propagation.trajectory import StateVector


class Gust86Orbit:
  """
  Trajectory of a Uranian satellite from the GUST86 theory.

  Attributes:
  -----------
    satellite : Satellite
      Satellite bound to this orbit.
    frame : str
      Output frame, 'J2000' or 'ECLIPJ2000'.
    gravitational_parameter : float
      Gravitational parameter of Uranus + satellite [AU³/day²].
    period : float
      Orbital period 2π/n from the mean longitude frequency [s].
    bounding_radius : float
      Radius of a Uranus-centered sphere containing the orbit [km].
  """
  include_forced = True

  def __init__(
    self,
    satellite : Union[Satellite, int, str],
    frame     : str = 'J2000',
    max_iter  : int = 50,
  ):
    self.satellite = Satellite.parse(satellite)

    # Raises ValueError on an unsupported frame
    FrameConverter.gust86_to(frame)

    self.frame     = frame.strip().upper()
    self.max_iter  = max_iter

    idx = int(self.satellite)
    self.gravitational_parameter = float(GUST86CONSTANTS.GP[idx])
    self.period                  = float(CONVERTER.TWO_PI / GUST86CONSTANTS.FREQUENCY.N[idx] * CONVERTER.SEC_PER_DAY)
    self.bounding_radius         = float(GUST86CONSTANTS.BOUNDING_RADIUS[idx])

  def __repr__(self) -> str:
    return f"{type(self).__name__}(satellite={self.satellite.display_name}, frame={self.frame})"

  @property
  def name(self) -> str:
    return self.satellite.display_name

  @staticmethod
  def gust86_days(
    time_s : float,
  ) -> float:
    """
    Convert TDB seconds past J2000 to days since the GUST86 epoch.
    """
    return time_s / CONVERTER.SEC_PER_DAY + TIMESCALES.GUST86_DAYS_AFTER_J2000

  def elements(
    self,
    time_s : float,
  ) -> NonSingularElements:
    """
    Non-singular elements of the satellite at a TDB time [s past J2000].
    """
    return evaluate_elements(
      time_d         = self.gust86_days(time_s),
      satellite      = self.satellite,
      include_forced = self.include_forced,
    )

  def native_state(
    self,
    time_s : float,
  ) -> tuple[np.ndarray, np.ndarray]:
    """
    State in the GUST86 Uranus-equatorial frame.

    Input:
    ------
      time_s : float
        TDB seconds past J2000.

    Output:
    -------
      pos_vec : np.ndarray
        Position vector [AU].
      vel_vec : np.ndarray
        Velocity vector [AU/day].

    Raises:
    -------
      NumericalNonConvergence
        If Kepler's equation cannot be solved for the evaluated elements.
    """
    return OrbitConverter.elements_to_native_pv(
      elements = self.elements(time_s),
      gp       = self.gravitational_parameter,
      max_iter = self.max_iter,
    )

  def state(
    self,
    time_s : float,
  ) -> StateVector:
    """
    Uranus-centered state of the satellite.

    Input:
    ------
      time_s : float
        TDB seconds past J2000 (JD 2451545.0).

    Output:
    -------
      state : StateVector
        Position [km] and velocity [km/s] in the orbit's frame.

    Raises:
    -------
      NumericalNonConvergence
        If Kepler's equation cannot be solved for the evaluated elements.
    """
    native_pos_vec, native_vel_vec = self.native_state(time_s)

    pos_vec, vel_vec = FrameConverter.gust86_to_target(
      pos_vec = native_pos_vec,
      vel_vec = native_vel_vec,
      frame   = self.frame,
    )
    return StateVector(pos_vec, vel_vec)

  def position(
    self,
    time_s : float,
  ) -> np.ndarray:
    return self.state(time_s).pos_vec

  def velocity(
    self,
    time_s : float,
  ) -> np.ndarray:
    return self.state(time_s).vel_vec
