import numpy as np

from dataclasses import dataclass
from typing      import Protocol, runtime_checkable


@dataclass(frozen=True, eq=False)
class StateVector:
  """
  Position and velocity of a satellite at one instant, relative to Uranus.
    pos_vec : position [km]
    vel_vec : velocity [km/s]
  Both arrays are private read-only copies.
  """
  pos_vec : np.ndarray
  vel_vec : np.ndarray

  def __post_init__(self):
    for name in ('pos_vec', 'vel_vec'):
      vec = np.array(getattr(self, name), dtype=float)
      if vec.shape != (3,):
        raise ValueError(f"{name} must have shape (3,), received {vec.shape}")
      vec.flags.writeable = False
      object.__setattr__(self, name, vec)

  def as_array(self) -> np.ndarray:
    """
    Return the state as a new 6-vector [pos_x, pos_y, pos_z, vel_x, vel_y, vel_z].
    """
    return np.concatenate((self.pos_vec, self.vel_vec))


@runtime_checkable
class Trajectory(Protocol):
  """
  Anything able to report a satellite state at a TDB time.
  """
  frame           : str
  period          : float
  bounding_radius : float

  def state(self, time_s: float) -> StateVector:
    ...
