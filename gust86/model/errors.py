class InvalidSatelliteIdentity(ValueError):
  """
  Raised when an orbit is constructed for a body outside the GUST86 set.
  """


class NumericalNonConvergence(ArithmeticError):
  """
  Raised when the Kepler solver does not converge within its iteration cap.

  Attributes:
  -----------
    iterations : int
      Number of Newton iterations performed before giving up.
    last_correction : float
      Magnitude of the last Newton correction [rad] (nan if none was computed).
  """
  def __init__(
    self,
    message         : str,
    iterations      : int   = 0,
    last_correction : float = float('nan'),
  ):
    super().__init__(message)
    self.iterations      = iterations
    self.last_correction = last_correction
