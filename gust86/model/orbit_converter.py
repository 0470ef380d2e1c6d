import numpy as np

from gust86.model.constants import CONVERTER
from gust86.model.errors    import NumericalNonConvergence
from gust86.model.series    import NonSingularElements


class RootSolvers:
  """
  Root solvers for non-singular orbital elements.
  """

  @staticmethod
  def kepler_nonsingular(
    mean_longitude : float,
    h              : float,
    k              : float,
    mean_motion    : float = 0.0,
    dt             : float = 0.0,
    tol            : float = 1e-14,
    max_iter       : int   = 50,
  ) -> float:
    """
    Solve the non-singular Kepler equation F = λ + k·sin(F) - h·cos(F)
    for the eccentric longitude F, with λ = L + n·dt.

    Input:
    ------
      mean_longitude : float
        Mean longitude L [rad].
      h : float
        Eccentricity vector component e·sin(ϖ).
      k : float
        Eccentricity vector component e·cos(ϖ).
      mean_motion : float
        Mean motion n [rad/day].
      dt : float
        Time offset from the elements' instant [days].
      tol : float
        Convergence tolerance on the Newton correction [rad].
      max_iter : int
        Maximum number of Newton iterations.

    Output:
    -------
      ecc_lon : float
        Eccentric longitude F [rad], close to λ reduced to (-2π, 2π).

    Raises:
    -------
      NumericalNonConvergence
        If the correction does not drop below tol within max_iter iterations,
        or the eccentricity is not below 1 (including non-finite input).
    """
    # Newton denominator below is >= 1 - e, so e < 1 is required (also rejects nan)
    if not h * h + k * k < 1.0:
      raise NumericalNonConvergence(
        f"Kepler's equation requires eccentricity in [0, 1), received {np.hypot(h, k)}.",
      )

    mean_lon = np.fmod(mean_longitude + mean_motion * dt, CONVERTER.TWO_PI)

    # Initial guess
    ecc_lon = mean_lon - k * np.sin(mean_lon) + h * np.cos(mean_lon)

    # Newton-Raphson iteration
    delta_ecc_lon = float('nan')
    for _ in range(max_iter):
      cos_ecc_lon = np.cos(ecc_lon)
      sin_ecc_lon = np.sin(ecc_lon)

      func_prime    = 1.0 - k * cos_ecc_lon - h * sin_ecc_lon
      delta_ecc_lon = (mean_lon - ecc_lon + k * sin_ecc_lon - h * cos_ecc_lon) / func_prime
      ecc_lon       = ecc_lon + delta_ecc_lon
      if abs(delta_ecc_lon) <= tol:
        return float(ecc_lon)

    raise NumericalNonConvergence(
      f"Kepler's equation not converged after {max_iter} iterations "
      f"(last correction {abs(delta_ecc_lon):.3e} rad).",
      iterations      = max_iter,
      last_correction = abs(delta_ecc_lon),
    )


class OrbitConverter:
  """
  Conversion from non-singular orbital elements to position/velocity.
  """

  @staticmethod
  def semi_major_axis(
    gp          : float,
    mean_motion : float,
  ) -> float:
    """
    Semi-major axis from Kepler's third law, a = (μ/n²)^(1/3).
    """
    return float(np.cbrt(gp / (mean_motion * mean_motion)))

  @staticmethod
  def elements_to_native_pv(
    elements : NonSingularElements,
    gp       : float,
    dt       : float = 0.0,
    max_iter : int   = 50,
  ) -> tuple[np.ndarray, np.ndarray]:
    """
    Convert non-singular elements to a Cartesian state in the reference
    plane of the elements (the Uranus equator for GUST86).

    Input:
    ------
      elements : NonSingularElements
        Mean motion [rad/day], mean longitude [rad], h, k, p, q.
      gp : float
        Gravitational parameter [AU³/day²].
      dt : float
        Time offset from the elements' instant [days].
      max_iter : int
        Iteration cap passed to the Kepler solver.

    Output:
    -------
      pos_vec : np.ndarray
        Position vector [AU].
      vel_vec : np.ndarray
        Velocity vector [AU/day].

    Raises:
    -------
      NumericalNonConvergence
        Propagated from the Kepler solver.
    """
    n, mean_lon, h, k, p, q = elements

    sma = OrbitConverter.semi_major_axis(gp, n)

    ecc_lon = RootSolvers.kepler_nonsingular(
      mean_longitude = mean_lon,
      h              = h,
      k              = k,
      mean_motion    = n,
      dt             = dt,
      max_iter       = max_iter,
    )
    cos_ecc_lon = np.cos(ecc_lon)
    sin_ecc_lon = np.sin(ecc_lon)

    # In-plane position
    dlf = -k * sin_ecc_lon + h * cos_ecc_lon
    phi = np.sqrt(1.0 - h * h - k * k)
    psi = 1.0 / (1.0 + phi)

    x1 = sma * (cos_ecc_lon - k - psi * dlf * h)
    y1 = sma * (sin_ecc_lon - h + psi * dlf * k)

    # In-plane velocity
    rsam1 = -k * cos_ecc_lon - h * sin_ecc_lon
    speed = sma * n / (1.0 + rsam1)

    vx1 = speed * (-sin_ecc_lon - psi * rsam1 * h)
    vy1 = speed * ( cos_ecc_lon + psi * rsam1 * k)

    # Rotation out of the orbital plane by the inclination vector
    rot_mat = OrbitConverter.orbital_plane_rotation(p, q)

    pos_vec = rot_mat @ np.array([x1, y1])
    vel_vec = rot_mat @ np.array([vx1, vy1])

    return pos_vec, vel_vec

  @staticmethod
  def orbital_plane_rotation(
    p : float,
    q : float,
  ) -> np.ndarray:
    """
    3x2 matrix taking in-plane coordinates to the reference frame.

    Input:
    ------
      p : float
        sin(i/2)·sin(Ω)
      q : float
        sin(i/2)·cos(Ω)

    Output:
    -------
      rot_mat : np.ndarray
        Matrix such that: ref_vec = rot_mat @ [x1, y1]
    """
    p_sq = p * p
    q_sq = q * q
    w    = 2.0 * np.sqrt(1.0 - p_sq - q_sq)
    rtp  = 1.0 - 2.0 * p_sq
    rtq  = 1.0 - 2.0 * q_sq
    rdg  = 2.0 * p * q

    return np.array([
      [rtp,    rdg  ],
      [rdg,    rtq  ],
      [-p * w, q * w],
    ])

  @staticmethod
  def pv_to_osculating(
    pos_vec : np.ndarray,
    vel_vec : np.ndarray,
    gp      : float,
  ) -> dict:
    """
    Osculating semi-major axis, eccentricity and inclination of a state.

    Input:
    ------
      pos_vec : np.ndarray
        Position vector.
      vel_vec : np.ndarray
        Velocity vector.
      gp : float
        Gravitational parameter in units consistent with the vectors.

    Output:
    -------
      coe : dict
        - sma : semi-major axis
        - ecc : eccentricity [-]
        - inc : inclination on the frame's xy-plane [rad]
    """
    pos_mag = np.linalg.norm(pos_vec)
    vel_mag = np.linalg.norm(vel_vec)

    ang_mom_vec = np.cross(pos_vec, vel_vec)
    ang_mom_mag = np.linalg.norm(ang_mom_vec)

    ecc_vec = ((vel_mag**2 - gp / pos_mag) * pos_vec - np.dot(pos_vec, vel_vec) * vel_vec) / gp
    sma     = 1.0 / (2.0 / pos_mag - vel_mag**2 / gp)

    return {
      'sma' : float(sma),
      'ecc' : float(np.linalg.norm(ecc_vec)),
      'inc' : float(np.arccos(ang_mom_vec[2] / ang_mom_mag)),
    }
