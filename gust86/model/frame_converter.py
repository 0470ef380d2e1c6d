import numpy as np

from gust86.model.constants import CONVERTER, ROTATIONS


class FrameConverter:
  @staticmethod
  def gust86_to(
    frame : str = 'J2000',
  ) -> np.ndarray:
    """
    Get the fixed rotation matrix from the GUST86 Uranus-equatorial frame.

    Input:
    ------
      frame : str
        Target frame name, 'J2000' or 'ECLIPJ2000' (case-insensitive).

    Output:
    -------
      rot_mat : np.ndarray
        3x3 read-only rotation matrix such that: target_vec = rot_mat @ gust86_vec

    Raises:
    -------
      ValueError
        If the frame is not supported.
    """
    key = frame.strip().upper() if isinstance(frame, str) else None
    if key not in ROTATIONS.FRAME_TO_ROTATION:
      raise ValueError(
        f"Frame '{frame}' is not supported. Supported frames: {list(ROTATIONS.FRAME_TO_ROTATION.keys())}"
      )
    return ROTATIONS.FRAME_TO_ROTATION[key]

  @staticmethod
  def gust86_to_target(
    pos_vec : np.ndarray,
    vel_vec : np.ndarray,
    frame   : str = 'J2000',
  ) -> tuple[np.ndarray, np.ndarray]:
    """
    Rotate a native GUST86 state into the target frame and rescale its units.

    Input:
    ------
      pos_vec : np.ndarray
        Position vector in the GUST86 frame [AU].
      vel_vec : np.ndarray
        Velocity vector in the GUST86 frame [AU/day].
      frame : str
        Target frame name, 'J2000' (default) or 'ECLIPJ2000'.

    Output:
    -------
      pos_vec : np.ndarray
        Position vector in the target frame [km].
      vel_vec : np.ndarray
        Velocity vector in the target frame [km/s].
    """
    rot_mat = FrameConverter.gust86_to(frame)

    target_pos_vec = (rot_mat @ pos_vec) * CONVERTER.KM_PER_AU
    target_vel_vec = (rot_mat @ vel_vec) * CONVERTER.KM_PER_SEC__PER__AU_PER_DAY

    return target_pos_vec, target_vel_vec
