import numpy as np


def compare_ephemerides(
  result_ref  : dict,
  result_test : dict,
  atol_time   : float = 1e-3,
) -> dict:
  """
  Compare two ephemeris results sampled on the same time grid.

  Input:
  ------
    result_ref : dict
      Reference result with 'time' (N,) [s] and 'state' (6, N) [km, km/s].
    result_test : dict
      Result to compare, same layout and time grid.
    atol_time : float
      Tolerance when matching the two time grids [s].

  Output:
  -------
    comparison : dict
      - success       : False if either input failed or the grids differ
      - message       : description
      - time          : (N,) shared time grid [s]
      - pos_error     : (N,) position error norm [km]
      - vel_error     : (N,) velocity error norm [km/s]
      - pos_error_rms : RMS position error over valid samples [km]
      - pos_error_max : max position error over valid samples [km]
      - vel_error_rms : RMS velocity error over valid samples [km/s]
      - vel_error_max : max velocity error over valid samples [km/s]
      - num_valid     : number of samples present in both results
  """
  if not result_ref.get('success') or not result_test.get('success'):
    return {
      'success' : False,
      'message' : 'Comparison skipped: an input ephemeris is unavailable',
    }

  time_ref  = np.asarray(result_ref['time'],  dtype=float)
  time_test = np.asarray(result_test['time'], dtype=float)
  if time_ref.shape != time_test.shape or not np.allclose(time_ref, time_test, rtol=0.0, atol=atol_time):
    return {
      'success' : False,
      'message' : 'Comparison skipped: time grids do not match',
    }

  delta_state = np.asarray(result_test['state'], dtype=float) - np.asarray(result_ref['state'], dtype=float)
  pos_error   = np.linalg.norm(delta_state[0:3, :], axis=0)
  vel_error   = np.linalg.norm(delta_state[3:6, :], axis=0)

  valid = ~np.isnan(pos_error) & ~np.isnan(vel_error)
  if not np.any(valid):
    return {
      'success' : False,
      'message' : 'Comparison skipped: no sample present in both ephemerides',
    }

  return {
    'success'       : True,
    'message'       : f'{int(valid.sum())} samples compared',
    'time'          : time_ref,
    'pos_error'     : pos_error,
    'vel_error'     : vel_error,
    'pos_error_rms' : float(np.sqrt(np.mean(pos_error[valid]**2))),
    'pos_error_max' : float(np.max(pos_error[valid])),
    'vel_error_rms' : float(np.sqrt(np.mean(vel_error[valid]**2))),
    'vel_error_max' : float(np.max(vel_error[valid])),
    'num_valid'     : int(valid.sum()),
  }
