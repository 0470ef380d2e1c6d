import numpy as np

from typing import Union

from gust86.model.constants                import CONVERTER
from gust86.model.errors                   import NumericalNonConvergence
from gust86.model.orbit_converter          import OrbitConverter
from gust86.model.satellites               import Satellite
from gust86.propagation.trajectory         import Trajectory
from gust86.propagation.gust86_orbit       import Gust86Orbit
from gust86.propagation.mean_element_orbit import MeanElementOrbit
from gust86.utility.time_helper            import format_time_offset


THEORIES = {
  'gust86' : Gust86Orbit,
  'mean'   : MeanElementOrbit,
}


def build_time_grid(
  time_o : float,
  time_f : float,
  step   : float,
) -> np.ndarray:
  """
  Build a uniform evaluation grid from time_o to time_f inclusive.

  Input:
  ------
    time_o : float
      Initial time [s].
    time_f : float
      Final time [s]. Always the last grid point, even when the span is not
      a multiple of the step.
    step : float
      Grid spacing [s].

  Output:
  -------
    time_array : np.ndarray
      Grid times [s].

  Raises:
  -------
    ValueError
      If step is not positive or time_f precedes time_o.
  """
  if not step > 0.0:
    raise ValueError(f"Time step must be positive, received {step}.")
  if time_f < time_o:
    raise ValueError(f"Final time {time_f} precedes initial time {time_o}.")

  num_steps  = int(np.floor((time_f - time_o) / step + 1e-9))
  time_array = time_o + step * np.arange(num_steps + 1)

  # A remainder below a millionth of a step snaps the last sample onto time_f
  if time_f - time_array[-1] > 1e-6 * step:
    time_array = np.append(time_array, time_f)
  else:
    time_array[-1] = time_f

  return time_array


def build_trajectory(
  satellite : Union[Satellite, int, str],
  theory    : str = 'gust86',
  frame     : str = 'J2000',
) -> Trajectory:
  """
  Create the trajectory object for a satellite and theory ('gust86' or 'mean').
  """
  theory_key = theory.strip().lower()
  if theory_key not in THEORIES:
    raise ValueError(f"Theory '{theory}' is not supported. Supported theories: {list(THEORIES.keys())}")
  return THEORIES[theory_key](satellite, frame=frame)


def propagate_ephemeris(
  trajectory : Trajectory,
  time_array : np.ndarray,
) -> dict:
  """
  Evaluate a trajectory over a time grid.

  Samples whose Kepler iteration does not converge are recorded as skipped
  and left as NaN columns; evaluation continues with the next sample.

  Input:
  ------
    trajectory : Trajectory
      Object with a state(time_s) method.
    time_array : np.ndarray
      TDB seconds past J2000.

  Output:
  -------
    result : dict
      - success : True when at least one sample was evaluated
      - message : summary of the evaluation
      - frame   : output frame of the trajectory
      - time    : (N,) time grid [s]
      - state   : (6, N) position [km] and velocity [km/s]
      - skipped : indices of the samples left as NaN
      - coe     : osculating sma [km], ecc [-] and inc [rad] per sample
  """
  time_array = np.atleast_1d(np.asarray(time_array, dtype=float))
  num_steps  = len(time_array)

  state   = np.full((6, num_steps), np.nan)
  skipped = []
  for idx, time_s in enumerate(time_array):
    try:
      state[:, idx] = trajectory.state(time_s).as_array()
    except NumericalNonConvergence:
      skipped.append(idx)

  num_evaluated = num_steps - len(skipped)
  if num_steps == 0:
    message = 'Empty time grid'
  elif skipped:
    message = f'{num_evaluated} of {num_steps} samples evaluated, {len(skipped)} skipped (Kepler non-convergence)'
  else:
    message = f'{num_steps} samples evaluated'

  return {
    'success' : num_evaluated > 0,
    'message' : message,
    'frame'   : trajectory.frame,
    'time'    : time_array,
    'state'   : state,
    'skipped' : skipped,
    'coe'     : osculating_elements(trajectory, state),
  }


def osculating_elements(
  trajectory : Trajectory,
  state      : np.ndarray,
) -> dict:
  """
  Osculating sma [km], ecc [-] and inc [rad] of each state column.
  NaN columns stay NaN.
  """
  gp = getattr(trajectory, 'gravitational_parameter', None)

  num_steps = state.shape[1]
  coe = {
    'sma' : np.full(num_steps, np.nan),
    'ecc' : np.full(num_steps, np.nan),
    'inc' : np.full(num_steps, np.nan),
  }
  if gp is None:
    return coe

  # [AU³/day²] -> [km³/s²]
  gp_km = gp * CONVERTER.KM_PER_AU**3 / CONVERTER.SEC_PER_DAY**2

  for idx in range(num_steps):
    if np.any(np.isnan(state[:, idx])):
      continue
    coe_idx = OrbitConverter.pv_to_osculating(state[0:3, idx], state[3:6, idx], gp_km)
    for key in coe:
      coe[key][idx] = coe_idx[key]

  return coe


def run_propagations(
  satellites : list,
  time_array : np.ndarray,
  theory     : str = 'gust86',
  frame      : str = 'J2000',
) -> dict:
  """
  Evaluate every requested satellite over the same time grid.

  Input:
  ------
    satellites : list
      Satellites (members, indices or names).
    time_array : np.ndarray
      TDB seconds past J2000.
    theory : str
      'gust86' (full series) or 'mean' (secular part only).
    frame : str
      Output frame, 'J2000' or 'ECLIPJ2000'.

  Output:
  -------
    results : dict
      Propagation result per satellite display name.
  """
  print("\nEphemeris Evaluation")
  print(f"  Theory : {theory}")
  print(f"  Frame  : {frame}")
  if len(time_array) > 0:
    print(f"  Grid   : {len(time_array)} samples spanning {format_time_offset(time_array[-1] - time_array[0])}")

  results = {}
  for satellite in satellites:
    trajectory = build_trajectory(satellite, theory, frame)
    result     = propagate_ephemeris(trajectory, time_array)

    result['name'] = trajectory.name
    results[trajectory.name] = result

    print(f"  {trajectory.name:<8} : {result['message']}")

  return results
