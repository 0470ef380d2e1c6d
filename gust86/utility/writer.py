import numpy  as np
import pandas as pd

from pathlib import Path

from gust86.model.time_converter import tdb_seconds_to_isot


EPHEMERIS_COLUMNS = [
  'time_s', 'utc',
  'pos_x', 'pos_y', 'pos_z',
  'vel_x', 'vel_y', 'vel_z',
]


def ephemeris_to_dataframe(
  result : dict,
) -> pd.DataFrame:
  """
  Tabulate a propagation result, one row per sample.

  Input:
  ------
    result : dict
      Propagation result with 'time' (N,) [s] and 'state' (6, N) [km, km/s].

  Output:
  -------
    ephemeris_df : pd.DataFrame
      Columns time_s, utc, pos_x..pos_z [km], vel_x..vel_z [km/s].
      Skipped samples keep NaN state values.
  """
  time_array = np.asarray(result['time'], dtype=float)
  state      = np.asarray(result['state'], dtype=float)

  ephemeris_df = pd.DataFrame({
    'time_s' : time_array,
    'utc'    : tdb_seconds_to_isot(time_array),
  })
  for row, column in enumerate(EPHEMERIS_COLUMNS[2:]):
    ephemeris_df[column] = state[row, :]

  return ephemeris_df


def write_ephemeris_csv(
  result   : dict,
  filepath : Path,
) -> Path:
  """
  Write a propagation result to a CSV file and return its path.
  """
  filepath = Path(filepath)
  filepath.parent.mkdir(parents=True, exist_ok=True)

  ephemeris_to_dataframe(result).to_csv(filepath, index=False, float_format='%.12e')

  return filepath
