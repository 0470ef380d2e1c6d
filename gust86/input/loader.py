import yaml
import numpy  as np
import pandas as pd

from pathlib import Path
from typing  import Optional

from astroquery.jplhorizons import Horizons

from gust86.model.constants      import CONVERTER, TIMESCALES
from gust86.model.time_converter import tdb_seconds_to_jd


# Uranus system barycenter is 7, Uranus body center is 799
HORIZONS_CENTER = '500@799'

# Epoch lists longer than this are split over several queries
HORIZONS_MAX_EPOCHS_PER_QUERY = 50


def load_supported_satellites(
  config_path : Optional[Path] = None,
) -> dict:
  """
  Load supported satellites from the YAML configuration file.

  Input:
  ------
    config_path : Path | None
      Path of the YAML file. Defaults to <project_root>/data/supported_satellites.yaml.

  Output:
  -------
    supported_satellites : dict
      Satellite properties keyed by upper-case name.

  Raises:
  -------
    FileNotFoundError
      If the YAML file does not exist.
  """
  if config_path is None:
    # Path traversal: input -> gust86 -> project_root
    project_root = Path(__file__).parent.parent.parent
    config_path  = project_root / 'data' / 'supported_satellites.yaml'

  if not config_path.exists():
    raise FileNotFoundError(f"Configuration file not found: {config_path}")

  with open(config_path, 'r') as f:
    return yaml.safe_load(f)


def query_horizons_vectors(
  naif_id   : int,
  epochs_jd : list,
) -> pd.DataFrame:
  """
  Query JPL Horizons for Uranus-centered state vectors.

  Input:
  ------
    naif_id : int
      NAIF id of the satellite (e.g. 703 for Titania).
    epochs_jd : list
      Epochs as TDB julian dates.

  Output:
  -------
    vectors_df : pd.DataFrame
      Horizons vectors table (x, y, z [AU], vx, vy, vz [AU/day], datetime_jd).
  """
  frames = []
  for idx in range(0, len(epochs_jd), HORIZONS_MAX_EPOCHS_PER_QUERY):
    obj = Horizons(
      id       = str(naif_id),
      location = HORIZONS_CENTER,
      epochs   = list(epochs_jd[idx:idx + HORIZONS_MAX_EPOCHS_PER_QUERY]),
    )
    vectors = obj.vectors(refplane='earth')
    frames.append(vectors.to_pandas())

  return pd.concat(frames, ignore_index=True)


def get_horizons_ephemeris(
  naif_id     : int,
  time_array  : np.ndarray,
  object_name : Optional[str] = None,
) -> dict:
  """
  Load the JPL Horizons ephemeris of a Uranian satellite on a time grid.

  Input:
  ------
    naif_id : int
      NAIF id of the satellite.
    time_array : np.ndarray
      TDB seconds past J2000.
    object_name : str | None
      Name used in the console output.

  Output:
  -------
    result : dict
      - success : False if the query failed (no network, unknown id, ...)
      - message : description
      - frame   : 'J2000'
      - time    : (N,) TDB seconds past J2000
      - state   : (6, N) Uranus-centered state [km, km/s], J2000 equatorial
  """
  display_name = object_name or str(naif_id)

  print("  JPL Horizons Ephemeris")
  print(f"    Target : {display_name} ({naif_id})")
  print(f"    Center : {HORIZONS_CENTER}")

  time_array = np.atleast_1d(np.asarray(time_array, dtype=float))
  epochs_jd  = [tdb_seconds_to_jd(time_s) for time_s in time_array]

  try:
    vectors_df = query_horizons_vectors(naif_id, epochs_jd)
  except Exception as e:
    print(f"    Status : Failed - {e}")
    return {
      'success' : False,
      'message' : f'JPL Horizons query failed: {e}',
    }

  if len(vectors_df) != len(time_array):
    print(f"    Status : Failed - {len(vectors_df)} of {len(time_array)} epochs returned")
    return {
      'success' : False,
      'message' : 'JPL Horizons returned an incomplete ephemeris',
    }

  vectors_df = vectors_df.sort_values('datetime_jd', ignore_index=True)

  time_s  = (vectors_df['datetime_jd'].to_numpy() - TIMESCALES.JD_J2000) * CONVERTER.SEC_PER_DAY
  pos_arr = vectors_df[[ 'x',  'y',  'z']].to_numpy().T * CONVERTER.KM_PER_AU
  vel_arr = vectors_df[['vx', 'vy', 'vz']].to_numpy().T * CONVERTER.KM_PER_SEC__PER__AU_PER_DAY

  print(f"    Status : Loaded {len(vectors_df)} epochs")

  return {
    'success' : True,
    'message' : 'Horizons ephemeris loaded successfully',
    'frame'   : 'J2000',
    'time'    : time_s,
    'state'   : np.vstack((pos_arr, vel_arr)),
  }
