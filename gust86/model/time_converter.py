import numpy as np

from datetime     import datetime
from astropy.time import Time as AstropyTime

from gust86.model.constants import CONVERTER, TIMESCALES


def utc_to_tdb_seconds(
  utc_dt : datetime,
) -> float:
  """
  Convert a UTC datetime object to TDB seconds past J2000.

  Input:
  ------
    utc_dt : datetime
      The UTC datetime to convert (naive datetimes are read as UTC).

  Output:
  -------
    time_s : float
      The corresponding TDB time in seconds past J2000 (JD 2451545.0 TDB).
  """
  time_tdb = AstropyTime(utc_dt, scale='utc').tdb

  # Split the julian date to keep sub-millisecond resolution
  delta_days = (time_tdb.jd1 - TIMESCALES.JD_J2000) + time_tdb.jd2
  return float(delta_days * CONVERTER.SEC_PER_DAY)


def tdb_seconds_to_utc(
  time_s            : float,
  precision_seconds : int = 0,
) -> datetime:
  """
  Convert TDB seconds past J2000 to a UTC datetime object.

  Input:
  ------
    time_s : float
      TDB time in seconds past J2000.
    precision_seconds : int
      Number of decimal places kept in the seconds component (0-6).

  Output:
  -------
    utc_dt : datetime
      UTC time as a naive datetime object.
  """
  # Ensure precision doesn't exceed 6 for datetime compatibility
  precision_seconds = min(max(precision_seconds, 0), 6)

  time_tdb = AstropyTime(
    TIMESCALES.JD_J2000,
    time_s / CONVERTER.SEC_PER_DAY,
    format = 'jd',
    scale  = 'tdb',
  )
  time_utc           = time_tdb.utc
  time_utc.precision = precision_seconds

  return datetime.fromisoformat(time_utc.isot)


def tdb_seconds_to_jd(
  time_s : float,
) -> float:
  """
  Convert TDB seconds past J2000 to a TDB julian date.
  """
  return TIMESCALES.JD_J2000 + time_s / CONVERTER.SEC_PER_DAY


def tdb_seconds_to_isot(
  time_array : np.ndarray,
  precision  : int = 3,
) -> np.ndarray:
  """
  Convert an array of TDB seconds past J2000 to UTC ISO strings.

  Input:
  ------
    time_array : np.ndarray
      TDB seconds past J2000.
    precision : int
      Number of decimal places in the seconds component.

  Output:
  -------
    utc_isot : np.ndarray
      UTC strings formatted as 'YYYY-MM-DDThh:mm:ss.sss'.
  """
  if len(time_array) == 0:
    return np.array([], dtype=str)

  time_tdb = AstropyTime(
    np.full(len(time_array), TIMESCALES.JD_J2000),
    np.asarray(time_array, dtype=float) / CONVERTER.SEC_PER_DAY,
    format = 'jd',
    scale  = 'tdb',
  )
  time_utc           = time_tdb.utc
  time_utc.precision = precision
  return np.asarray(time_utc.isot)
