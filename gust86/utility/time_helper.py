"""
Time Utilities
==============

Parsing of command-line time strings and formatting of time spans.
"""
from datetime import datetime


def format_time_offset(
  seconds : float,
) -> str:
  """
  Format a signed time span as days, hours, minutes and seconds.

  Examples:
     90061.5 -> "+1d 01h 01m 01.500s"
    -3600.0  -> "-0d 01h 00m 00.000s"
  """
  sign    = '+' if seconds >= 0 else '-'
  abs_sec = abs(seconds)

  days, rem    = divmod(abs_sec, 86400.0)
  hours, rem   = divmod(rem, 3600.0)
  minutes, sec = divmod(rem, 60.0)

  return f"{sign}{int(days)}d {int(hours):02d}h {int(minutes):02d}m {sec:06.3f}s"


def parse_time(
  time_str : str,
) -> datetime:
  """
  Parse a UTC time string into a naive datetime object.

  Accepted formats include:
  - ISO 8601 with 'T' separator : "1986-01-24T17:59:00"
  - ISO 8601 with 'Z' suffix    : "1986-01-24T17:59:00Z"
  - Space-separated             : "1986-01-24 17:59:00"
  - Date only                   : "1986-01-24"

  Input:
  ------
    time_str : str
      Time string to parse.

  Output:
  -------
    time_dt : datetime
      Parsed datetime object.

  Raises:
  -------
    ValueError
      If the string matches none of the accepted formats.
  """
  time_str = time_str.strip()
  if time_str.endswith('Z'):
    time_str = time_str[:-1]

  try:
    return datetime.fromisoformat(time_str)
  except ValueError:
    pass

  for fmt in ("%Y-%m-%d %H:%M:%S.%f", "%Y-%m-%d %H:%M", "%Y %b %d %H:%M:%S"):
    try:
      return datetime.strptime(time_str, fmt)
    except ValueError:
      continue

  raise ValueError(f"Cannot parse time string: {time_str}")
