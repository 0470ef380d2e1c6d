import sys
import argparse

from typing import Optional

from gust86.utility.time_helper import parse_time


SATELLITE_CHOICES = ['miranda', 'ariel', 'umbriel', 'titania', 'oberon']


def build_parser(
) -> argparse.ArgumentParser:
  """
  Build the command-line parser of the GUST86 ephemeris generator.
  """
  parser = argparse.ArgumentParser(
    prog            = 'python -m gust86.main',
    description     = 'GUST86 ephemeris of the major Uranian satellites',
    formatter_class = argparse.RawDescriptionHelpFormatter,
  )

  parser.add_argument(
    '--satellites',
    dest     = 'satellites',
    nargs    = '+',
    type     = str.lower,
    choices  = SATELLITE_CHOICES,
    required = True,
    help     = 'Satellites to evaluate. Options: miranda, ariel, umbriel, titania, oberon',
  )
  parser.add_argument(
    '--timespan',
    dest     = 'timespan',
    type     = parse_time,
    nargs    = 2,
    metavar  = ('TIME_START', 'TIME_END'),
    required = True,
    help     = "Start and end time in UTC, ISO format (e.g. '1986-01-24T00:00:00 1986-01-25T00:00:00').",
  )
  parser.add_argument(
    '--step',
    dest    = 'step',
    type    = float,
    default = 3600.0,
    help    = 'Output time step in seconds (default: 3600).',
  )
  parser.add_argument(
    '--frame',
    dest    = 'frame',
    type    = str.upper,
    choices = ['J2000', 'ECLIPJ2000'],
    default = 'J2000',
    help    = 'Output frame: J2000 (Earth mean equator) or ECLIPJ2000 (default: J2000).',
  )
  parser.add_argument(
    '--theory',
    dest    = 'theory',
    type    = str.lower,
    choices = ['gust86', 'mean'],
    default = 'gust86',
    help    = 'Full GUST86 series or its secular part only (default: gust86).',
  )
  parser.add_argument(
    '--compare-horizons',
    '--compare-jpl-horizons',
    dest    = 'compare_jpl_horizons',
    action  = 'store_true',
    default = False,
    help    = 'Enable comparison with JPL Horizons ephemeris (disabled by default).',
  )
  parser.add_argument(
    '--output-folderpath',
    dest    = 'output_folderpath',
    type    = str,
    default = None,
    help    = 'Folder receiving the timestamped run folders (default: <project>/output).',
  )

  return parser


def parse_command_line_arguments(
  argv : Optional[list] = None,
) -> argparse.Namespace:
  """
  Parse command-line arguments.

  Input:
  ------
    argv : list | None
      Arguments to parse. Reads sys.argv when None.

  Output:
  -------
    args : argparse.Namespace
      Parsed command-line arguments.
  """
  parser = build_parser()

  # If no arguments provided, print help and exit
  if argv is None and len(sys.argv) == 1:
    parser.print_help(sys.stderr)
    sys.exit(1)

  return parser.parse_args(argv)
