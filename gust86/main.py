"""
GUST86 Ephemeris Generator

Description:
  This script evaluates the GUST86 analytic theory (Laskar & Jacobson, 1987)
  for the five major Uranian satellites over a time grid and writes their
  Uranus-centered states to CSV files.

  The script performs the following steps:
  1. Builds and prints the configuration, and starts the run log.
  2. Evaluates every requested satellite on the time grid.
  3. Writes one ephemeris CSV file per satellite.
  4. Compares against the JPL Horizons ephemeris (if requested).
  5. Prints a results summary.

Usage:

  Argument                Required   Description
  ----------------------  --------   --------------------------------------------------
  --satellites            Yes        Satellites to evaluate (e.g. miranda titania)
  --timespan              Yes        Start and end time (UTC, ISO format)
  --step                  No         Output time step in seconds (default 3600)
  --frame                 No         J2000 or ECLIPJ2000 (default J2000)
  --theory                No         gust86 or mean (default gust86)
  --compare-jpl-horizons  No         Compare against JPL Horizons
  --output-folderpath     No         Parent folder of the run output

  Example Commands:
    python -m gust86.main \
      --satellites <name> [<name> ...] \
      --timespan <start> <end> \
      [--step <seconds>] \
      [--frame J2000] \
      [--theory gust86] \
      [--compare-jpl-horizons]

    python -m gust86.main \
      --satellites miranda ariel umbriel titania oberon \
      --timespan 1986-01-24T00:00:00 1986-01-25T00:00:00 \
      --step 600 \
      --compare-jpl-horizons
"""
from pathlib  import Path
from datetime import datetime
from typing   import Optional

from gust86.input.cli                import parse_command_line_arguments
from gust86.input.configuration      import build_config, print_configuration
from gust86.input.loader             import get_horizons_ephemeris
from gust86.propagation.propagator   import build_time_grid, run_propagations
from gust86.propagation.comparison   import compare_ephemerides
from gust86.utility.logger           import start_logging, stop_logging
from gust86.utility.printer          import print_results_summary
from gust86.utility.writer           import write_ephemeris_csv


def run_horizons_comparisons(
  results         : dict,
  satellite_props : dict,
) -> dict:
  """
  Compare every successful ephemeris with JPL Horizons on the same grid.

  Input:
  ------
    results : dict
      Propagation result per satellite name.
    satellite_props : dict
      Satellite properties (naif_id, ...) per satellite name.

  Output:
  -------
    comparisons : dict
      Comparison result per satellite name.
  """
  print("\nJPL Horizons Comparison")

  comparisons = {}
  for name, result in results.items():
    result_jpl_horizons_ephemeris = get_horizons_ephemeris(
      naif_id     = satellite_props[name]['naif_id'],
      time_array  = result['time'],
      object_name = name,
    )
    comparisons[name] = compare_ephemerides(
      result_ref  = result_jpl_horizons_ephemeris,
      result_test = result,
    )
  return comparisons


def main(
  satellites           : list,
  timespan             : list[datetime],
  step                 : float          = 3600.0,
  frame                : str            = 'J2000',
  theory               : str            = 'gust86',
  compare_jpl_horizons : bool           = False,
  output_folderpath    : Optional[Path] = None,
) -> dict:
  """
  Main function to generate GUST86 ephemerides.

  Input:
  ------
    satellites : list
      Satellites to evaluate (members, indices or names).
    timespan : list[datetime]
      Start and end time as UTC datetime objects.
    step : float
      Output time step [s].
    frame : str
      Output frame, 'J2000' or 'ECLIPJ2000'.
    theory : str
      'gust86' (full series) or 'mean' (secular part only).
    compare_jpl_horizons : bool
      Flag to enable/disable comparison with JPL Horizons.
    output_folderpath : Path | None
      Parent of the timestamped run folder.

  Output:
  -------
    result : dict
      - success     : True if every satellite was evaluated
      - message     : description
      - config      : run configuration
      - ephemerides : propagation result per satellite name
      - comparisons : Horizons comparison per satellite name (empty if disabled)
      - files       : CSV filepath per satellite name
  """
  # Process inputs and setup
  config = build_config(
    satellites           = satellites,
    timespan_dt          = timespan,
    step                 = step,
    frame                = frame,
    theory               = theory,
    compare_jpl_horizons = compare_jpl_horizons,
    output_folderpath    = output_folderpath,
  )

  # Start logging to file
  logger = start_logging(config.log_filepath)

  try:
    print_configuration(config)

    # Evaluate ephemerides
    time_array = build_time_grid(config.time_o_s, config.time_f_s, config.step_s)
    results    = run_propagations(
      satellites = config.satellites,
      time_array = time_array,
      theory     = config.theory,
      frame      = config.frame,
    )

    # Write files
    print("\nOutput Files")
    files = {}
    for name, result in results.items():
      filepath    = config.files_folderpath / f"{name.lower()}_{config.theory}_{config.frame.lower()}.csv"
      files[name] = write_ephemeris_csv(result, filepath)
      print(f"  {name:<8} : <output_folderpath>/{filepath.relative_to(config.output_folderpath)}")

    # Compare with JPL Horizons
    comparisons = {}
    if config.compare_jpl_horizons:
      comparisons = run_horizons_comparisons(results, config.satellite_props)

    print_results_summary(results, comparisons)

  finally:
    stop_logging(logger)

  failed = [name for name, result in results.items() if not result['success']]
  return {
    'success'     : not failed,
    'message'     : f"Evaluation failed for: {', '.join(failed)}" if failed else 'Ephemerides generated',
    'config'      : config,
    'ephemerides' : results,
    'comparisons' : comparisons,
    'files'       : files,
  }


if __name__ == "__main__":
  # Parse command-line arguments
  args = parse_command_line_arguments()

  # Run main function
  main(
    satellites           = args.satellites,
    timespan             = args.timespan,
    step                 = args.step,
    frame                = args.frame,
    theory               = args.theory,
    compare_jpl_horizons = args.compare_jpl_horizons,
    output_folderpath    = args.output_folderpath,
  )
