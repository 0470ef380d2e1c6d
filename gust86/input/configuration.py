from pathlib  import Path
from datetime import datetime
from types    import SimpleNamespace
from typing   import Optional

from gust86.model.constants      import ROTATIONS
from gust86.model.satellites     import Satellite
from gust86.model.time_converter import utc_to_tdb_seconds
from gust86.input.loader         import load_supported_satellites


DEFAULTS = {
  'satellites'           : None,
  'timespan'             : None,
  'step'                 : 3600.0,
  'frame'                : 'J2000',
  'theory'               : 'gust86',
  'compare_jpl_horizons' : False,
  'output_folderpath'    : '<project>/output',
}

SUPPORTED_THEORIES = ['gust86', 'mean']


def print_input_configuration(
  config : SimpleNamespace,
) -> None:
  """
  Print the input arguments in a formatted table.
  """
  timespan_str   = f"{config.time_o_dt.isoformat()} {config.time_f_dt.isoformat()}"
  satellites_str = ' '.join(satellite.display_name for satellite in config.satellites)

  # (name, value, default, user_set)
  entries = [
    ('satellites',           satellites_str,              DEFAULTS['satellites'],           True),
    ('timespan',             timespan_str,                DEFAULTS['timespan'],             True),
    ('step',                 config.step_s,               DEFAULTS['step'],                 config.step_s               != DEFAULTS['step']),
    ('frame',                config.frame,                DEFAULTS['frame'],                config.frame                != DEFAULTS['frame']),
    ('theory',               config.theory,               DEFAULTS['theory'],               config.theory               != DEFAULTS['theory']),
    ('compare_jpl_horizons', config.compare_jpl_horizons, DEFAULTS['compare_jpl_horizons'], config.compare_jpl_horizons != DEFAULTS['compare_jpl_horizons']),
    ('output_folderpath',    config.output_folderpath,    DEFAULTS['output_folderpath'],    config.output_folderpath_user_set),
  ]

  headers = ['Argument', 'Value', 'Default', 'User Set']
  rows    = [
    [name, str(value), str(default), str(user_set)]
    for name, value, default, user_set in entries
  ]

  # Column width: longest entry plus spacing
  min_spacing = 4
  col_widths  = [
    max(len(headers[col_idx]), *(len(row[col_idx]) for row in rows)) + min_spacing
    for col_idx in range(len(headers))
  ]

  print("\nInput Configuration")
  print("  " + "".join(header.ljust(col_widths[i]) for i, header in enumerate(headers)))
  print("  " + "".join(("-" * (col_widths[i] - min_spacing)).ljust(col_widths[i]) for i in range(len(headers))))
  for row in rows:
    print("  " + "".join(cell.ljust(col_widths[i]) for i, cell in enumerate(row)))


def print_paths(
  config : SimpleNamespace,
) -> None:
  """
  Print the output paths of the run.
  """
  print("\nPaths and Files Setup")
  print(f"  Output Folderpath      : {config.output_folderpath}")
  print(f"    Timestamp Folderpath : <output_folderpath>/{config.timestamp_folderpath.relative_to(config.output_folderpath)}")
  print(f"    Files Folderpath     : <output_folderpath>/{config.files_folderpath.relative_to(config.output_folderpath)}")
  print(f"    Log Filepath         : <output_folderpath>/{config.log_filepath.relative_to(config.output_folderpath)}")


def print_configuration(
  config : SimpleNamespace,
) -> None:
  """
  Print the complete configuration (input arguments and paths).
  """
  print_input_configuration(config)
  print_paths(config)


def setup_paths(
  output_folderpath : Optional[Path] = None,
) -> dict:
  """
  Set up the output folders of a run.

  Input:
  ------
    output_folderpath : Path | None
      Parent of the timestamped run folder. Defaults to <project_root>/output.

  Output:
  -------
    paths : dict
      output_folderpath, timestamp_folderpath, files_folderpath, log_filepath.
  """
  if output_folderpath is None:
    # Path traversal: input -> gust86 -> project_root
    project_root      = Path(__file__).parent.parent.parent
    output_folderpath = project_root / 'output'

  output_folderpath    = Path(output_folderpath)
  timestamp_str        = datetime.now().strftime("%Y%m%d_%H%M%S")
  timestamp_folderpath = output_folderpath / timestamp_str
  files_folderpath     = timestamp_folderpath / 'files'
  log_filepath         = timestamp_folderpath / 'log.txt'

  # Ensure output directory exists
  files_folderpath.mkdir(parents=True, exist_ok=True)

  return {
    'output_folderpath'    : output_folderpath,
    'timestamp_folderpath' : timestamp_folderpath,
    'files_folderpath'     : files_folderpath,
    'log_filepath'         : log_filepath,
  }


def normalize_input(
  satellites : list,
  frame      : str,
  theory     : str,
) -> tuple[list, str, str]:
  """
  Normalize and validate the satellite, frame and theory selections.

  Output:
  -------
    satellites : list[Satellite]
      Requested satellites, duplicates removed, request order kept.
    frame : str
      Upper-case frame name.
    theory : str
      Lower-case theory name.

  Raises:
  -------
    ValueError
      If any selection is not supported.
  """
  if not satellites:
    raise ValueError("At least one satellite is required.")

  # InvalidSatelliteIdentity is a ValueError
  satellite_list = []
  for value in satellites:
    satellite = Satellite.parse(value)
    if satellite not in satellite_list:
      satellite_list.append(satellite)

  frame = frame.strip().upper()
  if frame not in ROTATIONS.FRAME_TO_ROTATION:
    raise ValueError(f"Frame '{frame}' is not supported. Supported frames: {list(ROTATIONS.FRAME_TO_ROTATION.keys())}")

  theory = theory.strip().lower()
  if theory not in SUPPORTED_THEORIES:
    raise ValueError(f"Theory '{theory}' is not supported. Supported theories: {SUPPORTED_THEORIES}")

  return satellite_list, frame, theory


def build_config(
  satellites           : list,
  timespan_dt          : list[datetime],
  step                 : float          = 3600.0,
  frame                : str            = 'J2000',
  theory               : str            = 'gust86',
  compare_jpl_horizons : bool           = False,
  output_folderpath    : Optional[Path] = None,
) -> SimpleNamespace:
  """
  Parse, validate, and set up input parameters for ephemeris generation.

  Input:
  ------
    satellites : list
      Satellites to evaluate (members, indices or names).
    timespan_dt : list[datetime]
      Initial and final UTC time.
    step : float
      Output time step [s].
    frame : str
      Output frame, 'J2000' or 'ECLIPJ2000'.
    theory : str
      'gust86' (full series) or 'mean' (secular part only).
    compare_jpl_horizons : bool
      Flag to enable/disable JPL Horizons comparison.
    output_folderpath : Path | None
      Parent of the timestamped run folder.

  Output:
  -------
    config : SimpleNamespace
      Configuration object containing parsed and calculated parameters.

  Raises:
  -------
    ValueError
      If a satellite, frame or theory is not supported, the step is not
      positive or the timespan is inverted.
  """
  satellite_list, frame, theory = normalize_input(satellites, frame, theory)

  if not step > 0.0:
    raise ValueError(f"Time step must be positive, received {step} s.")

  if len(timespan_dt) != 2:
    raise ValueError("Timespan requires exactly 2 values: TIME_START TIME_END")
  time_o_dt, time_f_dt = timespan_dt
  if time_f_dt < time_o_dt:
    raise ValueError(f"Timespan end {time_f_dt.isoformat()} precedes start {time_o_dt.isoformat()}.")

  # Per-satellite properties (NAIF id, reference radius)
  supported_satellites = load_supported_satellites()
  satellite_props = {
    satellite.display_name : supported_satellites[satellite.name]
    for satellite in satellite_list
  }

  paths = setup_paths(output_folderpath)

  return SimpleNamespace(
    satellites                  = satellite_list,
    satellite_props             = satellite_props,
    time_o_dt                   = time_o_dt,
    time_f_dt                   = time_f_dt,
    time_o_s                    = utc_to_tdb_seconds(time_o_dt),
    time_f_s                    = utc_to_tdb_seconds(time_f_dt),
    delta_time_s                = (time_f_dt - time_o_dt).total_seconds(),
    step_s                      = float(step),
    frame                       = frame,
    theory                      = theory,
    compare_jpl_horizons        = compare_jpl_horizons,
    output_folderpath_user_set  = output_folderpath is not None,
    output_folderpath           = paths['output_folderpath'],
    timestamp_folderpath        = paths['timestamp_folderpath'],
    files_folderpath            = paths['files_folderpath'],
    log_filepath                = paths['log_filepath'],
  )
