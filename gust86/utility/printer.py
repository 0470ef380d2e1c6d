import numpy as np

from typing import Optional

from gust86.model.time_converter import tdb_seconds_to_utc
from gust86.model.constants      import CONVERTER, PRINTFORMATTER


def print_results_summary(
  results     : dict,
  comparisons : Optional[dict] = None,
) -> None:
  """
  Print a summary of the ephemeris results.

  Input:
  ------
    results : dict
      Propagation result per satellite name.
    comparisons : dict | None
      JPL Horizons comparison per satellite name, when requested.
  """
  sci = PRINTFORMATTER.SCIENTIFIC_NOTATION
  fix = PRINTFORMATTER.FIXED_POINT

  comparisons = comparisons or {}

  print("\nResults Summary")
  for name, result in results.items():
    print(f"  {name}")

    if not result.get('success'):
      print(f"    Status : Failed - {result.get('message')}")
      continue

    # Last evaluated sample
    valid_idx = np.flatnonzero(~np.isnan(result['state'][0, :]))
    idx_f     = valid_idx[-1]

    time_s_f  = result['time'][idx_f]
    pos_vec_f = result['state'][0:3, idx_f]
    vel_vec_f = result['state'][3:6, idx_f]

    print(f"    Final State")
    print(f"      Epoch    : {tdb_seconds_to_utc(time_s_f)} UTC ({time_s_f:.6f} s TDB)")
    print(f"      Frame    : {result['frame']}")
    print(f"      Position : {pos_vec_f[0]:{sci}}  {pos_vec_f[1]:{sci}}  {pos_vec_f[2]:{sci}} km")
    print(f"      Velocity : {vel_vec_f[0]:{sci}}  {vel_vec_f[1]:{sci}}  {vel_vec_f[2]:{sci}} km/s")

    coe = result.get('coe')
    if coe is not None:
      print(f"    Osculating Elements")
      print(f"      SMA : {coe['sma'][idx_f]:{sci}} km")
      print(f"      ECC : {coe['ecc'][idx_f]:{sci}}")
      print(f"      INC : {coe['inc'][idx_f] * CONVERTER.DEG_PER_RAD:{sci}} deg")

    print(f"    Skipped Samples : {len(result['skipped'])}")

    comparison = comparisons.get(name)
    if comparison is None:
      continue
    print(f"    JPL Horizons Comparison")
    if not comparison.get('success'):
      print(f"      Status    : {comparison.get('message')}")
      continue
    print(f"      Pos Error : RMS {comparison['pos_error_rms']:{fix}} km    Max {comparison['pos_error_max']:{fix}} km")
    print(f"      Vel Error : RMS {comparison['vel_error_rms']:{fix}} km/s  Max {comparison['vel_error_max']:{fix}} km/s")
