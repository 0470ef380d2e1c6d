import numpy as np


class CONVERTER:
  # Angle Conversions
  RAD_PER_DEG = 3.141592653589793 / 180.0  # [radian] per [degree]
  DEG_PER_RAD = 180.0 / 3.141592653589793  # [degree] per [radian]
  TWO_PI      = 2.0 * 3.141592653589793    # [radian] per [revolution]

  # Time Conversions
  SEC_PER_DAY   = 86400.0                  # [seconds] per [day]
  DAY_PER_JYEAR = 365.25                   # [days] per [julian year]

  # Distance Conversions
  KM_PER_AU = 149597870.7                  # [kilometers] per [astronomical unit]

  # Velocity Conversions
  KM_PER_SEC__PER__AU_PER_DAY = KM_PER_AU / SEC_PER_DAY  # [kilometers/second] per [astronomical units/day]


class TIMESCALES:
  JD_J2000  = 2451545.0   # J2000.0 epoch [julian date, TDB]
  JD_GUST86 = 2444239.5   # GUST86 reference epoch, 1980-01-01 0h [julian date, TDB]

  # Offset added to a J2000 day count to obtain the GUST86 day count
  GUST86_DAYS_AFTER_J2000 = JD_J2000 - JD_GUST86  # [days]


def _read_only(
  values : list,
) -> np.ndarray:
  """
  Build a float array that cannot be modified after creation.
  """
  array = np.array(values, dtype=float)
  array.flags.writeable = False
  return array


class GUST86CONSTANTS:
  """
  Literal constants of the GUST86 theory of the Uranian satellites
  (Laskar & Jacobson, 1987, Astron. Astrophys. 188, 212-224).

  Notes:
  ------
    Table rows are indexed by the Satellite enumeration:
      0 Miranda, 1 Ariel, 2 Umbriel, 3 Titania, 4 Oberon
  """

  class FREQUENCY:
    # Mean longitude frequencies [rad/day]
    N = _read_only([
      4.44519055,
      2.492952519,
      1.516148111,
      0.721718509,
      0.46669212,
    ])

    # Proper pericenter frequencies [rad/day], published in [deg/year]
    E = _read_only([
      20.082 * CONVERTER.RAD_PER_DEG / CONVERTER.DAY_PER_JYEAR,
       6.217 * CONVERTER.RAD_PER_DEG / CONVERTER.DAY_PER_JYEAR,
       2.865 * CONVERTER.RAD_PER_DEG / CONVERTER.DAY_PER_JYEAR,
       2.078 * CONVERTER.RAD_PER_DEG / CONVERTER.DAY_PER_JYEAR,
       0.386 * CONVERTER.RAD_PER_DEG / CONVERTER.DAY_PER_JYEAR,
    ])

    # Proper node frequencies [rad/day], published in [deg/year]
    I = _read_only([
      -20.309 * CONVERTER.RAD_PER_DEG / CONVERTER.DAY_PER_JYEAR,
       -6.288 * CONVERTER.RAD_PER_DEG / CONVERTER.DAY_PER_JYEAR,
       -2.836 * CONVERTER.RAD_PER_DEG / CONVERTER.DAY_PER_JYEAR,
       -1.843 * CONVERTER.RAD_PER_DEG / CONVERTER.DAY_PER_JYEAR,
       -0.259 * CONVERTER.RAD_PER_DEG / CONVERTER.DAY_PER_JYEAR,
    ])

  class PHASE:
    # Phases at the GUST86 epoch [rad]
    N = _read_only([-0.238051, 3.098046, 2.285402, 0.856359, -0.915592])
    E = _read_only([ 0.611392, 2.408974, 2.067774, 0.735131,  0.426767])
    I = _read_only([ 5.702313, 0.395757, 0.589326, 1.746237,  4.206896])

  # Gravitational parameter of Uranus + satellite [AU³/day²]
  GP = _read_only([
    1.291892353675174e-08,
    1.291910570526396e-08,
    1.291910102284198e-08,
    1.291942656265575e-08,
    1.291935967091320e-08,
  ])

  # Bounding sphere radius used for render culling [km]
  BOUNDING_RADIUS = _read_only([
    1.4e5,
    2.0e5,
    2.7e5,
    4.4e5,
    5.9e5,
  ])


class ROTATIONS:
  """
  Fixed rotations out of the GUST86 Uranus-equatorial frame.
  Each matrix maps native vectors as: target_vec = rot_mat @ gust86_vec
  """

  # Earth mean equator and equinox of J2000
  GUST86_TO_J2000 = _read_only([
    [ 9.753205572598290957e-01,  6.194437810676107434e-02,  2.119261772583629030e-01],
    [-2.207428547845518695e-01,  2.529905336992995280e-01,  9.419492459363773150e-01],
    [ 4.733143558215848563e-03, -9.654836528287313313e-01,  2.604206471702025216e-01],
  ])

  # Dynamical ecliptic and equinox of J2000 (VSOP87 frame)
  GUST86_TO_ECLIPJ2000 = _read_only([
    [ 9.753206632086812015e-01,  6.194425668001473004e-02,  2.119257251551559653e-01],
    [-2.006444610981783542e-01, -1.519328516640849367e-01,  9.678110398294910731e-01],
    [ 9.214881523275189928e-02, -9.864478281437795399e-01, -1.357544776485127136e-01],
  ])

  FRAME_TO_ROTATION = {
    'J2000'      : GUST86_TO_J2000,
    'ECLIPJ2000' : GUST86_TO_ECLIPJ2000,
  }


class PRINTFORMATTER:
  SCIENTIFIC_NOTATION = '>19.12e'  # e.g. ' 1.234567890123e+05'
  FIXED_POINT         = '>14.6f'   # e.g. '   1234.567890'
