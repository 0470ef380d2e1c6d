"""
GUST86 Package
==============

Analytic ephemeris of the five major Uranian satellites (Miranda, Ariel,
Umbriel, Titania, Oberon) from the GUST86 theory of Laskar & Jacobson (1987).

Usage:
------
  from gust86 import Gust86Orbit

  orbit = Gust86Orbit('titania')
  state = orbit.state(0.0)  # TDB seconds past J2000
  state.pos_vec             # [km], Earth mean equator and equinox of J2000
  state.vel_vec             # [km/s]
"""

from .model.errors                  import InvalidSatelliteIdentity, NumericalNonConvergence
from .model.satellites              import Satellite
from .propagation.trajectory        import StateVector, Trajectory
from .propagation.gust86_orbit      import Gust86Orbit
from .propagation.mean_element_orbit import MeanElementOrbit

__all__ = [
  'Gust86Orbit',
  'MeanElementOrbit',
  'Satellite',
  'StateVector',
  'Trajectory',
  'InvalidSatelliteIdentity',
  'NumericalNonConvergence',
]
