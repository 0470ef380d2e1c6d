"""
Ephemeris Propagation Package
=============================

Trajectory objects and batch evaluation of satellite ephemerides.
"""

from .gust86_orbit       import Gust86Orbit
from .mean_element_orbit import MeanElementOrbit
from .propagator         import build_time_grid, propagate_ephemeris, run_propagations

__all__ = ['Gust86Orbit', 'MeanElementOrbit', 'build_time_grid', 'propagate_ephemeris', 'run_propagations']
