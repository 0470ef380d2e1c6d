"""
Validation Package
==================

Test suite for the GUST86 ephemeris.

Modules:
--------
- test_series          : Phase angles and perturbation series
- test_orbit_converter : Kepler solver and rectangular conversion
- test_frame_converter : Frame rotations and time conversions
- test_gust86_orbit    : Orbit facade properties over all satellites
- test_propagator      : Batch evaluation, time grids and comparisons
- test_configuration   : Command line and run configuration
- test_regression      : End-to-end run of the ephemeris generator
- test_horizons        : Comparison with JPL Horizons (network, opt-in)

Usage:
------
Run all tests:
  python -m pytest gust86/validation/ -v

Run a specific test module:
  python -m pytest gust86/validation/test_series.py -v

Run the JPL Horizons tests:
  GUST86_ONLINE_TESTS=1 python -m pytest gust86/validation/test_horizons.py -v
"""
