"""
Pytest Configuration and Fixtures
=================================

Shared fixtures for all validation tests.
"""
import pytest
import numpy as np

from pathlib import Path

from gust86.model.satellites         import Satellite
from gust86.input.loader             import load_supported_satellites
from gust86.propagation.gust86_orbit import Gust86Orbit


@pytest.fixture(scope="session")
def project_root():
  """Return the project root directory."""
  return Path(__file__).parent.parent.parent


@pytest.fixture(scope="session")
def supported_satellites():
  """Satellite properties from data/supported_satellites.yaml."""
  return load_supported_satellites()


@pytest.fixture(scope="session")
def orbits():
  """One J2000 GUST86 orbit per satellite."""
  return {satellite: Gust86Orbit(satellite) for satellite in Satellite}


@pytest.fixture(params=list(Satellite), ids=lambda satellite: satellite.display_name)
def satellite(request):
  """Parametrize a test over the five satellites."""
  return request.param


@pytest.fixture
def sample_times_s():
  """TDB seconds past J2000 for GUST86 day counts from -10000 to +10000."""
  time_d = np.linspace(-10000.0, 10000.0, 41) - 7305.5
  return time_d * 86400.0


@pytest.fixture(scope="session")
def iau_uranus_pole():
  """IAU (2009) Uranus north pole unit vector in J2000 equatorial coordinates."""
  ra  = np.deg2rad(257.311)
  dec = np.deg2rad(-15.175)
  return np.array([
    np.cos(dec) * np.cos(ra),
    np.cos(dec) * np.sin(ra),
    np.sin(dec),
  ])
