from gust86.propagation.gust86_orbit import Gust86Orbit


class MeanElementOrbit(Gust86Orbit):
  """
  Secular approximation of a GUST86 orbit.

  Keeps the mean motion bias, the linear mean longitude and the free
  eccentricity and inclination modes (terms whose argument contains no mean
  longitude angle). Forced terms from the mutual perturbations are dropped.
  """
  include_forced = False
