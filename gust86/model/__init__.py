"""
Model Package
=============

GUST86 constants, perturbation series, Kepler solver and frame rotations.
"""
