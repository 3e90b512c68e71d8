"""Simulation and analysis of the partisan voter model, with result-file output and PCG bit helpers."""

__version__ = "0.1.0"