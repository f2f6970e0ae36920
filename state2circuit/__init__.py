"""Wavefunction text to state vector, Q-sphere and circuit diagram."""

__version__ = "0.1.0"
