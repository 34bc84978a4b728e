"""goldsphere-contracts — shared data contracts for the GoldSphere platform."""

__version__ = "0.4.0"
