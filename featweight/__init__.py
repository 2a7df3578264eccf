"""Feature weighting for 1-NN classification with RELIEF, local search, genetic and memetic algorithms."""

__version__ = "0.1.0"