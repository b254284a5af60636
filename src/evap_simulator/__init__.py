# Evaporation Simulator: Field and Loss Models for Cold-Atom Evaporative Cooling
#
# Physics inputs for a Monte-Carlo evaporation simulation of a cold neutral
# atom cloud held in optical and gravitational fields.
#
# Layers:
#   physics: Species data, time-dependent fields, evaporation policies and
#            the SimulationConditions record handed to the integrator
#
# The time integrator and collision engine live outside this package and
# consume the callables assembled here.

__version__ = "0.1.0"
