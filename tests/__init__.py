# Tests for the evaporation simulator
#
# Test organization mirrors source structure:
#   - test_physics/: Unit tests for species, time dependence, fields,
#                    evaporation policies, conditions and trap setups
#
# Running tests:
#   pytest tests/
#   pytest tests/test_physics/ -v
#   pytest tests/ -k "gaussian"
