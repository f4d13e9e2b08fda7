"""Sample class hierarchies used by the test suite."""
