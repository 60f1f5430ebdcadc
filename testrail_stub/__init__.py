"""Local TestRail API stub for integration tests and demos."""
