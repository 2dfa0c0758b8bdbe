# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Weather API:
# - test_routes.py: HTTP surface through the in-process app
# - test_config.py: Settings and listen address parsing
# - test_server.py: Bootstrap, socket binding and exit codes
# - test_process.py: Real server process lifecycle (integration)
#
# Run tests with: pytest
# =============================================================================
