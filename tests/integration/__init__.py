"""Integration tests for nasr-airports.

Integration tests validate components with external dependencies:
- Live downloads from the FAA NASR subscription site
- File system operations on real cycle archives

Require NASR_LIVE_TESTS=1 (environment or .env).

Run with: pytest tests/integration/ -m integration -v -s
Skip in CI: pytest -m "not integration"
"""
