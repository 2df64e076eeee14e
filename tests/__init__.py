"""
XenonClinic E2E Test Suite

Test categories:
- unit/ - Support library tests (no browser needed)
- e2e/  - Browser and API tests against a running application
"""
