"""
XenonClinic E2E Test Suite

End-to-end browser and API tests using Playwright against a running
XenonClinic instance (E2E_BASE_URL, default http://localhost:5173).

Structure:
    conftest.py            - Fixtures and configuration
    pages/                 - Page Object Models
    test_auth.py           - Login tests
    test_pharmacy.py       - Pharmacy module
    test_radiology.py      - Radiology module
    test_sales.py          - Sales module and sales statistics
    test_quotations.py     - Quotations module
    test_dashboard.py      - Dashboard statistics
    test_accessibility.py  - Keyboard, ARIA and mobile layout
    test_api.py            - REST status-code contracts

Running Tests:
    # Install dependencies
    pip install -e ".[test]"
    playwright install chromium

    # Run all tests
    pytest tests/e2e/

    # Run with visible browser
    pytest tests/e2e/ --headed

    # Run specific browser
    pytest tests/e2e/ --browser firefox

    # Run smoke tests only
    pytest tests/e2e/ -m smoke

    # Against CI settings (fails instead of skipping when the app is down)
    E2E_ENV=ci pytest tests/e2e/
"""
