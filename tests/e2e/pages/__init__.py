"""
Page Object Models for Playwright E2E Tests

This package provides page objects that encapsulate UI interactions
and provide a clean API for test code.
"""

from .base_page import BasePage
from .dashboard_page import DashboardPage
from .login_page import LoginPage
from .pharmacy_page import PharmacyPage
from .quotations_page import QuotationsPage
from .radiology_page import RadiologyPage
from .sales_page import SalesPage
