"""
Authentication helpers.

UI scenarios log in through the login form; REST scenarios exchange the
same credentials for a bearer token.
"""

import logging
import re
from typing import Dict, Optional

from playwright.sync_api import APIRequestContext, Error as PlaywrightError, Page, expect

from .config import UserCredentials

logger = logging.getLogger(__name__)

USERNAME_LABEL = re.compile(r"username|email", re.IGNORECASE)
PASSWORD_LABEL = re.compile(r"password", re.IGNORECASE)
SUBMIT_BUTTON = re.compile(r"login|sign in", re.IGNORECASE)
LANDING_URL = re.compile(r"dashboard|home", re.IGNORECASE)

TOKEN_KEYS = ("token", "accessToken", "access_token")


def login(
    page: Page, user: UserCredentials, base_url: str = "", timeout: Optional[int] = None
) -> None:
    """Log in through the UI and wait for the landing page."""
    page.goto(f"{base_url}/login")
    page.get_by_label(USERNAME_LABEL).fill(user.email)
    page.get_by_label(PASSWORD_LABEL).fill(user.password)
    page.get_by_role("button", name=SUBMIT_BUTTON).click()
    expect(page).to_have_url(LANDING_URL, timeout=timeout)
    logger.debug("Logged in as %s", user.email)


def extract_token(payload) -> Optional[str]:
    """Pull a bearer token out of a login response body."""
    if not isinstance(payload, dict):
        return None
    for key in TOKEN_KEYS:
        value = payload.get(key)
        if isinstance(value, str) and value:
            return value
    data = payload.get("data")
    if isinstance(data, dict):
        return extract_token(data)
    return None


def get_api_token(
    request: APIRequestContext, user: UserCredentials, login_path: str = "/api/AuthApi/login"
) -> Optional[str]:
    """
    Exchange credentials for an API token.

    Returns None when the API rejects the credentials, is unreachable or
    answers without a token; callers skip rather than fail in that case.
    """
    try:
        response = request.post(login_path, data={"username": user.email, "password": user.password})
    except PlaywrightError as e:
        logger.warning("Token request to %s failed: %s", login_path, e)
        return None

    if not response.ok:
        logger.warning("Token request to %s returned %s", login_path, response.status)
        return None

    try:
        payload = response.json()
    except (PlaywrightError, ValueError) as e:
        logger.warning("Token response from %s is not JSON: %s", login_path, e)
        return None

    token = extract_token(payload)
    if token is None:
        logger.warning("Token response from %s has no token field", login_path)
    return token


def auth_headers(token: str) -> Dict[str, str]:
    return {
        "Authorization": f"Bearer {token}",
        "Content-Type": "application/json",
    }
