"""
Pytest configuration and fixtures for form-validators tests

This module provides shared fixtures for unit tests.
"""
import pytest

from form_validators.core.form import FormDocument


# =======================
# PYTEST CONFIGURATION
# =======================

def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests that don't require external services"
    )


# =======================
# DOCUMENT FIXTURES
# =======================

SIGNUP_HTML = """<html><body>
<form id="signup" action="/signup" method="post">
  <input type="text" name="username" validator="required" value="">
  <input type="email" name="email" validator="email" value="">
  <input type="tel" name="phone" validator="phone" value="">
  <input type="password" name="password" validator="password" value="">
  <input type="checkbox" name="terms" validator="checked" value="yes">
  <input type="text" name="nickname" value="">
</form>
<form id="newsletter">
  <input type="email" name="subscriber" validator="email" value="not-an-email">
</form>
</body></html>"""


@pytest.fixture
def signup_html() -> str:
    """Markup with a signup form and a second, unrelated form"""
    return SIGNUP_HTML


@pytest.fixture
def document(signup_html) -> FormDocument:
    """Freshly parsed signup document"""
    return FormDocument(signup_html)


@pytest.fixture
def valid_signup_data() -> dict:
    """Submitted values that pass every default rule"""
    return {
        "username": "john",
        "email": "john@somedomain.com",
        "phone": "(603) 555-5555",
        "password": "secret123",
        "terms": "yes",
    }


@pytest.fixture
def options_file(tmp_path):
    """Write a YAML options file and return its path"""
    def _write(content: str):
        path = tmp_path / "validators.yaml"
        path.write_text(content)
        return path
    return _write
