"""
Unit tests for the validate command-line interface.
"""

import json

import pytest

from form_validators.cli.validate_cli import EXIT_ERROR, EXIT_INVALID, EXIT_VALID, main
from form_validators.core.validators import EmailValidator


@pytest.fixture
def html_file(tmp_path, signup_html):
    path = tmp_path / "signup.html"
    path.write_text(signup_html)
    return path


@pytest.fixture
def data_file(tmp_path, valid_signup_data):
    path = tmp_path / "posted.json"
    path.write_text(json.dumps(valid_signup_data))
    return path


class TestValidateCommand:
    """Tests for `validate`"""

    def test_invalid_form_exit_code_and_markup(self, html_file, tmp_path):
        """Test empty form fails and annotated markup is written"""
        output = tmp_path / "out.html"

        code = main(["validate", "--input", str(html_file), "--form-selector", "#signup",
                     "--output", str(output)])

        assert code == EXIT_INVALID
        assert output.read_text().count('class="alert alert-danger"') == 5

    def test_valid_data(self, html_file, data_file, capsys):
        """Test valid submitted data passes and markup goes to stdout"""
        code = main(["validate", "--input", str(html_file), "--form-selector", "#signup",
                     "--data", str(data_file)])

        assert code == EXIT_VALID
        out = capsys.readouterr().out
        assert 'value="john"' in out
        assert "alert-danger" not in out

    def test_strong_password_flag(self, html_file, data_file, capsys):
        """Test --strong-password rejects the default-valid password"""
        code = main(["validate", "--input", str(html_file), "--form-selector", "#signup",
                     "--data", str(data_file), "--strong-password"])

        assert code == EXIT_INVALID

    def test_page_scope(self, html_file, data_file, capsys):
        """Test --scope page reaches the newsletter form"""
        code = main(["validate", "--input", str(html_file), "--form-selector", "#signup",
                     "--data", str(data_file), "--scope", "page"])

        assert code == EXIT_INVALID
        assert EmailValidator.default_message in capsys.readouterr().out

    def test_config_file(self, html_file, data_file, options_file, capsys):
        """Test options from a YAML file"""
        config = options_file("""
customEmailValidator:
  regex: "@example\\\\.org$"
  message: "Use your example.org address"
""")

        code = main(["validate", "--input", str(html_file), "--form-selector", "#signup",
                     "--data", str(data_file), "--config", str(config)])

        assert code == EXIT_INVALID
        assert "Use your example.org address" in capsys.readouterr().out

    def test_missing_input(self, tmp_path):
        """Test missing input file is a usage error"""
        assert main(["validate", "--input", str(tmp_path / "nope.html")]) == EXIT_ERROR

    def test_missing_form(self, html_file):
        """Test unmatched selector is a usage error"""
        assert main(["validate", "--input", str(html_file), "--form-selector", "#nope"]) == EXIT_ERROR


class TestRulesCommand:
    """Tests for `rules`"""

    def test_rules_summary(self, capsys):
        """Test rule summary JSON"""
        assert main(["rules", "--strong-password"]) == EXIT_VALID

        summary = json.loads(capsys.readouterr().out)
        assert summary["rule_order"] == ["required", "checked", "email", "phone", "password"]
        assert summary["strong_password"] is True

    def test_no_command(self, capsys):
        """Test missing subcommand prints help"""
        assert main([]) == EXIT_ERROR


class TestSubmittedData:
    """Tests for --data contents"""

    def test_non_object_data_is_usage_error(self, html_file, tmp_path):
        """Test a JSON list is rejected with the usage exit code"""
        data = tmp_path / "posted.json"
        data.write_text('["john", "secret123"]')

        assert main(["validate", "--input", str(html_file), "--form-selector", "#signup",
                     "--data", str(data)]) == EXIT_ERROR

    def test_scalar_values(self, html_file, tmp_path, valid_signup_data, capsys):
        """Test numbers and booleans in --data validate normally"""
        data = tmp_path / "posted.json"
        data.write_text(json.dumps({**valid_signup_data, "phone": 6035555555, "terms": True}))

        code = main(["validate", "--input", str(html_file), "--form-selector", "#signup",
                     "--data", str(data)])

        assert code == EXIT_VALID
        assert 'value="6035555555"' in capsys.readouterr().out

    def test_invalid_json_is_usage_error(self, html_file, tmp_path):
        """Test malformed JSON is rejected with the usage exit code"""
        data = tmp_path / "posted.json"
        data.write_text("{not json")

        assert main(["validate", "--input", str(html_file), "--data", str(data)]) == EXIT_ERROR
