"""Tests for exceptions.py — hierarchy and exit codes."""

import pytest

from superthread_cli.exceptions import (
    ApiError,
    AuthenticationError,
    CliError,
    ClientError,
    ForbiddenError,
    HTTPError,
    NotFoundError,
    PathValidationError,
    RateLimitError,
    ServerError,
    SetupError,
    ValidationError,
)


class TestExitCodes:
    def test_cli_error_exits_1(self):
        assert CliError("x").exit_code == 1

    def test_setup_error_exits_2(self):
        assert SetupError("x").exit_code == 2

    def test_api_errors_exit_1(self):
        assert NotFoundError("gone", status=404).exit_code == 1


class TestHierarchy:
    @pytest.mark.parametrize(
        "cls",
        [ValidationError, AuthenticationError, ForbiddenError, NotFoundError, RateLimitError],
    )
    def test_4xx_errors_are_client_errors(self, cls):
        assert issubclass(cls, ClientError)
        assert issubclass(cls, ApiError)

    def test_server_error_is_not_client_error(self):
        assert issubclass(ServerError, ApiError)
        assert not issubclass(ServerError, ClientError)

    def test_everything_is_catchable_as_cli_error(self):
        for cls in (ApiError, SetupError, PathValidationError, RateLimitError):
            assert issubclass(cls, CliError)

    def test_http_error_is_not_a_cli_error(self):
        assert not issubclass(HTTPError, CliError)


class TestApiErrorFields:
    def test_fields(self):
        err = ApiError("HTTP 500: boom", status=500, body={"message": "boom"})
        assert str(err) == "HTTP 500: boom"
        assert err.message == "HTTP 500: boom"
        assert err.status == 500
        assert err.body == {"message": "boom"}

    def test_rate_limit_retry_after(self):
        err = RateLimitError("slow down", status=429, retry_after=30)
        assert err.retry_after == 30
        assert err.status == 429

    def test_rate_limit_retry_after_defaults_none(self):
        assert RateLimitError("slow down").retry_after is None

    def test_http_error_headers_default(self):
        err = HTTPError(404, "Not Found", "{}")
        assert err.headers == {}
        assert err.code == 404
