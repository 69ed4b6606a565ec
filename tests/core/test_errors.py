"""Error Hierarchy — codes, categories, statuses and the REST envelope."""

from memolab.core.errors import (
    ErrorCategory,
    ErrorContext,
    InvalidArgumentError,
    MemoLabError,
    NavigationAbandonedError,
    NetworkError,
    ResourceNotFoundError,
)


def test_all_errors_share_base():
    for error in (
        InvalidArgumentError("bad", "n"),
        ResourceNotFoundError("Route", "/x"),
        NetworkError("down", "https://example.test"),
        NavigationAbandonedError("/github", "/about"),
    ):
        assert isinstance(error, MemoLabError)


def test_invalid_argument_is_400_validation():
    error = InvalidArgumentError("bad", "n")
    assert error.http_status == 400
    assert error.code == "INVALID_ARGUMENT"
    assert error.category is ErrorCategory.VALIDATION


def test_network_error_carries_status_and_url():
    error = NetworkError("Failed", "https://api.test/users/x", status_code=404)
    assert error.http_status == 502
    assert error.code == "NETWORK_ERROR"
    assert error.status_code == 404
    assert error.url == "https://api.test/users/x"


def test_navigation_abandoned_records_path():
    error = NavigationAbandonedError("/github", "/about")
    assert error.http_status == 409
    assert error.context.path == "/github"
    assert error.superseded_by == "/about"


def test_to_response_envelope():
    error = ResourceNotFoundError(
        "Demo session", "abc", ErrorContext(session_id="abc"),
    )
    body = error.to_response()["error"]
    assert body["code"] == "RESOURCE_NOT_FOUND"
    assert body["message"] == "Demo session 'abc' not found"
    assert body["category"] == "resource_not_found"
    assert body["severity"] == "error"
    assert body["context"]["session_id"] == "abc"
    assert "timestamp" in body
