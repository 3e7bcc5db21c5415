"""Error Hierarchy: categories, status dispatch and response envelopes.

Tests:
    - Each concrete error carries the right kind, and the kind alone picks the status
    - to_response() never embeds the underlying exception
"""

from biztime.core.errors import (
    BadRequestError,
    BizTimeError,
    DatabaseError,
    ErrorCategory,
    ResourceNotFoundError,
    UnknownCompanyError,
    status_for,
)


def test_status_table():
    assert status_for(ErrorCategory.VALIDATION) == 400
    assert status_for(ErrorCategory.RESOURCE_NOT_FOUND) == 404
    assert status_for(ErrorCategory.DATABASE) == 500
    assert status_for(ErrorCategory.INTERNAL) == 500


def test_not_found_error_names_resource():
    err = ResourceNotFoundError("Company", "mac")
    assert err.message == "Company 'mac' not found"
    assert err.category == ErrorCategory.RESOURCE_NOT_FOUND
    assert err.http_status == 404
    context = err.to_response()["error"]["context"]
    assert context["resource_type"] == "Company"
    assert context["resource_id"] == "mac"


def test_unknown_company_is_validation_error():
    err = UnknownCompanyError("nope")
    assert isinstance(err, BadRequestError)
    assert err.http_status == 400
    assert err.code == "UNKNOWN_COMPANY"
    assert err.field == "comp_code"
    assert err.to_response()["error"]["context"]["resource_id"] == "nope"


def test_bad_request_error_records_field():
    err = BadRequestError("missing name", "name")
    body = err.to_response()["error"]
    assert body["category"] == "validation"
    assert body["context"]["field"] == "name"


def test_database_error_is_server_side():
    err = DatabaseError("Integrity constraint violated", "commit")
    assert isinstance(err, BizTimeError)
    assert err.http_status == 500
    assert err.operation == "commit"
    assert err.message == "Database commit failed: Integrity constraint violated"
