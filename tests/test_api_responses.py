"""Tests for Result → HTTP response conversion and DTOs."""

import json

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from resultkit.core import (
    Error,
    ErrorType,
    Outcome,
    PagedInfo,
    PagedResult,
    Result,
    ResultStateError,
    ResultStatus,
    UnsupportedStatusError,
)
from resultkit.api import (
    HTTP_STATUS_CODES,
    PROBLEM_MEDIA_TYPE,
    result_to_dto,
    returns_result,
    status_code_for,
    to_accepted_response,
    to_bad_request_response,
    to_conflict_response,
    to_created_response,
    to_critical_error_response,
    to_forbidden_response,
    to_no_content_response,
    to_not_found_response,
    to_ok_response,
    to_problem_details,
    to_problem_response,
    to_response,
    to_response_with_status,
    to_unauthorized_response,
    to_unavailable_response,
    to_unsupported_response,
)


def _body(response) -> dict:
    return json.loads(response.body)


# ---------------------------------------------------------------------------
# Status mapping
# ---------------------------------------------------------------------------


class TestStatusCodes:
    def test_every_status_is_mapped(self) -> None:
        assert set(HTTP_STATUS_CODES) == set(ResultStatus)

    @pytest.mark.parametrize(
        ("status", "code"),
        [
            (ResultStatus.SUCCESS, 200),
            (ResultStatus.NO_CONTENT, 204),
            (ResultStatus.FAILURE, 400),
            (ResultStatus.INVALID, 400),
            (ResultStatus.VALIDATION_ERROR, 400),
            (ResultStatus.UNAUTHORIZED, 401),
            (ResultStatus.FORBIDDEN, 403),
            (ResultStatus.NOT_FOUND, 404),
            (ResultStatus.CONFLICT, 409),
            (ResultStatus.CRITICAL_ERROR, 500),
            (ResultStatus.UNSUPPORTED, 501),
            (ResultStatus.UNAVAILABLE, 503),
        ],
    )
    def test_mapping(self, status: ResultStatus, code: int) -> None:
        assert status_code_for(status) == code

    def test_unknown_status(self) -> None:
        with pytest.raises(UnsupportedStatusError):
            status_code_for("Bogus")  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# to_response
# ---------------------------------------------------------------------------


class TestToResponse:
    def test_success_body(self) -> None:
        response = to_response(Result.success({"id": 1}, "found"))
        body = _body(response)
        assert response.status_code == 200
        assert body["status"] == "Success"
        assert body["is_success"] is True
        assert body["value"] == {"id": 1}
        assert body["success_message"] == "found"
        assert body["errors"] == []

    def test_not_found_body(self) -> None:
        response = to_response(Result.not_found("user 1 not found"))
        body = _body(response)
        assert response.status_code == 404
        assert body["status"] == "NotFound"
        assert body["errors"] == [{
            "message": "user 1 not found",
            "code": None,
            "error_type": "NotFound",
            "metadata": {},
        }]

    @pytest.mark.parametrize("result", [Result.forbidden("no"), Outcome.no_content()])
    def test_bodyless_statuses(self, result) -> None:
        response = to_response(result)
        assert response.body == b""

    def test_outcome_has_no_value_key(self) -> None:
        body = _body(to_response(Outcome.conflict("dup")))
        assert set(body) == {
            "status", "is_success", "errors", "success_message", "metadata", "correlation_id",
        }

    def test_paged_result_body(self, page_info: PagedInfo) -> None:
        body = _body(to_response(PagedResult.success(["a"], page_info)))
        assert body["has_paged_info"] is True
        assert body["paged_info"]["page_number"] == 2
        assert body["paged_info"]["has_previous_page"] is True

    def test_metadata_and_correlation_are_serialized(self) -> None:
        result = Result.success(1).with_correlation_id("c-1")
        result.add_or_update_metadata("Tags", ("a",))
        body = _body(to_response(result))
        assert body["correlation_id"] == "c-1"
        assert body["metadata"] == {"Tags": ["a"]}

    def test_with_status_overrides_code(self) -> None:
        response = to_response_with_status(Outcome.forbidden("no"), 418)
        assert response.status_code == 418
        assert _body(response)["status"] == "Forbidden"


# ---------------------------------------------------------------------------
# Success-only responses
# ---------------------------------------------------------------------------


class TestSuccessOnlyResponses:
    def test_ok(self) -> None:
        assert to_ok_response(Result.success(1)).status_code == 200

    def test_ok_rejects_failure(self) -> None:
        with pytest.raises(ResultStateError):
            to_ok_response(Result.failure("x"))

    def test_created(self) -> None:
        response = to_created_response(Result.success({"id": 9}), "/users/9")
        assert response.status_code == 201
        assert response.headers["location"] == "/users/9"
        assert _body(response) == {"id": 9}

    def test_accepted(self) -> None:
        response = to_accepted_response(Result.success("queued"), "/jobs/1")
        assert response.status_code == 202
        assert response.headers["location"] == "/jobs/1"

    def test_created_rejects_no_content(self) -> None:
        with pytest.raises(ResultStateError):
            to_created_response(Result.no_content(), "/x")

    @pytest.mark.parametrize("result", [Result.success(1), Outcome.no_content()])
    def test_no_content(self, result) -> None:
        assert to_no_content_response(result).status_code == 204

    def test_no_content_rejects_failure(self) -> None:
        with pytest.raises(ResultStateError):
            to_no_content_response(Result.invalid("x"))


# ---------------------------------------------------------------------------
# Failure-only responses
# ---------------------------------------------------------------------------

FAILURE_HELPERS = [
    (to_bad_request_response, Result.failure("bad"), 400),
    (to_bad_request_response, Result.validation_error("bad field"), 400),
    (to_unauthorized_response, Result.unauthorized("login"), 401),
    (to_not_found_response, Result.not_found("gone"), 404),
    (to_conflict_response, Outcome.conflict("dup"), 409),
    (to_critical_error_response, Result.critical_error("crash"), 500),
    (to_unsupported_response, Result.unsupported("nope"), 501),
    (to_unavailable_response, Result.unavailable("down"), 503),
]


class TestFailureOnlyResponses:
    @pytest.mark.parametrize(("helper", "result", "code"), FAILURE_HELPERS)
    def test_matching_status(self, helper, result, code: int) -> None:
        response = helper(result)
        assert response.status_code == code
        assert _body(response)["status"] == result.status.value

    @pytest.mark.parametrize(("helper", "result", "code"), FAILURE_HELPERS)
    def test_success_is_rejected(self, helper, result, code: int) -> None:
        with pytest.raises(ResultStateError):
            helper(Result.success(1))

    @pytest.mark.parametrize(
        ("helper", "result"),
        [
            (to_bad_request_response, Result.invalid("x")),
            (to_unauthorized_response, Result.forbidden("x")),
            (to_not_found_response, Result.conflict("x")),
            (to_conflict_response, Result.not_found("x")),
            (to_critical_error_response, Result.failure("x")),
            (to_unsupported_response, Result.unavailable("x")),
            (to_unavailable_response, Result.unsupported("x")),
            (to_forbidden_response, Result.unauthorized("x")),
        ],
    )
    def test_other_failure_status_is_rejected(self, helper, result) -> None:
        with pytest.raises(ResultStateError):
            helper(result)

    def test_forbidden_is_bodyless(self) -> None:
        response = to_forbidden_response(Result.forbidden("no"))
        assert response.status_code == 403
        assert response.body == b""

    def test_paged_result_keeps_body_shape(self) -> None:
        body = _body(to_not_found_response(PagedResult.not_found("no page")))
        assert body["has_paged_info"] is False
        assert body["errors"][0]["message"] == "no page"


# ---------------------------------------------------------------------------
# Problem Details
# ---------------------------------------------------------------------------


class TestProblemDetails:
    def test_failure(self) -> None:
        problem = to_problem_details(Result.not_found("a", "b"), instance="/users/1")
        assert problem is not None
        assert problem.status == 404
        assert problem.title == "Not Found (NotFound)"
        assert problem.detail == "a, b"
        assert problem.instance == "/users/1"
        assert problem.type == "about:blank"

    def test_success_has_no_problem(self) -> None:
        assert to_problem_details(Result.success(1)) is None

    def test_problem_response_media_type(self) -> None:
        response = to_problem_response(Outcome.unavailable("db down"))
        assert response.status_code == 503
        assert response.headers["content-type"].startswith(PROBLEM_MEDIA_TYPE)
        assert _body(response)["detail"] == "db down"

    def test_problem_response_for_success(self) -> None:
        assert to_problem_response(Result.success(1)).status_code == 200


class TestDto:
    def test_error_metadata_is_json_safe(self) -> None:
        error = Error("bad", error_type=ErrorType.INVALID)
        error.add_or_update_metadata("AttemptedValue", ("x", 1))
        dto = result_to_dto(Result.invalid(error))
        assert dto.model_dump()["errors"][0]["metadata"] == {"AttemptedValue": ["x", 1]}

    def test_rejects_non_result(self) -> None:
        with pytest.raises(TypeError):
            result_to_dto({"status": "Success"})  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# returns_result decorator
# ---------------------------------------------------------------------------


class TestReturnsResult:
    @pytest.fixture
    def client(self) -> TestClient:
        app = FastAPI()
        users = {1: {"id": 1, "name": "kim"}}

        @app.get("/users/{user_id}")
        @returns_result
        def get_user(user_id: int) -> Result[dict]:
            if user_id not in users:
                return Result.not_found(f"User {user_id} not found")
            return Result.success(users[user_id])

        @app.delete("/users/{user_id}")
        @returns_result
        async def delete_user(user_id: int) -> Outcome:
            return Outcome.no_content()

        @app.get("/plain")
        @returns_result
        def plain() -> dict:
            return {"ok": True}

        return TestClient(app)

    def test_sync_success(self, client: TestClient) -> None:
        response = client.get("/users/1")
        assert response.status_code == 200
        assert response.json()["value"] == {"id": 1, "name": "kim"}

    def test_sync_failure(self, client: TestClient) -> None:
        response = client.get("/users/2")
        assert response.status_code == 404
        assert response.json()["errors"][0]["message"] == "User 2 not found"

    def test_async_endpoint(self, client: TestClient) -> None:
        assert client.delete("/users/1").status_code == 204

    def test_path_parameters_are_still_validated(self, client: TestClient) -> None:
        assert client.get("/users/abc").status_code == 422

    def test_non_result_passes_through(self, client: TestClient) -> None:
        assert client.get("/plain").json() == {"ok": True}
