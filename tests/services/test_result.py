"""Tests for ServiceResult and ServiceError."""

import json

import pytest

from incrctl.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="increment", data={"result": 2})
        assert result.ok is True
        assert result.data == {"result": 2}
        assert result.warnings == []
        assert result.error is None

    def test_failure_helper(self) -> None:
        result = ServiceResult.failure("increment", "PARSE_ERROR", "bad", input="x")
        assert result.ok is False
        assert result.error == ServiceError(
            code="PARSE_ERROR", message="bad", detail={"input": "x"}
        )

    def test_json_serialization(self) -> None:
        result = ServiceResult(ok=True, op="increment", data={"result": 2})
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is True
        assert parsed["data"]["result"] == 2

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="test")
        with pytest.raises(Exception):
            result.ok = False  # type: ignore[misc]
