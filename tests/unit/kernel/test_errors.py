"""Unit tests for kernel error hierarchy."""

from __future__ import annotations

import json

import pytest

from fleetlist.kernel.errors import (
    ApplicationError,
    BaseError,
    BusinessFilterEvaluationError,
    DomainError,
    DuplicateResolverError,
    InfrastructureError,
    InternalError,
    RegistryFrozenError,
    RegistryMismatchError,
    StorageError,
    ValidationError,
)


class TestBaseError:
    def test_message_is_stored(self) -> None:
        err = BaseError("something went wrong")
        assert err.message == "something went wrong"

    def test_default_code(self) -> None:
        assert BaseError("m").code == "base_error"

    def test_custom_code(self) -> None:
        err = BaseError("m", code="custom")
        assert err.code == "custom"

    def test_to_dict_basic(self) -> None:
        err = BaseError("m", code="my_code", detail={"key": "val"})
        assert err.to_dict() == {"code": "my_code", "message": "m", "detail": {"key": "val"}}

    def test_to_dict_includes_cause_repr(self) -> None:
        err = BaseError("wrapper", cause=ValueError("original"))
        assert "original" in err.to_dict()["cause"]

    def test_cause_sets_dunder_cause(self) -> None:
        cause = RuntimeError("root")
        err = BaseError("wrap", cause=cause)
        assert err.__cause__ is cause

    def test_str_is_valid_json(self) -> None:
        err = BaseError("oops", code="oops", detail={"x": 1})
        parsed = json.loads(str(err))
        assert parsed["code"] == "oops"
        assert parsed["detail"] == {"x": 1}

    def test_repr_contains_code_and_message(self) -> None:
        r = repr(BaseError("hello", code="hi"))
        assert "hi" in r
        assert "hello" in r


class TestValidationError:
    def test_is_domain_error(self) -> None:
        assert issubclass(ValidationError, DomainError)

    def test_stores_errors(self) -> None:
        err = ValidationError("invalid", errors=[{"field": "businessFilters.foo", "message": "unknown"}])
        d = err.to_dict()
        assert d["errors"][0]["field"] == "businessFilters.foo"
        assert d["code"] == "validation_error"

    def test_empty_errors_default(self) -> None:
        assert ValidationError("bad input").errors == []

    def test_for_field_builds_single_entry(self) -> None:
        err = ValidationError.for_field("bad sort", "sortBy", "must be one of: name")
        assert err.errors == [{"field": "sortBy", "message": "must be one of: name"}]
        assert err.message == "bad sort"

    def test_for_field_forwards_cause(self) -> None:
        root = ValueError("x")
        err = ValidationError.for_field("bad", "filters.seats", "not a number", cause=root)
        assert err.__cause__ is root

    def test_fields_lists_paths_in_order(self) -> None:
        err = ValidationError(
            "bad",
            errors=[
                {"field": "businessFilters.a", "message": "unknown"},
                {"field": "businessFilters.b", "message": "unknown"},
            ],
        )
        assert err.fields == ["businessFilters.a", "businessFilters.b"]


class TestApplicationErrors:
    def test_internal_error_is_application_error(self) -> None:
        assert issubclass(InternalError, ApplicationError)

    def test_evaluation_error_is_internal(self) -> None:
        assert issubclass(BusinessFilterEvaluationError, InternalError)
        assert not issubclass(BusinessFilterEvaluationError, ValidationError)

    def test_evaluation_error_names_resolver(self) -> None:
        err = BusinessFilterEvaluationError("status", cause=TypeError("naive datetime"))
        assert err.resolver == "status"
        assert err.detail == {"resolver": "status"}
        assert "status" in err.message
        assert err.code == "business_filter_evaluation_failed"

    def test_duplicate_resolver(self) -> None:
        err = DuplicateResolverError("status", "vehicle_document")
        assert err.name == "status"
        assert err.registry == "vehicle_document"
        assert "already registered" in err.message

    def test_registry_mismatch_lists_names(self) -> None:
        err = RegistryMismatchError("vehicle", missing=["missingDocs"], unexpected=["extra"])
        assert err.detail["missing"] == ["missingDocs"]
        assert err.detail["unexpected"] == ["extra"]

    def test_registry_frozen_code(self) -> None:
        assert RegistryFrozenError("frozen").code == "registry_frozen"


class TestInfrastructureErrors:
    def test_storage_error_default_message(self) -> None:
        err = StorageError("Vehicle")
        assert "Vehicle" in err.message
        assert err.resource == "Vehicle"
        assert isinstance(err, InfrastructureError)

    def test_cause_chaining(self) -> None:
        root = OSError("disk full")
        err = StorageError("Vehicle", cause=root)
        assert err.__cause__ is root
        assert "cause" in err.to_dict()

    def test_raises(self) -> None:
        with pytest.raises(InfrastructureError):
            raise StorageError("VehicleDocument", "connection reset")
