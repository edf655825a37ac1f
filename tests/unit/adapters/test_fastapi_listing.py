"""Unit tests for the FastAPI listing router and exception mapper."""
from __future__ import annotations

import json
from typing import Any

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from fleetlist.adapters.fastapi import FastAPIExceptionMapper, FastAPIListingRouter
from fleetlist.application.business_filters import BusinessFilterEngine, BusinessFilterRegistry
from fleetlist.application.listing import ListingPipeline
from fleetlist.application.query import ListingPolicy, QueryArgs, StorageQueryBuilder
from fleetlist.domain.vehicles import vehicle_pipeline
from fleetlist.kernel.errors import StorageError, ValidationError
from fleetlist.testing.fakes import InMemoryListingStore

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

VEHICLE_ROWS = [
    {"id": "v1", "name": "Tipper", "license_plate": "KA-01", "documents": []},
    {
        "id": "v2",
        "name": "City van",
        "license_plate": "KA-02",
        "category": {"name": "Light"},
        "documents": [{"id": "d1", "document_type": {"name": "Insurance"}}],
    },
    {"id": "v3", "name": "Pickup", "license_plate": "MH-03", "documents": []},
]


def make_app(pipeline: ListingPipeline[Any], path: str = "/vehicles") -> FastAPI:
    app = FastAPI()
    FastAPIExceptionMapper().register(app)
    app.include_router(FastAPIListingRouter(path, pipeline))
    return app


def vehicle_client() -> TestClient:
    return TestClient(make_app(vehicle_pipeline(InMemoryListingStore(VEHICLE_ROWS))))


class FailingStore:
    async def fetch(self, args: QueryArgs) -> tuple[list[Any], int]:
        raise StorageError("vehicles", cause=RuntimeError("connection reset"))


def _raising_pipeline(store: Any) -> ListingPipeline[Any]:
    registry: BusinessFilterRegistry[Any] = BusinessFilterRegistry("thing")
    registry.register("boom", "Always raises", lambda row, v: row["nope"])
    return ListingPipeline(
        store=store,
        mapper=dict,
        builder=StorageQueryBuilder(ListingPolicy(entity="thing")),
        engine=BusinessFilterEngine(registry.freeze()),
    )


# ---------------------------------------------------------------------------
# FastAPIListingRouter
# ---------------------------------------------------------------------------


class TestFastAPIListingRouter:
    def test_lists_all(self) -> None:
        resp = vehicle_client().get("/vehicles")
        assert resp.status_code == 200
        body = resp.json()
        assert body["total"] == 3
        assert [item["id"] for item in body["items"]] == ["v1", "v2", "v3"]
        assert body["items"][1]["categoryName"] == "Light"

    def test_search_and_pagination(self) -> None:
        resp = vehicle_client().get("/vehicles", params={"search": "ka-", "take": "1", "skip": "1"})
        body = resp.json()
        assert body["total"] == 2
        assert [item["id"] for item in body["items"]] == ["v2"]

    def test_business_filter_json_param(self) -> None:
        params = {"businessFilters": json.dumps({"unassigned": True})}
        body = vehicle_client().get("/vehicles", params=params).json()
        assert [item["id"] for item in body["items"]] == ["v1", "v3"]
        assert body["total"] == 3

    def test_missing_docs_filter(self) -> None:
        params = {"businessFilters": json.dumps({"missingDocs": {"list": ["Insurance"], "mode": "AND"}})}
        body = vehicle_client().get("/vehicles", params=params).json()
        assert [item["id"] for item in body["items"]] == ["v1", "v3"]

    def test_unknown_business_filter_is_400(self) -> None:
        params = {"businessFilters": json.dumps({"colour": "red"})}
        resp = vehicle_client().get("/vehicles", params=params)
        assert resp.status_code == 400
        body = resp.json()
        assert body["code"] == "validation_error"
        assert body["detail"]["unknown"] == ["colour"]
        assert body["errors"][0]["field"] == "businessFilters.colour"

    def test_malformed_json_is_400(self) -> None:
        resp = vehicle_client().get("/vehicles", params={"filters": "{oops"})
        assert resp.status_code == 400

    def test_invalid_order_is_400(self) -> None:
        resp = vehicle_client().get("/vehicles", params={"sortBy": "name", "order": "up"})
        assert resp.status_code == 400
        assert resp.json()["errors"][0]["field"] == "order"

    def test_business_filters_endpoint(self) -> None:
        resp = vehicle_client().get("/vehicles/business-filters")
        assert resp.status_code == 200
        assert set(resp.json()) == {"unassigned", "missingDocs"}

    def test_predicate_error_is_500_without_cause(self) -> None:
        client = TestClient(make_app(_raising_pipeline(InMemoryListingStore([{"id": 1}])), "/things"))
        resp = client.get("/things", params={"businessFilters": json.dumps({"boom": 1})})
        assert resp.status_code == 500
        body = resp.json()
        assert body["code"] == "business_filter_evaluation_failed"
        assert body["detail"] == {"resolver": "boom"}
        assert "cause" not in body

    def test_storage_error_is_503(self) -> None:
        client = TestClient(make_app(_raising_pipeline(FailingStore()), "/things"))
        resp = client.get("/things")
        assert resp.status_code == 503
        assert resp.json()["code"] == "storage_error"
        assert "cause" not in resp.json()


# ---------------------------------------------------------------------------
# FastAPIExceptionMapper
# ---------------------------------------------------------------------------


class TestFastAPIExceptionMapper:
    def test_validation_error_listed_before_domain_error(self) -> None:
        statuses = [status for _, status in FastAPIExceptionMapper().mappings]
        assert statuses == [400, 422, 500, 500, 503]

    def test_validation_error_body(self) -> None:
        app = FastAPI()
        FastAPIExceptionMapper().register(app)

        @app.get("/bad")
        async def bad() -> dict[str, str]:
            raise ValidationError("nope", errors=[{"field": "x", "message": "bad"}])

        resp = TestClient(app).get("/bad")
        assert resp.status_code == 400
        assert resp.json() == {
            "code": "validation_error",
            "message": "nope",
            "detail": {},
            "errors": [{"field": "x", "message": "bad"}],
        }

    @pytest.mark.parametrize("path", ["/vehicles", "/vehicles/business-filters"])
    def test_routes_registered(self, path: str) -> None:
        paths = {route.path for route in make_app(vehicle_pipeline(InMemoryListingStore())).routes}
        assert path in paths
