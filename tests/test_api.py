"""Tests for API endpoints."""

import pytest
from fastapi.testclient import TestClient

from trimsheet.api import app
from trimsheet.api.dependencies import get_load_plan_service
from trimsheet.config import Settings
from trimsheet.data.synthetic import TrimSheetWorkbookGenerator
from trimsheet.domain import AircraftType
from trimsheet.services import LoadPlanService
from trimsheet.workbook import ARM_MOMENT_COMPUTATION, ULD_MASTER_TABLE

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


@pytest.fixture
def client():
    """Create test client."""
    return TestClient(app)


def workbook_bytes(generator, *args, **kwargs) -> bytes:
    return TrimSheetWorkbookGenerator.to_bytes(generator.generate(*args, **kwargs))


class TestHealthEndpoints:
    """Tests for health endpoints."""

    def test_root(self, client):
        """Test root endpoint."""
        response = client.get("/")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert "version" in data

    def test_health(self, client):
        """Test health check endpoint."""
        response = client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert "services" in data


class TestAircraftEndpoints:
    """Tests for aircraft endpoints."""

    def test_list_aircraft(self, client):
        """Test listing supported aircraft."""
        response = client.get("/api/v1/aircraft/")

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 3
        assert {a["aircraft_type"] for a in data["aircraft"]} == {"A320", "B737", "B777"}

    def test_get_aircraft(self, client):
        """Test getting one profile."""
        response = client.get("/api/v1/aircraft/b777")

        assert response.status_code == 200
        data = response.json()
        assert data["main_deck_positions"] == 6
        assert data["lower_deck_positions"] == 6

    def test_get_aircraft_not_found(self, client):
        """Test unsupported aircraft."""
        response = client.get("/api/v1/aircraft/a380")

        assert response.status_code == 404
        assert response.json()["detail"] == "Aircraft A380 not supported"


class TestLoadPlanEndpoints:
    """Tests for load plan endpoints."""

    def test_upload(self, client, generator):
        """Test uploading a workbook."""
        data = workbook_bytes(generator, AircraftType.B737)

        response = client.post(
            "/api/v1/load-plans/",
            files={"file": ("plan.xlsx", data, XLSX_MEDIA_TYPE)},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["load_plan"]["aircraft"]["type_code"] == "B737"
        assert body["load_plan"]["flight_info"]["flight_number"] == "CA-8042"
        assert body["summary"]["total_ulds"] == 4
        assert body["summary"]["uld_type_counts"] == {"AKE": 4}
        assert body["summary"]["cg_within_limits"] is True
        assert body["summary"]["all_positions_loaded"] is True
        assert "flight_date" in body["load_plan"]
        assert body["grid"] == [["FWD1", "FWD2"], ["AFT1", "AFT2"]]
        assert body["cleared_for_departure"] is True
        assert body["unexpected_positions"] == []

    def test_upload_overloaded(self, client, generator):
        """Test an overloaded plan is not cleared."""
        data = workbook_bytes(generator, AircraftType.B777, overloaded=["M1"])

        response = client.post(
            "/api/v1/load-plans/",
            files={"file": ("plan.xlsx", data, XLSX_MEDIA_TYPE)},
        )

        body = response.json()
        assert body["summary"]["overload_count"] == 1
        assert body["load_plan"]["cg_analysis"]["is_safe"] is False
        assert body["cleared_for_departure"] is False
        assert "DECK_SEPARATOR" in body["grid"]

    def test_rejects_non_xlsx(self, client):
        """Test non-.xlsx uploads are refused."""
        response = client.post(
            "/api/v1/load-plans/",
            files={"file": ("plan.csv", b"a,b\n1,2\n", "text/csv")},
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "Please upload a valid .xlsx file"

    def test_missing_sheets(self, client, generator):
        """Test the missing-sheet message is returned verbatim."""
        data = workbook_bytes(generator, omit_sheets=[ULD_MASTER_TABLE, ARM_MOMENT_COMPUTATION])

        response = client.post(
            "/api/v1/load-plans/",
            files={"file": ("plan.xlsx", data, XLSX_MEDIA_TYPE)},
        )

        assert response.status_code == 422
        assert response.json()["detail"] == (
            "Missing required sheets: ULD MASTER TABLE, ARM & MOMENT COMPUTATION"
        )

    def test_corrupt_workbook(self, client):
        """Test undecodable bytes are rejected."""
        response = client.post(
            "/api/v1/load-plans/",
            files={"file": ("plan.xlsx", b"not a workbook", XLSX_MEDIA_TYPE)},
        )

        assert response.status_code == 422
        assert response.json()["detail"].startswith("Could not read Excel workbook")

    def test_malformed_xml_workbook(self, client, broken_xml_workbook):
        """Test a zip with unparseable XML is a client error."""
        response = client.post(
            "/api/v1/load-plans/",
            files={"file": ("plan.xlsx", broken_xml_workbook, XLSX_MEDIA_TYPE)},
        )

        assert response.status_code == 422
        assert response.json()["detail"].startswith("Could not read Excel workbook")

    def test_partial_load_summary(self, client, generator):
        """Test a plan with an empty slot is not fully loaded."""
        data = workbook_bytes(generator, AircraftType.B737, empty_slots=["AFT2"])

        response = client.post(
            "/api/v1/load-plans/",
            files={"file": ("plan.xlsx", data, XLSX_MEDIA_TYPE)},
        )

        summary = response.json()["summary"]
        assert summary["total_ulds"] == 3
        assert summary["all_positions_loaded"] is False

    def test_upload_too_large(self, client, generator):
        """Test uploads above the size limit are refused before decoding."""
        app.dependency_overrides[get_load_plan_service] = lambda: LoadPlanService(Settings(max_upload_bytes=1024))
        try:
            response = client.post(
                "/api/v1/load-plans/",
                files={"file": ("plan.xlsx", workbook_bytes(generator), XLSX_MEDIA_TYPE)},
            )
        finally:
            app.dependency_overrides.clear()

        assert response.status_code == 413
        assert response.json()["detail"] == "Workbook exceeds the maximum upload size of 1024 bytes"

    def test_upload_at_size_limit(self, client, generator):
        """Test an upload exactly at the limit is accepted."""
        data = workbook_bytes(generator, AircraftType.B737)
        app.dependency_overrides[get_load_plan_service] = lambda: LoadPlanService(Settings(max_upload_bytes=len(data)))
        try:
            response = client.post(
                "/api/v1/load-plans/",
                files={"file": ("plan.xlsx", data, XLSX_MEDIA_TYPE)},
            )
        finally:
            app.dependency_overrides.clear()

        assert response.status_code == 200

    def test_manifest(self, client, generator):
        """Test the CSV manifest."""
        data = workbook_bytes(generator, AircraftType.A320)

        response = client.post(
            "/api/v1/load-plans/manifest",
            files={"file": ("plan.xlsx", data, XLSX_MEDIA_TYPE)},
        )

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/csv")
        lines = response.text.strip().splitlines()
        assert lines[0].startswith("position,uld_type,destination,weight_kg")
        assert len(lines) == 13
