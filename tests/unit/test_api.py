"""Unit tests for the HTTP bus gateway."""

from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from gxpfru.api.app import create_app
from gxpfru.core.publisher import InventoryPublisher


@pytest.fixture
def client(publisher: InventoryPublisher):
    app = create_app(publisher=publisher, configure_logging=False)
    with TestClient(app) as test_client:
        yield test_client


def _fru_objects(client: TestClient, config) -> list[dict]:
    objects = client.get("/api/bus/objects").json()
    return [o for o in objects if o["path"] == config.fru_object_path]


class TestBusRoutes:
    def test_overview(self, client: TestClient, config):
        resp = client.get("/api/bus")
        assert resp.status_code == 200
        body = resp.json()
        assert body["bus_name"] == config.bus_name
        assert body["name_acquired"] is True
        assert {"path": config.manager_object_path, "interface": config.manager_interface} in body["objects"]
        assert {"path": config.fru_object_path, "interface": config.fru_interface} in body["objects"]

    def test_get_fru_object(self, client: TestClient, config):
        resp = client.get(
            "/api/bus/object",
            params={"path": config.fru_object_path, "interface": config.fru_interface},
        )
        assert resp.status_code == 200
        props = resp.json()["properties"]
        assert props["SERVER_ID"] == "SN123"
        assert props["MAC0"] == "00:1a:2b:3c:4d:5e"
        assert props["PRODUCT_SERIAL_NUMBER"] == "CZ20400ABC      "

    def test_get_manager_object(self, client: TestClient, config):
        resp = client.get(
            "/api/bus/object",
            params={"path": config.manager_object_path, "interface": config.manager_interface},
        )
        assert resp.status_code == 200
        assert resp.json()["methods"] == ["ReScan"]

    def test_get_missing_object(self, client: TestClient):
        resp = client.get("/api/bus/object", params={"path": "/nope", "interface": "x.y"})
        assert resp.status_code == 404

    def test_call_rescan(
        self, client: TestClient, config, eeprom_candidates: list[Path], image_builder
    ):
        eeprom_candidates[1].write_bytes(image_builder(serial=b"NEWSERIAL".ljust(16)))
        resp = client.post("/api/bus/call", json={
            "path": config.manager_object_path,
            "interface": config.manager_interface,
            "method": "ReScan",
        })
        assert resp.status_code == 200
        assert len(_fru_objects(client, config)) == 1

        props = client.get(
            "/api/bus/object",
            params={"path": config.fru_object_path, "interface": config.fru_interface},
        ).json()["properties"]
        assert props["PRODUCT_SERIAL_NUMBER"].startswith("NEWSERIAL")

    def test_call_rescan_twice(self, client: TestClient, config):
        payload = {
            "path": config.manager_object_path,
            "interface": config.manager_interface,
            "method": "ReScan",
        }
        for _ in range(2):
            assert client.post("/api/bus/call", json=payload).status_code == 200
            assert len(_fru_objects(client, config)) == 1

    def test_call_unknown_method(self, client: TestClient, config):
        resp = client.post("/api/bus/call", json={
            "path": config.manager_object_path,
            "interface": config.manager_interface,
            "method": "Reboot",
        })
        assert resp.status_code == 404


class TestFruRoutes:
    def test_get_fru(self, client: TestClient, eeprom_candidates: list[Path]):
        resp = client.get("/api/fru")
        assert resp.status_code == 200
        body = resp.json()
        assert body["server_id"] == "SN123"
        assert body["manufacturer"] == "Hewlett Packard Enterprise"
        assert body["mac1"] == "00:1a:2b:3c:4d:5f"
        assert body["source"] == str(eeprom_candidates[1])

    def test_rescan(self, client: TestClient, eeprom_candidates: list[Path]):
        eeprom_candidates[1].unlink()
        resp = client.post("/api/fru/rescan")
        assert resp.status_code == 200
        body = resp.json()
        assert body["source"] is None
        assert body["product_part_number"] == "Unknown"
        assert body["server_id"] == "SN123"


class TestLifespan:
    def test_shutdown_clears_bus(self, publisher: InventoryPublisher):
        app = create_app(publisher=publisher, configure_logging=False)
        with TestClient(app):
            assert publisher.context.object_server.objects()
        assert publisher.context.object_server.objects() == []
        assert publisher.context.is_closed

    def test_fru_unavailable_after_shutdown(self, publisher: InventoryPublisher):
        app = create_app(publisher=publisher, configure_logging=False)
        with TestClient(app):
            pass
        # Requests outside the lifespan see the torn-down publisher
        resp = TestClient(app).get("/api/fru")
        assert resp.status_code == 503
