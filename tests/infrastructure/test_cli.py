"""End-to-end tests for the click CLI against a JSON data directory."""

import json

import pytest
from click.testing import CliRunner

from fulfillment.infrastructure.cli.main import cli


@pytest.fixture
def data_dir(tmp_path):
    (tmp_path / "products.json").write_text(
        json.dumps(
            [
                {"id": 1, "name": "USB Cable", "type": "NORMAL", "available": 2, "lead_time": 15},
                {"id": 2, "name": "USB Dongle", "type": "NORMAL", "available": 0, "lead_time": 10},
            ]
        ),
        encoding="utf-8",
    )
    (tmp_path / "orders.json").write_text(
        json.dumps([{"id": 1, "product_ids": [1, 2]}]), encoding="utf-8"
    )
    return tmp_path


def _stored(data_dir):
    records = json.loads((data_dir / "products.json").read_text(encoding="utf-8"))
    return {r["id"]: r for r in records}


class TestOrderProcess:

    def test_processes_order(self, data_dir):
        result = CliRunner().invoke(cli, ["--data-dir", str(data_dir), "order", "process", "--id", "1"])

        assert result.exit_code == 0
        assert "Order #1 processed." in result.output
        assert _stored(data_dir)[1]["available"] == 1
        assert _stored(data_dir)[2]["lead_time"] == 10

    def test_unknown_order_fails(self, data_dir):
        result = CliRunner().invoke(cli, ["--data-dir", str(data_dir), "order", "process", "--id", "5"])

        assert result.exit_code == 1
        assert "Order #5 not found" in result.output
        assert _stored(data_dir)[1]["available"] == 2

    def test_data_dir_from_environment(self, data_dir, monkeypatch):
        monkeypatch.setenv("FULFILLMENT_DATA_DIR", str(data_dir))

        result = CliRunner().invoke(cli, ["order", "process", "--id", "1"])

        assert result.exit_code == 0
        assert _stored(data_dir)[1]["available"] == 1


class TestProductCommands:

    def test_list(self, data_dir):
        result = CliRunner().invoke(cli, ["--data-dir", str(data_dir), "product", "list"])

        assert result.exit_code == 0
        assert "USB Cable" in result.output
        assert "USB Dongle" in result.output

    def test_list_with_corrupt_store_fails_cleanly(self, data_dir):
        (data_dir / "products.json").write_text('[{"name": "No id"}]', encoding="utf-8")

        result = CliRunner().invoke(cli, ["--data-dir", str(data_dir), "product", "list"])

        assert result.exit_code == 1
        assert "Malformed store" in result.output

    def test_process_single_product(self, data_dir):
        result = CliRunner().invoke(cli, ["--data-dir", str(data_dir), "product", "process", "--id", "1"])

        assert result.exit_code == 0
        assert "Available:  1" in result.output

    def test_process_unknown_product_fails(self, data_dir):
        result = CliRunner().invoke(cli, ["--data-dir", str(data_dir), "product", "process", "--id", "9"])

        assert result.exit_code == 1
        assert "Product #9 not found" in result.output
