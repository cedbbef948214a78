"""CLI smoke tests against a temporary SQLite file."""

import logging
import re

import pytest
import structlog
from click.testing import CliRunner

from storefront.infrastructure.cli.main import cli

_UUID = r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}"


@pytest.fixture
def runner(tmp_path, monkeypatch):
    monkeypatch.setenv("STOREFRONT_DATABASE_URL", f"sqlite:///{tmp_path / 'cli.db'}")
    monkeypatch.setenv("STOREFRONT_LOG_LEVEL", "ERROR")

    # the cli root group reconfigures logging; put the root logger back afterwards
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield CliRunner()
    root.handlers[:] = handlers
    root.setLevel(level)
    structlog.reset_defaults()


def _first_id(output: str) -> str:
    match = re.search(_UUID, output)
    assert match, output
    return match.group(0)


class TestProductCommands:

    def test_add_and_list(self, runner):
        result = runner.invoke(cli, ["product", "add", "--name", "Widget", "--price", "15"])
        assert result.exit_code == 0, result.output
        assert "'Widget' added at $15.00" in result.output

        result = runner.invoke(cli, ["product", "list"])
        assert result.exit_code == 0
        assert "Widget" in result.output

    def test_update_with_empty_name_fails(self, runner):
        added = runner.invoke(cli, ["product", "add", "--name", "Widget", "--price", "15"])
        product_id = _first_id(added.output)

        result = runner.invoke(
            cli, ["product", "update", "--id", product_id, "--name", "", "--price", "10"]
        )

        assert result.exit_code == 1
        assert "Name is required" in result.output

    def test_show_missing_product(self, runner):
        result = runner.invoke(cli, ["product", "show", "--id", "nope"])
        assert result.exit_code == 1
        assert "not found" in result.output


class TestOrderCommands:

    def test_create_and_update_order(self, runner):
        product_id = _first_id(
            runner.invoke(cli, ["product", "add", "--name", "Widget", "--price", "15"]).output
        )
        customer_id = _first_id(runner.invoke(cli, ["customer", "add", "--name", "Alice"]).output)

        created = runner.invoke(
            cli, ["order", "create", "--customer", customer_id, "--items", f"{product_id}:2"]
        )
        assert created.exit_code == 0, created.output
        assert "$30.00" in created.output
        order_id = _first_id(created.output)

        updated = runner.invoke(
            cli, ["order", "update", "--id", order_id, "--items", f"{product_id}:5"]
        )
        assert updated.exit_code == 0, updated.output
        assert "$75.00" in updated.output

    def test_bad_item_format(self, runner):
        result = runner.invoke(cli, ["order", "create", "--customer", "c1", "--items", "oops"])
        assert result.exit_code == 2
        assert "Expected 'ProductId:Quantity'" in result.output
