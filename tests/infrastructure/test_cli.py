"""End-to-end tests for the CLI, against a temporary data directory."""

import logging

import pytest
from click.testing import CliRunner

from storefront.domain.model.order_status import OrderStatus
from storefront.infrastructure.cli.main import cli
from storefront.infrastructure.persistence.json_order_repository import JsonOrderRepository


@pytest.fixture
def run(tmp_path):
    runner = CliRunner()
    env = {"STOREFRONT_DATA_DIR": str(tmp_path), "STOREFRONT_LOG_LEVEL": "CRITICAL"}

    def _run(*args: str):
        return runner.invoke(cli, list(args), env=env)

    yield _run
    logging.getLogger().handlers.clear()


def _checkout(run, session: str = "default"):
    return run(
        "--session", session, "order", "place",
        "--name", "Alice",
        "--email", "Alice@Example.com",
        "--address", "1 Main St",
        "--phone", "555-0100",
    )


class TestCatalogAndCart:

    def test_product_list_shows_seeded_catalog(self, run):
        result = run("product", "list")
        assert result.exit_code == 0
        assert "Analytics Dashboard" in result.output
        assert "$50.00" in result.output

    def test_add_and_show(self, run):
        result = run("cart", "add", "--product", "4", "--quantity", "2")
        assert result.exit_code == 0
        assert "Analytics Dashboard" in result.output
        assert "$100.00" in result.output

        shown = run("cart", "show")
        assert "$100.00" in shown.output

    def test_unknown_product(self, run):
        result = run("cart", "add", "--product", "99")
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_name_requires_price(self, run):
        result = run("cart", "add", "--product", "x", "--name", "Thing")
        assert result.exit_code == 2

    def test_coupon_messages(self, run):
        run("cart", "add", "--product", "4", "--quantity", "2")
        applied = run("cart", "coupon", " save10 ")
        assert "10% discount applied!" in applied.output
        assert "-$10.00" in applied.output

        rejected = run("cart", "coupon", "XYZ")
        assert "Invalid coupon code: XYZ" in rejected.output
        assert "-$10.00" not in rejected.output

    def test_sessions_are_separate(self, run):
        run("--session", "a", "cart", "add", "--product", "1")
        result = run("--session", "b", "cart", "show")
        assert "Your cart is empty." in result.output

    def test_remove_and_clear(self, run):
        run("cart", "add", "--product", "1")
        run("cart", "add", "--product", "2")
        removed = run("cart", "remove", "--product", "1")
        assert "Sales Support Package" not in removed.output
        assert "Advertising Campaigns" in removed.output

        assert "Cart cleared." in run("cart", "clear").output
        assert "Your cart is empty." in run("cart", "show").output


class TestCheckoutAndAdmin:

    def test_preview_of_empty_cart_fails(self, run):
        result = run("order", "preview")
        assert result.exit_code == 1
        assert "Your cart is empty" in result.output

    def test_checkout_of_empty_cart_fails(self, run):
        result = _checkout(run)
        assert result.exit_code == 1
        assert "Cart is empty" in result.output

    def test_preview_and_place(self, run, tmp_path):
        run("cart", "add", "--product", "4", "--quantity", "2")
        run("cart", "coupon", "SAVE10")

        preview = run("order", "preview")
        assert "Total with tax" in preview.output
        assert "$97.20" in preview.output

        placed = _checkout(run)
        assert placed.exit_code == 0
        assert "placed  (status=Placed)" in placed.output
        assert "$97.20" in placed.output

        orders = JsonOrderRepository(tmp_path / "orders.json").list_all()
        assert len(orders) == 1
        assert orders[0].order_id in placed.output
        assert "Your cart is empty." in run("cart", "show").output

    def test_lookup_and_status_changes(self, run, tmp_path):
        run("cart", "add", "--product", "3")
        _checkout(run)
        order_id = JsonOrderRepository(tmp_path / "orders.json").list_all()[0].order_id

        mine = run("order", "mine", "--email", "alice@example.com")
        assert "Found 1 order(s) for alice@example.com" in mine.output
        assert order_id in mine.output

        assert "No orders found for email: bob@example.com" in run(
            "order", "mine", "--email", "bob@example.com"
        ).output

        skipped = run("admin", "status", "--id", order_id, "--to", "Delivered")
        assert skipped.exit_code == 1
        assert "Invalid status transition" in skipped.output

        moved = run("admin", "status", "--id", order_id, "--to", "processing", "--note", "Packing")
        assert moved.exit_code == 0
        assert "status updated to Processing" in moved.output

        shown = run("order", "show", "--id", order_id)
        assert "Packing" in shown.output
        assert "(status=Processing)" in shown.output

        listed = run("admin", "orders", "--status", "Processing")
        assert order_id in listed.output
        assert "No orders found." in run("admin", "orders", "--status", "Delivered").output

        saved = JsonOrderRepository(tmp_path / "orders.json").get_by_order_id(order_id)
        assert saved.status is OrderStatus.PROCESSING

    def test_unknown_order(self, run):
        result = run("order", "show", "--id", "ORD-404")
        assert result.exit_code == 1
        assert "not found" in result.output
