"""Tests for the workspace view registry."""

from qwery.infrastructure.agent.tools.view_registry import (
    ViewRegistry,
    generate_semantic_view_name,
    sanitize_view_name,
    unique_view_name,
)

LINK_A = "https://docs.google.com/spreadsheets/d/sheetA/edit"
LINK_B = "https://docs.google.com/spreadsheets/d/sheetB/edit"


class TestViewNaming:
    def test_entity_column_gives_plural(self):
        assert generate_semantic_view_name(["customer_id", "name"], set()) == "customers"
        assert generate_semantic_view_name(["orders_id"], set()) == "orders"

    def test_fallback_and_uniqueness(self):
        assert generate_semantic_view_name(["a", "b"], set()) == "sheet_data"
        assert generate_semantic_view_name(["a"], {"sheet_data", "sheet_data_1"}) == "sheet_data_2"

    def test_sanitize(self):
        assert sanitize_view_name("My Sheet") == "my_sheet"
        assert sanitize_view_name("2024") == "v_2024"

    def test_unique_view_name(self):
        assert unique_view_name("sales", set()) == "sales"
        assert unique_view_name("sales", {"sales"}) == "sales_1"


class TestViewRegistry:
    def test_empty_registry(self, tmp_path):
        assert ViewRegistry(tmp_path).load() == []

    def test_register_and_lookup(self, tmp_path):
        registry = ViewRegistry(tmp_path)
        registry.register(LINK_A, "customers")

        assert registry.get_by_name("customers").source_id == "sheetA"
        assert registry.get_by_source("sheetA").view_name == "customers"
        assert ViewRegistry(tmp_path).view_names() == {"customers"}

    def test_register_replaces_same_sheet(self, tmp_path):
        registry = ViewRegistry(tmp_path)
        registry.register(LINK_A, "customers")
        registry.register(LINK_A, "clients")
        registry.register(LINK_B, "orders")

        assert registry.view_names() == {"clients", "orders"}

    def test_rename_and_delete(self, tmp_path):
        registry = ViewRegistry(tmp_path)
        registry.register(LINK_A, "customers")

        renamed = registry.rename("sheetA", "clients")

        assert renamed.view_name == "clients"
        assert registry.rename("missing", "x") is None
        assert registry.delete("clients") is True
        assert registry.delete("clients") is False

    def test_unreadable_file_is_ignored(self, tmp_path):
        (tmp_path / "views.json").write_text("{not json", encoding="utf-8")
        assert ViewRegistry(tmp_path).load() == []
