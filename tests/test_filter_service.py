"""Unit tests for demo table filtering."""

from st_pagination.services.filter_service import (
    apply_region_filter,
    filters_signature,
    search_rows,
)


class TestSearchRows:
    def test_blank_term_keeps_all(self, clients_df):
        assert len(search_rows(clients_df, "  ", ["name"])) == 25

    def test_case_insensitive(self, clients_df):
        result = search_rows(clients_df, "client 2", ["name"])

        assert result["name"].tolist() == ["Client 2"] + [f"Client {i}" for i in range(20, 26)]

    def test_any_column_matches(self, clients_df):
        result = search_rows(clients_df, "latam", ["client_id", "region"])

        assert set(result["region"]) == {"LATAM"}
        assert len(result) == 5

    def test_missing_columns_ignored(self, clients_df):
        assert search_rows(clients_df, "C001", ["nope", "client_id"])["client_id"].tolist() == ["C001"]


class TestRegionFilter:
    def test_empty_selection(self, clients_df):
        assert len(apply_region_filter(clients_df, [])) == 25

    def test_selection(self, clients_df):
        assert len(apply_region_filter(clients_df, ["EMEA", "APAC"])) == 15


class TestFiltersSignature:
    def test_normalised(self):
        assert filters_signature(" Foo ", ["b", "a"]) == filters_signature("foo", ["a", "b"])
