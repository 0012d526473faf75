"""
tests/test_store.py

DataStore: seeding, id sequence across imports, lookups, filter options.
"""
from __future__ import annotations

from conftest import make_csv, make_line
from darpan.data.store import DataStore


class TestLoad:
    def test_seeded(self, store) -> None:
        assert store.is_loaded
        assert store.row_count() == 2
        assert list(store.df["id"]) == [101, 102]

    def test_unseeded(self, empty_store) -> None:
        assert empty_store.is_loaded
        assert empty_store.row_count() == 0
        assert empty_store.records() == []

    def test_not_loaded_until_load(self) -> None:
        assert not DataStore().is_loaded

    def test_reload_resets(self, store) -> None:
        store.import_text(make_csv(make_line(City="Pune")))
        store.load(seed=True)
        assert store.row_count() == 2


class TestImport:
    def test_ids_continue_after_seed(self, store) -> None:
        result = store.import_text(make_csv(make_line(City="Pune"), make_line(City="Surat")))
        assert result.count == 2
        assert [r.id for r in result.records] == [103, 104]
        assert list(store.df["id"]) == [101, 102, 103, 104]

    def test_ids_unique_across_imports(self, empty_store) -> None:
        empty_store.import_text(make_csv(make_line(City="Pune")))
        empty_store.import_text(make_csv(make_line(City="Pune")))
        assert list(empty_store.df["id"]) == [1, 2]

    def test_duplicates_are_kept(self, store) -> None:
        line = make_line(City="Ahmedabad", Brand="Honey")
        store.import_text(make_csv(line, line))
        assert store.row_count() == 4

    def test_zero_row_import_leaves_store_unchanged(self, store) -> None:
        before = store.df.copy()
        result = store.import_text(make_csv())
        assert result.count == 0
        assert result.message == "No valid data found."
        assert store.df.equals(before)

    def test_import_file(self, store, tmp_path) -> None:
        path = tmp_path / "audits.csv"
        path.write_text(make_csv(make_line(City="Pune", Samples=12)), encoding="utf-8")
        result = store.import_file(path)
        assert result.message == "Successfully imported 1 records!"
        assert store.get(103).sample_checked == 12.0

    def test_missing_file_imports_nothing(self, store, tmp_path) -> None:
        result = store.import_file(tmp_path / "missing.csv")
        assert result.count == 0
        assert store.row_count() == 2


class TestQueries:
    def test_get(self, store) -> None:
        record = store.get(102)
        assert record.defect_type == "Torn Label"
        assert record.defect_count == 1.0
        assert store.get(999) is None

    def test_records_round_trip(self, store) -> None:
        assert [r.id for r in store.records()] == [101, 102]
        assert store.records()[0].brand == "Honey"

    def test_filter_options_first_seen_non_empty(self, store) -> None:
        store.import_text(make_csv(
            make_line(Zone="East", City="Kolkata"),
            make_line(Zone="", City="Unknown Town"),
            make_line(Zone="North", City="Delhi"),
        ))
        assert store.filter_options("Zone") == ["West", "East", "North"]
        assert store.filter_options("Defect Type") == ["Torn Label"]
        assert store.filter_options("SKU") == ["1300", "0"]

    def test_filter_options_unknown_column(self, store, empty_store) -> None:
        assert store.filter_options("Nope") == []
        assert empty_store.filter_options("Zone") == []

    def test_get_filtered(self, store) -> None:
        assert list(store.get_filtered({"Defect Type": ["Torn Label"]})["id"]) == [102]
        assert len(store.get_filtered()) == 2
