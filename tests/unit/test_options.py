"""Unit tests for QueryOptions."""

import pytest
from crossref_client.query import QueryOptions


class TestConstruction:
    def test_method_chaining(self):
        options = (
            QueryOptions()
            .query("climate")
            .filter({"type": "journal-article"})
            .rows(50)
            .facet()
        )
        assert dict(options) == {
            "query": "climate",
            "filter": {"type": "journal-article"},
            "rows": 50,
            "facet": True,
        }

    def test_named_parameters(self):
        options = QueryOptions(query="climate", rows=10, select="DOI,title")
        assert options["rows"] == 10
        assert options["select"] == "DOI,title"

    def test_from_mapping_keeps_key_order(self):
        options = QueryOptions.from_mapping(
            {"sample": 5, "query": "x", "filter": {"type": "book"}, "sort-order": "asc"}
        )
        assert list(options) == ["sample", "query", "filter", "sort-order"]

    def test_passthrough_names_do_not_hit_methods(self):
        options = QueryOptions.from_mapping({"copy": 1, "validate": "yes"})
        assert options["copy"] == 1
        assert options["validate"] == "yes"

    def test_filter_mapping_is_copied(self):
        filters = {"type": "book"}
        options = QueryOptions(filter=filters)
        filters["type"] = "dataset"
        assert options["filter"] == {"type": "book"}


class TestMappingBehaviour:
    def test_compares_equal_to_dict(self):
        assert QueryOptions(rows=5, offset=20) == {"rows": 5, "offset": 20}

    def test_get_and_contains(self):
        options = QueryOptions(rows=5)
        assert "rows" in options
        assert options.get("offset") is None
        assert len(options) == 1

    def test_repr(self):
        assert repr(QueryOptions(rows=5)) == "QueryOptions(rows=5)"


class TestCopies:
    def test_copy_is_deep(self):
        options = QueryOptions(filter={"type": ["book"]})
        clone = options.copy()
        clone["filter"]["type"].append("dataset")
        assert options["filter"] == {"type": ["book"]}

    def test_coerce_none_gives_empty_options(self):
        assert QueryOptions.coerce(None) == {}

    def test_coerce_never_returns_the_argument(self):
        options = QueryOptions(rows=5)
        coerced = QueryOptions.coerce(options)
        coerced.offset(20)
        assert coerced is not options
        assert "offset" not in options

    def test_coerce_plain_dict(self):
        raw = {"rows": 5}
        coerced = QueryOptions.coerce(raw)
        coerced.offset(20)
        assert raw == {"rows": 5}
        assert isinstance(coerced, QueryOptions)

    def test_to_dict_is_independent(self):
        options = QueryOptions(filter={"type": "book"})
        as_dict = options.to_dict()
        as_dict["filter"]["type"] = "dataset"
        assert options["filter"]["type"] == "book"


class TestValidation:
    def test_valid_options_return_self(self):
        options = QueryOptions(query="x", rows=20, offset=0, filter={})
        assert options.validate() is options

    @pytest.mark.parametrize(
        "kwargs",
        [{"rows": -1}, {"offset": "20"}, {"rows": True}, {"offset": 2.5}],
        ids=["negative_rows", "string_offset", "bool_rows", "float_offset"],
    )
    def test_bad_paging_values_are_rejected(self, kwargs):
        (key,) = kwargs
        with pytest.raises(ValueError, match=key):
            QueryOptions(**kwargs).validate()

    def test_every_bad_value_is_reported(self):
        with pytest.raises(ValueError, match=r"offset=-5, rows='ten'"):
            QueryOptions(offset=-5, rows="ten").validate()

    def test_unset_options_are_not_checked(self):
        options = QueryOptions(query=None, offset=None, rows=None)
        assert options.validate() is options

    def test_other_options_are_left_to_crossref(self):
        options = QueryOptions(query=42, filter="type:book", sort="published")
        assert options.validate() is options
