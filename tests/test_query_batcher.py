from urllib.parse import unquote

from cardcheck.services.query_batcher import (
    build_batches,
    encode_query_component,
    exact_name_clause,
    name_filter,
)


def _names_in_batch(batch: str, base_query: str) -> list[str]:
    """Recover the card names referenced by an encoded batch."""
    decoded = unquote(batch)
    prefix = f"{base_query} ("
    assert decoded.startswith(prefix)
    assert decoded.endswith(")")
    fragment = decoded[len(prefix) : -1]
    clauses = fragment.split(" or ")
    assert all(clause.startswith("!") for clause in clauses)
    return [clause[1:] for clause in clauses]


class TestEncodeQueryComponent:
    def test_encodes_like_encode_uri_component(self) -> None:
        assert encode_query_component("t:land (!forest)") == "t%3Aland%20(!forest)"

    def test_keeps_unreserved_marks(self) -> None:
        assert encode_query_component("-_.!~*'()") == "-_.!~*'()"

    def test_encodes_reserved_characters(self) -> None:
        assert encode_query_component("Fire // Ice") == "Fire%20%2F%2F%20Ice"
        assert encode_query_component("a&b=c,d") == "a%26b%3Dc%2Cd"

    def test_encodes_non_ascii_as_utf8(self) -> None:
        assert encode_query_component("Æther Vial") == "%C3%86ther%20Vial"

    def test_replaces_unencodable_characters(self) -> None:
        """Lone surrogates cannot be UTF-8 encoded and are sent as "?"."""
        assert encode_query_component("t:land \ud800") == "t%3Aland%20%3F"


class TestNameFilter:
    def test_single_name(self) -> None:
        assert exact_name_clause("forest") == "!forest"
        assert name_filter(["forest"]) == "!forest"

    def test_joins_with_or(self) -> None:
        assert name_filter(["forest", "island", "swamp"]) == "!forest or !island or !swamp"


class TestBuildBatches:
    def test_two_names_single_batch(self) -> None:
        batches = build_batches("t:land", ["forest", "island"])

        assert batches == [encode_query_component("t:land (!forest or !island)")]
        assert batches == ["t%3Aland%20(!forest%20or%20!island)"]

    def test_empty_names(self) -> None:
        assert build_batches("t:land", []) == []

    def test_single_name(self) -> None:
        assert build_batches("f:pauper", ["lightning bolt"]) == [
            "f%3Apauper%20(!lightning%20bolt)"
        ]

    def test_is_deterministic(self) -> None:
        names = [f"card number {i}" for i in range(200)]

        assert build_batches("f:modern", names) == build_batches("f:modern", names)

    def test_splits_long_name_lists(self) -> None:
        """Lists too long for one query are split with every name kept once."""
        names = [f"a rather long card name number {i:03d}" for i in range(100)]

        batches = build_batches("f:pauper", names)

        assert len(batches) >= 2
        assert all(len(batch) < 1000 for batch in batches)
        recovered = [name for batch in batches for name in _names_in_batch(batch, "f:pauper")]
        assert recovered == names

    def test_batches_are_filled_greedily(self) -> None:
        """A new batch only starts when the next name would not fit."""
        names = [f"a rather long card name number {i:03d}" for i in range(100)]

        batches = build_batches("f:pauper", names)

        for batch, following in zip(batches, batches[1:], strict=False):
            next_name = _names_in_batch(following, "f:pauper")[0]
            grown = batch[:-1] + encode_query_component(f" or !{next_name})")
            assert len(grown) >= 1000

    def test_respects_custom_limit(self) -> None:
        batches = build_batches("t:land", ["forest", "island"], max_length=30)

        assert batches == ["t%3Aland%20(!forest)", "t%3Aland%20(!island)"]

    def test_limit_is_exclusive(self) -> None:
        """A query exactly at the limit is too long."""
        single = build_batches("t:land", ["forest", "island"])[0]

        assert len(build_batches("t:land", ["forest", "island"], max_length=len(single))) == 2
        assert len(build_batches("t:land", ["forest", "island"], max_length=len(single) + 1)) == 1

    def test_oversized_name_gets_its_own_batch(self) -> None:
        huge = "x" * 1200

        batches = build_batches("t:land", ["forest", huge, "island"])

        assert len(batches) == 3
        assert _names_in_batch(batches[0], "t:land") == ["forest"]
        assert _names_in_batch(batches[1], "t:land") == [huge]
        assert len(batches[1]) >= 1000
        assert _names_in_batch(batches[2], "t:land") == ["island"]

    def test_oversized_first_name_emits_no_empty_batch(self) -> None:
        huge = "x" * 1200

        batches = build_batches("t:land", [huge])

        assert len(batches) == 1
        assert _names_in_batch(batches[0], "t:land") == [huge]
