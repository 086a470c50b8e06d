"""Tests for locale-aware title ordering."""

import pytest

from catalog_viewer.catalog.collation import collation_key


def collate(values: list[str]) -> list[str]:
    return sorted(values, key=collation_key)


class TestCollationKey:
    """Tests for collation_key."""

    def test_case_does_not_split_alphabet(self) -> None:
        """Lowercase words sort among capitalized ones."""
        assert collate(["Cherry", "banana", "Apple"]) == ["Apple", "banana", "Cherry"]

    def test_lowercase_before_uppercase_on_tie(self) -> None:
        """Words differing only in case put lowercase first."""
        assert collate(["Apple", "apple"]) == ["apple", "Apple"]

    def test_accents_sort_with_base_letter(self) -> None:
        """Accented letters sort next to their base letter, not after z."""
        assert collate(["zebra", "éclair", "egg", "apple"]) == [
            "apple",
            "éclair",
            "egg",
            "zebra",
        ]

    def test_unaccented_before_accented_on_tie(self) -> None:
        """Base letters come before accented ones when otherwise equal."""
        assert collate(["résumé", "resume"]) == ["resume", "résumé"]

    def test_composed_and_decomposed_forms_are_equal(self) -> None:
        """Unicode normalization forms give the same key."""
        assert collation_key("caf\u00e9") == collation_key("cafe\u0301")

    @pytest.mark.parametrize(
        ("earlier", "later"),
        [
            ("Classic T-Shirt", "classic tshirt"),
            ("Handmade Fresh Table", "Handmade Steel Chair"),
            ("", "a"),
            ("a", "ab"),
            ("[Sale] Shirt", "1 Shirt"),
            ("_Shirt", "1 Shirt"),
            ("~Shirt", "1 Shirt"),
            ("-Shirt", "~Shirt"),
            ("1 Shirt", "A Shirt"),
            ("9 Shirt", "a Shirt"),
        ],
    )
    def test_pairwise_order(self, earlier: str, later: str) -> None:
        """Known pairs keep their alphabetical order."""
        assert collation_key(earlier) < collation_key(later)
