import pytest

from taxonomy.utils.slug import ACCENT_MAP, ascii_slug, fold_accents


class TestFoldAccents:
    def test_french_phrase(self):
        assert fold_accents("Café Déjà-vu") == "Cafe Deja-vu"

    def test_upper_and_lower_case_are_covered(self):
        assert fold_accents("ÀÉÎÕÜÇÑÝŸ") == "AEIOUCNYY"
        assert fold_accents("àéîõüçñýÿ") == "aeioucnyy"

    @pytest.mark.parametrize("text", ["Москва", "東京", "123 - ok!", "ß", "œuvre"])
    def test_unmapped_characters_pass_through(self, text):
        assert fold_accents(text) == text

    def test_only_mapped_characters_leave_no_source_characters(self):
        folded = fold_accents("".join(ACCENT_MAP))
        assert not set(folded) & set(ACCENT_MAP)

    @pytest.mark.parametrize("text", ["Crème brûlée", "Ÿvès Ñoël", "", "plain"])
    def test_idempotent(self, text):
        assert fold_accents(fold_accents(text)) == fold_accents(text)

    def test_none_is_empty(self):
        assert fold_accents(None) == ""

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            ACCENT_MAP["é"] = "x"

    def test_values_are_not_keys(self):
        assert not set(ACCENT_MAP.values()) & set(ACCENT_MAP)


class TestAsciiSlug:
    def test_folded_name_gives_plain_slug(self):
        assert ascii_slug(fold_accents("Café Déjà-vu")) == "cafe-deja-vu"

    def test_punctuation_only_is_empty(self):
        assert ascii_slug("!!! ???") == ""

    def test_cyrillic_is_transliterated(self):
        assert ascii_slug("Лента новостей") == "lenta-novostei"
