"""Tests for the Lucene search expression builder."""

from brainzlink.application.queries.lucene import LuceneQuery, escape_term, format_value


class TestEscaping:
    """Test term escaping and phrase quoting."""

    def test_plain_term_untouched(self) -> None:
        """Test that ordinary words pass through."""
        assert format_value("Nirvana") == "Nirvana"

    def test_special_characters_escaped(self) -> None:
        """Test that Lucene operators inside values are escaped."""
        assert escape_term("AC/DC") == "AC\\/DC"
        assert escape_term("What?") == "What\\?"
        assert escape_term("a && b") == "a \\&& b"

    def test_phrase_is_quoted(self) -> None:
        """Test that values with whitespace become phrases."""
        assert format_value("Miles Davis") == '"Miles Davis"'

    def test_numbers_are_rendered(self) -> None:
        """Test that integer values are accepted."""
        assert format_value(1991) == "1991"


class TestLuceneQuery:
    """Test expression building."""

    def test_expression(self) -> None:
        """Test fields joined by operators."""
        query = (
            LuceneQuery()
            .field("artist", "Miles Davis")
            .and_()
            .field("country", "US")
            .or_()
            .not_()
            .term("jazz")
        )

        assert query.expression == 'artist:"Miles Davis" AND country:US OR NOT jazz'

    def test_raw_fragment_not_escaped(self) -> None:
        """Test that raw fragments are kept verbatim."""
        query = LuceneQuery().raw("date:[1990 TO 1995]")

        assert query.expression == "date:[1990 TO 1995]"

    def test_build_is_url_encoded(self) -> None:
        """Test the encoded query= fragment."""
        query = LuceneQuery().field("artist", "Miles Davis").and_().field("country", "US")

        built = query.build()

        assert built.startswith("query=")
        assert " " not in built
        assert '"' not in built
        assert "%3A" in built
        assert str(query) == built

    def test_copy_is_independent(self) -> None:
        """Test that clauses added after copy() stay on their own side."""
        template = LuceneQuery().field("artist", "nirvana")

        narrowed = template.copy().and_().field("country", "US")
        template.or_().field("artist", "hole")

        assert narrowed.expression == "artist:nirvana AND country:US"
        assert template.expression == "artist:nirvana OR artist:hole"
