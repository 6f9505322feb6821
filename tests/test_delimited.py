import pytest

from mewgallery.parsers.delimited import parse_rows, strip_bom


class TestStripBom:
    def test_removes_leading_bom(self) -> None:
        assert strip_bom("\ufeffname") == "name"

    def test_leaves_plain_text(self) -> None:
        assert strip_bom("name") == "name"

    def test_only_leading_bom_removed(self) -> None:
        assert strip_bom("a\ufeffb") == "a\ufeffb"


class TestParseRows:
    def test_simple_rows(self) -> None:
        rows = parse_rows("a,b,c\n1,2,3")

        assert rows == [["a", "b", "c"], ["1", "2", "3"]]

    def test_empty_input(self) -> None:
        assert parse_rows("") == []
        assert parse_rows("\n\n\r\n") == []

    def test_bom_is_stripped_before_parsing(self) -> None:
        rows = parse_rows("\ufeffname en,year\nMew,1999")

        assert rows[0] == ["name en", "year"]

    def test_quoted_field_with_comma_and_escaped_quotes(self) -> None:
        """Doubled quotes inside a quoted field become one literal quote."""
        rows = parse_rows('name,notes\nMew,"He said ""hi"", ok"')

        assert rows[1] == ["Mew", 'He said "hi", ok']

    @pytest.mark.parametrize("newline", ["\n", "\r\n", "\r"])
    def test_line_endings(self, newline: str) -> None:
        rows = parse_rows(newline.join(["a,b", "1,2", "3,4"]))

        assert rows == [["a", "b"], ["1", "2"], ["3", "4"]]

    def test_mixed_line_endings(self) -> None:
        rows = parse_rows("a,b\r\n1,2\r3,4\n5,6")

        assert len(rows) == 4
        assert rows[3] == ["5", "6"]

    def test_cells_are_trimmed(self) -> None:
        rows = parse_rows('  a ,  " b "  \n 1 , 2 ')

        assert rows == [["a", "b"], ["1", "2"]]

    def test_blank_rows_dropped(self) -> None:
        rows = parse_rows("a,b\n\n,,\n  ,  \n1,2\n")

        assert rows == [["a", "b"], ["1", "2"]]

    def test_trailing_empty_cells_row_dropped(self) -> None:
        """A final row of only separators is still a blank row."""
        rows = parse_rows("a,b\n1,2\n,")

        assert rows == [["a", "b"], ["1", "2"]]

    def test_row_with_some_empty_cells_kept(self) -> None:
        rows = parse_rows("a,b,c\n,x,")

        assert rows[1] == ["", "x", ""]

    def test_short_and_long_rows_kept_as_is(self) -> None:
        rows = parse_rows("a,b,c\n1\n1,2,3,4")

        assert rows[1] == ["1"]
        assert rows[2] == ["1", "2", "3", "4"]

    def test_unterminated_quote_consumes_rest(self) -> None:
        """Unterminated quotes do not raise; the remainder becomes the field."""
        rows = parse_rows('a,b\n1,"open field\n2,3')

        assert rows == [["a", "b"], ["1", "open field\n2,3"]]

    def test_newline_inside_quotes_is_content(self) -> None:
        rows = parse_rows('a,b\n"line one\nline two",2')

        assert rows[1] == ["line one\nline two", "2"]

    def test_unicode_content(self) -> None:
        rows = parse_rows("name jp,origin jp\nミュウ,米国")

        assert rows[1] == ["ミュウ", "米国"]

    @pytest.mark.parametrize(
        "text",
        [
            '"',
            '""',
            '"""',
            ',"\r',
            'a,"b""\n',
            "\r\r\n\n",
            '\ufeff"\ufeff',
            'x"y"z,1\n',
        ],
    )
    def test_degenerate_input_never_raises(self, text: str) -> None:
        rows = parse_rows(text)

        assert isinstance(rows, list)
