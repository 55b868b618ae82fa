"""Unit tests for DocumentationBlock parsing."""

from docsmith.models import DocumentationBlock, ParameterModel
from docsmith.models.documentation import normalize_comment, parse_comment


class TestNormalizeComment:
    """Tests for comment delimiter and marker stripping."""

    def test_strips_delimiters_and_markers(self) -> None:
        """Test that /**, */ and leading * markers are removed."""
        raw = "/**\n * Adds two integers.\n * @return the sum\n */"
        assert normalize_comment(raw) == "Adds two integers.\n@return the sum"

    def test_first_line_only_trimmed(self) -> None:
        """Test that the first line keeps a leading * that is not a marker line."""
        assert normalize_comment("*bold* text") == "*bold* text"

    def test_none_is_empty(self) -> None:
        """Test that a missing comment normalizes to empty text."""
        assert normalize_comment(None) == ""
        assert normalize_comment("   ") == ""


class TestParseComment:
    """Tests for description and tag extraction."""

    def test_description_before_first_tag(self) -> None:
        """Test that the description stops at the first tag."""
        description, tags = parse_comment("Adds values.\nMore detail.\n@since 1.0")
        assert description == "Adds values.\nMore detail."
        assert tags == {"since": ["1.0"]}

    def test_tag_value_spans_lines(self) -> None:
        """Test that a tag value continues until the next tag."""
        _, tags = parse_comment("@param a first\ncontinued here\n@return x")
        assert tags["param"] == ["a first\ncontinued here"]
        assert tags["return"] == ["x"]

    def test_inline_tags_are_not_markers(self) -> None:
        """Test that {@link} and e-mail addresses do not start tags."""
        description, tags = parse_comment("See {@link Foo} or mail a@b.com")
        assert description == "See {@link Foo} or mail a@b.com"
        assert tags == {}

    def test_tag_without_value(self) -> None:
        """Test that a bare tag is recorded with an empty value."""
        _, tags = parse_comment("Old API.\n@deprecated\n@since 2.0")
        assert tags == {"deprecated": [""], "since": ["2.0"]}


class TestDocumentationBlock:
    """Tests for DocumentationBlock."""

    def test_empty_block(self) -> None:
        """Test that an empty block has no description and no tags."""
        block = DocumentationBlock()
        assert block.raw_text == ""
        assert block.description == ""
        assert block.tags == {}
        assert block.return_value is None
        assert block.parameters() == []

    def test_no_tags(self) -> None:
        """Test that text without tags is all description."""
        block = DocumentationBlock("Just a description.")
        assert block.description == "Just a description."
        assert block.tags == {}

    def test_repeated_tags_accumulate_in_order(self) -> None:
        """Test that repeated tags keep every value in source order."""
        block = DocumentationBlock("@param a first\n@param b second\n@param c third")
        assert block.tag_values("param") == ["a first", "b second", "c third"]
        assert block.first_tag_value("param") == "a first"

    def test_reassigning_raw_text_reparses(self) -> None:
        """Test that description and tags follow the raw text."""
        block = DocumentationBlock("First.\n@since 1.0")
        block.raw_text = "Second.\n@author Ann"
        assert block.description == "Second."
        assert block.tags == {"author": ["Ann"]}

    def test_setting_same_text_is_idempotent(self) -> None:
        """Test that setting the same raw text twice yields equal results."""
        text = "Desc.\n@param a first\n@return r"
        block = DocumentationBlock(text)
        first = (block.description, block.tags)
        block.raw_text = text
        assert (block.description, block.tags) == first

    def test_tags_returns_copy(self) -> None:
        """Test that mutating the returned mapping does not affect the block."""
        block = DocumentationBlock("@since 1.0")
        tags = block.tags
        tags["since"].append("2.0")
        tags["extra"] = ["x"]
        assert block.tags == {"since": ["1.0"]}

    def test_return_value(self) -> None:
        """Test that the first @return value is exposed."""
        block = DocumentationBlock("Desc.\n@return the sum\n@return ignored")
        assert block.return_value == "the sum"

    def test_parameters_split_name_and_description(self) -> None:
        """Test that @param values split at the first whitespace."""
        block = DocumentationBlock("@param a   first   operand\n@param flag")
        assert block.parameters() == [
            ParameterModel(name="a", description="first   operand"),
            ParameterModel(name="flag", description=""),
        ]

    def test_equality_by_raw_text(self) -> None:
        """Test that blocks with the same raw text compare equal."""
        assert DocumentationBlock("Same.") == DocumentationBlock("Same.")
        assert DocumentationBlock("One.") != DocumentationBlock("Two.")

    def test_to_dict(self) -> None:
        """Test serialization to a dictionary."""
        block = DocumentationBlock("Desc.\n@since 1.0")
        assert block.to_dict() == {
            "raw_text": "Desc.\n@since 1.0",
            "description": "Desc.",
            "tags": {"since": ["1.0"]},
        }
