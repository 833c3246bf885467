# Copyright 2026 ProtoSchema Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the ProtoSchema recursive-descent parser."""

import logging
import sys

import pytest

from protoschema.config.settings import ParserOptions
from protoschema.model.entities import Enum, EnumValue, Field, Message, SchemaFile
from protoschema.parser.errors import (
    LexicalError,
    ParseError,
    ParserStateError,
    UnterminatedStringError,
)
from protoschema.parser.parser import Parser, ParserState, parse
from protoschema.parser.scanner import TokenKind

# ###############
# Test Helpers
# ###############


def _fields(source: str) -> list[Field]:
    """Parse a single message and return its fields."""
    result = parse(source)
    assert len(result.messages) == 1
    return result.messages[0].fields


def _values(source: str) -> list[tuple[str, int]]:
    """Parse a single enum and return its values as (name, number) pairs."""
    result = parse(source)
    assert len(result.enums) == 1
    return [(v.name, v.number) for v in result.enums[0].values]


# ###############
# Empty Input
# ###############


class TestEmptyInput:
    def test_empty_string_returns_empty_schema_file(self) -> None:
        result = parse("")
        assert isinstance(result, SchemaFile)
        assert result.messages == []
        assert result.enums == []

    def test_whitespace_only_returns_empty_schema_file(self) -> None:
        result = parse("  \n\t\r\n ")
        assert result == SchemaFile()


# ###############
# Messages
# ###############


class TestMessages:
    def test_empty_message(self) -> None:
        result = parse("message X {}")
        assert result.messages == [Message(name="X", fields=[])]

    def test_single_field(self) -> None:
        assert _fields("message Foo { int32 id = 1; }") == [Field(type_name="int32", name="id", number=1)]

    def test_field_order_is_preserved(self) -> None:
        fields = _fields("message M { string c = 3; string a = 1; string b = 2; }")
        assert [f.name for f in fields] == ["c", "a", "b"]
        assert [f.number for f in fields] == [3, 1, 2]

    def test_field_type_is_not_resolved(self) -> None:
        fields = _fields("message Account { Balance wallet = 3; Unknown thing = 4; }")
        assert [f.type_name for f in fields] == ["Balance", "Unknown"]

    def test_duplicate_field_numbers_are_accepted(self) -> None:
        fields = _fields("message M { int32 a = 1; int32 b = 1; }")
        assert [f.number for f in fields] == [1, 1]

    def test_field_number_zero_and_leading_zeros(self) -> None:
        fields = _fields("message M { int32 a = 0; int32 b = 007; }")
        assert [f.number for f in fields] == [0, 7]

    def test_large_field_number(self) -> None:
        fields = _fields("message M { int64 big = 536870911; }")
        assert fields[0].number == 536870911

    def test_multiline_layout(self) -> None:
        source = "message Order\n{\n    int32 id = 1;\n    string symbol = 2;\n}\n"
        fields = _fields(source)
        assert [(f.type_name, f.name, f.number) for f in fields] == [("int32", "id", 1), ("string", "symbol", 2)]


# ###############
# Field Modifiers
# ###############


class TestFieldModifiers:
    @pytest.mark.parametrize(
        ("modifiers", "repeated", "optional"),
        [
            ("", False, False),
            ("repeated ", True, False),
            ("optional ", False, True),
            ("repeated optional ", True, True),
        ],
    )
    def test_modifier_combinations(self, modifiers: str, repeated: bool, optional: bool) -> None:
        fields = _fields(f"message M {{ {modifiers}string tags = 5; }}")
        assert fields == [
            Field(type_name="string", name="tags", number=5, repeated=repeated, optional=optional),
        ]

    def test_optional_before_repeated_is_rejected(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse("message M { optional repeated string tags = 5; }")
        assert exc_info.value.text == "repeated"

    def test_doubled_modifier_is_rejected(self) -> None:
        with pytest.raises(ParseError):
            parse("message M { repeated repeated string tags = 5; }")

    def test_conflicting_modifiers_rejected_when_configured(self) -> None:
        options = ParserOptions(reject_conflicting_modifiers=True)
        with pytest.raises(ParseError) as exc_info:
            parse("message M {\n  repeated optional string tags = 5;\n}", options)
        error = exc_info.value
        assert error.line == 2
        assert error.column == 12
        assert "both 'repeated' and 'optional'" in str(error)

    def test_single_modifiers_allowed_when_conflicts_rejected(self) -> None:
        options = ParserOptions(reject_conflicting_modifiers=True)
        result = parse("message M { repeated int32 a = 1; optional int32 b = 2; }", options)
        fields = result.messages[0].fields
        assert (fields[0].repeated, fields[0].optional) == (True, False)
        assert (fields[1].repeated, fields[1].optional) == (False, True)


# ###############
# Trailing Semicolons
# ###############


class TestTrailingSemicolons:
    def test_field_semicolons_are_optional(self) -> None:
        with_semis = _fields("message M { int32 a = 1; repeated string b = 2; }")
        without_semis = _fields("message M { int32 a = 1 repeated string b = 2 }")
        assert with_semis == without_semis

    def test_enum_semicolons_are_optional(self) -> None:
        assert _values("enum E { A = 0; B = 1; }") == _values("enum E { A = 0 B = 1 }")

    def test_only_one_semicolon_is_consumed(self) -> None:
        with pytest.raises(ParseError):
            parse("message M { int32 a = 1;; }")


# ###############
# Enums
# ###############


class TestEnums:
    def test_empty_enum(self) -> None:
        result = parse("enum E {}")
        assert result.enums == [Enum(name="E", values=[])]

    def test_enum_values_in_order(self) -> None:
        assert _values("enum OrderType { market = 0; limit = 1; stop = 2; }") == [
            ("market", 0),
            ("limit", 1),
            ("stop", 2),
        ]

    def test_enum_value_model(self) -> None:
        result = parse("enum E { A = 3 }")
        assert result.enums[0].values == [EnumValue(name="A", number=3)]

    def test_keyword_as_enum_value_name_is_rejected(self) -> None:
        with pytest.raises(ParseError):
            parse("enum E { optional = 1; }")


# ###############
# Top-Level Handling
# ###############


class TestTopLevel:
    def test_declaration_order_is_preserved_per_kind(self) -> None:
        source = "message A {} enum X {} message B {} enum Y {} message C {}"
        result = parse(source)
        assert [m.name for m in result.messages] == ["A", "B", "C"]
        assert [e.name for e in result.enums] == ["X", "Y"]

    def test_unrecognized_tokens_are_skipped(self) -> None:
        source = 'syntax = "proto3";\npackage trade;\nmessage A { int32 id = 1; }\n; ; 42\nenum E { Z = 0; }'
        result = parse(source)
        assert [m.name for m in result.messages] == ["A"]
        assert [e.name for e in result.enums] == ["E"]

    def test_unsupported_constructs_at_top_level_are_skipped_token_by_token(self) -> None:
        source = "service S { rpc Get(Req) returns (Resp); }\nmessage Req {}"
        result = parse(source)
        assert [m.name for m in result.messages] == ["Req"]

    def test_string_literal_spelling_a_keyword_is_skipped(self) -> None:
        result = parse('"message" message M {}')
        assert [m.name for m in result.messages] == ["M"]

    def test_stray_modifier_keywords_are_skipped(self) -> None:
        result = parse("repeated optional message M {}")
        assert [m.name for m in result.messages] == ["M"]

    def test_skipped_tokens_are_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="protoschema.parser.parser"):
            parse("junk message M {}")
        assert any("Skipping top-level token 'junk'" in rec.getMessage() for rec in caplog.records)


# ###############
# Malformed Input
# ###############


class TestMalformedInput:
    def test_missing_field_name(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse("message Foo { int32 = 1; }")
        assert exc_info.value.text == "="

    def test_missing_field_number(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse("message Foo { int32 x = ; }")
        assert exc_info.value.text == ";"

    def test_unclosed_enum(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse("enum E { A = 0 }"[:-1])
        assert "<EOF>" in str(exc_info.value)

    def test_unclosed_message(self) -> None:
        with pytest.raises(ParseError):
            parse("message M { int32 a = 1;")

    def test_unclosed_message_after_open_brace(self) -> None:
        with pytest.raises(ParseError):
            parse("message M {")

    def test_raw_at_sign(self) -> None:
        with pytest.raises(LexicalError):
            parse("message M { int32 a = 1; } @")

    def test_missing_message_name(self) -> None:
        with pytest.raises(ParseError):
            parse("message { int32 a = 1; }")

    def test_missing_open_brace(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse("message M int32 a = 1; }")
        assert "Expected '{'" in str(exc_info.value)

    def test_missing_equals(self) -> None:
        with pytest.raises(ParseError):
            parse("enum E { A 0; }")

    def test_nested_message_is_rejected(self) -> None:
        with pytest.raises(ParseError):
            parse("message Outer { message Inner {} }")

    def test_message_at_end_of_input(self) -> None:
        with pytest.raises(ParseError):
            parse("message")

    @pytest.mark.skipif(
        getattr(sys, "get_int_max_str_digits", lambda: 0)() == 0,
        reason="interpreter has no integer string conversion limit",
    )
    def test_overlong_number_literal_is_a_parse_error(self) -> None:
        digits = "1" * (sys.get_int_max_str_digits() + 1)
        parser = Parser(f"message M {{ int32 a = {digits}; }}")
        with pytest.raises(ParseError) as exc_info:
            parser.parse_file()
        assert exc_info.value.line == 1
        assert exc_info.value.column == 23
        assert exc_info.value.text == digits
        assert parser.state == ParserState.FAILED

    def test_unterminated_string_inside_block_is_a_parse_error(self) -> None:
        with pytest.raises(ParseError):
            parse('message M { "oops }')

    def test_unterminated_string_strict_mode(self) -> None:
        with pytest.raises(UnterminatedStringError):
            parse('message M {} "oops', ParserOptions(strict_strings=True))

    def test_unterminated_string_at_top_level_is_tolerated(self) -> None:
        result = parse('message M {} "oops')
        assert [m.name for m in result.messages] == ["M"]

    def test_error_reports_position(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse("message Foo {\n  int32 = 1;\n}")
        error = exc_info.value
        assert error.line == 2
        assert error.column == 9
        assert "Line 2, column 9:" in str(error)


# ###############
# Parser Lifecycle
# ###############


class TestParserLifecycle:
    def test_constructor_pulls_first_token(self) -> None:
        parser = Parser("  message X {}")
        assert parser.current.kind == TokenKind.KEYWORD
        assert parser.current.text == "message"
        assert parser.state == ParserState.READY

    def test_lexical_error_in_first_token_raised_by_constructor(self) -> None:
        with pytest.raises(LexicalError):
            Parser("@")

    def test_parser_is_single_use(self) -> None:
        parser = Parser("message X {}")
        parser.parse_file()
        assert parser.state == ParserState.DONE
        with pytest.raises(ParserStateError):
            parser.parse_file()

    def test_failed_parser_cannot_be_resumed(self) -> None:
        parser = Parser("message X { int32 = 1; } message Y {}")
        with pytest.raises(ParseError):
            parser.parse_file()
        assert parser.state == ParserState.FAILED
        with pytest.raises(ParserStateError):
            parser.parse_file()

    def test_expect_does_not_consume(self) -> None:
        parser = Parser("message X")
        tok = parser.expect(TokenKind.KEYWORD, "message")
        assert tok.text == "message"
        assert parser.current.text == "message"

    def test_expect_checks_kind_and_text(self) -> None:
        parser = Parser("enum")
        with pytest.raises(ParseError):
            parser.expect(TokenKind.IDENTIFIER)
        with pytest.raises(ParseError):
            parser.expect(TokenKind.KEYWORD, "message")

    def test_advance_moves_to_next_token(self) -> None:
        parser = Parser("a b")
        parser.advance()
        assert parser.current.text == "b"
        parser.advance()
        assert parser.current.kind == TokenKind.EOF
        parser.advance()
        assert parser.current.kind == TokenKind.EOF

    def test_grammar_operations_are_callable_directly(self) -> None:
        parser = Parser("repeated Order orders = 4;")
        assert parser.parse_field() == Field(type_name="Order", name="orders", number=4, repeated=True)
        assert parser.current.kind == TokenKind.EOF

    def test_parse_enum_value_directly(self) -> None:
        parser = Parser("buy = 0; sell = 1")
        assert parser.parse_enum_value() == EnumValue(name="buy", number=0)
        assert parser.parse_enum_value() == EnumValue(name="sell", number=1)


# ###############
# End-to-End
# ###############


class TestEndToEnd:
    def test_status_and_person(self) -> None:
        source = (
            "enum Status { OK = 0; ERROR = 1; }\n"
            "message Person { string name = 1; int32 age = 2; repeated string emails = 3; }\n"
        )
        result = parse(source)
        assert result.enums == [
            Enum(name="Status", values=[EnumValue(name="OK", number=0), EnumValue(name="ERROR", number=1)]),
        ]
        assert result.messages == [
            Message(
                name="Person",
                fields=[
                    Field(type_name="string", name="name", number=1, repeated=False, optional=False),
                    Field(type_name="int32", name="age", number=2, repeated=False, optional=False),
                    Field(type_name="string", name="emails", number=3, repeated=True, optional=False),
                ],
            ),
        ]

    def test_parsing_is_idempotent(self) -> None:
        source = "enum Side { buy = 0; sell = 1; }\nmessage Order { int32 id = 1; Side side = 2; }"
        assert parse(source) == parse(source)

    def test_trading_schema(self) -> None:
        source = """
enum OrderSide
{
    buy = 0;
    sell = 1;
}

message Order
{
    int32 id = 1;
    string symbol = 2;
    OrderSide side = 3;
    double price = 5;
}

message Account
{
    int32 id = 1;
    string name = 2;
    Balance wallet = 3;
    repeated Order orders = 4;
}
"""
        result = parse(source)
        assert [m.name for m in result.messages] == ["Order", "Account"]
        assert [e.name for e in result.enums] == ["OrderSide"]
        orders = result.messages[1].fields[-1]
        assert orders == Field(type_name="Order", name="orders", number=4, repeated=True)
