from dataclasses import FrozenInstanceError

import pytest

from sqlname.name import QualifiedName, unquote


def wrap(part: str) -> str:
    return f"<{part}>"


def test_unquote_strips_each_side_independently() -> None:
    assert unquote('"table"') == "table"
    assert unquote('"table') == "table"
    assert unquote('table"') == "table"
    assert unquote('""x""') == '"x"'
    assert unquote('"') == ""
    assert unquote(None) is None


def test_constructor_unquotes_both_parts() -> None:
    name = QualifiedName('"schema.name"', '"table name"')
    assert name.schema == "schema.name"
    assert name.identifier == "table name"


def test_constructor_keeps_none() -> None:
    name = QualifiedName(None, None)
    assert name.schema is None
    assert name.identifier is None
    assert name.parts == ()
    assert str(name) == ""


class TestRendering:
    def test_str_without_schema(self):
        assert str(QualifiedName(None, "t")) == "t"

    def test_str_with_schema(self):
        assert str(QualifiedName("schema.name", "table name")) == "schema.name.table name"

    def test_quoted_uses_injected_quoter(self):
        assert QualifiedName(None, "t").quoted(wrap) == "<t>"
        assert QualifiedName("s", "t").quoted(wrap) == "<s>.<t>"

    def test_quoted_with_double_quote_rule(self):
        def quote(part: str) -> str:
            return '"' + part.replace('"', '""') + '"'

        assert QualifiedName(None, "t").quoted(quote) == '"t"'
        assert QualifiedName("s", "t").quoted(quote) == '"s"."t"'
        assert QualifiedName("s", 'we"ird').quoted(quote) == '"s"."we""ird"'


class TestEquality:
    def test_equal_names_share_hash(self):
        a = QualifiedName("s", "t")
        b = QualifiedName('"s"', '"t"')
        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_schema_matters(self):
        assert QualifiedName("a", "b") != QualifiedName(None, "b")

    def test_equality_uses_compacted_parts(self):
        # ("a", None) and (None, "a") both compact to ("a",)
        a = QualifiedName("a", None)
        b = QualifiedName(None, "a")
        assert a == b
        assert hash(a) == hash(b)

    def test_other_types_are_never_equal(self):
        assert QualifiedName(None, "t") != "t"
        assert QualifiedName(None, "t") != ("t",)

    def test_subclass_is_a_different_kind(self):
        class OtherName(QualifiedName):
            pass

        assert QualifiedName("s", "t") != OtherName("s", "t")

    def test_usable_as_dict_key(self):
        counts = {QualifiedName("s", "t"): 1}
        assert counts[QualifiedName('"s"', "t")] == 1


def test_is_immutable() -> None:
    name = QualifiedName("s", "t")
    with pytest.raises(FrozenInstanceError):
        name.identifier = "u"
