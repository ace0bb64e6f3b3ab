"""Tests for the MaskedName value type."""

import logging

import pytest

from maskedname.core.constants import DEFAULT_DELIMITER
from maskedname.core.exceptions import IndexOutOfRangeError, MaskingError
from maskedname.core.masking import split_masked, unmask
from maskedname.core.name import MaskedName


class TestConstruction:
    """Test MaskedName construction."""

    def test_default_delimiter(self):
        """Delimiter defaults to the canonical delimiter."""
        name = MaskedName(["a", "b"])
        assert name.delimiter == DEFAULT_DELIMITER
        assert name.get_no_components() == 2

    def test_empty_name(self):
        """A name may have zero components."""
        name = MaskedName([])
        assert name.get_no_components() == 0
        assert len(name) == 0
        assert name.to_display_string() == ""
        assert name.to_canonical_string() == ""

    def test_defensive_copy(self):
        """Mutating the caller's list does not affect the name."""
        components = ["a", "b"]
        name = MaskedName(components)
        components.append("c")
        components[0] = "changed"

        assert name.get_no_components() == 2
        assert name.get_component(0) == "a"

    def test_accepts_any_iterable(self):
        """Components may come from a generator."""
        name = MaskedName(c for c in ["x", "y"])
        assert list(name) == ["x", "y"]

    def test_from_raw_components(self):
        """Raw components are masked for the target delimiter."""
        name = MaskedName.from_raw_components(["a/b", "c.d"], "/")
        assert name.get_component(0) == "a\\/b"
        assert name.get_component(1) == "c.d"
        assert name.to_display_string(",") == "a/b,c.d"

    def test_malformed_components_stored_verbatim(self):
        """Without strict masking nothing is validated."""
        name = MaskedName(["a.b", "c\\"])
        assert name.get_component(0) == "a.b"
        assert name.get_component(1) == "c\\"


class TestScenarios:
    """Reference examples of display and canonical rendering."""

    def test_domain_name(self, domain_name):
        """Plain components render identically in both forms."""
        assert domain_name.to_display_string() == "oss.cs.fau.de"
        assert domain_name.to_canonical_string() == "oss.cs.fau.de"

    def test_empty_components(self):
        """Four empty components give three separators."""
        name = MaskedName(["", "", "", ""], "/")
        assert name.to_display_string() == "///"
        assert name.to_canonical_string() == "..."

    def test_escaped_dots(self):
        """A single component made of escaped dots."""
        name = MaskedName(["Oh\\.\\.\\."], ".")
        assert name.get_no_components() == 1
        assert name.to_display_string() == "Oh..."
        assert name.to_canonical_string() == "Oh\\.\\.\\."

    def test_insert_at_end(self):
        """Inserting at the current length appends."""
        name = MaskedName(["a", "b"])
        name.insert(2, "x")

        assert name.get_no_components() == 3
        assert name.get_component(0) == "a"
        assert name.get_component(1) == "b"
        assert name.get_component(2) == "x"


class TestDisplayString:
    """Test to_display_string()."""

    def test_own_delimiter(self, slash_name):
        """Components are unmasked and joined without re-escaping."""
        assert slash_name.to_display_string() == "usr/a/b/c.d"

    def test_other_delimiter(self, slash_name):
        """A different output delimiter may be requested."""
        assert slash_name.to_display_string(".") == "usr.a/b.c.d"

    def test_str_is_display_string(self, slash_name):
        assert str(slash_name) == slash_name.to_display_string()


class TestCanonicalString:
    """Test to_canonical_string()."""

    def test_remasks_for_default_delimiter(self, slash_name):
        """Escapes for the instance delimiter are replaced by canonical ones."""
        assert slash_name.to_canonical_string() == "usr.a/b.c\\.d"

    def test_escapes_backslashes(self):
        """Literal escape characters are doubled."""
        name = MaskedName(["a\\\\b"])
        assert name.to_canonical_string() == "a\\\\b"

    def test_lone_escape_becomes_literal(self):
        """An escape that is not special for the instance is a literal backslash."""
        name = MaskedName(["x\\.y"], "/")
        assert name.to_canonical_string() == "x\\\\\\.y"

    def test_reparse(self, slash_name):
        """The canonical form splits back into the same raw components."""
        canonical = slash_name.to_canonical_string()
        raw = [unmask(part, ".") for part in split_masked(canonical)]
        assert raw == ["usr", "a/b", "c.d"]

    def test_from_canonical_string(self, slash_name):
        """Parsing the canonical form reproduces the name."""
        parsed = MaskedName.from_canonical_string(slash_name.to_canonical_string(), "/")
        assert parsed == slash_name

    def test_from_canonical_string_default_delimiter(self):
        parsed = MaskedName.from_canonical_string("a\\.b.c")
        assert parsed.delimiter == "."
        assert list(parsed) == ["a\\.b", "c"]

    def test_from_empty_canonical_string(self):
        """The empty string parses to one empty component."""
        parsed = MaskedName.from_canonical_string("")
        assert parsed.get_no_components() == 1
        assert parsed.get_component(0) == ""


class TestAccessors:
    """Test component accessors and mutators."""

    def test_get_component_returns_masked(self):
        """get_component does not unmask."""
        name = MaskedName(["a\\.b"])
        assert name.get_component(0) == "a\\.b"
        assert name.get_raw_component(0) == "a.b"

    def test_set_component(self, domain_name):
        domain_name.set_component(3, "org")
        assert domain_name.to_display_string() == "oss.cs.fau.org"

    def test_insert_front(self, domain_name):
        domain_name.insert(0, "www")
        assert domain_name.get_no_components() == 5
        assert domain_name.get_component(0) == "www"
        assert domain_name.get_component(1) == "oss"

    def test_append(self, domain_name):
        domain_name.append("eu")
        assert domain_name.get_no_components() == 5
        assert domain_name.get_component(4) == "eu"

    def test_append_to_empty(self):
        name = MaskedName([])
        name.append("only")
        assert list(name) == ["only"]

    def test_remove(self, domain_name):
        domain_name.remove(1)
        assert list(domain_name) == ["oss", "fau", "de"]

    def test_iteration_does_not_alias(self, domain_name):
        """Iterating while mutating works on a snapshot."""
        for _ in domain_name:
            domain_name.append("x")
        assert domain_name.get_no_components() == 8


class TestBounds:
    """Index validation for every index-taking operation."""

    @pytest.mark.parametrize("index", [-1, 4, 10])
    def test_get_component_out_of_range(self, domain_name, index):
        with pytest.raises(IndexOutOfRangeError):
            domain_name.get_component(index)

    @pytest.mark.parametrize("index", [-1, 4])
    def test_set_component_out_of_range(self, domain_name, index):
        with pytest.raises(IndexOutOfRangeError):
            domain_name.set_component(index, "x")
        assert list(domain_name) == ["oss", "cs", "fau", "de"]

    @pytest.mark.parametrize("index", [-1, 4])
    def test_remove_out_of_range(self, domain_name, index):
        with pytest.raises(IndexOutOfRangeError):
            domain_name.remove(index)
        assert domain_name.get_no_components() == 4

    @pytest.mark.parametrize("index", [-1, 5])
    def test_insert_out_of_range(self, domain_name, index):
        with pytest.raises(IndexOutOfRangeError):
            domain_name.insert(index, "x")
        assert domain_name.get_no_components() == 4

    def test_get_raw_component_out_of_range(self, domain_name):
        with pytest.raises(IndexOutOfRangeError):
            domain_name.get_raw_component(4)

    def test_empty_name_rejects_index_zero(self):
        name = MaskedName([])
        with pytest.raises(IndexOutOfRangeError) as exc_info:
            name.remove(0)
        assert exc_info.value.context["valid_range"] == "[0, 0)"

    def test_error_is_index_error(self, domain_name):
        """Callers may catch the builtin IndexError."""
        with pytest.raises(IndexError):
            domain_name.get_component(99)

    def test_error_context(self, domain_name):
        with pytest.raises(IndexOutOfRangeError) as exc_info:
            domain_name.insert(7, "x")

        error = exc_info.value
        assert error.context["index"] == 7
        assert error.context["valid_range"] == "[0, 4]"
        assert error.context["operation"] == "insert"


class TestStrictMasking:
    """Opt-in validation of component masking."""

    def test_strict_constructor_rejects_malformed(self):
        with pytest.raises(MaskingError) as exc_info:
            MaskedName(["ok", "a.b"], strict=True)
        assert exc_info.value.context["position"] == 1

    def test_strict_constructor_accepts_well_masked(self):
        name = MaskedName(["a\\.b", "c\\\\"], strict=True)
        assert name.strict
        assert name.to_display_string() == "a.b.c\\"

    def test_strict_set_component_leaves_name_unchanged(self):
        name = MaskedName(["a", "b"], strict=True)
        with pytest.raises(MaskingError):
            name.set_component(0, "x.y")
        assert list(name) == ["a", "b"]

    def test_strict_insert_rejects_trailing_escape(self):
        name = MaskedName(["a"], strict=True)
        with pytest.raises(ValueError):
            name.append("b\\")
        assert name.get_no_components() == 1

    @pytest.mark.parametrize("delimiter", ["\\", "::", ""])
    def test_strict_rejects_bad_delimiter(self, delimiter):
        with pytest.raises(MaskingError):
            MaskedName([], delimiter, strict=True)

    def test_global_config_enables_strict(self, strict_config):
        with pytest.raises(MaskingError):
            MaskedName(["a.b"])

    def test_explicit_flag_overrides_config(self, strict_config):
        name = MaskedName(["a.b"], strict=False)
        assert name.get_component(0) == "a.b"


class TestProtocol:
    """Equality, representation and dictionary conversion."""

    def test_equality(self):
        assert MaskedName(["a", "b"]) == MaskedName(["a", "b"], ".")
        assert MaskedName(["a", "b"]) != MaskedName(["a", "b"], "/")
        assert MaskedName(["a"]) != MaskedName(["a", "b"])
        assert MaskedName(["a"]) != ["a"]

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(MaskedName(["a"]))

    def test_repr(self):
        assert repr(MaskedName(["a", "b"], "/")) == "MaskedName(['a', 'b'], delimiter='/')"

    def test_dict_round_trip(self, slash_name):
        data = slash_name.to_dict()
        assert data["delimiter"] == "/"
        assert data["components"] == ["usr", "a\\/b", "c.d"]
        assert data["canonical"] == "usr.a/b.c\\.d"
        assert MaskedName.from_dict(data) == slash_name

    def test_mutation_logged(self, domain_name, caplog):
        caplog.set_level(logging.DEBUG, logger="maskedname")
        domain_name.remove(0)
        assert "Removed component 0" in caplog.text

    def test_dict_round_trip_keeps_strict(self):
        """A strict name rebuilt from its dictionary is still strict."""
        name = MaskedName(["a\\.b"], strict=True)
        data = name.to_dict()
        assert data["strict"] is True

        rebuilt = MaskedName.from_dict(data)
        assert rebuilt.strict
        with pytest.raises(MaskingError):
            rebuilt.append("x.y")

    def test_from_dict_without_strict_uses_config(self, strict_config):
        rebuilt = MaskedName.from_dict({"components": ["a"], "delimiter": "/"})
        assert rebuilt.strict
