"""tests/unit/test_components.py"""

import pytest

from uriparts.components import (
    MAX_COMPONENT_LENGTH,
    Component,
    Fragment,
    Pass,
    Path,
    Query,
    Scheme,
    User,
)
from uriparts.exceptions import (
    InvalidComponentError,
    TypeMismatchError,
    UnsupportedOperationError,
)


class TestComponentContract:
    """Tests for the behavior shared by every component."""

    def test_absent_and_empty_content(self, encoded_component):
        """Test absent and empty components keep distinct content."""
        assert encoded_component(None).get_content() is None
        assert encoded_component("").get_content() == ""

    def test_absent_and_empty_display(self, encoded_component):
        """Test absent and empty components both display as empty strings."""
        assert str(encoded_component(None)) == ""
        assert str(encoded_component("")) == ""
        assert encoded_component(None).to_display_string() == ""

    def test_absent_has_no_delimiter(self, encoded_component):
        """Test an absent component has an empty delimited form."""
        assert encoded_component(None).to_delimited_form() == ""

    def test_normalization_is_stable(self, encoded_component, messy_input):
        """Test building a component from its content changes nothing."""
        content = encoded_component(messy_input).get_content()
        assert encoded_component(content).get_content() == content

    def test_lowercase_triplets_are_uppercased(self, encoded_component):
        """Test percent-triplet hex digits are upper-cased."""
        assert encoded_component("%e2%82%ac").get_content() == "%E2%82%AC"

    def test_overencoded_unreserved_is_decoded(self, encoded_component):
        """Test triplets of unreserved characters become literals."""
        assert encoded_component("%61%7E").get_content() == "a~"

    def test_content_property(self):
        """Test the content property mirrors get_content()."""
        assert Pass("doe").content == "doe"

    def test_non_string_rejected(self, encoded_component):
        """Test non-string values are rejected with details."""
        with pytest.raises(InvalidComponentError, match="expected a string") as exc:
            encoded_component(42)
        assert exc.value.value == 42
        assert exc.value.component == encoded_component(None).name

    def test_too_long_rejected(self):
        """Test values longer than the limit are rejected."""
        with pytest.raises(InvalidComponentError, match="longer than"):
            Path("a" * (MAX_COMPONENT_LENGTH + 1))

    def test_limit_is_inclusive(self):
        """Test a value exactly at the limit is accepted."""
        assert len(Path("a" * MAX_COMPONENT_LENGTH).get_content()) == MAX_COMPONENT_LENGTH

    def test_immutable(self):
        """Test attributes cannot be set or deleted."""
        user = User("john")
        with pytest.raises(AttributeError):
            user._data = "jane"
        with pytest.raises(AttributeError):
            del user._data
        assert user.get_content() == "john"

    def test_generic_component_not_buildable(self):
        """Test the generic base refuses to build without a grammar."""
        with pytest.raises(UnsupportedOperationError, match="no grammar"):
            Component("x")

    def test_repr(self):
        """Test repr shows class and content."""
        assert repr(User("john")) == "User('john')"
        assert repr(Fragment(None)) == "Fragment(None)"


class TestSameValueAs:
    """Tests for same_value_as and equality."""

    def test_same_kind_same_value(self):
        """Test equal components of the same kind."""
        assert User("john").same_value_as(User("john")) is True

    def test_different_kind(self):
        """Test components whose delimited forms differ."""
        assert User("john").same_value_as(Fragment("john")) is False

    def test_normalized_forms_compared(self):
        """Test comparison uses the normalized content."""
        assert User("%6Aohn").same_value_as(User("john")) is True

    def test_unrelated_type_raises(self):
        """Test comparing with a non-component raises TypeMismatchError."""
        with pytest.raises(TypeMismatchError):
            User("john").same_value_as("john")

    def test_eq_and_hash(self):
        """Test equality and hashing follow the kind and content."""
        assert User("john") == User("john")
        assert User("john") != Path("john")
        assert User("john") != "john"
        assert Fragment(None) != Fragment("")
        assert len({User("john"), User("%6Aohn"), User("jane")}) == 2


class TestWithContent:
    """Tests for with_content."""

    def test_returns_new_instance(self):
        """Test the original component is left untouched."""
        fragment = Fragment("top")
        other = fragment.with_content("bottom")
        assert other is not fragment
        assert isinstance(other, Fragment)
        assert other.get_content() == "bottom"
        assert fragment.get_content() == "top"

    def test_to_absent(self):
        """Test a component can be made absent."""
        assert Query("a=b").with_content(None).get_content() is None

    def test_validates(self):
        """Test the same validation as construction applies."""
        with pytest.raises(InvalidComponentError):
            Scheme("http").with_content("1http")


class TestUserAndPass:
    """Tests for User and Pass components."""

    def test_pass_content(self):
        """Test plain and absent passwords."""
        assert Pass("doe").get_content() == "doe"
        assert Pass(None).get_content() is None

    def test_pass_allows_colon(self):
        """Test the password keeps a raw colon."""
        assert Pass("do:e").get_content() == "do:e"

    @pytest.mark.parametrize("value", ["jo:hn", "jo@hn", "jo/hn", "jo?hn", "jo#hn"])
    def test_user_rejects_delimiters(self, value):
        """Test the user rejects raw userinfo and authority delimiters."""
        with pytest.raises(InvalidComponentError, match="delimiter"):
            User(value)

    @pytest.mark.parametrize("value", ["do@e", "do/e", "do?e", "do#e"])
    def test_pass_rejects_delimiters(self, value):
        """Test the password rejects raw authority delimiters."""
        with pytest.raises(InvalidComponentError):
            Pass(value)

    def test_encoded_delimiter_accepted(self):
        """Test delimiters are accepted once percent-encoded."""
        user = User("jo%3ahn")
        assert user.get_content() == "jo%3Ahn"
        assert user.get_value() == "jo:hn"

    def test_get_value_decodes(self):
        """Test get_value returns the human readable value."""
        assert User("john doe").get_content() == "john%20doe"
        assert User("john doe").get_value() == "john doe"
        assert Pass("p%40ss").get_value() == "p@ss"

    def test_get_value_absent(self):
        """Test get_value of an absent component is the empty string."""
        assert User(None).get_value() == ""

    def test_delimited_forms(self):
        """Test user has no delimiter of its own and pass has a colon."""
        assert User("john").to_delimited_form() == "john"
        assert Pass("doe").to_delimited_form() == ":doe"
        assert Pass("").to_delimited_form() == ":"
        assert Pass(None).to_delimited_form() == ""

    def test_describe(self):
        """Test describe returns the kind name and content."""
        assert Pass("doe").describe() == {"pass": "doe"}
        assert User(None).describe() == {"user": None}


class TestFragment:
    """Tests for Fragment component."""

    def test_encoded_euro(self):
        """Test an encoded value is kept while get_value decodes it."""
        fragment = Fragment("%E2%82%AC")
        assert fragment.get_value() == "€"
        assert fragment.get_content() == "%E2%82%AC"

    def test_raw_unicode(self):
        """Test raw non-ASCII characters are encoded."""
        assert Fragment("€").get_content() == "%E2%82%AC"

    def test_allowed_extras(self):
        """Test slash, question mark, colon and at sign stay raw."""
        assert Fragment("/a?b:c@d").get_content() == "/a?b:c@d"

    def test_delimited_forms(self):
        """Test an empty fragment still renders its delimiter."""
        assert Fragment("top").to_delimited_form() == "#top"
        assert Fragment("").to_delimited_form() == "#"
        assert Fragment(None).to_delimited_form() == ""

    def test_leading_delimiter_is_encoded(self):
        """Test a leading hash is treated as part of the value."""
        assert Fragment("#top").get_content() == "%23top"


class TestPath:
    """Tests for Path component."""

    def test_spaces_encoded(self):
        """Test spaces inside segments are encoded."""
        path = Path("/toto le heros/file.xml")
        assert path.get_content() == "/toto%20le%20heros/file.xml"
        assert path.to_delimited_form() == "/toto%20le%20heros/file.xml"

    def test_pchar_extras(self):
        """Test colon, at sign and sub-delims stay raw."""
        assert Path("/a:b@c/d;e=f").get_content() == "/a:b@c/d;e=f"

    def test_encoded_slash_kept(self):
        """Test an encoded slash is not turned into a segment separator."""
        assert Path("/a%2fb").get_content() == "/a%2Fb"

    @pytest.mark.parametrize("value", ["/a?b", "/a#b"])
    def test_rejects_delimiters(self, value):
        """Test the path rejects raw query and fragment delimiters."""
        with pytest.raises(InvalidComponentError):
            Path(value)

    def test_no_value(self):
        """Test path does not expose a decoded value."""
        with pytest.raises(UnsupportedOperationError):
            Path("/a").get_value()


class TestQuery:
    """Tests for Query component."""

    def test_opaque_content(self):
        """Test the query is kept as a single encoded string."""
        query = Query("a=b&c=d e")
        assert query.get_content() == "a=b&c=d%20e"
        assert query.to_delimited_form() == "?a=b&c=d%20e"

    def test_empty_query_delimiter(self):
        """Test an empty query still renders its delimiter."""
        assert Query("").to_delimited_form() == "?"

    def test_rejects_hash(self):
        """Test the query rejects a raw fragment delimiter."""
        with pytest.raises(InvalidComponentError):
            Query("a=b#c")

    def test_encoded_equals_kept(self):
        """Test encoded sub-delims are not decoded."""
        assert Query("a%3db").get_content() == "a%3Db"


class TestScheme:
    """Tests for Scheme component."""

    def test_lowercased(self):
        """Test the scheme is lower-cased."""
        scheme = Scheme("HTTP")
        assert scheme.get_content() == "http"
        assert scheme.to_delimited_form() == "http:"

    def test_extras(self):
        """Test plus, dash and dot are allowed."""
        assert Scheme("svn+ssh").get_content() == "svn+ssh"

    @pytest.mark.parametrize("value", ["1http", "ht/tp", "http:", "ht tp", "h%41"])
    def test_invalid(self, value):
        """Test schemes breaking the grammar are rejected."""
        with pytest.raises(InvalidComponentError, match="scheme"):
            Scheme(value)

    def test_empty(self):
        """Test an empty scheme renders nothing."""
        assert Scheme("").get_content() == ""
        assert Scheme("").to_delimited_form() == ""

    def test_no_value(self):
        """Test scheme does not expose a decoded value."""
        with pytest.raises(UnsupportedOperationError):
            Scheme("http").get_value()
