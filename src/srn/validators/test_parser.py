"""
SRN text parsing.

parse(str(x)) == x for every built SRN; malformed text raises ParseError
and never yields a partial value.

Run: pytest -m parser
"""
import pytest

from srn.errors import ParseError, ParseErrorKind, ValidationError
from srn.model.components import Account, Category, Domain, Part, PartList
from srn.model.name import SRN
from srn.model.root import Root, RootStrategy
from srn.parser import SRNParser, is_valid, parse


# ============================================================================
# Round-trip
# ============================================================================


@pytest.mark.parser
@pytest.mark.parametrize("parts", [(), ("settings",), ("a", "b.c", "d_e", "-f")])
@pytest.mark.parametrize("strategy", list(RootStrategy))
def test_parse_inverts_to_string(build_srn, parts, strategy):
    """
    Given: A built SRN with any strategy and depth
    When: Parsing its canonical text
    Then: The result equals the original, root strategy included
    """
    original = build_srn(*parts, strategy=strategy)

    parsed = parse(str(original))

    assert parsed == original
    assert parsed.root.strategy is strategy
    assert str(parsed) == str(original)


@pytest.mark.parser
def test_parses_components_in_place():
    """
    Given: ern:my-app:users:tenant123:profile/settings/theme
    When: Parsing it
    Then: Every field lands in its component and the root is kept opaque
    """
    name = SRNParser("ern:my-app:users:tenant123:profile/settings/theme").parse()

    assert name.domain == Domain("my-app")
    assert name.category == Category("users")
    assert name.account == Account("tenant123")
    assert name.root == Root("profile")
    assert name.root.strategy is None
    assert name.parts == PartList.of("settings", "theme")


@pytest.mark.parser
def test_parses_ten_parts():
    """
    Given: Text with exactly ten path segments
    When: Parsing it
    Then: All ten are kept
    """
    text = "ern:d:c:a:r/" + "/".join(f"p{i}" for i in range(10))

    assert parse(text).depth == 10


@pytest.mark.parser
def test_parses_custom_scheme():
    """
    Given: Text using scheme "srn"
    When: Parsing with scheme="srn" and with the default
    Then: The first succeeds, the default scheme rejects it
    """
    text = "srn:my-app:users:tenant123:profile"

    assert parse(text, scheme="srn").scheme == "srn"
    assert not is_valid(text)


# ============================================================================
# Format errors
# ============================================================================


@pytest.mark.parser
@pytest.mark.parametrize("text", [
    "",
    "ern",
    "ern:my-app:users:tenant123",
    "urn:my-app:users:tenant123:profile",
    "ERN:my-app:users:tenant123:profile",
])
def test_format_errors(text):
    """
    Given: Text with too few fields or the wrong scheme
    When: Parsing it
    Then: ParseError INVALID_FORMAT is raised
    """
    with pytest.raises(ParseError) as exc_info:
        parse(text)

    assert exc_info.value.kind is ParseErrorKind.INVALID_FORMAT
    assert exc_info.value.component is None
    assert str(exc_info.value).startswith("Invalid SRN format:")


# ============================================================================
# Component errors
# ============================================================================


@pytest.mark.parser
@pytest.mark.parametrize("text,component", [
    ("ern::users:tenant123:profile", "Domain"),
    ("ern:-app:users:tenant123:profile", "Domain"),
    ("ern:my-app:-bad-:tenant123:profile", "Category"),
    ("ern:my-app:users:_t:profile", "Account"),
    ("ern:my-app:users:tenant123:", "Root"),
    ("ern:my-app:users:tenant123:/settings", "Root"),
    ("ern:my-app:users:tenant123:profile:extra", "Root"),
    ("ern:my-app:users:tenant123:profile/", "Part"),
    ("ern:my-app:users:tenant123:profile/a//b", "Part"),
    ("ern:my-app:users:tenant123:profile/has space", "Part"),
    ("ern:my-app:users:tenant123:profile/settings\n", "Part"),
    ("ern:my-app\n:users:tenant123:profile", "Domain"),
    ("ern:my-app:users:tenant123:profile\n", "Root"),
])
def test_component_errors(text, component):
    """
    Given: Well-formed fields where one component breaks its rules
    When: Parsing
    Then: ParseError COMPONENT_INVALID names the failing component
    """
    with pytest.raises(ParseError) as exc_info:
        parse(text)

    assert exc_info.value.kind is ParseErrorKind.COMPONENT_INVALID
    assert exc_info.value.component == component
    assert str(exc_info.value).startswith(f"Failed to parse {component}:")


@pytest.mark.parser
def test_eleven_parts_are_rejected():
    """
    Given: Text with eleven path segments
    When: Parsing it
    Then: ParseError COMPONENT_INVALID for PartList is raised
    """
    text = "ern:d:c:a:r/" + "/".join(f"p{i}" for i in range(11))

    with pytest.raises(ParseError) as exc_info:
        parse(text)

    assert exc_info.value.component == "PartList"


@pytest.mark.parser
def test_parse_error_chains_validation_error():
    """
    Given: Text with an invalid category
    When: Parsing it
    Then: The ValidationError is available as the cause
    """
    with pytest.raises(ParseError) as exc_info:
        parse("ern:my-app:-bad-:tenant123:profile")

    assert exc_info.value.__cause__ is not None
    assert exc_info.value.__cause__.component == "Category"


@pytest.mark.parser
def test_is_valid():
    """
    Given: One valid and one invalid SRN string
    When: Checking them with is_valid
    Then: Only the valid one passes
    """
    assert is_valid("ern:my-app:users:tenant123:profile/settings")
    assert not is_valid("ern:my-app:users")


@pytest.mark.parser
def test_non_string_input_is_a_type_error():
    """
    Given: None instead of text
    When: Parsing
    Then: TypeError is raised
    """
    with pytest.raises(TypeError):
        SRNParser(None)


@pytest.mark.parser
def test_parsed_value_is_an_srn(settings_srn):
    """
    Given: A built SRN
    When: Parsing its text
    Then: An SRN instance is returned
    """
    assert isinstance(parse(str(settings_srn)), SRN)


@pytest.mark.parser
def test_scheme_with_trailing_newline_is_rejected():
    """
    Given: Expected scheme "ern" followed by a newline
    When: Creating a parser for it
    Then: ValidationError for Scheme is raised
    """
    with pytest.raises(ValidationError) as exc_info:
        SRNParser("ern:my-app:users:tenant123:profile", scheme="ern\n")

    assert exc_info.value.component == "Scheme"
