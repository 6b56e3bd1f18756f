"""
Hierarchy operations: add_part, parent, is_child_of, concatenation and
creation-time ordering.

Run: pytest -m hierarchy
"""
import pytest

from srn.errors import HierarchyError, ValidationError, ValidationErrorKind
from srn.model.components import Account, Category, Domain, Part, PartList
from srn.model.name import (
    DEFAULT_ACCOUNT,
    DEFAULT_CATEGORY,
    DEFAULT_DOMAIN,
    DEFAULT_ROOT_LABEL,
    SRN,
    compare,
    concatenate,
    sort_by_creation,
)
from srn.model.root import RootStrategy


# ============================================================================
# add_part / parent
# ============================================================================


@pytest.mark.hierarchy
def test_add_part_then_parent_is_identity(settings_srn):
    """
    Given: An SRN with fewer than ten parts
    When: Adding a part and taking the parent
    Then: The original SRN comes back
    """
    child = settings_srn.add_part("theme")

    assert child.parent() == settings_srn
    assert str(child) == f"{settings_srn}/theme"
    assert child.depth == settings_srn.depth + 1


@pytest.mark.hierarchy
def test_add_part_does_not_mutate(settings_srn):
    """
    Given: An SRN
    When: Adding a part
    Then: The original still has its old parts
    """
    settings_srn.add_part(Part("theme"))

    assert settings_srn.parts.to_strings() == ("settings",)


@pytest.mark.hierarchy
def test_add_part_validates(build_srn):
    """
    Given: An SRN with ten parts, and one with a valid path
    When: Adding an eleventh part, or an invalid part
    Then: ValidationError TOO_MANY_PARTS / INVALID_CHARACTERS is raised
    """
    full = build_srn(*[f"p{i}" for i in range(10)])

    with pytest.raises(ValidationError) as exc_info:
        full.add_part("p10")
    assert exc_info.value.kind is ValidationErrorKind.TOO_MANY_PARTS

    with pytest.raises(ValidationError) as exc_info:
        build_srn().add_part("bad part")
    assert exc_info.value.kind is ValidationErrorKind.INVALID_CHARACTERS


@pytest.mark.hierarchy
def test_root_level_srn_has_no_parent(build_srn):
    """
    Given: An SRN with no parts
    When: Taking its parent
    Then: None is returned
    """
    assert build_srn().parent() is None


@pytest.mark.hierarchy
def test_ancestors_walk_up_to_the_root(build_srn):
    """
    Given: An SRN a/b/c
    When: Listing its ancestors
    Then: a/b, a, then the bare root SRN, each a strict ancestor
    """
    name = build_srn("a", "b", "c")

    ancestors = list(name.ancestors())

    assert [a.parts.to_strings() for a in ancestors] == [("a", "b"), ("a",), ()]
    assert all(name.is_child_of(a) for a in ancestors)


@pytest.mark.hierarchy
def test_with_parts_replaces_the_path(settings_srn):
    """
    Given: An SRN with path settings
    When: Replacing the path with x/y
    Then: Only the parts change
    """
    moved = settings_srn.with_parts(["x", "y"])

    assert moved.parts.to_strings() == ("x", "y")
    assert moved.root == settings_srn.root


@pytest.mark.hierarchy
def test_with_new_root_keeps_namespace_and_parts(settings_srn):
    """
    Given: An SRN
    When: Generating a new root for it
    Then: Namespace and parts are kept and the root differs
    """
    renamed = settings_srn.with_new_root("profile")

    assert renamed.root != settings_srn.root
    assert renamed.shares_namespace(settings_srn)
    assert renamed.parts == settings_srn.parts


# ============================================================================
# is_child_of
# ============================================================================


@pytest.mark.hierarchy
def test_child_relation(settings_srn):
    """
    Given: X and X with one more part
    When: Checking is_child_of both ways and against itself
    Then: Only the longer one is a child; nothing is its own child
    """
    child = settings_srn.add_part("theme")

    assert child.is_child_of(settings_srn)
    assert not settings_srn.is_child_of(child)
    assert not settings_srn.is_child_of(settings_srn)


@pytest.mark.hierarchy
def test_child_requires_same_root(build_srn):
    """
    Given: Two SRNs with the same path but different roots
    When: Checking is_child_of
    Then: False, even when one path extends the other
    """
    a = build_srn("settings")
    b = build_srn("settings", "theme")

    assert a.root != b.root
    assert not b.is_child_of(a)


@pytest.mark.hierarchy
def test_child_requires_prefix_in_order(settings_srn):
    """
    Given: SRNs with paths a/b and b/a/c under the same root
    When: Checking is_child_of
    Then: False, prefixes must match position by position
    """
    ab = settings_srn.with_parts(["a", "b"])
    bac = settings_srn.with_parts(["b", "a", "c"])

    assert not bac.is_child_of(ab)


@pytest.mark.hierarchy
def test_child_requires_same_account(build_srn):
    """
    Given: Two SRNs sharing a content-addressable root but different accounts
    When: Checking is_child_of
    Then: False
    """
    strategy = RootStrategy.CONTENT_ADDRESSABLE
    a = build_srn(strategy=strategy, account="tenant1")
    b = build_srn("x", strategy=strategy, account="tenant2")

    assert a.root == b.root
    assert not b.is_child_of(a)


# ============================================================================
# Concatenation
# ============================================================================


@pytest.mark.hierarchy
def test_concatenate_appends_parts(settings_srn, build_srn):
    """
    Given: X (path settings) and Y (path theme/dark) of the same namespace
    When: Concatenating with + and with concatenate()
    Then: X's root is kept and the path is settings/theme/dark
    """
    y = build_srn("theme", "dark")

    combined = settings_srn + y

    assert combined.root == settings_srn.root
    assert combined.parts.to_strings() == ("settings", "theme", "dark")
    assert concatenate(settings_srn, y) == combined
    assert combined.is_child_of(settings_srn)


@pytest.mark.hierarchy
def test_concatenate_rejects_other_namespace(build_srn):
    """
    Given: Two SRNs with different accounts
    When: Concatenating them
    Then: HierarchyError is raised
    """
    a = build_srn("a", account="tenant1")
    b = build_srn("b", account="tenant2")

    with pytest.raises(HierarchyError):
        a + b


@pytest.mark.hierarchy
def test_concatenate_respects_part_limit(build_srn):
    """
    Given: Two SRNs with six parts each
    When: Concatenating them
    Then: ValidationError TOO_MANY_PARTS is raised
    """
    a = build_srn(*[f"a{i}" for i in range(6)])
    b = build_srn(*[f"b{i}" for i in range(6)])

    with pytest.raises(ValidationError) as exc_info:
        concatenate(a, b)
    assert exc_info.value.kind is ValidationErrorKind.TOO_MANY_PARTS


# ============================================================================
# Ordering
# ============================================================================


@pytest.mark.hierarchy
def test_srns_order_by_creation(build_srn):
    """
    Given: Three SRNs created one after another
    When: Sorting a shuffled list and comparing pairwise
    Then: Creation order is recovered and compare agrees with <
    """
    first = build_srn("z")
    second = build_srn("a")
    third = build_srn("m")

    assert sorted([third, first, second]) == [first, second, third]
    assert sort_by_creation([second, third, first]) == [first, second, third]
    assert first < second <= third
    assert third > first
    assert compare(first, second) == -1
    assert compare(second, first) == 1
    assert compare(first, first) == 0


@pytest.mark.hierarchy
def test_ordering_ignores_parts(settings_srn):
    """
    Given: X and X with a different path
    When: Comparing them
    Then: They compare equal, ordering uses the root only
    """
    other = settings_srn.with_parts(["zzz"])

    assert compare(settings_srn, other) == 0
    assert not settings_srn < other
    assert settings_srn <= other


@pytest.mark.hierarchy
def test_content_addressable_srns_are_not_ordered(build_srn):
    """
    Given: A content-addressable SRN and a time-ordered one
    When: Ordering them
    Then: < raises TypeError, compare/sort_by_creation raise HierarchyError
    """
    ca = build_srn(strategy=RootStrategy.CONTENT_ADDRESSABLE)
    to = build_srn()

    with pytest.raises(TypeError):
        ca < to
    with pytest.raises(HierarchyError):
        compare(ca, to)
    with pytest.raises(HierarchyError):
        sort_by_creation([to, ca])


@pytest.mark.hierarchy
def test_ordering_ignores_root_label(build_srn):
    """
    Given: SRNs created in order with root labels zzz, aaa, mmm
    When: Sorting them
    Then: Creation order wins over label order
    """
    first = build_srn(root_label="zzz")
    second = build_srn(root_label="aaa")
    third = build_srn(root_label="mmm")

    assert sorted([second, third, first]) == [first, second, third]
    assert sort_by_creation([third, second, first]) == [first, second, third]
    assert compare(first, second) == -1
    assert first < second


# ============================================================================
# Single-component constructors
# ============================================================================


@pytest.mark.hierarchy
def test_default_srn_uses_default_components():
    """
    Given: No components at all
    When: Creating SRN.default()
    Then: Every field holds its module default and the root is fresh
    """
    a = SRN.default()
    b = SRN.default()

    assert a.domain == DEFAULT_DOMAIN
    assert a.category == DEFAULT_CATEGORY
    assert a.account == DEFAULT_ACCOUNT
    assert a.root.label == DEFAULT_ROOT_LABEL
    assert a.depth == 0
    assert a.root != b.root
    assert str(a).startswith("ern:default:system:account:root_")


@pytest.mark.hierarchy
def test_with_root_generates_root_from_label():
    """
    Given: Root label "profile"
    When: Creating SRN.with_root, time-ordered and content-addressable
    Then: Only the root differs from the defaults
    """
    timed = SRN.with_root("profile")
    stable = SRN.with_root("profile", RootStrategy.CONTENT_ADDRESSABLE)

    assert timed.root.label == "profile"
    assert timed.root.is_time_ordered
    assert timed.domain == DEFAULT_DOMAIN
    assert stable == SRN.with_root("profile", RootStrategy.CONTENT_ADDRESSABLE)


@pytest.mark.hierarchy
@pytest.mark.parametrize("factory,field,value", [
    (SRN.with_domain, "domain", Domain("my-app")),
    (SRN.with_category, "category", Category("users")),
    (SRN.with_account, "account", Account("tenant123")),
])
def test_single_component_constructors(factory, field, value):
    """
    Given: One supplied component value
    When: Using the matching SRN.with_* constructor
    Then: That field holds the value and the others are defaults
    """
    name = factory(value.value)

    assert getattr(name, field) == value
    assert name.root.label == DEFAULT_ROOT_LABEL
    assert name.parts == PartList()


@pytest.mark.hierarchy
@pytest.mark.parametrize("factory,raw", [
    (SRN.with_domain, "-bad"),
    (SRN.with_category, "bad_category"),
    (SRN.with_account, "_bad"),
    (SRN.with_root, "bad:root"),
])
def test_single_component_constructors_validate(factory, raw):
    """
    Given: An invalid supplied value
    When: Using the matching SRN.with_* constructor
    Then: ValidationError is raised
    """
    with pytest.raises(ValidationError):
        factory(raw)


# ============================================================================
# Non-SRN arguments
# ============================================================================


@pytest.mark.hierarchy
@pytest.mark.parametrize("other", ["ern:my-app:users:tenant123:profile", None, 42])
def test_relations_reject_non_srn(settings_srn, other):
    """
    Given: A value that is not an SRN
    When: Checking is_child_of / shares_namespace against it
    Then: TypeError is raised
    """
    with pytest.raises(TypeError):
        settings_srn.is_child_of(other)
    with pytest.raises(TypeError):
        settings_srn.shares_namespace(other)
