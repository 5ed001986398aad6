import pytest

from hbsdcontrol.core.errors import UnknownFeature
from hbsdcontrol.domain.feature_state import FeatureDescriptor, Polarity
from hbsdcontrol.registry import AttributeMatcher, FeatureRegistry, PAX_FEATURES, default_registry


@pytest.mark.unit
def test_default_registry_order_and_attributes():
    registry = default_registry()
    assert registry.names() == (
        "aslr",
        "segvguard",
        "pageexec",
        "mprotect",
        "shlibrandom",
        "disallow_map32bit",
    )
    aslr = registry.lookup_by_name("aslr")
    assert aslr.disable_attr == "hbsd.pax.noaslr"
    assert aslr.enable_attr == "hbsd.pax.aslr"
    assert registry.lookup_by_name("disallow_map32bit").disable_attr == (
        "hbsd.pax.nodisallow_map32bit"
    )


@pytest.mark.unit
def test_lookup_unknown_feature():
    with pytest.raises(UnknownFeature) as excinfo:
        default_registry().lookup_by_name("ASLR")
    assert excinfo.value.name == "ASLR"
    assert "aslr" in excinfo.value.known


@pytest.mark.unit
def test_registry_rejects_shared_attribute_names():
    with pytest.raises(ValueError):
        FeatureRegistry(
            [
                FeatureDescriptor("one", "x.noone", "x.shared"),
                FeatureDescriptor("two", "x.shared", "x.two"),
            ]
        )


@pytest.mark.unit
def test_registry_rejects_same_attribute_for_both_polarities():
    with pytest.raises(ValueError):
        FeatureRegistry([FeatureDescriptor("one", "x.one", "x.one")])


@pytest.mark.unit
def test_registry_rejects_empty_names_and_duplicates():
    with pytest.raises(ValueError):
        FeatureRegistry([FeatureDescriptor("one", "", "x.one")])
    with pytest.raises(ValueError):
        FeatureRegistry([PAX_FEATURES[0], PAX_FEATURES[0]])


@pytest.mark.unit
def test_matcher_finds_feature_and_polarity():
    matcher = AttributeMatcher(default_registry())
    match = matcher.match("hbsd.pax.nomprotect")
    assert match is not None
    assert match.descriptor.name == "mprotect"
    assert match.polarity is Polarity.DISABLE
    assert matcher.match("hbsd.pax.mprotect").polarity is Polarity.ENABLE


@pytest.mark.unit
@pytest.mark.parametrize(
    "name",
    ["hbsd.pax.ASLR", "hbsd.pax.aslr ", "hbsd.pax.aslx", "hbsd.pax", "", "user.comment"],
)
def test_matcher_is_exact_and_case_sensitive(name):
    assert AttributeMatcher(default_registry()).match(name) is None
