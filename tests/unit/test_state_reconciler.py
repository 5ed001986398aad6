import pytest

from hbsdcontrol.domain.feature_state import RawAttributeState, ResolvedState
from hbsdcontrol.modules.state_reconciler import reconcile, resolve_feature


@pytest.mark.unit
@pytest.mark.parametrize(
    ("disable_raw", "enable_raw", "expected"),
    [
        (False, False, ResolvedState.CONFLICT),
        (False, True, ResolvedState.ENABLED),
        (True, False, ResolvedState.DISABLED),
        (True, True, ResolvedState.CONFLICT),
    ],
)
def test_reconcile_truth_table(disable_raw, enable_raw, expected):
    assert reconcile(disable_raw, enable_raw) is expected


@pytest.mark.unit
def test_reconcile_both_absent_is_conflict_not_disabled():
    assert reconcile(False, False) is ResolvedState.CONFLICT
    assert reconcile(False, False) is not ResolvedState.DISABLED


@pytest.mark.unit
def test_reconcile_never_returns_unset():
    results = {reconcile(d, e) for d in (False, True) for e in (False, True)}
    assert ResolvedState.UNSET not in results


@pytest.mark.unit
def test_resolve_feature_unset_when_nothing_stored():
    state = resolve_feature(
        "aslr",
        RawAttributeState.absent("hbsd.pax.noaslr"),
        RawAttributeState.absent("hbsd.pax.aslr"),
    )
    assert state.resolved is ResolvedState.UNSET
    assert state.disable_present is False
    assert state.enable_present is False


@pytest.mark.unit
def test_resolve_feature_both_zero_is_conflict():
    state = resolve_feature(
        "aslr",
        RawAttributeState.from_value("hbsd.pax.noaslr", b"0"),
        RawAttributeState.from_value("hbsd.pax.aslr", b"0"),
    )
    assert state.resolved is ResolvedState.CONFLICT


@pytest.mark.unit
def test_resolve_feature_written_pair_disabled():
    state = resolve_feature(
        "segvguard",
        RawAttributeState.from_value("hbsd.pax.nosegvguard", b"1"),
        RawAttributeState.from_value("hbsd.pax.segvguard", b"0"),
    )
    assert state.resolved is ResolvedState.DISABLED
    assert state.to_dict() == {
        "feature": "segvguard",
        "state": "disabled",
        "disable": {"attribute": "hbsd.pax.nosegvguard", "present": True, "value": "1"},
        "enable": {"attribute": "hbsd.pax.segvguard", "present": True, "value": "0"},
    }
