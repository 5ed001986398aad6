import pytest

from hbsdcontrol.adapters import MemoryAttributeStore
from hbsdcontrol.core.aggregator import FeatureStateAggregator
from hbsdcontrol.core.errors import (
    AttributeStoreFailure,
    MalformedAttributeList,
    MalformedAttributeValue,
    UnknownFeature,
)
from hbsdcontrol.core.options import ControlOptions
from hbsdcontrol.domain.feature_state import ResolvedState

PATH = "/usr/local/bin/firefox"


class FailingStore(MemoryAttributeStore):
    """Memory store whose writes and deletes fail for selected attributes."""

    def __init__(self, fail_on=(), **kwargs):
        super().__init__(**kwargs)
        self.fail_on = set(fail_on)
        self.writes: list[tuple[str, int]] = []
        self.deletes: list[str] = []

    def set(self, path, name, value):
        self.writes.append((name, value))
        if name in self.fail_on:
            raise AttributeStoreFailure("set", path, attribute=name, errno=1)
        super().set(path, name, value)

    def delete(self, path, name):
        self.deletes.append(name)
        if name in self.fail_on:
            raise AttributeStoreFailure("delete", path, attribute=name, errno=1)
        super().delete(path, name)


class RacingStore(MemoryAttributeStore):
    """Lists attributes that are gone by the time they are read."""

    def get(self, path, name):
        return None


@pytest.mark.unit
def test_query_only_enable_attribute_is_enabled():
    store = MemoryAttributeStore({PATH: {"hbsd.pax.aslr": b"1"}})
    states = FeatureStateAggregator(store).query(PATH)
    assert len(states) == 1
    assert states[0].feature == "aslr"
    assert states[0].resolved is ResolvedState.ENABLED
    assert states[0].disable_present is False


@pytest.mark.unit
def test_query_both_attributes_set_is_conflict():
    store = MemoryAttributeStore({PATH: {"hbsd.pax.noaslr": b"1", "hbsd.pax.aslr": b"1"}})
    (state,) = FeatureStateAggregator(store).query(PATH)
    assert state.resolved is ResolvedState.CONFLICT


@pytest.mark.unit
def test_query_reports_in_registry_order_and_ignores_unrelated():
    store = MemoryAttributeStore(
        {
            PATH: {
                "hbsd.pax.mprotect": b"0",
                "hbsd.pax.nomprotect": b"1",
                "user.checksum": b"abc",
                "hbsd.pax.ASLR": b"1",
                "hbsd.pax.segvguard": b"1",
                "hbsd.pax.nosegvguard": b"0",
            }
        }
    )
    states = FeatureStateAggregator(store).query(PATH)
    assert [(s.feature, s.resolved) for s in states] == [
        ("segvguard", ResolvedState.ENABLED),
        ("mprotect", ResolvedState.DISABLED),
    ]


@pytest.mark.unit
def test_query_empty_file():
    assert FeatureStateAggregator(MemoryAttributeStore()).query(PATH) == []


@pytest.mark.unit
def test_query_attributes_gone_after_listing_are_omitted():
    store = RacingStore({PATH: {"hbsd.pax.aslr": b"1"}})
    assert FeatureStateAggregator(store).query(PATH) == []


@pytest.mark.unit
def test_query_malformed_listing():
    class BrokenListing(MemoryAttributeStore):
        def list(self, path):
            return b"\x20hbsd.pax.aslr"

    with pytest.raises(MalformedAttributeList):
        FeatureStateAggregator(BrokenListing()).query(PATH)


@pytest.mark.unit
def test_query_malformed_value():
    store = MemoryAttributeStore({PATH: {"hbsd.pax.pageexec": b"7"}})
    with pytest.raises(MalformedAttributeValue):
        FeatureStateAggregator(store).query(PATH)


@pytest.mark.unit
def test_query_with_buffer_dump_option():
    store = MemoryAttributeStore({PATH: {"hbsd.pax.aslr": b"1"}})
    aggregator = FeatureStateAggregator(store, options=ControlOptions(verbose=3))
    assert aggregator.options.dump_buffers is True
    assert aggregator.query(PATH)[0].resolved is ResolvedState.ENABLED


@pytest.mark.unit
def test_set_disabled_writes_both_attributes_then_reports_disabled():
    store = FailingStore()
    aggregator = FeatureStateAggregator(store)
    aggregator.set_feature_state(PATH, "segvguard", False)
    assert sorted(store.writes) == [("hbsd.pax.nosegvguard", 1), ("hbsd.pax.segvguard", 0)]
    assert store.attributes(PATH) == {
        "hbsd.pax.nosegvguard": b"1",
        "hbsd.pax.segvguard": b"0",
    }
    (state,) = aggregator.query(PATH)
    assert state.feature == "segvguard"
    assert state.resolved is ResolvedState.DISABLED


@pytest.mark.unit
def test_set_enabled_reports_enabled():
    aggregator = FeatureStateAggregator(MemoryAttributeStore())
    aggregator.set_feature_state(PATH, "pageexec", True)
    assert aggregator.status(PATH, "pageexec").resolved is ResolvedState.ENABLED


@pytest.mark.unit
def test_set_attempts_second_write_when_first_fails():
    store = FailingStore(fail_on={"hbsd.pax.noaslr"})
    aggregator = FeatureStateAggregator(store)
    with pytest.raises(AttributeStoreFailure) as excinfo:
        aggregator.set_feature_state(PATH, "aslr", True)
    assert [name for name, _ in store.writes] == ["hbsd.pax.noaslr", "hbsd.pax.aslr"]
    assert excinfo.value.attribute == "hbsd.pax.noaslr"
    assert store.attributes(PATH) == {"hbsd.pax.aslr": b"1"}


@pytest.mark.unit
def test_set_reports_every_failed_write():
    store = FailingStore(fail_on={"hbsd.pax.noaslr", "hbsd.pax.aslr"})
    with pytest.raises(AttributeStoreFailure) as excinfo:
        FeatureStateAggregator(store).set_feature_state(PATH, "aslr", True)
    assert len(excinfo.value.failures) == 2


@pytest.mark.unit
def test_half_failed_enable_over_disabled_state_reads_conflict():
    store = FailingStore(fail_on={"hbsd.pax.noaslr"})
    store.put_raw(PATH, "hbsd.pax.noaslr", b"1")
    store.put_raw(PATH, "hbsd.pax.aslr", b"0")
    aggregator = FeatureStateAggregator(store)
    with pytest.raises(AttributeStoreFailure):
        aggregator.set_feature_state(PATH, "aslr", True)
    assert aggregator.status(PATH, "aslr").resolved is ResolvedState.CONFLICT


@pytest.mark.unit
def test_set_unknown_feature_writes_nothing():
    store = FailingStore()
    with pytest.raises(UnknownFeature):
        FeatureStateAggregator(store).set_feature_state(PATH, "nx", True)
    assert store.writes == []


@pytest.mark.unit
def test_reset_deletes_both_even_if_only_one_present():
    store = FailingStore()
    store.put_raw(PATH, "hbsd.pax.mprotect", b"1")
    store.put_raw(PATH, "hbsd.pax.aslr", b"1")
    aggregator = FeatureStateAggregator(store)
    aggregator.reset_feature(PATH, "mprotect")
    assert store.deletes == ["hbsd.pax.nomprotect", "hbsd.pax.mprotect"]
    assert [s.feature for s in aggregator.query(PATH)] == ["aslr"]
    assert aggregator.status(PATH, "mprotect").resolved is ResolvedState.UNSET


@pytest.mark.unit
def test_reset_all_clears_every_feature():
    store = MemoryAttributeStore({PATH: {"hbsd.pax.aslr": b"1", "hbsd.pax.noshlibrandom": b"1"}})
    aggregator = FeatureStateAggregator(store)
    aggregator.reset_all(PATH)
    assert aggregator.query(PATH) == []


@pytest.mark.unit
def test_reset_all_stops_at_first_failure():
    store = FailingStore(fail_on={"hbsd.pax.nosegvguard"})
    with pytest.raises(AttributeStoreFailure):
        FeatureStateAggregator(store).reset_all(PATH)
    assert store.deletes == [
        "hbsd.pax.noaslr",
        "hbsd.pax.aslr",
        "hbsd.pax.nosegvguard",
        "hbsd.pax.segvguard",
    ]


@pytest.mark.unit
def test_reset_all_keep_going_attempts_every_feature():
    store = FailingStore(fail_on={"hbsd.pax.nosegvguard", "hbsd.pax.mprotect"})
    aggregator = FeatureStateAggregator(store, options=ControlOptions(keep_going=True))
    with pytest.raises(AttributeStoreFailure) as excinfo:
        aggregator.reset_all(PATH)
    assert len(store.deletes) == 12
    assert len(excinfo.value.failures) == 2
