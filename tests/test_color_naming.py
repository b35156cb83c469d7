"""Tests for nearest named color lookup and the FIFO cache."""

import threading

import pytest

from stylit.core.color_naming import UNKNOWN_NAME, FifoCache, NamedColorResolver
from stylit.core.color_space import delta_e_76_many
from stylit.core.rules.named_colors import NAMED_COLORS


@pytest.fixture
def resolver():
    return NamedColorResolver()


def test_dataset_names_are_unique():
    names = [name.lower() for name, _ in NAMED_COLORS]
    assert len(names) == len(set(names))


def test_exact_hex_resolves_to_its_name(resolver):
    assert resolver.get_nearest_color_name('#FF0000').name == 'Red'
    assert resolver.get_nearest_color_name('#39ff14').to_dict() == {'hex': '#39FF14', 'name': 'Neon Green'}


def test_every_well_formed_hex_gets_a_name(resolver):
    for hex_code in ('#123456', '#FEDCBA', '#7F7F7F', '#010203'):
        assert resolver.get_nearest_color_name(hex_code).name != UNKNOWN_NAME


def test_near_color_resolves_to_neighbour(resolver):
    assert resolver.get_nearest_color_name('#FF0001').name == 'Red'


def test_malformed_hex_is_unknown(resolver):
    assert resolver.get_nearest_color_name('zzz').to_dict() == {'hex': 'zzz', 'name': UNKNOWN_NAME}
    assert resolver.get_nearest_color_name('').to_dict() == {'hex': '#000000', 'name': UNKNOWN_NAME}
    assert resolver.get_nearest_color_name(None).hex == '#000000'


def test_invalid_dataset_rows_are_skipped():
    resolver = NamedColorResolver(dataset=[('Good', '#112233'), ('Bad', 'nope')])
    assert resolver.dataset_size == 1
    assert resolver.get_nearest_color_name('#FFFFFF').name == 'Good'


def test_empty_dataset_returns_unknown():
    resolver = NamedColorResolver(dataset=[])
    assert resolver.get_nearest_color_name('#FFFFFF').name == UNKNOWN_NAME


def test_injected_metric_is_used():
    calls = []

    def metric(lab, labs):
        calls.append(len(labs))
        return delta_e_76_many(lab, labs)

    resolver = NamedColorResolver(dataset=[('Black', '#000000'), ('White', '#FFFFFF')], metric=metric)
    assert resolver.get_nearest_color_name('#EEEEEE').name == 'White'
    assert calls == [2]


def test_hex_for_name_is_case_insensitive(resolver):
    assert resolver.hex_for_name('  navy ') == '#000080'
    assert resolver.hex_for_name('no such color') is None
    assert resolver.hex_for_name(None) is None


def test_cache_hit_returns_same_answer(resolver):
    first = resolver.get_nearest_color_name('#abcdef')
    assert '#ABCDEF' in resolver.cache
    assert resolver.get_nearest_color_name('#ABCDEF') == first

    resolver.clear_cache()
    assert len(resolver.cache) == 0
    assert resolver.get_nearest_color_name('#abcdef') == first


def test_resolver_cache_evicts_oldest():
    resolver = NamedColorResolver(cache_size=2)
    for hex_code in ('#111111', '#222222', '#333333'):
        resolver.get_nearest_color_name(hex_code)
    assert resolver.cache.keys() == ['#222222', '#333333']
    assert resolver.get_statistics()['cache_entries'] == 2


def test_fifo_cache_order():
    cache = FifoCache(capacity=3)
    for key in 'abc':
        cache.put(key, key.upper())
    assert cache.get('a') == 'A'

    # Reads do not refresh position; updates keep it.
    cache.put('a', 'AA')
    cache.put('d', 'D')
    assert cache.keys() == ['b', 'c', 'd']
    assert 'a' not in cache
    assert cache.get('a') is None


def test_fifo_cache_rejects_zero_capacity():
    with pytest.raises(ValueError):
        FifoCache(capacity=0)


def test_fifo_cache_is_bounded_under_concurrency():
    cache = FifoCache(capacity=50)

    def writer(offset):
        for i in range(200):
            cache.put(offset * 1000 + i, i)

    threads = [threading.Thread(target=writer, args=(n,)) for n in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(cache) == 50
