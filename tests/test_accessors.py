import pytest

from path_map.accessors import (
    add_value_by_path,
    get_value_by_path,
    has_path,
    remove_paths,
    set_value_by_path,
)
from path_map.errors import ContainerTypeError


# --- has ---


@pytest.mark.parametrize("expected, data, path", [
    (True, {'foo': 'bar'}, 'foo'),
    (False, {'foo': 'bar'}, 'bar'),
    (True, {'foo': {'bar': 'baz'}}, 'foo.bar'),
    (False, {'foo': {'bar': 'baz'}}, 'foo.baz'),
    (True, {'foo': {'bar': {'baz': 'yolo'}}}, 'foo.bar.baz'),
    (False, {'foo': {'bar': {'baz': 'yolo'}}}, 'foo.bar.yolo'),
])
def test_has_path(expected, data, path):
    assert has_path(data, path) is expected


def test_has_path_counts_none_and_falsy_values_as_present():
    data = {'a': None, 'b': {'c': 0, 'd': ''}}
    assert has_path(data, 'a') is True
    assert has_path(data, 'b.c') is True
    assert has_path(data, 'b.d') is True


def test_has_path_is_false_for_empty_container_or_absent_path():
    assert has_path({}, 'a') is False
    assert has_path([], '0') is False
    assert has_path({'a': 1}, None) is False
    assert has_path({'a': 1}, '') is False


def test_has_path_matches_dotted_top_level_key():
    assert has_path({'a.b': 1}, 'a.b') is True


def test_has_path_stops_at_scalar():
    assert has_path({'a': 'text'}, 'a.b') is False
    assert has_path('text', 'a') is False


# --- get ---


@pytest.mark.parametrize("expected, data, path, default", [
    ('bar', {'foo': 'bar'}, 'foo', None),
    ('foo', {'foo': 'bar'}, 'bar', 'foo'),
    ('baz', {'foo': {'bar': 'baz'}}, 'foo.bar', None),
    ('bar', {'foo': {'bar': 'baz'}}, 'foo.baz', 'bar'),
    ('yolo', {'foo': {'bar': {'baz': 'yolo'}}}, 'foo.bar.baz', None),
    ('baz', {'foo': {'bar': {'baz': 'yolo'}}}, 'foo.bar.yolo', 'baz'),
    ('default', {}, 'missing', 'default'),
])
def test_get_value_by_path(expected, data, path, default):
    assert get_value_by_path(data, path, default) == expected


def test_get_value_by_path_absent_path_returns_whole_container():
    data = {'a': 1}
    assert get_value_by_path(data, None) is data
    assert get_value_by_path(data, '') is data


def test_get_value_by_path_prefers_literal_dotted_key():
    data = {'a.b': 'literal', 'a': {'b': 'nested'}}
    assert get_value_by_path(data, 'a.b') == 'literal'


def test_get_value_by_path_walks_lists_and_int_keys():
    data = {'items': ['x', {'name': 'y'}], 'by_id': {7: 'seven'}}
    assert get_value_by_path(data, 'items.0') == 'x'
    assert get_value_by_path(data, 'items.1.name') == 'y'
    assert get_value_by_path(data, 'by_id.7') == 'seven'
    assert get_value_by_path(data, 'items.2', 'none') == 'none'
    assert get_value_by_path(data, 'items.-1', 'none') == 'none'


def test_get_value_by_path_accepts_int_path():
    assert get_value_by_path({0: 'zero'}, 0) == 'zero'
    assert get_value_by_path(['a', 'b'], 1) == 'b'


def test_get_value_by_path_returns_default_through_scalar():
    assert get_value_by_path({'a': 'text'}, 'a.b', 'd') == 'd'
    assert get_value_by_path({'a': None}, 'a.b', 'd') == 'd'


def test_get_value_by_path_returns_present_none():
    assert get_value_by_path({'a': None}, 'a', 'd') is None


# --- set ---


@pytest.mark.parametrize("path, value", [
    ('foo', 'foo'),
    ('foo.bar', 'bar'),
    ('foo.bar.baz', 'baz'),
])
def test_set_value_by_path(path, value):
    data = {}
    assert has_path(data, path) is False
    set_value_by_path(data, path, value)
    assert get_value_by_path(data, path) == value


def test_set_value_by_path_creates_intermediates():
    data = {}
    result = set_value_by_path(data, 'foo.bar.baz', 'yolo')
    assert data == {'foo': {'bar': {'baz': 'yolo'}}}
    assert result is data


def test_set_value_by_path_overwrites_scalar_intermediate():
    data = {'a': 'scalar', 'keep': 1}
    set_value_by_path(data, 'a.b', 2)
    assert data == {'a': {'b': 2}, 'keep': 1}


def test_set_value_by_path_reuses_int_key():
    data = {0: 'a'}
    set_value_by_path(data, '0', 'b')
    assert data == {0: 'b'}


def test_set_value_by_path_into_list():
    data = {'items': [1, 2]}
    set_value_by_path(data, 'items.1', 'x')
    set_value_by_path(data, 'items.2', 'y')
    assert data == {'items': [1, 'x', 'y']}


@pytest.mark.parametrize("path", ['items.5', 'items.key', 'items.3.name'])
def test_set_value_by_path_rejects_unusable_list_segment(path):
    data = {'items': [1, 2]}
    with pytest.raises(ContainerTypeError):
        set_value_by_path(data, path, 'x')


def test_set_value_by_path_absent_path_replaces_root_in_place():
    data = {'old': 1}
    result = set_value_by_path(data, None, {'new': 2})
    assert result is data
    assert data == {'new': 2}

    items = [1, 2, 3]
    set_value_by_path(items, '', ['a'])
    assert items == ['a']


def test_set_value_by_path_absent_path_requires_same_kind():
    with pytest.raises(ContainerTypeError):
        set_value_by_path({}, None, [1])
    with pytest.raises(ContainerTypeError):
        set_value_by_path({}, None, 'scalar')


def test_set_value_by_path_rejects_non_container_root():
    with pytest.raises(ContainerTypeError):
        set_value_by_path('text', 'a', 1)
    with pytest.raises(TypeError):
        set_value_by_path(None, 'a', 1)


# --- remove ---


@pytest.mark.parametrize("path", ['foo', 'foo.bar', 'foo.bar.baz'])
def test_remove_paths(path):
    data = {}
    set_value_by_path(data, path, 'foo')
    assert has_path(data, path) is True
    remove_paths(data, path)
    assert has_path(data, path) is False


def test_remove_paths_accepts_many():
    data = {'a': {'b': 1, 'c': 2}, 'd': 3, 'e': 4}
    assert remove_paths(data, ['a.b', 'd']) is None
    assert data == {'a': {'c': 2}, 'e': 4}


def test_remove_paths_restarts_at_root_for_each_path():
    data = {'a': {'b': {'c': 1}}, 'c': 2}
    remove_paths(data, ('a.b.c', 'c'))
    assert data == {'a': {'b': {}}}


@pytest.mark.parametrize("path", ['missing', 'b.c', 'a.missing', 'a.b.c', None, ''])
def test_remove_paths_missing_path_is_noop(path):
    data = {'a': {'b': 1}, 'b': 2}
    remove_paths(data, path)
    assert data == {'a': {'b': 1}, 'b': 2}


@pytest.mark.parametrize("path, expected", [
    ('x.b', {'a': {'b': 1}, 'keep': 3}),
    ('b.a', {'b': 2, 'keep': 3}),
    ('a.b.x.b', {'a': {}, 'b': 2, 'keep': 3}),
])
def test_remove_paths_deletes_last_segment_where_descent_stops(path, expected):
    data = {'a': {'b': 1}, 'b': 2, 'keep': 3}
    remove_paths(data, path)
    assert data == expected


def test_remove_paths_from_list_shifts_items():
    data = {'items': ['a', 'b', 'c']}
    remove_paths(data, 'items.0')
    assert data == {'items': ['b', 'c']}


def test_remove_paths_rejects_non_container_root():
    with pytest.raises(ContainerTypeError):
        remove_paths(42, 'a')


# --- add ---


def test_add_value_by_path_builds_list():
    data = {}
    add_value_by_path(data, 'list', 'a')
    result = add_value_by_path(data, 'list', 'b')
    assert data == {'list': ['a', 'b']}
    assert result is data


def test_add_value_by_path_wraps_scalar():
    data = {'x': 'scalar'}
    add_value_by_path(data, 'x', 'y')
    assert data == {'x': ['scalar', 'y']}


def test_add_value_by_path_creates_nested_path():
    data = {}
    add_value_by_path(data, 'a.b', 1)
    assert data == {'a': {'b': [1]}}


def test_add_value_by_path_to_dict_uses_next_int_key():
    data = {'m': {'name': 'n', 4: 'four'}}
    add_value_by_path(data, 'm', 'five')
    assert data == {'m': {'name': 'n', 4: 'four', 5: 'five'}}


def test_add_value_by_path_absent_path_appends_to_root():
    items = [1]
    add_value_by_path(items, None, 2)
    assert items == [1, 2]
