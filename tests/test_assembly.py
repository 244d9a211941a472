from wave_tileset.core.assembly import Section, TilesetBuilder, build_tileset
from wave_tileset.core.events import ElementEnd, ElementStart, EndOfDocument
from wave_tileset.models import Direction, LoaderSettings, WarningKind

from tests.helpers import document


def test_scenario_tileset():
    result = build_tileset(document(
        tiles=[
            {'name': 'A', 'symmetry': 'X', 'weight': '1.0'},
            {'name': 'B', 'symmetry': 'I'},
        ],
        neighbors=[{'left': 'A', 'right': 'B 1'}],
    ))
    tileset = result.tileset

    assert not result.has_warnings
    assert [t.name for t in tileset.tiles] == ['A', 'B']
    assert tileset.orientation_count == 3
    assert tileset.action[0] == (0, 0, 0, 0, 0, 0, 0, 0)
    assert tileset.action[1] == (1, 2, 1, 2, 1, 2, 1, 2)
    assert tileset.name_index['B'].offset == 1
    assert len(tileset.edges) == 4
    assert tileset.edges[0].direction == Direction.EAST
    assert (tileset.edges[0].left, tileset.edges[0].right) == (0, 2)


def test_default_and_explicit_weights():
    result = build_tileset(document(
        tiles=[{'name': 'A', 'symmetry': 'X'}, {'name': 'B', 'symmetry': 'I', 'weight': '0.25'}],
        neighbors=[],
    ), LoaderSettings(default_weight=2.0))

    assert [t.weight for t in result.tileset.tiles] == [2.0, 0.25]
    assert result.tileset.weights() == [2.0, 0.25, 0.25]


def test_invalid_weight_skips_tile():
    result = build_tileset(document(
        tiles=[
            {'name': 'A', 'symmetry': 'X', 'weight': 'heavy'},
            {'name': 'B', 'symmetry': 'X', 'weight': '-1'},
            {'name': 'C', 'symmetry': 'X'},
        ],
        neighbors=[],
    ))

    assert [t.name for t in result.tileset.tiles] == ['C']
    assert result.tileset.tiles[0].offset == 0
    assert [w.kind for w in result.warnings] == [WarningKind.INVALID_NUMBER] * 2


def test_unregistered_neighbor_does_not_stop_the_load():
    result = build_tileset(document(
        tiles=[{'name': 'A', 'symmetry': 'X'}],
        neighbors=[
            {'left': 'A', 'right': 'ghost'},
            {'left': 'A', 'right': 'A'},
        ],
    ))

    assert len(result.tileset.edges) == 4
    assert result.warning_count == 1
    assert result.warnings_of(WarningKind.UNKNOWN_TILE)


def test_missing_neighbor_attribute():
    result = build_tileset(document(
        tiles=[{'name': 'A', 'symmetry': 'X'}],
        neighbors=[{'left': 'A'}],
    ))
    assert result.tileset.edges == ()
    assert result.warnings_of(WarningKind.MISSING_ATTRIBUTE)


def test_unknown_attributes_are_warned():
    events = document(
        tiles=[{'name': 'A', 'symmetry': 'X', 'colour': 'red'}],
        neighbors=[{'left': 'A', 'right': 'A', 'note': 'x'}],
    )
    result = build_tileset(events)
    assert len(result.tileset.edges) == 4
    assert len(result.warnings_of(WarningKind.UNKNOWN_ATTRIBUTE)) == 2

    quiet = build_tileset(events, LoaderSettings(warn_unknown_attributes=False))
    assert not quiet.has_warnings


def test_declarations_outside_their_section_are_ignored():
    events = [
        ElementStart('set'),
        ElementStart('tile', {'name': 'stray', 'symmetry': 'X'}),
        ElementEnd('tile'),
        ElementStart('tiles'),
        ElementStart('tile', {'name': 'A', 'symmetry': 'X'}),
        ElementEnd('tile'),
        ElementStart('neighbor', {'left': 'A', 'right': 'A'}),
        ElementEnd('neighbor'),
        ElementEnd('tiles'),
        ElementStart('neighbors'),
        ElementStart('tile', {'name': 'late', 'symmetry': 'X'}),
        ElementEnd('tile'),
        ElementEnd('neighbors'),
        ElementEnd('set'),
        EndOfDocument(),
    ]
    result = build_tileset(events)

    assert [t.name for t in result.tileset.tiles] == ['A']
    assert result.tileset.edges == ()
    assert len(result.warnings_of(WarningKind.UNKNOWN_ELEMENT)) == 3


def test_content_outside_root_is_ignored():
    events = [
        ElementStart('other'),
        ElementStart('tiles'),
        ElementStart('tile', {'name': 'A', 'symmetry': 'X'}),
        ElementEnd('tile'),
        ElementEnd('tiles'),
        ElementEnd('other'),
        EndOfDocument(),
    ]
    result = build_tileset(events)
    assert result.tileset.tiles == ()
    # only the outer element is reported, its content is skipped quietly
    assert [w.kind for w in result.warnings] == [WarningKind.UNKNOWN_ELEMENT]


def test_container_attributes_are_warned():
    events = [
        ElementStart('set', {'size': '10'}),
        ElementStart('tiles', {'unique': 'True'}),
        ElementStart('tile', {'name': 'A', 'symmetry': 'X'}),
        ElementEnd('tile'),
        ElementEnd('tiles'),
        ElementStart('neighbors', {'mode': 'x'}),
        ElementEnd('neighbors'),
        ElementEnd('set'),
        EndOfDocument(),
    ]
    result = build_tileset(events)

    assert [t.name for t in result.tileset.tiles] == ['A']
    assert len(result.warnings_of(WarningKind.UNKNOWN_ATTRIBUTE)) == 3


def test_sections_are_left_on_end_element():
    builder = TilesetBuilder()
    builder.feed(ElementStart('set'))
    builder.feed(ElementStart('tiles'))
    assert builder.section == Section.TILES
    builder.feed(ElementStart('tile', {'name': 'A', 'symmetry': 'X'}))
    builder.feed(ElementEnd('tile'))
    assert builder.section == Section.TILES
    builder.feed(ElementEnd('tiles'))
    assert builder.section == Section.ROOT
    builder.feed(ElementStart('neighbors'))
    assert builder.section == Section.NEIGHBORS
    builder.feed(ElementEnd('neighbors'))
    builder.feed(ElementEnd('set'))
    assert builder.section == Section.OFF


def test_truncated_stream_keeps_partial_tileset():
    events = [
        ElementStart('set'),
        ElementStart('tiles'),
        ElementStart('tile', {'name': 'A', 'symmetry': 'T'}),
        ElementEnd('tile'),
        EndOfDocument(truncated=True),
    ]
    result = build_tileset(events)

    assert result.tileset.orientation_count == 4
    assert [w.kind for w in result.warnings] == [WarningKind.TRUNCATED]


def test_stream_without_end_event_counts_as_truncated():
    result = build_tileset(document([{'name': 'A', 'symmetry': 'X'}], [], end=False))
    assert len(result.tileset.tiles) == 1
    assert result.warnings_of(WarningKind.TRUNCATED)


def test_events_after_end_are_ignored():
    events = document([{'name': 'A', 'symmetry': 'X'}], []) + [
        ElementStart('set'), ElementStart('tiles'),
        ElementStart('tile', {'name': 'B', 'symmetry': 'X'}),
    ]
    result = build_tileset(events)
    assert [t.name for t in result.tileset.tiles] == ['A']


def test_builders_are_independent():
    first = TilesetBuilder()
    second = TilesetBuilder()
    first.consume(document([{'name': 'A', 'symmetry': 'F'}], []))
    second.consume(document([{'name': 'B', 'symmetry': 'X'}], []))

    assert first.build().tileset.orientation_count == 8
    assert second.build().tileset.tiles[0].offset == 0


def test_tileset_lookups():
    tileset = build_tileset(document(
        tiles=[{'name': 'A', 'symmetry': 'X'}, {'name': 'B', 'symmetry': 'I'}],
        neighbors=[{'left': 'A', 'right': 'B 1'}],
    )).tileset

    assert tileset.neighbors(0, Direction.EAST) == {2}
    assert tileset.neighbors(0, Direction.SOUTH) == {1}
    assert tileset.neighbors(2, Direction.EAST) == {0}
    assert tileset.neighbors(2, Direction.NORTH) == set()
    assert tileset.can_be_neighbor(0, Direction.NORTH, 1)
    assert tileset.owner_of(2) == (tileset.get_tile('B'), 1)
    assert tileset.get_tile('missing') is None
    assert len(tileset.edges_for(0)) == 4
    assert tileset.to_dict()['edges'][0] == {'direction': 'E', 'left': 0, 'right': 2}


def test_neighbors_hold_in_both_directions():
    tileset = build_tileset(document(
        tiles=[{'name': 'A', 'symmetry': 'X'}, {'name': 'B', 'symmetry': 'X'}],
        neighbors=[
            {'left': 'A', 'right': 'B'},
            {'left': 'A', 'right': 'A'},
            {'left': 'B', 'right': 'B'},
        ],
    )).tileset

    assert tileset.neighbors(1, Direction.WEST) == {0, 1}
    assert tileset.neighbors(0, Direction.EAST) == {0, 1}
    for direction in Direction:
        assert 0 in tileset.neighbors(1, direction)


def test_tileset_is_hashable_and_exports_name_index():
    tileset = build_tileset(document(
        tiles=[{'name': 'A', 'symmetry': 'X'}, {'name': 'B', 'symmetry': 'I'}],
        neighbors=[],
    )).tileset

    assert hash(tileset) == hash(tileset)
    assert tileset.to_dict()['name_index'] == {
        'A': {'offset': 0, 'cardinality': 1},
        'B': {'offset': 1, 'cardinality': 2},
    }
