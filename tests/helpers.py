from wave_tileset.core.events import ElementEnd, ElementStart, EndOfDocument


def document(tiles, neighbors, end=True):
    """Build the event stream of a `<set>` with the given tile and neighbor attributes."""
    events = [ElementStart('set'), ElementStart('tiles')]
    for attrs in tiles:
        events += [ElementStart('tile', attrs), ElementEnd('tile')]
    events += [ElementEnd('tiles'), ElementStart('neighbors')]
    for attrs in neighbors:
        events += [ElementStart('neighbor', attrs), ElementEnd('neighbor')]
    events += [ElementEnd('neighbors'), ElementEnd('set')]
    if end:
        events.append(EndOfDocument())
    return events
