from easyevent.events import CHANGE, OPEN, Category, Event


def test_event_starts_without_origin():
    event = Event(Event.OPEN, {"path": "a.jpg"})
    assert event.category is OPEN
    assert event.payload == {"path": "a.jpg"}
    assert event.origin is None


def test_origin_is_assigned_once():
    event = Event(Event.CHANGE)
    first, second = object(), object()
    event._assign_origin(first)
    event._assign_origin(second)
    assert event.origin is first
    event._force_origin(second)
    assert event.origin is second


def test_clone_resets_origin_and_stays_independent():
    source = Event(CHANGE, payload=[1, 2])
    source._assign_origin("loader")
    copy = source.clone()
    assert copy is not source
    assert copy.category is source.category
    assert copy.payload is source.payload
    assert copy.origin is None

    copy._assign_origin("other")
    assert source.origin == "loader"


def test_clone_keeps_subclass():
    class Progress(Event):
        pass

    assert type(Progress(OPEN).clone()) is Progress


def test_categories_with_same_name_are_distinct():
    first = Category("LOADED")
    second = Category("LOADED")
    assert first != second
    assert len({first, second}) == 2
    assert first.name == "LOADED"


def test_repr_mentions_category_and_payload():
    text = repr(Event(Event.COMPLETE, {"size": "10KB"}))
    assert text.startswith("Event(")
    assert "COMPLETE" in text
    assert "10KB" in text
    assert str(Event(Event.COMPLETE)) == "Event(category=Category(COMPLETE), payload=None)"
