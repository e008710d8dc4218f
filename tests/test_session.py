from __future__ import annotations

import pytest

from bpq_helper.catalog import load_catalog
from bpq_helper.models import MatchStatus
from bpq_helper.session import QuerySession


def test_session_starts_blank() -> None:
    session = QuerySession(load_catalog())

    assert session.queries == ("", "", "", "")
    assert session.view().active_shelves() == []


def test_session_recomputes_view_after_each_change() -> None:
    session = QuerySession(load_catalog())

    session.set_field(1, "portrait")
    first = session.view()
    assert first.fields[0].status == MatchStatus.AMBIGUOUS
    assert [shelf.region.id for shelf in first.active_shelves()] == ["shelf-02", "shelf-03"]

    session.set_field(1, "portrait cat")
    session.set_field(3, "cold stare")
    second = session.view()
    assert second.fields[0].status == MatchStatus.UNIQUE
    assert {shelf.region.id: shelf.orders for shelf in second.active_shelves()} == {
        "shelf-01": [3],
        "shelf-02": [1],
    }


def test_session_reset_clears_all_fields() -> None:
    session = QuerySession(load_catalog())
    session.set_field(2, "music box")
    session.set_field(4, "mirror")

    session.reset()

    assert session.queries == ("", "", "", "")
    assert session.view().active_shelves() == []


def test_session_rejects_out_of_range_fields() -> None:
    session = QuerySession(load_catalog())

    with pytest.raises(ValueError, match="between 1 and 4"):
        session.set_field(0, "x")
    with pytest.raises(ValueError):
        session.set_field(5, "x")
