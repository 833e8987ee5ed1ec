from core.db import Base


def test_tables_registered():
    assert {"trips", "expenses", "notifications"} <= set(Base.metadata.tables)


def test_trip_columns():
    trips = Base.metadata.tables["trips"]
    assert {c.name for c in trips.columns} == {
        "id",
        "tripname",
        "country",
        "daterange",
        "ownerid",
        "imageurl",
        "locations",
        "sharedusers",
        "created_at",
    }
    assert trips.c.imageurl.nullable
    assert not trips.c.sharedusers.nullable


def test_child_tables_cascade_on_trip_delete():
    for name in ("expenses", "notifications"):
        [fk] = Base.metadata.tables[name].c.trip_id.foreign_keys
        assert fk.column.table.name == "trips"
        assert fk.ondelete == "CASCADE"


def test_notification_defaults():
    notifications = Base.metadata.tables["notifications"]
    assert notifications.c.trip_id.nullable
    assert notifications.c.accept.nullable
    assert not notifications.c.is_read.nullable
