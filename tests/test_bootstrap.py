from src.attendance_board.attendance_board.database.bootstrap import ensure_storage_table

from tests.fakes import FakeConnFactory


def test_storage_table_created_if_missing():
    factory = FakeConnFactory()

    ensure_storage_table(factory)

    sql, params = factory.cursor.executed[0]
    assert sql.startswith("CREATE TABLE IF NOT EXISTS app_storage")
    assert "UNIQUE KEY uq_app_storage_key (namespace, storage_key)" in sql
    assert params is None
    assert factory.conn.committed
    assert factory.conn.closed
