import os

from schemas import OrderRecord, Snapshot
from storage import CsvStore, format_rows, parse_rows, rows_to_orders


def test_parse_rows_quotes():
    text = 'a,"b, c","say ""hi"""\n\n  d , e ,\n'
    assert parse_rows(text) == [["a", "b, c", 'say "hi"'], ["d", "e", ""]]


def test_format_rows_quotes_only_when_needed():
    text = format_rows(["h1", "h2"], [["plain", "with,comma"], ['q"uote', ""]])
    assert text == 'h1,h2\nplain,"with,comma"\n"q""uote",\n'


def test_rows_to_orders_by_header():
    rows = [["resource", "OrderCode", "extra"], ["R", "7", "ignored"]]
    orders = rows_to_orders(rows)
    assert orders == [OrderRecord(order_code="7", resource="R")]


def test_load_missing_files(tmp_path):
    store = CsvStore(str(tmp_path / "nothing"))
    assert store.load() == Snapshot()


def test_save_writes_original_layout(tmp_path):
    store = CsvStore(str(tmp_path))
    store.save(Snapshot(
        resources=["R1", "R, 2"],
        dates=["2024-01-01", "2024-01-02"],
        orders=[OrderRecord(order_code="1", starttime="2024-01-01", endtime="2024-01-02",
                            display_info="Task", resource="R1", color="rgb(1, 2, 3)")],
    ))
    with open(os.path.join(tmp_path, "resource.csv"), encoding="utf-8") as f:
        assert f.read() == 'resource\nR1\n"R, 2"\n'
    with open(os.path.join(tmp_path, "dates.csv"), encoding="utf-8") as f:
        assert f.read() == "start_date,end_date\n2024-01-01,2024-01-02\n"
    with open(os.path.join(tmp_path, "orders.csv"), encoding="utf-8") as f:
        assert f.read() == (
            "OrderCode,starttime,endtime,display_info,resource,color\n"
            '1,2024-01-01,2024-01-02,Task,R1,"rgb(1, 2, 3)"\n'
        )


def test_load_reads_files_written_by_hand(tmp_path):
    (tmp_path / "resource.csv").write_text("resource\nA\nB\n", encoding="utf-8")
    (tmp_path / "dates.csv").write_text("start_date,end_date\r\n2024-05-01,2024-05-10\r\n", encoding="utf-8")
    (tmp_path / "orders.csv").write_text(
        "OrderCode,starttime,endtime,display_info,resource,color\n"
        '9,2024-05-02,2024-05-03,"Fix, test",A\n',
        encoding="utf-8",
    )
    snapshot = CsvStore(str(tmp_path)).load()
    assert snapshot.resources == ["A", "B"]
    assert snapshot.dates == ["2024-05-01", "2024-05-10"]
    assert snapshot.orders[0].display_info == "Fix, test"
    assert snapshot.orders[0].color == ""


def test_load_resources_written_without_quoting(tmp_path):
    # старый сервер писал имена построчно, без кавычек
    (tmp_path / "resource.csv").write_text('resource\nSmith, John\n"Doe, Jane"\nBob\n', encoding="utf-8")
    assert CsvStore(str(tmp_path)).load().resources == ["Smith, John", "Doe, Jane", "Bob"]


def test_resources_with_commas_survive_save_and_load(tmp_path):
    store = CsvStore(str(tmp_path))
    store.save(Snapshot(resources=["Smith, John", 'say "hi"', "Bob"]))
    assert store.load().resources == ["Smith, John", 'say "hi"', "Bob"]
