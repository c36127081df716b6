import pytest

from cashdesk.products import Product, ProductDatabase, ProductDatabaseError


def _write(tmp_path, text):
    path = tmp_path / "products.csv"
    path.write_text(text, encoding="utf-8")
    return path


def test_loads_rows_after_header(tmp_path):
    path = _write(tmp_path, "name,barcode,price\nмолоко,1001,59.9\nхлеб,1002,30\n")
    db = ProductDatabase(path)
    db.load()
    assert db.products == (
        Product("молоко", "1001", 59.9),
        Product("хлеб", "1002", 30.0),
    )


def test_header_is_not_a_product(tmp_path):
    path = _write(tmp_path, "name,barcode,price\nхлеб,1002,30\n")
    db = ProductDatabase(path)
    db.load()
    assert db.find_by_name("name") is None
    assert len(db) == 1


def test_find_by_name_and_barcode(tmp_path):
    path = _write(tmp_path, "h\nмолоко,1001,59.9\nхлеб,1002,30\n")
    db = ProductDatabase(path)
    db.load()
    assert db.find_by_name("хлеб").barcode == "1002"
    assert db.find_by_barcode("1001").name == "молоко"
    assert db.find_by_name("сыр") is None
    assert db.find_by_barcode("9999") is None


def test_first_match_wins(tmp_path):
    path = _write(tmp_path, "h\nчай,1,10\nчай,2,20\n")
    db = ProductDatabase(path)
    db.load()
    assert db.find_by_name("чай").barcode == "1"


def test_missing_file_raises(tmp_path):
    db = ProductDatabase(tmp_path / "absent.csv")
    with pytest.raises(ProductDatabaseError):
        db.load()


def test_bad_price_is_recorded_and_skipped(tmp_path):
    path = _write(tmp_path, "h\nсок,3,abc\nвода,4,15\n")
    db = ProductDatabase(path)
    db.load()
    assert db.invalid_lines == ["сок,3,abc"]
    assert [p.name for p in db] == ["вода"]


def test_short_rows_are_skipped(tmp_path):
    path = _write(tmp_path, "h\n\nодин\nдва,5\nтри,6,\nчетыре,7,8\n")
    db = ProductDatabase(path)
    db.load()
    assert [p.name for p in db] == ["четыре"]
    assert db.invalid_lines == []


def test_price_uses_leading_number(tmp_path):
    path = _write(tmp_path, "h\nсыр,9,12abc\nмасло,10,5\r\n")
    db = ProductDatabase(path)
    db.load()
    assert db.find_by_name("сыр").price == 12.0
    assert db.find_by_name("масло").price == 5.0


def test_extra_fields_are_ignored(tmp_path):
    path = _write(tmp_path, "h\nкофе,11,99,лишнее\n")
    db = ProductDatabase(path)
    db.load()
    assert db.products == (Product("кофе", "11", 99.0),)


def test_empty_file_gives_empty_catalogue(tmp_path):
    path = _write(tmp_path, "")
    db = ProductDatabase(path)
    db.load()
    assert db.products == ()