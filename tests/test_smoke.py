import json

from fastapi.testclient import TestClient
from stockitems.main import app
from stockitems.rules import EXPECTED_HEADER

client = TestClient(app)

HEADER = ",".join(EXPECTED_HEADER)
COFFEE = "111010,Coffee,$1.25,$0.80,system,100000,Small,-$0.25,Medium,$0.00,Large,$0.30"


def post_csv(raw, filename="items.csv"):
    files = {"file": (filename, raw, "text/csv")}
    return client.post("/convert", files=files)


def test_health():
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"ok": True}


def test_convert_stock_items():
    r = post_csv(f"{HEADER}\n{COFFEE}\n".encode("utf-8"))
    assert r.status_code == 200
    assert r.headers["x-item-count"] == "1"
    assert '"cost": 0.80' in r.text

    data = r.json()
    assert data[0]["id"] == 111010
    assert [m["name"] for m in data[0]["modifiers"]] == ["Small", "Medium", "Large"]


def test_convert_latin1_upload():
    # Include a Latin-1 character to force non-ASCII handling
    raw = f"{HEADER}\n9,Crème brûlée for the café,$4.50,,system\n".encode("latin-1")
    r = post_csv(raw)
    assert r.status_code == 200
    assert json.loads(r.text)[0]["description"].endswith("café")


def test_only_csv_accepted():
    r = post_csv(b"{}", filename="items.json")
    assert r.status_code == 422


def test_schema_mismatch():
    r = post_csv(b"id,name\n1,Tea\n")
    assert r.status_code == 422
    assert r.json()["detail"]["issue"] == "schema_mismatch"


def test_invalid_record():
    r = post_csv(f"{HEADER}\n7,Tea,$2.00,$0.50,unknown\n".encode("utf-8"))
    assert r.status_code == 422
    detail = r.json()["detail"]
    assert detail["issue"] == "invalid_record"
    assert detail["line"] == 2
    assert detail["field"] == "price_type"
    assert detail["value"] == "unknown"
    assert detail["item_id"] == 7
