import pytest
from fastapi.testclient import TestClient

from main import app
from storage import CsvStore, get_store


@pytest.fixture
def store(tmp_path):
    return CsvStore(str(tmp_path / "data"))


@pytest.fixture
def api_client(store):
    app.dependency_overrides[get_store] = lambda: store
    client = TestClient(app)
    yield client
    client.close()
    app.dependency_overrides.clear()


@pytest.fixture
def seeded(api_client):
    # два ресурса, неделя проекта, один заказ
    api_client.post("/api/data", json={
        "resources": ["Alice-dev", "Bob"],
        "dates": ["2024-03-01", "2024-03-07"],
        "orders": [{
            "OrderCode": "A1",
            "starttime": "2024-03-02",
            "endtime": "2024-03-04",
            "display_info": "Design",
            "resource": "Alice-dev",
            "color": "",
        }],
    })
    return api_client
