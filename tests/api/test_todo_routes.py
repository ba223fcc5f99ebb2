from prometheus_client.parser import text_string_to_metric_families

from core.metrics_collector import MetricsCollector


def request_count(client) -> float:
    response = client.get("/metrics")
    return sum(
        sample.value
        for family in text_string_to_metric_families(response.text)
        for sample in family.samples
        if sample.name == "api_requests_total"
    )


def test_root_returns_greeting(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.text == "Hello World"


def test_list_returns_seed_todos(client):
    response = client.get("/todos")
    assert response.status_code == 200
    assert response.json() == [
        {"id": 1, "text": "Python auffrischen", "isComplete": False},
        {"id": 2, "text": "JavaScript üben", "isComplete": False},
        {"id": 3, "text": "React lernen", "isComplete": False},
    ]


def test_todo_lifecycle(client):
    response = client.post("/todos", json={"text": "Buy milk"})
    assert response.status_code == 201
    assert response.json() == {"id": 4, "text": "Buy milk", "isComplete": False}

    response = client.put("/todos/4", json={"text": "Buy milk", "isComplete": True})
    assert response.status_code == 200
    assert response.text == "Todo updated"
    assert {"id": 4, "text": "Buy milk", "isComplete": True} in client.get("/todos").json()

    response = client.delete("/todos/4")
    assert response.status_code == 200
    assert response.text == "Todo deleted"
    assert 4 not in [todo["id"] for todo in client.get("/todos").json()]

    response = client.delete("/todos/4")
    assert response.status_code == 404
    assert response.json() == {"error": "Todo not found"}


def test_created_ids_are_unique(client):
    issued = {todo["id"] for todo in client.get("/todos").json()}
    for text in ("a", "b", "c"):
        todo = client.post("/todos", json={"text": text}).json()
        assert todo["id"] not in issued
        issued.add(todo["id"])
        assert todo in client.get("/todos").json()


def test_create_without_text_is_rejected_and_store_unchanged(client):
    before = client.get("/todos").json()
    for body in ({}, {"text": ""}, {"isComplete": True}):
        response = client.post("/todos", json=body)
        assert response.status_code == 400
        assert response.json() == {"error": "Todo text cannot be empty"}
    response = client.post("/todos")
    assert response.status_code == 400
    assert client.get("/todos").json() == before


def test_create_with_malformed_body_is_rejected(client):
    before = client.get("/todos").json()
    response = client.post("/todos", content=b"{not json", headers={"Content-Type": "application/json"})
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid request body"}
    response = client.post("/todos", json={"text": 42})
    assert response.status_code == 400
    assert client.get("/todos").json() == before


def test_update_without_text_is_rejected(client):
    response = client.put("/todos/1", json={"isComplete": True})
    assert response.status_code == 400
    assert response.json() == {"error": "Todo text cannot be empty"}
    assert client.get("/todos").json()[0]["isComplete"] is False


def test_update_missing_todo_returns_404_and_leaves_store(client):
    before = client.get("/todos").json()
    response = client.put("/todos/99", json={"text": "ghost"})
    assert response.status_code == 404
    assert response.json() == {"error": "Todo not found"}
    assert client.get("/todos").json() == before


def test_update_keeps_id(client):
    client.put("/todos/2", json={"text": "JavaScript wiederholen", "isComplete": True})
    todos = {todo["id"]: todo for todo in client.get("/todos").json()}
    assert todos[2] == {"id": 2, "text": "JavaScript wiederholen", "isComplete": True}


def test_non_numeric_id_is_not_found(client):
    assert client.put("/todos/abc", json={"text": "x"}).status_code == 404
    assert client.delete("/todos/abc").status_code == 404
    assert len(client.get("/todos").json()) == 3


def test_metrics_endpoint_uses_exposition_format(client):
    response = client.get("/metrics")
    assert response.status_code == 200
    assert response.headers["content-type"] == MetricsCollector.content_type
    assert "api_requests_total" in response.text
    assert "api_response_time_seconds_bucket" in response.text


def test_metrics_count_every_request(client):
    client.get("/")
    client.get("/todos")
    client.post("/todos", json={"text": "counted"})
    client.delete("/todos/1")
    # the scrape itself is counted once it has completed
    assert request_count(client) >= 4


def test_metrics_label_routes_by_template(client, metrics):
    client.delete("/todos/1")
    client.delete("/todos/2")
    text = metrics.snapshot().decode("utf-8")
    assert 'api_requests_total{method="DELETE",path="/todos/{todo_id}"} 2.0' in text


def test_health_reports_store(client, store):
    response = client.get("/health")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["store"]["backend"] == store.backend


def test_out_of_range_id_is_not_found(client):
    huge_id = "9" * 25
    assert client.put(f"/todos/{huge_id}", json={"text": "x"}).status_code == 404
    response = client.delete(f"/todos/{huge_id}")
    assert response.status_code == 404
    assert response.json() == {"error": "Todo not found"}


def test_non_ascii_and_padded_ids_are_not_found(client):
    # "%D9%A3" is the Arabic-Indic digit three
    for raw_id in ("%D9%A3", "%203", "1_0"):
        assert client.delete(f"/todos/{raw_id}").status_code == 404
    assert [todo["id"] for todo in client.get("/todos").json()] == [1, 2, 3]
