def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json["status"] == "ok"


def test_home_anonymous(client):
    r = client.get("/")
    assert r.status_code == 200
    assert b"Welcome" in r.data
    assert b"Welcome back" not in r.data


def test_request_id_is_echoed(client):
    r = client.get("/", headers={"X-Request-ID": "abc-123"})
    assert r.headers["X-Request-ID"] == "abc-123"


def test_unknown_path_renders_404(client):
    r = client.get("/no-such-page")
    assert r.status_code == 404
    assert b"Not found" in r.data
