import socket

from string_service_api.app.api.v1.endpoints import info


def test_render_host_info():
    text = info.render_host_info("jesus", "curl/8.0", "box", ["10.0.0.1", "10.0.0.2"])
    assert text == "jesus\n\ncurl/8.0\n\nbox\n\n10.0.0.1\n10.0.0.2\n"


def test_resolve_ipv4_deduplicates(monkeypatch):
    infos = [
        (socket.AF_INET, socket.SOCK_STREAM, 6, "", ("10.0.0.1", 0)),
        (socket.AF_INET, socket.SOCK_DGRAM, 17, "", ("10.0.0.1", 0)),
        (socket.AF_INET, socket.SOCK_STREAM, 6, "", ("10.0.0.2", 0)),
    ]
    monkeypatch.setattr(info.socket, "getaddrinfo", lambda *args, **kwargs: infos)
    assert info.resolve_ipv4("box") == ["10.0.0.1", "10.0.0.2"]


def test_resolve_ipv4_failure_lists_nothing(monkeypatch):
    def fail(*args, **kwargs):
        raise socket.gaierror("no such host")

    monkeypatch.setattr(info.socket, "getaddrinfo", fail)
    assert info.resolve_ipv4("nowhere") == []


def test_host_info_page(client, monkeypatch):
    monkeypatch.setattr(info.socket, "gethostname", lambda: "box")
    monkeypatch.setattr(info, "resolve_ipv4", lambda hostname: ["192.168.1.5"])

    response = client.get("/jesus", headers={"User-Agent": "pytest-agent"})

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/plain")
    assert response.text == "jesus\n\npytest-agent\n\nbox\n\n192.168.1.5\n"


def test_host_info_root(client, monkeypatch):
    monkeypatch.setattr(info.socket, "gethostname", lambda: "box")
    monkeypatch.setattr(info, "resolve_ipv4", lambda hostname: [])
    response = client.get("/", headers={"User-Agent": "ua"})
    assert response.text == "\n\nua\n\nbox\n\n"


def test_docs_are_not_shadowed(client):
    assert client.get("/openapi.json").headers["content-type"].startswith("application/json")
