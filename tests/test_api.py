from fastapi.testclient import TestClient

from cleaner import __version__
from main import app

client = TestClient(app)


def test_health():
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "healthy", "version": __version__}


def test_options_lists_defaults_and_form_values():
    body = client.get("/options").json()
    assert body["defaults"]["deleteSelectors"] == ["script", "noscript", "iframe", "style"]
    assert body["defaults"]["indentSize"] == 2
    assert body["form"]["deleteSelectors"] == "script, noscript, iframe, style"


def test_clean_with_default_options():
    resp = client.post("/clean", json={"html": "<div><script>x()</script><p>t</p></div>"})
    assert resp.status_code == 200
    assert resp.json() == {"html": "<div>\n  <p>t</p>\n</div>"}


def test_clean_sanitizes_form_values():
    resp = client.post(
        "/clean",
        json={
            "html": '<div><p class="a">X</p><span>Y</span></div>',
            "options": {"targetSelectors": "p.a, ???", "indentSize": "-4"},
        },
    )
    assert resp.status_code == 200
    assert resp.json() == {"html": '<p class="a">X</p>'}


def test_clean_indent_from_form():
    resp = client.post(
        "/clean",
        json={"html": "<ul><li>a</li></ul>", "options": {"indentSize": "4"}},
    )
    assert resp.json()["html"] == "<ul>\n    <li>a</li>\n</ul>"


def test_clean_rejects_unknown_fields():
    resp = client.post("/clean", json={"html": "<p></p>", "extra": True})
    assert resp.status_code == 422


def test_clean_requires_html():
    resp = client.post("/clean", json={"options": {}})
    assert resp.status_code == 422


def test_demo_is_cleaned_with_defaults():
    body = client.get("/demo").json()
    assert "<script" in body["input"]
    output = body["output"]
    assert "<script" not in output
    assert "<noscript" not in output
    assert "<!--" not in output
    assert "utm_source" not in output
    assert '<img src="/assets/logo.svg"' in output
    assert '<use href="/assets/sprite.svg#arrow"></use>' in output
