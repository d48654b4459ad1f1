import logging

import pytest
import uvicorn

import main


@pytest.fixture
def uvicorn_calls(monkeypatch):
    calls = []
    monkeypatch.setattr(uvicorn, "run", lambda *args, **kwargs: calls.append((args, kwargs)))
    return calls


def test_http_uses_tls_when_both_files_exist(monkeypatch, tmp_path, uvicorn_calls):
    key = tmp_path / "key.pem"
    cert = tmp_path / "cert.pem"
    key.write_text("key")
    cert.write_text("cert")
    monkeypatch.setattr(main, "SSL_KEYFILE", str(key))
    monkeypatch.setattr(main, "SSL_CERTFILE", str(cert))

    main.run_http("127.0.0.1", 8443)

    ((args, kwargs),) = uvicorn_calls
    assert args == ("app:create_app",)
    assert kwargs["factory"] is True
    assert kwargs["port"] == 8443
    assert kwargs["ssl_keyfile"] == str(key)
    assert kwargs["ssl_certfile"] == str(cert)


def test_http_is_plain_when_a_cert_file_is_missing(monkeypatch, tmp_path, uvicorn_calls):
    key = tmp_path / "key.pem"
    key.write_text("key")
    monkeypatch.setattr(main, "SSL_KEYFILE", str(key))
    monkeypatch.setattr(main, "SSL_CERTFILE", str(tmp_path / "missing.pem"))

    main.run_http("127.0.0.1", 8080)

    ((_, kwargs),) = uvicorn_calls
    assert "ssl_keyfile" not in kwargs
    assert "ssl_certfile" not in kwargs


@pytest.mark.parametrize("key", [None, "   "])
def test_startup_warns_without_usable_api_key(monkeypatch, caplog, key):
    if key is None:
        monkeypatch.delenv("VAVICKY_API_KEY", raising=False)
    else:
        monkeypatch.setenv("VAVICKY_API_KEY", key)
    monkeypatch.setattr(main, "run_stdio", lambda: None)

    with caplog.at_level(logging.WARNING):
        assert main.main(["stdio"]) == 0
    assert "VAVICKY_API_KEY is not set" in caplog.text


def test_startup_is_quiet_with_api_key(monkeypatch, caplog):
    monkeypatch.setenv("VAVICKY_API_KEY", "live-key")
    monkeypatch.setattr(main, "run_stdio", lambda: None)

    with caplog.at_level(logging.WARNING):
        main.main(["stdio"])
    assert "VAVICKY_API_KEY" not in caplog.text
