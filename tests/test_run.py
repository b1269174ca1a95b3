from run import build_banner, build_config


def test_banner_lists_routes() -> None:
    banner = build_banner(3000)
    lines = banner.splitlines()
    assert lines[0] == "=" * 50
    assert lines[-1] == "=" * 50
    assert "Server is running on http://localhost:3000" in banner
    for path in ("/home", "/about", "/contact", "/services"):
        assert f"http://localhost:3000{path}" in banner
    assert "Press Ctrl+C to stop the server" in banner


def test_server_access_log_is_off() -> None:
    config = build_config()
    assert config.access_log is False
    assert config.port == 3000
