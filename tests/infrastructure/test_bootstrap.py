"""Tests for the composition root."""

from storefront.infrastructure import bootstrap, config


class TestSettings:

    def test_environment_read_once(self, tmp_path, monkeypatch):
        calls = []
        monkeypatch.setattr(config, "load_dotenv", lambda: calls.append(1))
        monkeypatch.setenv("STOREFRONT_DATA_DIR", str(tmp_path))
        bootstrap.settings.cache_clear()
        try:
            bootstrap.cart_repository()
            bootstrap.order_repository()
            bootstrap.payment_orchestrator()
            assert bootstrap.settings().data_dir == tmp_path
        finally:
            bootstrap.settings.cache_clear()

        assert calls == [1]
