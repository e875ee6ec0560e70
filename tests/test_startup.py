import pytest
from fastapi.testclient import TestClient

import config
from main import app


class TestStartup:
    def test_startup_should_fail_when_jwt_secret_not_configured(self, monkeypatch):
        monkeypatch.setattr(config, 'JWT_SECRET', None)

        with pytest.raises(RuntimeError, match='JWT_SECRET is not configured'):
            with TestClient(app):
                pass
