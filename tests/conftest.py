import pytest
from app import create_app
from app.config import TestingConfig
from app.server import FrontDoor

# 1x1 transparent PNG
LOGO_PNG = bytes.fromhex(
    "89504e470d0a1a0a0000000d4948445200000001000000010806000000"
    "1f15c4890000000d49444154789c6360000002000001e221bc330000000049454e44ae426082"
)


@pytest.fixture
def logo_bytes():
    return LOGO_PNG


@pytest.fixture
def static_dir(tmp_path):
    """Static asset directory with a logo and a stylesheet."""
    dist = tmp_path / "dist"
    dist.mkdir()
    (dist / "logo.png").write_bytes(LOGO_PNG)
    (dist / "main.css").write_text("body { margin: 0; }\n")
    (dist / "assets").mkdir()
    (dist / "assets" / "bundle.js").write_text("console.log('ready');\n")
    return dist


@pytest.fixture
def config_class(static_dir):
    """Testing configuration pointed at the temporary static directory."""
    return type("TmpTestingConfig", (TestingConfig,), {"STATIC_DIR": str(static_dir)})


@pytest.fixture
def app(config_class):
    """Create application for testing."""
    return create_app(config_class)


@pytest.fixture
def client(app):
    """Create test client."""
    return app.test_client()


@pytest.fixture
def listener(app):
    """Serve the app on an ephemeral port for live-socket tests."""
    handle = FrontDoor(app, host="127.0.0.1").start(0)
    handle.serve_in_background()
    yield handle
    handle.shutdown()
