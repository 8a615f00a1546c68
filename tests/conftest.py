import pytest
from click.testing import CliRunner
from unittest.mock import MagicMock

from sail.models.config import SailConfig
from sail.models.runner import Runner


@pytest.fixture
def cli_runner():
    """Provides a Click CLI runner for testing commands."""
    return CliRunner()


@pytest.fixture
def host_home(tmp_path, monkeypatch):
    """Points the host home directory at a temporary directory."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    return home


@pytest.fixture
def sail_config(tmp_path):
    """Provides a config whose meta root is a temporary directory."""
    return SailConfig(meta_root=str(tmp_path / "meta"))


@pytest.fixture
def code_server_bin(tmp_path):
    """Creates a fake cached code-server binary."""
    path = tmp_path / "bin" / "code-server"
    path.parent.mkdir()
    path.write_text("#!/bin/sh\n")
    return path


@pytest.fixture
def code_server_loader(code_server_bin):
    """Loader returning the fake code-server binary."""
    return lambda config: str(code_server_bin)


@pytest.fixture
def runner():
    """Provides a runner for a project at /home/u/myproject."""
    return Runner(
        container_name="myproject",
        project_name="myproject",
        hostname="myproject",
        project_local_dir="/home/u/myproject",
        host_user="1000",
        network="sail",
        ip="172.30.0.10",
    )


def image_attrs(labels=None):
    """Builds an image inspect payload with the given labels."""
    return {"Id": "sha256:abc", "Config": {"Labels": labels}}


@pytest.fixture
def make_image_attrs():
    """Provides the image inspect payload builder."""
    return image_attrs


@pytest.fixture
def mock_docker_service():
    """Provides a mocked DockerService with an unlabeled image."""
    service = MagicMock()
    service.inspect_image.return_value = image_attrs()
    service.create_container.return_value = "0123456789abcdef"
    return service
