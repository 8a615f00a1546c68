import os
from unittest.mock import MagicMock, patch

from sail.cli.main import cli
from sail.models.runner import RunMode
from sail.services.exceptions import ContainerStartError, DockerServiceError


class TestRunCommand:
    """Tests for the run command."""

    @patch('sail.cli.commands.run.ContainerRunner')
    @patch('sail.cli.commands.run.get_docker_service')
    def test_run_success(self, mock_get_service, mock_runner_class, cli_runner, tmp_path):
        """Test a container is assembled for the project directory."""
        project = tmp_path / "myproject"
        project.mkdir()
        mock_service = MagicMock()
        mock_get_service.return_value = mock_service
        mock_runner_class.return_value.run.return_value = "0123456789abcdef"

        result = cli_runner.invoke(cli, [
            '--config', str(tmp_path / "config.json"),
            'run', str(project), '--ip', '172.30.0.10',
        ])

        assert result.exit_code == 0, result.output
        assert "Started container myproject (0123456789ab) at 172.30.0.10" in result.output
        mock_service.ensure_network.assert_called_once_with("sail", "172.30.0.0/16")
        runner, image = mock_runner_class.return_value.run.call_args.args
        assert image == "codercom/ubuntu-dev"
        assert runner.container_name == "myproject"
        assert runner.project_name == "myproject"
        assert runner.hostname == "myproject"
        assert runner.project_local_dir == os.path.realpath(str(project))
        assert runner.ip == "172.30.0.10"
        assert runner.mode is RunMode.INTERACTIVE

    @patch('sail.cli.commands.run.ContainerRunner')
    @patch('sail.cli.commands.run.get_docker_service')
    def test_run_test_cmd(self, mock_get_service, mock_runner_class, cli_runner, tmp_path):
        project = tmp_path / "myproject"
        project.mkdir()
        mock_runner_class.return_value.run.return_value = "0123456789abcdef"

        result = cli_runner.invoke(cli, [
            '--config', str(tmp_path / "config.json"),
            'run', str(project), '--ip', '172.30.0.10', '--name', 'ci',
            '--network', 'other', '--image', 'img', '--test-cmd', 'make test',
        ])

        assert result.exit_code == 0, result.output
        runner, image = mock_runner_class.return_value.run.call_args.args
        assert image == "img"
        assert runner.container_name == "ci"
        assert runner.network == "other"
        assert runner.mode is RunMode.ONE_SHOT
        assert runner.test_cmd == "make test"
        mock_get_service.return_value.ensure_network.assert_not_called()

    @patch('sail.cli.commands.run.ContainerRunner')
    @patch('sail.cli.commands.run.get_docker_service')
    def test_run_failure(self, mock_get_service, mock_runner_class, cli_runner, tmp_path):
        project = tmp_path / "myproject"
        project.mkdir()
        mock_runner_class.return_value.run.side_effect = ContainerStartError(
            "Failed to start container myproject: bad mount"
        )

        result = cli_runner.invoke(cli, [
            '--config', str(tmp_path / "config.json"),
            'run', str(project), '--ip', '172.30.0.10',
        ])

        assert result.exit_code == 1
        assert "Error: Failed to start container myproject" in result.output

    @patch('sail.cli.helpers.DockerService')
    def test_run_docker_not_running(self, mock_service_class, cli_runner, tmp_path):
        project = tmp_path / "myproject"
        project.mkdir()
        mock_service_class.side_effect = DockerServiceError("Docker daemon is not running")

        result = cli_runner.invoke(cli, [
            '--config', str(tmp_path / "config.json"),
            'run', str(project), '--ip', '172.30.0.10',
        ])

        assert result.exit_code == 1
        assert "Error: Docker daemon is not running" in result.output

    def test_run_requires_ip(self, cli_runner, tmp_path):
        result = cli_runner.invoke(cli, ['run', str(tmp_path)])
        assert result.exit_code == 2
        assert "--ip" in result.output

    def test_run_missing_project_dir(self, cli_runner, tmp_path):
        result = cli_runner.invoke(cli, ['run', str(tmp_path / "nope"), '--ip', '172.30.0.10'])
        assert result.exit_code == 2
