import pytest
import yaml
from click.testing import CliRunner

from conftest import client_error

from rds_snapshot_copy import cli as cli_module
from rds_snapshot_copy.cli import cli
from rds_snapshot_copy.jobs.resolve_parameters import ResolveParametersJob
from rds_snapshot_copy.utils.prompt import ScriptedPrompter


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def install_job(monkeypatch, rds_manager, kms_manager):
    """Swap the CLI's job for one wired to the fake clients and a scripted operator."""
    created = {}

    def install(prompter):
        def factory(config_manager=None, profile=None, region=None):
            created["options"] = {"profile": profile, "region": region}
            return ResolveParametersJob(
                config_manager=config_manager,
                prompter=prompter,
                rds=rds_manager,
                kms=kms_manager,
            )

        monkeypatch.setattr(cli_module, "ResolveParametersJob", factory)
        return created

    return install


def test_resolve_with_explicit_values(runner, install_job, tmp_path):
    created = install_job(ScriptedPrompter())

    result = runner.invoke(cli, [
        "--config-dir", str(tmp_path), "--region", "eu-west-1",
        "resolve", "-d", "orders-db", "-k", "k-1", "-s", "snap-1", "--use-existing",
    ])

    assert result.exit_code == 0, result.output
    assert "orders-db k-1 true snap-1" in result.output
    assert created["options"] == {"profile": None, "region": "eu-west-1"}


def test_resolve_interactively_for_cluster(runner, install_job, tmp_path):
    install_job(ScriptedPrompter(
        choices=["aurora-1", "alias/app-data", "snap-1|2023-01-02 03:04:05"],
        confirmations=[False],
    ))

    result = runner.invoke(cli, ["--config-dir", str(tmp_path), "resolve", "-t", "cluster"])

    assert result.exit_code == 0, result.output
    assert "aurora-1 k-app false snap-1|2023-01-02 03:04:05" in result.output


def test_resolve_writes_yaml_output(runner, install_job, tmp_path):
    install_job(ScriptedPrompter(confirmations=[True]))
    output = tmp_path / "params.yaml"

    result = runner.invoke(cli, [
        "--config-dir", str(tmp_path),
        "resolve", "-d", "aurora-1", "-k", "k-1", "-s", "snap-1|2023-01-02 03:04:05",
        "-o", str(output),
    ])

    assert result.exit_code == 0, result.output
    data = yaml.safe_load(output.read_text(encoding="utf-8"))
    assert data == {
        "resource_id": "aurora-1",
        "kms_key_id": "k-1",
        "use_existing_snapshot": True,
        "snapshot": "snap-1|2023-01-02 03:04:05",
        "snapshot_id": "snap-1",
    }


def test_resolve_reports_sharing_for_accounts(runner, install_job, tmp_path):
    install_job(ScriptedPrompter())

    result = runner.invoke(cli, [
        "--config-dir", str(tmp_path),
        "resolve", "-t", "cluster", "-d", "aurora-1", "-k", "k-1", "-s", "snap-1",
        "--no-use-existing", "111111111111", "333333333333",
    ])

    assert result.exit_code == 0, result.output
    assert "111111111111: shared" in result.output
    assert "333333333333: not shared" in result.output


def test_invalid_account_id_is_a_usage_error(runner, install_job, tmp_path):
    install_job(ScriptedPrompter())

    result = runner.invoke(cli, ["--config-dir", str(tmp_path), "resolve", "12345"])

    assert result.exit_code == 2
    assert "12345" in result.output


def test_resolution_failure_exits_non_zero_without_result(runner, install_job, tmp_path):
    install_job(ScriptedPrompter())

    result = runner.invoke(cli, ["--config-dir", str(tmp_path), "resolve", "-t", "cluster"])

    assert result.exit_code == 1
    assert "Error in resolve: Selection cancelled" in result.output


def test_version(runner):
    result = runner.invoke(cli, ["version"])

    assert result.exit_code == 0
    assert "1.0.0" in result.output


def test_failed_sharing_lookup_prints_no_result(runner, install_job, rds_client, tmp_path):
    rds_client.responses["describe_db_snapshot_attributes"] = client_error(
        "DBSnapshotNotFound", "DescribeDBSnapshotAttributes"
    )
    install_job(ScriptedPrompter())

    result = runner.invoke(cli, [
        "--config-dir", str(tmp_path),
        "resolve", "-d", "aurora-1", "-k", "k-1", "-s", "snap-1", "--use-existing",
        "111111111111",
    ])

    assert result.exit_code == 1
    assert "aurora-1 k-1 true snap-1" not in result.output
    assert "Error in resolve" in result.output
