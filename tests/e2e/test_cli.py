"""End-to-end CLI tests against a file-backed configuration."""
import json

import pytest

from src.cli.main import main, parse_args


@pytest.fixture
def config_path(tmp_path):
    """Write a CLI configuration with a file database and a CPI config."""
    config = {
        "logging": {"level": "WARNING", "destination": "file", "file_path": str(tmp_path / "cli.log")},
        "storage": {"db_path": str(tmp_path / "stemcells.db")},
        "cpi": {
            "cpis": [{"name": "cpi1"}, {"name": "cpi2", "migrated_from": [{"name": "old-cpi2"}]}],
            "azs": [{"name": "z1", "cpi": "cpi1"}, {"name": "z2", "cpi": "cpi2"}],
        },
    }
    path = tmp_path / "config.json"
    path.write_text(json.dumps(config))
    return str(path)


@pytest.fixture
def run_cli(config_path, capsys):
    """Run the CLI and return (exit code, stdout, stderr)."""
    def _run(*argv):
        code = main(["--config", config_path, *argv])
        captured = capsys.readouterr()
        return code, captured.out, captured.err
    return _run


def upload(run_cli, cid, cpi, version="1"):
    return run_cli("stemcells", "upload", "--name", "ubuntu-jammy", "--os", "ubuntu",
                   "--version", version, "--cid", cid, "--cpi", cpi)


class TestCli:
    """Test CLI commands end to end."""

    def test_upload_then_list(self, run_cli):
        code, out, _ = upload(run_cli, "ami-1", "cpi1")
        assert code == 0
        assert json.loads(out)["cid"] == "ami-1"

        code, out, _ = run_cli("stemcells", "list")
        assert code == 0
        assert [s["cid"] for s in json.loads(out)["stemcells"]] == ["ami-1"]

    def test_resolve_cid_per_az(self, run_cli):
        upload(run_cli, "ami-1", "cpi1")
        upload(run_cli, "ami-2", "old-cpi2")

        code, out, _ = run_cli("stemcells", "resolve-cid", "--deployment", "web",
                               "--name", "ubuntu-jammy", "--version", "1", "--az", "z2")

        assert code == 0
        assert json.loads(out) == {"deployment": "web", "stemcell": "ubuntu-jammy/1", "az": "z2", "cid": "ami-2"}

        code, out, _ = run_cli("deployments", "stemcells", "--deployment", "web")
        assert [s["cid"] for s in json.loads(out)["stemcells"]] == ["ami-1", "ami-2"]

    def test_resolve_cid_unknown_stemcell_fails(self, run_cli):
        code, out, err = run_cli("stemcells", "resolve-cid", "--deployment", "web",
                                 "--os", "ubuntu", "--version", "9", "--az", "z1")

        assert code == 1
        assert out == ""
        assert "ubuntu/9" in err

    def test_duplicate_upload_fails(self, run_cli):
        upload(run_cli, "ami-1", "cpi1")

        code, _, err = upload(run_cli, "ami-9", "cpi1")

        assert code == 1
        assert "Error:" in err

    def test_delete_vm_by_cid_is_skipped_with_cpi_config(self, run_cli):
        code, out, _ = run_cli("vms", "delete", "--cid", "i-0123456789abcdef0")

        assert code == 0
        assert json.loads(out) == {"cid": "i-0123456789abcdef0", "status": "done"}

    def test_table_format(self, run_cli):
        upload(run_cli, "ami-1", "cpi1")

        code, out, _ = run_cli("--format", "table", "stemcells", "list")

        assert code == 0
        assert "ami-1" in out
        assert "cpi1" in out

    def test_yaml_format(self, run_cli):
        upload(run_cli, "ami-1", "cpi1")

        code, out, _ = run_cli("--format", "yaml", "stemcells", "list")

        assert code == 0
        assert "cid: ami-1" in out

    def test_missing_action(self, run_cli):
        code, _, err = run_cli("stemcells")

        assert code == 1
        assert "No action specified" in err


def test_parse_resolve_cid_requires_name_or_os():
    with pytest.raises(SystemExit):
        parse_args(["stemcells", "resolve-cid", "--deployment", "web", "--version", "1"])


def test_parse_delete_flags_default_to_config():
    args = parse_args(["vms", "delete", "--cid", "i-1"])

    assert args.force is None
    assert args.virtual is None
