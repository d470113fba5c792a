"""Tests for the onfs command line."""

import argparse

import pytest
import yaml

from onfs.cli import create_parser, main, positive_size
from onfs.naming import derive
from onfs.renderer import render


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Run the CLI inside an empty directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


class TestParser:
    def test_defaults(self):
        args = create_parser().parse_args(["-a", "myapp"])
        assert args.appname == "myapp"
        assert args.size == 5
        assert args.openebsstorageclass == "openebs-jiva-default"
        assert args.output_dir == "."
        assert args.dry_run is False

    def test_long_flags(self):
        args = create_parser().parse_args([
            "--appname", "foo",
            "--size", "10",
            "--openebsstorageclass", "openebs-cstor",
        ])
        assert args.appname == "foo"
        assert args.size == 10.0
        assert args.openebsstorageclass == "openebs-cstor"

    @pytest.mark.parametrize("value", ["0", "-1", "abc", "nan", "inf"])
    def test_rejects_bad_size(self, value):
        with pytest.raises(argparse.ArgumentTypeError):
            positive_size(value)

    def test_accepts_fractional_size(self):
        assert positive_size("2.5") == 2.5


class TestMain:
    def test_default_run(self, workdir):
        assert main(["-a", "myapp"]) == 0

        out_file = workdir / "myapp-nfs.yaml"
        text = out_file.read_text(encoding="utf-8")
        assert text == render(derive("myapp"))
        assert "myapp-openebs-nfs-provisioner" in text
        assert 'storage: "5.50G"' in text
        assert "storage: 5.00G" in text

    def test_custom_size(self, workdir):
        assert main(["-a", "foo", "-s", "10"]) == 0

        text = (workdir / "foo-nfs.yaml").read_text(encoding="utf-8")
        assert 'storage: "11.00G"' in text
        assert "storage: 10.00G" in text

    def test_storage_class(self, workdir):
        assert main(["-a", "foo", "-c", "openebs-cstor"]) == 0

        docs = list(yaml.safe_load_all((workdir / "foo-nfs.yaml").read_text()))
        claim = [d for d in docs if d["metadata"]["name"] == "fooopenebspvc"][0]
        assert claim["spec"]["storageClassName"] == "openebs-cstor"

    def test_missing_appname(self, workdir):
        assert main([]) == 1
        assert list(workdir.iterdir()) == []

    def test_invalid_size(self, workdir):
        assert main(["-a", "myapp", "-s", "0"]) == 1
        assert list(workdir.iterdir()) == []

    def test_help_exits_cleanly(self, workdir):
        assert main(["--help"]) == 0

    def test_invalid_appname(self, workdir, capsys):
        assert main(["-a", "My_App"]) == 1

        out = capsys.readouterr().out
        assert out.startswith("Error: invalid application name 'My_App'")
        assert list(workdir.iterdir()) == []

    def test_skip_validation(self, workdir):
        assert main(["-a", "My_App", "--skip-validation"]) == 0
        assert (workdir / "My_App-nfs.yaml").exists()

    def test_rerun_replaces_file(self, workdir):
        assert main(["-a", "foo", "-s", "100"]) == 0
        assert main(["-a", "foo", "-s", "1"]) == 0

        text = (workdir / "foo-nfs.yaml").read_text(encoding="utf-8")
        assert text == render(derive("foo", 1))
        assert "100.00G" not in text

    def test_output_dir(self, workdir):
        out_dir = workdir / "manifests"
        out_dir.mkdir()

        assert main(["-a", "foo", "-o", str(out_dir)]) == 0
        assert (out_dir / "foo-nfs.yaml").exists()
        assert not (workdir / "foo-nfs.yaml").exists()

    def test_missing_output_dir(self, workdir, capsys):
        assert main(["-a", "foo", "-o", str(workdir / "missing")]) == 1
        assert capsys.readouterr().out.startswith("Error: cannot write")

    def test_dry_run(self, workdir, capsys):
        assert main(["-a", "foo", "--dry-run"]) == 0

        assert capsys.readouterr().out == render(derive("foo"))
        assert list(workdir.iterdir()) == []

    def test_success_prints_nothing(self, workdir, capsys):
        assert main(["-a", "foo"]) == 0
        assert capsys.readouterr().out == ""

    def test_verbose_summary(self, workdir, capsys):
        assert main(["-a", "foo", "-v"]) == 0

        err = capsys.readouterr().err
        assert "Written: foo-nfs.yaml" in err
        assert "Generated 11 manifests for foo" in err

    def test_storage_class_parses_as_string(self, workdir):
        assert main(["-a", "foo", "-c", "yes"]) == 0

        docs = list(yaml.safe_load_all((workdir / "foo-nfs.yaml").read_text()))
        claim = [d for d in docs if d["metadata"]["name"] == "fooopenebspvc"][0]
        assert claim["spec"]["storageClassName"] == "yes"

    def test_verbose_reports_unparseable_manifest(self, workdir, capsys):
        assert main(["-a", "foo", "-c", 'a"b', "-v"]) == 1

        out = capsys.readouterr().out
        assert out.startswith("Error: rendered manifest is not valid YAML")

    def test_empty_appname_rejected_without_validation(self, workdir, capsys):
        assert main(["-a", "", "--skip-validation"]) == 1

        assert capsys.readouterr().out.startswith("Error: invalid application name ''")
        assert list(workdir.iterdir()) == []
