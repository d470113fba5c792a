"""Tests for onfs types."""

import dataclasses

import pytest

from onfs.types import (
    DEFAULT_OPENEBS_STORAGE_CLASS,
    DEFAULT_STORAGE_SIZE,
    MAX_APP_NAME_LENGTH,
    AccessMode,
    ManifestParameterRecord,
    ManifestParams,
    validate_app_name,
)
from onfs.naming import derive


class TestAccessMode:
    def test_access_mode_values(self):
        assert AccessMode.READ_WRITE_MANY.value == "ReadWriteMany"
        assert AccessMode.READ_WRITE_ONCE.value == "ReadWriteOnce"


class TestManifestParams:
    def test_default_values(self):
        params = ManifestParams(app_name="myapp")
        assert params.size == DEFAULT_STORAGE_SIZE == 5
        assert params.openebs_storage_class == DEFAULT_OPENEBS_STORAGE_CLASS
        assert params.openebs_storage_class == "openebs-jiva-default"

    def test_frozen(self):
        params = ManifestParams(app_name="myapp")
        with pytest.raises(dataclasses.FrozenInstanceError):
            params.app_name = "other"


class TestManifestParameterRecord:
    def test_frozen(self):
        record = derive("myapp")
        with pytest.raises(dataclasses.FrozenInstanceError):
            record.nfs_pvc_name = "other"

    def test_to_context_has_every_field(self):
        record = derive("myapp")
        context = record.to_context()
        field_names = {f.name for f in dataclasses.fields(ManifestParameterRecord)}
        assert set(context) == field_names

    def test_to_context_unwraps_enums(self):
        context = derive("myapp").to_context()
        assert context["nfs_access_mode"] == "ReadWriteMany"
        assert type(context["nfs_access_mode"]) is str


class TestValidateAppName:
    @pytest.mark.parametrize("name", ["myapp", "foo", "web-1", "a", "x" * MAX_APP_NAME_LENGTH])
    def test_valid_names(self, name):
        assert validate_app_name(name) == []

    def test_empty_name(self):
        assert validate_app_name("") == ["name must not be empty"]

    @pytest.mark.parametrize("name", ["MyApp", "my_app", "1app", "app-", "-app", "my.app", "myapp\n"])
    def test_invalid_characters(self, name):
        errors = validate_app_name(name)
        assert len(errors) == 1
        assert "lowercase alphanumerics" in errors[0]

    def test_too_long(self):
        name = "x" * (MAX_APP_NAME_LENGTH + 1)
        errors = validate_app_name(name)
        assert len(errors) == 1
        assert f"at most {MAX_APP_NAME_LENGTH}" in errors[0]

    def test_max_length_keeps_label_within_limit(self):
        record = derive("x" * MAX_APP_NAME_LENGTH)
        assert len(record.provisioner_stateful_name) == 63

    def test_reports_all_problems(self):
        errors = validate_app_name("X" * (MAX_APP_NAME_LENGTH + 1))
        assert len(errors) == 2
