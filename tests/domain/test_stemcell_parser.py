import pytest
from pydantic import ValidationError as PydanticValidationError

from src.domain.base.exceptions import ValidationError
from src.domain.stemcell.exceptions import StemcellBothNameAndOSError, ValidationMissingFieldError
from src.domain.stemcell.parser import parse_stemcell_spec
from src.domain.stemcell.stemcell import Stemcell
from src.domain.stemcell.value_objects import (
    NamedStemcellIdentity,
    OperatingSystemStemcellIdentity,
    StemcellIdentity,
)


@pytest.fixture
def valid_spec():
    return {
        "name": "stemcell-name",
        "version": "0.5.2",
    }


def test_parses_name_and_version(valid_spec):
    stemcell = Stemcell.parse(valid_spec)

    assert stemcell.name == "stemcell-name"
    assert stemcell.version == "0.5.2"
    assert stemcell.os is None
    assert isinstance(stemcell.identity, NamedStemcellIdentity)


def test_requires_version(valid_spec):
    del valid_spec["version"]

    with pytest.raises(ValidationMissingFieldError) as exc_info:
        Stemcell.parse(valid_spec)

    assert str(exc_info.value) == (
        "Required property 'version' was not specified in object "
        '({"name": "stemcell-name"})'
    )
    assert exc_info.value.fields == ("version",)


def test_only_os_is_valid(valid_spec):
    del valid_spec["name"]
    valid_spec["os"] = "os1"

    stemcell = Stemcell.parse(valid_spec)

    assert stemcell.os == "os1"
    assert stemcell.name is None
    assert isinstance(stemcell.identity, OperatingSystemStemcellIdentity)


def test_neither_os_nor_name_raises(valid_spec):
    del valid_spec["name"]

    with pytest.raises(ValidationMissingFieldError) as exc_info:
        Stemcell.parse(valid_spec)

    assert str(exc_info.value) == (
        "Required property 'os' or 'name' was not specified in object "
        '({"version": "0.5.2"})'
    )
    assert exc_info.value.fields == ("os", "name")


def test_both_os_and_name_raises(valid_spec):
    valid_spec["os"] = "os1"

    with pytest.raises(StemcellBothNameAndOSError) as exc_info:
        Stemcell.parse(valid_spec)

    assert str(exc_info.value) == (
        "Properties 'os' and 'name' are both specified for stemcell, choose one. "
        '({"name": "stemcell-name", "version": "0.5.2", "os": "os1"})'
    )


def test_both_specified_is_a_validation_error(valid_spec):
    valid_spec["os"] = "os1"

    with pytest.raises(ValidationError):
        parse_stemcell_spec(valid_spec)


def test_latest_version_is_kept_verbatim():
    stemcell = Stemcell.parse({"name": "stemcell-name", "version": "latest"})

    assert stemcell.version == "latest"


def test_empty_version_counts_as_missing():
    with pytest.raises(ValidationMissingFieldError):
        Stemcell.parse({"name": "stemcell-name", "version": ""})


def test_non_mapping_spec_is_rejected():
    with pytest.raises(ValidationError, match="must be a mapping"):
        parse_stemcell_spec(["name", "version"])


@pytest.mark.parametrize("spec", [
    {"name": "stemcell-name", "version": "0.5.2"},
    {"os": "ubuntu-jammy", "version": "latest"},
    {"version": "1.0", "os": "windows2019"},
])
def test_spec_round_trips(spec):
    stemcell = Stemcell.parse(spec)

    assert stemcell.spec() == spec
    assert list(stemcell.spec()) == list(spec)


def test_spec_is_a_copy(valid_spec):
    stemcell = Stemcell.parse(valid_spec)

    stemcell.spec()["version"] = "changed"

    assert stemcell.version == "0.5.2"
    assert stemcell.spec() == valid_spec


def test_identity_is_immutable(valid_spec):
    identity = parse_stemcell_spec(valid_spec)

    with pytest.raises(PydanticValidationError):
        identity.version = "1.0"


def test_identity_requires_name_or_os():
    with pytest.raises(TypeError):
        StemcellIdentity(version="1")


def test_identity_kinds():
    named = parse_stemcell_spec({"name": "foo", "version": "1"})
    by_os = parse_stemcell_spec({"os": "jammy", "version": "1"})

    assert (named.name, named.operating_system, str(named)) == ("foo", None, "foo/1")
    assert (by_os.name, by_os.operating_system, str(by_os)) == (None, "jammy", "jammy/1")


def test_new_stemcell_is_not_bound(valid_spec):
    stemcell = Stemcell.parse(valid_spec)

    assert stemcell.is_bound is False
    assert stemcell.models is None
    assert stemcell.deployment is None
