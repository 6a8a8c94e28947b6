import pytest
from ami_publisher.models import (
    BuildArtifact,
    Configuration,
    PublishedArtifact,
    StateKey,
    StateOutcome,
    lookup_state,
)


@pytest.fixture
def artifact():
    return BuildArtifact(
        artifact_id="us-west-2:ami-1",
        builder="mitchellh.amazonebs",
        state_values={StateKey.TYPE.value: "bar", StateKey.METADATA.value: "not-a-map"},
    )

def test_lookup_absent():
    artifact = BuildArtifact(artifact_id="us-west-2:ami-1", builder="mitchellh.amazonebs")
    assert lookup_state(artifact, StateKey.TYPE, str).outcome is StateOutcome.ABSENT

def test_lookup_present(artifact):
    value = lookup_state(artifact, StateKey.TYPE, str)
    assert value.outcome is StateOutcome.PRESENT
    assert value.value == "bar"

def test_lookup_wrong_type(artifact):
    value = lookup_state(artifact, StateKey.METADATA, dict)
    assert value.outcome is StateOutcome.WRONG_TYPE
    assert value.value == "not-a-map"

def test_published_artifact_exposes_state():
    published = PublishedArtifact(name="mitchellh/test", type="foo", version="2", metadata={"foo": "bar"})
    assert published.id() == "mitchellh/test/foo/2"
    assert lookup_state(published, StateKey.TYPE, str).value == "foo"
    assert lookup_state(published, StateKey.METADATA, dict).value == {"foo": "bar"}
    assert published.state("unknown") is None

def test_configuration_missing_required_fields():
    config = Configuration(artifact="mitchellh/test", consul_address="consul:8500", project_name="kafka")
    assert set(config.missing_required_fields()) == {
        "artifact_type", "aws_access_key", "aws_secret_key", "project_version",
    }

def test_configuration_coerces_numeric_version():
    assert Configuration(project_version=2).project_version == "2"
