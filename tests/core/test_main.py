import pytest

from cbuild.containerizer import ImageItem
from cbuild.core import main as cli
from cbuild.core.exceptions import RepositoryCreateError
from cbuild.pipeline import PipelineStage, PipelineState


class FakePipeline:
    instances: list["FakePipeline"] = []
    error: Exception | None = None

    def __init__(self, config):
        self.config = config
        self.requests = []
        FakePipeline.instances.append(self)

    def run(self, request):
        self.requests.append(request)
        if FakePipeline.error is not None:
            raise FakePipeline.error
        return PipelineState(
            request=request,
            stage=PipelineStage.DONE,
            image=ImageItem(name="widget", tag="registry/widget"),
        )


@pytest.fixture(autouse=True)
def fake_pipeline(monkeypatch):
    FakePipeline.instances = []
    FakePipeline.error = None
    monkeypatch.setattr(cli, "Pipeline", FakePipeline)
    monkeypatch.setattr(cli, "configure_logging", lambda level: None)


def test_defaults(capsys):
    cli.main(["-r", "github.com/acme/widget.git"])

    assert '"tag":"registry/widget"' in capsys.readouterr().out

    pipeline = FakePipeline.instances[0]
    assert pipeline.config.region == "eu-west-1"
    assert pipeline.config.profile_name is None
    request = pipeline.requests[0]
    assert request.source == "github.com/acme/widget.git"
    assert request.image_name is None
    assert request.secret_key is None
    assert request.registry_id is None


def test_all_flags():
    cli.main(
        [
            "--name",
            "gadget",
            "--repo",
            "github.com/acme/widget.git#main",
            "-c",
            "/build/creds",
            "--region",
            "us-east-1",
            "--registry-id",
            "210987654321",
            "--profile",
            "ci",
        ]
    )

    pipeline = FakePipeline.instances[0]
    assert pipeline.config.region == "us-east-1"
    assert pipeline.config.profile_name == "ci"
    request = pipeline.requests[0]
    assert request.image_name == "gadget"
    assert request.secret_key == "/build/creds"
    assert request.registry_id == "210987654321"


def test_missing_repo():
    with pytest.raises(SystemExit) as e:
        cli.main(["--name", "gadget"])

    assert e.value.code == 2
    assert FakePipeline.instances == []


def test_fatal_error(caplog):
    FakePipeline.error = RepositoryCreateError("limit exceeded")

    with pytest.raises(SystemExit) as e:
        cli.main(["-r", "github.com/acme/widget.git"])

    assert e.value.code == 1
    assert "RepositoryCreateError: limit exceeded" in caplog.text


def test_single_dash_flags():
    cli.main(
        [
            "-name",
            "gadget",
            "-r",
            "github.com/acme/widget.git",
            "-region",
            "eu-central-1",
        ]
    )

    pipeline = FakePipeline.instances[0]
    assert pipeline.config.region == "eu-central-1"
    request = pipeline.requests[0]
    assert request.image_name == "gadget"
    assert request.source == "github.com/acme/widget.git"
