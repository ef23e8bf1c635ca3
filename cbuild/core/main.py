import argparse
import logging
import sys

from cbuild.pipeline import (
    DEFAULT_REGION,
    BuildRequest,
    Pipeline,
    PipelineConfig,
    PipelineState,
)

from ._log_helper import configure_logging
from .exceptions import BaseError

logger = logging.getLogger(__name__)


def build(
    repo: str,
    name: str | None,
    credentials_key: str | None,
    region: str,
    registry_id: str | None,
    profile: str | None,
) -> PipelineState:
    """
    cbuild Build
    """
    pipeline = Pipeline(
        config=PipelineConfig(region=region, profile_name=profile)
    )
    request = BuildRequest(
        source=repo,
        image_name=name,
        secret_key=credentials_key,
        registry_id=registry_id,
    )
    return pipeline.run(request)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="cbuild",
        description=(
            "Build a container image from a git repository "
            "and push it to Amazon ECR"
        ),
    )
    arguments = [
        (
            ("-name", "--name"),
            dict(
                default=None,
                help=(
                    "Name of the container image "
                    "(default is derived from the repository)"
                ),
            ),
        ),
        (
            ("-r", "--repo"),
            dict(
                required=True,
                help=(
                    "Git repository containing the container build files, "
                    "e.g. github.com/org/repo.git#branch:subdir"
                ),
            ),
        ),
        (
            ("-c",),
            dict(
                dest="credentials_key",
                default=None,
                help=(
                    "Systems Manager parameter holding credentials for "
                    "the repository. Not required for public repositories"
                ),
            ),
        ),
        (
            ("-region", "--region"),
            dict(default=DEFAULT_REGION, help="AWS region"),
        ),
        (
            ("--registry-id",),
            dict(default=None, help="ECR registry (default: own account)"),
        ),
        (("--profile",), dict(default=None, help="AWS profile name")),
        (("--log-level",), dict(default="INFO", help="Logging level")),
    ]
    for flags, options in arguments:
        parser.add_argument(*flags, **options)

    args = parser.parse_args(argv)
    configure_logging(args.log_level)
    try:
        state = build(
            repo=args.repo,
            name=args.name,
            credentials_key=args.credentials_key,
            region=args.region,
            registry_id=args.registry_id,
            profile=args.profile,
        )
        if state.image is not None:
            print(state.image.to_json())
    except BaseError as e:
        logger.critical("%s: %s", type(e).__name__, e)
        sys.exit(1)
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    main()
