import base64
import json
from datetime import datetime, timezone
from typing import Any

import boto3

REGION = "eu-west-1"
ACCOUNT_ID = "123456789012"
REGISTRY = f"{ACCOUNT_ID}.dkr.ecr.{REGION}.amazonaws.com"
PROXY_ENDPOINT = f"https://{REGISTRY}"
REGISTRY_PASSWORD = "ecr-password"


def create_client(service_name: str) -> Any:
    return boto3.client(
        service_name,
        region_name=REGION,
        aws_access_key_id="testing",
        aws_secret_access_key="testing",
    )


def encode(value: str) -> str:
    return base64.b64encode(value.encode()).decode()


def authorization_response(token: str | None = None) -> dict[str, Any]:
    if token is None:
        token = encode(f"AWS:{REGISTRY_PASSWORD}")
    return {
        "authorizationData": [
            {
                "authorizationToken": token,
                "proxyEndpoint": PROXY_ENDPOINT,
                "expiresAt": datetime(2026, 10, 19, 12, tzinfo=timezone.utc),
            }
        ]
    }


def repository(name: str) -> dict[str, Any]:
    return {
        "repositoryName": name,
        "repositoryUri": f"{REGISTRY}/{name}",
        "registryId": ACCOUNT_ID,
    }


def stream(*records: Any) -> list[bytes]:
    """Raw progress stream the way the runtime sends it."""
    return [
        (
            record
            if isinstance(record, bytes)
            else json.dumps(record).encode() + b"\r\n"
        )
        for record in records
    ]


BUILD_STREAM = [
    {"stream": "Step 1/2 : FROM alpine:3.20\n"},
    {"status": "Pulling from library/alpine", "id": "3.20"},
    {"stream": " ---> 91ef0af61f39\n"},
    {"stream": "Step 2/2 : CMD [\"true\"]\n"},
    {"aux": {"ID": "sha256:5f1bd8c5a0c3"}},
    {"stream": "Successfully built 5f1bd8c5a0c3\n"},
]

PUSH_STREAM = [
    {"status": "The push refers to repository [registry/widget]"},
    {"status": "Preparing", "id": "a1b2c3"},
    {
        "status": "Pushing",
        "id": "a1b2c3",
        "progressDetail": {"current": 512, "total": 1024},
    },
    {"status": "Pushed", "id": "a1b2c3"},
    {"status": "latest: digest: sha256:9c1e size: 528"},
    {
        "progressDetail": {},
        "aux": {"Tag": "latest", "Digest": "sha256:9c1e", "Size": 528},
    },
]
