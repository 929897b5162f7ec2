import json

import boto3
import pytest
from botocore.stub import Stubber


@pytest.fixture
def home_dir(tmp_path, monkeypatch):
    monkeypatch.delenv("COGNITO_POOL_CONFIG", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("HOMEPATH", str(tmp_path))
    return tmp_path


@pytest.fixture
def write_pool_config(home_dir):
    def _write(payload):
        aws_dir = home_dir / ".aws"
        aws_dir.mkdir(exist_ok=True)
        path = aws_dir / "cognito_pool.json"
        if isinstance(payload, bytes):
            path.write_bytes(payload)
        else:
            text = payload if isinstance(payload, str) else json.dumps(payload)
            path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def cognito_client():
    client = boto3.client(
        "cognito-idp",
        region_name="us-east-1",
        aws_access_key_id="testing",
        aws_secret_access_key="testing",
    )
    with Stubber(client) as stubber:
        yield client, stubber
