import os
import sys
from pathlib import Path
from typing import Callable, Iterator, Optional

import boto3
import pytest


# Ensure project root and the common layer are importable at collection time
_repo_root = Path(__file__).resolve().parents[1]
_repo_root_str = str(_repo_root)
if _repo_root_str not in sys.path:
    sys.path.insert(0, _repo_root_str)
_layer_path = _repo_root / "src" / "lambda" / "layers" / "common" / "python"
_layer_str = str(_layer_path)
if _layer_str not in sys.path:
    sys.path.insert(0, _layer_str)

REPO_ROOT = _repo_root
HANDLER_PATH = str(_repo_root / "src" / "lambda" / "functions" / "offer_notifier" / "handler.py")


@pytest.fixture(autouse=True)
def aws_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Ensure default AWS region is set for moto/boto3 clients and clear cross-test env leaks."""
    monkeypatch.setenv("AWS_REGION", os.environ.get("AWS_REGION", "us-east-1"))
    monkeypatch.setenv("AWS_DEFAULT_REGION", os.environ.get("AWS_DEFAULT_REGION", "us-east-1"))
    # Provide dummy credentials so botocore signing doesn't fail under moto
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")

    # Relay settings must come from each test explicitly
    monkeypatch.delenv("SENDGRID_API_KEY", raising=False)
    monkeypatch.delenv("COMPOSITION_MODE", raising=False)
    monkeypatch.delenv("ENVIRONMENT", raising=False)
    yield


@pytest.fixture
def relay_env(monkeypatch: pytest.MonkeyPatch) -> Callable[..., None]:
    """Set relay environment variables.

    Usage: relay_env() for defaults or relay_env(composition_mode="seller").
    """

    def _apply(
        *,
        api_key: Optional[str] = "SG.test-key",
        composition_mode: Optional[str] = None,
        environment: str = "test",
    ) -> None:
        monkeypatch.setenv("ENVIRONMENT", environment)
        if api_key is not None:
            monkeypatch.setenv("SENDGRID_API_KEY", api_key)
        if composition_mode is not None:
            monkeypatch.setenv("COMPOSITION_MODE", composition_mode)

    return _apply


@pytest.fixture
def load_handler() -> Callable[[], dict]:
    import runpy

    def _apply() -> dict:
        return runpy.run_path(HANDLER_PATH)

    return _apply


@pytest.fixture
def make_bucket() -> Callable[[str], str]:
    def _create(name: str) -> str:
        client = boto3.client("s3", region_name=os.environ.get("AWS_REGION", "us-east-1"))
        client.create_bucket(Bucket=name)
        return name

    return _create


def pytest_collection_modifyitems(config, items):
    """Add markers based on test file location."""
    rootdir = Path(config.rootdir)

    for item in items:
        try:
            rel_path = Path(item.fspath).relative_to(rootdir)
        except ValueError:
            continue

        if "unit" in rel_path.parts:
            item.add_marker(pytest.mark.unit)
        if "integration" in rel_path.parts:
            item.add_marker(pytest.mark.integration)
        if "lambda" in rel_path.parts:
            item.add_marker(pytest.mark.lambda_test)
        if "infrastructure" in rel_path.parts:
            item.add_marker(pytest.mark.infrastructure)
