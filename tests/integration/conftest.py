from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from repostwatch.api.app import create_app
from repostwatch.config.settings import Settings
from repostwatch.history.registry import ItemRegistry
from repostwatch.processor.processor import Processor, build_processor


@pytest.fixture
def example_settings() -> Settings:
    return Settings(
        _env_file=None,  # type: ignore[call-arg]
        search_provider="example",
        judgment_provider="example",
        max_upload_bytes=1024 * 1024,
    )


@pytest.fixture
def example_processor(example_settings: Settings) -> Processor:
    return build_processor(example_settings)


@pytest.fixture
def registry() -> ItemRegistry:
    return ItemRegistry()


@pytest.fixture
def client(
    example_settings: Settings,
    example_processor: Processor,
    registry: ItemRegistry,
) -> Generator[TestClient, None, None]:
    app = create_app(example_settings, processor=example_processor, registry=registry)
    with TestClient(app) as test_client:
        yield test_client
