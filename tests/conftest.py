import pytest
from fastapi.testclient import TestClient

from chartstream.api.app import app
from chartstream.schemas.chart_config import ChartConfig
from chartstream.schemas.metadata import ColumnMetadata


@pytest.fixture(scope="session")
def client() -> TestClient:
    return TestClient(app)


@pytest.fixture
def metadata() -> ColumnMetadata:
    return ColumnMetadata(
        names=["timestamp", "device", "reading", "load"],
        types=["time", "ordinal", "linear", "linear"],
    )


@pytest.fixture
def keyed_config() -> ChartConfig:
    return ChartConfig.model_validate(
        {
            "x": "timestamp",
            "charts": [
                {"type": "line", "y": "reading", "color": "device", "colorScale": ["red", "blue", "green"]}
            ],
        }
    )
