"""
Shared fixtures for the report engine test suite
Forces test settings and isolates artifact directories per test
"""
import os
import sys

# Add project root to Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

# Force test settings before anything imports core.config
os.environ["ENVIRONMENT"] = "test"
os.environ["LOG_FORMAT"] = "text"
os.environ["SIMULATED_GENERATION_MS"] = "0"

import pytest  # noqa: E402

from core.config import get_settings  # noqa: E402


@pytest.fixture(autouse=True)
def artifact_dirs(tmp_path, monkeypatch):
    """Point artifact directories at a per-test temporary directory"""
    template_dir = tmp_path / "reports" / "templates"
    output_dir = tmp_path / "reports" / "output"
    monkeypatch.setenv("TEMPLATE_DIR", str(template_dir))
    monkeypatch.setenv("OUTPUT_DIR", str(output_dir))
    get_settings.cache_clear()

    yield {"template_dir": template_dir, "output_dir": output_dir}

    get_settings.cache_clear()


@pytest.fixture
def client():
    """Test client for the FastAPI app"""
    from fastapi.testclient import TestClient

    from main import app

    return TestClient(app)


@pytest.fixture
def sales_payload():
    """Dynamic request payload for a monthly sales report"""
    return {
        "libraryPath": "reports/library/common.rptlibrary",
        "reportName": "sales",
        "outputFormat": "pdf",
        "datasetNames": ["DS1", "DS2"],
        "components": {
            "title": {"text": "Monthly Sales"},
            "tables": [
                {
                    "datasetName": "DS1",
                    "title": "T1",
                    "columns": [{"name": "x", "label": "X"}],
                }
            ],
        },
    }


@pytest.fixture
def full_payload():
    """Dynamic request payload exercising every component"""
    return {
        "libraryPath": "reports/library/common.rptlibrary",
        "reportName": "quarterly-review",
        "outputFormat": "xlsx",
        "dataSourceName": "SalesDB",
        "datasetNames": ["SalesDataset", "RegionDataset"],
        "parameters": {"year": 2024, "region": "EMEA", "final": True},
        "components": {
            "title": {"text": "Quarterly Review", "fontSize": 24, "alignment": "center", "includeDate": True},
            "tables": [
                {
                    "datasetName": "SalesDataset",
                    "title": "Sales by Region",
                    "columns": [
                        {"name": "region", "label": "Region", "width": 150, "dataType": "string"},
                        {
                            "name": "total",
                            "label": "Total",
                            "dataType": "decimal",
                            "format": "#,##0.00",
                            "alignment": "right",
                        },
                    ],
                    "enableGrouping": True,
                    "groupByColumn": "region",
                    "includeTotals": True,
                }
            ],
            "charts": [
                {
                    "datasetName": "SalesDataset",
                    "title": "Sales Trend",
                    "chartType": "line",
                    "categoryColumn": "month",
                    "valueColumn": "total_sales",
                    "width": 600,
                    "height": 400,
                    "showLegend": False,
                }
            ],
            "footer": "Confidential",
            "pageOrientation": "landscape",
            "pageSize": "A4",
        },
    }
