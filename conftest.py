"""
Root conftest.py for pytest configuration

Registers the project's markers and applies them automatically based on
where a test lives (tests/unit/..., tests/integration/...).
"""
import pytest

PRIMARY_MARKERS = {
    "unit": "Fast, isolated tests",
    "integration": "Tests exercising the HTTP app end to end",
}

DOMAIN_MARKERS = {
    "core": "Configuration, logging, errors and CLI tests",
    "report_engine": "Report generation domain tests",
}


def apply_auto_markers(item: pytest.Item) -> None:
    """Apply primary and domain markers from the test's location"""
    test_path = str(item.path).replace("\\", "/")
    existing_markers = {mark.name for mark in item.iter_markers()}

    if not existing_markers & set(PRIMARY_MARKERS):
        if "/unit/" in test_path:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in test_path:
            item.add_marker(pytest.mark.integration)

    for domain in DOMAIN_MARKERS:
        if f"/{domain}/" in test_path and domain not in existing_markers:
            item.add_marker(getattr(pytest.mark, domain))


def pytest_collection_modifyitems(config, items):
    for item in items:
        apply_auto_markers(item)


def pytest_configure(config):
    """Register primary and domain markers"""
    for marker_name, description in {**PRIMARY_MARKERS, **DOMAIN_MARKERS}.items():
        config.addinivalue_line("markers", f"{marker_name}: {description}")
