import json
import logging

import pytest


@pytest.fixture
def sample_records():
    return [
        {"id": 1, "amount": 3000, "date": "2024-01-01", "category": "salary", "type": "income"},
        {"id": 2, "amount": 45.5, "date": "2024-01-03", "category": "food", "type": "expense"},
        {"id": 3, "amount": 1200, "date": "2024-01-05", "category": "rent", "type": "expense"},
        {"id": 4, "amount": 200, "date": "2024-01-10", "category": "freelance", "type": "income"},
        {"id": 5, "amount": 14.5, "date": "2024-01-12", "category": "food", "type": "expense"},
    ]


@pytest.fixture
def data_file(tmp_path, sample_records):
    path = tmp_path / "transactions.json"
    path.write_text(json.dumps(sample_records), encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def reset_package_logger():
    yield
    logger = logging.getLogger("txn_summary")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
