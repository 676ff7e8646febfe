"""Logging setup + per-operation log lines.

Invariants:
    - Access lines go to their own handler and are not repeated by the root handler
    - Access level follows the response status (2xx INFO, 4xx WARNING, 5xx ERROR)
    - Product lookups and review operations each log one INFO line
"""

import logging

from catalog.core.logging import ACCESS_LOGGER, access_level, configure_logging


def test_access_level_follows_status():
    assert access_level(200) == logging.INFO
    assert access_level(201) == logging.INFO
    assert access_level(304) == logging.INFO
    assert access_level(400) == logging.WARNING
    assert access_level(404) == logging.WARNING
    assert access_level(500) == logging.ERROR


def test_configure_logging_gives_access_logger_its_own_handler():
    configure_logging(level=logging.DEBUG)
    try:
        access = logging.getLogger(ACCESS_LOGGER)
        assert access.propagate is False
        assert len(access.handlers) == 1
        assert logging.getLogger().level == logging.DEBUG
        assert logging.getLogger("pymongo").level == logging.WARNING
    finally:
        configure_logging(level=logging.INFO)


async def test_get_product_logs_lookup(client, sample_product, caplog):
    await client.post("/products", json=sample_product)

    with caplog.at_level(logging.INFO, logger="catalog"):
        await client.get("/products/SKU-9001")
        await client.get("/products/SKU-404")

    messages = [r.getMessage() for r in caplog.records if r.name.startswith("catalog.domain")]
    assert "product lookup id=SKU-9001 found=True" in messages
    assert "product lookup id=SKU-404 found=False" in messages


async def test_review_repo_logs_each_operation(client, caplog):
    with caplog.at_level(logging.INFO, logger="catalog"):
        await client.post("/products/SKU-1001/reviews", json={"comment": "ok"})
        await client.get("/products/SKU-1001/reviews")

    repo_records = [
        r.getMessage() for r in caplog.records
        if r.name == "catalog.domain.repositories.review_repo"
    ]
    assert len(repo_records) == 2
    assert repo_records[0].startswith("review inserted id=")
    assert repo_records[1] == "recent reviews product_id=SKU-1001 items=1"
