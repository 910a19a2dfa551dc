from __future__ import annotations

import asyncio
import logging
import sys

import nimbus

logger: logging.Logger = logging.getLogger(__name__)

# Use jsonplaceholder for real HTTP testing
JSONPLACEHOLDER_URL = "https://jsonplaceholder.typicode.com"


def check_get() -> None:
    logger.info("Checking get...")
    client = nimbus.AsyncNimbusClient(JSONPLACEHOLDER_URL)
    response = asyncio.run(client.get("/todos/1"))
    assert response.status == 200


def check_post() -> None:
    logger.info("Checking post...")
    client = nimbus.create(nimbus.ClientConfig(base_url=JSONPLACEHOLDER_URL))
    response = asyncio.run(client.post("/posts", {"title": "Sample Todo"}))
    assert response.status == 201


def check_not_found() -> None:
    logger.info("Checking not found...")
    client = nimbus.get_client()
    try:
        asyncio.run(client.get(f"{JSONPLACEHOLDER_URL}/todosajaja/1"))
    except nimbus.ClientStatusError as error:
        assert error.status == 404
    else:
        msg = "expected a ClientStatusError"
        raise AssertionError(msg)


def main() -> None:
    r"""Run all package checks to validate installation and
    functionality."""
    try:
        check_get()
        check_post()
        check_not_found()

        logger.info("✅ All package checks passed successfully!")
    except Exception:
        logger.exception("❌ Package check failed")
        sys.exit(1)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    main()
