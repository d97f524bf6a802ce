# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_authz

from typing import Any, Generator

import pytest
from loguru import logger


@pytest.fixture
def log_messages() -> Generator[list[dict], None, None]:
    """
    Captures every loguru record emitted during the test, from DEBUG up.

    Yields a list of records; each has "level" (name) and "message" keys.
    """
    records: list[dict] = []

    def sink(message: Any) -> None:
        records.append({"level": message.record["level"].name, "message": message.record["message"]})

    handler_id = logger.add(sink, level="DEBUG")
    yield records
    logger.remove(handler_id)
