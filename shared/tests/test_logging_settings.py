"""Tests for the logging configuration used under test settings."""

from __future__ import annotations

import logging

from django.conf import settings


def test_application_loggers_only_propagate_to_root():
    for name in ("apps", "shared"):
        config = settings.LOGGING["loggers"][name]
        assert config["handlers"] == []
        assert config["propagate"] is True
        assert logging.getLogger(name).handlers == []


def test_application_record_is_emitted_once(caplog):
    with caplog.at_level(logging.INFO, logger="apps.bookings.services"):
        logging.getLogger("apps.bookings.services").info("Booking Zed in a seat...")

    assert [record.getMessage() for record in caplog.records] == ["Booking Zed in a seat..."]
    console_handlers = [
        handler
        for handler in logging.getLogger("apps.bookings.services").handlers
        + logging.getLogger("apps").handlers
        if isinstance(handler, logging.StreamHandler)
    ]
    assert console_handlers == []
