# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .logger import (
    ContextualLogger,
    clear_correlation_id,
    default_log_file,
    get_correlation_id,
    logger,
    redact,
    set_correlation_id,
    setup_logging,
)

__all__ = [
    "ContextualLogger",
    "clear_correlation_id",
    "default_log_file",
    "get_correlation_id",
    "logger",
    "redact",
    "set_correlation_id",
    "setup_logging",
]
