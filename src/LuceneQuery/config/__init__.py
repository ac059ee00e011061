"""Public configuration API for LuceneQuery."""

from __future__ import annotations

from LuceneQuery.config.app import (
    AppConfig,
    load_config,
    merge_config_dicts,
    parse_config_dict,
    parse_yaml,
)
from LuceneQuery.config.queries import QueriesConfig, parse_query_node, parse_query_template
from LuceneQuery.config.runtime import RuntimeConfig

__all__ = [
    "RuntimeConfig",
    "QueriesConfig",
    "AppConfig",
    "load_config",
    "parse_config_dict",
    "parse_yaml",
    "merge_config_dicts",
    "parse_query_node",
    "parse_query_template",
]
