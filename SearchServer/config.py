"""
Configuration for the search server.

Settings live in config.json next to this module. Every key has a default,
so a missing file or a missing key falls back to DEFAULT_CONFIG.
"""

import copy
import json
import logging
import os
from typing import Any, Dict

from .document import DocumentStatus
from .tfidf_search.tfidf_search import MAX_RESULT_DOCUMENT_COUNT, RELEVANCE_EPSILON, SearchServer

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), "config.json")

DEFAULT_CONFIG = {
    "stop_words": [],
    "ranking": {
        "max_result_document_count": MAX_RESULT_DOCUMENT_COUNT,
        "relevance_epsilon": RELEVANCE_EPSILON
    },
    "search": {
        "default_status": DocumentStatus.ACTUAL.name
    }
}


def merge_config(defaults: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Merge overrides over defaults, section by section."""
    merged = copy.deepcopy(defaults)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_config(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(config_path: str = None) -> Dict[str, Any]:
    """
    Load configuration from a JSON file.

    Args:
        config_path: Path to the configuration file (defaults to the bundled config.json)

    Returns:
        Configuration dictionary with defaults filled in
    """
    config_path = config_path or DEFAULT_CONFIG_PATH

    if not os.path.exists(config_path):
        logger.info("No config file at %s, using default settings", config_path)
        return copy.deepcopy(DEFAULT_CONFIG)

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            loaded = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.warning("Could not load config file %s: %s. Using default settings.", config_path, e)
        return copy.deepcopy(DEFAULT_CONFIG)

    if not isinstance(loaded, dict):
        logger.warning("Config file %s does not hold a JSON object. Using default settings.", config_path)
        return copy.deepcopy(DEFAULT_CONFIG)

    logger.debug("Loaded configuration from %s", config_path)
    return merge_config(DEFAULT_CONFIG, loaded)


def get_default_status(config: Dict[str, Any]) -> DocumentStatus:
    name = config.get("search", {}).get("default_status", DocumentStatus.ACTUAL.name)
    try:
        return DocumentStatus[name.upper()]
    except (AttributeError, KeyError):
        logger.warning("Unknown default status %r in config, using ACTUAL", name)
        return DocumentStatus.ACTUAL


def create_search_server(config: Dict[str, Any] = None) -> SearchServer:
    """
    Create a search server from a configuration dictionary.

    Args:
        config: Configuration dictionary (loads config.json if not provided)

    Returns:
        Empty SearchServer with configured stop words and ranking parameters
    """
    if not config:
        config = load_config()

    ranking_config = config.get("ranking", {})
    return SearchServer(
        stop_words=config.get("stop_words", []),
        max_result_document_count=ranking_config.get("max_result_document_count", MAX_RESULT_DOCUMENT_COUNT),
        relevance_epsilon=ranking_config.get("relevance_epsilon", RELEVANCE_EPSILON)
    )
