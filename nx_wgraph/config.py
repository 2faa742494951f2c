"""
Backend settings

Resolved from, later sources winning:
- DEFAULT_CONFIG (also published to NetworkX through get_info)
- nx.config.backends.wgraph
- NX_WGRAPH_<KEY> environment variables, e.g. NX_WGRAPH_FALLBACK_TO_NETWORKX=0
"""

import os

import networkx as nx

BACKEND_NAME = "wgraph"

DEFAULT_CONFIG = {
    # rerun the call with pure NetworkX when the backend path raises
    "fallback_to_networkx": True,
}

_FALSE_VALUES = ("0", "false", "no", "off")


def _from_networkx():
    backends = getattr(nx.config, "backends", None)
    backend_config = getattr(backends, BACKEND_NAME, None) if backends is not None else None
    if backend_config is None:
        return {}
    return {
        key: getattr(backend_config, key)
        for key in DEFAULT_CONFIG
        if hasattr(backend_config, key)
    }


def _from_environment():
    overrides = {}
    for key, default in DEFAULT_CONFIG.items():
        raw = os.environ.get(f"NX_WGRAPH_{key.upper()}")
        if raw is None:
            continue
        if isinstance(default, bool):
            overrides[key] = raw.strip().lower() not in _FALSE_VALUES
        else:
            overrides[key] = type(default)(raw)
    return overrides


def get_config() -> dict:
    config = dict(DEFAULT_CONFIG)
    config.update(_from_networkx())
    config.update(_from_environment())
    return config
