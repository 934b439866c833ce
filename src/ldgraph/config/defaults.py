"""Default configuration values for ldgraph."""

from __future__ import annotations

from typing import Any

CONFIG_FILENAME = ".ldgraph.toml"

ENV_PREFIX = "LDGRAPH_"

DEFAULT_CONFIG: dict[str, Any] = {
    "node": {
        # "reverse" or "forward"; see ldgraph.graph.ReverseTarget
        "reverse_target": "reverse",
    },
    "logging": {
        "level": "WARNING",
    },
}
