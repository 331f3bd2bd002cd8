"""Algo instance configuration loaded from algos.yaml.

Example:

    algos:
      - algo_id: ma_crossover
        gid: btc-cross
        args:
          symbol: tBTCUSD
          amount: 0.5
          order_type: MARKET
          long: {type: EMA, period: 100, candle_time_frame: 1h}
          short: {type: EMA, period: 20, candle_time_frame: 15m}

No YAML file = no algo instances.
"""

import logging
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel

logger = logging.getLogger(__name__)


class AlgoEntry(BaseModel):
    """A single algo instance in the YAML config."""

    algo_id: str = "ma_crossover"
    gid: str | None = None
    enabled: bool = True
    args: dict[str, Any] = {}


class AlgoConfig(BaseModel):
    """Top-level algos.yaml configuration."""

    algos: list[AlgoEntry] = []

    def get_enabled(self) -> list[AlgoEntry]:
        """Return entries with enabled=True."""
        return [a for a in self.algos if a.enabled]


_DEFAULT_PATH = Path(__file__).parent.parent / "algos.yaml"


def load_algo_config(path: Path | None = None) -> AlgoConfig:
    """Load algo config from YAML file.

    Falls back to an empty config if the file doesn't exist.
    """
    config_path = Path(path) if path else _DEFAULT_PATH

    # Load .env next to the config so settings pick it up too
    env_path = config_path.parent / ".env"
    load_dotenv(env_path, override=False)

    if not config_path.exists():
        logger.info("No algos.yaml found at %s, no algo instances configured", config_path)
        return AlgoConfig()

    with open(config_path) as f:
        raw = yaml.safe_load(f) or {}

    config = AlgoConfig(**raw)
    logger.info(
        "Loaded algo config: %d algos (%d enabled)",
        len(config.algos),
        len(config.get_enabled()),
    )
    return config
