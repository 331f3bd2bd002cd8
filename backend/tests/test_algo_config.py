"""Tests for algo_config.py, config.py and app wiring."""

import logging
import textwrap
from unittest.mock import AsyncMock

import pytest

from app.algo_config import AlgoConfig, AlgoEntry, load_algo_config
from app.config import Settings
from app.main import build_host, configure_logging
from core.host import EVENT_SUBMIT_ALL
from core.models import Candle, EventMeta


_YAML = textwrap.dedent(
    """
    algos:
      - algo_id: ma_crossover
        gid: btc-cross
        args:
          symbol: tBTCUSD
          amount: 0.5
          long: {type: MA, period: 3, candle_time_frame: 1m}
          short: {type: MA, period: 2, candle_time_frame: 1m}
      - algo_id: ma_crossover
        gid: eth-cross
        enabled: false
        args:
          symbol: tETHUSD
          amount: -2
          order_type: LIMIT
          order_price: 3000
          long: {type: EMA, period: 50, candle_time_frame: 1h}
          short: {type: EMA, period: 10, candle_time_frame: 15m}
    """
)


# ── AlgoConfig model tests ────────────────────────────────────────────────


class TestAlgoConfig:
    def test_empty_by_default(self):
        assert AlgoConfig().algos == []

    def test_entry_defaults(self):
        entry = AlgoEntry()
        assert entry.algo_id == "ma_crossover"
        assert entry.gid is None
        assert entry.enabled is True

    def test_get_enabled(self):
        config = AlgoConfig(algos=[AlgoEntry(gid="a"), AlgoEntry(gid="b", enabled=False)])
        assert [e.gid for e in config.get_enabled()] == ["a"]


# ── YAML loading ──────────────────────────────────────────────────────────


class TestLoadAlgoConfig:
    def test_missing_file_returns_empty(self, tmp_path):
        config = load_algo_config(tmp_path / "missing.yaml")
        assert config.algos == []

    def test_empty_file(self, tmp_path):
        path = tmp_path / "algos.yaml"
        path.write_text("")
        assert load_algo_config(path).algos == []

    def test_loads_entries(self, tmp_path):
        path = tmp_path / "algos.yaml"
        path.write_text(_YAML)

        config = load_algo_config(path)

        assert [e.gid for e in config.algos] == ["btc-cross", "eth-cross"]
        assert config.algos[0].args["symbol"] == "tBTCUSD"
        assert config.algos[1].enabled is False
        assert len(config.get_enabled()) == 1


# ── Settings ──────────────────────────────────────────────────────────────


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        settings = Settings(_env_file=None)

        assert settings.log_level == "INFO"
        assert settings.default_submit_delay == 0
        assert settings.algo_config_path == ""

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("DEFAULT_SUBMIT_DELAY", "500")
        settings = Settings(_env_file=None)

        assert settings.log_level == "DEBUG"
        assert settings.default_submit_delay == 500

    def test_configure_logging_quiets_asyncio(self):
        configure_logging(Settings(_env_file=None, log_level="DEBUG"))
        assert logging.getLogger("asyncio").level == logging.WARNING


# ── Host wiring ───────────────────────────────────────────────────────────


class TestBuildHost:
    @pytest.mark.asyncio
    async def test_starts_enabled_instances(self, tmp_path):
        path = tmp_path / "algos.yaml"
        path.write_text(_YAML)

        host = await build_host(load_algo_config(path), Settings(_env_file=None))

        assert list(host.instances) == ["btc-cross"]
        await host.close()

    @pytest.mark.asyncio
    async def test_default_submit_delay_applied(self, tmp_path):
        path = tmp_path / "algos.yaml"
        path.write_text(_YAML)
        submit = AsyncMock()

        host = await build_host(
            load_algo_config(path),
            Settings(_env_file=None, default_submit_delay=750),
            submit_orders=submit,
        )
        instance = host.get_instance("btc-cross")
        assert instance.state.args.submit_delay == 750

        meta = EventMeta.for_key("trade:1m:tBTCUSD")
        seed = [Candle(mts=m, open=c, close=c, high=c, low=c) for m, c in
                [(4, 9.5), (3, 11.0), (2, 10.0), (1, 9.0)]]
        cross = [Candle(mts=m, open=c, close=c, high=c, low=c) for m, c in [(5, 8.0), (4, 9.5)]]
        await host.on_candles(seed, meta)
        await host.on_candles(cross, meta)

        submit.assert_awaited_once()
        assert submit.await_args.args[0] == "btc-cross"
        assert submit.await_args.args[2] == 750

        await host.close()

    @pytest.mark.asyncio
    async def test_default_listener_logs_orders(self, tmp_path, caplog):
        path = tmp_path / "algos.yaml"
        path.write_text(_YAML)
        host = await build_host(load_algo_config(path), Settings(_env_file=None))
        assert host._listeners[EVENT_SUBMIT_ALL]

        meta = EventMeta.for_key("trade:1m:tBTCUSD")
        seed = [Candle(mts=m, open=c, close=c, high=c, low=c) for m, c in
                [(4, 9.5), (3, 11.0), (2, 10.0), (1, 9.0)]]
        cross = [Candle(mts=m, open=c, close=c, high=c, low=c) for m, c in [(5, 8.0), (4, 9.5)]]

        with caplog.at_level(logging.INFO, logger="app.main"):
            await host.on_candles(seed, meta)
            await host.on_candles(cross, meta)

        assert "order ready (no exchange attached)" in caplog.text
        await host.close()
