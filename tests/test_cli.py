from __future__ import annotations

import json
from pathlib import Path

from soulcheck.app import cli


def test_cli_prints_report(monkeypatch, capsys) -> None:
    seen = {}

    async def fake_run(sites, webhook_urls):
        seen.update(sites=sites, webhook_urls=webhook_urls)
        return {"timestamp": "t", "internos": {}, "empresa": {}, "externos": {}, "execution_time_seconds": 0.0}

    monkeypatch.setattr(cli, "run_health_checker", fake_run)
    assert cli.main(["--sites", "sites.yaml", "--no-webhooks"]) == 0
    out = capsys.readouterr().out
    assert json.loads(out)["timestamp"] == "t"
    assert seen == {"sites": "sites.yaml", "webhook_urls": []}


def test_cli_config_failure_exits_1(capsys, tmp_path: Path) -> None:
    assert cli.main(["--sites", str(tmp_path / "missing.json")]) == 1
    err = capsys.readouterr().err
    assert '"error": "Health checker failed"' in err
    assert "missing.json" in err
