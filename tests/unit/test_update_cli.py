"""Tests for the ipmeta-update command line."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any
from unittest.mock import patch

import pytest

from ipmetaindex.cli.update import main
from ipmetaindex.models import GeoMetadata, NetworkPrefix
from ipmetaindex.tasks import TaskResult

OK_GEO = TaskResult("geoip", True, "Correctly updated GeoIpDatabase")
OK_PROVIDERS = TaskResult("cloud-providers", True, "Correctly updated IpCloudService and IpCloudProvider")
OK_SERVICES = TaskResult("cloud-services", True, "Correctly updated CloudService")


class TestUpdateCli:
    """Argument handling and exit status."""

    def test_geoip_settings_from_flags(self, tmp_path: Path) -> None:
        with patch("ipmetaindex.cli.update.update_geoip", return_value=OK_GEO) as update_geoip:
            status = main(
                [
                    "geoip",
                    "--config",
                    str(tmp_path / "absent.toml"),
                    "--license-key",
                    "cli-key",
                    "--language",
                    "DE",
                    "--no-city",
                    "--scratch-dir",
                    str(tmp_path),
                    "--timeout",
                    "60",
                ]
            )

        assert status == 0
        settings = update_geoip.call_args.args[1]
        assert settings.maxmind_license_key == "cli-key"
        assert settings.maxmind_language == "de"
        assert settings.enable_city is False
        assert settings.scratch_dir == tmp_path
        assert settings.task_timeout == 60

    def test_config_file_is_used(self, tmp_path: Path) -> None:
        config = tmp_path / "ipmetaindex.toml"
        config.write_text('[maxmind]\nlicense_key = "file-key"\n', encoding="utf-8")

        with patch("ipmetaindex.cli.update.update_geoip", return_value=OK_GEO) as update_geoip:
            main(["geoip", "--config", str(config)])

        assert update_geoip.call_args.args[1].maxmind_license_key == "file-key"

    def test_all_runs_every_task(self) -> None:
        with (
            patch("ipmetaindex.cli.update.update_geoip", return_value=OK_GEO) as update_geoip,
            patch("ipmetaindex.cli.update.update_cloud_providers", return_value=OK_PROVIDERS) as providers,
            patch("ipmetaindex.cli.update.update_cloud_services", return_value=OK_SERVICES) as services,
        ):
            assert main(["all"]) == 0

        update_geoip.assert_called_once()
        providers.assert_called_once()
        services.assert_called_once()

    def test_failed_task_gives_exit_status_one(self, caplog: pytest.LogCaptureFixture) -> None:
        failure = TaskResult("cloud-services", False, "Cannot download O365 endpoints")

        with patch("ipmetaindex.cli.update.update_cloud_services", return_value=failure):
            assert main(["cloud-services"]) == 1

        assert "Cannot download O365 endpoints" in caplog.text

    def test_lookup_prints_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        def fake_geoip(store: Any, settings: Any, **_: Any) -> TaskResult:
            store.full_replace([(NetworkPrefix.parse("1.0.0.0/24"), GeoMetadata(country="Australia", asn=13335))])
            return OK_GEO

        with patch("ipmetaindex.cli.update.update_geoip", side_effect=fake_geoip):
            status = main(["geoip", "--license-key", "k", "--lookup", "1.0.0.1", "--lookup", "8.8.8.8"])

        assert status == 0
        report = json.loads(capsys.readouterr().out)
        assert report[0]["ip"] == "1.0.0.1"
        assert report[0]["geo"]["country"] == "Australia"
        assert report[0]["geo"]["asn"] == 13335
        assert report[0]["cloud_provider"] is None
        assert report[1] == {"ip": "8.8.8.8", "geo": None, "cloud_provider": None, "cloud_service": None}

    def test_no_city_help_only_mentions_city_names(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit):
            main(["--help"])

        help_text = " ".join(capsys.readouterr().out.split())
        assert "--no-city Skip city names" in help_text
        assert "coordinates" not in help_text

    def test_unknown_target_is_rejected(self) -> None:
        with pytest.raises(SystemExit):
            main(["everything"])
