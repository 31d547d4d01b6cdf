import pytest
from unittest.mock import patch

import main
from state import PluginBehavior

def test_parse_args_defaults():
    args = main.parse_args([])
    assert args.behavior == "mixed"
    assert args.iface is None
    assert args.config == str(main.CONF_PATH)

def test_parse_args_behavior_choices():
    assert PluginBehavior(main.parse_args(["--behavior", "ap"]).behavior) is PluginBehavior.AP
    with pytest.raises(SystemExit):
        main.parse_args(["--behavior", "bridge"])

def test_default_config_requires_root():
    with patch("main.os.geteuid", return_value=1000):
        with pytest.raises(SystemExit) as e:
            main.main([])
    assert e.value.code == 1

def test_custom_config_runs_app(tmp_path):
    with patch("main.os.geteuid", return_value=1000), \
         patch("app.WifiSetupApp.run") as run:
        with pytest.raises(SystemExit) as e:
            main.main(["--config", str(tmp_path / "wifi.yaml"), "--iface", "wlan3"])
    assert e.value.code == 0
    run.assert_called_once()
