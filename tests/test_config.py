"""Unit tests for edbootstrap.config."""

import logging
import os
from pathlib import Path
from unittest.mock import patch

import pytest

from edbootstrap.config import (
    EDLAUNCHER,
    MIN_EDLAUNCHER,
    error_log_path,
    get_log_level,
    local_data_dir,
)
from edbootstrap.models import LaunchStrategy


class TestVariants:
    def test_edlauncher_launches_directly_and_waits(self):
        assert EDLAUNCHER.target == "EdLauncher.exe"
        assert EDLAUNCHER.strategy is LaunchStrategy.DIRECT
        assert EDLAUNCHER.wait is True
        assert EDLAUNCHER.new_console is True

    def test_min_edlauncher_uses_shell_and_does_not_wait(self):
        assert MIN_EDLAUNCHER.target == "MinEdLauncher.exe"
        assert MIN_EDLAUNCHER.strategy is LaunchStrategy.SHELL
        assert MIN_EDLAUNCHER.wait is False
        assert MIN_EDLAUNCHER.new_console is False

    def test_targets_are_bare_names(self):
        for variant in (EDLAUNCHER, MIN_EDLAUNCHER):
            assert os.path.basename(variant.target) == variant.target


@pytest.mark.skipif(os.name == "nt", reason="POSIX data directory layout")
class TestDataDir:
    @patch.dict("os.environ", {"XDG_DATA_HOME": "/tmp/xdg-data"}, clear=False)
    def test_prefers_xdg_data_home(self):
        assert local_data_dir() == Path("/tmp/xdg-data")

    @patch.dict("os.environ", {"XDG_DATA_HOME": ""}, clear=False)
    def test_falls_back_to_local_share(self):
        assert local_data_dir() == Path.home() / ".local" / "share"

    @patch.dict("os.environ", {"XDG_DATA_HOME": "/tmp/xdg-data"}, clear=False)
    def test_min_edlauncher_error_log_path(self):
        assert error_log_path(MIN_EDLAUNCHER) == Path(
            "/tmp/xdg-data/min-ed-launcher/min-ed-launcher.log"
        )

    def test_edlauncher_has_no_error_log(self):
        assert error_log_path(EDLAUNCHER) is None


class TestLogLevel:
    @patch.dict("os.environ", {"EDBOOTSTRAP_DEBUG": "1"}, clear=False)
    def test_debug_env_enables_debug(self):
        assert get_log_level() == logging.DEBUG

    @patch.dict("os.environ", {"EDBOOTSTRAP_DEBUG": "no"}, clear=False)
    def test_other_values_stay_quiet(self):
        assert get_log_level() == logging.WARNING

    def test_unset_is_warning(self):
        with patch.dict("os.environ", {}, clear=True):
            assert get_log_level() == logging.WARNING
