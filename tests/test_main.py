"""Tests for the command line entry point."""

import pytest

from slayer_duel.config import ASSET_DIR
from slayer_duel.main import build_parser, main


class TestCommandLine:
    """Argument parsing, no window is opened."""

    def test_defaults(self):
        args = build_parser().parse_args([])
        assert args.assets == ASSET_DIR
        assert args.seed is None
        assert not args.mute

    def test_options(self):
        args = build_parser().parse_args(["--assets", "/tmp/art", "--seed", "7", "--mute"])
        assert (args.assets, args.seed, args.mute) == ("/tmp/art", 7, True)

    def test_help_lists_controls(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["--help"])
        assert exc.value.code == 0
        assert "Space        - Attack" in capsys.readouterr().out
